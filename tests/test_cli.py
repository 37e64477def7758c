import contextlib
import io
import os
from pathlib import Path
import sys
import unittest
from unittest import mock

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from graph_query_validator.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


def _run(argv: list[str]) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    with mock.patch.dict(os.environ, {}, clear=True):
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(argv)
    return code, stdout.getvalue(), stderr.getvalue()


class TestCli(unittest.TestCase):
    def test_create_with_all_props(self) -> None:
        code, out, _ = _run(
            [
                "--clause", "CREATE",
                "--schema", str(FIXTURES / "schema.yaml"),
                "--query", str(FIXTURES / "student_create.json"),
            ]
        )
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "OK")

    def test_create_with_missing_prop(self) -> None:
        code, _, err = _run(
            [
                "--clause", "CREATE",
                "--schema", str(FIXTURES / "schema.yaml"),
                "--query", str(FIXTURES / "student_partial.yaml"),
            ]
        )
        self.assertEqual(code, 1)
        self.assertIn('The "age" param is missing from the query.', err)

    def test_match_with_partial_props(self) -> None:
        code, _, _ = _run(
            [
                "--clause", "MATCH",
                "--schema", str(FIXTURES / "schema.yaml"),
                "--query", str(FIXTURES / "student_partial.yaml"),
            ]
        )
        self.assertEqual(code, 0)

    def test_unknown_label_in_schema(self) -> None:
        code, _, err = _run(
            [
                "--clause", "MATCH",
                "--schema", str(FIXTURES / "schema.json"),
                "--query", str(FIXTURES / "student_partial.yaml"),
            ]
        )
        self.assertEqual(code, 1)
        self.assertIn('There does not exist a "node" in the schema with the label "Student".', err)

    def test_broken_schema(self) -> None:
        code, _, err = _run(
            [
                "--clause", "MATCH",
                "--schema", str(FIXTURES / "broken_schema.yaml"),
                "--query", str(FIXTURES / "student_partial.yaml"),
            ]
        )
        self.assertEqual(code, 2)
        self.assertIn("Student", err)

    def test_missing_schema_path(self) -> None:
        code, _, err = _run(
            ["--clause", "MATCH", "--query", str(FIXTURES / "student_partial.yaml")]
        )
        self.assertEqual(code, 2)
        self.assertIn("GRAPH_QUERY_SCHEMA_PATH", err)


if __name__ == "__main__":
    unittest.main()
