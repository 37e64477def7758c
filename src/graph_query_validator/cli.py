from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

import yaml

from .config import ValidatorConfig
from .graph_schema import SchemaStore
from .models import CLAUSE_KINDS, parse_query_obj
from .query_validator import QueryObjValidator


def main(argv: Sequence[str] | None = None) -> int:
    config = ValidatorConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Validate a graph query object against a schema."
    )
    parser.add_argument(
        "--clause",
        required=True,
        choices=CLAUSE_KINDS,
        help="Clause the query object is used in.",
    )
    parser.add_argument(
        "--query",
        required=True,
        type=Path,
        help="Path to the query object (YAML/JSON).",
    )
    parser.add_argument(
        "--schema",
        type=Path,
        default=config.schema_path,
        help="Path to the schema file (defaults to GRAPH_QUERY_SCHEMA_PATH).",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level for the validator.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    try:
        store = SchemaStore.load_default(
            ValidatorConfig(schema_path=args.schema, log_level=args.log_level)
        )
        query_obj = parse_query_obj(_read_query(args.query))
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    result = QueryObjValidator(store).check(args.clause, query_obj)
    if not result.ok:
        print(result.message, file=sys.stderr)
        return 1
    print("OK")
    return 0


def _read_query(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        content = path.read_text(encoding="utf-8")
        raw = json.loads(content) if suffix == ".json" else yaml.safe_load(content)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"Cannot read query object {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError("Query object must be a mapping")
    return raw


if __name__ == "__main__":
    sys.exit(main())
