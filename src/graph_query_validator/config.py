from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path


@dataclass(frozen=True)
class ValidatorConfig:
    schema_path: Path | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ValidatorConfig":
        schema_path = os.environ.get("GRAPH_QUERY_SCHEMA_PATH")
        return cls(
            schema_path=Path(schema_path) if schema_path else None,
            log_level=_normalize_level(os.environ.get("GRAPH_QUERY_LOG_LEVEL")),
        )


def _normalize_level(level: str | None) -> str:
    if level is None or not level.strip():
        return "WARNING"
    return level.strip().upper()
