from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable

from pydantic import ValidationError
import yaml

from .config import ValidatorConfig
from .models import EntityType, SchemaDefinition
from .query_validator.errors import SchemaDefinitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SchemaStore(Mapping[str, SchemaDefinition]):
    """Read-only catalog of node and relationship schemas keyed by label."""

    definitions: Mapping[str, SchemaDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "definitions", MappingProxyType(dict(self.definitions))
        )

    def __getitem__(self, label: str) -> SchemaDefinition:
        return self.definitions[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)

    def labels(self, entity_type: EntityType | None = None) -> list[str]:
        return [
            label
            for label, definition in self.definitions.items()
            if entity_type is None or definition.type == entity_type
        ]

    @classmethod
    def from_definitions(cls, definitions: Iterable[SchemaDefinition]) -> "SchemaStore":
        mapping: dict[str, SchemaDefinition] = {}
        for definition in definitions:
            if definition.label in mapping:
                raise SchemaDefinitionError(
                    f'Duplicate schema label "{definition.label}"'
                )
            mapping[definition.label] = definition
        return cls(definitions=mapping)

    @classmethod
    def from_payload(cls, payload: Any) -> "SchemaStore":
        if not isinstance(payload, Mapping):
            raise SchemaDefinitionError("Schema must be a mapping of label to definition")
        definitions: list[SchemaDefinition] = []
        for label, entry in payload.items():
            if not isinstance(entry, Mapping):
                raise SchemaDefinitionError(
                    f'Schema entry "{label}" must be a mapping'
                )
            entry = dict(entry)
            declared = entry.setdefault("label", label)
            if declared != label:
                raise SchemaDefinitionError(
                    f'Schema entry "{label}" declares a different label "{declared}"'
                )
            try:
                definitions.append(SchemaDefinition.model_validate(entry))
            except ValidationError as exc:
                raise SchemaDefinitionError(
                    f'Invalid schema entry "{label}": {exc}'
                ) from exc
        return cls.from_definitions(definitions)

    @classmethod
    def load(cls, path: Path) -> "SchemaStore":
        store = cls.from_payload(_read_payload(path))
        logger.info("loaded %d schema labels from %s", len(store), path)
        return store

    @classmethod
    def load_default(cls, config: ValidatorConfig | None = None) -> "SchemaStore":
        config = config or ValidatorConfig.from_env()
        if config.schema_path is None:
            raise SchemaDefinitionError(
                "No schema path configured; set GRAPH_QUERY_SCHEMA_PATH"
            )
        return cls.load(config.schema_path)


def _read_payload(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise SchemaDefinitionError(f"Unsupported schema format: {suffix}")
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaDefinitionError(f"Cannot read schema file {path}: {exc}") from exc
    try:
        if suffix == ".json":
            return json.loads(content)
        return yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaDefinitionError(f"Cannot parse schema file {path}: {exc}") from exc
