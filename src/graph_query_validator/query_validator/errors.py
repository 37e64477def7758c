from __future__ import annotations

from typing import Literal, TypeAlias

MismatchReason: TypeAlias = Literal["label_not_found", "type_mismatch"]


class QueryValidationError(ValueError):
    pass


class SchemaMismatchError(QueryValidationError):
    def __init__(self, entity_type: str, label: str, reason: MismatchReason) -> None:
        self.entity_type = entity_type
        self.label = label
        self.reason = reason
        super().__init__(_format_mismatch(entity_type, label))


class MissingRequiredPropError(QueryValidationError):
    def __init__(self, prop_name: str) -> None:
        self.prop_name = prop_name
        super().__init__(
            "All node properties are required in CREATE clauses. "
            "All relationship properties are required in MERGE clauses. "
            f'The "{prop_name}" param is missing from the query.'
        )


class SchemaDefinitionError(ValueError):
    pass


def _format_mismatch(entity_type: str, label: str) -> str:
    # Unknown labels and wrong entity kinds share one message.
    return (
        f'There does not exist a "{entity_type}" in the schema '
        f'with the label "{label}". Check your query.'
    )
