from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Mapping

from ..models import (
    CLAUSE_KINDS,
    ClauseKind,
    QueryObj,
    SchemaDefinition,
    parse_query_obj,
)
from .errors import MissingRequiredPropError, QueryValidationError, SchemaMismatchError
from .locate import find_query_obj_schema
from .schema_rules import (
    check_for_required_prop,
    match_entity_type,
    requires_exhaustive_props,
)

if TYPE_CHECKING:
    from ..config import ValidatorConfig


@dataclass(frozen=True)
class ValidationResult:
    error: QueryValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return str(self.error) if self.error is not None else None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def check_query_obj(
    clause: ClauseKind,
    schema_definition: SchemaDefinition | None,
    query_obj: QueryObj,
) -> ValidationResult:
    if clause not in CLAUSE_KINDS:
        raise ValueError(
            f"Unknown clause {clause!r}; expected one of {', '.join(CLAUSE_KINDS)}"
        )
    if schema_definition is None:
        return ValidationResult(
            SchemaMismatchError(query_obj.type, query_obj.label, "label_not_found")
        )
    reason = match_entity_type(schema_definition, query_obj)
    if reason is not None:
        return ValidationResult(
            SchemaMismatchError(query_obj.type, query_obj.label, reason)
        )
    if not requires_exhaustive_props(clause, query_obj.type):
        return ValidationResult()
    for prop_name in schema_definition.properties:
        try:
            check_for_required_prop(prop_name, query_obj.props)
        except MissingRequiredPropError as exc:
            return ValidationResult(exc)
    return ValidationResult()


def validate_query_obj_against_schema(
    clause: ClauseKind,
    schema_definition: SchemaDefinition | None,
    query_obj: QueryObj,
) -> None:
    check_query_obj(clause, schema_definition, query_obj).raise_for_error()


def query_obj_error(
    clause: ClauseKind,
    schema_definition: SchemaDefinition | None,
    query_obj: QueryObj,
) -> str | None:
    return check_query_obj(clause, schema_definition, query_obj).message


class QueryObjValidator:
    def __init__(self, schema_store: Mapping[str, SchemaDefinition]) -> None:
        self._schema_store = schema_store
        self._logger = logging.getLogger(__name__)

    @classmethod
    def for_default_schema(
        cls, config: ValidatorConfig | None = None
    ) -> "QueryObjValidator":
        from ..graph_schema import SchemaStore

        return cls(SchemaStore.load_default(config))

    def check(
        self, clause: ClauseKind, query_obj: QueryObj | Mapping[str, Any]
    ) -> ValidationResult:
        if not isinstance(query_obj, QueryObj):
            query_obj = parse_query_obj(query_obj)
        self._logger.debug("validating %s %s %r", clause, query_obj.type, query_obj.label)
        schema_definition = find_query_obj_schema(
            self._schema_store, "label", query_obj.label
        )
        result = check_query_obj(clause, schema_definition, query_obj)
        if not result.ok:
            self._logger.debug("%s %r rejected: %s", clause, query_obj.label, result.message)
        return result

    def validate(self, clause: ClauseKind, query_obj: QueryObj | Mapping[str, Any]) -> None:
        self.check(clause, query_obj).raise_for_error()
