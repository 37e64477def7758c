"""Query-object validation against a graph schema.

Validation pipeline:
1) Locate the schema definition by label.
2) Confirm the query object's entity type matches the located definition.
3) For clauses with an exhaustive-property contract (CREATE for nodes, MERGE
   for relationships), require every declared property as a key in ``props``.
4) Report the first violation as a ``QueryValidationError``.
"""

from .errors import (
    MismatchReason,
    MissingRequiredPropError,
    QueryValidationError,
    SchemaDefinitionError,
    SchemaMismatchError,
)
from .locate import find_query_obj_schema
from .schema_rules import (
    check_for_required_prop,
    match_entity_type,
    requires_exhaustive_props,
)
from .validator import (
    QueryObjValidator,
    ValidationResult,
    check_query_obj,
    query_obj_error,
    validate_query_obj_against_schema,
)

__all__ = [
    "MismatchReason",
    "MissingRequiredPropError",
    "QueryObjValidator",
    "QueryValidationError",
    "SchemaDefinitionError",
    "SchemaMismatchError",
    "ValidationResult",
    "check_for_required_prop",
    "check_query_obj",
    "find_query_obj_schema",
    "match_entity_type",
    "query_obj_error",
    "requires_exhaustive_props",
    "validate_query_obj_against_schema",
]
