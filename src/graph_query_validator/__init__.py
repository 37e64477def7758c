from .config import ValidatorConfig
from .graph_schema import SchemaStore
from .models import (
    PropertyDescriptor,
    QueryObj,
    RelationshipQueryObj,
    SchemaDefinition,
    parse_query_obj,
)
from .query_validator import (
    MissingRequiredPropError,
    QueryObjValidator,
    QueryValidationError,
    SchemaDefinitionError,
    SchemaMismatchError,
    ValidationResult,
    check_for_required_prop,
    find_query_obj_schema,
    query_obj_error,
    validate_query_obj_against_schema,
)

__all__ = [
    "MissingRequiredPropError",
    "PropertyDescriptor",
    "QueryObj",
    "QueryObjValidator",
    "QueryValidationError",
    "RelationshipQueryObj",
    "SchemaDefinition",
    "SchemaDefinitionError",
    "SchemaMismatchError",
    "SchemaStore",
    "ValidationResult",
    "ValidatorConfig",
    "check_for_required_prop",
    "find_query_obj_schema",
    "parse_query_obj",
    "query_obj_error",
    "validate_query_obj_against_schema",
]
