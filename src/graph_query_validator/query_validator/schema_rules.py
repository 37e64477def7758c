from __future__ import annotations

from typing import Any, Mapping

from ..models import QueryObj, SchemaDefinition
from .errors import MismatchReason, MissingRequiredPropError

_EXHAUSTIVE_CLAUSES: dict[str, str] = {
    "node": "CREATE",
    "relationship": "MERGE",
}


def match_entity_type(
    schema_definition: SchemaDefinition | None, query_obj: QueryObj
) -> MismatchReason | None:
    if schema_definition is None or schema_definition.label != query_obj.label:
        return "label_not_found"
    if schema_definition.type != query_obj.type:
        return "type_mismatch"
    return None


def requires_exhaustive_props(clause: str, entity_type: str) -> bool:
    return _EXHAUSTIVE_CLAUSES.get(entity_type) == clause


def check_for_required_prop(
    required_prop_name: str, query_obj_props: Mapping[str, Any] | None = None
) -> None:
    # Presence by key: falsy values still count. Dotted names are flat keys.
    if query_obj_props is None or required_prop_name not in query_obj_props:
        raise MissingRequiredPropError(required_prop_name)
