from __future__ import annotations

from typing import Mapping

from ..models import SchemaDefinition

_MISSING = object()


def find_query_obj_schema(
    schema_store: Mapping[str, SchemaDefinition],
    lookup_key: str,
    lookup_value: object,
) -> SchemaDefinition | None:
    """Return the first definition whose ``lookup_key`` field equals ``lookup_value``.

    Absence is a normal outcome and yields ``None``; callers that only want to
    know whether a label exists branch on it instead of catching an error.
    """
    for definition in schema_store.values():
        if getattr(definition, lookup_key, _MISSING) == lookup_value:
            return definition
    return None
