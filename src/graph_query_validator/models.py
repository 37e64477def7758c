from __future__ import annotations

from types import MappingProxyType
from typing import Any, Literal, Mapping, TypeAlias, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

EntityType: TypeAlias = Literal["node", "relationship"]
ClauseKind: TypeAlias = Literal["MATCH", "CREATE", "MERGE"]
Direction: TypeAlias = Literal["left_to_right", "right_to_left", "bidirectional"]

CLAUSE_KINDS: tuple[str, ...] = get_args(ClauseKind)

_RELATIONSHIP_KEYS = ("from", "from_", "to", "direction")


class PropertyDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    description: str | None = None


class SchemaDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: EntityType
    label: str
    properties: Mapping[str, PropertyDescriptor] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("properties", mode="before")
    @classmethod
    def _expand_shorthand(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {
            name: {"type": descriptor} if isinstance(descriptor, str) else descriptor
            for name, descriptor in value.items()
        }

    @field_validator("properties", mode="after")
    @classmethod
    def _freeze_properties(
        cls, value: Mapping[str, PropertyDescriptor]
    ) -> Mapping[str, PropertyDescriptor]:
        return MappingProxyType(dict(value))

    def property_names(self) -> list[str]:
        return list(self.properties)


class QueryObj(BaseModel):
    """One node or relationship a clause will match, create or merge."""

    model_config = ConfigDict(populate_by_name=True)

    type: EntityType
    label: str
    alias: str | None = None
    props: dict[str, Any] | None = None


class RelationshipQueryObj(QueryObj):
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    direction: Direction = "left_to_right"


def parse_query_obj(payload: Mapping[str, Any]) -> QueryObj:
    if any(key in payload for key in _RELATIONSHIP_KEYS):
        return RelationshipQueryObj.model_validate(dict(payload))
    return QueryObj.model_validate(dict(payload))
