"""Pydantic schemas for the JSON:API wire shapes read by the deserializer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from canvas_jsonapi.core.types import ResourceType

if TYPE_CHECKING:
    from canvas_jsonapi.core.types import TypeRegistry


class JSONAPIResourceLinkage(BaseModel):
    """Raw ``{type, id}`` object under a relationship's ``data`` member."""

    model_config = ConfigDict(strict=True)

    type: str
    id: str


class JSONAPIResourceObject(BaseModel):
    """Resource object with the members every entry must carry."""

    model_config = ConfigDict(strict=True)

    id: str
    type: str
    attributes: Dict[str, Any]
    relationships: Optional[Any] = None
    meta: Optional[Any] = None


class ResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    model_config = ConfigDict(frozen=True)

    type: ResourceType
    id: str

    @classmethod
    def parse(
        cls, relationship: Any, registry: TypeRegistry
    ) -> ResourceIdentifier | None:
        """Return the identifier in a relationship object, or None if unusable."""
        if not isinstance(relationship, Mapping):
            return None
        try:
            linkage = JSONAPIResourceLinkage.model_validate(relationship.get("data"))
        except ValidationError:
            return None
        resource_type = registry.resolve(linkage.type)
        if resource_type is None:
            return None
        return cls(type=resource_type, id=linkage.id)

    def __str__(self) -> str:
        return f"{self.type.value}:{self.id}"
