"""Base class for typed resources decoded from JSON:API documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel, ConfigDict

from canvas_jsonapi.core.types import ResourceType

if TYPE_CHECKING:
    from canvas_jsonapi.deserializers.base import ResourceData


class Resource(BaseModel):
    """Immutable domain object identified by its (type, id) pair.

    Subclasses set ``resource_type`` and implement ``from_resource_data``
    using only the ``ResourceData`` accessors. Decode failures are raised as
    ``ResourceError`` subclasses.
    """

    model_config = ConfigDict(frozen=True)

    resource_type: ClassVar[ResourceType]

    id: str

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> Self:
        """Construct the resource from ``data`` or raise a ResourceError."""
        raise NotImplementedError

    @property
    def identity(self) -> tuple[ResourceType, str]:
        """Return the (type, id) pair identifying this resource."""
        return (self.resource_type, self.id)
