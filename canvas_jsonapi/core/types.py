"""Wire-level type tags and the registry binding them to resource classes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable


class ResourceType(str, Enum):
    """Closed set of JSON:API type tags understood by the deserializer."""

    ORGANIZATION = "orgs"
    CANVAS = "canvases"
    ACCOUNT = "account"
    ACCESS_TOKEN = "access-tokens"

    def __str__(self) -> str:
        return self.value


class TypeRegistry:
    """Map resource type tags to the resource classes that decode them."""

    def __init__(self, resource_classes: Iterable[type] | None = None) -> None:
        """Register every class in ``resource_classes`` by its ``resource_type``."""
        self._classes: dict[ResourceType, type] = {}
        for resource_class in resource_classes or ():
            self.register(resource_class)

    def register(self, resource_class: type) -> type:
        """Bind ``resource_class`` to its ``resource_type`` tag; usable as a decorator."""
        resource_type = getattr(resource_class, "resource_type", None)
        if not isinstance(resource_type, ResourceType):
            raise ValueError(
                f"{resource_class.__name__} must declare a ResourceType resource_type."
            )
        existing = self._classes.get(resource_type)
        if existing is not None and existing is not resource_class:
            raise ValueError(
                f"Type {resource_type.value} is already bound to {existing.__name__}."
            )
        self._classes[resource_type] = resource_class
        return resource_class

    def resolve(self, tag: Any) -> ResourceType | None:
        """Return the registered type for a wire tag, or None when unknown."""
        if not isinstance(tag, str):
            return None
        try:
            resource_type = ResourceType(tag)
        except ValueError:
            return None
        if resource_type not in self._classes:
            return None
        return resource_type

    def resource_class(self, resource_type: ResourceType) -> type:
        """Return the class registered for ``resource_type``."""
        return self._classes[resource_type]

    def decoder(self, resource_type: ResourceType) -> Callable[[Any], Any]:
        """Return the decode function for ``resource_type``."""
        return self._classes[resource_type].from_resource_data

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._classes

    def __iter__(self):
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)
