"""Untyped view of one JSON:API resource object with typed accessors."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Mapping, TypeVar

from pydantic import TypeAdapter, ValidationError

from canvas_jsonapi.core.errors import (
    MissingAttribute,
    MissingInclude,
    MissingResourceIdentifier,
)
from canvas_jsonapi.core.types import ResourceType
from canvas_jsonapi.schemas.resource import JSONAPIResourceObject, ResourceIdentifier

if TYPE_CHECKING:
    from canvas_jsonapi.core.types import TypeRegistry

T = TypeVar("T")

Includes = Mapping[ResourceType, Mapping[str, Any]]


@lru_cache(maxsize=None)
def _adapter(kind: Any) -> TypeAdapter:
    return TypeAdapter(kind)


def _coerce(value: Any, kind: Any) -> Any:
    """Validate ``value`` against ``kind`` without coercion, or raise ValueError."""
    if value is None:
        raise ValueError("null value")
    try:
        return _adapter(kind).validate_python(value, strict=True)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc


def parse_iso8601(value: Any) -> datetime | None:
    """Parse an ISO-8601 string into an aware datetime; naive values are UTC."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ResourceData:
    """Decoded-but-untyped resource object handed to resource decoders.

    The includes index is borrowed from the document being deserialized and
    is only read. Included entries are built without includes, so their
    relationships can never be resolved.
    """

    def __init__(
        self,
        *,
        type_: ResourceType,
        id_: str,
        attributes: Mapping[str, Any],
        relationships: Mapping[str, ResourceIdentifier] | None = None,
        includes: Includes | None = None,
        meta: Mapping[str, Any] | None = None,
        resource_meta: Mapping[str, Any] | None = None,
    ) -> None:
        self.type = type_
        self.id = id_
        self.attributes = attributes
        self.relationships = relationships
        self.includes = includes
        self.meta = meta
        self.resource_meta = resource_meta

    @classmethod
    def from_dict(
        cls,
        raw: Any,
        *,
        registry: TypeRegistry,
        includes: Includes | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> ResourceData | None:
        """Build resource data from a raw resource object.

        Returns None when ``id``, ``type`` or ``attributes`` is missing or
        malformed, or when the type tag is not registered. Relationships that
        do not parse into an identifier are dropped one by one.
        """
        try:
            resource = JSONAPIResourceObject.model_validate(raw)
        except ValidationError:
            return None
        resource_type = registry.resolve(resource.type)
        if resource_type is None:
            return None

        relationships: dict[str, ResourceIdentifier] | None = None
        if isinstance(resource.relationships, Mapping):
            relationships = {}
            for key, relationship in resource.relationships.items():
                identifier = ResourceIdentifier.parse(relationship, registry)
                if identifier is None:
                    continue
                relationships[key] = identifier

        resource_meta = resource.meta if isinstance(resource.meta, Mapping) else None
        return cls(
            type_=resource_type,
            id_=resource.id,
            attributes=resource.attributes,
            relationships=relationships,
            includes=includes,
            meta=meta,
            resource_meta=resource_meta,
        )

    def decode(self, key: str, kind: type[T]) -> T:
        """Return attribute ``key`` as ``kind`` or raise MissingAttribute."""
        try:
            return _coerce(self.attributes.get(key), kind)
        except ValueError:
            raise MissingAttribute(key) from None

    def decode_optional(self, key: str, kind: type[T]) -> T | None:
        """Return attribute ``key`` as ``kind``, or None on any mismatch."""
        try:
            return _coerce(self.attributes.get(key), kind)
        except ValueError:
            return None

    def decode_date(self, key: str) -> datetime:
        """Return the ISO-8601 attribute ``key`` as a datetime or raise MissingAttribute."""
        value = parse_iso8601(self.attributes.get(key))
        if value is None:
            raise MissingAttribute(key)
        return value

    def decode_optional_date(self, key: str) -> datetime | None:
        """Return the ISO-8601 attribute ``key`` as a datetime, or None."""
        return parse_iso8601(self.attributes.get(key))

    def decode_relationship(self, key: str, kind: type[T]) -> T:
        """Return the included resource behind relationship ``key``.

        Raises MissingResourceIdentifier when the relationship is absent and
        MissingInclude when the related resource was not included or is not
        an instance of ``kind``.
        """
        identifier = (self.relationships or {}).get(key)
        if identifier is None:
            raise MissingResourceIdentifier(key)
        resource = (self.includes or {}).get(identifier.type, {}).get(identifier.id)
        if not isinstance(resource, kind):
            raise MissingInclude(key, identifier)
        return resource

    def decode_optional_relationship(self, key: str, kind: type[T]) -> T | None:
        """Return the included resource behind relationship ``key``, or None."""
        identifier = (self.relationships or {}).get(key)
        if identifier is None:
            return None
        resource = (self.includes or {}).get(identifier.type, {}).get(identifier.id)
        return resource if isinstance(resource, kind) else None

    def __repr__(self) -> str:
        return f"ResourceData(type={self.type.value!r}, id={self.id!r})"
