"""Typed deserialization of JSON:API resource documents."""

from .core.document import (
    DeserializationResult,
    EntryFailure,
    JSONAPIDocumentDeserializer,
    deserialize_many,
    deserialize_one,
)
from .core.errors import (
    InvalidAttribute,
    MissingAttribute,
    MissingInclude,
    MissingResourceIdentifier,
    ResourceError,
)
from .core.types import ResourceType, TypeRegistry
from .deserializers.base import ResourceData
from .resources import (
    AccessToken,
    Account,
    Canvas,
    Organization,
    Resource,
    default_registry,
)

__all__ = [
    "AccessToken",
    "Account",
    "Canvas",
    "DeserializationResult",
    "EntryFailure",
    "InvalidAttribute",
    "JSONAPIDocumentDeserializer",
    "MissingAttribute",
    "MissingInclude",
    "MissingResourceIdentifier",
    "Organization",
    "Resource",
    "ResourceData",
    "ResourceError",
    "ResourceType",
    "TypeRegistry",
    "default_registry",
    "deserialize_many",
    "deserialize_one",
]
