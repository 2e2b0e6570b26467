"""Core type registry and decode error helpers."""

from .errors import (
    InvalidAttribute,
    JSONAPIErrorBuilder,
    MissingAttribute,
    MissingInclude,
    MissingResourceIdentifier,
    ResourceError,
)
from .types import ResourceType, TypeRegistry

__all__ = [
    "InvalidAttribute",
    "JSONAPIErrorBuilder",
    "MissingAttribute",
    "MissingInclude",
    "MissingResourceIdentifier",
    "ResourceError",
    "ResourceType",
    "TypeRegistry",
]
