"""Pydantic schemas for JSON:API."""

from .resource import (
    JSONAPIResourceLinkage,
    JSONAPIResourceObject,
    ResourceIdentifier,
)

__all__ = [
    "JSONAPIResourceLinkage",
    "JSONAPIResourceObject",
    "ResourceIdentifier",
]
