"""Typed resources and the default type registry."""

from canvas_jsonapi.core.types import TypeRegistry

from .base import Resource
from .models import AccessToken, Account, Canvas, Organization

default_registry = TypeRegistry([Organization, Canvas, Account, AccessToken])

__all__ = [
    "AccessToken",
    "Account",
    "Canvas",
    "Organization",
    "Resource",
    "default_registry",
]
