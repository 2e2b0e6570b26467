"""Concrete resources understood by the deserializer."""

from __future__ import annotations

import re
from datetime import datetime

from canvas_jsonapi.core.errors import InvalidAttribute
from canvas_jsonapi.core.types import ResourceType
from canvas_jsonapi.deserializers.base import ResourceData

from .base import Resource

HEX_COLOR = re.compile(r"^#?[0-9a-fA-F]{6}$")


class Organization(Resource):
    """Organization owning canvases."""

    resource_type = ResourceType.ORGANIZATION

    name: str
    slug: str | None = None
    members_count: int | None = None
    color: str | None = None

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> Organization:
        color = data.decode_optional("color", str)
        if color is not None and not HEX_COLOR.match(color):
            raise InvalidAttribute("color")
        return cls(
            id=data.id,
            name=data.decode("name", str),
            slug=data.decode_optional("slug", str),
            members_count=data.decode_optional("members_count", int),
            color=color.lstrip("#").lower() if color else None,
        )


class Account(Resource):
    """Signed-in user account."""

    resource_type = ResourceType.ACCOUNT

    email: str
    username: str | None = None
    verified_at: datetime | None = None

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> Account:
        return cls(
            id=data.id,
            email=data.decode("email", str),
            username=data.decode_optional("username", str),
            verified_at=data.decode_optional_date("verified_at"),
        )


class Canvas(Resource):
    """Document belonging to an organization."""

    resource_type = ResourceType.CANVAS

    organization: Organization
    updated_at: datetime
    title: str = ""
    summary: str = ""
    native_version: str | None = None
    is_writable: bool = False
    is_public_writable: bool = False
    is_empty: bool = False
    archived_at: datetime | None = None

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> Canvas:
        # The org is required: its slug is part of every canvas URL.
        return cls(
            id=data.id,
            organization=data.decode_relationship("org", Organization),
            updated_at=data.decode_date("updated_at"),
            title=data.decode_optional("title", str) or "",
            summary=data.decode_optional("summary", str) or "",
            native_version=data.decode_optional("native_version", str),
            is_writable=bool(data.decode_optional("is_writable", bool)),
            is_public_writable=bool(data.decode_optional("is_public_writable", bool)),
            is_empty=bool(data.decode_optional("is_empty", bool)),
            archived_at=data.decode_optional_date("archived_at"),
        )

    @property
    def is_archived(self) -> bool:
        return self.archived_at is not None


class AccessToken(Resource):
    """OAuth access token, optionally carrying the account it belongs to."""

    resource_type = ResourceType.ACCESS_TOKEN

    access_token: str
    account: Account | None = None

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> AccessToken:
        return cls(
            id=data.id,
            access_token=data.decode("access_token", str),
            account=data.decode_optional_relationship("account", Account),
        )
