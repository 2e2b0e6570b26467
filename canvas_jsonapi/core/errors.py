"""Resource decode failures and their JSON:API error object rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from canvas_jsonapi.schemas.resource import ResourceIdentifier


class ResourceError(Exception):
    """Base class for failures while decoding a single resource entry."""

    code = "resource_error"
    title = "Resource Error"
    member = "attributes"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(self.detail)

    @property
    def detail(self) -> str:
        """Human-readable description of the failure."""
        return f"Could not decode `{self.key}`."

    @property
    def pointer(self) -> str:
        """JSON pointer of the offending member, relative to the resource object."""
        return f"/{self.member}/{self.key}"

    def to_error_object(self, *, prefix: str = "", meta: dict[str, Any] | None = None) -> dict[str, Any]:
        """Return the failure as a JSON:API error object."""
        return JSONAPIErrorBuilder().error_object(
            status="422",
            code=self.code,
            title=self.title,
            detail=self.detail,
            source={"pointer": f"{prefix}{self.pointer}"},
            meta=meta,
        )


class InvalidAttribute(ResourceError):
    """Attribute is present but not valid for its domain meaning."""

    code = "invalid_attribute"
    title = "Invalid Attribute"

    @property
    def detail(self) -> str:
        return f"Invalid `{self.key}` attribute."


class MissingAttribute(ResourceError):
    """Attribute is absent or has the wrong JSON kind."""

    code = "missing_attribute"
    title = "Missing Attribute"

    @property
    def detail(self) -> str:
        return f"Missing `{self.key}` attribute."


class MissingResourceIdentifier(ResourceError):
    """Required relationship has no identifier in the relationships map."""

    code = "missing_resource_identifier"
    title = "Missing Resource Identifier"
    member = "relationships"

    @property
    def detail(self) -> str:
        return f"Missing resource identifier for relationship `{self.key}`."


class MissingInclude(ResourceError):
    """Relationship identifier has no matching resource among the includes."""

    code = "missing_include"
    title = "Missing Include"
    member = "relationships"

    def __init__(self, key: str, identifier: ResourceIdentifier) -> None:
        self.identifier = identifier
        super().__init__(key)

    @property
    def detail(self) -> str:
        return (
            f"Missing relationship `{self.key}`. "
            f"Expected {self.identifier.type.value}:{self.identifier.id}."
        )


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}
