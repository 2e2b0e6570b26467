"""JSON:API document deserialization into typed resources."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple

from pydantic import ValidationError

from canvas_jsonapi.config import get_settings
from canvas_jsonapi.core.errors import (
    InvalidAttribute,
    MissingInclude,
    ResourceError,
)
from canvas_jsonapi.core.types import ResourceType, TypeRegistry
from canvas_jsonapi.deserializers.base import ResourceData
from canvas_jsonapi.resources import Resource, default_registry

logger = logging.getLogger(__name__)

Includes = dict[ResourceType, dict[str, Resource]]


class UnpackResult(NamedTuple):
    """Outcome of decoding one resource entry: a resource or an error."""

    resource: Resource | None
    error: ResourceError | None = None


@dataclass(frozen=True)
class EntryFailure:
    """A document entry that was dropped during deserialization."""

    pointer: str
    error: ResourceError
    resource_type: ResourceType
    resource_id: str

    def to_error_object(self) -> dict[str, Any]:
        """Return the failure as a JSON:API error object."""
        return self.error.to_error_object(
            prefix=self.pointer,
            meta={"type": self.resource_type.value, "id": self.resource_id},
        )


@dataclass
class DeserializationResult:
    """Resources decoded from a document plus the entries that were dropped."""

    resources: list[Resource] = field(default_factory=list)
    failures: list[EntryFailure] = field(default_factory=list)

    def error_document(self) -> dict[str, Any]:
        """Return the failures as a JSON:API error document."""
        return {"errors": [failure.to_error_object() for failure in self.failures]}


class JSONAPIDocumentDeserializer:
    """Deserialize JSON:API documents into resources from a type registry."""

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        *,
        log_failures: bool | None = None,
    ) -> None:
        """Store the registry; failure logging defaults to the settings."""
        self.registry = registry if registry is not None else default_registry
        if log_failures is None:
            log_failures = get_settings().log_decode_failures
        self.log_failures = log_failures

    def unpack(self, data: ResourceData) -> UnpackResult:
        """Decode ``data`` with its registered resource class."""
        decoder = self.registry.decoder(data.type)
        try:
            return UnpackResult(decoder(data))
        except ResourceError as exc:
            return UnpackResult(None, exc)
        except ValidationError as exc:
            errors = exc.errors()
            location = errors[0]["loc"] if errors else ()
            key = str(location[0]) if location else data.type.value
            return UnpackResult(None, InvalidAttribute(key))

    def build_includes(self, document: Mapping[str, Any]) -> Includes:
        """Return the includes index for ``document``."""
        return self._build_includes(document, [])

    def deserialize_one(
        self, document: Any, resource_class: type[Resource] = Resource
    ) -> Resource | None:
        """Return the single primary resource, or None if it cannot be decoded."""
        result = self._deserialize(document, resource_class, many=False)
        if result is None or not result.resources:
            return None
        return result.resources[0]

    def deserialize_many(
        self, document: Any, resource_class: type[Resource] = Resource
    ) -> list[Resource] | None:
        """Return every decodable primary resource of ``resource_class``.

        Returns None when the document has no ``data`` array.
        """
        result = self._deserialize(document, resource_class, many=True)
        return None if result is None else result.resources

    def deserialize_many_with_errors(
        self, document: Any, resource_class: type[Resource] = Resource
    ) -> DeserializationResult | None:
        """Like ``deserialize_many`` but also report the dropped entries."""
        return self._deserialize(document, resource_class, many=True)

    def _deserialize(
        self, document: Any, resource_class: type[Resource], *, many: bool
    ) -> DeserializationResult | None:
        if not isinstance(document, Mapping):
            return None
        data = document.get("data")
        if many:
            if not isinstance(data, list):
                return None
            entries = [(f"/data/{index}", entry) for index, entry in enumerate(data)]
        else:
            if not isinstance(data, Mapping):
                return None
            entries = [("/data", data)]

        result = DeserializationResult()
        includes = self._build_includes(document, result.failures)
        meta = document.get("meta")
        if not isinstance(meta, Mapping):
            meta = None

        for pointer, entry in entries:
            resource_data = ResourceData.from_dict(
                entry, registry=self.registry, includes=includes, meta=meta
            )
            if resource_data is None:
                logger.debug("Skipping malformed resource object at %s", pointer)
                continue
            unpacked = self.unpack(resource_data)
            if unpacked.error is not None:
                self._report(resource_data, unpacked.error, logging.WARNING)
                result.failures.append(
                    EntryFailure(pointer, unpacked.error, resource_data.type, resource_data.id)
                )
                continue
            if isinstance(unpacked.resource, resource_class):
                result.resources.append(unpacked.resource)
        return result

    def _build_includes(
        self, document: Mapping[str, Any], failures: list[EntryFailure]
    ) -> Includes:
        includes: Includes = {}
        included = document.get("included")
        if not isinstance(included, list):
            return includes

        for index, entry in enumerate(included):
            pointer = f"/included/{index}"
            resource_type = self.registry.resolve(
                entry.get("type") if isinstance(entry, Mapping) else None
            )
            if resource_type is None:
                logger.debug("Skipping included entry with unknown type at %s", pointer)
                continue
            # Included entries never see other includes, so nesting stops here.
            resource_data = ResourceData.from_dict(entry, registry=self.registry)
            if resource_data is None:
                logger.debug("Skipping malformed included entry at %s", pointer)
                continue
            unpacked = self.unpack(resource_data)
            if unpacked.error is not None:
                self._report(resource_data, unpacked.error, logging.DEBUG)
                failures.append(
                    EntryFailure(pointer, unpacked.error, resource_data.type, resource_data.id)
                )
                continue
            includes.setdefault(resource_type, {})[unpacked.resource.id] = unpacked.resource
        return includes

    def _report(self, data: ResourceData, error: ResourceError, level: int) -> None:
        if not self.log_failures:
            return
        identifier = error.identifier if isinstance(error, MissingInclude) else None
        logger.log(
            level,
            "Failed to unpack %s: %s",
            data.type.value,
            error.detail,
            extra={
                "resource_type": data.type.value,
                "resource_id": data.id,
                "error_code": error.code,
                "key": error.key,
                "identifier": str(identifier) if identifier is not None else None,
            },
        )


def deserialize_one(
    document: Any, resource_class: type[Resource] = Resource
) -> Resource | None:
    """Deserialize a single-resource document with the default registry."""
    return JSONAPIDocumentDeserializer().deserialize_one(document, resource_class)


def deserialize_many(
    document: Any, resource_class: type[Resource] = Resource
) -> list[Resource] | None:
    """Deserialize a collection document with the default registry."""
    return JSONAPIDocumentDeserializer().deserialize_many(document, resource_class)
