"""JSON:API fixture documents for deserializer tests."""

from typing import Any, Iterable, Mapping


def resource_object(
    type_: str,
    id_: str,
    attributes: Mapping[str, Any] | None = None,
    *,
    relationships: Mapping[str, tuple[str, str]] | None = None,
    meta: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a resource object; relationships map a key to a (type, id) pair."""
    resource: dict[str, Any] = {
        "type": type_,
        "id": id_,
        "attributes": dict(attributes or {}),
    }
    if relationships:
        resource["relationships"] = {
            key: {"data": {"type": rel_type, "id": rel_id}}
            for key, (rel_type, rel_id) in relationships.items()
        }
    if meta:
        resource["meta"] = dict(meta)
    return resource


def build_single(
    resource: Mapping[str, Any],
    *,
    included: Iterable[Mapping[str, Any]] | None = None,
    meta: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a JSON:API document for a single resource object."""
    document: dict[str, Any] = {"data": dict(resource)}
    if included:
        document["included"] = [dict(item) for item in included]
    if meta:
        document["meta"] = dict(meta)
    return document


def build_collection(
    resources: Iterable[Mapping[str, Any]],
    *,
    included: Iterable[Mapping[str, Any]] | None = None,
    meta: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a JSON:API document for a collection of resources."""
    document: dict[str, Any] = {"data": [dict(item) for item in resources]}
    if included:
        document["included"] = [dict(item) for item in included]
    if meta:
        document["meta"] = dict(meta)
    return document


def organization(id_: str = "1", name: str = "canvas", **attributes: Any) -> dict[str, Any]:
    return resource_object("orgs", id_, {"name": name, **attributes})


def canvas(
    id_: str,
    org_id: str = "1",
    *,
    updated_at: str = "2016-07-11T00:00:00Z",
    **attributes: Any,
) -> dict[str, Any]:
    return resource_object(
        "canvases",
        id_,
        {"updated_at": updated_at, **attributes},
        relationships={"org": ("orgs", org_id)},
    )
