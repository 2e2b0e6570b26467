"""Type registry — wire tags resolve to registered resource classes.

Invariants:
    - Unknown or non-string tags resolve to None, never raise
    - Each tag binds to exactly one class
"""

import pytest

from canvas_jsonapi import (
    AccessToken,
    Account,
    Canvas,
    Organization,
    ResourceType,
    TypeRegistry,
    default_registry,
)


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("orgs", ResourceType.ORGANIZATION),
        ("canvases", ResourceType.CANVAS),
        ("account", ResourceType.ACCOUNT),
        ("access-tokens", ResourceType.ACCESS_TOKEN),
    ],
)
def test_resolve_known_tags(tag, expected):
    assert default_registry.resolve(tag) is expected


@pytest.mark.parametrize("tag", ["users", "", "ORGS", None, 1, ["orgs"]])
def test_resolve_unknown_tag_returns_none(tag):
    assert default_registry.resolve(tag) is None


def test_default_registry_binds_every_type():
    assert len(default_registry) == len(ResourceType)
    assert default_registry.resource_class(ResourceType.ORGANIZATION) is Organization
    assert default_registry.resource_class(ResourceType.CANVAS) is Canvas
    assert default_registry.resource_class(ResourceType.ACCOUNT) is Account
    assert default_registry.resource_class(ResourceType.ACCESS_TOKEN) is AccessToken


def test_unregistered_tag_does_not_resolve():
    registry = TypeRegistry([Organization])
    assert registry.resolve("orgs") is ResourceType.ORGANIZATION
    assert registry.resolve("canvases") is None
    assert ResourceType.CANVAS not in registry


def test_register_rejects_class_without_resource_type():
    class Plain:
        pass

    with pytest.raises(ValueError):
        TypeRegistry([Plain])


def test_register_rejects_second_class_for_same_tag():
    class OtherOrganization(Organization):
        pass

    registry = TypeRegistry([Organization])
    with pytest.raises(ValueError):
        registry.register(OtherOrganization)


def test_register_is_idempotent_for_same_class():
    registry = TypeRegistry([Organization])
    assert registry.register(Organization) is Organization
    assert len(registry) == 1


def test_decoder_is_class_constructor():
    decoder = default_registry.decoder(ResourceType.ACCOUNT)
    assert decoder == Account.from_resource_data
