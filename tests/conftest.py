"""Shared fixtures for deserializer tests."""

import pytest

from canvas_jsonapi import JSONAPIDocumentDeserializer, ResourceData, default_registry


@pytest.fixture
def deserializer():
    return JSONAPIDocumentDeserializer(log_failures=True)


@pytest.fixture
def make_data():
    """Build ResourceData from a raw resource object against the default registry."""

    def _make(raw, includes=None, meta=None):
        data = ResourceData.from_dict(
            raw, registry=default_registry, includes=includes, meta=meta
        )
        assert data is not None
        return data

    return _make
