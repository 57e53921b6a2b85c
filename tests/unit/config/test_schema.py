"""Tests for the option catalog."""

from __future__ import annotations

import pytest

from nodeconf.config.schema import (
    Category,
    OptionSchema,
    ValueKind,
    all_schemas,
    schema_for,
)

pytestmark = [pytest.mark.unit, pytest.mark.config]


def test_catalog_keys_are_unique():
    keys = [schema.key for schema in all_schemas()]
    assert len(keys) == len(set(keys))


def test_catalog_is_stable_across_calls():
    assert all_schemas() == all_schemas()
    assert all_schemas()[0] is all_schemas()[0]


def test_catalog_covers_every_category():
    categories = {schema.category for schema in all_schemas()}
    assert categories == set(Category)


def test_catalog_size():
    assert len(all_schemas()) == 141


def test_schema_for_known_key():
    schema = schema_for("rpcport")
    assert schema is not None
    assert schema.default == "8332"
    assert schema.kind is ValueKind.INTEGER
    assert schema.category is Category.RPC


def test_schema_for_returns_catalog_record():
    schema = schema_for("txindex")
    assert schema in all_schemas()
    assert schema.kind is ValueKind.BOOLEAN


def test_schema_for_unknown_key():
    assert schema_for("notarealoption") is None


def test_schema_is_frozen():
    schema = schema_for("datadir")
    with pytest.raises(AttributeError):
        schema.default = "/tmp"  # type: ignore[misc]


def test_boolean_defaults_are_flags():
    for schema in all_schemas():
        if schema.kind is ValueKind.BOOLEAN:
            assert schema.default in {"0", "1"}, schema.key


def test_every_schema_has_description():
    for schema in all_schemas():
        assert isinstance(schema, OptionSchema)
        assert schema.description
