"""Tests for ConfigDocument mutation, grouping and serialization."""

from __future__ import annotations

import pytest

from nodeconf.config.document import SAVE_ORDER, ConfigDocument, build_sections
from nodeconf.config.entry import CUSTOM_SECTION
from nodeconf.config.schema import Category, all_schemas, schema_for
from nodeconf.exceptions import ConfigSaveError, DocumentError

pytestmark = [pytest.mark.unit, pytest.mark.config]


@pytest.fixture
def document(tmp_path):
    return ConfigDocument.defaults(tmp_path / "bitcoin.conf")


def test_defaults_document_has_whole_catalog(document):
    assert len(document) == len(all_schemas())
    assert document.enabled_entries() == []
    assert document.to_text() == ""


def test_get_returns_live_entry(document):
    entry = document.get("rpcport")
    assert entry is document.get_mut("rpcport")
    document.set("rpcport", "18443")
    assert entry.value == "18443"


def test_get_unknown_key(document):
    assert document.get("nope") is None
    assert "nope" not in document
    assert "rpcport" in document


def test_set_enables_and_updates(document):
    assert document.set("dbcache", "1024") is True
    entry = document.get("dbcache")
    assert entry.value == "1024"
    assert entry.enabled is True


def test_set_unknown_key_does_not_create(document):
    before = len(document)
    assert document.set("mystery", "1") is False
    assert len(document) == before
    assert document.get("mystery") is None


def test_disable_keeps_value(document):
    document.set("prune", "550")
    assert document.disable("prune") is True
    entry = document.get("prune")
    assert entry.enabled is False
    assert entry.value == "550"
    assert "prune" not in document.to_text()

    assert document.enable("prune") is True
    assert "prune=550" in document.to_text()


def test_enable_disable_unknown_key(document):
    assert document.enable("mystery") is False
    assert document.disable("mystery") is False


def test_add_custom_inserts_enabled_entry(document):
    document.add_custom("mystery", "42")
    entry = document.get("mystery")
    assert entry.schema is None
    assert entry.enabled is True
    assert entry.category_name == CUSTOM_SECTION


def test_add_custom_twice_updates_in_place(document):
    document.add_custom("mystery", "1")
    size = len(document)
    document.add_custom("mystery", "2")

    assert len(document) == size
    assert document.get("mystery").value == "2"


def test_add_custom_on_catalog_key_keeps_schema(document):
    size = len(document)
    document.add_custom("rpcport", "1234")

    assert len(document) == size
    entry = document.get("rpcport")
    assert entry.schema is schema_for("rpcport")
    assert entry.value == "1234"
    assert entry.enabled is True


def test_remove(document):
    document.add_custom("mystery", "1")
    assert document.remove("mystery") is True
    assert document.remove("mystery") is False
    assert document.get("mystery") is None


def test_entries_by_category(document):
    document.add_custom("mystery", "1")
    rpc = document.entries_by_category(Category.RPC)
    assert rpc
    assert all(entry.schema.category is Category.RPC for entry in rpc)
    assert [entry.key for entry in document.entries_by_category("Custom")] == ["mystery"]


def test_to_text_groups_in_save_order(document):
    document.add_custom("mystery", "x")
    document.set("zmqpubrawblock", "tcp://127.0.0.1:28332")
    document.set("server", "1")
    document.set("txindex", "1")
    document.set("datadir", "/data")

    assert document.to_text() == (
        "# Core\n"
        "datadir=/data\n"
        "txindex=1\n"
        "\n"
        "# RPC\n"
        "server=1\n"
        "\n"
        "# ZMQ\n"
        "zmqpubrawblock=tcp://127.0.0.1:28332\n"
        "\n"
        "# Custom\n"
        "mystery=x\n"
    )


def test_save_order():
    assert SAVE_ORDER == (
        "Core",
        "Network",
        "RPC",
        "Wallet",
        "Debugging",
        "Mining",
        "Relay",
        "ZMQ",
        "Custom",
    )


def test_save_and_reload_round_trip(write_config):
    path = write_config("[main]\nrpcport=8332\n[test]\nrpcport=18332\nextra=1\n")
    document = ConfigDocument.load(path)
    document.set("dbcache", "300")
    document.disable("rpcport")
    document.save()

    reloaded = ConfigDocument.load(path)
    assert reloaded.get("dbcache").value == "300"
    assert reloaded.get("rpcport").enabled is False
    assert reloaded.get("extra").value == "1"
    assert reloaded.to_text() == document.to_text()


def test_save_to_creates_parent_directories(document, tmp_path):
    document.set("server", "1")
    target = tmp_path / "nested" / "dir" / "node.conf"
    document.save_to(target)

    assert target.read_text(encoding="utf-8") == "# RPC\nserver=1\n"
    # save_to does not rebind the document
    assert document.path == tmp_path / "bitcoin.conf"


def test_save_failure_raises(document, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    document.set("server", "1")

    with pytest.raises(ConfigSaveError) as exc_info:
        document.save_to(blocker / "bitcoin.conf")
    assert isinstance(exc_info.value, DocumentError)


def test_load_missing_file_gives_defaults(tmp_path):
    document = ConfigDocument.load(tmp_path / "new.conf")
    assert len(document) == len(all_schemas())
    assert document.enabled_entries() == []


def test_build_sections_sorted_and_shared(write_config):
    document = ConfigDocument.load(write_config("mystery=1\nserver=1\n"))
    sections = build_sections(document)

    names = [section.name for section in sections]
    assert names == sorted(names)
    assert "Custom" in names
    assert sum(len(section) for section in sections) == len(document)

    rpc = next(section for section in sections if section.name == "RPC")
    server = next(entry for entry in rpc.entries if entry.key == "server")
    assert server is document.get("server")


def test_build_sections_without_custom(document):
    names = [section.name for section in build_sections(document)]
    assert CUSTOM_SECTION not in names
    assert names == sorted(category.value for category in Category)
