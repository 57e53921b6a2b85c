"""Tests for the file picker's directory listing."""

from __future__ import annotations

from pathlib import Path

import pytest

from nodeconf.interface.explorer import PARENT_MARKER, FileExplorer

pytestmark = [pytest.mark.unit, pytest.mark.interface]


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "zdir").mkdir()
    (tmp_path / "adir").mkdir()
    (tmp_path / "b.conf").write_text("", encoding="utf-8")
    (tmp_path / "a.conf").write_text("", encoding="utf-8")
    return tmp_path


def test_listing_order(tree):
    explorer = FileExplorer(tree)
    explorer.refresh()

    names = [item.name for item in explorer.items]
    assert names == [PARENT_MARKER, "adir", "zdir", "a.conf", "b.conf"]
    assert explorer.items[0].is_parent
    assert explorer.items[0].path == tree.resolve().parent


def test_labels(tree):
    explorer = FileExplorer(tree)
    explorer.refresh()
    labels = {item.name: item.label for item in explorer.items}
    assert labels["adir"] == "📁 adir"
    assert labels["a.conf"] == "📄 a.conf"


def test_root_has_no_parent_entry():
    explorer = FileExplorer(Path("/"))
    explorer.refresh()
    assert all(not item.is_parent for item in explorer.items)


def test_change_dir_resets_cursor(tree):
    explorer = FileExplorer(tree)
    explorer.refresh()
    explorer.select(3)

    explorer.change_dir(tree / "adir")
    assert explorer.current_dir == (tree / "adir").resolve()
    assert explorer.selected_index == 0
    assert [item.name for item in explorer.items] == [PARENT_MARKER]


def test_cursor_wraps(tree):
    explorer = FileExplorer(tree)
    explorer.refresh()

    explorer.select_previous()
    assert explorer.selected_index == len(explorer.items) - 1
    explorer.select_next()
    assert explorer.selected_index == 0


def test_select_out_of_range(tree):
    explorer = FileExplorer(tree)
    explorer.refresh()
    assert explorer.select(99) is False
    assert explorer.select(-1) is False
    assert explorer.select(4) is True
    assert explorer.selected_item.name == "b.conf"


def test_unlistable_directory_sets_error(tmp_path):
    explorer = FileExplorer(tmp_path / "missing")
    explorer.refresh()

    assert explorer.error is not None
    assert "Cannot list" in explorer.error
    assert [item.name for item in explorer.items] == [PARENT_MARKER]


def test_empty_explorer_has_no_selection():
    explorer = FileExplorer(Path("/"))
    assert explorer.selected_item is None
    explorer.select_next()
    assert explorer.selected_index == 0
