"""Headless tests for the textual editor view."""

from __future__ import annotations

import pytest

from nodeconf.config.entry import Entry
from nodeconf.daemon.liveness import NodeStatus
from nodeconf.interface.app import (
    ConfigEditorApp,
    ListViewport,
    render_entry_row,
    render_tabs,
)
from nodeconf.interface.explorer import FileExplorer
from nodeconf.interface.hit_test import TAB_PADDING, tab_spans
from nodeconf.interface.navigation import Navigator, Screen

pytestmark = [pytest.mark.unit, pytest.mark.interface]


class StubProbe:
    def check(self, document):
        return NodeStatus.RUNNING


@pytest.fixture
def workdir(tmp_path):
    (tmp_path / "bitcoin.conf").write_text("server=1\nmystery=abc\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def navigator(workdir):
    return Navigator(explorer=FileExplorer(workdir), probe=StubProbe())


def test_viewport_keeps_cursor_visible():
    viewport = ListViewport()
    assert list(viewport.window(0, 10, 4)) == [0, 1, 2, 3]
    assert list(viewport.window(5, 10, 4)) == [2, 3, 4, 5]
    assert viewport.offset == 2
    assert list(viewport.window(3, 10, 4)) == [2, 3, 4, 5]
    assert list(viewport.window(1, 10, 4)) == [1, 2, 3, 4]
    assert list(viewport.window(0, 0, 4)) == []
    assert viewport.offset == 0


def test_viewport_shrinks_offset_when_list_shrinks():
    viewport = ListViewport()
    viewport.window(9, 10, 4)
    assert viewport.offset == 6
    assert list(viewport.window(1, 3, 4)) == [0, 1, 2]


def test_render_tabs_matches_hit_spans():
    names = ["Core", "RPC", "ZMQ"]
    text = render_tabs(names, 1)
    assert text.plain == " Core │ RPC │ ZMQ │"
    spans = tab_spans(names, 0)
    assert spans[-1][1] == len(text.plain)
    assert all(end - start == len(name) + TAB_PADDING for (start, end), name in zip(spans, names))


def test_render_entry_row():
    row = render_entry_row(Entry(key="server", value="1", enabled=True), selected=False)
    assert row.plain.startswith("● server")
    assert row.plain.endswith(" 1")
    row = render_entry_row(Entry(key="prune", value="0"), selected=True)
    assert row.plain.startswith("○ prune")


@pytest.mark.asyncio
async def test_keys_drive_navigation(navigator):
    app = ConfigEditorApp(navigator)
    async with app.run_test(size=(100, 30)) as pilot:
        assert navigator.screen is Screen.MAIN
        await pilot.press("enter")
        assert navigator.screen is Screen.FILE_EXPLORER
        await pilot.press("escape")
        assert navigator.screen is Screen.MAIN


@pytest.mark.asyncio
async def test_quit_key_exits(navigator):
    app = ConfigEditorApp(navigator)
    async with app.run_test(size=(100, 30)) as pilot:
        await pilot.press("q")
    assert navigator.running is False


@pytest.mark.asyncio
async def test_tab_switches_section(navigator, workdir):
    navigator.open_file(workdir / "bitcoin.conf")
    app = ConfigEditorApp(navigator)
    async with app.run_test(size=(100, 30)) as pilot:
        await pilot.press("tab")
        assert navigator.selected_section_index == 1
        await pilot.press("shift+tab", "shift+tab")
        assert navigator.selected_section_index == len(navigator.sections) - 1


@pytest.mark.asyncio
async def test_edit_value_with_typing(navigator, workdir):
    navigator.open_file(workdir / "bitcoin.conf")
    app = ConfigEditorApp(navigator)
    async with app.run_test(size=(100, 30)) as pilot:
        # Core starts with datadir
        await pilot.press("enter")
        assert navigator.screen is Screen.EDITING_VALUE
        await pilot.press("x", "y", "q", "enter")
        assert navigator.screen is Screen.EDITING
        assert navigator.document.get("datadir").value == "xyq"
        await pilot.press("ctrl+s")
        assert navigator.notification.startswith("Saved")

    assert "datadir=xyq" in (workdir / "bitcoin.conf").read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_click_main_button_opens_explorer(navigator):
    app = ConfigEditorApp(navigator)
    async with app.run_test(size=(100, 30)) as pilot:
        await pilot.click("#open-button", offset=(2, 1))
        assert navigator.screen is Screen.FILE_EXPLORER


@pytest.mark.asyncio
async def test_click_selects_tab_and_option(navigator, workdir):
    navigator.open_file(workdir / "bitcoin.conf")
    app = ConfigEditorApp(navigator)
    async with app.run_test(size=(100, 30)) as pilot:
        start = tab_spans(navigator.section_names, 1)[2][0]
        await pilot.click("#tabs", offset=(start, 1))
        assert navigator.current_section.name == "Debugging"

        await pilot.click("#option-list", offset=(3, 3))
        assert navigator.selected_item_index == 2
        assert navigator.current_entry.key == "logips"
