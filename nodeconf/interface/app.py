"""Textual front end for the config editor.

The App only renders :class:`Navigator` state and forwards raw key and
mouse events to it. After each event the whole view is redrawn.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from nodeconf.daemon.liveness import NodeStatus
from nodeconf.interface.hit_test import TAB_PADDING, HitTarget, Rect
from nodeconf.interface.navigation import Navigator, Screen
from nodeconf.logging_config import get_logger

if TYPE_CHECKING:
    from textual.widget import Widget

    from nodeconf.config.entry import Entry

logger = get_logger(__name__)

STATUS_STYLES: dict[NodeStatus, str] = {
    NodeStatus.RUNNING: "bold green",
    NodeStatus.STOPPED: "bold red",
    NodeStatus.UNKNOWN: "dim",
}

HINTS: dict[Screen, str] = {
    Screen.MAIN: "enter open file · q quit",
    Screen.FILE_EXPLORER: "↑/↓ move · enter open · esc back",
    Screen.EDITING: "tab/shift+tab section · ↑/↓ move · enter edit · space enable · ctrl+s save · esc back",
    Screen.EDITING_VALUE: "type to edit · enter commit · esc discard",
}


class ListViewport:
    """Scroll offset that keeps a list cursor visible."""

    def __init__(self) -> None:
        self.offset = 0

    def window(self, selected: int, count: int, height: int) -> range:
        """Return the visible row indices, adjusting the offset."""
        if height <= 0 or count <= 0:
            self.offset = 0
            return range(0)
        if selected < self.offset:
            self.offset = selected
        elif selected >= self.offset + height:
            self.offset = selected - height + 1
        self.offset = max(0, min(self.offset, max(0, count - height)))
        return range(self.offset, min(count, self.offset + height))


def _rect(widget: Widget) -> Rect:
    region = widget.region
    return Rect(region.x, region.y, region.width, region.height)


def _visible_rows(widget: Widget) -> int:
    # Before the first layout the widget has no size yet; render everything
    height = widget.size.height
    return height if height > 0 else 10_000


def render_tabs(names: list[str], selected: int) -> Text:
    """Render the section tab strip; each label spans len(name) + TAB_PADDING."""
    text = Text(no_wrap=True, overflow="crop")
    for index, name in enumerate(names):
        style = "reverse bold" if index == selected else ""
        label = f" {name} "
        text.append(label, style=style)
        text.append("│".ljust(len(name) + TAB_PADDING - len(label)), style="dim")
    return text


def render_entry_row(entry: Entry, selected: bool) -> Text:
    marker = "●" if entry.enabled else "○"
    row = Text(no_wrap=True, overflow="ellipsis")
    row.append(f"{marker} ", style="green" if entry.enabled else "dim")
    row.append(f"{entry.key:<28} ", style="bold" if entry.enabled else "")
    row.append(entry.value, style="" if entry.enabled else "dim")
    if selected:
        row.stylize("reverse")
    return row


class ConfigEditorApp(App):
    """Terminal interface for browsing and editing a node config file."""

    TITLE = "nodeconf"

    CSS = """
    Screen {
        layout: vertical;
    }
    #title {
        height: 1;
        padding: 0 1;
        background: $primary;
        color: $text;
    }
    #body {
        height: 1fr;
    }
    #main-view, #explorer-view, #editor-view {
        height: 1fr;
    }
    #main-text {
        height: 1fr;
        border: round $primary;
    }
    #open-button {
        width: 24;
        height: 3;
        border: round $accent;
        content-align: center middle;
    }
    #file-list {
        height: 1fr;
        border: round $primary;
    }
    #tabs {
        height: 3;
        border: round $primary;
    }
    #editor-panes {
        height: 1fr;
    }
    #option-list {
        width: 3fr;
        height: 1fr;
        border: round $primary;
    }
    #details {
        width: 2fr;
        height: 1fr;
        border: round $primary;
    }
    #status {
        height: 1;
        padding: 0 1;
        background: $surface-darken-1;
    }
    """

    # Keys the toolkit would otherwise claim for focus or screen handling
    BINDINGS: ClassVar[list[Binding]] = [
        Binding(key, f"forward_key('{key}')", show=False, priority=True)
        for key in ("tab", "shift+tab", "escape", "ctrl+s")
    ]

    def __init__(self, navigator: Navigator, *args: Any, **kwargs: Any):
        """Initialize the editor app.

        Args:
            navigator: State machine driven by this view
        """
        super().__init__(*args, **kwargs)
        self.navigator = navigator
        self._file_viewport = ListViewport()
        self._option_viewport = ListViewport()

    def compose(self) -> ComposeResult:
        yield Static(id="title")
        with Vertical(id="body"):
            with Vertical(id="main-view"):
                yield Static(id="main-text")
                yield Static("Open config file", id="open-button")
            with Vertical(id="explorer-view"):
                yield Static(id="file-list")
            with Vertical(id="editor-view"):
                yield Static(id="tabs")
                with Horizontal(id="editor-panes"):
                    yield Static(id="option-list")
                    yield Static(id="details")
        yield Static(id="status")

    def on_mount(self) -> None:
        self.refresh_view()
        self.call_after_refresh(self.refresh_view)

    def on_resize(self, event: events.Resize) -> None:
        self.call_after_refresh(self.refresh_view)

    # ----- input -----------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        """Forward a key press to the navigator."""
        event.stop()
        self._dispatch_key(event.key, event.character)

    def action_forward_key(self, key: str) -> None:
        """Forward a key claimed through a priority binding."""
        self._dispatch_key(key, None)

    def _dispatch_key(self, key: str, character: str | None) -> None:
        self.navigator.handle_key(key, character)
        if not self.navigator.running:
            self.exit()
            return
        self.refresh_view()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Resolve a pointer press against the regions drawn last."""
        self._record_regions()
        hit = self.navigator.handle_pointer(event.screen_x, event.screen_y)
        if hit is not None:
            logger.debug("Pointer press at (%d, %d) hit %s", event.screen_x, event.screen_y, hit)
        self.refresh_view()

    def _record_regions(self) -> None:
        router = self.navigator.router
        router.clear()
        screen = self.navigator.screen
        if screen is Screen.MAIN:
            router.record(HitTarget.MAIN_BUTTON, _rect(self.query_one("#open-button")))
        elif screen is Screen.FILE_EXPLORER:
            router.record(
                HitTarget.FILE_LIST,
                _rect(self.query_one("#file-list")),
                self._file_viewport.offset,
            )
        elif screen is Screen.EDITING:
            router.record(HitTarget.SECTION_TABS, _rect(self.query_one("#tabs")))
            router.record(
                HitTarget.OPTION_LIST,
                _rect(self.query_one("#option-list")),
                self._option_viewport.offset,
            )

    # ----- rendering -------------------------------------------------------

    def refresh_view(self) -> None:
        """Redraw every widget from navigator state."""
        nav = self.navigator
        screen = nav.screen
        self.query_one("#main-view").display = screen is Screen.MAIN
        self.query_one("#explorer-view").display = screen is Screen.FILE_EXPLORER
        self.query_one("#editor-view").display = screen in (
            Screen.EDITING,
            Screen.EDITING_VALUE,
        )

        path = nav.document.path if nav.document else None
        self.query_one("#title", Static).update(
            f"nodeconf · {path}" if path else "nodeconf · no file loaded"
        )

        if screen is Screen.MAIN:
            self._render_main()
        elif screen is Screen.FILE_EXPLORER:
            self._render_explorer()
        else:
            self._render_editor()
        self._render_status()

    def _render_main(self) -> None:
        nav = self.navigator
        status = f"Loaded: {nav.document.path}" if nav.document else "No config loaded"
        text = Text()
        text.append("Welcome to nodeconf.\n\n", style="bold")
        text.append(f"{status}\n\n")
        text.append("Press enter or click the button below to pick a config file.")
        main_text = self.query_one("#main-text", Static)
        main_text.border_title = "Home"
        main_text.update(text)

    def _render_explorer(self) -> None:
        explorer = self.navigator.explorer
        widget = self.query_one("#file-list", Static)
        widget.border_title = f"Select file · {explorer.current_dir}"
        text = Text(no_wrap=True, overflow="ellipsis")
        rows = self._file_viewport.window(
            explorer.selected_index, len(explorer.items), _visible_rows(widget)
        )
        for index in rows:
            item = explorer.items[index]
            line = Text(item.label, style="bold" if item.is_dir else "")
            if index == explorer.selected_index:
                line.stylize("reverse")
            if index != rows.start:
                text.append("\n")
            text.append_text(line)
        if not explorer.items:
            text.append("(empty)", style="dim")
        widget.update(text)

    def _render_editor(self) -> None:
        nav = self.navigator
        self.query_one("#tabs", Static).update(
            render_tabs(nav.section_names, nav.selected_section_index)
        )

        option_list = self.query_one("#option-list", Static)
        section = nav.current_section
        entries = section.entries if section else []
        option_list.border_title = section.name if section else "Options"
        text = Text(no_wrap=True, overflow="ellipsis")
        rows = self._option_viewport.window(
            nav.selected_item_index, len(entries), _visible_rows(option_list)
        )
        for index in rows:
            if index != rows.start:
                text.append("\n")
            text.append_text(render_entry_row(entries[index], index == nav.selected_item_index))
        option_list.update(text)

        self.query_one("#details", Static).update(self._details_text(nav.current_entry))

    def _details_text(self, entry: Entry | None) -> Text:
        nav = self.navigator
        text = Text()
        if entry is None:
            text.append("No option selected", style="dim")
            return text

        text.append(f"{entry.key}\n\n", style="bold")
        if entry.schema is not None:
            text.append(f"{entry.schema.description}\n\n")
            text.append("Kind: ", style="dim")
            text.append(f"{entry.schema.kind.value}\n")
            text.append("Default: ", style="dim")
            text.append(f"{entry.schema.default or '(empty)'}\n")
        else:
            text.append("Custom option (not in catalog)\n\n", style="italic")
        text.append("Enabled: ", style="dim")
        text.append(f"{'yes' if entry.enabled else 'no'}\n")
        text.append("Value: ", style="dim")
        if nav.screen is Screen.EDITING_VALUE:
            text.append(f"{nav.edit_buffer}▏", style="bold yellow")
        else:
            text.append(entry.value or "(empty)")
        return text

    def _render_status(self) -> None:
        nav = self.navigator
        text = Text(no_wrap=True, overflow="ellipsis")
        if nav.screen in (Screen.EDITING, Screen.EDITING_VALUE):
            text.append("node: ", style="dim")
            text.append(nav.node_status.value, style=STATUS_STYLES[nav.node_status])
            text.append("  ")
        if nav.notification:
            text.append(nav.notification, style="bold yellow")
            text.append("  ")
        text.append(HINTS[nav.screen], style="dim")
        self.query_one("#status", Static).update(text)


def run_editor(navigator: Navigator) -> None:
    """Run the editor until the operator quits."""
    ConfigEditorApp(navigator).run(mouse=True)
