"""Screen and selection state machine for the config editor.

The navigator is independent of any terminal toolkit: the view feeds it
key names and pointer coordinates and renders whatever state results.
All changes to the loaded document go through the document's own
mutation methods.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from nodeconf.config.document import ConfigDocument, build_sections
from nodeconf.config.entry import Entry, Section
from nodeconf.daemon.liveness import LivenessProbe, NodeStatus
from nodeconf.exceptions import ConfigOpenError, ConfigSaveError
from nodeconf.interface.explorer import FileExplorer
from nodeconf.interface.hit_test import Hit, HitTarget, HitTestRouter
from nodeconf.logging_config import get_logger
from nodeconf.models import KeyBindings

logger = get_logger(__name__)


class Screen(str, Enum):
    """Top-level interface states."""

    MAIN = "Main"
    FILE_EXPLORER = "FileExplorer"
    EDITING = "Editing"
    EDITING_VALUE = "EditingValue"


class Action(str, Enum):
    """Logical actions; names match the fields of KeyBindings."""

    QUIT = "quit"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    UP = "up"
    DOWN = "down"
    NEXT_SECTION = "next_section"
    PREV_SECTION = "prev_section"
    TOGGLE = "toggle"
    SAVE = "save"
    BACKSPACE = "backspace"


def build_key_map(bindings: KeyBindings) -> dict[str, Action]:
    """Map key names to actions; the first action claiming a key keeps it."""
    key_map: dict[str, Action] = {}
    for action in Action:
        for key in getattr(bindings, action.value):
            key_map.setdefault(key, action)
    return key_map


def is_printable(character: str | None) -> bool:
    return character is not None and len(character) == 1 and character.isprintable()


class Navigator:
    """Owns the loaded document and the selection state."""

    def __init__(
        self,
        explorer: FileExplorer | None = None,
        probe: LivenessProbe | None = None,
        bindings: KeyBindings | None = None,
        router: HitTestRouter | None = None,
    ):
        """Initialize navigator.

        Args:
            explorer: Directory listing for the file picker
            probe: Daemon liveness probe run after a file is opened
            bindings: Key names for each action
            router: Region registry used for pointer presses

        """
        self.explorer = explorer or FileExplorer()
        self.probe = probe or LivenessProbe()
        self.router = router or HitTestRouter()
        self.key_map = build_key_map(bindings or KeyBindings())

        self.screen = Screen.MAIN
        self.running = True
        self.document: ConfigDocument | None = None
        self.sections: list[Section] = []
        self.selected_section_index = 0
        self.selected_item_index = 0
        self.edit_buffer = ""
        self.notification: str | None = None
        self.node_status = NodeStatus.UNKNOWN

    # ----- read-only views -------------------------------------------------

    @property
    def current_section(self) -> Section | None:
        if 0 <= self.selected_section_index < len(self.sections):
            return self.sections[self.selected_section_index]
        return None

    @property
    def current_entry(self) -> Entry | None:
        section = self.current_section
        if section is None:
            return None
        if 0 <= self.selected_item_index < len(section.entries):
            return section.entries[self.selected_item_index]
        return None

    @property
    def section_names(self) -> list[str]:
        return [section.name for section in self.sections]

    # ----- input -------------------------------------------------------------

    def handle_key(self, key: str, character: str | None = None) -> None:
        """Apply one key press.

        Args:
            key: Key name, e.g. ``"enter"``, ``"ctrl+s"`` or ``"a"``
            character: Printable character produced by the key, if any

        """
        action = self.key_map.get(key)
        if action is not Action.SAVE:
            self.notification = None

        if self.screen is Screen.MAIN:
            self._on_main(action)
        elif self.screen is Screen.FILE_EXPLORER:
            self._on_file_explorer(action)
        elif self.screen is Screen.EDITING:
            self._on_editing(action)
        elif self.screen is Screen.EDITING_VALUE:
            self._on_editing_value(action, character)

    def handle_pointer(self, x: int, y: int) -> Hit | None:
        """Apply a pointer press at screen cell (x, y).

        Presses only move the selection, except the main action button,
        which behaves like the confirm key.
        """
        self.notification = None
        if self.screen is Screen.EDITING_VALUE:
            return None

        on_editing = self.screen is Screen.EDITING
        section = self.current_section
        hit = self.router.resolve(
            x,
            y,
            file_count=len(self.explorer.items) if self.screen is Screen.FILE_EXPLORER else 0,
            item_count=len(section.entries) if on_editing and section else 0,
            section_names=self.section_names if on_editing else (),
        )
        if hit is None:
            return None

        if hit.target is HitTarget.MAIN_BUTTON and self.screen is Screen.MAIN:
            self._on_main(Action.CONFIRM)
        elif hit.target is HitTarget.FILE_LIST and self.screen is Screen.FILE_EXPLORER:
            self.explorer.select(hit.index)
        elif hit.target is HitTarget.SECTION_TABS and on_editing:
            if hit.index != self.selected_section_index:
                self.selected_section_index = hit.index
                self.selected_item_index = 0
        elif hit.target is HitTarget.OPTION_LIST and on_editing:
            self.selected_item_index = hit.index
        else:
            return None
        return hit

    # ----- per-screen handlers ---------------------------------------------

    def _on_main(self, action: Action | None) -> None:
        if action is Action.QUIT:
            self.running = False
        elif action is Action.CONFIRM:
            self.explorer.refresh()
            self.notification = self.explorer.error
            self.screen = Screen.FILE_EXPLORER

    def _on_file_explorer(self, action: Action | None) -> None:
        if action is Action.CANCEL:
            self.screen = Screen.MAIN
        elif action is Action.UP:
            self.explorer.select_previous()
        elif action is Action.DOWN:
            self.explorer.select_next()
        elif action is Action.CONFIRM:
            item = self.explorer.selected_item
            if item is None:
                return
            if item.is_dir:
                self.explorer.change_dir(item.path)
                self.notification = self.explorer.error
            else:
                self.open_file(item.path)

    def _on_editing(self, action: Action | None) -> None:
        count = len(self.sections)
        if action is Action.CANCEL:
            self.screen = Screen.MAIN
        elif action is Action.NEXT_SECTION and count:
            self.selected_section_index = (self.selected_section_index + 1) % count
            self.selected_item_index = 0
        elif action is Action.PREV_SECTION and count:
            self.selected_section_index = (self.selected_section_index - 1) % count
            self.selected_item_index = 0
        elif action is Action.DOWN:
            section = self.current_section
            if section and section.entries:
                self.selected_item_index = min(
                    self.selected_item_index + 1, len(section.entries) - 1
                )
        elif action is Action.UP:
            self.selected_item_index = max(self.selected_item_index - 1, 0)
        elif action is Action.CONFIRM:
            self._confirm_entry()
        elif action is Action.TOGGLE:
            self._toggle_entry()
        elif action is Action.SAVE:
            self.save()

    def _on_editing_value(self, action: Action | None, character: str | None) -> None:
        if action is Action.CANCEL:
            self.edit_buffer = ""
            self.screen = Screen.EDITING
        elif action is Action.CONFIRM:
            entry = self.current_entry
            if entry is not None and self.document is not None:
                self.document.set(entry.key, self.edit_buffer.strip())
            self.edit_buffer = ""
            self.screen = Screen.EDITING
        elif action is Action.BACKSPACE:
            self.edit_buffer = self.edit_buffer[:-1]
        elif is_printable(character):
            self.edit_buffer += character  # type: ignore[operator]

    # ----- operations --------------------------------------------------------

    def _confirm_entry(self) -> None:
        entry = self.current_entry
        if entry is None or self.document is None:
            return
        if entry.is_boolean:
            self.document.set(entry.key, "0" if entry.value == "1" else "1")
        else:
            self.edit_buffer = entry.value
            self.screen = Screen.EDITING_VALUE

    def _toggle_entry(self) -> None:
        entry = self.current_entry
        if entry is None or self.document is None:
            return
        if entry.enabled:
            self.document.disable(entry.key)
        else:
            self.document.enable(entry.key)

    def open_file(self, path: str | Path) -> bool:
        """Load ``path`` and switch to editing; False if it cannot be opened."""
        try:
            document = ConfigDocument.load(path)
        except ConfigOpenError as e:
            logger.warning("Failed to open %s: %s", path, e)
            self.notification = e.message
            return False

        self.document = document
        self.sections = build_sections(document)
        self.selected_section_index = 0
        self.selected_item_index = 0
        self.edit_buffer = ""
        self.node_status = self.probe.check(document)
        self.screen = Screen.EDITING
        logger.info("Editing %s (%d sections)", document.path, len(self.sections))
        return True

    def save(self) -> bool:
        """Write the document; the outcome is reported as a notification."""
        if self.document is None:
            return False
        try:
            self.document.save()
        except ConfigSaveError as e:
            logger.error("Save failed: %s", e)
            self.notification = f"Save failed: {e.message}"
            return False
        self.notification = f"Saved {self.document.path}"
        return True
