"""Directory listing used by the file picker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nodeconf.logging_config import get_logger

logger = get_logger(__name__)

PARENT_MARKER = ".."


@dataclass(frozen=True)
class ExplorerItem:
    """One row of the directory listing."""

    name: str
    path: Path
    is_dir: bool
    is_parent: bool = False

    @property
    def label(self) -> str:
        icon = "📁" if self.is_dir else "📄"
        return f"{icon} {self.name}"


class FileExplorer:
    """Current directory, its sorted children and a list cursor."""

    def __init__(self, start_dir: str | Path | None = None):
        """Initialize file explorer.

        Args:
            start_dir: Directory to list first (default: current directory)

        """
        self.current_dir = Path(start_dir or Path.cwd()).expanduser().resolve()
        self.items: list[ExplorerItem] = []
        self.selected_index = 0
        self.error: str | None = None

    def refresh(self) -> None:
        """Re-read the current directory.

        Directories come first, then files, each sorted by name. A parent
        entry leads the list unless the directory is a filesystem root.
        """
        items: list[ExplorerItem] = []
        current = self.current_dir
        if current.parent != current:
            items.append(
                ExplorerItem(PARENT_MARKER, current.parent, is_dir=True, is_parent=True)
            )

        self.error = None
        try:
            children = [
                ExplorerItem(child.name, child, is_dir=child.is_dir())
                for child in current.iterdir()
            ]
        except OSError as e:
            logger.warning("Cannot list %s: %s", current, e)
            self.error = f"Cannot list {current}: {e.strerror or e}"
            children = []

        children.sort(key=lambda item: (not item.is_dir, item.name))
        items.extend(children)
        self.items = items
        if self.selected_index >= len(self.items):
            self.selected_index = 0
        logger.debug("Listed %s: %d entries", current, len(children))

    def change_dir(self, path: str | Path) -> None:
        """Move to ``path``, reset the cursor and refresh the listing."""
        self.current_dir = Path(path).expanduser().resolve()
        self.selected_index = 0
        self.refresh()

    def select_next(self) -> None:
        if self.items:
            self.selected_index = (self.selected_index + 1) % len(self.items)

    def select_previous(self) -> None:
        if self.items:
            self.selected_index = (self.selected_index - 1) % len(self.items)

    def select(self, index: int) -> bool:
        """Move the cursor to ``index`` if it is in range."""
        if 0 <= index < len(self.items):
            self.selected_index = index
            return True
        return False

    @property
    def selected_item(self) -> ExplorerItem | None:
        if 0 <= self.selected_index < len(self.items):
            return self.items[self.selected_index]
        return None
