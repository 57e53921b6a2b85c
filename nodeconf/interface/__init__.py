"""Terminal interface: navigation state, hit testing and the textual view."""

from __future__ import annotations

from nodeconf.interface.explorer import ExplorerItem, FileExplorer
from nodeconf.interface.hit_test import Hit, HitTarget, HitTestRouter, Rect
from nodeconf.interface.navigation import Action, Navigator, Screen

__all__ = [
    "Action",
    "ExplorerItem",
    "FileExplorer",
    "Hit",
    "HitTarget",
    "HitTestRouter",
    "Navigator",
    "Rect",
    "Screen",
]
