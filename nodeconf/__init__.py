"""nodeconf - terminal editor for bitcoin.conf style daemon configuration."""

from __future__ import annotations

__version__ = "0.1.0"
