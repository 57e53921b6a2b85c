"""Daemon configuration model.

This module holds the option catalog, the file parser and the editable
document written back to disk.
"""

from __future__ import annotations

from nodeconf.config.document import SAVE_ORDER, ConfigDocument, build_sections
from nodeconf.config.entry import CUSTOM_SECTION, Entry, Section
from nodeconf.config.parser import PROBE_SECTIONS, default_entries, parse_config
from nodeconf.config.schema import (
    Category,
    OptionSchema,
    ValueKind,
    all_schemas,
    schema_for,
)

__all__ = [
    "CUSTOM_SECTION",
    "PROBE_SECTIONS",
    "SAVE_ORDER",
    "Category",
    "ConfigDocument",
    "Entry",
    "OptionSchema",
    "Section",
    "ValueKind",
    "all_schemas",
    "build_sections",
    "default_entries",
    "parse_config",
    "schema_for",
]
