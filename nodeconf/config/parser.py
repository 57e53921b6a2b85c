"""Reconcile a daemon config file against the option catalog.

The file is INI-like: ``#`` and ``;`` comments, optional ``[section]``
headers and ``key=value`` lines, each read with its indentation
stripped. Values for a key are looked up in a fixed list of sections,
top-level first, and the first section that has the key wins.
The order does not follow the chain the daemon is configured to run.
"""

from __future__ import annotations

import configparser
from collections.abc import Callable, Mapping
from pathlib import Path

from nodeconf.config.entry import Entry
from nodeconf.config.schema import all_schemas
from nodeconf.exceptions import ConfigOpenError
from nodeconf.logging_config import get_logger

logger = get_logger(__name__)

# "" is the unnamed section holding keys above the first header.
PROBE_SECTIONS: tuple[str, ...] = ("", "main", "test", "signet", "regtest")

_TOP_LEVEL = "__nodeconf_top__"
_NO_DEFAULTS = "__nodeconf_defaults__"

RawValue = str | bool | int | float | None
Decoder = Callable[[RawValue], "str | None"]


def _as_text(raw: RawValue) -> str | None:
    if isinstance(raw, str):
        return raw
    return None


def _as_bool(raw: RawValue) -> str | None:
    # A bare key without "=" switches the option on.
    if raw is None:
        return "1"
    if isinstance(raw, bool):
        return "1" if raw else "0"
    return None


def _as_int(raw: RawValue) -> str | None:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return str(raw)
    return None


def _as_float(raw: RawValue) -> str | None:
    if isinstance(raw, float):
        return str(raw)
    return None


DECODERS: tuple[Decoder, ...] = (_as_text, _as_bool, _as_int, _as_float)


def decode_value(raw: RawValue) -> str | None:
    """Run the decoder chain and return the first successful decoding."""
    for decoder in DECODERS:
        value = decoder(raw)
        if value is not None:
            return value
    return None


def default_entries() -> list[Entry]:
    """Return one disabled entry per catalog option, at its default."""
    return [
        Entry(key=schema.key, value=schema.default, schema=schema, enabled=False)
        for schema in all_schemas()
    ]


def _read_tables(path: Path) -> dict[str, Mapping[str, RawValue]] | None:
    """Read the probe sections of ``path``.

    Returns None when the file is missing or is not valid INI text.
    Raises ConfigOpenError when the file exists but cannot be read.
    """
    if not path.exists():
        logger.debug("Config file %s does not exist, using defaults", path)
        return None

    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("Config file %s is not valid UTF-8, using defaults: %s", path, e)
        return None
    except OSError as e:
        msg = f"Cannot open {path}: {e.strerror or e}"
        raise ConfigOpenError(msg, {"path": str(path)}) from e

    ini = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        strict=False,
        allow_no_value=True,
        empty_lines_in_values=False,
        interpolation=None,
        default_section=_NO_DEFAULTS,
    )
    ini.optionxform = str  # type: ignore[assignment,method-assign]
    # Every line stands alone; indentation never continues a value
    lines = "\n".join(line.strip() for line in text.splitlines())
    try:
        ini.read_string(f"[{_TOP_LEVEL}]\n{lines}", source=str(path))
    except configparser.Error as e:
        logger.warning("Failed to parse config file %s, using defaults: %s", path, e)
        return None

    tables: dict[str, Mapping[str, RawValue]] = {}
    for section in PROBE_SECTIONS:
        name = section or _TOP_LEVEL
        if ini.has_section(name):
            tables[section] = dict(ini.items(name, raw=True))
    return tables


def _probe(tables: Mapping[str, Mapping[str, RawValue]], key: str) -> str | None:
    for section in PROBE_SECTIONS:
        table = tables.get(section)
        if table is None or key not in table:
            continue
        value = decode_value(table[key])
        if value is not None:
            return value
    return None


def _log_shadowed(tables: Mapping[str, Mapping[str, RawValue]], key: str) -> None:
    holders = [section for section in PROBE_SECTIONS if key in tables.get(section, {})]
    if len(holders) > 1:
        logger.debug(
            "Option %s is set in sections %s; using [%s] by fixed probe order",
            key,
            holders,
            holders[0] or "top-level",
        )


def parse_config(path: str | Path) -> list[Entry]:
    """Parse ``path`` into entries covering the whole catalog.

    Every catalog key yields exactly one entry: enabled with the file's
    value when some probe section sets it, otherwise disabled at the
    catalog default. Keys the catalog does not know are appended as
    enabled, schema-less entries in first-seen order.

    Args:
        path: Config file to read.

    Returns:
        Entries in catalog order followed by custom entries.

    Raises:
        ConfigOpenError: The file exists but could not be read.

    """
    path = Path(path)
    tables = _read_tables(path)
    if tables is None:
        return default_entries()

    entries: list[Entry] = []
    for schema in all_schemas():
        value = _probe(tables, schema.key)
        if value is None:
            entries.append(
                Entry(key=schema.key, value=schema.default, schema=schema, enabled=False)
            )
            continue
        _log_shadowed(tables, schema.key)
        entries.append(Entry(key=schema.key, value=value, schema=schema, enabled=True))

    known = {entry.key for entry in entries}
    for section in PROBE_SECTIONS:
        for key in tables.get(section, {}):
            if key in known:
                continue
            known.add(key)
            value = _probe(tables, key)
            entries.append(Entry(key=key, value=value or "", schema=None, enabled=True))

    logger.info(
        "Parsed %s: %d options set, %d custom",
        path,
        sum(1 for entry in entries if entry.enabled),
        sum(1 for entry in entries if entry.schema is None),
    )
    return entries
