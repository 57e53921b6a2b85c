"""Editor settings loading.

Settings are layered defaults → TOML file → environment → CLI overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
from pydantic import ValidationError

from nodeconf.exceptions import ConfigurationError
from nodeconf.logging_config import get_logger
from nodeconf.models import EditorSettings

logger = get_logger(__name__)

SETTINGS_FILENAME = "nodeconf.toml"

# Mapping of environment variables to settings fields
ENV_MAPPINGS: dict[str, str] = {
    "NODECONF_START_DIR": "start_directory",
    "NODECONF_LOG_LEVEL": "log_level",
    "NODECONF_LOG_FILE": "log_file",
    "NODECONF_STRUCTURED_LOGGING": "structured_logging",
}


def _parse_env_value(raw: str, field: str) -> Any:
    if field == "structured_logging":
        low = raw.strip().lower()
        if low in {"true", "1", "yes", "on"}:
            return True
        if low in {"false", "0", "no", "off"}:
            return False
    if field == "log_level":
        return raw.strip().upper()
    return raw


class SettingsManager:
    """Loads and validates :class:`EditorSettings`."""

    def __init__(
        self,
        settings_file: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ):
        """Initialize settings manager.

        Args:
            settings_file: Explicit TOML file. It must exist and parse; when
                None, the standard locations are searched.
            overrides: Values that win over file and environment (CLI options).

        Raises:
            ConfigurationError: The settings could not be read or are invalid.

        """
        self._explicit = settings_file is not None
        self.settings_file = self._find_settings_file(settings_file)
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self.settings = self._load_settings()

    def _find_settings_file(self, settings_file: str | Path | None) -> Path | None:
        """Find the settings file in standard locations."""
        if settings_file:
            return Path(settings_file).expanduser()

        search_paths = [
            Path.cwd() / SETTINGS_FILENAME,
            Path.home() / ".config" / "nodeconf" / SETTINGS_FILENAME,
            Path.home() / f".{SETTINGS_FILENAME}",
        ]
        for path in search_paths:
            if path.exists():
                return path
        return None

    def _read_file(self) -> dict[str, Any]:
        if self.settings_file is None:
            return {}
        if not self.settings_file.exists():
            if self._explicit:
                msg = f"Settings file not found: {self.settings_file}"
                raise ConfigurationError(msg)
            return {}

        try:
            with open(self.settings_file, encoding="utf-8") as f:
                return toml.load(f)
        except (OSError, toml.TomlDecodeError) as e:
            if self._explicit:
                msg = f"Failed to load settings file {self.settings_file}: {e}"
                raise ConfigurationError(msg) from e
            logger.warning("Failed to load settings file %s: %s", self.settings_file, e)
            return {}

    def _get_env_settings(self) -> dict[str, Any]:
        """Get settings from environment variables."""
        env_settings: dict[str, Any] = {}
        for env_var, field in ENV_MAPPINGS.items():
            raw = os.environ.get(env_var)
            if raw is not None and raw != "":
                env_settings[field] = _parse_env_value(raw, field)
        return env_settings

    def _merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Merge settings dictionaries recursively."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def _load_settings(self) -> EditorSettings:
        data = self._read_file()
        data = self._merge(data, self._get_env_settings())
        data = self._merge(data, self._overrides)
        try:
            return EditorSettings(**data)
        except ValidationError as e:
            msg = f"Invalid settings: {e}"
            raise ConfigurationError(msg) from e

    @property
    def start_directory(self) -> Path:
        """Directory the file browser opens in."""
        if self.settings.start_directory:
            return Path(self.settings.start_directory).expanduser()
        return Path.cwd()


def load_settings(
    settings_file: str | Path | None = None, **overrides: Any
) -> SettingsManager:
    """Load editor settings from file, environment and ``overrides``."""
    return SettingsManager(settings_file, overrides)
