"""Exception hierarchy for nodeconf.

Config-file problems that the editor can recover from are raised as
``DocumentError`` subclasses so the interface can show them to the
operator instead of dropping them.
"""

from __future__ import annotations

from typing import Any


class NodeConfError(Exception):
    """Base exception for all nodeconf errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize nodeconf error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ConfigurationError(NodeConfError):
    """Editor settings validation errors."""


class DocumentError(NodeConfError):
    """Errors reading or writing a daemon configuration file."""


class ConfigOpenError(DocumentError):
    """An existing configuration file could not be opened for editing."""


class ConfigSaveError(DocumentError):
    """A configuration file could not be written."""


class ProbeError(NodeConfError):
    """Daemon liveness could not be determined."""
