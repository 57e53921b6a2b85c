"""Pydantic models for nodeconf's own settings."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class KeyBindings(BaseModel):
    """Key names (as reported by the terminal toolkit) for each action."""

    quit: list[str] = Field(default_factory=lambda: ["q"], description="Leave the editor")
    confirm: list[str] = Field(
        default_factory=lambda: ["enter"], description="Open, toggle or commit"
    )
    cancel: list[str] = Field(
        default_factory=lambda: ["escape"], description="Go back one screen"
    )
    up: list[str] = Field(default_factory=lambda: ["up", "k"], description="Move up")
    down: list[str] = Field(default_factory=lambda: ["down", "j"], description="Move down")
    next_section: list[str] = Field(
        default_factory=lambda: ["tab", "right"], description="Next section"
    )
    prev_section: list[str] = Field(
        default_factory=lambda: ["shift+tab", "left"], description="Previous section"
    )
    toggle: list[str] = Field(
        default_factory=lambda: ["space"], description="Enable or disable an option"
    )
    save: list[str] = Field(default_factory=lambda: ["ctrl+s"], description="Save file")
    backspace: list[str] = Field(
        default_factory=lambda: ["backspace"], description="Delete last character"
    )

    @field_validator("*")
    @classmethod
    def _non_empty(cls, value: list[str]) -> list[str]:
        keys = [key.strip() for key in value if key.strip()]
        if not keys:
            msg = "each action needs at least one key"
            raise ValueError(msg)
        return keys


class EditorSettings(BaseModel):
    """Settings for the editor itself (not the daemon's config file)."""

    start_directory: str | None = Field(
        default=None,
        description="Directory the file browser opens in (default: current directory)",
    )
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    log_file: str | None = Field(default=None, description="Log file path")
    structured_logging: bool = Field(
        default=False, description="Write the log file as JSON lines"
    )
    keys: KeyBindings = Field(default_factory=KeyBindings, description="Key bindings")
