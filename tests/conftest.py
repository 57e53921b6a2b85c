"""Pytest configuration and shared fixtures for nodeconf tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register all project markers to avoid warnings when ini isn't loaded."""
    markers = [
        ("asyncio", "marks tests as async (deselect with '-m \"not asyncio\"')"),
        ("unit", "marks tests as unit tests"),
        ("config", "marks tests as config model tests"),
        ("interface", "marks tests as terminal interface tests"),
        ("daemon", "marks tests as daemon probe tests"),
        ("cli", "marks tests as CLI tests"),
    ]
    for name, desc in markers:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    """Keep the operator's environment out of settings tests."""
    for var in (
        "NODECONF_START_DIR",
        "NODECONF_LOG_LEVEL",
        "NODECONF_LOG_FILE",
        "NODECONF_STRUCTURED_LOGGING",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Clean up logging handlers after each test to prevent closed file errors."""
    yield
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        logger = logging.getLogger(logger_name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)


@pytest.fixture
def write_config(tmp_path):
    """Write a bitcoin.conf style file under tmp_path and return its path."""

    def _write(text: str, name: str = "bitcoin.conf") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
