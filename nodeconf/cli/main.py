"""The ``nodeconf`` command.

Loads the editor settings, configures logging and runs the terminal
interface until the operator quits.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from nodeconf import __version__
from nodeconf.exceptions import ConfigurationError
from nodeconf.interface.app import run_editor
from nodeconf.interface.explorer import FileExplorer
from nodeconf.interface.navigation import Navigator
from nodeconf.logging_config import get_logger, log_exception, setup_logging
from nodeconf.models import LogLevel
from nodeconf.settings import load_settings

logger = get_logger(__name__)
console = Console(stderr=True)


def build_navigator(
    settings_file: str | None = None,
    start_dir: str | None = None,
    log_level: str | None = None,
) -> Navigator:
    """Load settings, set up logging and build the navigator they describe.

    Raises:
        ConfigurationError: Settings could not be loaded.
        OSError: The log file could not be created.

    """
    manager = load_settings(
        settings_file, start_directory=start_dir, log_level=log_level
    )
    setup_logging(manager.settings)
    logger.debug("Settings loaded from %s", manager.settings_file or "defaults")
    return Navigator(
        explorer=FileExplorer(manager.start_directory),
        bindings=manager.settings.keys,
    )


@click.command()
@click.argument(
    "config_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--settings",
    "-s",
    "settings_file",
    type=click.Path(dir_okay=False),
    help="Editor settings file (TOML)",
)
@click.option(
    "--start-dir",
    "-d",
    type=click.Path(file_okay=False),
    help="Directory the file browser opens in",
)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel], case_sensitive=False),
    help="Log level",
)
@click.version_option(__version__, prog_name="nodeconf")
def main(
    config_file: Path | None,
    settings_file: str | None,
    start_dir: str | None,
    log_level: str | None,
) -> None:
    """Browse and edit a bitcoin.conf style daemon configuration file."""
    try:
        navigator = build_navigator(
            settings_file,
            start_dir,
            log_level.upper() if log_level else None,
        )
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e.message}")
        raise SystemExit(1) from e
    except OSError as e:
        console.print(f"[red]Cannot set up logging:[/red] {e}")
        raise SystemExit(1) from e

    if config_file is not None:
        navigator.open_file(config_file)

    try:
        run_editor(navigator)
    except Exception as e:
        log_exception(logger, e, "Editor crashed")
        raise
    logger.info("Editor closed")


if __name__ == "__main__":
    main()
