"""Node daemon liveness probe.

Reads the pid file named by the loaded configuration and asks the OS
whether that process is alive.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import psutil

from nodeconf.exceptions import ProbeError
from nodeconf.logging_config import get_logger

if TYPE_CHECKING:
    from nodeconf.config.document import ConfigDocument

logger = get_logger(__name__)

# Largest pid accepted from a pid file
MAX_PID = 2147483647


class NodeStatus(str, Enum):
    """Result of a liveness check."""

    RUNNING = "Running"
    STOPPED = "Stopped"
    UNKNOWN = "Unknown"


def _configured(document: ConfigDocument, key: str) -> str | None:
    entry = document.get(key)
    if entry is None or not entry.enabled:
        return None
    value = entry.value.strip()
    return value or None


def resolve_pid_path(document: ConfigDocument) -> Path | None:
    """Return the pid file configured in ``document``.

    A relative pid path is resolved against the configured data directory,
    or against the directory holding the config file when no data
    directory is set. Returns None when no pid file is configured.
    """
    pid = _configured(document, "pid")
    if pid is None:
        return None

    pid_path = Path(pid).expanduser()
    if pid_path.is_absolute():
        return pid_path

    datadir = _configured(document, "datadir")
    base = Path(datadir).expanduser() if datadir else document.path.parent
    return base / pid_path


def read_pid(pid_file: Path) -> int:
    """Read a process id from ``pid_file``.

    Raises:
        ProbeError: The file is unreadable or does not hold a valid pid.

    """
    try:
        pid_text = pid_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        msg = f"Cannot read pid file {pid_file}: {e.strerror or e}"
        raise ProbeError(msg, {"path": str(pid_file)}) from e

    if not pid_text.isdigit():
        msg = f"PID file contains invalid data: {pid_text[:50]!r}"
        raise ProbeError(msg, {"path": str(pid_file)})

    pid = int(pid_text)
    if pid <= 0 or pid > MAX_PID:
        msg = f"PID file contains invalid PID: {pid}"
        raise ProbeError(msg, {"path": str(pid_file)})
    return pid


def is_process_running(pid: int) -> bool:
    """Check whether ``pid`` names a live (non-zombie) process.

    Raises:
        ProbeError: The process table could not be queried.

    """
    try:
        if not psutil.pid_exists(pid):
            return False
        return psutil.Process(pid).status() != psutil.STATUS_ZOMBIE
    except psutil.NoSuchProcess:
        return False
    except (psutil.Error, OSError) as e:
        msg = f"Cannot query process {pid}: {e}"
        raise ProbeError(msg, {"pid": pid}) from e


class LivenessProbe:
    """Checks whether the daemon configured by a document is running."""

    def check(self, document: ConfigDocument) -> NodeStatus:
        """Return the daemon status; never raises."""
        pid_file = resolve_pid_path(document)
        if pid_file is None:
            logger.debug("No pid file configured in %s", document.path)
            return NodeStatus.UNKNOWN
        if not pid_file.exists():
            logger.debug("Pid file %s does not exist", pid_file)
            return NodeStatus.UNKNOWN

        try:
            pid = read_pid(pid_file)
            running = is_process_running(pid)
        except ProbeError as e:
            logger.warning("Liveness probe failed: %s", e)
            return NodeStatus.UNKNOWN

        status = NodeStatus.RUNNING if running else NodeStatus.STOPPED
        logger.info("Daemon pid %d from %s is %s", pid, pid_file, status.value.lower())
        return status
