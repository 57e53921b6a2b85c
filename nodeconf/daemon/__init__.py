"""Node daemon process helpers."""

from __future__ import annotations

from nodeconf.daemon.liveness import LivenessProbe, NodeStatus, resolve_pid_path

__all__ = ["LivenessProbe", "NodeStatus", "resolve_pid_path"]
