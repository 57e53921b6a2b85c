#!/usr/bin/env python3
"""Allow ``python -m nodeconf``."""

from __future__ import annotations

from nodeconf.cli.main import main

if __name__ == "__main__":
    main()
