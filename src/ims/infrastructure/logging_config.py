"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Install one stderr handler on the root logger at ``level``.

    Calling it again replaces the previous handler instead of stacking.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
