"""Logging helpers for kbar."""

from __future__ import annotations

import logging
import sys
from typing import Literal

Verbosity = Literal["quiet", "normal", "verbose"]

_LEVEL_BY_VERBOSITY: dict[Verbosity, int] = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


def configure_logging(verbosity: Verbosity = "normal") -> None:
    """Configure root logging for the CLI session. Logs go to stderr, the bar to stdout."""

    level = _LEVEL_BY_VERBOSITY.get(verbosity, logging.INFO)
    logging.basicConfig(
        level=level,
        format="[%(levelname).1s] %(message)s",
        stream=sys.stderr,
        force=True,
    )
    logging.debug("Logging configured with level %s", logging.getLevelName(level))
