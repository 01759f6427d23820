"""Logging configuration shared by the CLI and the service."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).strip().upper(), logging.INFO)


def setup_logging(level: str | int = "INFO", stream: TextIO | None = None) -> None:
    """Install a single handler on the root logger.

    ``stream`` defaults to stdout.  The ``plan`` command passes stderr so
    log lines never mix with the JSON it prints.
    """
    numeric_level = _resolve_level(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    # Per-request access lines drown out core DEBUG output
    if numeric_level > logging.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
