"""Logging configuration shared by the CLI and the HTTP service."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = "INFO", generator_level: str | None = None) -> None:
    """Send all records to stdout at *level*.

    Seeding and restore events from ``fastrandom.systems`` are logged at
    DEBUG; pass *generator_level* to tune them separately from the rest of
    the application (for instance to keep them quiet under a DEBUG server).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    systems = logging.getLogger("fastrandom.systems")
    if generator_level is None:
        systems.setLevel(logging.NOTSET)
    else:
        systems.setLevel(getattr(logging, generator_level.upper(), numeric_level))
