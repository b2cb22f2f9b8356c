"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
import sys

from . import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging() -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    # Request lines are noise next to our own event logs.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
