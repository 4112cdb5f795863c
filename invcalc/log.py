"""Logging setup for InvCalc entry points.

Library modules only create loggers with ``logging.getLogger(__name__)``;
applications (the CLI, notebooks) call `setup_logging` once.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

__all__ = [
    "StructuredFormatter",
    "setup_logging",
    "get_logger",
]

_ROOT = "invcalc"


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
        line = f"{ts} level={record.levelname} logger={record.name} msg={record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str = "WARNING") -> None:
    lvl = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(_ROOT)
    logger.setLevel(lvl)

    # Replace handlers (avoid duplicate logs on repeated CLI invocations)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(lvl)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
