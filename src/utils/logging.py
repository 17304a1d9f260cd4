"""Logging utilities built on top of :mod:`loguru`."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger


class LoguruBridgeHandler(logging.Handler):
    """Forward standard-library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        logger.opt(depth=6, exception=record.exc_info).log(record.levelname, record.getMessage())


def configure_logging(level: str = "INFO") -> None:
    """Configure loguru and route every stdlib logger through it."""

    logger.remove()
    # stdout carries command output (e.g. ``parse --json``); sys.stderr is looked up per message.
    logger.add(lambda msg: print(msg, end="", file=sys.stderr), level=level)
    logging.basicConfig(handlers=[LoguruBridgeHandler()], level=level, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a standard-library logger tied to loguru."""

    return logging.getLogger(name or __name__)
