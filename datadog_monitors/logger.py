"""Logging setup for applications built on datadog_monitors.

The library itself only creates module loggers and never configures
handlers. Scripts and services that use it call `setup_logging()` once at
startup to get timestamped output on stderr; the transport's per-request
DEBUG lines appear when `LOG_LEVEL=DEBUG`.
"""
from __future__ import annotations

import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name such as "DEBUG"; defaults to `LOG_LEVEL` or INFO.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    resolved = logging.getLevelName(level_name)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolved)

    # requests logs every new connection at DEBUG through urllib3
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["setup_logging"]
