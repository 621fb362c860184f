"""Process-wide logging setup."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

_handler: logging.Handler | None = None


def init() -> logging.Handler:
    """Log text lines with full timestamps to stderr at INFO level.

    Calling it again reuses the same handler rather than adding another.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, TIMESTAMP_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.setLevel(logging.INFO)
    return _handler