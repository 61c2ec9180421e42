"""Package logger for combinax.

Only debug-level diagnostics are emitted (guard rejections, dispatch
tracing), so the default level keeps the library quiet.
"""

import logging
import sys

from .config import LOG_LEVEL

__all__ = ["logger", "setup_logger"]

_DEFAULT_FORMAT = "%(name)s [%(levelname)s] %(message)s"


def setup_logger(
    name: str = "combinax",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Attach a single stderr handler to ``name`` and return the logger.

    A logger that already has handlers is returned untouched. ``level``
    defaults to ``COMBINAX_LOG_LEVEL``; an unknown level name raises
    ``ValueError``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    resolved = logging.getLevelName((level or LOG_LEVEL).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level or LOG_LEVEL!r}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return logger


logger = setup_logger()
