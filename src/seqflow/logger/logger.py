"""Project-wide logging for seqflow.

Every module logs through a child of the ``seqflow`` logger so that a single
handler (and a single level, see :mod:`seqflow.core.config`) governs the whole
package.
"""

import logging
import sys

__all__ = ["logger", "setup_logger", "get_logger", "set_level"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "seqflow",
    level: str = "INFO",
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the root logger of the package.

    The stdout handler is attached once; calling this again returns the
    already configured logger untouched.

    Args:
        name: Logger name (typically project name)
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(handler)
        set_level(level, logger)
        logger.propagate = False

    return logger


def set_level(level: str, target: logging.Logger | None = None) -> None:
    """Set the level of ``target`` (the package logger by default)."""
    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    (target or logger).setLevel(resolved)


def get_logger(module: str) -> logging.Logger:
    """Return the child logger for a module, e.g. ``functional.transform``."""
    return logger.getChild(module.removeprefix("seqflow."))


logger = setup_logger()
