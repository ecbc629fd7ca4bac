"""Logging for rediscache.

Modules take their logger from get_logger(__name__), so every cache logger
sits under the "rediscache" namespace. The library configures nothing on
import; an application opts in with setup_logging().
"""

import logging
import sys

from rediscache.core.config import get_settings

LOGGER_NAMESPACE = "rediscache"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | None = None) -> logging.Logger:
    """Attach a stdout handler to the "rediscache" logger.

    Level is DEBUG when settings.debug is True, otherwise INFO, unless
    level is given. Calling it again replaces the level and keeps a single
    handler.

    Args:
        level: Optional explicit logging level.

    Returns:
        The "rediscache" namespace logger.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(level)
    if not any(getattr(h, "_rediscache", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._rediscache = True
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name, under the rediscache namespace.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    if name != LOGGER_NAMESPACE and not name.startswith(LOGGER_NAMESPACE + "."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)
