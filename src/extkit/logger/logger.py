"""Global logger configuration for the extkit package.

The package logger ``extkit`` owns the stdout handler. Modules log through
children obtained from :func:`get_logger`, which inherit its level and
handler and never reach the root logger.
"""

import logging
import sys

from extkit.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

PACKAGE_LOGGER_NAME = "extkit"


def setup_logger(
    name: str = PACKAGE_LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name, usually the package name.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            ``settings.LOG_LEVEL``, which is read from ``LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Our handler carries the logger name; others may be attached by the host
    if not any(handler.get_name() == name for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(name)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Return the logger a module should use.

    Args:
        module_name: Usually ``__name__``. Names inside the package, such as
            ``"extkit.text.strings"``, are used as they are; anything else is
            nested under the package logger.

    Returns:
        A logger whose records are handled by the package logger.
    """
    if module_name == PACKAGE_LOGGER_NAME or module_name.startswith(
        f"{PACKAGE_LOGGER_NAME}."
    ):
        return logging.getLogger(module_name)
    return logger.getChild(module_name)


# Shared logger instance for the package
logger = setup_logger()
