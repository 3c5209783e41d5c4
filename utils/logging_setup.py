"""
Logging configuration for applications embedding the balancer.

Library modules only create loggers under the "scrim_balancer" namespace:
    logger = logging.getLogger("scrim_balancer.module_name")

Call setup_logging() once at application startup to attach a handler and
set the namespace level (LOG_LEVEL env var by default).
"""

import logging
import sys

from config import LOG_LEVEL

APP_LOGGER_NAME = "scrim_balancer"


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """
    Configure logging for the balancer namespace.

    - Root logger is set to WARNING (keeps third-party libraries quiet)
    - The "scrim_balancer" logger is set to `level` (LOG_LEVEL when None)

    Args:
        level: Logging level name or number for balancer modules

    Returns:
        The namespace logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    # Avoid adding duplicate handlers if setup is called multiple times
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root_logger.addHandler(handler)

    resolved = level if level is not None else LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(resolved)
    return app_logger
