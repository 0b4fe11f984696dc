"""Logging setup for the hrportal access engine.

Components log under the ``hrportal`` namespace through ``get_logger``.
The application attaches handlers once, on the namespace root, with
``setup_logger``; component loggers propagate to it.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

LOGGER_PREFIX = "hrportal"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"  # ISO 8601
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def setup_logger(
    name: str = LOGGER_PREFIX,
    level: str = "INFO",
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """Attach console and optional file handlers to a namespaced logger.

    Args:
        name: Logger name; ``hrportal`` configures every component at once
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
        log_dir: Directory for a rotating ``<logger name>.log`` file;
            console only when None

    Returns:
        Configured logger instance. Repeated calls only update the level.
    """
    logger = get_logger(name)

    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(LOG_LEVELS)}"
        )
    logger.setLevel(level_name)

    if logger.handlers:
        return logger

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                directory / f"{logger.name}.log",
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
            )
        )

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a component logger, e.g. ``get_logger("navigation")``."""
    if name == LOGGER_PREFIX or name.startswith(f"{LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")
