"""
Logging Configuration
The library stays silent until an application opts in with `setup_logging`.
"""
import logging
import sys
from typing import Optional, Union

from cartesiangeometry.config import LOGGER_NAME, LOG_FORMAT, LOG_DATE_FORMAT


def install_null_handler() -> None:
    """
    Attach a NullHandler to the package logger.

    Called on package import so records are dropped, rather than printed by
    logging's last-resort handler, in applications without logging set up.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: '{level}'.")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'cartesiangeometry' namespace.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("debug").
        log_file: Optional path to save logs to a file.

    Raises:
        ValueError: If `level` is a name logging does not know.

    Returns:
        The configured package logger.
    """
    numeric_level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Replaces the NullHandler and any handlers from an earlier call
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(numeric_level)}.")
    return logger
