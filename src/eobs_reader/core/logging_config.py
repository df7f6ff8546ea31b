"""
E-OBS Reader Logging Configuration

Every module of the package logs through a child of the ``eobs_reader``
logger obtained from get_logger. Nothing is printed until the application
configures a handler, either through setup_logging or through the standard
logging module.

What is logged:
- INFO: the OPeNDAP URL or file being loaded
- DEBUG: index ranges, dataset open/close and row counts after every stage
- WARNING: unrecognised time units and non-daily time axes
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = 'eobs_reader'

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LevelSetting = Union[int, str]


def _resolve_level(level: LevelSetting, fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the logger of a package module.

    Args:
        name: Module path relative to the package, e.g. 'io.grid_reader'.
            A name that already starts with the package name is used as is.
            None returns the package logger itself.

    Returns:
        logging.Logger: Logger instance
    """
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{PACKAGE_LOGGER}.{name}')


def setup_logging(
    level: LevelSetting = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None
) -> logging.Logger:
    """
    Send package log records to stdout and optionally to a file.

    Replaces any handler installed by an earlier call and stops records from
    also reaching the root logger.

    Args:
        level: Logging level name or constant
        log_file: Optional path of a log file; parent directories are created
        format_string: Record format, DEFAULT_FORMAT if omitted
        date_format: Timestamp format, DEFAULT_DATE_FORMAT if omitted

    Returns:
        logging.Logger: The package logger

    Examples:
        # Show which URL or file is read
        >>> setup_logging()

        # Follow index ranges and row counts through the pipeline
        >>> setup_logging(level='DEBUG', log_file='eobs_import.log')
    """
    level = _resolve_level(level, logging.INFO)
    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT, datefmt=date_format or DEFAULT_DATE_FORMAT
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logger = get_logger()
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    if log_file:
        logger.info("Logging to file: %s", log_file)
    return logger


def set_log_level(level: LevelSetting) -> None:
    """
    Change the level of the package logger and its handlers.

    Examples:
        >>> set_log_level('DEBUG')
    """
    level = _resolve_level(level, logging.WARNING)
    logger = get_logger()
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


# Silent by default; warnings pass once the application adds a handler
_package_logger = get_logger()
if not _package_logger.handlers:
    _package_logger.addHandler(logging.NullHandler())
_package_logger.setLevel(logging.WARNING)
