"""
Logging Configuration and Utilities

Every config-complete module logs to a child of the "config_complete"
logger obtained through get_logger(). The library never installs handlers
itself; applications that want its scan and resolution messages call
setup_logging() once.

Author: config-complete Project
License: MIT
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from pythonjsonlogger import jsonlogger
from typing import List, Optional

ROOT_LOGGER_NAME = "config_complete"

CONSOLE_FORMAT = '[%(asctime)s] %(levelname)s - %(name)s - %(message)s'
FILE_FORMAT = '[%(asctime)s] %(levelname)s - %(name)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
JSON_CONSOLE_FIELDS = '%(asctime)s %(name)s %(levelname)s %(message)s'
JSON_FILE_FIELDS = '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(lineno)d %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Console formatter coloring the level name."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        plain = record.levelname
        color = self.COLORS.get(plain)
        if color:
            record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # the record is shared with the file handler
            record.levelname = plain


def resolve_level(log_level: str) -> int:
    """
    Convert a level name to its numeric value.

    Raises:
        ValueError: If the name is not a logging level
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def console_formatter(json_format: bool = False) -> logging.Formatter:
    if json_format:
        return jsonlogger.JsonFormatter(JSON_CONSOLE_FIELDS)
    return ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT)


def file_formatter(json_format: bool = False) -> logging.Formatter:
    if json_format:
        return jsonlogger.JsonFormatter(JSON_FILE_FIELDS)
    return logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT)


def _build_handlers(
    json_format: bool,
    log_file_path: Optional[str],
    log_rotation_size: int,
    log_retention_count: int
) -> List[logging.Handler]:
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(console_formatter(json_format))
    handlers: List[logging.Handler] = [console]

    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(
            log_file_path,
            maxBytes=log_rotation_size,
            backupCount=log_retention_count,
            encoding='utf-8'
        )
        rotating.setFormatter(file_formatter(json_format))
        handlers.append(rotating)

    return handlers


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_file_path: Optional[str] = None,
    log_rotation_size: int = 10485760,  # 10MB
    log_retention_count: int = 5,
    json_format: bool = False
) -> logging.Logger:
    """
    Attach console and optional rotating-file handlers to the
    config_complete logger, replacing any handlers from a previous call.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Also write to log_file_path
        log_file_path: Log file location, required with log_to_file
        log_rotation_size: Max log file size before rotation (bytes)
        log_retention_count: Number of rotated files to keep
        json_format: Emit JSON records instead of text lines

    Returns:
        The configured config_complete logger

    Raises:
        ValueError: If the level is unknown or file logging lacks a path
    """
    level = resolve_level(log_level)
    if log_to_file and not log_file_path:
        raise ValueError("log_file_path is required when log_to_file is enabled")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers = _build_handlers(
        json_format,
        log_file_path if log_to_file else None,
        log_rotation_size,
        log_retention_count
    )
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    logger.debug(f"config_complete logging at {logging.getLevelName(level)}, {len(handlers)} handler(s)")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get the logger of a module.

    Names already inside the config_complete hierarchy (module __name__)
    are used as-is; any other name is nested under it.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
