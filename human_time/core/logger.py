"""
Logging setup shared by the whole package.
Configuration comes from explicit arguments or HUMAN_TIME_LOG_* environment variables.
"""

import logging
import os
import sys
from typing import Optional


LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Shorter format for production use
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

PACKAGE_LOGGER = "human_time"

_configured = False


def setup_logging(
    level: str = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
):
    """
    Configure the package logger.

    Only the ``human_time`` logger is touched so embedding applications keep
    control of the root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. When None the value of
               HUMAN_TIME_LOG_LEVEL is used, defaulting to WARNING
        log_file: also write records to this file when given
        format_string: logging format string
        console_output: whether to log to stderr
    """
    global _configured

    if _configured:
        return

    if level is None:
        level = os.environ.get("HUMAN_TIME_LOG_LEVEL", "WARNING")

    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger, configuring the package defaults on first use.

    Args:
        name: logger name, usually ``__name__``

    Returns:
        logging.Logger: the logger
    """
    if not _configured:
        auto_setup()

    return logging.getLogger(name)


def set_module_log_level(module_name: str, level: str):
    """
    Set the level of a single module logger.

    Args:
        module_name: logger name
        level: level name
    """
    logger = logging.getLogger(module_name)
    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)
    logger.setLevel(log_level)


def disable_module_logging(module_name: str):
    """
    Silence a single module logger.

    Args:
        module_name: logger name
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(logging.CRITICAL + 1)


def auto_setup():
    """
    Configure logging from the environment.

    Environment variables:
        HUMAN_TIME_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
        HUMAN_TIME_LOG_FILE: log file path
        HUMAN_TIME_LOG_FORMAT: "default" or "simple"
    """
    log_level = os.environ.get("HUMAN_TIME_LOG_LEVEL", "WARNING")
    log_file = os.environ.get("HUMAN_TIME_LOG_FILE", None)
    log_format = os.environ.get("HUMAN_TIME_LOG_FORMAT", "default")

    format_string = SIMPLE_FORMAT if log_format == "simple" else DEFAULT_FORMAT

    setup_logging(level=log_level, log_file=log_file, format_string=format_string)
