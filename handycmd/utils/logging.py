# handycmd/utils/logging.py
"""
Logging configuration for handycmd.
"""
import sys
from typing import Optional
from pathlib import Path

from loguru import logger
from handycmd.constants import APP_NAME, LOG_DIR, LOG_FORMAT, LOG_ROTATION, LOG_RETENTION
from handycmd.utils.enhanced_logging import EnhancedLogger

# Dictionary to store enhanced logger instances
_enhanced_loggers = {}


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> None:
    """
    Configure the application logging.

    The console sink stays at WARNING unless debugging: the outcome reporter
    already prints one line per executed statement.

    Args:
        debug: Whether to enable debug logging.
        log_dir: Directory for the log files (defaults to LOG_DIR).
    """
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove default handlers
    logger.remove()
    logger.configure(extra={"name": APP_NAME})

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level="DEBUG" if debug else "WARNING",
        diagnose=debug,  # Include variable values in traceback if debug is True
    )

    log_file = log_dir / "handycmd.log"
    logger.add(
        log_file,
        format=LOG_FORMAT,
        level="DEBUG" if debug else "INFO",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        compression="zip",
    )

    # Structured JSON log, one record per line
    json_log_file = log_dir / "handycmd_structured.log"
    logger.add(
        json_log_file,
        serialize=True,
        level="INFO",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        compression="zip",
    )

    get_logger(__name__).debug(f"Logging initialized. Log files: {log_file}, {json_log_file}")


def get_logger(name: str = APP_NAME) -> EnhancedLogger:
    """
    Get a logger instance with the given name.

    Args:
        name: The name for the logger.

    Returns:
        An enhanced logger instance.
    """
    if name in _enhanced_loggers:
        return _enhanced_loggers[name]

    enhanced_logger = EnhancedLogger(name)
    _enhanced_loggers[name] = enhanced_logger

    return enhanced_logger
