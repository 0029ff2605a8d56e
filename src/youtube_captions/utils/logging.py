import logging
import colorlog
from typing import Optional

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()

    logger = logging.getLogger(name)

    if log_level in LOG_LEVELS:
        logger.setLevel(LOG_LEVELS[log_level])
    else:
        logger.setLevel(logging.INFO)
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVELS.get(log_level, logging.INFO))

    formatter = colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

def get_log_level() -> str:
    """Get the log level from the package configuration (LOG_LEVEL by default)."""
    from ..core.config import config
    return config.logging.level.upper()

def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the specified name and log level.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    if log_level is None:
        log_level = get_log_level()

    return setup_logger(f"youtube_captions.{name}", log_level)
