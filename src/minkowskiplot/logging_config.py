"""
Logging Configuration
Sets up the package logger for the plotter.

Every module logs through `logging.getLogger(__name__)`; only this module
attaches handlers, and only to the 'minkowskiplot' logger.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def parse_level(level: Union[int, str]) -> int:
    """
    Accept a numeric level or a level name ("debug", "INFO", ...).

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return value


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'minkowskiplot' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to also write logs to.

    Returns:
        The configured package logger.
    """
    level = parse_level(level)
    logger = logging.getLogger("minkowskiplot")
    logger.setLevel(level)

    # Calling this twice must not duplicate output
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
