"""
Logging Configuration
Sets up the file logger for the application.
"""
import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: int = logging.DEBUG, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configures the logger for the 'mapscope' namespace.

    The terminal is owned by the viewer, so records only ever go to a file.
    Without a log file, records are discarded.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to write logs to.
    """
    logger = logging.getLogger("mapscope")
    logger.setLevel(level)
    logger.propagate = False

    # Avoid duplicate records when initialised twice
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    if log_file:
        # Format: Time - Module - Level - Message
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    else:
        logger.addHandler(logging.NullHandler())

    logger.info("Logging initialized.")
    return logger
