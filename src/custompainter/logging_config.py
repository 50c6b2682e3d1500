"""
Logging Configuration
Sets up the 'custompainter' logger. Paint events are logged at DEBUG level,
so run with LOG_LEVEL = logging.DEBUG in config.py to trace every redraw.
"""
import logging
import sys
from typing import Optional

import PySide6
from PySide6.QtCore import qVersion

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file (overwritten on each start).

    Returns:
        The configured 'custompainter' logger.
    """
    logger = logging.getLogger("custompainter")
    logger.setLevel(level)

    # Avoid duplicate handlers when called again (tests, restarts)
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized (PySide6 {PySide6.__version__}, Qt {qVersion()}).")
    return logger
