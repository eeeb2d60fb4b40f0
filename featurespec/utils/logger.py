"""Logging setup shared by all featurespec modules"""
import logging
import os
import sys
from typing import Optional

from colorama import Fore, Style, init as colorama_init

colorama_init()

LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name"""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno, '')
        original = record.levelname
        record.levelname = f"{color}{original}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Create (or fetch) a logger with a colored console handler"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(handler)
        logger.propagate = False

    level = level or os.environ.get('FEATURESPEC_LOG_LEVEL', 'INFO')
    logger.setLevel(level.upper())
    return logger


def set_level(level: str):
    """Change the level of every featurespec logger"""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (name.split('.')[0] in ('featurespec', 'run', '__main__')):
            logger.setLevel(level.upper())
