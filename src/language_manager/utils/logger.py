"""
Logging setup - Colored console output for the language_manager logger
"""
import logging
from typing import Union

from colorama import Fore, Style, just_fix_windows_console

LOGGER_NAME = "language_manager"

_LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.RESET,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    """Formatter coloring the whole record by level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno, Fore.RESET)
        return f"{color}{message}{Style.RESET_ALL}"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Install a colored console handler on the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level (e.g. "DEBUG" or logging.DEBUG)

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(getattr(h, "_language_manager", False) for h in logger.handlers):
        just_fix_windows_console()
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter("[%(asctime)s] [%(levelname)-8s] %(name)s: %(message)s",
                                              datefmt="%Y-%m-%d %H:%M:%S"))
        handler._language_manager = True
        logger.addHandler(handler)

    return logger
