"""
Package logging.

Only the `santos_lineup` logger owns a handler; module loggers are its children
and propagate to it, so `set_level()` changes the whole pipeline at once.
"""
import logging

import colorama

from . import config

PACKAGE_LOGGER = "santos_lineup"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

colorama.just_fix_windows_console()


class ColorFormatter(logging.Formatter):
    """Colours the level name; plain text when the stream is not a terminal."""

    COLORS = {
        "DEBUG": colorama.Fore.CYAN,
        "INFO": colorama.Fore.GREEN,
        "WARNING": colorama.Fore.YELLOW,
        "ERROR": colorama.Fore.RED,
        "CRITICAL": colorama.Fore.MAGENTA,
    }

    def __init__(self, fmt=LOG_FORMAT, datefmt=DATE_FORMAT, use_color=True):
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        if not self.use_color:
            return super().format(record)
        # other handlers (pytest's caplog among them) must see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, colorama.Fore.WHITE)
        record.levelname = f"{color}{record.levelname}{colorama.Style.RESET_ALL}"
        return super().format(record)


def package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        isatty = getattr(handler.stream, "isatty", None)
        handler.setFormatter(ColorFormatter(use_color=bool(isatty and isatty())))
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL)
    return logger


def get_logger(name) -> logging.Logger:
    """Logger for a module of this package, e.g. `get_logger(__name__)`."""
    package_logger()
    return logging.getLogger(name)


def set_level(level):
    """Used by the CLI `--verbose` flag."""
    package_logger().setLevel(level)
