# logger_utils.py - logging setup and block timing

import logging
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# file lines look like: [YYYY-MM-DD HH:MM:SS] INFO    | message
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "cooccur_trie"


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.
    Console output goes to stderr through rich so it never mixes with
    report lines on stdout. `log_file` adds a plain-text file handler.
    Calling again replaces the previous handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.propagate = False
    if logger.handlers:
        logger.handlers.clear()

    lvl = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(lvl)

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(lvl)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(lvl)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


class Log:
    """Helpers shared by the core modules."""

    @staticmethod
    def time_block(label, logger: Optional[logging.Logger] = None):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("frequency pass"):
                do_some_work()
        The duration is logged at DEBUG when the block exits.
        """
        return _Timer(label, logger or logging.getLogger(PACKAGE_LOGGER))


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label, logger):
        self.label = label
        self.logger = logger
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.logger.debug("%s done in %.3fs", self.label, self.elapsed)
