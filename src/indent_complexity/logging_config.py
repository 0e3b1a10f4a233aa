"""
Logging configuration for indent-complexity.

The analysis core only logs at DEBUG under the ``indent_complexity`` logger.
setup_logging attaches handlers to that logger alone, so embedding
applications keep control of the root logger.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "indent_complexity"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_for(debug: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    debug: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route indent_complexity logs to stderr through rich, optionally to a file.

    Calling it again replaces the handlers from the previous call, so one
    process can run the CLI repeatedly (as the test runner does).

    Args:
        debug: Show DEBUG records (detected indent unit, line counts, scores)
        quiet: Only show errors; wins over ``debug``
        log_file: Also append plain-text records to this file

    Returns:
        The configured indent_complexity logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    level = _level_for(debug, quiet)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            level=level,
            markup=False,
            show_time=debug,
            show_path=debug,
            rich_tracebacks=True,
        )
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the indent_complexity namespace ('parser' -> 'indent_complexity.parser')."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
