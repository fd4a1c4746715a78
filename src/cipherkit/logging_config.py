"""
Logging setup for the cipherkit command line.

Library modules only create loggers under the 'cipherkit' namespace; the CLI
calls setup_logging() once per invocation to decide where records go.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _remove_handlers(logger: logging.Logger) -> None:
    # close before removing so a previous --log-file is released
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Route cipherkit log records to stderr, and optionally to a file.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: threshold for the package logger and its handlers.
        log_file: path truncated and written with the same records.
    """
    logger = logging.getLogger("cipherkit")
    logger.setLevel(level)
    _remove_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", log_file or "stderr")
