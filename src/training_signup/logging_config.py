"""Logging setup: INFO/DEBUG on stdout, WARNING and above on stderr"""

import logging
import sys

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


class InfoFilter(logging.Filter):
    """Let through only records below WARNING"""

    def filter(self, record):
        return record.levelno < logging.WARNING


def _stream_handler(stream, level: int, only_below_warning: bool = False):
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    if only_below_warning:
        handler.addFilter(InfoFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(log_level: str | None = "INFO") -> int:
    """
    Install the stdout/stderr handlers on the root logger.

    Args:
        log_level: Level name from settings; unknown names mean INFO

    Returns:
        The numeric level applied to the root logger
    """
    level = getattr(logging, (log_level or "INFO").upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace, never stack, handlers when the app is built more than once
    root_logger.handlers.clear()
    root_logger.addHandler(_stream_handler(sys.stdout, logging.DEBUG, True))
    root_logger.addHandler(_stream_handler(sys.stderr, logging.WARNING))
    return level


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
