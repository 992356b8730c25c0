"""Logging configuration for the CLI and scripts."""

from __future__ import annotations

import logging

from .config import AppConfig

LOGGER_NAME = "numeral_codec"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
FILE_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(module)s:%(lineno)d | "
    "%(funcName)s | %(message)s"
)


def _reset_handlers(logger: logging.Logger, *handlers: logging.Handler) -> None:
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for old in list(logger.handlers):
        logger.removeHandler(old)
        if old not in handlers:
            old.close()
    for handler in handlers:
        logger.addHandler(handler)


def _handler(handler: logging.Handler, level: str, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(config: AppConfig) -> logging.Logger:
    """Install console (and optionally file) handlers on the package logger.

    Safe to call repeatedly: previous handlers are detached and closed.
    With ``log_to_file`` on, ``warnings.warn`` output is captured to the same
    file through the ``py.warnings`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    console = _handler(logging.StreamHandler(), config.log_level, CONSOLE_FORMAT)
    if not config.log_to_file:
        _reset_handlers(logger, console)
        return logger

    log_file = _handler(
        logging.FileHandler(config.log_file, encoding="utf-8"),
        config.file_log_level,
        FILE_FORMAT,
    )
    _reset_handlers(logger, console, log_file)
    logging.captureWarnings(True)
    _reset_handlers(logging.getLogger("py.warnings"), log_file)
    return logger
