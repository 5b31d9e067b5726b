"""Logging utilities for CLI."""

import logging
import os
import sys


def setup_logging(log_level: str | None = None, log_file: str | None = "todosync.log") -> None:
    """
    Setup logging with configurable level.

    Priority: argument > TODOSYNC_LOG_LEVEL env var > default (WARNING)
    """
    if log_level is None:
        log_level = os.environ.get("TODOSYNC_LOG_LEVEL", "WARNING")

    level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    # File handler - always DEBUG level for file
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)

    # Console handler - configurable level
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    for logger_name in ["todosync", "aiohttp"]:
        log = logging.getLogger(logger_name)
        log.setLevel(logging.DEBUG)
        log.propagate = True
