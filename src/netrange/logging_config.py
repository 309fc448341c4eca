"""
Logging configuration for netrange.

The range types only emit DEBUG records; handlers are attached by the
command-line tool or by applications calling setup_logging().

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_MAX_BYTES = 10485760  # 10MB
LOG_FILE_BACKUPS = 5
DEFAULT_LOG_PATH = Path.home() / ".netrange" / "logs" / "netrange.log"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the "netrange" logger, replacing any from a previous call.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path (defaults to ~/.netrange/logs/netrange.log)
        enable_console: Log to stderr
        enable_file: Log to a rotating file, always at DEBUG

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("netrange")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    # stdout is reserved for command output
    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logger.level)
        console_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if enable_file:
        log_path = Path(log_file) if log_file else DEFAULT_LOG_PATH
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-24s | %(funcName)-20s | '
                '%(lineno)-4d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module, e.g. get_logger(__name__)."""
    return logging.getLogger(name)
