"""Centralized logging configuration for the tokensale application.

Configures the root logger with a console handler on stderr (stdout carries
command output) and an optional size-rotated log file. Chatty third-party
loggers are capped so that SMTP sessions do not flood a debug run.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional

DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_MAX_BYTES = 1024 * 1024
DEFAULT_BACKUP_COUNT = 3

# Libraries whose DEBUG/INFO output is protocol chatter, not application events.
QUIET_LOGGERS = ("aiosmtplib", "asyncio")


def resolve_level(level_name: str) -> int:
    """Maps a level name from config ('debug', 'INFO', ...) to a logging level."""
    return getattr(logging, str(level_name).upper(), DEFAULT_LOG_LEVEL)


def quiet_loggers(names: Iterable[str] = QUIET_LOGGERS, level: int = logging.WARNING) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> None:
    """Configures the root logger for the application.

    Args:
        log_level: The minimum logging level (e.g., logging.DEBUG, logging.INFO).
        log_format: The format string for log messages.
        log_file: Optional path of a log file, rotated once it reaches `max_bytes`.
        max_bytes: Size at which the log file is rotated.
        backup_count: Number of rotated files kept next to `log_file`.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = RotatingFileHandler(
                log_file, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logging.info(f"Logging to file: {log_file}")
        except OSError as e:
            logging.error(f"Failed to set up file logging to {log_file}: {e}", exc_info=True)

    quiet_loggers(level=max(log_level, logging.WARNING))
    logging.debug(f"Logging configured. Level={logging.getLevelName(log_level)}")
