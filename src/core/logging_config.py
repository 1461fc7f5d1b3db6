"""Logging configuration for Logoff Cleanup.

Two channels are kept apart:
1. Debug log: the standard logging tree, rotating file plus optional console
2. Cleanup log: the persistent plain-text file read by administrators,
   appended one line at a time and never rotated
"""

from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable

from .constants import (
    CLEANUP_LOG_FILE,
    DEBUG_LOG_FILE,
    DEBUG_LOG_BACKUP_COUNT,
    DEBUG_LOG_MAX_BYTES,
)

logger = logging.getLogger(__name__)

# Format strings
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug_log_file: Path | None = None, debug_mode: bool = False) -> None:
    """
    Configure the debug logging channel.

    Args:
        debug_log_file: Rotating debug log path. Defaults to DEBUG_LOG_FILE.
        debug_mode: If True, also output DEBUG to console
    """
    debug_log_file = Path(debug_log_file or DEBUG_LOG_FILE)
    debug_log_file.parent.mkdir(parents=True, exist_ok=True)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    debug_handler = RotatingFileHandler(
        debug_log_file,
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    root_logger.addHandler(debug_handler)

    # Console handler (only in debug mode)
    if debug_mode:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        root_logger.addHandler(console_handler)


def format_timestamp(moment: datetime) -> str:
    """
    Format a timestamp for the cleanup log.

    Month, day and hour are not zero padded: "10/9/2026 5:05:09 PM".
    """
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year} {hour}:{moment:%M:%S} {meridiem}"


class PersistentLog:
    """Append-only cleanup log, opened and closed on every write."""

    def __init__(
        self,
        log_file: Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize the PersistentLog.

        Args:
            log_file: Path to the log file. Defaults to CLEANUP_LOG_FILE.
            clock: Source of the current local time
        """
        self.log_file = Path(log_file or CLEANUP_LOG_FILE)
        self._clock = clock

    def ensure_directory(self) -> None:
        """Create the log directory if it doesn't exist."""
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def append(self, message: str) -> str:
        """
        Append "{message} at {timestamp}" as one line.

        Returns:
            The line written, including the trailing newline
        """
        line = f"{message} at {format_timestamp(self._clock())}\n"
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(line)
        logger.info("Cleanup log: %s", line.rstrip("\n"))
        return line

