"""Core module for Logoff Cleanup."""

from .config import CleanupConfig, ConfigError
from .logging_config import setup_logging, format_timestamp, PersistentLog
from .models import (
    ItemStatus,
    ItemResult,
    StepReport,
    CleanupReport,
)

__all__ = [
    # Config
    "CleanupConfig",
    "ConfigError",
    # Logging
    "setup_logging",
    "format_timestamp",
    "PersistentLog",
    # Models
    "ItemStatus",
    "ItemResult",
    "StepReport",
    "CleanupReport",
]
