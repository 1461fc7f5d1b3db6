"""Application constants and paths for Logoff Cleanup."""

from pathlib import Path

# Log paths
LOGS_DIR = Path("C:\\Temp")
CLEANUP_LOG_FILE = LOGS_DIR / "CleanupLog.txt"
DEBUG_LOG_FILE = LOGS_DIR / "CleanupDebug.log"

# Debug log rotation (the persistent cleanup log is never rotated)
DEBUG_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEBUG_LOG_BACKUP_COUNT = 3

# Environment overrides
ENV_LOG_FILE = "AUTOCLEANUP_LOG_FILE"
ENV_DEBUG_LOG_FILE = "AUTOCLEANUP_DEBUG_LOG_FILE"
ENV_DEBUG = "AUTOCLEANUP_DEBUG"

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})
FALSY_VALUES = frozenset({"", "0", "false", "no", "off"})

# Downloads folder name under the user profile
DOWNLOADS_FOLDER_NAME = "Downloads"

# Entries removed from each browser's default profile
PROFILE_TARGETS = ("Cache", "Code Cache", "History", "Cookies")

# Windows error codes treated as "file in use"
ERROR_SHARING_VIOLATION = 32
ERROR_LOCK_VIOLATION = 33
