"""File lock detection for Logoff Cleanup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import psutil

from src.core.constants import ERROR_LOCK_VIOLATION, ERROR_SHARING_VIOLATION
from src.scanner.browser_paths import CLEANUP_BROWSERS, BrowserConfig

logger = logging.getLogger(__name__)

LOCK_ERROR_CODES = frozenset({ERROR_SHARING_VIOLATION, ERROR_LOCK_VIOLATION})


def is_lock_error(exc: BaseException) -> bool:
    """
    Decide whether a delete failure is a locking-style I/O error.

    Sharing and lock violations count as locked. Any other PermissionError is
    an access problem, not a lock. The remaining OSErrors (busy, not empty,
    vanished mid-delete) are transient I/O failures and are treated like locks.

    Args:
        exc: Exception raised by the delete

    Returns:
        True if the failure should only reach the debug channel
    """
    if not isinstance(exc, OSError):
        return False
    if isinstance(exc, PermissionError):
        return getattr(exc, "winerror", None) in LOCK_ERROR_CODES
    return True


@dataclass
class LockReport:
    """Processes suspected of holding a locked target."""

    path: Path
    blocking_processes: list[str] = field(default_factory=list)

    def describe(self) -> str:
        """Return a short description of what holds the path."""
        if not self.blocking_processes:
            return "unknown process"
        return ", ".join(self.blocking_processes)


class LockResolver:
    """Finds running browser processes that may be holding a target open."""

    def __init__(self, browsers: tuple[BrowserConfig, ...] = CLEANUP_BROWSERS) -> None:
        """
        Initialize the LockResolver.

        Args:
            browsers: Browsers whose processes are looked for
        """
        self.browsers = browsers

    def get_running_browsers(self) -> set[str]:
        """
        Get the set of currently running browser executables.

        Returns:
            Set of browser executable names (e.g., {"chrome.exe", "msedge.exe"})
        """
        browsers = set()
        browser_names = {browser.executable_name.lower() for browser in self.browsers}

        try:
            for proc in psutil.process_iter(["name"]):
                try:
                    name = proc.info["name"]
                    if name and name.lower() in browser_names:
                        browsers.add(name.lower())
                except (psutil.NoSuchProcess, psutil.AccessDenied):
                    continue
        except Exception as e:
            logger.warning("Error enumerating processes: %s", e)

        return browsers

    def find_blocking_processes(self, path: Path) -> list[str]:
        """
        Find browser processes likely blocking a path.

        A path inside a browser's user data is blamed on that browser only.
        Anything else, such as a file still being downloaded, may be held by
        any running browser.

        Args:
            path: The locked target

        Returns:
            Sorted list of browser executable names that may be blocking
        """
        running = self.get_running_browsers()

        for browser in self.browsers:
            if browser.owns(path):
                exe = browser.executable_name.lower()
                return [exe] if exe in running else []

        # Unknown owner - report all running browsers
        return sorted(running)

    def report(self, path: Path) -> LockReport:
        """Build a LockReport for a path that failed to delete as locked."""
        return LockReport(
            path=path,
            blocking_processes=self.find_blocking_processes(path),
        )
