"""Shared pytest fixtures for Logoff Cleanup tests."""

import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.core.config import CleanupConfig
from src.core.constants import PROFILE_TARGETS
from src.core.logging_config import PersistentLog
from src.execution.cleaner import Cleaner
from src.execution.lock_resolver import LockReport, LockResolver
from src.scanner.browser_paths import BrowserConfig
from src.scanner.special_folders import SpecialFolder, mapping_resolver

FIXED_NOW = datetime(2026, 10, 19, 17, 5, 9)
FIXED_TIMESTAMP = "10/19/2026 5:05:09 PM"


class RecordingLog(PersistentLog):
    """PersistentLog that can read back what it wrote."""

    def read_lines(self) -> list[str]:
        """Return the log's lines, or an empty list before the first append."""
        if not self.log_file.exists():
            return []
        return self.log_file.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def fixed_timestamp():
    """Timestamp text produced by the fixed test clock."""
    return FIXED_TIMESTAMP


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def user_profile(temp_dir):
    """Return a fake user profile directory."""
    path = temp_dir / "Users" / "test"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def local_app_data(user_profile):
    """Return a fake local application data directory."""
    path = user_profile / "AppData" / "Local"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def folder_resolver(user_profile, local_app_data):
    """Resolve special folders into the temporary layout."""
    return mapping_resolver({
        SpecialFolder.USER_PROFILE: user_profile,
        SpecialFolder.LOCAL_APPLICATION_DATA: local_app_data,
    })


@pytest.fixture
def cleanup_config(temp_dir):
    """Configuration writing both logs under the temporary directory."""
    return CleanupConfig(
        log_file=temp_dir / "Temp" / "CleanupLog.txt",
        debug_log_file=temp_dir / "Temp" / "CleanupDebug.log",
    )


@pytest.fixture
def cleanup_log(cleanup_config):
    """Persistent log with a fixed clock."""
    return RecordingLog(cleanup_config.log_file, clock=lambda: FIXED_NOW)


@pytest.fixture
def lock_resolver():
    """LockResolver that never touches the process table."""
    resolver = MagicMock(spec=LockResolver)
    resolver.report.side_effect = lambda path: LockReport(path=path, blocking_processes=["msedge.exe"])
    return resolver


@pytest.fixture
def cleaner(cleanup_config, folder_resolver, cleanup_log, lock_resolver):
    """Cleaner wired entirely to the temporary layout."""
    return Cleaner(
        config=cleanup_config,
        resolve_folder=folder_resolver,
        cleanup_log=cleanup_log,
        lock_resolver=lock_resolver,
    )


@pytest.fixture
def make_profile(local_app_data):
    """
    Factory creating a browser's default profile.

    Cache and Code Cache are created as directories with content; History and
    Cookies as files. Pass targets to create only some of them.
    """

    def _make(browser: BrowserConfig, targets=PROFILE_TARGETS) -> Path:
        profile = browser.default_profile_path(local_app_data)
        profile.mkdir(parents=True)
        for name in targets:
            target = profile / name
            if name in ("Cache", "Code Cache"):
                (target / "Cache_Data").mkdir(parents=True)
                (target / "Cache_Data" / "data_0").write_bytes(b"\x00" * 64)
                (target / "index").write_bytes(b"index")
            else:
                target.write_bytes(b"SQLite format 3\x00")
        # Entries outside the target list must survive
        (profile / "Preferences").write_text("{}")
        return profile

    return _make

