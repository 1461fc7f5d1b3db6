"""Logoff cleanup routine.

Runs, in fixed order:
1. Ensure the cleanup log directory exists
2. Clear the Downloads folder
3. Clear cache, history and cookie entries of each browser's default profile
4. Append a success or critical failure line to the cleanup log

Each step contains its own failures; only an error that escapes every step
ends the run early, and even that is logged rather than raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from src.core.config import CleanupConfig
from src.core.constants import DOWNLOADS_FOLDER_NAME
from src.core.logging_config import PersistentLog
from src.core.models import CleanupReport, ItemResult, ItemStatus, StepReport
from src.execution.delete_executor import delete_path
from src.execution.lock_resolver import LockResolver
from src.scanner.browser_paths import BrowserConfig, profile_target_paths, resolve_profile_path
from src.scanner.special_folders import FolderResolver, SpecialFolder, resolve_special_folder

logger = logging.getLogger(__name__)

DOWNLOADS_STEP = "Downloads"


class Cleaner:
    """Deletes downloads and browser artifacts, recording failures in the cleanup log."""

    def __init__(
        self,
        config: CleanupConfig | None = None,
        resolve_folder: FolderResolver | None = None,
        cleanup_log: PersistentLog | None = None,
        lock_resolver: LockResolver | None = None,
    ) -> None:
        """
        Initialize the Cleaner.

        Args:
            config: Run settings. Defaults to CleanupConfig().
            resolve_folder: Special folder resolver. Defaults to the environment.
            cleanup_log: Persistent log writer. Defaults to config.log_file.
            lock_resolver: LockResolver instance. Creates new one if None.
        """
        self.config = config or CleanupConfig()
        self.resolve_folder = resolve_folder or resolve_special_folder
        self.cleanup_log = cleanup_log or PersistentLog(self.config.log_file)
        self.lock_resolver = lock_resolver or LockResolver(self.config.browsers)

    def run(self) -> CleanupReport:
        """
        Run the full cleanup.

        Returns:
            CleanupReport with the outcome of every step that ran
        """
        report = CleanupReport()

        try:
            self.cleanup_log.ensure_directory()

            downloads = self.clear_downloads()
            report.steps.append(downloads)
            self._record_downloads(downloads)

            for browser in self.config.browsers:
                step = self.clear_browser(browser)
                report.steps.append(step)
                self._record_browser(step)

            self.cleanup_log.append("Cleanup Succeeded")
        except Exception as e:
            report.critical_error = str(e) or type(e).__name__
            logger.exception("Cleanup aborted")
            try:
                self.cleanup_log.append(f"CRITICAL Cleanup Failure: {report.critical_error}")
            except OSError as log_error:
                logger.error("Could not write to %s: %s", self.cleanup_log.log_file, log_error)

        logger.debug("Cleanup report: %s", json.dumps(report.to_dict()))
        logger.info(
            "Cleanup finished: success=%s deleted=%d",
            report.success,
            report.total_deleted,
        )
        return report

    def downloads_path(self) -> Path:
        """Return <user profile>/Downloads."""
        return self.resolve_folder(SpecialFolder.USER_PROFILE) / DOWNLOADS_FOLDER_NAME

    def clear_downloads(self) -> StepReport:
        """
        Delete every file and subdirectory directly inside Downloads.

        A missing Downloads folder is not an error. Locked items are skipped.
        Any other failure ends the step and is recorded as the step error.

        Returns:
            StepReport for the Downloads step
        """
        step = StepReport(name=DOWNLOADS_STEP)
        downloads = self.downloads_path()

        if not _is_dir(downloads):
            logger.debug("Downloads folder not found: %s", downloads)
            return step

        try:
            entries = sorted(downloads.iterdir())
            # Files first, then subdirectories
            directories = [p for p in entries if p.is_dir() and not p.is_symlink()]
            files = [p for p in entries if p not in directories]
        except OSError as e:
            step.error = e.strerror or str(e)
            return step

        for path in files + directories:
            result = step.add(delete_path(path))
            if result.status is ItemStatus.LOCKED:
                self._note_locked(DOWNLOADS_STEP, result)
            elif result.status is ItemStatus.FAILED:
                step.error = result.error
                break

        logger.info("Downloads: deleted %d item(s)", step.deleted_count)
        return step

    def clear_browser(self, browser: BrowserConfig) -> StepReport:
        """
        Delete the cache, history and cookie entries of a browser's default profile.

        Args:
            browser: Browser whose profile is cleaned

        Returns:
            StepReport for the browser; profile_missing is set when the
            profile directory doesn't exist
        """
        step = StepReport(name=browser.name)
        profile_path = resolve_profile_path(browser, self.resolve_folder)

        if not _is_dir(profile_path):
            step.profile_missing = True
            return step

        for target in profile_target_paths(profile_path, self.config.profile_targets):
            result = step.add(delete_path(target))
            if result.status is ItemStatus.LOCKED:
                self._note_locked(browser.name, result)

        logger.info("%s: deleted %d of %d target(s)", browser.name, step.deleted_count, len(step.results))
        return step

    def _note_locked(self, step_name: str, result: ItemResult) -> None:
        """Report a locked target on the debug channel only."""
        lock = self.lock_resolver.report(result.path)
        logger.debug(
            "Failed to delete %s for %s: %s (held by %s)",
            result.path,
            step_name,
            result.error,
            lock.describe(),
        )

    def _record_downloads(self, step: StepReport) -> None:
        if step.error is not None:
            self.cleanup_log.append(f"Downloads Cleanup Failed: {step.error}")

    def _record_browser(self, step: StepReport) -> None:
        if step.profile_missing:
            self.cleanup_log.append(f"{step.name} Profile Not Found")
            return
        for result in step.failed_items:
            self.cleanup_log.append(f"{step.name} Cleanup Failed on {result.path}: {result.error}")


def _is_dir(path: Path) -> bool:
    """Existence check that treats an unreadable path as missing."""
    try:
        return path.is_dir()
    except OSError as e:
        logger.debug("Cannot check %s: %s", path, e)
        return False
