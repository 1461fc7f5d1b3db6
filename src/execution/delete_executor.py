"""Best-effort path deletion for Logoff Cleanup.

Every delete returns an ItemResult instead of raising:
- absent paths are skipped without error
- directories are removed recursively, files and links are unlinked
- lock-style failures come back as LOCKED, anything else as FAILED
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from src.core.models import ItemResult, ItemStatus
from src.execution.lock_resolver import is_lock_error

logger = logging.getLogger(__name__)


def remove_path(path: Path) -> bool:
    """
    Remove a file or directory tree.

    Args:
        path: Path to remove

    Returns:
        True if something was removed, False if the path didn't exist

    Raises:
        OSError: If the removal fails
    """
    if path.is_symlink():
        path.unlink()
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    if path.is_file():
        path.unlink()
        return True
    return False


def delete_path(path: Path) -> ItemResult:
    """
    Delete a single target and classify the outcome.

    Args:
        path: File or directory to delete

    Returns:
        ItemResult describing what happened
    """
    try:
        removed = remove_path(path)
    except Exception as e:
        status = ItemStatus.LOCKED if is_lock_error(e) else ItemStatus.FAILED
        return ItemResult(path=path, status=status, error=_error_message(e))

    if not removed:
        return ItemResult(path=path, status=ItemStatus.SKIPPED_ABSENT)

    logger.debug("Deleted %s", path)
    return ItemResult(path=path, status=ItemStatus.DELETED)


def _error_message(exc: BaseException) -> str:
    """Return the human-readable part of an exception."""
    if isinstance(exc, OSError) and exc.strerror:
        if exc.filename:
            return f"{exc.strerror}: '{exc.filename}'"
        return exc.strerror
    return str(exc) or type(exc).__name__
