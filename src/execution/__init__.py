"""Deletion engine package for Logoff Cleanup."""

from src.execution.lock_resolver import LockResolver, LockReport, is_lock_error
from src.execution.delete_executor import delete_path, remove_path
from src.execution.cleaner import Cleaner

__all__ = [
    "LockResolver",
    "LockReport",
    "is_lock_error",
    "delete_path",
    "remove_path",
    "Cleaner",
]
