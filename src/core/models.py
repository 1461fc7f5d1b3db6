"""Core data models for Logoff Cleanup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class ItemStatus(Enum):
    """Outcome of a single delete attempt."""

    DELETED = "deleted"
    SKIPPED_ABSENT = "skipped_absent"
    LOCKED = "locked"  # In use; reported on the debug channel only
    FAILED = "failed"  # Written to the persistent log


@dataclass
class ItemResult:
    """Result of deleting one target path."""

    path: Path
    status: ItemStatus
    error: Optional[str] = None

    @property
    def is_persistent_failure(self) -> bool:
        """Return True if this result belongs in the persistent log."""
        return self.status is ItemStatus.FAILED

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "path": str(self.path),
            "status": self.status.value,
            "error": self.error,
        }


@dataclass
class StepReport:
    """Outcome of one cleanup step (downloads or a browser profile)."""

    name: str  # "Downloads", "Edge", "Chrome"
    results: list[ItemResult] = field(default_factory=list)
    profile_missing: bool = False
    error: Optional[str] = None  # Step-level failure that ended the step early

    def add(self, result: ItemResult) -> ItemResult:
        """Append a result and return it."""
        self.results.append(result)
        return result

    @property
    def deleted_count(self) -> int:
        return sum(1 for r in self.results if r.status is ItemStatus.DELETED)

    @property
    def locked_count(self) -> int:
        return sum(1 for r in self.results if r.status is ItemStatus.LOCKED)

    @property
    def failed_items(self) -> list[ItemResult]:
        return [r for r in self.results if r.is_persistent_failure]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "profile_missing": self.profile_missing,
            "error": self.error,
            "deleted": self.deleted_count,
            "locked": self.locked_count,
            "failed": len(self.failed_items),
            "results": [r.to_dict() for r in self.results],
        }


@dataclass
class CleanupReport:
    """Complete report of a cleanup run."""

    steps: list[StepReport] = field(default_factory=list)
    critical_error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Return True if no error escaped the cleanup steps."""
        return self.critical_error is None

    @property
    def total_deleted(self) -> int:
        return sum(step.deleted_count for step in self.steps)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "success": self.success,
            "critical_error": self.critical_error,
            "total_deleted": self.total_deleted,
            "steps": [step.to_dict() for step in self.steps],
        }
