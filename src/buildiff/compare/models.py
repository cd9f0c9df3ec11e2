"""Data models for directory comparison."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class ChangeKind(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass
class DiffResult:
    """Sorted, blacklist-filtered paths relative to the build roots."""

    files_added: List[str] = field(default_factory=list)
    files_updated: List[str] = field(default_factory=list)
    files_deleted: List[str] = field(default_factory=list)

    @property
    def total_changes(self) -> int:
        return len(self.files_added) + len(self.files_updated) + len(self.files_deleted)

    @property
    def has_changes(self) -> bool:
        return self.total_changes > 0

    def paths(self, kind: ChangeKind) -> List[str]:
        if kind == ChangeKind.ADDED:
            return self.files_added
        if kind == ChangeKind.UPDATED:
            return self.files_updated
        return self.files_deleted


# --- Comparator outcomes ---


@dataclass(frozen=True)
class NoDifferences:
    """The comparator found the two trees identical."""


@dataclass(frozen=True)
class DifferencesFound:
    """The comparator ran successfully and reported differences."""

    report: str


@dataclass(frozen=True)
class ExecutionFailed:
    """The comparator could not run or exited abnormally."""

    cause: str
    returncode: Optional[int] = None  # None when the process never ran


ComparisonOutcome = Union[NoDifferences, DifferencesFound, ExecutionFailed]
