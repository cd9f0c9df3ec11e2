"""Directory comparison — comparator adapter, report classifier, models."""

from buildiff.compare.adapter import UpstreamExecutionError, require_report, run_comparison
from buildiff.compare.classifier import DirectoryDiffClassifier, RootMismatchError, classify
from buildiff.compare.engine import diff_directories
from buildiff.compare.models import (
    ChangeKind,
    ComparisonOutcome,
    DifferencesFound,
    DiffResult,
    ExecutionFailed,
    NoDifferences,
)

__all__ = [
    "ChangeKind",
    "ComparisonOutcome",
    "DiffResult",
    "DifferencesFound",
    "DirectoryDiffClassifier",
    "ExecutionFailed",
    "NoDifferences",
    "RootMismatchError",
    "UpstreamExecutionError",
    "classify",
    "diff_directories",
    "require_report",
    "run_comparison",
]
