"""Comparator subprocess wrapper — runs ``diff -q -r`` and tags the outcome."""

from __future__ import annotations

import os
import subprocess
from typing import Optional

from buildiff.compare.models import (
    ComparisonOutcome,
    DifferencesFound,
    ExecutionFailed,
    NoDifferences,
)

# diff(1): 0 = identical, 1 = differences found, 2 = trouble
_EXIT_IDENTICAL = 0
_EXIT_DIFFERENT = 1


class UpstreamExecutionError(Exception):
    """Raised when the comparator fails for a reason other than finding differences."""

    def __init__(self, cause: str, returncode: Optional[int] = None) -> None:
        super().__init__(cause)
        self.cause = cause
        self.returncode = returncode


def run_comparison(
    old_dir: str,
    new_dir: str,
    *,
    command: str = "diff",
    timeout: Optional[float] = None,
) -> ComparisonOutcome:
    """Recursively compare *old_dir* and *new_dir*, filenames only."""
    args = [command, "-q", "-r", old_dir, new_dir]
    # Report lines are matched in English
    env = {**os.environ, "LC_ALL": "C"}
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
    except FileNotFoundError:
        return ExecutionFailed(cause=f"{command} is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        return ExecutionFailed(cause=f"{command} timed out after {timeout}s: {' '.join(args)}")

    if result.returncode == _EXIT_IDENTICAL:
        return NoDifferences()
    if result.returncode == _EXIT_DIFFERENT:
        return DifferencesFound(report=result.stdout)

    stderr = result.stderr.strip() or f"exit status {result.returncode}"
    return ExecutionFailed(cause=f"{command} error: {stderr}", returncode=result.returncode)


def require_report(outcome: ComparisonOutcome) -> str:
    """Return the report text for *outcome*, raising on execution failure."""
    if isinstance(outcome, ExecutionFailed):
        raise UpstreamExecutionError(outcome.cause, outcome.returncode)
    if isinstance(outcome, DifferencesFound):
        return outcome.report
    return ""
