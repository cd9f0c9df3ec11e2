"""Classify a recursive ``diff -q -r`` report into added, updated, and deleted paths.

The comparator emits three line shapes (``build-old`` / ``build-new`` stand
for whatever roots were passed to it)::

    Only in build-new: a-new-file.txt
    Only in build-new/existing-dir: a-new-file-within-a-directory.txt
    Only in build-old: a-deleted-directory
    Files build-old/file.txt and build-new/file.txt differ

Wholly new or deleted directories are reported by name only; they are
classified like files and never expanded. Any other line is noise and is
dropped.
"""

from __future__ import annotations

import os
import re
from typing import FrozenSet, Iterable, List, Optional

from buildiff.compare.models import DiffResult

_UPDATED_RE = re.compile(r"^Files (.*?) and (.*?) differ$", re.IGNORECASE)
_ANY_ONLY_IN_RE = re.compile(r"^Only in (.*?): (.*)$", re.IGNORECASE)


class RootMismatchError(Exception):
    """Raised in strict mode when a report line belongs to neither root."""


def _only_in_pattern(root: str, sep: str, flags: int = 0) -> re.Pattern[str]:
    """Build the ``Only in <root>[subdir]: <name>`` matcher for *root*.

    The root is matched literally. Unless it already ends with a separator,
    the subdirectory part must be empty or start with one, so ``build`` does
    not claim lines for ``build-new``. The line keywords always ignore case.
    """
    subdir = r"(.*?)" if root.endswith(sep) else rf"((?:{re.escape(sep)}.*?)?)"
    return re.compile(rf"^(?i:Only in ){re.escape(root)}{subdir}: (.*)$", flags)


def _updated_pattern(old_root: str, new_root: str, flags: int = 0) -> re.Pattern[str]:
    """Match ``Files <old_root>(rel) and <new_root>... differ``.

    Anchoring on both roots keeps names containing `` and `` intact.
    """
    return re.compile(
        rf"^(?i:Files ){re.escape(old_root)}(.*?)(?i: and ){re.escape(new_root)}.*(?i: differ)$",
        flags,
    )


def _split_lines(raw_report: str) -> List[str]:
    # Only "\n" ends a report line; other line breaks are legal in file names.
    return [line.rstrip("\r") for line in raw_report.split("\n") if line.strip()]


class DirectoryDiffClassifier:
    """Turn a comparator report for one pair of roots into a DiffResult.

    Usage::

        classifier = DirectoryDiffClassifier("build-old", "build-new")
        result = classifier.classify(report_text)
    """

    def __init__(
        self,
        old_root: str,
        new_root: str,
        *,
        blacklist: Iterable[str] = (),
        sep: str = os.sep,
        strict_roots: bool = False,
    ) -> None:
        if not old_root or not new_root:
            raise ValueError("old_root and new_root must be non-empty")
        self.old_root = old_root
        self.new_root = new_root
        self.blacklist: FrozenSet[str] = frozenset(blacklist)
        self.sep = sep
        self.strict_roots = strict_roots
        self._deleted_exact = _only_in_pattern(old_root, sep)
        self._added_exact = _only_in_pattern(new_root, sep)
        self._deleted_re = _only_in_pattern(old_root, sep, re.IGNORECASE)
        self._added_re = _only_in_pattern(new_root, sep, re.IGNORECASE)
        self._updated_exact = _updated_pattern(old_root, new_root)
        self._updated_re = _updated_pattern(old_root, new_root, re.IGNORECASE)

    def classify(self, raw_report: str) -> DiffResult:
        """Classify every line of *raw_report* and return the filtered, sorted result."""
        added: List[str] = []
        updated: List[str] = []
        deleted: List[str] = []

        for line in _split_lines(raw_report):
            # Roots differing only by case are distinct directories, so an
            # exact root match wins over a case-insensitive one.
            m_del = self._deleted_exact.match(line)
            m_add = self._added_exact.match(line)
            if not (m_del or m_add):
                m_del = self._deleted_re.match(line)
                m_add = self._added_re.match(line)
            if m_del or m_add:
                if m_del:
                    deleted.append(self._join(m_del.group(1), m_del.group(2)))
                if m_add:
                    added.append(self._join(m_add.group(1), m_add.group(2)))
            elif (m := self._updated_exact.match(line) or self._updated_re.match(line)):
                path = m.group(1).lstrip(self.sep)
                if path:
                    updated.append(path)
            elif (m := _UPDATED_RE.match(line)):
                path = self._strip_old_root(m.group(1))
                if path is not None:
                    updated.append(path)
            elif self.strict_roots and _ANY_ONLY_IN_RE.match(line):
                raise RootMismatchError(
                    f"report line matches neither {self.old_root!r} nor {self.new_root!r}: {line}"
                )

        return DiffResult(
            files_added=self._finalise(added),
            files_updated=self._finalise(updated),
            files_deleted=self._finalise(deleted),
        )

    # ---- normalisation ----

    def _join(self, subdir: str, name: str) -> str:
        subdir = subdir.lstrip(self.sep)
        return f"{subdir}{self.sep}{name}" if subdir else name

    def _strip_old_root(self, path: str) -> Optional[str]:
        # The second path only differs by its root, so it is not consulted.
        if path.startswith(self.old_root):
            path = path[len(self.old_root):]
        elif self.strict_roots:
            raise RootMismatchError(
                f"updated path does not start with {self.old_root!r}: {path}"
            )
        return path.lstrip(self.sep) or None

    def _finalise(self, paths: List[str]) -> List[str]:
        return sorted({p for p in paths if p not in self.blacklist})


def classify(
    raw_report: str,
    old_root: str,
    new_root: str,
    *,
    blacklist: Iterable[str] = (),
    sep: str = os.sep,
    strict_roots: bool = False,
) -> DiffResult:
    """Classify *raw_report* for the given pair of roots."""
    return DirectoryDiffClassifier(
        old_root,
        new_root,
        blacklist=blacklist,
        sep=sep,
        strict_roots=strict_roots,
    ).classify(raw_report)
