"""End-to-end tests for diff_directories against real build trees."""

import io
import shutil
from pathlib import Path

import pytest
from rich.console import Console

from buildiff.compare.adapter import UpstreamExecutionError
from buildiff.compare.engine import diff_directories

pytestmark = pytest.mark.skipif(shutil.which("diff") is None, reason="diff is not installed")


def _quiet(old, new, **kwargs):
    return diff_directories(str(old), str(new), quiet=True, **kwargs)


class TestDiffDirectories:
    def test_identical_builds(self, identical_builds):
        result = _quiet(*identical_builds)
        assert result.files_added == []
        assert result.files_updated == []
        assert result.files_deleted == []

    def test_partition(self, changed_builds):
        result = _quiet(*changed_builds)
        assert result.files_added == ["added.txt"]
        assert result.files_deleted == ["removed.txt"]
        assert result.files_updated == ["assets/app.js"]

    def test_default_blacklist_applied(self, changed_builds):
        result = _quiet(*changed_builds)
        assert ".DS_Store" not in result.files_added
        assert "asset-manifest.json" not in result.files_updated

    def test_explicit_empty_blacklist(self, changed_builds):
        result = _quiet(*changed_builds, blacklist=[])
        assert result.files_added == [".DS_Store", "added.txt"]
        assert result.files_updated == ["asset-manifest.json", "assets/app.js"]

    def test_custom_blacklist(self, changed_builds):
        result = _quiet(*changed_builds, blacklist=["assets/app.js", "added.txt"])
        assert result.files_updated == ["asset-manifest.json"]
        assert result.files_added == [".DS_Store"]

    def test_nested_new_file(self, identical_builds):
        old, new = identical_builds
        (new / "assets" / "logo.png").write_bytes(b"\x89PNG")
        result = _quiet(old, new)
        assert result.files_added == ["assets/logo.png"]

    def test_new_directory_not_expanded(self, identical_builds):
        old, new = identical_builds
        (new / "fonts").mkdir()
        (new / "fonts" / "a.woff").write_text("a")
        (new / "fonts" / "b.woff").write_text("b")
        result = _quiet(old, new)
        assert result.files_added == ["fonts"]

    def test_sorted_output(self, identical_builds):
        old, new = identical_builds
        for name in ("b.txt", "a.txt", "c.txt"):
            (new / name).write_text(name)
        assert _quiet(old, new).files_added == ["a.txt", "b.txt", "c.txt"]

    def test_missing_root_raises(self, tmp_path: Path, identical_builds):
        old, _ = identical_builds
        with pytest.raises(UpstreamExecutionError):
            _quiet(old, tmp_path / "does-not-exist")

    def test_strict_roots_accepts_real_report(self, changed_builds):
        result = _quiet(*changed_builds, strict_roots=True)
        assert result.total_changes == 3


class TestProgress:
    def _console(self):
        buf = io.StringIO()
        return Console(file=buf, force_terminal=False, width=120), buf

    def test_progress_printed(self, changed_builds):
        console, buf = self._console()
        old, new = changed_builds
        diff_directories(str(old), str(new), console=console)
        text = buf.getvalue()
        assert "Diffing directories... Done" in text
        assert "Parsing diff results... Done" in text

    def test_quiet_silences_progress(self, changed_builds):
        console, buf = self._console()
        old, new = changed_builds
        diff_directories(str(old), str(new), quiet=True, console=console)
        assert buf.getvalue() == ""

    def test_quiet_does_not_change_result(self, changed_builds):
        console, _ = self._console()
        old, new = changed_builds
        loud = diff_directories(str(old), str(new), console=console)
        assert loud == _quiet(old, new)

    def test_failure_reported(self, tmp_path: Path, identical_builds):
        console, buf = self._console()
        old, _ = identical_builds
        with pytest.raises(UpstreamExecutionError):
            diff_directories(str(old), str(tmp_path / "missing"), console=console)
        assert "Failed" in buf.getvalue()
