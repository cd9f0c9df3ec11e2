"""Shared test fixtures — sample reports, configs, temp build trees."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_report() -> str:
    """A report with one deleted, one added, and one updated file."""
    return textwrap.dedent("""\
        Only in build-old: removed.txt
        Only in build-new: added.txt
        Files build-old/changed.txt and build-new/changed.txt differ
    """)


@pytest.fixture
def sample_report_nested() -> str:
    """Differences inside subdirectories, plus a wholly new directory."""
    return textwrap.dedent("""\
        Only in build-new/assets: logo.png
        Only in build-old/js/vendor: jquery.js
        Only in build-new: fonts
        Files build-old/css/site.css and build-new/css/site.css differ
    """)


@pytest.fixture
def sample_report_noise() -> str:
    """Lines the comparator may emit that are not differences."""
    return textwrap.dedent("""\

        diff: build-old/broken-link: No such file or directory
        Common subdirectories: build-old/js and build-new/js
        Only in build-new: added.txt

    """)


def _write(root: Path, rel: str, content: str) -> None:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.fixture
def identical_builds(tmp_path: Path) -> tuple[Path, Path]:
    """Two build directories with the same content."""
    old, new = tmp_path / "build-old", tmp_path / "build-new"
    for root in (old, new):
        _write(root, "index.html", "<html></html>\n")
        _write(root, "assets/app.js", "console.log(1);\n")
    return old, new


@pytest.fixture
def changed_builds(tmp_path: Path) -> tuple[Path, Path]:
    """Builds differing by one added, one deleted, and one updated file.

    The new build also gains and changes blacklisted files.
    """
    old, new = tmp_path / "build-old", tmp_path / "build-new"
    for root in (old, new):
        _write(root, "index.html", "<html></html>\n")
    _write(old, "removed.txt", "gone\n")
    _write(new, "added.txt", "fresh\n")
    _write(old, "assets/app.js", "console.log(1);\n")
    _write(new, "assets/app.js", "console.log(2);\n")
    _write(new, ".DS_Store", "finder\n")
    _write(old, "asset-manifest.json", '{"v": 1}\n')
    _write(new, "asset-manifest.json", '{"v": 2}\n')
    return old, new
