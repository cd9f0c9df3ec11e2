"""Blacklist assembly — built-in defaults, config paths, and YAML list files."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable, List

import yaml

from buildiff.config.defaults import DEFAULT_BLACKLIST
from buildiff.config.loader import ConfigError
from buildiff.config.schema import BuildiffConfig


def load_blacklist_file(path: Path) -> List[str]:
    """Read a YAML file holding a list of relative paths (or ``{paths: [...]}``)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read blacklist file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse blacklist file {path}: {exc}") from exc

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("paths", [])
    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        raise ConfigError(f"Blacklist file {path} must contain a list of paths")
    return data


def build_blacklist(
    config: BuildiffConfig,
    extra: Iterable[str] = (),
    *,
    use_defaults: bool = True,
) -> FrozenSet[str]:
    """Combine defaults, config entries, YAML files, and *extra* into one frozen set.

    *use_defaults* False drops the built-in list even if the config keeps it.
    """
    entries: set[str] = set()
    if use_defaults and config.blacklist.use_defaults:
        entries.update(DEFAULT_BLACKLIST)
    entries.update(config.blacklist.paths)
    for name in config.blacklist.files:
        entries.update(load_blacklist_file(Path(name)))
    entries.update(extra)
    return frozenset(entries)
