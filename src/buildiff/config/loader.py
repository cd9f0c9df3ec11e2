"""Load and merge configuration from .buildiff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from buildiff.config.schema import (
    OUTPUT_FORMATS,
    BlacklistConfig,
    BuildiffConfig,
    CompareConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".buildiff.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: BuildiffConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {cfg.output.format!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    for name in ("paths", "files"):
        value = getattr(cfg.blacklist, name)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"blacklist.{name} must be a list of strings")
    timeout = cfg.compare.timeout
    if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
        raise ConfigError("compare.timeout must be a positive number")


def _merge_env_overrides(cfg: BuildiffConfig) -> None:
    """Apply BUILDIFF_* environment variable overrides."""
    if val := os.environ.get("BUILDIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if os.environ.get("BUILDIFF_QUIET") == "1":
        cfg.output.quiet = True
    if val := os.environ.get("BUILDIFF_BLACKLIST"):
        cfg.blacklist.paths.extend(p.strip() for p in val.split(os.pathsep) if p.strip())
    if val := os.environ.get("BUILDIFF_TIMEOUT"):
        try:
            timeout = float(val)
        except ValueError:
            pass
        else:
            if timeout > 0:
                cfg.compare.timeout = timeout


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> BuildiffConfig:
    """Load, validate, and return a BuildiffConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = BuildiffConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = BuildiffConfig(
                version=raw.get("version", "1.0"),
                blacklist=_build_section(raw, BlacklistConfig, "blacklist"),
                compare=_build_section(raw, CompareConfig, "compare"),
                output=_build_section(raw, OutputConfig, "output"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        _validate(cfg)
        # Relative blacklist files resolve against the config file
        cfg.blacklist.files = [
            f if Path(f).is_absolute() else str(config_path.parent / f)
            for f in cfg.blacklist.files
        ]

    _merge_env_overrides(cfg)
    return cfg
