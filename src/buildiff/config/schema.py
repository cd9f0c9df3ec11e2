"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")


@dataclass
class BlacklistConfig:
    use_defaults: bool = True
    paths: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)  # YAML files of extra paths


@dataclass
class CompareConfig:
    command: str = "diff"
    timeout: Optional[float] = None  # seconds; None waits forever
    strict_roots: bool = False


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    quiet: bool = False


@dataclass
class BuildiffConfig:
    version: str = "1.0"
    blacklist: BlacklistConfig = field(default_factory=BlacklistConfig)
    compare: CompareConfig = field(default_factory=CompareConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
