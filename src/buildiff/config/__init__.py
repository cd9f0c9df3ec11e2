"""Configuration loading, schema, defaults, and blacklist assembly."""

from buildiff.config.blacklist import build_blacklist, load_blacklist_file
from buildiff.config.defaults import DEFAULT_BLACKLIST
from buildiff.config.loader import ConfigError, load_config
from buildiff.config.schema import BuildiffConfig

__all__ = [
    "DEFAULT_BLACKLIST",
    "BuildiffConfig",
    "ConfigError",
    "build_blacklist",
    "load_blacklist_file",
    "load_config",
]
