"""Default blacklist and starter .buildiff.toml template."""

# Relative paths that change on every build without meaning anything.
DEFAULT_BLACKLIST: frozenset[str] = frozenset({
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
    "asset-manifest.json",
    "precache-manifest.json",
    "service-worker.js",
})

DEFAULT_TOML = """\
# buildiff configuration
version = "1.0"

[blacklist]
use_defaults = true       # .DS_Store, Thumbs.db, asset-manifest.json, ...
# paths = ["build-info.json", "static/version.txt"]
# files = ["ci/blacklist.yaml"]   # YAML lists of extra paths

[compare]
command = "diff"          # must support -q -r
strict_roots = false      # fail when report lines match neither root
# timeout = 120           # seconds

[output]
format = "terminal"       # terminal | json
show_summary = true
quiet = false
"""
