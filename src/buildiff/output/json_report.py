"""JSON reporter for build pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict

from buildiff.compare.models import DiffResult


def to_dict(result: DiffResult) -> Dict[str, Any]:
    """Convert DiffResult to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "files_added": list(result.files_added),
        "files_updated": list(result.files_updated),
        "files_deleted": list(result.files_deleted),
        "total_changes": result.total_changes,
    }


def render(result: DiffResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
