"""Logic for loading doclets dumped by ``jsdoc -X``."""

import json
from pathlib import Path
from typing import Any


def parse_doclets(text: str) -> list[dict[str, Any]]:
    """Parse a JSON list of doclets.

    Accepts the bare array written by ``jsdoc -X`` as well as an object
    holding the array under ``docs``.
    """
    data = json.loads(text)
    if isinstance(data, dict):
        data = data.get("docs") or []
    return [d for d in data if isinstance(d, dict)]


def load_doclets(path: Path) -> list[dict[str, Any]]:
    """Load doclets from a JSON file."""
    return parse_doclets(path.read_text(encoding="utf-8"))
