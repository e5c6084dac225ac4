"""Logic for discarding doclets that should not be documented."""

from collections.abc import Iterable
from typing import Any


def filter_doclets(doclets: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Keep doclets that are neither undocumented nor ignored, in order."""
    return [d for d in doclets if not d.get("undocumented") and not d.get("ignore")]
