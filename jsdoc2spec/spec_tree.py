"""Data model for the transformed specification tree."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SpecTree:
    """Root level containers of a specification."""

    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    definitions: dict[str, dict[str, Any]] = field(default_factory=dict)
