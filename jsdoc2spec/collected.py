"""Data model for the identity table built by the collector."""

from dataclasses import dataclass, field
from typing import Any

from jsdoc2spec.node_meta import NodeMeta


@dataclass(frozen=True)
class Collected:
    """Nodes and their structural metadata, keyed by resolved identifier."""

    package: dict[str, Any] | None = None
    ids: dict[str, dict[str, Any]] = field(default_factory=dict)
    priv: dict[str, NodeMeta] = field(default_factory=dict)
