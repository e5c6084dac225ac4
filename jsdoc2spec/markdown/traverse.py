"""Depth-first walk over a specification tree."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

# Rendering order of child containers
CONTAINERS = ("entries", "staticEntries", "events", "definitions")


@dataclass(frozen=True)
class Visit:
    """One node reached during a walk."""

    key: str
    path: tuple[str, ...]
    node: dict[str, Any]
    container: str
    depth: int

    @property
    def qualified_name(self) -> str:
        """Return the dotted name of the node, e.g. ``a.Foo.bar``."""
        return ".".join(self.path)


def iter_nodes(
    node: dict[str, Any],
    path: tuple[str, ...] = (),
    depth: int = 0,
) -> Iterator[Visit]:
    """Yield every child node of ``node``, parents before children."""
    for container in CONTAINERS:
        children = node.get(container)
        if not isinstance(children, dict):
            continue
        for key, child in children.items():
            if not isinstance(child, dict):
                continue
            child_path = (*path, key)
            yield Visit(key, child_path, child, container, depth)
            yield from iter_nodes(child, child_path, depth + 1)
