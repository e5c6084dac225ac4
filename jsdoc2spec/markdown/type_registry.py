"""Registry of documented names, their anchors, and the links made to them."""

from typing import Any

from jsdoc2spec.local_name import strip_module_prefix
from jsdoc2spec.markdown.blocks import header_slug
from jsdoc2spec.markdown.traverse import iter_nodes


class TypeRegistry:
    """Resolves type names to anchors within one rendered document."""

    def __init__(self, spec: dict[str, Any]) -> None:
        """Assign an anchor to every node of ``spec`` in rendering order."""
        self.slugs: dict[tuple[str, ...], str] = {}
        self.names: dict[str, tuple[str, ...]] = {}
        self.used_slugs: set[str] = set()
        self.references: dict[str, str] = {}  # key -> link, in first-use order
        for visit in iter_nodes(spec):
            self.assign_slug(visit.path)
            self.names.setdefault(visit.qualified_name, visit.path)
            self.names.setdefault(visit.key, visit.path)

    def assign_slug(self, path: tuple[str, ...]) -> str:
        """Return the anchor of ``path``, creating a unique one on first use."""
        if path in self.slugs:
            return self.slugs[path]
        base = header_slug(".".join(path))
        slug = base
        n = 1
        while slug in self.used_slugs:
            slug = f"{base}-{n}"
            n += 1
        self.used_slugs.add(slug)
        self.slugs[path] = slug
        return slug

    def lookup(self, name: str) -> tuple[str, ...] | None:
        """Find the documented node a type name refers to."""
        name = strip_module_prefix(name).replace("event:", "")
        name = name.replace("#", ".").replace("~", ".")
        return self.names.get(name)

    def get_type(self, t: dict[str, Any] | None) -> str:
        """Render a type node, linking names that are documented here."""
        if not t:
            return ""
        if t.get("kind") == "union":
            return " | ".join(self.get_type(i) for i in t.get("items") or [])
        if t.get("type") == "array" and t.get("items"):
            return f"Array<{self.get_type(t['items'])}>"
        name = t.get("type") or t.get("kind")
        if not name:
            return ""
        name = str(name)
        path = self.lookup(name)
        if path is None:
            return f"`{name}`"
        self.references.setdefault(name, f"#{self.slugs[path]}")
        return f"[{name}]"

    def get_references(self) -> list[tuple[str, str]]:
        """Return (key, link) pairs for every linked type, deduplicated."""
        return list(self.references.items())
