"""Closed set of doclet kinds understood by the collector."""

from enum import Enum


class DocletKind(Enum):
    """Doclet categories, with an explicit fallback for anything else."""

    PACKAGE = "package"
    TYPEDEF = "typedef"
    MEMBER = "member"
    CONSTANT = "constant"
    MODULE = "module"
    FUNCTION = "function"
    EVENT = "event"
    NAMESPACE = "namespace"
    CLASS = "class"
    INTERFACE = "interface"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, kind: object) -> "DocletKind":
        """Map a raw ``kind`` string onto a member, never raising."""
        try:
            return cls(kind)
        except (TypeError, ValueError):
            return cls.UNRECOGNIZED

    @property
    def is_node(self) -> bool:
        """Check if doclets of this kind become specification nodes."""
        return self not in {DocletKind.PACKAGE, DocletKind.UNRECOGNIZED}
