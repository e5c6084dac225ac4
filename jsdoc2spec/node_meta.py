"""Data model for the structural bookkeeping of a collected node."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NodeMeta:
    """Identity and placement data kept outside the serialized node."""

    id: str
    scope_name: str
    member_of: str | None
    member_scope: str | None  # static/inner/instance/global
    meta: dict[str, Any] | None
    access: str | None
    is_definition: bool

    @property
    def binding_name(self) -> str:
        """Return the code binding name, e.g. ``module.exports``."""
        return binding_name(self.meta)


def binding_name(meta: dict[str, Any] | None) -> str:
    """Read ``meta.code.name`` from a doclet's meta block."""
    code = (meta or {}).get("code") or {}
    return str(code.get("name") or "")
