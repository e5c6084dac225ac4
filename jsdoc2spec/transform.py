"""Logic for nesting collected nodes under their structural parents."""

import copy
import logging
from typing import Any

from jsdoc2spec.collect import DEFAULT_EXPORT
from jsdoc2spec.collected import Collected
from jsdoc2spec.doclet_kind import DocletKind
from jsdoc2spec.local_name import MODULE_PREFIX, strip_module_prefix
from jsdoc2spec.node_meta import NodeMeta
from jsdoc2spec.resolve_collision import resolve_collision
from jsdoc2spec.spec_tree import SpecTree

logger = logging.getLogger(__name__)


def transform(collected: Collected) -> SpecTree:
    """Build the specification tree from an identity table.

    The table itself is left untouched; children are attached to copies of
    the collected nodes.
    """
    nodes = copy.deepcopy(collected.ids)
    entries: dict[str, dict[str, Any]] = {}
    definitions: dict[str, dict[str, Any]] = {}

    for node_id, node in nodes.items():
        info = collected.priv[node_id]
        if info.access == "private":
            continue

        parent_id, resolved_id = resolve_parent(info, nodes)
        if resolved_id != info.id:
            logger.debug("Moved %s onto default export as %s", info.id, resolved_id)
        parent = nodes.get(parent_id) if parent_id else None

        if parent is not None:
            container = classify(node, info, parent)
            children = parent.setdefault(container, {})
            children[info.scope_name] = resolve_collision(
                resolved_id, children.get(info.scope_name), node
            )
        else:
            root = definitions if _is_definition(info) else entries
            key = root_key(resolved_id, nodes)
            root[key] = resolve_collision(resolved_id, root.get(key), node)

    return SpecTree(entries=entries, definitions=definitions)


def root_key(resolved_id: str, nodes: dict[str, dict[str, Any]]) -> str:
    """Return the document root key of an unparented node.

    The ``module:`` prefix is dropped unless a bare identifier with the same
    name exists, in which case the full identifier is kept.
    """
    key = strip_module_prefix(resolved_id)
    if key != resolved_id and key in nodes:
        return resolved_id
    return key


def resolve_parent(
    info: NodeMeta, nodes: dict[str, dict[str, Any]]
) -> tuple[str | None, str]:
    """Return the parent identifier and the resolved identifier of a node.

    Members declared on a module that has a default export are moved onto
    the default export, unless they are bound through ``exports.*``.
    """
    member_of = info.member_of
    if not member_of or not member_of.startswith(MODULE_PREFIX):
        return member_of, info.id

    default_id = member_of + DEFAULT_EXPORT
    if (
        default_id in nodes
        and default_id != info.id
        and not info.binding_name.startswith("exports")
    ):
        return default_id, info.id.replace(member_of, default_id, 1)
    return member_of, info.id


def classify(node: dict[str, Any], info: NodeMeta, parent: dict[str, Any]) -> str:
    """Pick the children container of ``parent`` that ``node`` belongs to."""
    if node.get("kind") == DocletKind.EVENT.value:
        return "events"
    if info.member_scope == "static" and parent.get("kind") == DocletKind.CLASS.value:
        return "staticEntries"
    if info.member_scope == "static" and parent.get("kind") == DocletKind.MODULE.value:
        return "entries"
    if _is_definition(info):
        return "definitions"
    return "entries"


def _is_definition(info: NodeMeta) -> bool:
    return info.member_scope == "inner" or info.is_definition
