"""Logic for collecting doclets into an identity table keyed by longname."""

import logging
from collections.abc import Iterable
from typing import Any

from jsdoc2spec.collected import Collected
from jsdoc2spec.doclet_kind import DocletKind
from jsdoc2spec.local_name import local_name
from jsdoc2spec.node_mapper import map_doclet
from jsdoc2spec.node_meta import NodeMeta, binding_name
from jsdoc2spec.resolve_collision import resolve_collision

logger = logging.getLogger(__name__)

DEFAULT_EXPORT = "@default"
MODULE_EXPORTS = "module.exports"


def collect(doclets: Iterable[dict[str, Any]]) -> Collected:
    """Map doclets onto nodes and index them by resolved identifier."""
    ids: dict[str, dict[str, Any]] = {}
    priv: dict[str, NodeMeta] = {}
    package: dict[str, Any] | None = None

    for doc in doclets:
        longname = str(doc.get("longname") or "")
        if binding_name(doc.get("meta")) == MODULE_EXPORTS and longname.startswith(
            MODULE_EXPORTS
        ):
            meta = doc.get("meta") or {}
            logger.warning(
                "Default export without module name: %s/%s",
                meta.get("path"),
                meta.get("filename"),
            )
            continue

        kind = DocletKind.parse(doc.get("kind"))
        if kind is DocletKind.PACKAGE:
            package = doc
            continue
        if not kind.is_node:
            logger.warning("Untreated kind: %s", doc.get("kind"))
            continue

        node = map_doclet(doc)
        if node is None:
            continue
        info = _node_meta(doc, longname)

        existing = ids.get(info.id)
        if existing is not None and existing.get("kind") == DocletKind.MODULE.value:
            # Same longname as a module: this is the module's default export
            info = NodeMeta(
                id=info.id + DEFAULT_EXPORT,
                scope_name=DEFAULT_EXPORT,
                member_of=info.id,
                member_scope="static",
                meta=info.meta,
                access=info.access,
                is_definition=info.is_definition,
            )

        ids[info.id] = resolve_collision(info.id, ids.get(info.id), node)
        priv[info.id] = info

    return Collected(package=package, ids=ids, priv=priv)


def _node_meta(doc: dict[str, Any], longname: str) -> NodeMeta:
    """Build the structural metadata of a doclet."""
    tags = doc.get("tags") or []
    memberof = doc.get("memberof")
    return NodeMeta(
        id=longname,
        scope_name=str(doc.get("name") or local_name(longname)),
        member_of=str(memberof) if memberof else None,
        member_scope=doc.get("scope"),
        meta=doc.get("meta"),
        access=doc.get("access"),
        is_definition=any(t.get("originalTitle") == "definition" for t in tags),
    )
