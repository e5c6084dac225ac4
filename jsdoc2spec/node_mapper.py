"""Logic for mapping a single doclet onto a specification node.

The node only carries the doclet's own fields. Placement data (longname,
memberof, scope, ...) is tracked separately by the collector, and structural
children are added later by the transformer.
"""

import re
from collections.abc import Callable
from typing import Any

from jsdoc2spec.doclet_kind import DocletKind

ARRAY_TYPE_RE = re.compile(r"^Array\.?<(.+)>$")
LOWERCASE_TYPES = {
    "array",
    "boolean",
    "function",
    "null",
    "number",
    "object",
    "string",
    "symbol",
    "undefined",
}


def map_type_name(name: str) -> dict[str, Any]:
    """Map one jsdoc type expression onto a type node."""
    name = name.strip()
    m = ARRAY_TYPE_RE.match(name)
    if m:
        return {"type": "array", "items": map_type_name(m.group(1))}
    if name in {"*", "any"}:
        return {"type": "any"}
    if name.lower() in LOWERCASE_TYPES:
        return {"type": name.lower()}
    return {"type": name}


def map_type(type_block: dict[str, Any] | None) -> dict[str, Any]:
    """Map a doclet ``type`` block ({"names": [...]}) onto node fields."""
    names = [str(n) for n in (type_block or {}).get("names") or []]
    if not names:
        return {}
    if len(names) == 1:
        return map_type_name(names[0])
    return {"kind": "union", "items": [map_type_name(n) for n in names]}


def _map_value(v: dict[str, Any]) -> dict[str, Any]:
    """Map a param, property or return value."""
    node: dict[str, Any] = {}
    if v.get("description"):
        node["description"] = str(v["description"]).strip()
    if v.get("optional"):
        node["optional"] = True
    if v.get("nullable"):
        node["nullable"] = True
    if v.get("variable"):
        node["variable"] = True
    if v.get("defaultvalue") is not None:
        node["defaultValue"] = v["defaultvalue"]
    node.update(map_type(v.get("type")))
    return node


def _nest(values: list[dict[str, Any]]) -> list[tuple[str, dict[str, Any]]]:
    """Map values, folding dotted names (opts.size) into their parent."""
    top: list[tuple[str, dict[str, Any]]] = []
    by_name: dict[str, dict[str, Any]] = {}
    for v in values:
        name = str(v.get("name") or "")
        node = _map_value(v)
        parent_name, _, child = name.rpartition(".")
        parent = by_name.get(parent_name) if parent_name else None
        if parent is not None and child:
            parent.setdefault("entries", {})[child] = node
        else:
            top.append((name, node))
        by_name[name] = node
    return top


def map_params(params: list[dict[str, Any]] | None) -> list[dict[str, Any]]:
    """Map doclet params onto an ordered list of named parameter nodes."""
    return [{"name": name, **node} for name, node in _nest(params or [])]


def map_properties(props: list[dict[str, Any]] | None) -> dict[str, dict[str, Any]]:
    """Map doclet properties onto an ``entries`` mapping."""
    return dict(_nest(props or []))


def _tag_values(doc: dict[str, Any], title: str) -> list[str]:
    return [
        str(t.get("value") or "").strip()
        for t in doc.get("tags") or []
        if t.get("originalTitle") == title
    ]


def _map_availability(doc: dict[str, Any]) -> dict[str, Any]:
    availability: dict[str, Any] = {}
    if doc.get("since"):
        availability["since"] = str(doc["since"])
    deprecated = doc.get("deprecated")
    if deprecated:
        availability["deprecated"] = (
            {"description": deprecated.strip()} if isinstance(deprecated, str) else True
        )
    return availability


def _map_signature(doc: dict[str, Any], node: dict[str, Any]) -> None:
    """Add params/returns/throws/emits of a callable doclet."""
    params = map_params(doc.get("params"))
    if params:
        node["params"] = params
    returns = doc.get("returns") or []
    if returns:
        node["returns"] = _map_value(returns[0])
    throws = [_map_value(e) for e in doc.get("exceptions") or []]
    if throws:
        node["throws"] = throws
    if doc.get("fires"):
        node["emits"] = [str(f) for f in doc["fires"]]
    if doc.get("async"):
        node["async"] = True
    if doc.get("generator"):
        node["generator"] = True


def _map_function(doc: dict[str, Any]) -> dict[str, Any]:
    node: dict[str, Any] = {"kind": "function"}
    _map_signature(doc, node)
    return node


def _map_class(doc: dict[str, Any]) -> dict[str, Any]:
    node: dict[str, Any] = {"kind": "class"}
    params = map_params(doc.get("params"))
    if params:
        node["constructor"] = {"kind": "function", "params": params}
    if doc.get("augments"):
        node["extends"] = [map_type_name(str(a)) for a in doc["augments"]]
    if doc.get("implements"):
        node["implements"] = [map_type_name(str(i)) for i in doc["implements"]]
    return node


def _map_event(doc: dict[str, Any]) -> dict[str, Any]:
    node: dict[str, Any] = {"kind": "event"}
    params = map_params(doc.get("params"))
    if params:
        node["params"] = params
    return node


def _map_member(doc: dict[str, Any]) -> dict[str, Any]:
    node = map_type(doc.get("type"))
    if doc.get("defaultvalue") is not None:
        node["defaultValue"] = doc["defaultvalue"]
    if doc.get("readonly") or doc.get("kind") == DocletKind.CONSTANT.value:
        node["readOnly"] = True
    if doc.get("optional"):
        node["optional"] = True
    if doc.get("nullable"):
        node["nullable"] = True
    properties = map_properties(doc.get("properties"))
    if properties:
        node.setdefault("kind", "object")
        node["entries"] = properties
    return node


def _map_typedef(doc: dict[str, Any]) -> dict[str, Any]:
    names = (doc.get("type") or {}).get("names") or []
    if names == ["function"] or doc.get("params"):
        return _map_function(doc)
    properties = map_properties(doc.get("properties"))
    if properties:
        return {"kind": "object", "entries": properties}
    return map_type(doc.get("type"))


def _map_container(kind: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    def mapper(doc: dict[str, Any]) -> dict[str, Any]:
        node: dict[str, Any] = {"kind": kind}
        properties = map_properties(doc.get("properties"))
        if properties:
            node["entries"] = properties
        return node

    return mapper


MAPPERS: dict[DocletKind, Callable[[dict[str, Any]], dict[str, Any]]] = {
    DocletKind.TYPEDEF: _map_typedef,
    DocletKind.MEMBER: _map_member,
    DocletKind.CONSTANT: _map_member,
    DocletKind.MODULE: _map_container("module"),
    DocletKind.FUNCTION: _map_function,
    DocletKind.EVENT: _map_event,
    DocletKind.NAMESPACE: _map_container("namespace"),
    DocletKind.CLASS: _map_class,
    DocletKind.INTERFACE: _map_container("interface"),
}


def map_doclet(doc: dict[str, Any]) -> dict[str, Any] | None:
    """Map one doclet onto a specification node.

    Returns ``None`` for kinds that do not produce a node (package and
    unrecognized kinds).
    """
    mapper = MAPPERS.get(DocletKind.parse(doc.get("kind")))
    if mapper is None:
        return None

    node: dict[str, Any] = {}
    description = str(doc.get("description") or "").strip()
    if description:
        node["description"] = description
    stability = _tag_values(doc, "stability")
    if stability:
        node["stability"] = stability[-1]
    elif _tag_values(doc, "experimental"):
        node["stability"] = "experimental"
    availability = _map_availability(doc)
    if availability:
        node["availability"] = availability

    node.update(mapper(doc))

    examples = [str(e) for e in doc.get("examples") or []]
    if examples:
        node["examples"] = examples
    return node
