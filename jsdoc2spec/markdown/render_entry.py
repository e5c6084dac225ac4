"""Logic for rendering one specification node as Markdown."""

from typing import Any

from jsdoc2spec.markdown.blocks import md_codeblock, md_heading, md_table
from jsdoc2spec.markdown.traverse import Visit
from jsdoc2spec.markdown.type_registry import TypeRegistry

CONTAINER_LABELS = {
    "staticEntries": "static",
    "events": "event",
    "definitions": "definition",
}
UNTYPED_KINDS = {"function", "class", "event", "module", "namespace", "interface"}


def render_entry(visit: Visit, registry: TypeRegistry, base_level: int = 2) -> str:
    """Render the section of a single node."""
    node = visit.node
    slug = registry.assign_slug(visit.path)
    parts = [f'<a name="{slug}"></a>', ""]
    parts += [md_heading(base_level + visit.depth, visit.qualified_name), ""]

    parts.extend(_render_badges(visit))
    signature = render_signature(visit.key, node)
    if signature:
        parts += [md_codeblock("js", signature), ""]

    if node.get("description"):
        parts += [str(node["description"]), ""]

    type_text = "" if node.get("kind") in UNTYPED_KINDS else registry.get_type(node)
    if type_text:
        parts += [f"**Type:** {type_text}", ""]
    if "defaultValue" in node:
        parts += [f"**Default:** `{node['defaultValue']}`", ""]

    parts.extend(_render_heritage(node, registry))
    params = node.get("params") or (node.get("constructor") or {}).get("params")
    parts.extend(_render_params(params or [], registry))
    parts.extend(_render_returns(node, registry))
    parts.extend(_render_list("Throws", node.get("throws"), registry))
    parts.extend(_render_emits(node, registry))
    for example in node.get("examples") or []:
        parts += ["**Example**", "", md_codeblock("js", str(example)), ""]
    return "\n".join(parts)


def render_signature(key: str, node: dict[str, Any]) -> str:
    """Render a short call signature for callables."""
    kind = node.get("kind")
    if kind == "class":
        params = (node.get("constructor") or {}).get("params") or []
        return f"new {key}({_param_names(params)})"
    if kind not in {"function", "event"}:
        return ""
    sig = f"{key}({_param_names(node.get('params') or [])})"
    returns = node.get("returns")
    if returns and returns.get("type"):
        sig += f": {_plain_type(returns)}"
    return sig


def _param_names(params: list[dict[str, Any]]) -> str:
    names = []
    for p in params:
        name = str(p.get("name") or "")
        if p.get("variable"):
            name = f"...{name}"
        names.append(f"[{name}]" if p.get("optional") else name)
    return ", ".join(names)


def _plain_type(t: dict[str, Any]) -> str:
    if t.get("kind") == "union":
        return " | ".join(_plain_type(i) for i in t.get("items") or [])
    if t.get("type") == "array" and t.get("items"):
        return f"Array<{_plain_type(t['items'])}>"
    return str(t.get("type") or "")


def _render_badges(visit: Visit) -> list[str]:
    node = visit.node
    badges = []
    label = CONTAINER_LABELS.get(visit.container)
    if label:
        badges.append(f"`{label}`")
    if node.get("kind") and node["kind"] not in {"union", "object", label}:
        badges.append(f"`{node['kind']}`")
    if node.get("stability"):
        badges.append(f"`{node['stability']}`")
    availability = node.get("availability") or {}
    if availability.get("deprecated"):
        badges.append("`deprecated`")
    if availability.get("since"):
        badges.append(f"since {availability['since']}")
    parts = [" ".join(badges), ""] if badges else []
    deprecated = availability.get("deprecated")
    if isinstance(deprecated, dict) and deprecated.get("description"):
        parts += [f"> Deprecated: {deprecated['description']}", ""]
    return parts


def _render_heritage(node: dict[str, Any], registry: TypeRegistry) -> list[str]:
    parts = []
    for field, label in (("extends", "Extends"), ("implements", "Implements")):
        types = node.get(field) or []
        if types:
            parts += [f"**{label}:** {', '.join(registry.get_type(t) for t in types)}", ""]
    return parts


def _param_rows(
    params: list[tuple[str, dict[str, Any]]], registry: TypeRegistry, prefix: str = ""
) -> list[list[str]]:
    rows = []
    for name, p in params:
        full = f"{prefix}{name}"
        label = f"`{full}`" + (" _(optional)_" if p.get("optional") else "")
        rows.append([label, registry.get_type(p), str(p.get("description") or "")])
        nested = list((p.get("entries") or {}).items())
        rows.extend(_param_rows(nested, registry, prefix=f"{full}."))
    return rows


def _render_params(params: list[dict[str, Any]], registry: TypeRegistry) -> list[str]:
    if not params:
        return []
    named = [(str(p.get("name") or ""), p) for p in params]
    table = md_table(["Name", "Type", "Description"], _param_rows(named, registry))
    return ["**Parameters**", "", table, ""]


def _render_returns(node: dict[str, Any], registry: TypeRegistry) -> list[str]:
    returns = node.get("returns")
    if not returns:
        return []
    rtype = registry.get_type(returns)
    rdesc = str(returns.get("description") or "")
    text = ": ".join(x for x in (rtype, rdesc) if x)
    return [f"**Returns:** {text}", ""] if text else []


def _render_list(
    title: str, values: list[dict[str, Any]] | None, registry: TypeRegistry
) -> list[str]:
    if not values:
        return []
    parts = [f"**{title}**", ""]
    for v in values:
        vtype = registry.get_type(v)
        vdesc = str(v.get("description") or "")
        parts.append("- " + ": ".join(x for x in (vtype, vdesc) if x))
    parts.append("")
    return parts


def _render_emits(node: dict[str, Any], registry: TypeRegistry) -> list[str]:
    emits = node.get("emits") or []
    if not emits:
        return []
    links = [registry.get_type({"type": e}) for e in emits]
    return [f"**Emits:** {', '.join(links)}", ""]
