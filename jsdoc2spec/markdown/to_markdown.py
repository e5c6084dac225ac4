"""Logic for rendering a specification document as Markdown."""

from dataclasses import dataclass, field
from typing import Any

from jsdoc2spec.markdown.render_entry import render_entry
from jsdoc2spec.markdown.traverse import iter_nodes
from jsdoc2spec.markdown.type_registry import TypeRegistry


@dataclass
class MarkdownDoc:
    """Rendered pieces of a specification."""

    body: str
    toc_lines: list[str] = field(default_factory=list)
    reference_pairs: list[tuple[str, str]] = field(default_factory=list)

    def content(self) -> str:
        """Return the rendered sections."""
        return self.body

    def toc(self) -> str:
        """Return the table of contents as a nested Markdown list."""
        return "\n".join(self.toc_lines)

    def references(self) -> str:
        """Return ``[key]: link`` lines for every linked type."""
        return "\n".join(f"[{key}]: {link}" for key, link in self.reference_pairs)


def to_markdown(spec: dict[str, Any], toc: list[str] | None = None) -> MarkdownDoc:
    """Walk ``spec`` depth first and render every node.

    Table of contents lines are appended to ``toc`` when one is given.
    """
    toc = [] if toc is None else toc
    registry = TypeRegistry(spec)

    sections = []
    for visit in iter_nodes(spec):
        slug = registry.assign_slug(visit.path)
        toc.append(f"{'  ' * visit.depth}- [{visit.key}](#{slug})")
        sections.append(render_entry(visit, registry))

    body = "\n".join(sections).rstrip() + "\n" if sections else ""
    return MarkdownDoc(body, toc, registry.get_references())


def render_document(
    spec: dict[str, Any],
    *,
    title: bool = True,
    toc: bool = True,
    references: bool = True,
) -> str:
    """Render a complete Markdown page for ``spec``."""
    md = to_markdown(spec)
    info = spec.get("info") or {}
    parts: list[str] = []
    if title and info.get("name"):
        heading = f"# {info['name']}"
        if info.get("version"):
            heading += f" {info['version']}"
        parts += [heading, ""]
        if info.get("description"):
            parts += [str(info["description"]), ""]
        if info.get("license"):
            parts += [f"License: {info['license']}", ""]
    if toc and md.toc():
        parts += ["## Table of contents", "", md.toc(), ""]
    if md.content():
        parts += [md.content(), ""]
    if references and md.references():
        parts += [md.references(), ""]
    return "\n".join(parts).rstrip() + "\n"
