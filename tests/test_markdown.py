"""Tests for the Markdown renderer."""

from typing import Any

from jsdoc2spec.markdown.blocks import header_slug, md_codeblock, md_table
from jsdoc2spec.markdown.to_markdown import render_document, to_markdown
from jsdoc2spec.markdown.traverse import iter_nodes
from jsdoc2spec.markdown.type_registry import TypeRegistry

SPEC: dict[str, Any] = {
    "spec": {"version": "0.1.0"},
    "info": {"name": "lib", "description": "A library."},
    "entries": {
        "lib": {
            "kind": "module",
            "entries": {
                "Foo": {
                    "kind": "class",
                    "description": "A foo.",
                    "constructor": {
                        "kind": "function",
                        "params": [{"name": "opts", "type": "Options"}],
                    },
                    "entries": {
                        "run": {
                            "kind": "function",
                            "params": [
                                {"name": "n", "type": "number", "optional": True},
                            ],
                            "returns": {"type": "Options", "description": "The result"},
                        },
                    },
                    "staticEntries": {"create": {"kind": "function"}},
                    "events": {"change": {"kind": "event"}},
                },
            },
            "definitions": {
                "Options": {
                    "kind": "object",
                    "entries": {"size": {"type": "number"}},
                },
            },
        },
    },
    "definitions": {},
}


def test_blocks() -> None:
    """Test the Markdown helpers."""
    assert header_slug("lib.Foo.run") == "lib-foo-run"
    assert header_slug("  !!  ") == "section"
    assert md_codeblock("js", "run()\n") == "```js\nrun()\n```"
    assert md_table([], []) == ""
    assert md_table(["A"], [["x | y"]]) == "| A |\n| --- |\n| x \\| y |"


def test_iter_nodes_is_depth_first() -> None:
    """Verify traversal order: containers in order, parents before children."""
    paths = [v.qualified_name for v in iter_nodes(SPEC)]
    assert paths == [
        "lib",
        "lib.Foo",
        "lib.Foo.run",
        "lib.Foo.create",
        "lib.Foo.change",
        "lib.Options",
        "lib.Options.size",
    ]


def test_type_registry_links_documented_types() -> None:
    """Verify documented names become reference links, others code spans."""
    registry = TypeRegistry(SPEC)
    assert registry.get_type({"type": "Options"}) == "[Options]"
    assert registry.get_type({"type": "module:lib~Options"}) == "[module:lib~Options]"
    assert registry.get_type({"type": "string"}) == "`string`"
    assert (
        registry.get_type({"type": "array", "items": {"type": "Options"}})
        == "Array<[Options]>"
    )
    assert registry.get_references() == [
        ("Options", "#lib-options"),
        ("module:lib~Options", "#lib-options"),
    ]


def test_to_markdown_pieces() -> None:
    """Verify content, table of contents and references."""
    toc: list[str] = []
    md = to_markdown(SPEC, toc)

    assert toc[0] == "- [lib](#lib)"
    assert "  - [Foo](#lib-foo)" in toc
    assert md.toc() == "\n".join(toc)

    content = md.content()
    assert "## lib" in content
    assert "### lib.Foo" in content
    assert "```js\nnew Foo(opts)\n```" in content
    assert "```js\nrun([n]): Options\n```" in content
    assert "**Returns:** [Options]: The result" in content
    assert "`static` `function`" in content
    assert "`event`\n" in content
    assert "`event` `event`" not in content

    refs = md.references().splitlines()
    assert refs == ["[Options]: #lib-options"]


def test_render_document() -> None:
    """Verify the full page layout."""
    page = render_document(SPEC)
    assert page.startswith("# lib\n\nA library.\n\n## Table of contents\n")
    assert page.rstrip().endswith("[Options]: #lib-options")

    bare = render_document(SPEC, title=False, toc=False, references=False)
    assert "Table of contents" not in bare
    assert "[Options]: #lib-options" not in bare
