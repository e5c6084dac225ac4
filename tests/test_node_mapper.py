"""Tests for mapping single doclets onto specification nodes."""

from jsdoc2spec.node_mapper import map_doclet, map_params, map_type


def test_map_type() -> None:
    """Test type expression mapping."""
    assert map_type(None) == {}
    assert map_type({"names": ["String"]}) == {"type": "string"}
    assert map_type({"names": ["*"]}) == {"type": "any"}
    assert map_type({"names": ["Array.<number>"]}) == {
        "type": "array",
        "items": {"type": "number"},
    }
    assert map_type({"names": ["string", "Foo"]}) == {
        "kind": "union",
        "items": [{"type": "string"}, {"type": "Foo"}],
    }


def test_map_params_nests_dotted_names() -> None:
    """Verify that opts.size style params fold into their parent."""
    params = map_params(
        [
            {"name": "opts", "type": {"names": ["object"]}},
            {"name": "opts.size", "type": {"names": ["number"]}, "optional": True},
            {"name": "cb", "description": " Callback "},
        ]
    )
    assert params == [
        {
            "name": "opts",
            "type": "object",
            "entries": {"size": {"optional": True, "type": "number"}},
        },
        {"name": "cb", "description": "Callback"},
    ]


def test_map_function() -> None:
    """Test mapping a function doclet."""
    node = map_doclet(
        {
            "kind": "function",
            "description": "Adds numbers.",
            "params": [{"name": "a", "type": {"names": ["number"]}}],
            "returns": [{"type": {"names": ["number"]}, "description": "The sum"}],
            "fires": ["module:m.event:change"],
            "examples": ["add(1)"],
            "since": "1.2",
        }
    )
    assert node == {
        "description": "Adds numbers.",
        "availability": {"since": "1.2"},
        "kind": "function",
        "params": [{"name": "a", "type": "number"}],
        "returns": {"description": "The sum", "type": "number"},
        "emits": ["module:m.event:change"],
        "examples": ["add(1)"],
    }


def test_map_class_and_member() -> None:
    """Test mapping classes and plain members."""
    cls = map_doclet(
        {
            "kind": "class",
            "params": [{"name": "x"}],
            "augments": ["Base"],
        }
    )
    assert cls == {
        "kind": "class",
        "constructor": {"kind": "function", "params": [{"name": "x"}]},
        "extends": [{"type": "Base"}],
    }

    const = map_doclet({"kind": "constant", "type": {"names": ["number"]}})
    assert const == {"type": "number", "readOnly": True}


def test_map_typedef_variants() -> None:
    """Test object, callback and alias typedefs."""
    obj = map_doclet(
        {
            "kind": "typedef",
            "type": {"names": ["object"]},
            "properties": [{"name": "id", "type": {"names": ["string"]}}],
        }
    )
    assert obj == {"kind": "object", "entries": {"id": {"type": "string"}}}

    callback = map_doclet({"kind": "typedef", "type": {"names": ["function"]}})
    assert callback == {"kind": "function"}

    alias = map_doclet({"kind": "typedef", "type": {"names": ["string"]}})
    assert alias == {"type": "string"}


def test_map_stability_and_deprecation() -> None:
    """Test stability tags and deprecation notes."""
    node = map_doclet(
        {
            "kind": "function",
            "deprecated": "Use other()",
            "tags": [{"originalTitle": "experimental"}],
        }
    )
    assert node["stability"] == "experimental"
    assert node["availability"] == {"deprecated": {"description": "Use other()"}}


def test_map_non_node_kinds() -> None:
    """Verify that package and unknown kinds produce no node."""
    assert map_doclet({"kind": "package"}) is None
    assert map_doclet({"kind": "banana"}) is None
