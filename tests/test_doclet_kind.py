"""Tests for doclet kind parsing."""

from jsdoc2spec.doclet_kind import DocletKind


def test_parse_known_kinds() -> None:
    """Verify that recognized kinds map onto their members."""
    assert DocletKind.parse("class") is DocletKind.CLASS
    assert DocletKind.parse("typedef") is DocletKind.TYPEDEF
    assert DocletKind.parse("package") is DocletKind.PACKAGE


def test_parse_unknown_kinds() -> None:
    """Verify that unknown or missing kinds fall back to UNRECOGNIZED."""
    assert DocletKind.parse("banana") is DocletKind.UNRECOGNIZED
    assert DocletKind.parse("file") is DocletKind.UNRECOGNIZED
    assert DocletKind.parse(None) is DocletKind.UNRECOGNIZED


def test_is_node() -> None:
    """Verify which kinds produce specification nodes."""
    assert DocletKind.FUNCTION.is_node
    assert DocletKind.INTERFACE.is_node
    assert not DocletKind.PACKAGE.is_node
    assert not DocletKind.UNRECOGNIZED.is_node
