"""Logic for assembling the final specification document."""

import json
from collections.abc import Mapping
from typing import Any

from jsdoc2spec.spec_tree import SpecTree

SPEC_VERSION = "0.1.0"
INFO_FIELDS = ("name", "description", "version", "license")


def specification(
    tree: SpecTree,
    package: Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Wrap a specification tree and package metadata into a document.

    An option that is set (present and not ``None``) always wins over the
    package field, even when it is an empty string.
    """
    package = package or {}
    options = options or {}

    info: dict[str, Any] = {}
    for key in INFO_FIELDS:
        value = options.get(key)
        if value is None:
            value = _package_license(package) if key == "license" else package.get(key)
        if value is not None:
            info[key] = value

    return {
        "spec": {"version": SPEC_VERSION},
        "info": info,
        "entries": tree.entries,
        "definitions": tree.definitions,
    }


def _package_license(package: Mapping[str, Any]) -> str | None:
    licenses = package.get("licenses") or []
    if licenses and isinstance(licenses[0], dict):
        return licenses[0].get("type")
    return package.get("license")


def serialize_spec(spec: dict[str, Any]) -> str:
    """Serialize a specification as two-space indented JSON."""
    return json.dumps(spec, indent=2, ensure_ascii=False) + "\n"
