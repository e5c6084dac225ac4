"""Orchestration logic for turning doclets into a specification."""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from jsdoc2spec.collect import collect
from jsdoc2spec.filter_doclets import filter_doclets
from jsdoc2spec.specification import serialize_spec, specification
from jsdoc2spec.transform import transform
from jsdoc2spec.write_spec import write_spec

logger = logging.getLogger(__name__)


def generate(
    doclets: Iterable[dict[str, Any]],
    destination: Path | str | None = None,
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Run the full doclet pipeline and optionally write the result."""
    accepted = filter_doclets(doclets)
    collected = collect(accepted)
    tree = transform(collected)
    spec = specification(tree, collected.package, options)
    logger.info(
        "Collected %d of %d doclets (%d root entries, %d root definitions)",
        len(collected.ids),
        len(accepted),
        len(tree.entries),
        len(tree.definitions),
    )

    if destination is not None:
        out = write_spec(serialize_spec(spec), destination)
        logger.info("Wrote specification to %s", out)
    return spec
