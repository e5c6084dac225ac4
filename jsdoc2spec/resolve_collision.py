"""Policy applied when two nodes compete for the same slot."""

import logging
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_collision(key: str, existing: T | None, incoming: T) -> T:
    """Return the value to keep for ``key``.

    The incoming value always wins (last write wins). Overloaded signatures
    documented under one name therefore keep only the last one.
    """
    if existing is not None:
        logger.debug("Replacing existing node for %s", key)
    return incoming
