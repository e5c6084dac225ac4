"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Anything else in ``update`` replaces the value in ``base``.
    - ``None`` in ``update`` leaves the base value alone (an empty YAML key).
    """
    result = dict(base)
    for key, value in update.items():
        if value is None and key in result:
            continue
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
