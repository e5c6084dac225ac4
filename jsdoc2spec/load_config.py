"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from jsdoc2spec.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    # info overrides; unset values fall back to the package doclet
    "name": None,
    "description": None,
    "version": None,
    "license": None,
    "output": "spec.json",
    "log_level": "INFO",
    "markdown": {
        "output": "api.md",
        "title": True,
        "toc": True,
        "references": True,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config


def info_options(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the name/description/version/license overrides."""
    return {
        key: config[key]
        for key in ("name", "description", "version", "license")
        if config.get(key) is not None
    }
