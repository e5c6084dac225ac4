"""Utility for deriving a display name from a longname."""

import re

MODULE_PREFIX = "module:"
LONGNAME_SEPARATOR_RE = re.compile(r"[.#~]")


def strip_module_prefix(longname: str) -> str:
    """Drop a leading ``module:`` marker: module:foo/bar -> foo/bar."""
    if longname.startswith(MODULE_PREFIX):
        return longname[len(MODULE_PREFIX) :]
    return longname


def local_name(longname: str) -> str:
    """Return the last segment of a longname, e.g. module:a.b#c -> c."""
    return LONGNAME_SEPARATOR_RE.split(strip_module_prefix(longname))[-1]
