from __future__ import annotations

"""Path-addressed access to nested configuration mappings.

A *path* is a dot-separated string of mapping keys: ``"a.b.c"`` addresses
``root["a"]["b"]["c"]``. The helpers here are pure with respect to I/O and hold
no state; they receive a tree, mutate it in place and hand the same root back
so callers can keep (or replace) their reference.

Segments are produced by ``str.split(".")`` and never coalesced, so ``"a..b"``
addresses ``root["a"][""]["b"]`` and ``""`` addresses the top-level key ``""``.
Sequences are leaf values; index segments are not supported.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigValue",
    "ConfigTree",
    "split_path",
    "get",
    "set",
    "unset",
]

ConfigValue = Union[None, bool, int, float, str, List["ConfigValue"], Dict[str, "ConfigValue"]]
ConfigTree = Dict[str, ConfigValue]


def split_path(path: str) -> List[str]:
    """Return the mapping keys addressed by *path*."""
    return path.split(".")


def get(root: ConfigTree, path: str, converter: Optional[Callable[[Any], Any]] = None) -> Any:
    """Read the value stored at *path*.

    Returns ``None`` when a segment is missing or when an intermediate value is
    not a mapping. A *converter*, if given, is applied to the found value and
    any exception it raises reaches the caller untouched.
    """
    node: ConfigValue = root
    for segment in split_path(path):
        if not isinstance(node, dict) or segment not in node:
            return None
        node = node[segment]

    if converter is not None:
        return converter(node)
    return node


def set(root: ConfigTree, path: str, value: Any) -> ConfigTree:  # noqa: A001
    """Store *value* at *path*, creating intermediate mappings as needed.

    An intermediate segment holding a non-mapping value is replaced by a new
    empty mapping; the previous value is discarded, not merged.
    """
    *parents, leaf = split_path(path)
    node = root
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, dict):
            if segment in node:
                logger.debug("Overwriting non-mapping value at '%s' while setting '%s'", segment, path)
            child = {}
            node[segment] = child
        node = child

    node[leaf] = value
    return root


def unset(root: ConfigTree, path: str) -> ConfigTree:
    """Remove the key addressed by *path* if it exists.

    Missing intermediates make this a no-op. Mappings left empty by the removal
    are kept.
    """
    *parents, leaf = split_path(path)
    node: ConfigValue = root
    for segment in parents:
        if not isinstance(node, dict) or segment not in node:
            return root
        node = node[segment]

    if isinstance(node, dict):
        node.pop(leaf, None)
    return root
