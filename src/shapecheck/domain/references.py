"""Reference resolver — ``(#/a/b)`` paths into a definitions table."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def resolve(ref_path: Iterable[str], definitions: Mapping[str, Any] | None) -> Any | None:
    """Walk *definitions* through each key of *ref_path*.

    Returns the raw schema found, or None when any step is missing or is
    not a mapping. Nothing is cached: each call may supply a different
    table.
    """
    node: Any = definitions
    for key in ref_path:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node


def format_ref(ref_path: Iterable[str]) -> str:
    """Render *ref_path* as ``#/a/b``."""
    return "#/" + "/".join(ref_path)
