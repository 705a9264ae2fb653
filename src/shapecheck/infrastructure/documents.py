"""Load JSON and YAML documents (data, schemas, definitions tables).

YAML is read with ruamel.yaml's safe loader; everything else is parsed
as JSON. A fresh YAML instance is created per load.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from shapecheck.domain.errors import ShapecheckError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class DocumentLoadError(ShapecheckError):
    """A document could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load {path}: {reason}")
        self.path = path
        self.reason = reason


def load_document(path: Path) -> Any:
    """Parse *path* as YAML (``.yaml``/``.yml``) or JSON.

    Raises:
        DocumentLoadError: The file is unreadable or not well-formed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise DocumentLoadError(path, str(exc)) from exc

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return _plain(YAML(typ="safe").load(text))
        except YAMLError as exc:
            raise DocumentLoadError(path, f"invalid YAML ({exc})") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc


def load_definitions(paths: Iterable[Path]) -> dict[str, Any]:
    """Merge definitions tables from *paths*; later files win per top-level key.

    Raises:
        DocumentLoadError: A file is unreadable or is not a mapping.
    """
    merged: dict[str, Any] = {}
    for path in paths:
        table = load_document(path)
        if not isinstance(table, Mapping):
            raise DocumentLoadError(path, "definitions must be a mapping")
        logger.debug("Loaded %d definitions from %s", len(table), path)
        merged.update(table)
    return merged


def _plain(node: Any) -> Any:
    """Convert loader output to plain dicts and lists."""
    if isinstance(node, Mapping):
        return {str(k): _plain(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_plain(v) for v in node]
    return node
