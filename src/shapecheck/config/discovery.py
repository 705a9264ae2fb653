"""Locate ``shapecheck.toml``.

``SHAPECHECK_CONFIG`` names the file outright. Otherwise the nearest
``shapecheck.toml`` in the start directory or any ancestor wins, so a
schema repository can keep one config at its root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "shapecheck.toml"
CONFIG_ENV_VAR = "SHAPECHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A ``SHAPECHECK_CONFIG`` that points at a missing file disables
    discovery rather than falling back to the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        named = Path(override)
        return named if named.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
