"""Locating ``folio.toml``.

The site root is the directory holding ``folio.toml``; it is found by
walking up from the working directory. ``FOLIO_CONFIG`` points at an
explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "folio.toml"
CONFIG_ENV_VAR = "FOLIO_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``folio.toml`` at or above *start*, if any.

    A set ``FOLIO_CONFIG`` wins over the walk-up, even when it names a
    file that does not exist (in which case nothing is found).
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
