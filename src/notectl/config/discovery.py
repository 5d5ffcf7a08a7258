"""Locate the ``notectl.toml`` that applies to the current directory.

``NOTECTL_CONFIG`` names a file explicitly; otherwise the nearest
``notectl.toml`` in the working directory or any of its ancestors wins.
Parsing is left to :class:`notectl.config.settings.TomlSettingsSource`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "notectl.toml"
CONFIG_ENV_VAR = "NOTECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``NOTECTL_CONFIG`` that points at a missing file disables discovery
    rather than falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
