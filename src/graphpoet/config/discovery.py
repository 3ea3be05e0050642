"""Locate ``graphpoet.toml``.

An explicit ``--config`` wins and never reaches this module. Otherwise
``GRAPHPOET_CONFIG`` names the file; failing that, the nearest
``graphpoet.toml`` in the start directory or one of its ancestors is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "graphpoet.toml"
CONFIG_ENV_VAR = "GRAPHPOET_CONFIG"


def _env_config() -> Path | None:
    raw = os.environ.get(CONFIG_ENV_VAR)
    return Path(raw) if raw else None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a run started in *start* (default: cwd).

    A set ``GRAPHPOET_CONFIG`` is authoritative: if it names no file the
    result is None and no walk-up happens.
    """
    pinned = _env_config()
    if pinned is not None:
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
