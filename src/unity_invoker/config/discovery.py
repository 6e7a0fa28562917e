"""Locate ``unity-invoker.toml`` for :class:`InvokerSettings`.

An explicit ``UNITY_INVOKER_CONFIG`` wins; otherwise the nearest file in the
start directory or one of its ancestors is used, the way a Unity project
root is found from inside ``Assets/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "unity-invoker.toml"
CONFIG_ENV_VAR = "UNITY_INVOKER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``UNITY_INVOKER_CONFIG`` pointing at a missing file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
