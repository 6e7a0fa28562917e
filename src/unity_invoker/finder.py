"""Unity executable discovery by platform convention.

Resolution order:
  1. A path pinned with :func:`set_unity_path`
  2. The default install location for the current platform

Settings are never read here.  The CLI pins ``--unity-path`` or
``[unity] path`` before dispatching a command.

The resolved path is cached for the lifetime of the process.  Existence is
not checked here; the invoker stats the path before spawning.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_PATHS: dict[str, str] = {
    "win32": r"C:\Program Files\Unity\Editor\Unity.exe",
    "darwin": "/Applications/Unity/Unity.app/Contents/MacOS/Unity",
    "linux": "/opt/Unity/Editor/Unity",
}

_unity_path: str | None = None


class UnsupportedPlatformError(RuntimeError):
    """Raised when no default Unity location is known for the platform."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Your platform ({platform}) is not supported.")
        self.platform = platform


def set_unity_path(executable_path: str | Path) -> None:
    """Pin the Unity executable used by every subsequent invocation."""
    global _unity_path
    _unity_path = str(executable_path)
    logger.debug("Unity path pinned to %s", _unity_path)


def reset_unity_path() -> None:
    """Forget the pinned or cached executable path."""
    global _unity_path
    _unity_path = None


def get_unity_path() -> str:
    """Return the Unity executable path, resolving and caching it on first use."""
    global _unity_path
    if _unity_path is None:
        _unity_path = find_unity_path()
        logger.debug("Resolved Unity path: %s", _unity_path)
    return _unity_path


def find_unity_path(platform: str | None = None) -> str:
    """Default Unity install location for *platform* (default: ``sys.platform``)."""
    platform = platform or sys.platform
    key = "linux" if platform.startswith("linux") else platform
    try:
        return _DEFAULT_PATHS[key]
    except KeyError:
        raise UnsupportedPlatformError(platform) from None
