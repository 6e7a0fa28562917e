"""unity-invoker: launch the Unity Editor with typed command-line options."""

from __future__ import annotations

__version__ = "0.1.0"

from unity_invoker import logger
from unity_invoker.finder import (
    UnsupportedPlatformError,
    find_unity_path,
    get_unity_path,
    reset_unity_path,
    set_unity_path,
)
from unity_invoker.invoker import UnityCrashError, run_unity_process, to_argv
from unity_invoker.options import KNOWN_OPTIONS, BuildTarget, UnityOptions
from unity_invoker.process import (
    LinuxPlayerArch,
    OSXPlayerArch,
    RendererType,
    UnityProcess,
    WindowsPlayerArch,
    invoke_headless_unity,
    invoke_unity,
)

__all__ = [
    "KNOWN_OPTIONS",
    "BuildTarget",
    "LinuxPlayerArch",
    "OSXPlayerArch",
    "RendererType",
    "UnityCrashError",
    "UnityOptions",
    "UnityProcess",
    "UnsupportedPlatformError",
    "WindowsPlayerArch",
    "__version__",
    "find_unity_path",
    "get_unity_path",
    "invoke_headless_unity",
    "invoke_unity",
    "logger",
    "reset_unity_path",
    "run_unity_process",
    "set_unity_path",
    "to_argv",
]
