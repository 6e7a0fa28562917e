"""Unity Editor command-line vocabulary.

Options are a flat, insertion-ordered mapping from Unity flag names (without
the leading dash) to a flag, a single value, or a list of values.  Keys not
listed in :data:`KNOWN_OPTIONS` are passed through verbatim.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

Flag: TypeAlias = bool
OptionValue: TypeAlias = Flag | str | list[str] | None
UnityOptions: TypeAlias = dict[str, OptionValue]


class BuildTarget(StrEnum):
    """Build targets accepted by ``-buildTarget``."""

    WIN32 = "win32"
    WIN64 = "win64"
    OSX = "osx"
    LINUX = "linux"
    LINUX64 = "linux64"
    IOS = "ios"
    ANDROID = "android"
    WEB = "web"
    WEBSTREAMED = "webstreamed"
    WEBGL = "webgl"
    XBOXONE = "xboxone"
    PS4 = "ps4"
    PSP2 = "psp2"
    WSAPLAYER = "wsaplayer"
    TIZEN = "tizen"
    SAMSUNGTV = "samsungtv"


_GLCORE_VERSIONS = ("", "32", "33", "40", "41", "42", "43", "44", "45")
_GLES_VERSIONS = ("", "30", "31", "32")

KNOWN_OPTIONS: frozenset[str] = frozenset(
    {
        "batchmode",
        "buildLinux32Player",
        "buildLinux64Player",
        "buildLinuxUniversalPlayer",
        "buildOSXPlayer",
        "buildOSX64Player",
        "buildOSXUniversalPlayer",
        "buildTarget",
        "buildWindowsPlayer",
        "buildWindows64Player",
        "cleanedLogFile",
        "createProject",
        "editorTestsCategories",
        "editorTestsFilter",
        "editorTestsResultFile",
        "executeMethod",
        "exportPackage",
        "force-d3d9",
        "force-d3d11",
        *(f"force-glcore{v}" for v in _GLCORE_VERSIONS),
        *(f"force-gles{v}" for v in _GLES_VERSIONS),
        "force-clamped",
        "force-free",
        "importPackage",
        "logFile",
        "nographics",
        "password",
        "projectPath",
        "quit",
        "returnlicense",
        "runEditorTests",
        "serial",
        "silent-crashes",
        "username",
        "disable-assembly-updater",
    }
)


def is_known_option(name: str) -> bool:
    """Whether *name* is part of Unity's documented flag set."""
    return name in KNOWN_OPTIONS


_BOOL_LITERALS = {"true": True, "false": False}


def parse_option(raw: str) -> tuple[str, OptionValue]:
    """Parse a ``KEY`` or ``KEY=VALUE`` token into an option pair.

    A bare key is an enabled flag; ``KEY=true`` and ``KEY=false`` (any case)
    set the flag explicitly, so ``batchmode=false`` switches it off.  A value
    containing commas is kept as a single string; Unity splits those itself
    (e.g. ``editorTestsFilter``).

    Examples:
        >>> parse_option("batchmode")
        ('batchmode', True)
        >>> parse_option("quit=false")
        ('quit', False)
        >>> parse_option("-buildTarget=android")
        ('buildTarget', 'android')
    """
    key, sep, value = raw.partition("=")
    key = key.strip().lstrip("-")
    if not key:
        msg = f"Invalid option: {raw!r}"
        raise ValueError(msg)
    if not sep:
        return key, True
    return key, _BOOL_LITERALS.get(value.strip().lower(), value)
