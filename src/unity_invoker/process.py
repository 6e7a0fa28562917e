"""UnityProcess: fluent builder over Unity's command-line options.

Usage::

    output = (
        invoke_headless_unity()
        .project_path("/path/to/project")
        .build_target(BuildTarget.ANDROID)
        .execute_method("Builder.Build")
        .run(structlog_logger())
    )
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from unity_invoker.invoker import run_unity_process, to_argv
from unity_invoker.logger import SimpleLogger, noop_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from unity_invoker.options import BuildTarget, OptionValue, UnityOptions


class LinuxPlayerArch(StrEnum):
    X86 = "x86"
    X64 = "x64"
    UNIVERSAL = "universal"


class OSXPlayerArch(StrEnum):
    X86 = "x86"
    X64 = "x64"
    UNIVERSAL = "universal"


class WindowsPlayerArch(StrEnum):
    X86 = "x86"
    X64 = "x64"


class RendererType(StrEnum):
    """Graphics API used by the Editor; the value is the ``-force-*`` prefix."""

    #: Direct3D 9 or 11. Normally the player settings decide (typically D3D11).
    DIRECT3D = "d3d"
    #: OpenGL 3/4 core profile. Falls back to Direct3D if unsupported.
    OPENGL_CORE = "glcore"
    #: OpenGL for Embedded Systems.
    OPENGL_ES = "gles"


_LINUX_PLAYER_OPTIONS: dict[LinuxPlayerArch, str] = {
    LinuxPlayerArch.X86: "buildLinux32Player",
    LinuxPlayerArch.X64: "buildLinux64Player",
    LinuxPlayerArch.UNIVERSAL: "buildLinuxUniversalPlayer",
}

_OSX_PLAYER_OPTIONS: dict[OSXPlayerArch, str] = {
    OSXPlayerArch.X86: "buildOSXPlayer",
    OSXPlayerArch.X64: "buildOSX64Player",
    OSXPlayerArch.UNIVERSAL: "buildOSXUniversalPlayer",
}

_WINDOWS_PLAYER_OPTIONS: dict[WindowsPlayerArch, str] = {
    WindowsPlayerArch.X86: "buildWindowsPlayer",
    WindowsPlayerArch.X64: "buildWindows64Player",
}


def _player_option(table: dict, arch: object, platform: str) -> str:
    try:
        return table[arch]
    except (KeyError, TypeError):
        msg = f"Invalid {platform} architecture: {arch}."
        raise ValueError(msg) from None


class UnityProcess:
    """Accumulates Unity options; :meth:`run` launches the Editor.

    Every setter returns ``self`` so calls can be chained.  Setters that
    take an ``enabled`` flag can also switch a previously set flag off.
    """

    def __init__(self) -> None:
        self._options: UnityOptions = {}

    @property
    def options(self) -> UnityOptions:
        """A copy of the accumulated options."""
        return dict(self._options)

    def argv(self) -> list[str]:
        """The argument vector :meth:`run` would pass to Unity."""
        return to_argv(self._options)

    def with_options(self, options: Mapping[str, OptionValue]) -> UnityProcess:
        """Set options by hand, without the fluent methods."""
        self._options.update(options)
        return self

    def batchmode(self, enabled: bool = True) -> UnityProcess:
        """Run Unity in batch mode.

        Prevents pop-up windows and removes the need for human intervention.
        When script code throws, an Asset server update fails, or another
        operation fails, Unity exits immediately with return code 1.  Only a
        single instance may open a given project in batch mode.
        """
        self._options["batchmode"] = enabled
        return self

    def build_linux_player(self, arch: LinuxPlayerArch, path: str | Path) -> UnityProcess:
        """Build a standalone Linux player."""
        self._options[_player_option(_LINUX_PLAYER_OPTIONS, arch, "Linux")] = str(path)
        return self

    def build_osx_player(self, arch: OSXPlayerArch, path: str | Path) -> UnityProcess:
        """Build a standalone macOS player."""
        self._options[_player_option(_OSX_PLAYER_OPTIONS, arch, "OSX")] = str(path)
        return self

    def build_windows_player(self, arch: WindowsPlayerArch, path: str | Path) -> UnityProcess:
        """Build a standalone Windows player."""
        self._options[_player_option(_WINDOWS_PLAYER_OPTIONS, arch, "Windows")] = str(path)
        return self

    def build_target(self, name: BuildTarget | str) -> UnityProcess:
        """Select the active build target before the project is loaded."""
        self._options["buildTarget"] = str(name)
        return self

    def cleaned_log_file(self, enabled: bool = True) -> UnityProcess:
        """Strip stack traces and noise from the Editor log."""
        self._options["cleanedLogFile"] = enabled
        return self

    def create_project(self, project_path: str | Path) -> UnityProcess:
        """Create an empty project at *project_path*."""
        self._options["createProject"] = str(project_path)
        return self

    def editor_tests_categories(self, *categories: str) -> UnityProcess:
        """Filter editor tests by categories."""
        self._options["editorTestsCategories"] = ",".join(categories)
        return self

    def editor_tests_filter(self, *test_names: str) -> UnityProcess:
        """Filter editor tests by names."""
        self._options["editorTestsFilter"] = ",".join(test_names)
        return self

    def editor_tests_result_file(self, file_path: str | Path) -> UnityProcess:
        """Where to write test results.

        A folder gets a default file name.  Without this option results land
        in the project root.
        """
        self._options["editorTestsResultFile"] = str(file_path)
        return self

    def execute_method(self, static_method_path: str) -> UnityProcess:
        """Execute a static Editor method once the project is open.

        The enclosing script must live in an ``Editor`` folder.  Throwing an
        exception, or calling ``EditorApplication.Exit`` with a non-zero
        code, makes the process fail.
        """
        self._options["executeMethod"] = static_method_path
        return self

    def export_package(
        self,
        folder_paths: list[str],
        package_file_path: str | Path,
    ) -> UnityProcess:
        """Export whole folders (relative to the project root) into a package.

        Normally used together with :meth:`project_path`.
        """
        self._options["exportPackage"] = [*folder_paths, str(package_file_path)]
        return self

    def use_renderer(self, renderer: RendererType, version: int | None = None) -> UnityProcess:
        """Force the graphics API used by the Editor, optionally at *version*."""
        try:
            prefix = RendererType(renderer).value
        except ValueError:
            msg = f"Invalid renderer type: {renderer}."
            raise ValueError(msg) from None
        self._options[f"force-{prefix}{version or ''}"] = True
        return self

    def force_clamped(self, enabled: bool = True) -> UnityProcess:
        """Skip checks for additional OpenGL extensions (with OpenGL core)."""
        self._options["force-clamped"] = enabled
        return self

    def force_free(self, enabled: bool = True) -> UnityProcess:
        """Run as if a free Unity license were installed."""
        self._options["force-free"] = enabled
        return self

    def import_package(self, package_file_path: str | Path) -> UnityProcess:
        """Import the given package without showing the import dialog."""
        self._options["importPackage"] = str(package_file_path)
        return self

    def log_file(self, log_file_path: str | Path | None) -> UnityProcess:
        """Where the Editor log is written.

        ``None`` passes a bare ``-logFile`` flag; ``"-"`` logs to stdout so
        the output is captured by :meth:`run`.
        """
        self._options["logFile"] = True if log_file_path is None else str(log_file_path)
        return self

    def no_graphics(self, enabled: bool = True) -> UnityProcess:
        """Do not initialize the graphics device (batch mode only).

        Allows running on machines without a GPU.  GI cannot be baked on
        macOS in this mode.
        """
        self._options["nographics"] = enabled
        return self

    def password(self, password: str) -> UnityProcess:
        self._options["password"] = password
        return self

    def project_path(self, project_path: str | Path) -> UnityProcess:
        """Open the project at *project_path*."""
        self._options["projectPath"] = str(project_path)
        return self

    def quit(self, enabled: bool = True) -> UnityProcess:
        """Quit the Editor once other commands have finished."""
        self._options["quit"] = enabled
        return self

    def return_license(self, enabled: bool = True) -> UnityProcess:
        """Return the active license to the license server."""
        self._options["returnlicense"] = enabled
        return self

    def run_editor_tests(self) -> UnityProcess:
        """Run the project's Editor tests.

        Requires :meth:`project_path`; the Editor quits by itself afterwards.
        """
        self._options["runEditorTests"] = True
        return self

    def serial(self, serial: str) -> UnityProcess:
        """Activate Unity with the given serial key."""
        self._options["serial"] = serial
        return self

    def silent_crashes(self, enabled: bool = True) -> UnityProcess:
        """Don't display a crash dialog."""
        self._options["silent-crashes"] = enabled
        return self

    def username(self, username: str) -> UnityProcess:
        self._options["username"] = username
        return self

    def disable_assembly_updater(self, enabled: bool = True) -> UnityProcess:
        """Skip automatic updates for all assemblies."""
        self._options["disable-assembly-updater"] = enabled
        return self

    def disable_assembly_updater_for(self, *assembly_paths: str) -> UnityProcess:
        """Skip automatic updates for the given assemblies only."""
        self._options["disable-assembly-updater"] = list(assembly_paths)
        return self

    def run(self, log: SimpleLogger = noop_logger, *, crash_log: Path | None = None) -> str:
        """Launch Unity and block until it exits.

        Returns the combined stdout/stderr.  Unity only writes its log there
        when ``log_file("-")`` is set.

        Raises:
            UnityCrashError: Unity exited with a non-zero code.
        """
        return run_unity_process(self._options, log, crash_log=crash_log)


def invoke_unity(options: Mapping[str, OptionValue] | None = None) -> UnityProcess:
    """Start a fluent chain, optionally seeded with raw *options*."""
    return UnityProcess().with_options(options or {})


def invoke_headless_unity(options: Mapping[str, OptionValue] | None = None) -> UnityProcess:
    """Start a fluent chain for a windowless run that logs to stdout and quits."""
    return invoke_unity(options).log_file("-").batchmode().no_graphics().quit()
