"""Spawn the Unity Editor and monitor it until it exits.

Pipeline: CHECK PROJECT → CHECK EXECUTABLE → BUILD ARGV → SPAWN → STREAM → EXIT CODE

Filesystem and process-launch failures propagate unchanged.  The only error
raised by this module itself is :class:`UnityCrashError`, for a non-zero
exit code.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from collections.abc import Mapping
from pathlib import Path

from unity_invoker.finder import get_unity_path
from unity_invoker.logger import SimpleLogger, noop_logger
from unity_invoker.options import OptionValue

logger = logging.getLogger(__name__)

CRASH_LOG_FILENAME = "unity_crash.log"


class UnityCrashError(Exception):
    """Unity exited with a non-zero code.

    Attributes:
        unity_log: Combined stdout/stderr captured from the process.
        exit_code: The process return code.
        crash_log_path: Where the captured log was written.
    """

    def __init__(
        self,
        message: str,
        unity_log: str,
        *,
        exit_code: int | None = None,
        crash_log_path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.unity_log = unity_log
        self.exit_code = exit_code
        self.crash_log_path = crash_log_path


def to_argv(options: Mapping[str, OptionValue]) -> list[str]:
    """Translate an options mapping into Unity's argument vector.

    Falsy values are skipped.  Every other key becomes ``-key``, followed by
    one token per list element, or by the value itself for non-boolean
    scalars.

    Examples:
        >>> to_argv({"batchmode": True, "quit": False, "projectPath": "/p"})
        ['-batchmode', '-projectPath', '/p']
        >>> to_argv({"disable-assembly-updater": ["A.dll", "B.dll"]})
        ['-disable-assembly-updater', 'A.dll', 'B.dll']
    """
    argv: list[str] = []
    for key, value in options.items():
        if not value:
            continue
        argv.append(f"-{key}")
        if isinstance(value, list):
            argv.extend(str(v) for v in value)
        elif not isinstance(value, bool):
            argv.append(str(value))
    return argv


def run_unity_process(
    options: Mapping[str, OptionValue],
    log: SimpleLogger = noop_logger,
    *,
    crash_log: Path | None = None,
) -> str:
    """Run Unity with *options* and return its combined output.

    Each line of output is passed to *log* (stripped) as it arrives.

    Raises:
        FileNotFoundError: ``projectPath`` or the Unity executable is missing.
        NotADirectoryError: ``projectPath`` is not a directory.
        UnityCrashError: Unity exited with a non-zero code.
    """
    project_path = options.get("projectPath")
    if project_path and isinstance(project_path, str):
        os.listdir(project_path)

    unity_path = get_unity_path()
    os.stat(unity_path)

    argv = to_argv(options)
    logger.debug("Spawning %s %s", unity_path, " ".join(argv))

    chunks: list[str] = []
    with subprocess.Popen(
        [unity_path, *argv],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding="utf-8",
        errors="replace",
    ) as proc:
        assert proc.stdout is not None
        for line in proc.stdout:
            chunks.append(line)
            log(line.strip())
        returncode = proc.wait()

    output = "".join(chunks)
    logger.debug("Unity exited with code %d", returncode)
    if returncode == 0:
        return output

    crash_path = _write_crash_log(output, crash_log)
    raise UnityCrashError(
        f"Unity process crashed! Editor log has been written to {crash_path}",
        output,
        exit_code=returncode,
        crash_log_path=crash_path,
    )


def default_crash_log_path() -> Path:
    """Crash log location used when the caller passes none."""
    return Path(tempfile.gettempdir()) / CRASH_LOG_FILENAME


def _write_crash_log(unity_log: str, path: Path | None) -> Path:
    crash_path = path or default_crash_log_path()
    crash_path.parent.mkdir(parents=True, exist_ok=True)
    crash_path.write_text(unity_log, encoding="utf-8")
    return crash_path
