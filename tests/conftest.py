"""Shared pytest fixtures and test helpers for unity-invoker tests."""

from __future__ import annotations

import logging
import os
import stat
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from unity_invoker.finder import reset_unity_path, set_unity_path

# Prints one "arg:<token>" line per argument, one line on stderr, and exits
# with $FAKE_UNITY_EXIT (default 0).
FAKE_UNITY_SCRIPT = """\
#!/bin/sh
echo "Fake Unity Editor starting"
for arg in "$@"; do
  echo "arg:$arg"
done
echo "stderr line" 1>&2
exit "${FAKE_UNITY_EXIT:-0}"
"""


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep real env vars, config files, and cached paths out of every test."""
    for key in list(os.environ):
        if key.startswith("UNITY_INVOKER_") or key == "FAKE_UNITY_EXIT":
            monkeypatch.delenv(key)
    monkeypatch.setenv("UNITY_INVOKER_CONFIG", str(tmp_path / "no-such-config.toml"))
    reset_unity_path()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    reset_unity_path()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("unity_invoker").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_unity(tmp_path: Path) -> Path:
    """An executable stand-in for the Unity Editor, pinned as the Unity path."""
    if sys.platform == "win32":
        pytest.skip("fake Unity is a POSIX shell script")
    script = tmp_path / "bin" / "Unity"
    script.parent.mkdir()
    script.write_text(FAKE_UNITY_SCRIPT, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    set_unity_path(script)
    return script


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A minimal Unity project directory."""
    project = tmp_path / "MyGame"
    (project / "Assets").mkdir(parents=True)
    return project


def fake_unity_args(output: str) -> list[str]:
    """Extract the argv the fake Unity received from its output."""
    return [line[len("arg:") :] for line in output.splitlines() if line.startswith("arg:")]
