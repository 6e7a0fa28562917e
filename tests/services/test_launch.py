"""Tests for LaunchService: option merging, previews, and run outcomes."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.conftest import fake_unity_args
from unity_invoker import finder
from unity_invoker.config.settings import InvokerSettings
from unity_invoker.finder import set_unity_path
from unity_invoker.process import invoke_unity
from unity_invoker.services.launch import LaunchService


@pytest.fixture
def settings() -> InvokerSettings:
    return InvokerSettings.from_cli()


@pytest.fixture
def svc(settings: InvokerSettings) -> LaunchService:
    return LaunchService(settings)


def _settings_from_toml(tmp_path: Path, body: str) -> InvokerSettings:
    toml = tmp_path / "unity-invoker.toml"
    toml.write_text(body, encoding="utf-8")
    return InvokerSettings.from_cli(config_path=str(toml))


class TestBuildProcess:
    def test_headless_by_default(self, svc: LaunchService) -> None:
        argv = svc.build_process().argv()
        assert argv == ["-logFile", "-", "-batchmode", "-nographics", "-quit"]

    def test_no_headless(self, svc: LaunchService) -> None:
        assert svc.build_process(headless=False).argv() == []

    def test_explicit_arguments(self, svc: LaunchService, tmp_path: Path) -> None:
        process = svc.build_process(
            headless=False,
            project_path=tmp_path,
            build_target="android",
            execute_method="Builder.Build",
            options={"runEditorTests": True},
        )
        assert process.argv() == [
            "-projectPath",
            str(tmp_path),
            "-buildTarget",
            "android",
            "-executeMethod",
            "Builder.Build",
            "-runEditorTests",
        ]

    def test_config_defaults(self, tmp_path: Path) -> None:
        settings = _settings_from_toml(
            tmp_path,
            '[run]\nheadless = false\nproject_path = "/games/my"\nbuild_target = "ios"\n'
            "[run.extra_options]\nsilent-crashes = true\n",
        )
        argv = LaunchService(settings).build_process().argv()
        assert argv == ["-silent-crashes", "-projectPath", "/games/my", "-buildTarget", "ios"]

    def test_explicit_overrides_config(self, tmp_path: Path) -> None:
        settings = _settings_from_toml(tmp_path, '[run]\nbuild_target = "ios"\n')
        process = LaunchService(settings).build_process(build_target="webgl")
        assert process.options["buildTarget"] == "webgl"

    def test_raw_options_can_disable_defaults(self, svc: LaunchService) -> None:
        argv = svc.build_process(options={"nographics": False}).argv()
        assert "-nographics" not in argv


class TestArgv:
    def test_reports_argv(self, svc: LaunchService) -> None:
        result = svc.argv(invoke_unity({"quit": True}))
        assert result.ok
        assert result.op == "argv"
        assert result.data == {"argv": ["-quit"], "count": 1}
        assert result.warnings == []

    def test_warns_on_unknown_options(self, svc: LaunchService) -> None:
        result = svc.argv(invoke_unity({"myFlag": True, "otherFlag": False}))
        assert result.warnings == ["Unknown Unity option passed through: -myFlag"]


class TestLocate:
    def test_existing(self, svc: LaunchService, tmp_path: Path) -> None:
        exe = tmp_path / "Unity"
        exe.write_text("", encoding="utf-8")
        set_unity_path(exe)
        result = svc.locate()
        assert result.ok
        assert result.data == {"path": str(exe), "exists": True}
        assert result.warnings == []

    def test_missing_is_warning(self, svc: LaunchService, tmp_path: Path) -> None:
        set_unity_path(tmp_path / "Unity")
        result = svc.locate()
        assert result.ok
        assert result.data["exists"] is False
        assert len(result.warnings) == 1

    def test_unsupported_platform(
        self, svc: LaunchService, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(finder.sys, "platform", "aix")
        result = svc.locate()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_PLATFORM"
        assert result.error.detail == {"platform": "aix"}


class TestRun:
    def test_dry_run_does_not_spawn(self, svc: LaunchService, tmp_path: Path) -> None:
        set_unity_path(tmp_path / "missing" / "Unity")
        result = svc.run(invoke_unity({"quit": True}), dry_run=True)
        assert result.ok
        assert result.data == {"argv": ["-quit"], "dry_run": True}

    def test_success(self, svc: LaunchService, fake_unity: Path) -> None:
        lines: list[str] = []
        result = svc.run(invoke_unity({"batchmode": True}), lines.append)
        assert result.ok
        assert result.data["argv"] == ["-batchmode"]
        assert fake_unity_args(result.data["output"]) == ["-batchmode"]
        assert result.data["lines"] == len(result.data["output"].splitlines())
        assert result.meta is not None
        assert result.meta["exit_code"] == 0
        assert "duration_ms" in result.meta
        assert "arg:-batchmode" in lines

    def test_crash(
        self, fake_unity: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FAKE_UNITY_EXIT", "4")
        crash_log = tmp_path / "crash.log"
        monkeypatch.setenv("UNITY_INVOKER_UNITY__CRASH_LOG", str(crash_log))
        svc = LaunchService(InvokerSettings.from_cli())

        result = svc.run(invoke_unity({"quit": True}))

        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNITY_CRASHED"
        assert result.error.detail == {"exit_code": 4, "crash_log_path": str(crash_log)}
        assert result.meta is not None
        assert result.meta["exit_code"] == 4
        assert crash_log.is_file()

    def test_missing_project(self, svc: LaunchService, fake_unity: Path, tmp_path: Path) -> None:
        missing = tmp_path / "NoSuchProject"
        result = svc.run(invoke_unity().project_path(missing))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PROJECT_NOT_FOUND"
        assert result.error.detail["path"] == str(missing)

    def test_missing_executable(self, svc: LaunchService, tmp_path: Path) -> None:
        set_unity_path(tmp_path / "Unity")
        result = svc.run(invoke_unity({"quit": True}))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EXECUTABLE_NOT_FOUND"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX execute permissions")
    def test_not_executable(self, svc: LaunchService, tmp_path: Path) -> None:
        exe = tmp_path / "Unity"
        exe.write_text("not a program", encoding="utf-8")
        exe.chmod(0o644)
        set_unity_path(exe)
        result = svc.run(invoke_unity({"quit": True}))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "LAUNCH_FAILED"

    def test_unknown_option_warning_kept_on_failure(
        self, svc: LaunchService, tmp_path: Path
    ) -> None:
        set_unity_path(tmp_path / "Unity")
        result = svc.run(invoke_unity({"custom": "x"}))
        assert result.warnings == ["Unknown Unity option passed through: -custom"]
