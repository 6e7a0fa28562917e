"""Tests for config file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from unity_invoker.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("", encoding="utf-8")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("", encoding="utf-8")
        nested = tmp_path / "Assets" / "Scripts"
        nested.mkdir(parents=True)
        assert find_config(nested) == cfg.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
        other = tmp_path / "elsewhere.toml"
        other.write_text("", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None

    def test_nothing_found(self, tmp_path: Path) -> None:
        nested = tmp_path / "MyGame" / "Assets"
        nested.mkdir(parents=True)
        found = find_config(nested)
        assert found is None or not found.is_relative_to(tmp_path)
