"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``unity-invoker.toml`` only
contains overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from unity_invoker.options import OptionValue


class UnityConfig(BaseModel):
    """[unity] section."""

    model_config = {"frozen": True}

    path: Path | None = None
    crash_log: Path | None = None


class RunConfig(BaseModel):
    """[run] section, defaults for ``unity-invoker run``."""

    model_config = {"frozen": True}

    headless: bool = True
    project_path: Path | None = None
    build_target: str | None = None
    extra_options: dict[str, OptionValue] = Field(default_factory=dict)
