"""Command: show which Unity executable would be launched."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from unity_invoker.commands._base import InvokerCommand

if TYPE_CHECKING:
    from unity_invoker.commands._context import AppContext


@click.command(
    cls=InvokerCommand,
    examples="""\
  unity-invoker locate
  unity-invoker --unity-path /opt/Unity/2022.3/Editor/Unity locate
  UNITY_INVOKER_UNITY__PATH=/opt/Unity/Editor/Unity unity-invoker --json locate""",
)
@click.pass_obj
def locate(app: AppContext) -> None:
    """Resolve the Unity executable path and check that it exists."""
    app.emit(app.launcher.locate())
