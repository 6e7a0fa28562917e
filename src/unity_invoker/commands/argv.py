"""Command: preview the argument vector passed to Unity."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from unity_invoker.commands._base import InvokerCommand, unity_option

if TYPE_CHECKING:
    from unity_invoker.commands._context import AppContext
    from unity_invoker.options import OptionValue


@click.command(
    cls=InvokerCommand,
    examples="""\
  unity-invoker argv --project ./MyGame
  unity-invoker argv --no-headless -o batchmode -o quit
  unity-invoker -q argv -o disable-assembly-updater=A.dll -o disable-assembly-updater=B.dll""",
)
@click.option("--headless/--no-headless", default=None, help="Include the headless flag set.")
@click.option(
    "--project",
    "project_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Unity project to open (-projectPath).",
)
@click.option("--build-target", default=None, help="Active build target (-buildTarget).")
@click.option("--execute-method", default=None, help="Static Editor method to run (-executeMethod).")
@unity_option
@click.pass_obj
def argv(
    app: AppContext,
    headless: bool | None,
    project_path: Path | None,
    build_target: str | None,
    execute_method: str | None,
    options: dict[str, OptionValue],
) -> None:
    """Show the arguments Unity would be launched with."""
    svc = app.launcher
    process = svc.build_process(
        headless=headless,
        project_path=project_path,
        build_target=build_target,
        execute_method=execute_method,
        options=options,
    )
    app.emit(svc.argv(process))
