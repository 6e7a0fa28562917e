"""Command: launch the Unity Editor."""

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
  unity-invoker run --project ./MyGame --execute-method Builder.BuildAll
  unity-invoker run --project ./MyGame --build-target android -o runEditorTests
  unity-invoker run --no-headless --project ./MyGame
  unity-invoker run -o createProject=./NewGame
  unity-invoker --json run --project ./MyGame --dry-run""",
)
@click.option(
    "--headless/--no-headless",
    default=None,
    help="Batch mode, no graphics, log to stdout, quit when done. [default: from config, else on]",
)
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
@click.option("--dry-run", is_flag=True, help="Report the argument vector without launching Unity.")
@click.pass_obj
def run(
    app: AppContext,
    headless: bool | None,
    project_path: Path | None,
    build_target: str | None,
    execute_method: str | None,
    options: dict[str, OptionValue],
    dry_run: bool,
) -> None:
    """Launch Unity and fail if it exits with a non-zero code."""
    from unity_invoker.logger import structlog_logger

    svc = app.launcher
    process = svc.build_process(
        headless=headless,
        project_path=project_path,
        build_target=build_target,
        execute_method=execute_method,
        options=options,
    )
    app.emit(svc.run(process, structlog_logger(), dry_run=dry_run))
