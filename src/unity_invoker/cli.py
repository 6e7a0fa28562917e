"""Root CLI group for unity-invoker with global flags and command registration."""

from __future__ import annotations

import click

from unity_invoker import __version__
from unity_invoker.commands import register_commands
from unity_invoker.commands._base import InvokerGroup
from unity_invoker.commands._context import AppContext
from unity_invoker.config.settings import InvokerSettings


@click.group(
    cls=InvokerGroup,
    invoke_without_command=True,
    examples="""\
  unity-invoker locate
  unity-invoker run --project ./MyGame --execute-method Builder.BuildAll
  unity-invoker --json argv --project ./MyGame""",
)
@click.version_option(version=__version__, prog_name="unity-invoker")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--unity-path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Unity executable to launch (overrides config and platform default).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    unity_path: str | None,
) -> None:
    """unity-invoker: launch the Unity Editor from the command line."""
    from unity_invoker.finder import reset_unity_path, set_unity_path

    settings = InvokerSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)

    reset_unity_path()
    if unity_path:
        set_unity_path(unity_path)
    elif settings.unity.path is not None:
        set_unity_path(settings.unity.path)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
