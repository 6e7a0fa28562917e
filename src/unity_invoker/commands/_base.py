"""Custom Click base classes with --examples support.

Provides InvokerCommand and InvokerGroup that accept an ``examples``
parameter.  When ``--examples`` is passed, the command prints usage examples
and exits.  This keeps ``--help`` concise while making examples available on
demand.
"""

from __future__ import annotations

from typing import Any

import click

from unity_invoker.options import OptionValue, parse_option


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class InvokerCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class InvokerGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = InvokerCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = InvokerCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def _collect_options(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, OptionValue]:
    """Fold repeated ``-o KEY[=VALUE]`` tokens into an options mapping.

    Repeating a key with a value appends to a list, so
    ``-o exportPackage=Assets/A -o exportPackage=out.unitypackage`` yields
    two tokens after the flag.
    """
    options: dict[str, OptionValue] = {}
    for raw in values:
        try:
            key, value = parse_option(raw)
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
        previous = options.get(key)
        if isinstance(value, str) and isinstance(previous, (str, list)):
            existing = previous if isinstance(previous, list) else [previous]
            options[key] = [*existing, value]
        else:
            options[key] = value
    return options


unity_option = click.option(
    "-o",
    "--option",
    "options",
    multiple=True,
    metavar="KEY[=VALUE]",
    callback=_collect_options,
    help="Raw Unity option (repeatable). Bare KEY enables a flag; KEY=false disables it.",
)
