"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from unity_invoker.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from unity_invoker.services.result import ServiceResult

# Too large for the human view; still present in --json output.
_HIDDEN_KEYS = frozenset({"output"})


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags derived from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "argv" in result.data and result.op == "argv":
        return " ".join(result.data["argv"])
    if result.op == "locate":
        return str(result.data.get("path", ""))
    return f"OK: {result.op}"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ui.ok"), Text(f"  {result.op}", style="ui.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="ui.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    elif key == "path":
        v = Text(str(value), style="ui.path")
    else:
        v = Text(str(value))
    console.print(k + v)


def _render_meta(result: ServiceResult, console: Console) -> None:
    if result.meta:
        for key, value in result.meta.items():
            _field(console, key, value)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if key not in _HIDDEN_KEYS:
            _field(console, key, value)
    if verbose:
        _render_meta(result, console)


def _render_argv(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    """One line per flag, with its values on the same line."""
    _status_line(console, result)
    line: Text | None = None
    for token in result.data.get("argv", []):
        if token.startswith("-"):
            if line is not None:
                console.print(line)
            line = Text("  ") + Text(token, style="ui.flag")
        elif line is None:
            line = Text(f"  {token}")
        else:
            line.append(f" {token}")
    if line is not None:
        console.print(line)
    if result.data.get("dry_run"):
        _field(console, "dry_run", True)
    if verbose:
        _render_meta(result, console)


def _render_locate(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    _field(console, "path", result.data.get("path"))
    exists = bool(result.data.get("exists"))
    console.print(
        Text("  exists: ", style="ui.key")
        + Text("yes" if exists else "no", style="ui.ok" if exists else "ui.missing")
    )


def _render_run(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    if result.data.get("dry_run"):
        _render_argv(result, console, verbose=verbose)
        return
    _render_generic(result, console, verbose=verbose)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    msg = error.message if error else "Unknown error"
    console.print(Text("ERROR", style="ui.error"), Text(f"  {result.op}", style="ui.op"))
    if error is not None:
        _field(console, "code", error.code)
    _field(console, "message", msg)
    if error is not None and (verbose or error.code == "UNITY_CRASHED"):
        for key, value in error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "argv": _render_argv,
    "locate": _render_locate,
    "run": _render_run,
}
