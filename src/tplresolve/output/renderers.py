"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from tplresolve.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tplresolve.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _render_record(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    record_id = result.data.get("id")
    return str(record_id) if record_id is not None else f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tpl.key")
    if key == "id" or key.endswith("Id"):
        v = Text(str(value), style="tpl.id")
    elif key in ("name", "type"):
        v = Text(str(value), style="tpl.name")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_record(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="tpl.ok"), Text(f"  {result.op}", style="tpl.op"))
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for key, value in result.meta.items():
            console.print(f"    {key}: {value}", markup=False)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="tpl.error"),
        Text(f"  {result.op}", style="tpl.op"),
        Text(f"  {message}", style=""),
    )
    if error is not None:
        console.print(Text("  code: ", style="tpl.key"), Text(error.code, style="tpl.code"), sep="")
        if verbose and error.detail:
            for key, value in error.detail.items():
                console.print(f"    {key}: {value}", markup=False)
