"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from sinctl.output.console import create_console, get_output, style_for_side

if TYPE_CHECKING:
    from rich.console import Console

    from sinctl.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console"], None]

# Ops whose payload is a single identifier; quiet mode prints just the token.
_TOKEN_OPS = frozenset({"parse", "flip", "convert"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op in _TOKEN_OPS:
        return str(result.data.get("token", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sin.ok"), Text(f"  {result.op}", style="sin.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sin.key")
    if key in ("token", "source", "left", "right"):
        v = Text(str(value), style="sin.token")
    elif key == "side":
        v = Text(str(value), style=style_for_side(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _token_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Token", style="sin.token", no_wrap=True)
    table.add_column("Valid")
    table.add_column("Reason", style="dim")
    for item in items:
        valid = bool(item.get("valid"))
        table.add_row(
            Text(repr(item.get("token"))),
            Text("yes", style="sin.valid") if valid else Text("no", style="sin.invalid"),
            Text(item.get("kind") or ""),
        )
    return table


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_identifier(result: ServiceResult, console: Console) -> None:
    """Render parse/flip/convert results."""
    _status_line(console, result)
    for key in ("source", "token", "style", "side"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_validate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    console.print(_token_table(result.data.get("items", [])))
    _field(console, "valid_count", result.data.get("valid_count", 0))


def _render_compare(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("left", "right", "same_style", "same_side", "equal"):
        _field(console, key, result.data.get(key))


def _render_styles(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    styles = result.data.get("styles", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Style", style="sin.token")
    table.add_column("First", style="sin.side.first")
    table.add_column("Second", style="sin.side.second")
    for style in styles:
        table.add_row(style, style, style.lower())
    console.print(table)
    _field(console, "sides", ", ".join(result.data.get("sides", [])))
    _field(console, "max_length", result.data.get("max_length"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sin.error")
    op = Text(f"  {result.op}", style="sin.op")
    console.print(label, op, Text(f" — {msg}"), sep="")

    items = result.data.get("items")
    if items:
        console.print(_token_table(items))

    if verbose and err is not None:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, _Renderer] = {
    "parse": _render_identifier,
    "flip": _render_identifier,
    "convert": _render_identifier,
    "validate": _render_validate,
    "compare": _render_compare,
    "list_styles": _render_styles,
}
