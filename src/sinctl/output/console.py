"""Rich Console factory and theme for sinctl output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops color codes when not attached to a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SIN_THEME = Theme(
    {
        "sin.ok": "bold green",
        "sin.error": "bold red",
        "sin.warning": "bold yellow",
        "sin.op": "bold cyan",
        "sin.key": "dim",
        "sin.token": "bold blue",
        "sin.side.first": "bold white",
        "sin.side.second": "magenta",
        "sin.valid": "green",
        "sin.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (``[output] width`` in sinctl.toml).
    """
    return Console(
        file=StringIO(),
        theme=SIN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_side(side: str) -> str:
    """Return the Rich style name for a side value."""
    return f"sin.side.{side}" if side in ("first", "second") else ""
