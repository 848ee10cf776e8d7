"""Rich Console factory and theme for cubicweight output.

Consoles render into a StringIO buffer so formatters can return plain
strings. Outside a terminal (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CW_THEME = Theme(
    {
        "cw.error": "bold red",
        "cw.op": "bold cyan",
        "cw.label": "bold",
        "cw.category": "bold blue",
        "cw.count": "magenta",
        "cw.weight": "bold green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=CW_THEME,
        no_color=no_color,
        highlight=False,
        markup=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
