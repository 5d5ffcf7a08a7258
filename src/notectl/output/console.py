"""Rich Console factory and theme for notectl output.

Consoles render into a StringIO buffer so that renderers keep a plain
``-> str`` contract.  Outside a terminal (tests, pipes) Rich drops the
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NOTECTL_THEME = Theme(
    {
        "nc.ok": "bold green",
        "nc.error": "bold red",
        "nc.warning": "bold yellow",
        "nc.op": "bold cyan",
        "nc.key": "dim",
        "nc.id": "bold blue",
        "nc.title": "bold",
        "nc.tag": "magenta",
        "nc.pinned": "yellow",
        "nc.favorite": "red",
        "nc.bar": "cyan",
        "nc.empty": "dim italic",
        "nc.admin": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Fixed render width; defaults to 100 columns for stable output.
    """
    return Console(
        file=StringIO(),
        theme=NOTECTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
