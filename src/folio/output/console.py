"""Rich Console factory and theme for folio output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Outside a terminal (tests, pipes) Rich drops color
codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FOLIO_THEME = Theme(
    {
        "folio.ok": "bold green",
        "folio.error": "bold red",
        "folio.op": "bold cyan",
        "folio.key": "dim",
        "folio.url": "bold blue",
        "folio.path": "dim",
        "folio.title": "bold",
        "folio.draft": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=FOLIO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
