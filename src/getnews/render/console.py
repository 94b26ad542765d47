"""Render Rich tables into strings of an exact width.

Each call builds a private :class:`~rich.console.Console` over a
``StringIO`` buffer, so rendering keeps no state between requests.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console, RenderableType


def build_string_console(width: int, *, color: bool) -> tuple[Console, StringIO]:
    """Return a console writing into a fresh buffer.

    With ``color=False`` styles are dropped entirely and the output is
    plain text; with ``color=True`` they are emitted as 16-colour ANSI
    escapes regardless of whether a terminal is attached.
    """
    buffer = StringIO()
    console = Console(
        file=buffer,
        width=width,
        color_system="standard" if color else None,
        force_terminal=color,
        force_jupyter=False,
        legacy_windows=False,
        highlight=False,
        emoji=False,
        markup=False,
    )
    return console, buffer


def render_table(table: RenderableType, width: int, *, color: bool = False) -> str:
    """Render *table* at *width* columns and return the text.

    The result ends with exactly one newline.
    """
    console, buffer = build_string_console(width, color=color)
    console.print(table)
    return buffer.getvalue()
