"""Render layer — Rich box tables returned as plain or ANSI strings.

May import from ``core``; never performs I/O beyond its own in-memory
buffers.
"""

from getnews.render.tables import format_articles, format_help, format_sources

__all__: list[str] = [
    "format_articles",
    "format_help",
    "format_sources",
]
