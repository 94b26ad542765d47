"""Fixed-width box tables for sources, articles and the help page.

Column widths are computed here from the effective display width, and
all cell text is pre-wrapped with :func:`~getnews.core.text_wrap.wrap_text`.
Rich only draws the borders and applies styles, so the wrap points
depend on visible character counts alone.

Width arithmetic
----------------
Every cell has one column of padding on each side and every column
boundary is one border character, so for ``k`` columns::

    total width = sum(content widths) + 2 * k + (k + 1)
"""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence

from loguru import logger
from rich import box
from rich.console import Group
from rich.table import Table
from rich.text import Text

from getnews.core.constants import (
    ARTICLES_HEADER,
    DESCRIPTION_HEADER,
    FOOTER_LINES,
    FOOTER_LINK,
    HELP_ROUTES,
    HELP_TEXT,
    HELP_WIDTH,
    SOURCE_HEADER,
    WARNING_TEXT,
)
from getnews.core.display_options import display_options_from_mapping
from getnews.core.models import Article, DisplayOptions, Source
from getnews.core.text_wrap import wrap_text
from getnews.render.console import render_table

CELL_PADDING: int = 2
"""Horizontal padding inside one cell (one space each side)."""

# Border characters for a two-column and a one-column table.
TWO_COLUMN_BORDERS: int = 3
ONE_COLUMN_BORDERS: int = 2

MIN_CONTENT_WIDTH: int = 1


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _resolve_options(options: Mapping[str, object] | DisplayOptions) -> DisplayOptions:
    if isinstance(options, DisplayOptions):
        return options
    return display_options_from_mapping(options)


def _new_table() -> Table:
    return Table(
        box=box.SQUARE,
        show_header=True,
        show_lines=True,
        expand=False,
        padding=(0, 1),
        pad_edge=True,
        caption_justify="center",
    )


def _warning_text(width: int) -> Text:
    logger.debug("Wrapping the narrow-width warning to {}", width)
    return Text(wrap_text(WARNING_TEXT, width), style="red", justify="center")


def _entry_cell(heading: str, body: str, url: str, wrap_width: int) -> Text:
    """Build the ``heading / body / url`` block used by both tables."""
    cell = Text()
    cell.append(wrap_text(heading, wrap_width), style="bold cyan")
    cell.append("\n")
    cell.append(wrap_text(body, wrap_width))
    cell.append("\n")
    cell.append(url, style="underline green")
    return cell


def locale_compare(left: str, right: str) -> int:
    """Three-way string comparison in dictionary order.

    Letters compare case-insensitively first; on a tie lowercase sorts
    before uppercase, then raw code points decide.
    """
    for key in (str.casefold, str.swapcase):
        a, b = key(left), key(right)
        if a != b:
            return -1 if a < b else 1
    if left == right:
        return 0
    return -1 if left < right else 1


def sort_articles(articles: Sequence[Article]) -> list[Article]:
    """Order articles the way the news service always has.

    The comparator puts ``a.title`` against ``b.section``, not a
    same-field comparison.  It is kept as is; the resulting order is
    whatever a stable merge sort makes of it.
    """
    return sorted(
        articles,
        key=functools.cmp_to_key(
            lambda a, b: locale_compare(a.title, b.section),
        ),
    )


def select_articles(articles: Sequence[Article], display: DisplayOptions) -> list[Article]:
    """Sort, then keep ``number`` articles starting at ``index``."""
    ordered = sort_articles(articles)
    if display.number is None:
        return ordered[display.index:]
    return ordered[display.index:display.index + display.number]


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def source_column_widths(sources: Sequence[Source], width: int) -> tuple[int, int]:
    """Return ``(id_width, description_width)`` including cell padding.

    The id column fits the longest id (or the header label); the rest
    of the width, minus three border characters, goes to the description.
    """
    id_width = max([len(source.id) for source in sources] + [len(SOURCE_HEADER)])
    id_width += CELL_PADDING
    description_width = width - id_width - TWO_COLUMN_BORDERS
    return id_width, max(description_width, CELL_PADDING + MIN_CONTENT_WIDTH)


def format_sources(
    sources: Sequence[Source],
    options: Mapping[str, object] | DisplayOptions,
    *,
    color: bool = False,
) -> str:
    """Format the available sources into a two-column table.

    Below the warning threshold the warning is centred under the table as
    a caption.  The description column never shrinks below
    ``MIN_CONTENT_WIDTH``, so a width too small to hold the id column
    renders wider than requested.
    """
    display = _resolve_options(options)
    id_width, description_width = source_column_widths(sources, display.width)
    wrap_width = description_width - CELL_PADDING

    table = _new_table()
    table.add_column(
        Text(SOURCE_HEADER, style="bold red", justify="center"),
        width=id_width - CELL_PADDING,
        overflow="fold",
    )
    table.add_column(
        Text(DESCRIPTION_HEADER, style="bold red", justify="center"),
        width=wrap_width,
        overflow="fold",
    )
    for source in sources:
        table.add_row(
            Text(source.id, style="green"),
            _entry_cell(source.name, source.description, source.url, wrap_width),
        )

    table_width = id_width + description_width + TWO_COLUMN_BORDERS
    if display.warn:
        table.caption = _warning_text(table_width)
    return render_table(table, table_width, color=color)


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------

def _footer_cell() -> Text:
    footer = Text(justify="center")
    follow, _, rest = FOOTER_LINES[0].partition(" ")
    handle, _, tail = rest.partition(" ")
    footer.append(f"{follow} ", style="green")
    footer.append(f"{handle} ", style="blue")
    footer.append(tail, style="green")
    for line in FOOTER_LINES[1:]:
        footer.append("\n")
        footer.append(line, style="green")
    footer.append("\n")
    footer.append(FOOTER_LINK, style="underline blue")
    return footer


def format_articles(
    articles: Sequence[Article],
    options: Mapping[str, object] | DisplayOptions,
    *,
    color: bool = False,
) -> str:
    """Format article results into a single-column table.

    Accepts the raw request options (``w``/``width``, ``i``/``index``,
    ``n``/``number``) or an already-derived :class:`DisplayOptions`.
    Below the warning threshold the warning is the last row.  The column
    never shrinks below ``MIN_CONTENT_WIDTH``, so widths under 5 render
    at 5.
    """
    display = _resolve_options(options)
    content_width = max(
        display.width - CELL_PADDING - ONE_COLUMN_BORDERS, MIN_CONTENT_WIDTH,
    )

    table = _new_table()
    table.add_column(
        Text(ARTICLES_HEADER, style="bold red", justify="center"),
        width=content_width,
        overflow="fold",
    )
    table.add_row(
        Text(wrap_text(HELP_TEXT, content_width), style="red", justify="center"),
    )
    for article in select_articles(articles, display):
        table.add_row(
            _entry_cell(article.title, article.description, article.url, content_width),
        )
    table.add_row(_footer_cell())
    if display.warn:
        table.add_row(_warning_text(content_width))

    table_width = content_width + CELL_PADDING + ONE_COLUMN_BORDERS
    return render_table(table, table_width, color=color)


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------

def _help_description(lines: Sequence[str]) -> Group:
    rendered: list[Text] = []
    for line in lines:
        if line.startswith("Example Usage"):
            rendered.append(Text(line, style="bold red"))
        elif "=" in line and not line.startswith(("curl", "?")):
            key, _, value = line.partition("=")
            text = Text()
            text.append(f"{key}=", style="blue")
            text.append(value, style="green")
            rendered.append(text)
        else:
            rendered.append(Text(line))
    return Group(*rendered)


def format_help(*, color: bool = False) -> str:
    """Format the static route reference table."""
    table = _new_table()
    table.add_column(Text("Route", style="bold"), no_wrap=True)
    table.add_column(Text("Description", style="bold"), overflow="fold")
    for route, lines in HELP_ROUTES:
        table.add_row(Text(route, style="bold cyan"), _help_description(lines))
    return render_table(table, HELP_WIDTH, color=color)
