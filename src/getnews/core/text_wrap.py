"""Greedy word wrapping for table cells.

Wrapping is done here rather than left to the table renderer so the
wrap points are fixed by the requested width and never by styling.
"""

from __future__ import annotations

import re

_LINE_BREAKS_RE = re.compile(r"[\r\n]+")


def wrap_text(text: str, max_line_length: int) -> str:
    """Break *text* into lines shorter than *max_line_length*.

    Words are packed greedily; a word joins the current line only while
    ``line_length + len(word) < max_line_length``, where ``line_length``
    counts every word already on the line plus one separator space
    each.  Words are never split, so a word that is too long on its own
    occupies a line by itself.
    """
    words = _LINE_BREAKS_RE.sub(" ", text).split(" ")
    lines: list[list[str]] = [[]]
    line_length = 0
    for word in words:
        if line_length + len(word) >= max_line_length and lines[-1]:
            lines.append([])
            line_length = 0
        lines[-1].append(word)
        line_length += len(word) + 1
    return "\n".join(" ".join(line).rstrip(" ") for line in lines)
