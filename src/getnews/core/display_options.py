"""Derivation of :class:`DisplayOptions` from raw request options.

Options arrive as strings from the query string.  All numeric options
go through :func:`parse_int_option` so width, index and number share
the same edge-case handling.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from loguru import logger

from getnews.core.constants import DEFAULT_DISPLAY_WIDTH
from getnews.core.models import DisplayOptions

_LEADING_INTEGER_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_option(
    value: object,
    *,
    default: int | None,
    minimum: int,
) -> int | None:
    """Interpret *value* as an integer no smaller than *minimum*.

    Accepts ``int`` (not ``bool``) and strings that start with an ASCII
    integer: ``"80"``, ``" +5 "`` and ``"80px"`` (read as 80) all parse.
    Anything else returns *default*.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        match = _LEADING_INTEGER_RE.match(value)
        if match is None:
            return default
        parsed = int(match.group(1))
    else:
        return default
    if parsed < minimum:
        return default
    return parsed


def _resolve(
    options: Mapping[str, object],
    names: tuple[str, str],
    *,
    default: int | None,
    minimum: int,
) -> int | None:
    """Look up the short name, then the long one, and parse the value."""
    raw: object = None
    for name in names:
        raw = options.get(name)
        # An empty ``w=`` falls through to ``width=``.
        if raw:
            break
    if not raw:
        return default
    parsed = parse_int_option(raw, default=None, minimum=minimum)
    if parsed is None:
        logger.debug("Ignoring invalid {} option {!r}", names[1], raw)
        return default
    return parsed


def display_options_from_mapping(options: Mapping[str, object]) -> DisplayOptions:
    """Build the effective layout options from a flat options mapping."""
    width = _resolve(options, ("w", "width"), default=None, minimum=1)
    index = _resolve(options, ("i", "index"), default=None, minimum=0)
    number = _resolve(options, ("n", "number"), default=None, minimum=1)
    return DisplayOptions(
        width=DEFAULT_DISPLAY_WIDTH if width is None else width,
        index=0 if index is None else index,
        number=number,
    )
