"""Parsing of the comma-separated query path and the country subdomain.

Both functions are **pure**: malformed input never raises.  Argument
problems are reported through :attr:`ParsedArgs.error` and it is up to
the request handler to turn that into an error response.

Grammar of the argument string::

    arg_string := token ("," token)*
    token      := query | name "=" value

``query`` is only allowed as the very first token and may use ``+`` for
spaces.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from loguru import logger

from getnews.core.constants import VALID_ARGS, VALID_COUNTRIES
from getnews.core.models import ParsedArgs


def parse_subdomain(subdomains: Sequence[str]) -> str | None:
    """Return the country code named by the most specific subdomain.

    Unsupported or missing subdomains simply mean "no country".
    """
    if not subdomains:
        return None
    country = subdomains[-1]
    if country in VALID_COUNTRIES:
        return country
    return None


def parse_args(arg_string: str) -> ParsedArgs:
    """Deconstruct *arg_string* into a :class:`ParsedArgs` record.

    Only the first error is kept.  Later tokens are still processed, so
    a valid ``n=5`` after a bad token is stored all the same.
    """
    query: str | None = None
    error: str | None = None
    options: dict[str, str] = {}

    for position, chunk in enumerate(arg_string.split(",")):
        if position == 0 and "=" not in chunk:
            query = chunk.replace("+", " ")
            continue

        parts = chunk.split("=")
        if len(parts) == 2:
            name, value = parts
            if name in VALID_ARGS:
                options[name] = value
                continue
            problem = f'"{name}" is not a valid argument'
        else:
            problem = f"Unable to parse {chunk}"

        logger.debug("Rejected argument token {!r}: {}", chunk, problem)
        if error is None:
            error = problem

    return ParsedArgs(
        query=query,
        error=error,
        options=MappingProxyType(options),
    )
