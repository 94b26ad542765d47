"""Core layer — pure argument parsing and text layout.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``, ``render`` or ``infra``.
* Malformed user input is reported as data, never raised.
"""

from getnews.core.arg_parser import parse_args, parse_subdomain
from getnews.core.display_options import display_options_from_mapping, parse_int_option
from getnews.core.models import Article, DisplayOptions, ParsedArgs, Source
from getnews.core.text_wrap import wrap_text

__all__: list[str] = [
    "Article",
    "DisplayOptions",
    "ParsedArgs",
    "Source",
    "display_options_from_mapping",
    "parse_args",
    "parse_int_option",
    "parse_subdomain",
    "wrap_text",
]
