"""CLI application entry point and command routing for getnews-term.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~getnews.exceptions.GetnewsError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, renders a short message on stderr,
and returns a well-defined exit code.

Commands
--------
* ``getnews-term help``                     — route reference table
* ``getnews-term parse ARGS [--subdomain]`` — show the parsed request
* ``getnews-term sources FILE``             — render a sources payload
* ``getnews-term articles FILE``            — render an articles payload
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger
from rich.markup import escape

from getnews.cli import exit_codes
from getnews.cli.console import console, write_stdout
from getnews.exceptions import GetnewsError, InvalidArgumentsError
from getnews.utils.logging import setup_logging
from getnews.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_display_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-w", "--width", default=None, help="Total table width.")
    parser.add_argument(
        "--color",
        action="store_true",
        help="Emit ANSI colours even when stdout is not a terminal.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="getnews-term",
        description="Parse getnews.tech queries and render news tables.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    commands = parser.add_subparsers(dest="command")

    help_cmd = commands.add_parser("help", help="Show the route reference table.")
    help_cmd.add_argument("--color", action="store_true")

    parse_cmd = commands.add_parser("parse", help="Parse a query argument string.")
    parse_cmd.add_argument("arg_string", help='e.g. "hello+world,n=5,category=sport"')
    parse_cmd.add_argument(
        "--subdomain",
        action="append",
        default=[],
        metavar="LABEL",
        help="Subdomain label, most specific last (repeatable).",
    )

    sources_cmd = commands.add_parser("sources", help="Render a sources JSON file.")
    sources_cmd.add_argument("file")
    _add_display_arguments(sources_cmd)

    articles_cmd = commands.add_parser("articles", help="Render an articles JSON file.")
    articles_cmd.add_argument("file")
    _add_display_arguments(articles_cmd)
    articles_cmd.add_argument("-i", "--index", default=None, help="First article #.")
    articles_cmd.add_argument("-n", "--number", default=None, help="Article limit.")

    return parser


def _display_mapping(args: argparse.Namespace) -> dict[str, str]:
    """Collect display options the way the HTTP layer passes query params."""
    mapping: dict[str, str] = {}
    for name in ("width", "index", "number"):
        value = getattr(args, name, None)
        if value is not None:
            mapping[name] = value
    return mapping


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_help(args: argparse.Namespace) -> int:
    from getnews.render.tables import format_help

    write_stdout(format_help(color=args.color))
    return exit_codes.SUCCESS


def _handle_parse(args: argparse.Namespace) -> int:
    from getnews.core.arg_parser import parse_args, parse_subdomain

    parsed = parse_args(args.arg_string)
    result: dict[str, str | None] = dict(parsed.as_dict())
    result["country"] = parse_subdomain(args.subdomain)
    write_stdout(json.dumps(result, indent=2) + "\n")

    if parsed.error is not None:
        raise InvalidArgumentsError(
            parsed.error,
            hint="Valid arguments are n=, page= and category=.",
        )
    return exit_codes.SUCCESS


def _handle_sources(args: argparse.Namespace) -> int:
    from getnews.infra.record_loader import load_sources
    from getnews.render.tables import format_sources

    sources = load_sources(args.file)
    write_stdout(format_sources(sources, _display_mapping(args), color=args.color))
    return exit_codes.SUCCESS


def _handle_articles(args: argparse.Namespace) -> int:
    from getnews.infra.record_loader import load_articles
    from getnews.render.tables import format_articles

    articles = load_articles(args.file)
    write_stdout(format_articles(articles, _display_mapping(args), color=args.color))
    return exit_codes.SUCCESS


_HANDLERS = {
    "help": _handle_help,
    "parse": _handle_parse,
    "sources": _handle_sources,
    "articles": _handle_articles,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the getnews-term CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "INFO")

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    logger.debug("Dispatching command {}", args.command)
    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except GetnewsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
