"""Static configuration tables shared by the parser and the formatters.

Everything here is immutable and loaded once at import time.
"""

from __future__ import annotations

VALID_ARGS: frozenset[str] = frozenset({"n", "page", "category"})
"""Argument names accepted in ``key=value`` tokens of the query path."""

VALID_COUNTRIES: frozenset[str] = frozenset({
    "ae", "ar", "at", "au", "be", "bg", "br", "ca", "ch", "cn", "co", "cu",
    "cz", "de", "eg", "fr", "gb", "gr", "hk", "hu", "id", "ie", "il", "in",
    "it", "jp", "kr", "lt", "lv", "ma", "mx", "my", "ng", "nl", "no", "nz",
    "ph", "pl", "pt", "ro", "rs", "ru", "sa", "se", "sg", "si", "sk", "th",
    "tr", "tw", "ua", "us", "ve", "za",
})
"""Country subdomains supported by the upstream headlines endpoint."""

DEFAULT_DISPLAY_WIDTH: int = 72
"""Total table width when the client does not ask for one."""

WIDTH_WARNING_THRESHOLD: int = 70
"""Widths below this get an inline warning under the table."""

HELP_WIDTH: int = 80
"""Rendering width of the static help table."""

SOURCE_HEADER: str = "Source"
DESCRIPTION_HEADER: str = "Description"
ARTICLES_HEADER: str = "Articles"

HELP_TEXT: str = "To find a list of sources to query, use: curl getnews.tech/help"

WARNING_TEXT: str = (
    "Warning: Using too small of a width will cause unpredictable behavior!"
)

FOOTER_LINES: tuple[str, ...] = (
    "Follow @omgimanerd on Twitter and GitHub.",
    "Open source contributions are welcome!",
)
FOOTER_LINK: str = "https://github.com/omgimanerd/getnews.tech"

# (route, description lines).  Lines ending in ":" are rendered as
# emphasised labels; "key=" prefixes are highlighted.
HELP_ROUTES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "/help",
        (
            "Show this help page. No options available.",
            "",
            "Example Usage:",
            "curl getnews.tech/help",
        ),
    ),
    (
        "/sources",
        (
            "Show the available sources to query. Options:",
            "",
            "Set source category:",
            "category=[business, entertainment, general, health,",
            "science, sports, technology]",
            "",
            "Example Usage:",
            "curl getnews.tech/sources",
            "curl getnews.tech/sources,category=business",
        ),
    ),
    (
        "/<query>",
        (
            "Search for news articles matching the query. Use + for",
            "spaces. Arguments follow the query, separated by commas.",
            "",
            "Limit number of articles:",
            "n=NUMBER",
            "",
            "Set result page:",
            "page=PAGE",
            "",
            "Set article category:",
            "category=CATEGORY",
            "",
            "Set country with a subdomain:",
            "us.getnews.tech, gb.getnews.tech, ...",
            "",
            "Set output width / first article #:",
            "?w=WIDTH&i=INDEX",
            "",
            "Example Usage:",
            "curl getnews.tech/donald+trump,n=5",
            "curl us.getnews.tech/category=sports",
            "curl getnews.tech/climate,page=2?w=100",
        ),
    ),
)
