"""Domain models for getnews-term.

All models are **frozen** dataclasses: immutable value objects built
fresh per request and never persisted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from getnews.core.constants import DEFAULT_DISPLAY_WIDTH, WIDTH_WARNING_THRESHOLD
from getnews.exceptions import InvalidRecordError


def _text_field(record: Mapping[str, Any], key: str) -> str:
    """Return ``record[key]`` as text, mapping missing/``null`` to ``""``."""
    value = record.get(key)
    if value is None:
        return ""
    return str(value)


def _require_mapping(record: object, kind: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise InvalidRecordError(
            f"Expected a JSON object for {kind}, got {type(record).__name__}.",
        )
    return record


# ---------------------------------------------------------------------------
# Parsed query arguments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArgs:
    """Result of parsing a comma-separated argument string.

    ``error`` holds the first problem found; parsing continues past it
    so later valid tokens still populate ``options``.
    """

    query: str | None = None
    """Free-text search query taken from token 0, ``+`` decoded."""

    error: str | None = None
    """Human-readable description of the first malformed token."""

    options: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    """Recognized ``name -> raw value`` pairs."""

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, str]:
        """Flatten into the mapping handed to the request handler."""
        result: dict[str, str] = {}
        if self.query is not None:
            result["query"] = self.query
        result.update(self.options)
        if self.error is not None:
            result["error"] = self.error
        return result

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.as_dict().get(name, default)


# ---------------------------------------------------------------------------
# Display options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Effective layout options after defaulting and validation."""

    width: int = DEFAULT_DISPLAY_WIDTH
    index: int = 0
    number: int | None = None
    """Maximum number of articles, or ``None`` for no limit."""

    @property
    def warn(self) -> bool:
        """Whether the width is small enough to warrant a warning row."""
        return self.width < WIDTH_WARNING_THRESHOLD


# ---------------------------------------------------------------------------
# Upstream records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Source:
    """A news source as listed by the upstream sources endpoint."""

    id: str
    name: str
    description: str
    url: str

    @classmethod
    def from_record(cls, record: object) -> Source:
        data = _require_mapping(record, "source")
        return cls(
            id=_text_field(data, "id"),
            name=_text_field(data, "name"),
            description=_text_field(data, "description"),
            url=_text_field(data, "url"),
        )


@dataclass(frozen=True, slots=True)
class Article:
    """A single article returned by the upstream search endpoints.

    ``url`` is expected to be already shortened by the API collaborator.
    """

    title: str
    description: str
    url: str
    section: str = ""

    @classmethod
    def from_record(cls, record: object) -> Article:
        data = _require_mapping(record, "article")
        return cls(
            title=_text_field(data, "title"),
            description=_text_field(data, "description"),
            url=_text_field(data, "url"),
            section=_text_field(data, "section"),
        )
