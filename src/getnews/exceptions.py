"""Custom exception hierarchy for getnews-term.

The core layer never raises for malformed user input: argument errors
travel as data on :class:`~getnews.core.models.ParsedArgs` and bad
display options fall back to defaults.  Exceptions are reserved for the
infrastructure and CLI layers, and every one that crosses a layer
boundary inherits from :class:`GetnewsError`.

Hierarchy
---------
GetnewsError
├── RecordFileError
├── InvalidRecordError
└── InvalidArgumentsError
"""

from __future__ import annotations


class GetnewsError(Exception):
    """Base exception for all getnews-term errors.

    The CLI error boundary renders the message, plus the optional
    hint, without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Record input ----------------------------------------------------------

class RecordFileError(GetnewsError):
    """Raised when a record file cannot be read or decoded."""


class InvalidRecordError(GetnewsError):
    """Raised when a single source/article record is not a JSON object."""


# --- Query arguments -------------------------------------------------------

class InvalidArgumentsError(GetnewsError):
    """Raised by the CLI when a parsed argument string carries an error."""
