"""Load upstream API responses from JSON files.

The HTTP service receives these records straight from the news API;
the command-line tool reads the same payloads from disk.  Both a bare
list and the upstream envelope (``{"status": "ok", "articles": [...]}``)
are accepted.

Every ``OSError`` or JSON decoding failure is re-raised as
:class:`~getnews.exceptions.RecordFileError`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from getnews.core.models import Article, Source
from getnews.exceptions import RecordFileError

ENVELOPE_KEYS: tuple[str, ...] = ("sources", "articles")


def _read_json(path: Path) -> Any:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RecordFileError(
            f"Record file not found: {path}",
            hint="Pass the path of a JSON file saved from the news API.",
        ) from exc
    except OSError as exc:
        raise RecordFileError(f"Unable to read {path}: {exc.strerror or exc}") from exc

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RecordFileError(
            f"{path} is not valid JSON (line {exc.lineno}, column {exc.colno}).",
        ) from exc


def _unwrap(payload: Any, path: Path) -> list[Any]:
    """Return the record list from a bare list or a response envelope."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ENVELOPE_KEYS:
            records = payload.get(key)
            if isinstance(records, list):
                return records
    raise RecordFileError(
        f"{path} does not contain a list of records.",
        hint='Expected a JSON list or an object with a "sources" or '
        '"articles" list.',
    )


def load_records(path: str | Path) -> list[Any]:
    """Read *path* and return its raw record list."""
    path = Path(path)
    records = _unwrap(_read_json(path), path)
    logger.debug("Loaded {} records from {}", len(records), path)
    return records


def load_sources(path: str | Path) -> list[Source]:
    """Read *path* and build :class:`Source` objects.

    Raises
    ------
    RecordFileError
        If the file is missing, unreadable, or not a record list.
    InvalidRecordError
        If an element is not a JSON object.
    """
    return [Source.from_record(record) for record in load_records(path)]


def load_articles(path: str | Path) -> list[Article]:
    """Read *path* and build :class:`Article` objects (see :func:`load_sources`)."""
    return [Article.from_record(record) for record in load_records(path)]
