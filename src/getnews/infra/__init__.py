"""Infrastructure layer — reading upstream payloads from disk.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Raw ``OSError``/JSON exceptions are re-raised as
  :class:`~getnews.exceptions.GetnewsError` subclasses.
"""

from getnews.infra.record_loader import load_articles, load_records, load_sources

__all__: list[str] = [
    "load_articles",
    "load_records",
    "load_sources",
]
