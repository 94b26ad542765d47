"""Shared pytest fixtures and configuration for the getnews-term test suite.

Guidelines
----------
* No network access in any test.
* Files are only written under ``tmp_path``.
* Core and render tests are pure function calls.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Undo any sinks the CLI installs so captured streams are not reused."""
    yield
    logger.remove()
    logger.disable("getnews")


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write *payload* as JSON into ``tmp_path`` and return the path."""

    def _write(payload: Any, name: str = "records.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
