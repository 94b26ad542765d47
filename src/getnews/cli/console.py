"""Rich consoles used by the CLI layer.

Tables go to stdout as already-rendered strings; diagnostics go to
``stderr`` through :data:`console`.
"""

from __future__ import annotations

import sys

from rich.console import Console

console = Console(stderr=True, highlight=False)
"""Console for error messages and hints."""


def write_stdout(text: str) -> None:
    """Write pre-rendered text to stdout without Rich re-processing it."""
    sys.stdout.write(text)
    sys.stdout.flush()
