"""Allow ``python -m getnews`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m getnews`` behaves identically to the ``getnews-term``
console script.
"""

from __future__ import annotations

from getnews.cli.app import cli

if __name__ == "__main__":
    cli()
