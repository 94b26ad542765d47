"""getnews-term — argument parsing and terminal tables for getnews.tech.

The library half (``core`` and ``render``) is pure and silent: loguru
output from the ``getnews`` namespace is disabled until an application
calls :func:`getnews.utils.logging.setup_logging`.
"""

from loguru import logger

from getnews.version import __version__

logger.disable("getnews")

__all__: list[str] = ["__version__"]
