"""CLI layer — argument parsing, output, and the error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``render``, ``infra`` and ``utils``, but no other layer
may import from ``cli``.
"""
