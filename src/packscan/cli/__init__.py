"""CLI exports.

This package exposes `cli` and `main` from `root.py` so that
`python -m packscan` and the console entry point share one implementation.
"""

from .root import cli, main

__all__ = ["cli", "main"]
