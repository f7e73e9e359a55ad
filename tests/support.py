"""Helpers for building small directory trees in tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


def write_tree(root: Path, files: Iterable[str] = (), dirs: Iterable[str] = ()) -> Path:
    """Create ``files`` (with placeholder content) and empty ``dirs`` under ``root``."""
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"{rel}\n", encoding="utf-8")
    for rel in dirs:
        (root / rel).mkdir(parents=True, exist_ok=True)
    return root
