"""Deterministic, directory-aware ordering for relative paths."""

from __future__ import annotations

import functools
import os
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_SEPARATORS = re.compile(r"[/\\]" if os.sep == "\\" else "/")


def _split(path: str) -> list[str]:
    return _SEPARATORS.split(path)


def _compare_segments(a: str, b: str) -> int:
    ka, kb = (a.casefold(), a), (b.casefold(), b)
    return (ka > kb) - (ka < kb)


def compare_paths(a: str, b: str) -> int:
    """Order two paths segment by segment.

    At the first differing segment a directory sorts before a leaf. When one
    path is a prefix of the other the shorter one comes first.
    """
    parts_a = _split(a)
    parts_b = _split(b)
    for i in range(min(len(parts_a), len(parts_b))):
        if parts_a[i] == parts_b[i]:
            continue
        last_a = i == len(parts_a) - 1
        last_b = i == len(parts_b) - 1
        if not last_a and last_b:
            return -1
        if last_a and not last_b:
            return 1
        return _compare_segments(parts_a[i], parts_b[i])
    return len(parts_a) - len(parts_b)


def sort_paths(paths: Iterable[str]) -> list[str]:
    """Return ``paths`` in a stable, directory-structure-aware order."""
    return sorted(paths, key=functools.cmp_to_key(compare_paths))
