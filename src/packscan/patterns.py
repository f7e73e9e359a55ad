"""Pure helpers for glob escaping and ignore-file parsing."""

from __future__ import annotations

import re

_GLOB_SPECIAL = re.compile(r"[()\[\]{}]")


def escape_glob_pattern(pattern: str) -> str:
    r"""Escape glob metacharacters so ``pattern`` matches literally.

    Backslashes are doubled first so the escapes added for ``( ) [ ] { }``
    are not escaped again. Apply exactly once per pattern::

        >>> escape_glob_pattern("src/(categories)")
        'src/\\(categories\\)'
    """
    escaped = pattern.replace("\\", "\\\\")
    return _GLOB_SPECIAL.sub(lambda m: "\\" + m.group(0), escaped)


def parse_ignore_content(content: str | None) -> list[str]:
    """Return the patterns in ignore-file ``content``, skipping blanks and ``#`` comments."""
    if not content:
        return []
    patterns: list[str] = []
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            patterns.append(stripped)
    return patterns
