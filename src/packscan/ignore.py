"""Collection of ignore patterns and ignore-file names from every source.

Two independent lookups feed a search:
  - ``get_ignore_patterns``: literal exclusion patterns (defaults, the
    output file, custom patterns, ``.git/info/exclude``), deduplicated
  - ``get_ignore_file_patterns``: names of files whose contents the
    traversal reads as further rules (``.packscanignore``, ``.gitignore``)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from packscan.constants import (
    DEFAULT_IGNORE_LIST,
    GIT_EXCLUDE_PATH,
    GITIGNORE_FILE,
    PACKSCAN_IGNORE_FILE,
)
from packscan.logging_utils import get_logger, trace
from packscan.patterns import parse_ignore_content

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from packscan.config import SearchConfig

logger = get_logger(__name__)


def read_text_or_none(path: Path) -> str | None:
    """Return the text of ``path``, or None when it is missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        trace(logger, "ignore.read_failed", "could not read ignore source", path=path, error=err)
        return None


def git_exclude_patterns(root_dir: Path) -> list[str]:
    """Patterns from ``<root>/.git/info/exclude``; empty when the file is absent."""
    return parse_ignore_content(read_text_or_none(root_dir.joinpath(*GIT_EXCLUDE_PATH)))


def output_file_pattern(root_dir: Path, config: SearchConfig) -> str | None:
    """The configured output file as a pattern anchored at ``root_dir``.

    The leading slash keeps same-named files in subdirectories visible.
    """
    if not config.output_file_path:
        return None
    absolute = Path(os.path.abspath(Path(config.cwd) / config.output_file_path))
    relative = os.path.relpath(absolute, os.path.abspath(root_dir))
    return "/" + Path(relative).as_posix()


def _add_all(target: dict[str, None], patterns: Iterable[str]) -> None:
    for pattern in patterns:
        target.setdefault(pattern, None)


def get_ignore_patterns(
    root_dir: Path,
    config: SearchConfig,
    *,
    default_patterns: Sequence[str] = DEFAULT_IGNORE_LIST,
) -> list[str]:
    """Return the deduplicated union of every configured ignore source."""
    # dict keys give set semantics with a readable, stable order for logs
    patterns: dict[str, None] = {}

    if config.use_default_patterns:
        trace(logger, "ignore.defaults", "adding default ignore patterns", count=len(default_patterns))
        _add_all(patterns, default_patterns)

    output_pattern = output_file_pattern(root_dir, config)
    if output_pattern is not None:
        trace(logger, "ignore.output_file", "adding output file to ignore patterns", pattern=output_pattern)
        patterns.setdefault(output_pattern, None)

    if config.custom_patterns:
        trace(logger, "ignore.custom", "adding custom ignore patterns", patterns=list(config.custom_patterns))
        _add_all(patterns, config.custom_patterns)

    if config.use_gitignore:
        _add_all(patterns, git_exclude_patterns(root_dir))

    return list(patterns)


def get_ignore_file_patterns(config: SearchConfig) -> list[str]:
    """Return patterns naming files whose contents are extra ignore rules."""
    patterns: list[str] = []
    if config.use_gitignore:
        patterns.append(f"**/{GITIGNORE_FILE}")
    patterns.append(f"**/{PACKSCAN_IGNORE_FILE}")
    return patterns
