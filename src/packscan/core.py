"""Search orchestration: permission probe, rule assembly, traversal, ordering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from time import perf_counter
from typing import TYPE_CHECKING

from packscan.constants import DEFAULT_IGNORE_LIST, MATCH_ALL_PATTERN
from packscan.errors import (
    ERROR_MSG_FILTER_FAILED,
    DirectoryNotAccessibleError,
    SearchError,
    SearchPermissionError,
)
from packscan.ignore import get_ignore_file_patterns, get_ignore_patterns
from packscan.logging_utils import StructuredLogEvent, get_logger, log_event, trace
from packscan.patterns import escape_glob_pattern
from packscan.permissions import PermissionCheckResult, check_directory_permissions
from packscan.sorting import sort_paths
from packscan.walker import find_directories, find_empty_directories, find_files
from packscan.worktree import adjust_for_worktree

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from packscan.config import SearchConfig


logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FileSearchResult:
    file_paths: list[str] = field(default_factory=list)
    empty_dir_paths: list[str] = field(default_factory=list)


def _ensure_readable(root: str, check: PermissionCheckResult) -> None:
    if check.details is not None and check.details.read:
        return
    if isinstance(check.error, SearchPermissionError):
        raise check.error
    raise DirectoryNotAccessibleError(root)


def include_patterns(config: SearchConfig) -> list[str]:
    """Escaped include patterns, or match-everything when none are configured."""
    if not config.include:
        return [MATCH_ALL_PATTERN]
    return [escape_glob_pattern(pattern) for pattern in config.include]


def search_files(
    root_dir: Path | str,
    config: SearchConfig,
    *,
    default_patterns: Sequence[str] = DEFAULT_IGNORE_LIST,
    permission_probe: Callable[[Path | str], PermissionCheckResult] = check_directory_permissions,
) -> FileSearchResult:
    """Return the files (and optionally empty directories) to package under ``root_dir``.

    Raises ``SearchPermissionError`` when access is denied, and ``SearchError``
    for everything else.
    """
    root = Path(root_dir)
    _ensure_readable(str(root_dir), permission_probe(root))

    start = perf_counter()
    includes = include_patterns(config)

    try:
        ignore_patterns = get_ignore_patterns(root, config, default_patterns=default_patterns)
        ignore_file_patterns = get_ignore_file_patterns(config)

        trace(
            logger,
            "search.patterns",
            "resolved search patterns",
            include=includes,
            ignore=ignore_patterns,
            ignore_files=ignore_file_patterns,
        )

        adjusted = adjust_for_worktree(root, ignore_patterns)

        file_paths = find_files(root, includes, adjusted, ignore_file_patterns)

        empty_dir_paths: list[str] = []
        if config.include_empty_directories:
            directories = find_directories(root, includes, adjusted, ignore_file_patterns)
            empty_dir_paths = find_empty_directories(root, directories, adjusted)
    except SearchPermissionError:
        raise
    except Exception as err:  # noqa: BLE001 - enriched and re-raised below
        log_event(
            logger,
            StructuredLogEvent(
                name="search.failed",
                message="error filtering files",
                context={"root": root, "error": err},
                level=logging.ERROR,
            ),
        )
        raise SearchError(ERROR_MSG_FILTER_FAILED.format(path=root_dir, reason=err)) from err

    log_event(
        logger,
        StructuredLogEvent(
            name="search.complete",
            message="completed file search",
            context={
                "root": root,
                "duration_seconds": perf_counter() - start,
                "file_count": len(file_paths),
                "empty_dir_count": len(empty_dir_paths),
            },
            level=logging.DEBUG,
        ),
    )

    return FileSearchResult(
        file_paths=sort_paths(file_paths),
        empty_dir_paths=sort_paths(empty_dir_paths),
    )
