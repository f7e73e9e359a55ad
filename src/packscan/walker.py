"""File and directory passes over the search root, plus empty-directory detection."""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from packscan.errors import ERROR_MSG_SCAN_PERMISSION, SearchPermissionError
from packscan.globber import compile_spec, glob_paths
from packscan.logging_utils import StructuredLogEvent, get_logger, log_event

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

_PERMISSION_ERRNOS = frozenset({errno.EPERM, errno.EACCES})


def _glob(
    root_dir: Path,
    include: Sequence[str],
    ignore: Sequence[str],
    ignore_files: Sequence[str],
    *,
    only_files: bool,
    only_directories: bool,
) -> list[str]:
    try:
        return glob_paths(
            include,
            cwd=root_dir,
            ignore=ignore,
            ignore_files=ignore_files,
            only_files=only_files,
            only_directories=only_directories,
            dot=True,
            follow_symlinks=False,
        )
    except OSError as err:
        if err.errno in _PERMISSION_ERRNOS:
            path = str(root_dir)
            raise SearchPermissionError(ERROR_MSG_SCAN_PERMISSION.format(path=path), path) from err
        raise


def find_files(
    root_dir: Path, include: Sequence[str], ignore: Sequence[str], ignore_files: Sequence[str]
) -> list[str]:
    """Return root-relative paths of files matching ``include`` and not ignored."""
    return _glob(root_dir, include, ignore, ignore_files, only_files=True, only_directories=False)


def find_directories(
    root_dir: Path, include: Sequence[str], ignore: Sequence[str], ignore_files: Sequence[str]
) -> list[str]:
    """Return root-relative paths of directories matching ``include`` and not ignored."""
    return _glob(root_dir, include, ignore, ignore_files, only_files=False, only_directories=True)


def list_directory(path: Path) -> list[str] | None:
    """Return the entry names in ``path``, or None if it cannot be listed."""
    try:
        return os.listdir(path)
    except OSError as err:
        log_event(
            logger,
            StructuredLogEvent(
                name="walker.list_failed",
                message="error checking directory",
                context={"path": path, "error": err},
                level=logging.DEBUG,
            ),
        )
        return None


def find_empty_directories(root_dir: Path, directories: Sequence[str], ignore_patterns: Sequence[str]) -> list[str]:
    """Return the directories in ``directories`` with no visible (non-dot) entries.

    A directory that matches ``ignore_patterns``, as ``dir`` or ``dir/``, is
    left out. Directories that cannot be listed are skipped.
    """
    spec = compile_spec(ignore_patterns)
    empty: list[str] = []
    for directory in directories:
        entries = list_directory(root_dir / directory)
        if entries is None:
            continue
        if any(not entry.startswith(".") for entry in entries):
            continue
        if spec.match_file(directory) or spec.match_file(f"{directory}/"):
            continue
        empty.append(directory)
    return empty
