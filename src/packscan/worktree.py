"""Detection of linked git worktrees, whose ``.git`` is a pointer file."""

from __future__ import annotations

from pathlib import Path

from packscan.constants import GIT_DIR_NAME, GIT_DIR_PATTERN, GIT_POINTER_PATTERN, GITDIR_PREFIX
from packscan.logging_utils import get_logger, trace

logger = get_logger(__name__)


def is_git_worktree_ref(git_path: Path) -> bool:
    """Return True if ``git_path`` is a regular file starting with ``gitdir:``.

    Best effort: any I/O failure counts as "not a worktree".
    """
    try:
        if not git_path.is_file():
            return False
        with git_path.open("r", encoding="utf-8", errors="ignore") as f:
            head = f.read(len(GITDIR_PREFIX))
    except OSError as err:
        trace(logger, "worktree.check_failed", "could not inspect git path", path=git_path, error=err)
        return False
    return head == GITDIR_PREFIX


def adjust_for_worktree(root_dir: Path, ignore_patterns: list[str]) -> list[str]:
    """Swap the ``.git/**`` rule for one that ignores only the root ``.git`` pointer file.

    Returns a new list; the input is left untouched. Nothing changes unless
    ``root_dir/.git`` is a worktree reference and ``.git/**`` is present.
    """
    adjusted = list(ignore_patterns)
    if not is_git_worktree_ref(root_dir / GIT_DIR_NAME):
        return adjusted
    if GIT_DIR_PATTERN in adjusted:
        adjusted.remove(GIT_DIR_PATTERN)
        adjusted.append(GIT_POINTER_PATTERN)
        trace(logger, "worktree.adjusted", "replaced git directory ignore with pointer file", root=root_dir)
    return adjusted
