"""Up-front readability probe for the search root."""

from __future__ import annotations

import errno
import os
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from packscan.errors import SearchPermissionError
from packscan.logging_utils import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

_PERMISSION_ERRNOS = {errno.EPERM: "EPERM", errno.EACCES: "EACCES", errno.EISDIR: "EISDIR"}


@dataclass(frozen=True, slots=True)
class PermissionDetails:
    read: bool = False
    write: bool = False
    execute: bool = False


@dataclass(frozen=True, slots=True)
class PermissionCheckResult:
    has_permission: bool
    error: BaseException | None = None
    details: PermissionDetails | None = None


def permission_message(dir_path: str, code: str) -> str:
    """Return a human-readable explanation for a denied directory."""
    if sys.platform == "darwin":
        return (
            f"Permission denied: Cannot access '{dir_path}', error code: {code}.\n\n"
            "This error often occurs when macOS security restrictions prevent access to the directory.\n"
            "To fix this:\n\n"
            "1. Open System Settings\n"
            "2. Navigate to Privacy & Security > Files and Folders\n"
            "3. Find your terminal app (Terminal.app, iTerm2, VS Code, etc.)\n"
            "4. Grant necessary folder access permissions\n\n"
            "If your terminal app is not listed:\n"
            "- Try running the command again\n"
            "- When prompted by macOS, click 'Allow'\n"
            "- Restart your terminal app if needed\n"
        )
    return f"Permission denied: Cannot access '{dir_path}'"


def check_directory_permissions(dir_path: Path | str) -> PermissionCheckResult:
    """Probe ``dir_path`` for read, write and execute access.

    Listing failures caused by permissions come back as ``SearchPermissionError``;
    any other listing failure (missing path, not a directory) comes back raw
    with no details, so callers can tell the two apart.
    """
    path = os.fspath(dir_path)
    try:
        os.listdir(path)
    except OSError as err:
        code = _PERMISSION_ERRNOS.get(err.errno) if err.errno is not None else None
        if code is not None:
            return PermissionCheckResult(
                has_permission=False,
                error=SearchPermissionError(permission_message(path, code), path, code),
            )
        logger.debug("directory permission check error for %s: %s", path, err)
        return PermissionCheckResult(has_permission=False, error=err)

    details = PermissionDetails(
        read=os.access(path, os.R_OK),
        write=os.access(path, os.W_OK),
        execute=os.access(path, os.X_OK),
    )
    if not (details.read and details.write and details.execute):
        return PermissionCheckResult(
            has_permission=False,
            error=SearchPermissionError(f"Missing required permissions at: {path}", path),
            details=details,
        )
    return PermissionCheckResult(has_permission=True, details=details)
