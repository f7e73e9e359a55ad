"""Custom exception classes and error messages."""

from __future__ import annotations

ERROR_MSG_NOT_ACCESSIBLE = (
    "Target directory is not readable or does not exist. "
    "Please check folder access permissions for your terminal app.\npath: {path}"
)
ERROR_MSG_SCAN_PERMISSION = (
    "Permission denied while scanning directory. "
    "Please check folder access permissions for your terminal app. path: {path}"
)
ERROR_MSG_FILTER_FAILED = "Failed to filter files in directory {path}. Reason: {reason}"


class SearchError(Exception):
    """Raised when a file search fails for a reason other than permissions."""


class DirectoryNotAccessibleError(SearchError):
    """Raised when the search root cannot be read and no permission issue was diagnosed."""

    def __init__(self, path: str) -> None:
        super().__init__(ERROR_MSG_NOT_ACCESSIBLE.format(path=path))
        self.path = path


class SearchPermissionError(PermissionError):
    """Raised when the search root, or a directory under it, denies access."""

    def __init__(self, message: str, path: str, code: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.code = code


class ConfigLoadError(Exception):
    """Raised when a configuration file cannot be loaded."""
