from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import pytest

from packscan import permissions
from packscan.errors import SearchPermissionError
from packscan.permissions import check_directory_permissions, permission_message

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.small


def test_readable_directory_has_permission(tmp_path: Path) -> None:
    result = check_directory_permissions(tmp_path)
    assert result.has_permission is True
    assert result.error is None
    assert result.details is not None
    assert result.details.read is True


def test_missing_directory_is_a_generic_failure(tmp_path: Path) -> None:
    result = check_directory_permissions(tmp_path / "missing")
    assert result.has_permission is False
    assert result.details is None
    assert isinstance(result.error, FileNotFoundError)
    assert not isinstance(result.error, SearchPermissionError)


def test_file_path_is_a_generic_failure(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")
    result = check_directory_permissions(target)
    assert result.has_permission is False
    assert not isinstance(result.error, SearchPermissionError)


@pytest.mark.parametrize(("code", "name"), [(errno.EACCES, "EACCES"), (errno.EPERM, "EPERM")])
def test_denied_listing_is_diagnosed(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, code: int, name: str
) -> None:
    def deny(_path: str) -> list[str]:
        raise PermissionError(code, os.strerror(code))

    monkeypatch.setattr(permissions.os, "listdir", deny)
    result = check_directory_permissions(tmp_path)
    assert result.has_permission is False
    assert isinstance(result.error, SearchPermissionError)
    assert result.error.path == str(tmp_path)
    assert result.error.code == name


def test_missing_write_access_reported_with_details(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(permissions.os, "access", lambda _p, mode: mode != os.W_OK)
    result = check_directory_permissions(tmp_path)
    assert result.has_permission is False
    assert result.details is not None
    assert result.details.read is True
    assert result.details.write is False
    assert isinstance(result.error, SearchPermissionError)
    assert "Missing required permissions" in str(result.error)


def test_permission_message_platforms(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(permissions.sys, "platform", "linux")
    assert permission_message("/x", "EACCES") == "Permission denied: Cannot access '/x'"
    monkeypatch.setattr(permissions.sys, "platform", "darwin")
    message = permission_message("/x", "EPERM")
    assert "Privacy & Security" in message
    assert "EPERM" in message
