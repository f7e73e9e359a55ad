from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from packscan.config import CONFIG_ENV_VAR, SearchConfig

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's own PACKSCAN_CONFIG_PATH out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo ``configure_logging`` calls made by CLI invocations."""
    root = logging.getLogger()
    before, level = set(root.handlers), root.level
    yield
    for handler in [h for h in root.handlers if h not in before]:
        # basicConfig installs a plain StreamHandler bound to CliRunner's stderr
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty search root that is also the working directory."""
    root = tmp_path / "repo"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def base_config(tmp_path: Path) -> SearchConfig:
    """A config with every optional ignore source switched off."""
    return SearchConfig(
        output_file_path=None,
        use_gitignore=False,
        use_default_patterns=False,
        cwd=tmp_path,
    )
