from __future__ import annotations

import os
import warnings
from typing import TYPE_CHECKING

import pytest

from packscan.globber import compile_spec, glob_paths
from tests.support import write_tree

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.small

ALL = ["**/*"]


def test_files_only_lists_every_file(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["a.txt", "src/main.py", "src/pkg/mod.py"], dirs=["empty"])
    found = glob_paths(ALL, cwd=tmp_path, only_files=True, dot=True)
    assert sorted(found) == ["a.txt", "src/main.py", "src/pkg/mod.py"]


def test_directories_only(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["src/pkg/mod.py"], dirs=["empty"])
    found = glob_paths(ALL, cwd=tmp_path, only_directories=True, dot=True)
    assert sorted(found) == ["empty", "src", "src/pkg"]


def test_ignored_directories_are_pruned(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["keep.txt", "dist/bundle.js", "dist/nested/x.js", "logs/a.log"])
    found = glob_paths(ALL, cwd=tmp_path, ignore=["dist/**", "logs/"], only_files=True, dot=True)
    assert found == ["keep.txt"]
    dirs = glob_paths(ALL, cwd=tmp_path, ignore=["dist/**", "logs/"], only_directories=True, dot=True)
    assert dirs == []


def test_dot_flag_controls_hidden_entries(tmp_path: Path) -> None:
    write_tree(tmp_path, files=[".env", ".config/settings.toml", "visible.txt"])
    assert glob_paths(ALL, cwd=tmp_path, only_files=True, dot=False) == ["visible.txt"]
    with_dot = glob_paths(ALL, cwd=tmp_path, only_files=True, dot=True)
    assert sorted(with_dot) == [".config/settings.toml", ".env", "visible.txt"]


def test_include_patterns_filter_files(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["src/a.py", "src/b.txt", "docs/c.py", "top.py"])
    found = glob_paths(["src/**/*.py"], cwd=tmp_path, only_files=True, dot=True)
    assert found == ["src/a.py"]


def test_escaped_include_matches_literal_brackets(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["app/(group)/page.tsx", "app/g/page.tsx", "app/[id]/x.ts"])
    found = glob_paths([r"app/\(group\)", r"app/\[id\]"], cwd=tmp_path, only_files=True, dot=True)
    assert sorted(found) == ["app/(group)/page.tsx", "app/[id]/x.ts"]


def test_nested_ignore_files_apply_to_their_subtree(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["root.md", "sub/keep.md", "sub/generated/out.md", "other/generated/kept.md"])
    (tmp_path / "sub" / ".gitignore").write_text("generated/\n", encoding="utf-8")

    found = glob_paths(ALL, cwd=tmp_path, ignore_files=["**/.gitignore"], only_files=True, dot=True)
    assert sorted(found) == ["other/generated/kept.md", "root.md", "sub/.gitignore", "sub/keep.md"]


def test_parent_rules_combine_with_negation(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["a.log", "keep.log", "sub/b.log", "sub/c.txt"])
    (tmp_path / ".packscanignore").write_text("*.log\n!keep.log\n", encoding="utf-8")
    (tmp_path / "sub" / ".packscanignore").write_text("c.txt\n", encoding="utf-8")

    found = glob_paths(ALL, cwd=tmp_path, ignore_files=["**/.packscanignore"], only_files=True, dot=True)
    assert sorted(found) == [".packscanignore", "keep.log", "sub/.packscanignore"]


def test_ignore_files_are_skipped_when_not_requested(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["a.log"])
    (tmp_path / ".gitignore").write_text("*.log\n", encoding="utf-8")
    found = glob_paths(ALL, cwd=tmp_path, only_files=True, dot=True)
    assert sorted(found) == [".gitignore", "a.log"]


def test_ignore_file_inside_ignored_directory_is_not_read(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["vendor/lib.js", "top.js"])
    (tmp_path / "vendor" / ".gitignore").write_text("!lib.js\n", encoding="utf-8")
    found = glob_paths(
        ALL, cwd=tmp_path, ignore=["vendor/**"], ignore_files=["**/.gitignore"], only_files=True, dot=True
    )
    assert found == ["top.js"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinks_are_not_followed_or_returned(tmp_path: Path) -> None:
    write_tree(tmp_path, files=["real/child/file.txt", "plain.txt"])
    (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)
    (tmp_path / "file-link.txt").symlink_to(tmp_path / "plain.txt")

    files = glob_paths(ALL, cwd=tmp_path, only_files=True, dot=True)
    assert sorted(files) == ["plain.txt", "real/child/file.txt"]
    dirs = glob_paths(ALL, cwd=tmp_path, only_directories=True, dot=True)
    assert sorted(dirs) == ["real", "real/child"]


def test_missing_root_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        glob_paths(ALL, cwd=tmp_path / "missing", only_files=True)


def test_compiling_patterns_emits_no_warnings() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        spec = compile_spec(["*.py", "!keep.py", "/anchored.txt", "dir/"])
    assert spec.match_file("src/a.py")
    assert spec.match_file("anchored.txt")
    assert not spec.match_file("sub/anchored.txt")
