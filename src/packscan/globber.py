"""Gitignore-aware directory globbing built on ``os.walk`` and ``pathspec``.

Semantics:
  - include and ignore patterns use gitignore wildmatch syntax, matched
    against root-relative POSIX paths
  - directories matching an ignore pattern are pruned (never entered)
  - files named by ``ignore_files`` patterns are read as additional ignore
    rules, interpreted relative to the directory containing them and applied
    to that directory's subtree, with ``!`` negation evaluated sequentially
    (last match wins)
  - symbolic links are neither followed nor returned unless requested
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from packscan.logging_utils import get_logger, trace
from packscan.patterns import parse_ignore_content

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = get_logger(__name__)

SPEC_STYLE = "gitwildmatch"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    negated: bool
    spec: PathSpec


@dataclass(frozen=True, slots=True)
class IgnoreLayer:
    """Rules from one ignore file; ``base`` is its directory, root-relative ("" for the root)."""

    base: str
    patterns: tuple[CompiledPattern, ...]


def compile_spec(patterns: Iterable[str]) -> PathSpec:
    return PathSpec.from_lines(SPEC_STYLE, patterns)


def _compile_patterns(patterns: Iterable[str]) -> tuple[CompiledPattern, ...]:
    compiled: list[CompiledPattern] = []
    for pat in patterns:
        neg = pat.startswith("!")
        core = pat[1:] if neg else pat
        if not core:
            continue
        # One-line spec, sequentially evaluated.
        compiled.append(CompiledPattern(negated=neg, spec=compile_spec([core])))
    return tuple(compiled)


def _join(rel_dir: str, name: str) -> str:
    return f"{rel_dir}/{name}" if rel_dir else name


def _relative_to_base(rel: str, base: str) -> str | None:
    if not base:
        return rel
    prefix = base + "/"
    return rel[len(prefix) :] if rel.startswith(prefix) else None


def excluded_by_layers(layers: Sequence[IgnoreLayer], rel: str, *, is_dir: bool) -> bool:
    """Return True if ``rel`` is excluded after evaluating ``layers`` in order."""
    excluded = False
    for layer in layers:
        local = _relative_to_base(rel, layer.base)
        if local is None:
            continue
        candidate = local + "/" if is_dir else local
        for pat in layer.patterns:
            if pat.spec.match_file(candidate):
                excluded = not pat.negated
    return excluded


def load_ignore_layer(path: Path, base: str) -> IgnoreLayer:
    content = path.read_text(encoding="utf-8", errors="ignore")
    return IgnoreLayer(base=base, patterns=_compile_patterns(parse_ignore_content(content)))


def _reraise(err: OSError) -> None:
    raise err


@dataclass(slots=True)
class _Matcher:
    include: PathSpec
    ignore: PathSpec
    ignore_files: PathSpec

    def ignored(self, rel: str, layers: Sequence[IgnoreLayer], *, is_dir: bool) -> bool:
        candidate = rel + "/" if is_dir else rel
        if self.ignore.match_file(candidate):
            return True
        return excluded_by_layers(layers, rel, is_dir=is_dir)


def glob_paths(  # noqa: C901, PLR0913
    patterns: Sequence[str],
    *,
    cwd: Path | str,
    ignore: Sequence[str] = (),
    ignore_files: Sequence[str] = (),
    only_files: bool = False,
    only_directories: bool = False,
    dot: bool = False,
    follow_symlinks: bool = False,
) -> list[str]:
    """Return root-relative POSIX paths under ``cwd`` matching ``patterns``.

    Errors raised while listing a directory propagate as ``OSError`` so
    callers can distinguish permission failures by ``errno``.
    """
    root = Path(cwd)
    matcher = _Matcher(
        include=compile_spec(patterns),
        ignore=compile_spec(ignore),
        ignore_files=compile_spec(ignore_files),
    )
    inherited: dict[str, tuple[IgnoreLayer, ...]] = {"": ()}
    results: list[str] = []

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_reraise, followlinks=follow_symlinks):
        current = Path(dirpath)
        rel_dir = current.relative_to(root).as_posix()
        if rel_dir == ".":
            rel_dir = ""
        layers = inherited.pop(rel_dir, ())

        for name in sorted(filenames):
            rel = _join(rel_dir, name)
            if ignore_files and matcher.ignore_files.match_file(rel) and not matcher.ignored(rel, layers, is_dir=False):
                layer = load_ignore_layer(current / name, rel_dir)
                trace(logger, "glob.ignore_file", "loaded ignore file", path=rel, patterns=len(layer.patterns))
                layers = (*layers, layer)

        kept_dirs: list[str] = []
        for name in sorted(dirnames):
            rel = _join(rel_dir, name)
            if not dot and name.startswith("."):
                continue
            if not follow_symlinks and (current / name).is_symlink():
                continue
            if matcher.ignored(rel, layers, is_dir=True):
                continue
            kept_dirs.append(name)
            inherited[rel] = layers
            if not only_files and matcher.include.match_file(rel):
                results.append(rel)
        # Prune in-place so os.walk never enters excluded directories.
        dirnames[:] = kept_dirs

        if only_directories:
            continue
        for name in sorted(filenames):
            rel = _join(rel_dir, name)
            if not dot and name.startswith("."):
                continue
            if not follow_symlinks and (current / name).is_symlink():
                continue
            if matcher.ignored(rel, layers, is_dir=False):
                continue
            if matcher.include.match_file(rel):
                results.append(rel)

    return results
