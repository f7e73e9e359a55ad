"""Loading, merging and validating search configuration."""

from __future__ import annotations

import importlib.resources
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from packscan.constants import (
    CONFIG_CUSTOM_PATTERNS,
    CONFIG_FILE_PATH,
    CONFIG_IGNORE,
    CONFIG_INCLUDE,
    CONFIG_INCLUDE_EMPTY_DIRECTORIES,
    CONFIG_OUTPUT,
    CONFIG_USE_DEFAULT_PATTERNS,
    CONFIG_USE_GITIGNORE,
    DEFAULT_OUTPUT_FILE,
)
from packscan.errors import ConfigLoadError

# Configuration filenames
TOML_CONFIG = ".packscan.toml"
CONFIG_ENV_VAR = "PACKSCAN_CONFIG_PATH"


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Everything a single search needs to know.

    ``output_file_path`` is resolved against ``cwd`` and always excluded from
    results. ``include`` patterns are literal paths or globs relative to the
    search root; an empty list means everything.
    """

    include: tuple[str, ...] = ()
    output_file_path: str | None = DEFAULT_OUTPUT_FILE
    use_gitignore: bool = True
    use_default_patterns: bool = True
    custom_patterns: tuple[str, ...] = ()
    include_empty_directories: bool = False
    cwd: Path = field(default_factory=Path)


def load_default_config_text() -> str:
    """Return the bundled default configuration text, comments included."""
    try:
        cfg_path = importlib.resources.files("packscan.resources").joinpath("default_config.toml")
        with cfg_path.open("r", encoding="utf-8") as f:  # type: ignore[attr-defined]
            return f.read()
    except OSError as err:  # pragma: no cover - packaging problem
        msg = f"Error loading default configuration: {err}"
        raise ConfigLoadError(msg) from err


def load_default_config() -> dict[str, Any]:
    """Return the bundled default configuration as a Python dict."""
    return tomllib.loads(load_default_config_text())


def write_default_config(target_dir: Path) -> Path:
    """Write the bundled default configuration into ``target_dir``."""
    toml_path = target_dir / TOML_CONFIG
    toml_path.write_text(load_default_config_text(), encoding="utf-8")
    return toml_path


def _parse_toml(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Error reading {path}: {e}"
        raise ConfigLoadError(msg) from e
    try:
        return tomlkit.loads(raw).unwrap()
    except TOMLKitError as e:
        msg = f"Error parsing {path.name}: {e}"
        raise ConfigLoadError(msg) from e


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file."""
    return _parse_toml(path)


def merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated by ``override``; nested tables merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = {**current, **value}
        else:
            merged[key] = value
    return merged


def _pyproject_table(pyproject_path: Path) -> dict[str, Any]:
    if not pyproject_path.exists():
        return {}
    tool = _parse_toml(pyproject_path).get("tool", {})
    if isinstance(tool, dict):
        table = tool.get("packscan")
        if isinstance(table, dict):
            return table
    return {}


def read_config(*, base_path: Path, explicit_config: Path | None = None) -> dict[str, Any]:
    """Read configuration merging multiple sources.

    Precedence (low to high):
      1. bundled defaults
      2. ``.packscan.toml`` in ``base_path``
      3. ``[tool.packscan]`` in ``base_path/pyproject.toml``
      4. ``$PACKSCAN_CONFIG_PATH`` (if set and present)
      5. ``explicit_config`` (from ``--config``)
    """
    cfg = load_default_config()

    local = base_path / TOML_CONFIG
    if local.exists():
        cfg = merge_config(cfg, load_toml_config(local))

    cfg = merge_config(cfg, _pyproject_table(base_path / "pyproject.toml"))

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.exists():
            cfg = merge_config(cfg, load_toml_config(p))

    if explicit_config:
        if not explicit_config.exists():
            msg = f"Explicit config file not found: {explicit_config}"
            raise ConfigLoadError(msg)
        cfg = merge_config(cfg, load_toml_config(explicit_config))

    return cfg


def _table(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        msg = f"'{key}' must be a table"
        raise ConfigLoadError(msg)
    return value


def _bool(table: dict[str, Any], key: str, default: bool) -> bool:  # noqa: FBT001
    value = table.get(key, default)
    if not isinstance(value, bool):
        msg = f"'{key}' must be true or false, got {value!r}"
        raise ConfigLoadError(msg)
    return value


def _str_list(table: dict[str, Any], key: str) -> tuple[str, ...]:
    value = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"'{key}' must be a list of strings"
        raise ConfigLoadError(msg)
    return tuple(value)


def build_search_config(cfg: dict[str, Any], *, cwd: Path) -> SearchConfig:
    """Validate a merged config dict and turn it into a ``SearchConfig``."""
    ignore = _table(cfg, CONFIG_IGNORE)
    output = _table(cfg, CONFIG_OUTPUT)

    file_path = output.get(CONFIG_FILE_PATH, DEFAULT_OUTPUT_FILE)
    if file_path is not None and not isinstance(file_path, str):
        msg = f"'{CONFIG_FILE_PATH}' must be a string, got {file_path!r}"
        raise ConfigLoadError(msg)

    return SearchConfig(
        include=_str_list(cfg, CONFIG_INCLUDE),
        output_file_path=file_path or None,
        use_gitignore=_bool(ignore, CONFIG_USE_GITIGNORE, default=True),
        use_default_patterns=_bool(ignore, CONFIG_USE_DEFAULT_PATTERNS, default=True),
        custom_patterns=_str_list(ignore, CONFIG_CUSTOM_PATTERNS),
        include_empty_directories=_bool(output, CONFIG_INCLUDE_EMPTY_DIRECTORIES, default=False),
        cwd=cwd,
    )


def apply_cli_overrides(
    config: SearchConfig,
    *,
    include: tuple[str, ...] = (),
    ignore: tuple[str, ...] = (),
    no_gitignore: bool = False,
    no_default_patterns: bool = False,
    include_empty_directories: bool = False,
    output: Path | None = None,
) -> SearchConfig:
    """Layer one-off CLI options on top of a loaded config."""
    custom = list(config.custom_patterns)
    for pat in ignore:
        if pat not in custom:
            custom.append(pat)
    return replace(
        config,
        include=include or config.include,
        custom_patterns=tuple(custom),
        use_gitignore=config.use_gitignore and not no_gitignore,
        use_default_patterns=config.use_default_patterns and not no_default_patterns,
        include_empty_directories=config.include_empty_directories or include_empty_directories,
        output_file_path=str(output) if output is not None else config.output_file_path,
    )
