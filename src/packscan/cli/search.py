"""CLI command implementation for the ``packscan search`` workflow."""

from __future__ import annotations

import json
from pathlib import Path

import click

from packscan.config import apply_cli_overrides, build_search_config, read_config
from packscan.constants import (
    EXIT_CONFIG,
    EXIT_INTERRUPT,
    EXIT_PERMISSION,
    EXIT_SEARCH,
    OutputFormat,
)
from packscan.core import FileSearchResult, search_files
from packscan.errors import ConfigLoadError, SearchError, SearchPermissionError

from .common import print_error


def render_result(result: FileSearchResult, fmt: OutputFormat) -> str:
    """Format ``result`` for stdout; empty directories carry a trailing slash in text mode."""
    if fmt is OutputFormat.JSON:
        payload = {"filePaths": result.file_paths, "emptyDirPaths": result.empty_dir_paths}
        return json.dumps(payload, indent=2)
    lines = [*result.file_paths, *(f"{d}/" for d in result.empty_dir_paths)]
    return "\n".join(lines)


@click.command()
@click.option("--include", "include", multiple=True, help="Include pattern (repeatable); default is everything")
@click.option("--ignore", "ignore", multiple=True, help="Additional ignore pattern (repeatable)")
@click.option("--no-gitignore", is_flag=True, help="Do not honor .gitignore files or .git/info/exclude")
@click.option("--no-default-patterns", is_flag=True, help="Do not apply the built-in ignore list")
@click.option("--include-empty-directories", is_flag=True, help="Also report directories with no visible contents")
@click.option("--output", type=click.Path(path_type=Path), help="Packaging output file to exclude from results")
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Explicit config file path")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.argument("root", required=False, type=click.Path(path_type=Path))
def search(  # noqa: PLR0913
    *,
    include: tuple[str, ...],
    ignore: tuple[str, ...],
    no_gitignore: bool,
    no_default_patterns: bool,
    include_empty_directories: bool,
    output: Path | None,
    config_path: Path | None,
    as_json: bool,
    root: Path | None,
) -> None:
    """List the files under ROOT (default: current directory) that belong in a package."""
    cwd = Path()
    target = root if root is not None else cwd

    try:
        data = read_config(base_path=target, explicit_config=config_path)
        config = build_search_config(data, cwd=cwd)
    except ConfigLoadError as err:
        print_error(str(err))
        raise SystemExit(EXIT_CONFIG) from err

    config = apply_cli_overrides(
        config,
        include=include,
        ignore=ignore,
        no_gitignore=no_gitignore,
        no_default_patterns=no_default_patterns,
        include_empty_directories=include_empty_directories,
        output=output,
    )

    try:
        result = search_files(target, config)
    except SearchPermissionError as err:
        print_error(str(err), hint=f"path: {err.path}")
        raise SystemExit(EXIT_PERMISSION) from err
    except SearchError as err:
        print_error(str(err))
        raise SystemExit(EXIT_SEARCH) from err
    except KeyboardInterrupt as err:
        print_error("Interrupted by user.")
        raise SystemExit(EXIT_INTERRUPT) from err

    rendered = render_result(result, OutputFormat.JSON if as_json else OutputFormat.TEXT)
    if rendered:
        click.echo(rendered)
