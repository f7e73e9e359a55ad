"""CLI command that bootstraps a default configuration file."""

from __future__ import annotations

from pathlib import Path

import click

from packscan.config import TOML_CONFIG, write_default_config

from .common import print_error


@click.command()
@click.option(
    "--path",
    "target",
    type=click.Path(path_type=Path),
    default=Path(),
    help="Directory to initialize",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(*, target: Path, force: bool) -> None:
    """Create a default .packscan.toml in the target directory."""
    target = target.resolve()
    config_file = target / TOML_CONFIG

    if config_file.exists() and not force:
        print_error(f"Config '{TOML_CONFIG}' already exists at {target}. Use --force to overwrite.")
        raise SystemExit(1)

    try:
        written = write_default_config(target)
    except OSError as e:
        print_error(f"Failed to write '{TOML_CONFIG}': {e}")
        raise SystemExit(1) from e
    click.echo(f"Wrote default config to {written}")
