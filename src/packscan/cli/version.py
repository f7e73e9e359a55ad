"""CLI command reporting the installed packscan version."""

from __future__ import annotations

import click

from packscan import __version__


@click.command()
def version() -> None:
    """Print version and exit."""
    click.echo(__version__)
