"""Shared CLI helpers used by multiple subcommands."""

from __future__ import annotations

import contextlib
import os
import sys
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from packscan.constants import EXIT_OK


def error_console() -> Console:
    return Console(stderr=True, highlight=False, soft_wrap=True)


def print_error(message: str, *, hint: str | None = None) -> None:
    """Render ``message`` (and an optional hint) on stderr."""
    console = error_console()
    console.print(f"[bold red]error:[/bold red] {escape(message)}")
    if hint:
        console.print(f"[dim]{escape(hint)}[/dim]")


def exit_on_broken_pipe() -> NoReturn:
    """Exit quietly when the reader of stdout has gone away."""
    # Point stdout at devnull so the interpreter's final flush cannot fail again.
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        with contextlib.suppress(OSError, ValueError):
            os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)
    raise SystemExit(EXIT_OK)
