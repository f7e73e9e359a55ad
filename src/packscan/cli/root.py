"""Top-level Click group wiring together all packscan commands."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click

from packscan import __version__
from packscan.constants import EXIT_INTERRUPT
from packscan.logging_utils import TRACE, configure_logging

from .common import exit_on_broken_pipe

if TYPE_CHECKING:
    from collections.abc import Iterable

# Thresholds for -v counts
VERBOSE_DEBUG_THRESHOLD = 2
VERBOSE_TRACE_THRESHOLD = 3

DEFAULT_COMMAND = "search"

CLI_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _resolve_level(verbose: int, log_level: str | None) -> int:
    if log_level:
        return TRACE if log_level.upper() == "TRACE" else getattr(logging, log_level.upper())
    if verbose >= VERBOSE_TRACE_THRESHOLD:
        return TRACE
    if verbose >= VERBOSE_DEBUG_THRESHOLD:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


@click.group(context_settings=CLI_CONTEXT_SETTINGS)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-vv debug, -vvv trace)")
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE"], case_sensitive=False),
    help="Set log level explicitly",
)
@click.version_option(__version__, "-V", "--version")
def cli(verbose: int, log_level: str | None) -> None:
    """Find the files under a directory that belong in a package.

    If no COMMAND is given, this behaves like: packscan search [ROOT]
    """
    configure_logging(_resolve_level(verbose, log_level))


# Import subcommands and register them
from .init import init  # noqa: E402
from .search import search  # noqa: E402
from .version import version  # noqa: E402

cli.add_command(search)
cli.add_command(init)
cli.add_command(version)


# Flags handled by the root command itself; encountering them means we should
# not inject the default ``search`` subcommand.
_HELP_FLAGS = {"-h", "--help", "-V", "--version"}
_VERBOSE_FLAGS = {"--verbose"}


def _is_verbose_flag(flag: str) -> bool:
    """Return ``True`` if the token is a root-level verbosity flag."""
    if flag in _VERBOSE_FLAGS:
        return True
    if flag == "-":
        return False
    stripped = flag.lstrip("-")
    return flag.startswith("-") and not flag.startswith("--") and bool(stripped) and set(stripped) == {"v"}


def _log_level_skip(flag: str) -> int:
    """Return how many tokens a log-level flag consumes (1 for inline)."""
    if flag == "--log-level":
        return 2
    if flag.startswith("--log-level="):
        return 1
    return 0


def inject_default_command(args: list[str], *, commands: Iterable[str]) -> list[str]:
    """Insert ``search`` after the root-level flags when no command is named."""
    normalized = list(args)
    command_names = set(commands)

    idx = 0
    while idx < len(normalized):
        current = normalized[idx]
        if current in _HELP_FLAGS or current in command_names:
            return normalized
        if _is_verbose_flag(current):
            idx += 1
            continue
        skip = _log_level_skip(current)
        if skip:
            idx += skip
            continue
        break

    normalized.insert(min(idx, len(normalized)), DEFAULT_COMMAND)
    return normalized


def main(argv: list[str] | None = None) -> None:
    """Console entry point; routes bare invocations to ``search``."""
    argv = list(sys.argv[1:] if argv is None else argv)
    argv = inject_default_command(argv, commands=getattr(cli, "commands", {}))
    try:
        cli.main(args=argv, prog_name="packscan", standalone_mode=False)
    except click.ClickException as err:
        err.show()
        raise SystemExit(err.exit_code) from err
    except click.exceptions.Abort as err:
        raise SystemExit(EXIT_INTERRUPT) from err
    except BrokenPipeError:
        exit_on_broken_pipe()
