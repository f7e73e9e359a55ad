"""Structured logging helpers, including a TRACE level below DEBUG."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

LogValue: TypeAlias = "str | int | float | bool | list[LogValue] | dict[str, LogValue] | None"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _serialise_value(value: object) -> LogValue:
    """Convert ``value`` into a JSON/log-friendly representation."""
    if isinstance(value, Path):
        return value.as_posix()
    if isinstance(value, (set, frozenset)):
        return sorted(str(_serialise_value(v)) for v in value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_serialise_value(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): _serialise_value(v) for k, v in value.items()}
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


@dataclass(frozen=True, slots=True)
class StructuredLogEvent:
    """A named log record with a context payload."""

    name: str
    message: str
    context: dict[str, object] = field(default_factory=dict)
    level: int = logging.INFO

    def serialised_context(self) -> dict[str, LogValue]:
        return {str(k): _serialise_value(v) for k, v in self.context.items()}


def get_logger(name: str) -> logging.Logger:
    """Return the configured logger for ``name``."""
    return logging.getLogger(name)


def log_event(logger: logging.Logger, event: StructuredLogEvent) -> None:
    """Emit ``event`` to ``logger`` with structured metadata."""
    if not logger.isEnabledFor(event.level):
        return
    logger.log(event.level, event.message, extra={"event": event.name, "context": event.serialised_context()})


def trace(logger: logging.Logger, name: str, message: str, **context: object) -> None:
    """Shorthand for a TRACE-level structured event."""
    log_event(logger, StructuredLogEvent(name=name, message=message, context=context, level=TRACE))


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, force=True)


__all__ = ["TRACE", "StructuredLogEvent", "configure_logging", "get_logger", "log_event", "trace"]
