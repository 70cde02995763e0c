"""Diagnostic abstractions shared across the conversion pipeline."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings and structured events."""

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(self, *, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self._logger.warning(message, exc_info=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def ensure_emitter(emitter: DiagnosticEmitter | None) -> DiagnosticEmitter:
    """Return a usable emitter, defaulting to the null implementation."""
    return emitter if emitter is not None else NullEmitter()


def record_event(
    emitter: DiagnosticEmitter | None,
    event: str,
    payload: Mapping[str, Any],
) -> None:
    """Forward a structured diagnostic event."""
    ensure_emitter(emitter).event(event, payload)


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for selected diagnostic events."""
    data = dict(payload)

    if name == "conversion_summary":
        visited = data.get("visited", 0)
        converted = data.get("converted", 0)
        noun = "node" if visited == 1 else "nodes"
        return f"Converted {converted} of {visited} text {noun}"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "ensure_emitter",
    "format_event_message",
    "record_event",
]
