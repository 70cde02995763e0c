"""Custom exception hierarchy for the text conversion pipeline."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class TextConverterError(Exception):
    """Base exception for text conversion failures."""


class MissingArgumentError(TextConverterError, TypeError):
    """Raised when a required primary argument was omitted."""


class WrongTypeError(TextConverterError, TypeError):
    """Raised when an argument does not satisfy the expected node or shape contract."""


class DetachedNodeError(TextConverterError, ValueError):
    """Raised when a splice is requested on a node that has no parent."""


class ParseFailure(TextConverterError):
    """Raised when the markup parser rejects a replacement or input string."""


class RulesetError(TextConverterError):
    """Raised when a ruleset definition cannot be loaded or validated."""


def missing_argument_message(func_name: str) -> str:
    return f"Failed to execute '{func_name}': 1 argument required, but only 0 present."


def wrong_type_message(func_name: str, expected: str) -> str:
    return f"Failed to execute '{func_name}': parameter 1 is not of type '{expected}'."


def check_argument(
    value: Any,
    *,
    func_name: str,
    expected: type | tuple[type, ...],
    predicate: Callable[[Any], bool] | None = None,
    type_name: str | None = None,
) -> None:
    """Validate the primary argument of a public operation.

    ``None`` is reported as a missing argument. A value that is not an instance of
    ``expected``, or that fails ``predicate``, is reported as a wrong type.
    """
    if value is None:
        raise MissingArgumentError(missing_argument_message(func_name))
    if not isinstance(value, expected) or (predicate is not None and not predicate(value)):
        if type_name is None:
            if isinstance(expected, tuple):
                type_name = " | ".join(kind.__name__ for kind in expected)
            else:
                type_name = expected.__name__
        raise WrongTypeError(wrong_type_message(func_name, type_name))


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "DetachedNodeError",
    "MissingArgumentError",
    "ParseFailure",
    "RulesetError",
    "TextConverterError",
    "WrongTypeError",
    "check_argument",
    "exception_hint",
    "exception_messages",
    "missing_argument_message",
    "wrong_type_message",
]
