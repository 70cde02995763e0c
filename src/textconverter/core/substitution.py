"""Sequential application of pattern rules to a string."""

from __future__ import annotations

from collections.abc import Iterable

from .config import PatternRule
from .exceptions import check_argument


def substitute(text: str, patterns: Iterable[PatternRule]) -> str:
    """Apply ``patterns`` in order, each rule rewriting the previous output.

    Every match of a rule is replaced. A rule without matches leaves the string
    untouched for the next one.
    """
    check_argument(text, func_name="substitute", expected=str)
    result = text
    for rule in patterns:
        if rule.matcher.search(result) is None:
            continue
        result = rule.matcher.sub(rule.template, result)
    return result


__all__ = ["substitute"]
