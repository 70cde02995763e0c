"""Rich-aware presenters for CLI output."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import re
from typing import Any

from rich import box
from rich.table import Table
from rich.text import Text

from .state import CLIState


def present_rule_descriptions(
    state: CLIState,
    rules: Sequence[Mapping[str, Any]],
    excluded_tag_names: Sequence[str] = (),
) -> None:
    """Render the ordered rules and exclusions of a ruleset."""
    table = Table(title="Active Rules", box=box.SQUARE, show_edge=True, header_style="bold cyan")
    for column in ("Order", "Matcher", "Flags", "Template"):
        table.add_column(column)
    for entry in rules:
        table.add_row(
            str(entry.get("order", "")),
            Text(str(entry.get("matcher", ""))),
            _describe_flags(int(entry.get("flags", 0) or 0)),
            Text(str(entry.get("template", ""))),
        )
    state.console.print(table)
    excluded = ", ".join(sorted(excluded_tag_names)) or "(none)"
    state.console.print(f"Excluded tags: {excluded}", markup=False, highlight=False)


def _describe_flags(flags: int) -> str:
    names = [
        name
        for name, flag in (
            ("IGNORECASE", re.IGNORECASE),
            ("MULTILINE", re.MULTILINE),
            ("DOTALL", re.DOTALL),
            ("VERBOSE", re.VERBOSE),
            ("ASCII", re.ASCII),
        )
        if flags & flag
    ]
    return ", ".join(names) or "-"


__all__ = ["present_rule_descriptions"]
