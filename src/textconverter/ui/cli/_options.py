"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
RULES_PANEL = "Rules"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

InputPathArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="INPUT",
        help="HTML document or fragment to convert. Reads standard input when omitted.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the converted markup to this file instead of standard output.",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ParserOption = Annotated[
    str,
    typer.Option(
        "--parser",
        help='BeautifulSoup parser backend to use (defaults to "html.parser").',
        rich_help_panel=INPUTS_PANEL,
    ),
]

FullDocumentOption = Annotated[
    bool,
    typer.Option(
        "--full-document",
        help="Convert and emit the entire document instead of the <body> contents.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

RulesOption = Annotated[
    Path | None,
    typer.Option(
        "--rules",
        "-r",
        help="YAML or JSON ruleset replacing the built-in URL rules.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=RULES_PANEL,
    ),
]

ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        "-x",
        help="Tag name whose content is left untouched. Repeat to exclude several tags.",
        rich_help_panel=RULES_PANEL,
    ),
]

NoEscapeOption = Annotated[
    bool,
    typer.Option(
        "--no-escape",
        help="Substitute raw text values without escaping markup characters first.",
        rich_help_panel=RULES_PANEL,
    ),
]

ListRulesOption = Annotated[
    bool,
    typer.Option(
        "--list-rules",
        help="Print the active ruleset and exit.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
