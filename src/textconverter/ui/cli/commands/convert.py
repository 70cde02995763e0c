"""Implementation of the primary ``textconverter`` CLI command."""

from __future__ import annotations

from pathlib import Path
import sys

import click
import typer

from textconverter.core.converter import TextConverter
from textconverter.core.exceptions import TextConverterError
from textconverter.core.rules import load_ruleset, normalize_ruleset

from .._options import (
    DebugOption,
    ExcludeOption,
    FullDocumentOption,
    InputPathArgument,
    ListRulesOption,
    NoEscapeOption,
    OutputPathOption,
    ParserOption,
    RulesOption,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_rule_descriptions
from ..state import debug_enabled, emit_error, set_cli_state


def _read_input(input_path: Path | None) -> str:
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    if sys.stdin.isatty():
        raise typer.BadParameter("Provide an INPUT file or pipe markup via stdin.")
    return sys.stdin.read()


def write_output_file(target: Path, content: str) -> None:
    """Persist converted markup to disk, creating parent directories as needed."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:  # pragma: no cover - filesystem errors
        raise OSError(f"Failed to write output to '{target}': {exc}") from exc


def convert(
    input_path: InputPathArgument = None,
    output: OutputPathOption = None,
    rules: RulesOption = None,
    exclude: ExcludeOption = None,
    parser: ParserOption = "html.parser",
    full_document: FullDocumentOption = False,
    no_escape: NoEscapeOption = False,
    list_rules: ListRulesOption = False,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Turn bare URLs (or custom patterns) in HTML text into markup."""

    ctx = click.get_current_context(silent=True)
    typer_ctx = ctx if isinstance(ctx, typer.Context) else None
    state = set_cli_state(ctx=typer_ctx, verbosity=verbose, debug=debug)
    emitter = CliEmitter(state=state)

    try:
        ruleset = normalize_ruleset(load_ruleset(rules) if rules is not None else None)
        if exclude:
            ruleset = normalize_ruleset(
                ruleset, excluded_tag_names=[*ruleset.excluded_tag_names, *exclude]
            )
        converter = TextConverter(
            ruleset, parser=parser, escape_text=not no_escape, emitter=emitter
        )
    except TextConverterError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if list_rules:
        present_rule_descriptions(state, converter.describe(), sorted(converter.excluded_tag_names))
        raise typer.Exit()

    markup = _read_input(input_path)

    try:
        if full_document:
            result = str(converter.convert_document(markup))
        else:
            result = converter.convert_markup(markup)
    except TextConverterError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(result, nl=not result.endswith("\n"))
        return

    try:
        write_output_file(output, result)
    except OSError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
