"""Primary public API for textconverter."""

from __future__ import annotations

from textconverter.core import (
    URL_RULESET,
    ConverterConfig,
    DetachedNodeError,
    DiagnosticEmitter,
    LoggingEmitter,
    MissingArgumentError,
    NullEmitter,
    ParseFailure,
    PatternRule,
    Ruleset,
    RulesetError,
    TextConverter,
    TextConverterError,
    TextNodeWalker,
    Visibility,
    WrongTypeError,
    classify,
    convert,
    convert_document,
    convert_markup,
    convert_text_node,
    load_ruleset,
    make_classifier,
    normalize_ruleset,
    parse_document,
    parse_fragment,
    serialize,
    splice_text,
    substitute,
    walk_text_nodes,
)
from textconverter.version import get_version


__version__ = get_version()

__all__ = [
    "URL_RULESET",
    "ConverterConfig",
    "DetachedNodeError",
    "DiagnosticEmitter",
    "LoggingEmitter",
    "MissingArgumentError",
    "NullEmitter",
    "ParseFailure",
    "PatternRule",
    "Ruleset",
    "RulesetError",
    "TextConverter",
    "TextConverterError",
    "TextNodeWalker",
    "Visibility",
    "WrongTypeError",
    "__version__",
    "classify",
    "convert",
    "convert_document",
    "convert_markup",
    "convert_text_node",
    "get_version",
    "load_ruleset",
    "make_classifier",
    "normalize_ruleset",
    "parse_document",
    "parse_fragment",
    "serialize",
    "splice_text",
    "substitute",
    "walk_text_nodes",
]
