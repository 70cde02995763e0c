"""Core conversion pipeline: rules, visibility, walker, substitution and splice."""

from __future__ import annotations

from .config import URL_RULESET, ConverterConfig, PatternRule, Ruleset
from .converter import (
    TextConverter,
    convert,
    convert_document,
    convert_markup,
    convert_text_node,
    substitute,
)
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    DetachedNodeError,
    MissingArgumentError,
    ParseFailure,
    RulesetError,
    TextConverterError,
    WrongTypeError,
)
from .filters import Visibility, classify, make_classifier
from .markup import parse_document, parse_fragment, serialize
from .rules import load_ruleset, normalize_ruleset
from .splicer import splice_text
from .walker import TextNodeWalker, walk_text_nodes


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
    "classify",
    "convert",
    "convert_document",
    "convert_markup",
    "convert_text_node",
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
