"""Orchestration of walker, substitution and splice over a markup tree.

A conversion is a single forward pass. The walker yields text nodes in document
order; each value is rewritten by the ruleset and, when it changed, the node is
replaced in place by the parsed result. The walker has already moved past the
replaced node, so inserted markup is never scanned again.

Conversions are not transactional: if an error aborts a pass, nodes spliced
before the failure stay spliced.

Converting an already converted tree is only a no-op when the generated markup
uses a tag name listed in ``excluded_tag_names``. The default URL ruleset emits
``<a>`` and excludes ``a``; custom rulesets must follow the same convention to
avoid wrapping a match twice.
"""

from __future__ import annotations

from collections.abc import Iterable
import html
import logging
from typing import TypeVar

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement

from .config import ConverterConfig, PatternRule, Ruleset
from .diagnostics import DiagnosticEmitter, NullEmitter, record_event
from .exceptions import check_argument
from .filters import Visibility, make_classifier
from .markup import (
    DEFAULT_PARSER,
    content_root,
    is_text_node,
    parse_document,
    resolve_parser,
    serialize,
)
from .rules import RulesetLike, Template, normalize_ruleset
from .splicer import splice_text
from .substitution import substitute as substitute_text
from .walker import TextNodeWalker


logger = logging.getLogger(__name__)

NodeT = TypeVar("NodeT", bound=PageElement)


class TextConverter:
    """Rewrite pattern matches found in the text nodes of a markup tree."""

    def __init__(
        self,
        rules: RulesetLike | None = None,
        excluded_tag_names: Iterable[str] | None = None,
        *,
        template: Template | None = None,
        parser: str = DEFAULT_PARSER,
        escape_text: bool = True,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        ruleset = normalize_ruleset(rules, template, excluded_tag_names)
        self.emitter = emitter or NullEmitter()
        self.config = ConverterConfig(
            ruleset=ruleset,
            parser=resolve_parser(parser, emitter=self.emitter),
            escape_text=escape_text,
        )
        self._classify = make_classifier(ruleset.excluded_tag_names)

    @classmethod
    def from_config(
        cls, config: ConverterConfig, *, emitter: DiagnosticEmitter | None = None
    ) -> TextConverter:
        """Build a converter from an existing configuration object."""
        return cls(
            config.ruleset,
            parser=config.parser,
            escape_text=config.escape_text,
            emitter=emitter,
        )

    @property
    def ruleset(self) -> Ruleset:
        return self.config.ruleset

    @property
    def patterns(self) -> tuple[PatternRule, ...]:
        return self.config.ruleset.patterns

    @property
    def excluded_tag_names(self) -> frozenset[str]:
        return self.config.ruleset.excluded_tag_names

    def describe(self) -> list[dict[str, object]]:
        """Return a serialisable snapshot of the configured rules."""
        return self.config.ruleset.describe()

    # Stage forms

    def classify(self, node: PageElement) -> Visibility:
        return self._classify(node)

    def walk_text_nodes(self, root: PageElement) -> TextNodeWalker:
        return TextNodeWalker(root, self._classify)

    def substitute(self, text: str = "") -> str:
        return substitute_text(text, self.patterns)

    def splice_text(self, text_node: NavigableString, replacement_markup: str) -> None:
        splice_text(
            text_node, replacement_markup, parser=self.config.parser, emitter=self.emitter
        )

    # Tree conversion

    def convert_text_node(self, text_node: NavigableString) -> bool:
        """Convert a single text node, returning True when it was replaced."""
        check_argument(
            text_node,
            func_name="convert_text_node",
            expected=NavigableString,
            predicate=is_text_node,
            type_name="Text",
        )
        source = str(text_node)
        if self.config.escape_text:
            source = html.escape(source)
        result = self.substitute(source)
        if result == source:
            return False
        self.splice_text(text_node, result)
        record_event(self.emitter, "text_converted", {"source": str(text_node), "markup": result})
        return True

    def convert(self, root: NodeT) -> NodeT:
        """Convert every visible text node below ``root`` in place and return it."""
        check_argument(root, func_name="convert", expected=PageElement)
        visited = 0
        converted = 0
        for text_node in self.walk_text_nodes(root):
            visited += 1
            if self.convert_text_node(text_node):
                converted += 1
        logger.debug("converted %d of %d text nodes", converted, visited)
        record_event(
            self.emitter, "conversion_summary", {"visited": visited, "converted": converted}
        )
        return root

    def convert_document(self, markup: str = "") -> BeautifulSoup:
        """Parse ``markup`` and convert the whole document."""
        soup = parse_document(markup, self.config.parser, emitter=self.emitter)
        return self.convert(soup)

    def convert_markup(self, markup: str = "") -> str:
        """Parse ``markup``, convert its body and return the body's inner markup."""
        soup = parse_document(markup, self.config.parser, emitter=self.emitter)
        root = self.convert(content_root(soup))
        return serialize(root)


def _converter(
    rules: RulesetLike | None,
    excluded_tag_names: Iterable[str] | None,
    template: Template | None,
    parser: str,
    escape_text: bool,
    emitter: DiagnosticEmitter | None,
) -> TextConverter:
    return TextConverter(
        rules,
        excluded_tag_names,
        template=template,
        parser=parser,
        escape_text=escape_text,
        emitter=emitter,
    )


def convert(
    root: NodeT,
    rules: RulesetLike | None = None,
    excluded_tag_names: Iterable[str] | None = None,
    *,
    template: Template | None = None,
    parser: str = DEFAULT_PARSER,
    escape_text: bool = True,
    emitter: DiagnosticEmitter | None = None,
) -> NodeT:
    """Convert ``root`` in place with an explicitly supplied ruleset."""
    converter = _converter(rules, excluded_tag_names, template, parser, escape_text, emitter)
    return converter.convert(root)


def convert_text_node(
    text_node: NavigableString,
    rules: RulesetLike | None = None,
    *,
    template: Template | None = None,
    parser: str = DEFAULT_PARSER,
    escape_text: bool = True,
    emitter: DiagnosticEmitter | None = None,
) -> bool:
    """Convert one attached text node, returning True when it was replaced."""
    converter = _converter(rules, None, template, parser, escape_text, emitter)
    return converter.convert_text_node(text_node)


def convert_markup(
    markup: str = "",
    rules: RulesetLike | None = None,
    excluded_tag_names: Iterable[str] | None = None,
    *,
    template: Template | None = None,
    parser: str = DEFAULT_PARSER,
    escape_text: bool = True,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Convert a markup string and return the converted markup."""
    converter = _converter(rules, excluded_tag_names, template, parser, escape_text, emitter)
    return converter.convert_markup(markup)


def convert_document(
    markup: str = "",
    rules: RulesetLike | None = None,
    excluded_tag_names: Iterable[str] | None = None,
    *,
    template: Template | None = None,
    parser: str = DEFAULT_PARSER,
    escape_text: bool = True,
    emitter: DiagnosticEmitter | None = None,
) -> BeautifulSoup:
    """Parse and convert a whole document, returning the soup."""
    converter = _converter(rules, excluded_tag_names, template, parser, escape_text, emitter)
    return converter.convert_document(markup)


def substitute(
    text: str = "",
    rules: RulesetLike | None = None,
    *,
    template: Template | None = None,
) -> str:
    """Apply a ruleset to ``text`` without touching any tree."""
    return substitute_text(text, normalize_ruleset(rules, template).patterns)


__all__ = [
    "TextConverter",
    "convert",
    "convert_document",
    "convert_markup",
    "convert_text_node",
    "substitute",
]
