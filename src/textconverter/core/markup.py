"""BeautifulSoup adapter used to parse and serialise markup.

The converter treats the parser as an opaque service: a markup string goes in,
an ordered list of detached nodes comes out. Everything BeautifulSoup-specific
about parsing lives here.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup, builder_registry
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .diagnostics import DiagnosticEmitter, ensure_emitter
from .exceptions import ParseFailure, check_argument


logger = logging.getLogger(__name__)

DEFAULT_PARSER = "html.parser"


def parse_document(
    markup: str,
    parser: str = DEFAULT_PARSER,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> BeautifulSoup:
    """Parse ``markup`` into a BeautifulSoup tree.

    A missing parser backend falls back to ``html.parser``; markup rejected by
    the backend raises :class:`ParseFailure`. The fallback is reported as a
    warning on ``emitter``.
    """
    check_argument(markup, func_name="parse_document", expected=str)
    try:
        return BeautifulSoup(markup, parser)
    except FeatureNotFound:
        if parser == DEFAULT_PARSER:
            raise
        _report_fallback(parser, emitter)
        return parse_document(markup, DEFAULT_PARSER, emitter=emitter)
    except ParserRejectedMarkup as exc:
        raise ParseFailure(f"Unable to parse markup: {exc}") from exc


def resolve_parser(parser: str, *, emitter: DiagnosticEmitter | None = None) -> str:
    """Return ``parser`` when BeautifulSoup can build it, ``html.parser`` otherwise."""
    if parser == DEFAULT_PARSER or builder_registry.lookup(parser) is not None:
        return parser
    _report_fallback(parser, emitter)
    return DEFAULT_PARSER


def _report_fallback(parser: str, emitter: DiagnosticEmitter | None) -> None:
    logger.debug("parser backend %r unavailable, falling back to %s", parser, DEFAULT_PARSER)
    ensure_emitter(emitter).warning(
        f"Parser '{parser}' is not available, using '{DEFAULT_PARSER}' instead"
    )


def parse_fragment(
    markup: str,
    parser: str = DEFAULT_PARSER,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> list[PageElement]:
    """Parse ``markup`` into an ordered list of detached nodes.

    Backends that synthesise ``<html>``/``<body>`` wrappers (``lxml``,
    ``html5lib``) contribute the children of ``<body>`` only.
    """
    soup = parse_document(markup, parser, emitter=emitter)
    container: Tag = soup.body if soup.body is not None and "<body" not in markup.lower() else soup
    return [node.extract() for node in list(container.contents)]


def content_root(soup: BeautifulSoup) -> Tag:
    """Return ``<body>`` when the document has one, the document otherwise."""
    return soup.body if soup.body is not None else soup


def serialize(root: PageElement) -> str:
    """Return the inner markup of ``root`` (or the text of a text node)."""
    if isinstance(root, Tag):
        return root.decode_contents()
    return root.output_ready() if isinstance(root, NavigableString) else str(root)


def is_text_node(node: object) -> bool:
    """Return True for text-bearing nodes (comments, doctypes and CDATA are not)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


__all__ = [
    "DEFAULT_PARSER",
    "content_root",
    "is_text_node",
    "parse_document",
    "parse_fragment",
    "resolve_parser",
    "serialize",
]
