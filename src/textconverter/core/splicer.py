"""Replace a text node with the nodes parsed from a markup string."""

from __future__ import annotations

import logging

from bs4.element import NavigableString

from .diagnostics import DiagnosticEmitter
from .exceptions import DetachedNodeError, check_argument
from .markup import DEFAULT_PARSER, is_text_node, parse_fragment


logger = logging.getLogger(__name__)


def splice_text(
    text_node: NavigableString,
    replacement_markup: str,
    *,
    parser: str = DEFAULT_PARSER,
    emitter: DiagnosticEmitter | None = None,
) -> None:
    """Swap ``text_node`` for the parsed ``replacement_markup`` in its parent.

    New nodes are inserted right before ``text_node``, in order, and the text
    node is then extracted. The parent's child count changes by the number of
    inserted nodes minus one. A detached node raises :class:`DetachedNodeError`
    before anything is parsed, leaving the tree untouched.
    """
    check_argument(
        text_node,
        func_name="splice_text",
        expected=NavigableString,
        predicate=is_text_node,
        type_name="Text",
    )
    if not isinstance(replacement_markup, str):
        check_argument(replacement_markup, func_name="splice_text", expected=str)
    if text_node.parent is None:
        raise DetachedNodeError("Failed to execute 'splice_text': the text node has no parent.")

    new_nodes = parse_fragment(replacement_markup, parser, emitter=emitter)
    for node in new_nodes:
        text_node.insert_before(node)
    text_node.extract()
    logger.debug("spliced text node into %d node(s)", len(new_nodes))


__all__ = ["splice_text"]
