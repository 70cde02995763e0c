"""Node visibility policy consulted by the text walker."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum, auto

from bs4.element import PageElement, Tag

from .config import normalize_tag_names
from .markup import is_text_node


class Visibility(Enum):
    """Decision taken for a single node while walking the tree.

    ``SKIP`` and ``REJECT`` differ in what happens below the node: a skipped
    element is not yielded but its children are still visited, a rejected
    element hides its whole subtree.
    """

    ACCEPT = auto()
    """Text node handed to the consumer."""

    REJECT = auto()
    """Excluded element; neither the node nor its descendants are visited."""

    SKIP = auto()
    """Container that is not itself a target; its children are visited."""


Classifier = Callable[[PageElement], Visibility]


def classify(node: PageElement, excluded_tag_names: frozenset[str]) -> Visibility:
    """Return the visibility of ``node`` for the given lower-cased exclusion set."""
    if isinstance(node, Tag) and (node.name or "").lower() in excluded_tag_names:
        return Visibility.REJECT
    if is_text_node(node):
        return Visibility.ACCEPT
    return Visibility.SKIP


def make_classifier(excluded_tag_names: Iterable[str] = ()) -> Classifier:
    """Bind :func:`classify` to a normalised exclusion set."""
    excluded = normalize_tag_names(excluded_tag_names)

    def _classify(node: PageElement) -> Visibility:
        return classify(node, excluded)

    return _classify


__all__ = ["Classifier", "Visibility", "classify", "make_classifier"]
