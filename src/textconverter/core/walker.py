"""Forward-only text node walker that tolerates splices behind its cursor.

The walker keeps an explicit cursor instead of iterating ``descendants``: a stack
holding, for every open level of the tree, the next node still to be visited.
When a node is taken from the stack its next sibling is recorded immediately,
before the node is handed out. Replacing the yielded text node with new siblings
therefore cannot affect the traversal: the inserted nodes sit before the
recorded sibling and are never seen.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bs4.element import NavigableString, PageElement

from .exceptions import check_argument
from .filters import Classifier, Visibility, make_classifier


class TextNodeWalker(Iterator[NavigableString]):
    """Lazy pre-order sequence of the text nodes accepted by ``classify``.

    The walker is single-pass. Build a new instance to traverse again.
    """

    def __init__(self, root: PageElement, classify: Classifier) -> None:
        check_argument(root, func_name="TextNodeWalker", expected=PageElement)
        self.root = root
        self.classify = classify
        self._pending: list[PageElement] = [root]

    def __iter__(self) -> TextNodeWalker:
        return self

    def __next__(self) -> NavigableString:
        node = self.next_node()
        if node is None:
            raise StopIteration
        return node

    def next_node(self) -> NavigableString | None:
        """Return the next accepted text node, or ``None`` once exhausted."""
        pending = self._pending
        while pending:
            node = pending.pop()
            if node is not self.root:
                sibling = node.next_sibling
                if sibling is not None:
                    pending.append(sibling)

            decision = self.classify(node)
            if decision is Visibility.ACCEPT:
                return node  # type: ignore[return-value]
            if decision is Visibility.REJECT:
                continue

            contents = getattr(node, "contents", None)
            if contents:
                pending.append(contents[0])
        return None


def walk_text_nodes(root: PageElement, excluded_tag_names: Iterable[str] = ()) -> TextNodeWalker:
    """Return a walker over ``root`` hiding the subtrees of excluded elements."""
    return TextNodeWalker(root, make_classifier(excluded_tag_names))


__all__ = ["TextNodeWalker", "walk_text_nodes"]
