from bs4 import BeautifulSoup, Comment, NavigableString, Tag
import pytest

from textconverter.core.exceptions import (
    DetachedNodeError,
    MissingArgumentError,
    WrongTypeError,
)
from textconverter.core.splicer import splice_text


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_splice_replaces_text_with_parsed_nodes() -> None:
    soup = _soup("<p>visit http://example.com now</p>")
    text = soup.p.contents[0]

    splice_text(
        text,
        'visit <a href="http://example.com" target="_blank">http://example.com</a> now',
    )

    contents = soup.p.contents
    assert len(contents) == 3
    assert isinstance(contents[0], NavigableString) and str(contents[0]) == "visit "
    assert isinstance(contents[1], Tag) and contents[1].name == "a"
    assert contents[1].contents == ["http://example.com"]
    assert contents[1]["href"] == "http://example.com"
    assert contents[1]["target"] == "_blank"
    assert isinstance(contents[2], NavigableString) and str(contents[2]) == " now"
    assert text.parent is None


def test_splice_preserves_sibling_order() -> None:
    soup = _soup("<p><b>x</b>middle<i>y</i></p>")
    splice_text(soup.p.contents[1], "1<u>2</u>3")
    rendered = [node.name if isinstance(node, Tag) else str(node) for node in soup.p.contents]
    assert rendered == ["b", "1", "u", "3", "i"]


def test_splice_with_empty_markup_removes_the_node() -> None:
    soup = _soup("<p><b>x</b>gone<i>y</i></p>")
    splice_text(soup.p.contents[1], "")
    assert [node.name for node in soup.p.contents] == ["b", "i"]


def test_splice_on_detached_node_leaves_tree_untouched() -> None:
    soup = _soup("<p>orphan</p>")
    text = soup.p.contents[0].extract()
    before = str(soup)

    with pytest.raises(DetachedNodeError):
        splice_text(text, "<b>orphan</b>")

    assert str(soup) == before
    assert text.parent is None


def test_splice_on_fresh_string_is_detached() -> None:
    with pytest.raises(DetachedNodeError):
        splice_text(NavigableString("alone"), "x")


def test_splice_requires_a_node() -> None:
    with pytest.raises(MissingArgumentError, match="1 argument required"):
        splice_text(None, "x")  # type: ignore[arg-type]


def test_splice_rejects_elements() -> None:
    soup = _soup("<p>x</p>")
    with pytest.raises(WrongTypeError, match="not of type 'Text'"):
        splice_text(soup.p, "x")  # type: ignore[arg-type]


def test_splice_rejects_comments() -> None:
    soup = _soup("<p><!-- c --></p>")
    comment = soup.p.contents[0]
    assert isinstance(comment, Comment)
    with pytest.raises(WrongTypeError):
        splice_text(comment, "x")


def test_splice_rejects_non_string_markup() -> None:
    soup = _soup("<p>x</p>")
    with pytest.raises(WrongTypeError):
        splice_text(soup.p.contents[0], 3)  # type: ignore[arg-type]
