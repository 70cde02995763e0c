import re

import pytest

from textconverter.core.config import URL_RULESET, PatternRule
from textconverter.core.converter import substitute
from textconverter.core.exceptions import MissingArgumentError, WrongTypeError
from textconverter.core.substitution import substitute as apply_patterns


def test_bare_www_url_becomes_link() -> None:
    assert substitute("www.example.org/path") == (
        '<a href="http://www.example.org/path" target="_blank">www.example.org/path</a>'
    )


def test_scheme_url_becomes_link() -> None:
    assert substitute("visit http://example.com now") == (
        'visit <a href="http://example.com" target="_blank">http://example.com</a> now'
    )


def test_scheme_url_with_www_is_linked_once() -> None:
    assert substitute("http://www.example.com") == (
        '<a href="http://www.example.com" target="_blank">http://www.example.com</a>'
    )


@pytest.mark.parametrize("scheme", ["https", "ftp", "HTTP"])
def test_supported_schemes(scheme: str) -> None:
    result = substitute(f"go {scheme}://host.test/x")
    assert f'<a href="{scheme}://host.test/x" target="_blank">' in result


def test_empty_string_is_unchanged() -> None:
    assert substitute("") == ""
    assert apply_patterns("", URL_RULESET.patterns) == ""


def test_text_without_matches_is_unchanged() -> None:
    assert substitute("nothing to link here") == "nothing to link here"


def test_rules_apply_sequentially() -> None:
    rules = [("foo", "bar"), ("bar", "<b>baz</b>")]
    assert substitute("foo", rules) == "<b>baz</b>"


def test_every_match_is_replaced() -> None:
    assert substitute("a a a", "a", template="b") == "b b b"


def test_back_references_resolve_per_rule() -> None:
    rules = [
        PatternRule(matcher=re.compile(r"(\d+)"), template=r"<n>\1</n>"),
        PatternRule(matcher=re.compile(r"<n>(\d)"), template=r"<n>#\g<1>"),
    ]
    assert apply_patterns("1 and 22", rules) == "<n>#1</n> and <n>#22</n>"


def test_callable_templates_receive_the_match() -> None:
    rule = PatternRule(matcher=re.compile(r"[a-z]+"), template=lambda match: match.group(0).upper())
    assert apply_patterns("abc 123 def", [rule]) == "ABC 123 DEF"


def test_substitute_rejects_missing_text() -> None:
    with pytest.raises(MissingArgumentError):
        substitute(None)  # type: ignore[arg-type]


def test_substitute_rejects_non_strings() -> None:
    with pytest.raises(WrongTypeError, match="parameter 1 is not of type 'str'"):
        substitute(42)  # type: ignore[arg-type]
