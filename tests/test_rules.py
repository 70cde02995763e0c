import json
from pathlib import Path
import re

import pytest

from textconverter.core.config import URL_RULESET, PatternRule, Ruleset
from textconverter.core.exceptions import MissingArgumentError, RulesetError, WrongTypeError
from textconverter.core.rules import load_ruleset, normalize_ruleset


def test_default_is_the_url_ruleset() -> None:
    assert normalize_ruleset() is URL_RULESET
    assert URL_RULESET.excluded_tag_names == frozenset({"a", "script", "style"})
    assert len(URL_RULESET.patterns) == 2


def test_ruleset_instances_pass_through() -> None:
    ruleset = Ruleset(patterns=(PatternRule(matcher=re.compile("x"), template="y"),))
    assert normalize_ruleset(ruleset) is ruleset


def test_configuration_object_shape() -> None:
    ruleset = normalize_ruleset(
        {
            "patterns": [{"matcher": "foo", "template": "bar"}],
            "excludedTagNames": ["A", "Script"],
        }
    )
    assert ruleset.excluded_tag_names == frozenset({"a", "script"})
    assert ruleset.patterns[0].matcher.pattern == "foo"
    assert ruleset.patterns[0].template == "bar"


def test_sequence_of_pairs_and_mappings() -> None:
    ruleset = normalize_ruleset(
        [
            ("one", "1"),
            {"matcher": "two", "template": "2", "flags": ["IGNORECASE"]},
            PatternRule(matcher=re.compile("three"), template="3"),
        ]
    )
    assert [rule.template for rule in ruleset.patterns] == ["1", "2", "3"]
    assert ruleset.patterns[1].matcher.flags & re.IGNORECASE
    assert ruleset.excluded_tag_names == frozenset()


def test_single_matcher_with_template() -> None:
    ruleset = normalize_ruleset(re.compile(r"\d+"), r"<b>\g<0></b>", ["b"])
    assert len(ruleset.patterns) == 1
    assert ruleset.excluded_tag_names == frozenset({"b"})


def test_single_matcher_requires_template() -> None:
    with pytest.raises(MissingArgumentError):
        normalize_ruleset("foo")


def test_template_only_applies_to_single_matchers() -> None:
    with pytest.raises(WrongTypeError):
        normalize_ruleset([("a", "b")], "c")


def test_excluded_names_override_existing_set() -> None:
    ruleset = normalize_ruleset(URL_RULESET, excluded_tag_names=["CODE"])
    assert ruleset.excluded_tag_names == frozenset({"code"})
    assert ruleset.patterns == URL_RULESET.patterns
    assert URL_RULESET.excluded_tag_names == frozenset({"a", "script", "style"})


def test_unsupported_shapes_are_rejected() -> None:
    with pytest.raises(WrongTypeError):
        normalize_ruleset(42)  # type: ignore[arg-type]
    with pytest.raises(WrongTypeError):
        normalize_ruleset([42])  # type: ignore[list-item]


@pytest.mark.parametrize(
    "payload",
    [
        {"patterns": [{"matcher": "(", "template": "x"}]},
        {"patterns": [{"matcher": "x"}]},
        {"patterns": [{"matcher": "x", "template": "y", "flags": ["BOGUS"]}]},
        {"patterns": [], "unknown": True},
    ],
)
def test_invalid_definitions_raise_ruleset_error(payload: dict) -> None:
    with pytest.raises(RulesetError):
        normalize_ruleset(payload)


def test_describe_lists_rules_in_order() -> None:
    entries = URL_RULESET.describe()
    assert [entry["order"] for entry in entries] == [0, 1]
    assert entries[0]["flags"] == re.IGNORECASE | re.MULTILINE
    assert "www" in str(entries[1]["matcher"])


def test_load_yaml_ruleset(tmp_path: Path) -> None:
    path = tmp_path / "rules.yml"
    path.write_text(
        "patterns:\n"
        "  - matcher: '\\bissue-(\\d+)'\n"
        "    flags: [IGNORECASE]\n"
        "    template: '<a href=\"https://tracker.test/\\g<1>\">issue-\\g<1></a>'\n"
        "excludedTagNames: [A, Code]\n",
        encoding="utf-8",
    )

    ruleset = load_ruleset(path)

    assert ruleset.excluded_tag_names == frozenset({"a", "code"})
    rule = ruleset.patterns[0]
    assert rule.matcher.sub(rule.template, "see ISSUE-12") == (
        'see <a href="https://tracker.test/12">issue-12</a>'
    )


def test_load_json_ruleset(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps(
            {"patterns": [{"matcher": "x", "template": "y"}], "excluded_tag_names": ["pre"]}
        ),
        encoding="utf-8",
    )
    ruleset = load_ruleset(path)
    assert ruleset.excluded_tag_names == frozenset({"pre"})


def test_load_ruleset_errors(tmp_path: Path) -> None:
    with pytest.raises(RulesetError, match="Unable to read"):
        load_ruleset(tmp_path / "missing.yml")

    listing = tmp_path / "list.yml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(RulesetError, match="must contain a mapping"):
        load_ruleset(listing)

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(RulesetError, match="Unable to parse"):
        load_ruleset(broken)
