"""Ruleset normalisation and loading.

Every public entry point accepts the same loose family of rule descriptions: a
:class:`~textconverter.core.config.Ruleset`, a mapping in the configuration
object shape, a sequence of rules, or a single matcher with its template.
:func:`normalize_ruleset` is the only place where these calling conventions are
told apart; everything downstream works with a canonical ``Ruleset``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import json
from pathlib import Path
import re
from typing import Any, Union

from pydantic import ValidationError
import yaml

from .config import URL_RULESET, PatternRule, Ruleset, normalize_tag_names
from .exceptions import MissingArgumentError, RulesetError, WrongTypeError, wrong_type_message


Template = Union[str, Callable[[re.Match[str]], str]]
RulesetLike = Union[
    Ruleset,
    Mapping[str, Any],
    Iterable[Union[PatternRule, Mapping[str, Any], tuple[Any, Any]]],
    str,
    re.Pattern[str],
]


def normalize_ruleset(
    rules: RulesetLike | None = None,
    template: Template | None = None,
    excluded_tag_names: Iterable[str] | None = None,
) -> Ruleset:
    """Convert any supported calling convention into a canonical ruleset.

    - ``None`` selects :data:`URL_RULESET`.
    - A ``Ruleset`` is returned as-is.
    - A mapping is validated as ``{patterns: [...], excludedTagNames: [...]}``.
    - A string or compiled pattern requires ``template`` and yields a single rule.
    - Any other iterable is read as a sequence of rules.

    ``excluded_tag_names``, when given, replaces the exclusion set of the result.
    Custom rules default to no exclusions at all.
    """
    if template is not None and not isinstance(rules, (str, re.Pattern)):
        raise WrongTypeError(wrong_type_message("normalize_ruleset", "str | Pattern"))

    try:
        if rules is None:
            ruleset = URL_RULESET
        elif isinstance(rules, Ruleset):
            ruleset = rules
        elif isinstance(rules, Mapping):
            ruleset = Ruleset.model_validate(rules)
        elif isinstance(rules, (str, re.Pattern)):
            if template is None:
                raise MissingArgumentError(
                    "Failed to execute 'normalize_ruleset': a template is required "
                    "when a single matcher is given."
                )
            ruleset = Ruleset(patterns=(PatternRule(matcher=rules, template=template),))
        elif isinstance(rules, Iterable):
            ruleset = Ruleset(patterns=tuple(_coerce_rule(rule) for rule in rules))
        else:
            raise WrongTypeError(wrong_type_message("normalize_ruleset", "Ruleset"))
    except ValidationError as exc:
        raise RulesetError(f"Invalid ruleset: {exc}") from exc

    if excluded_tag_names is not None:
        names = normalize_tag_names(excluded_tag_names)
        ruleset = ruleset.model_copy(update={"excluded_tag_names": names})
    return ruleset


def _coerce_rule(rule: Any) -> PatternRule:
    if isinstance(rule, PatternRule):
        return rule
    if isinstance(rule, (Mapping, tuple, list)):
        return PatternRule.model_validate(rule)
    raise WrongTypeError(wrong_type_message("normalize_ruleset", "PatternRule"))


def load_ruleset(path: Path | str) -> Ruleset:
    """Read a ruleset from a YAML or JSON file."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise RulesetError(f"Unable to read ruleset file '{source}': {exc}") from exc

    try:
        if source.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RulesetError(f"Unable to parse ruleset file '{source}': {exc}") from exc

    if not isinstance(payload, Mapping):
        raise RulesetError(f"Ruleset file '{source}' must contain a mapping.")
    return normalize_ruleset(payload)


__all__ = [
    "RulesetLike",
    "Template",
    "load_ruleset",
    "normalize_ruleset",
]
