"""Configuration models used by the text converter.

PatternRule

`matcher` (`re.Pattern[str]`)
: Compiled regular expression. Every match in the input is replaced (global
  semantics). Configuration files may provide a string together with a `flags`
  list (`IGNORECASE`, `MULTILINE`, `DOTALL`, `VERBOSE`, `ASCII` or the one-letter
  forms `i`, `m`, `s`, `x`, `a`).

`template` (`str | Callable[[re.Match[str]], str]`)
: Replacement passed to :func:`re.sub`. Back-references such as `\\1`, `\\g<1>`
  and `\\g<0>` resolve against the match produced by this rule's matcher.

Ruleset

`patterns` (`tuple[PatternRule, ...]`)
: Ordered rules. Each rule sees the output of the previous one.

`excluded_tag_names` (`frozenset[str]`)
: Element names whose subtrees are never visited. Names are lower-cased. The
  `excludedTagNames` key is accepted as an alias.

ConverterConfig

`ruleset` (`Ruleset`)
: Rules applied by the converter. Defaults to :data:`URL_RULESET`.

`parser` (`str`)
: BeautifulSoup backend used to parse replacement markup (defaults to
  `"html.parser"`).

`escape_text` (`bool`)
: Escape `&`, `<` and `>` in text node values before substitution so literal
  characters are not reinterpreted as markup once spliced back in.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import re
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


_FLAG_NAMES: dict[str, re.RegexFlag] = {
    "A": re.ASCII,
    "ASCII": re.ASCII,
    "I": re.IGNORECASE,
    "IGNORECASE": re.IGNORECASE,
    "M": re.MULTILINE,
    "MULTILINE": re.MULTILINE,
    "S": re.DOTALL,
    "DOTALL": re.DOTALL,
    "X": re.VERBOSE,
    "VERBOSE": re.VERBOSE,
}


def coerce_flags(flags: Any) -> int:
    """Translate a list of flag names (or an int) into :mod:`re` flags."""
    if flags is None:
        return 0
    if isinstance(flags, int):
        return flags
    if isinstance(flags, str):
        flags = [flags]
    value = 0
    for flag in flags:
        key = str(flag).strip().upper()
        try:
            value |= _FLAG_NAMES[key]
        except KeyError as exc:
            raise ValueError(f"Unknown regular expression flag '{flag}'") from exc
    return value


def normalize_tag_names(names: Iterable[str] | str | None) -> frozenset[str]:
    """Return the lower-cased set of tag names."""
    if names is None:
        return frozenset()
    if isinstance(names, str):
        names = [names]
    return frozenset(str(name).strip().lower() for name in names if str(name).strip())


class PatternRule(BaseModel):
    """A matcher and the template replacing each of its matches."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    matcher: re.Pattern[str]
    template: str | Callable[[re.Match[str]], str]

    @model_validator(mode="before")
    @classmethod
    def compile_matcher(cls, data: Any) -> Any:
        """Compile string matchers, applying the optional ``flags`` entry."""
        if isinstance(data, (tuple, list)) and len(data) == 2:
            return {"matcher": data[0], "template": data[1]}
        if not isinstance(data, Mapping):
            return data
        values = dict(data)
        flags = values.pop("flags", None)
        matcher = values.get("matcher")
        if isinstance(matcher, str):
            try:
                values["matcher"] = re.compile(matcher, coerce_flags(flags))
            except re.error as exc:
                raise ValueError(f"Invalid matcher {matcher!r}: {exc}") from exc
        elif flags:
            raise ValueError("flags only apply to string matchers")
        return values


class Ruleset(BaseModel):
    """Ordered pattern rules plus the tag names excluded from conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    patterns: tuple[PatternRule, ...] = ()
    excluded_tag_names: frozenset[str] = Field(
        default=frozenset(),
        validation_alias=AliasChoices("excluded_tag_names", "excludedTagNames"),
    )

    @field_validator("excluded_tag_names", mode="before")
    @classmethod
    def lower_tag_names(cls, value: Any) -> frozenset[str]:
        return normalize_tag_names(value)

    def describe(self) -> list[dict[str, object]]:
        """Return a serialisable snapshot of the rules."""
        entries: list[dict[str, object]] = []
        for order, rule in enumerate(self.patterns):
            template = rule.template
            entries.append(
                {
                    "order": order,
                    "matcher": rule.matcher.pattern,
                    "flags": rule.matcher.flags & ~re.UNICODE,
                    "template": template
                    if isinstance(template, str)
                    else getattr(template, "__name__", repr(template)),
                }
            )
        return entries


_URL_FLAGS = re.IGNORECASE | re.MULTILINE

URL_RULESET = Ruleset(
    patterns=(
        PatternRule(
            matcher=re.compile(
                r"(\b(https?|ftp)://[-A-Z0-9+&@#/%?=~_|!:,.;]*[A-Z0-9+&@#/%=~_|])", _URL_FLAGS
            ),
            template=r'<a href="\g<1>" target="_blank">\g<1></a>',
        ),
        PatternRule(
            matcher=re.compile(r"(^|[^/])(www\.[\S]+(\b|$))", _URL_FLAGS),
            template=r'\g<1><a href="http://\g<2>" target="_blank">\g<2></a>',
        ),
    ),
    excluded_tag_names=frozenset({"a", "script", "style"}),
)
"""Default rules: bare ``scheme://`` URLs and bare ``www.`` URLs become links."""


class ConverterConfig(BaseModel):
    """Immutable configuration owned by a converter instance."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ruleset: Ruleset = Field(default_factory=lambda: URL_RULESET)
    parser: str = "html.parser"
    escape_text: bool = True


__all__ = [
    "URL_RULESET",
    "ConverterConfig",
    "PatternRule",
    "Ruleset",
    "coerce_flags",
    "normalize_tag_names",
]
