"""Wildcard pattern compilation.

A search pattern is plain text in which ``*`` stands for "any run of
characters, including none".  Everything else is literal, so characters that
carry meaning in regular expressions are escaped before the pattern is turned
into a regex.  The anchoring rules are:

* a pattern without any ``*`` is a substring search (``car`` == ``*car*``);
* otherwise the match is pinned to the start of the phrase unless the pattern
  starts with ``*`` and pinned to the end unless it ends with ``*``.

Matching is case-insensitive and always considers the whole phrase.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

WILDCARD = "*"

_ANY_RUN = ".*"
_WILDCARD_RUN = re.compile(r"\*+")
_REGEX_SPECIAL = re.compile(r"[.+?^${}()|\[\]\\]")


class MatchAll:
    """Sentinel matcher produced by an empty pattern."""

    _instance: "MatchAll | None" = None

    def __new__(cls) -> "MatchAll":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __call__(self, phrase: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "MATCH_ALL"


MATCH_ALL = MatchAll()


@dataclass(frozen=True)
class CompiledMatcher:
    """Reusable predicate compiled from a non-empty wildcard pattern."""

    pattern: str
    regex: re.Pattern[str] = field(compare=False, repr=False)

    def matches(self, phrase: str) -> bool:
        return self.regex.fullmatch(phrase) is not None

    __call__ = matches


Matcher = Union[MatchAll, CompiledMatcher]


def _escape_literal(text: str) -> str:
    return _REGEX_SPECIAL.sub(r"\\\g<0>", text)


def wildcard_to_regex(pattern: str) -> str:
    """Return the regular expression source equivalent to ``pattern``.

    The result is meant for full-string matching; leading and trailing
    ``.*`` runs are what leave either end of the phrase unpinned.
    """

    collapsed = _WILDCARD_RUN.sub(WILDCARD, pattern)
    expression = _ANY_RUN.join(
        _escape_literal(piece) for piece in collapsed.split(WILDCARD)
    )
    if WILDCARD not in collapsed:
        expression = f"{_ANY_RUN}{expression}{_ANY_RUN}"
    return expression


def compile_pattern(pattern: str) -> Matcher:
    """Compile ``pattern`` into a matcher; never raises for string input."""

    if not pattern:
        return MATCH_ALL
    regex = re.compile(wildcard_to_regex(pattern), re.IGNORECASE | re.DOTALL)
    return CompiledMatcher(pattern=pattern, regex=regex)


__all__ = [
    "CompiledMatcher",
    "MATCH_ALL",
    "MatchAll",
    "Matcher",
    "WILDCARD",
    "compile_pattern",
    "wildcard_to_regex",
]
