"""Order-preserving phrase filtering."""

from __future__ import annotations

from typing import Any, Iterable, List

from .digits import normalize_digits
from .pattern import MatchAll, Matcher, compile_pattern


def filter_phrases(phrases: Iterable[str], matcher: Matcher) -> List[str]:
    """Return the phrases accepted by ``matcher`` in their original order.

    ``MATCH_ALL`` yields a copy of the whole input.  The input is never
    modified and duplicates are kept wherever they match.
    """

    if isinstance(matcher, MatchAll):
        return list(phrases)
    return [phrase for phrase in phrases if matcher(phrase)]


def search_phrases(phrases: Iterable[str], raw_query: Any) -> List[str]:
    """Normalise ``raw_query`` and filter ``phrases`` with it."""

    query = normalize_digits(raw_query)
    if not isinstance(query, str):
        query = ""
    return filter_phrases(phrases, compile_pattern(query))


__all__ = ["filter_phrases", "search_phrases"]
