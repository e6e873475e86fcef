"""Query normalisation, wildcard compilation and phrase filtering."""

from .digits import ASCII_DIGITS, PERSIAN_DIGITS, normalize_digits
from .filtering import filter_phrases, search_phrases
from .pattern import (
    MATCH_ALL,
    CompiledMatcher,
    MatchAll,
    Matcher,
    compile_pattern,
    wildcard_to_regex,
)

__all__ = [
    "ASCII_DIGITS",
    "PERSIAN_DIGITS",
    "normalize_digits",
    "MATCH_ALL",
    "MatchAll",
    "Matcher",
    "CompiledMatcher",
    "compile_pattern",
    "wildcard_to_regex",
    "filter_phrases",
    "search_phrases",
]
