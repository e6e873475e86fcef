"""Digit normalisation applied to raw search queries."""

from __future__ import annotations

from typing import Any

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ASCII_DIGITS = "0123456789"

_DIGIT_TABLE = str.maketrans(PERSIAN_DIGITS, ASCII_DIGITS)


def normalize_digits(text: Any) -> Any:
    """Return ``text`` with Persian digit glyphs replaced by ASCII digits.

    Every other character is copied unchanged, so right-to-left words keep
    their shape. Values that are not strings are handed back untouched; the
    query box calls this on every keystroke and a stray ``None`` should not
    interrupt typing.
    """

    if not isinstance(text, str):
        return text
    return text.translate(_DIGIT_TABLE)


__all__ = ["ASCII_DIGITS", "PERSIAN_DIGITS", "normalize_digits"]
