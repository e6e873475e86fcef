"""Result formatting helpers for phrase lookups."""

from __future__ import annotations

import re
from html import escape

from .search_service import SearchResult

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]#|~])")


def _escape_phrase(phrase: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", escape(phrase, quote=False))


class PhraseResultFormatter:
    """Render search results for the Gradio result panes."""

    empty_message = "_هیچ عبارتی پیدا نشد._"

    def format_count(self, result: SearchResult) -> str:
        return str(result.count)

    def format_results(self, result: SearchResult) -> str:
        """Render ``result`` as a markdown list, one phrase per line."""

        if not result.phrases:
            return self.empty_message
        return "\n".join(f"- {_escape_phrase(phrase)}" for phrase in result.phrases)


__all__ = ["PhraseResultFormatter"]
