"""Search service tying the word bank to the phrase filter."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from phrase_finder.core import search_phrases

from ..data.word_bank import WordBank
from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)


@dataclass(frozen=True)
class SearchContext:
    """Everything a search depends on besides the word bank itself."""

    category_index: int = 0
    tier: Optional[int] = None
    query: str = ""


@dataclass(frozen=True)
class SelectCategory:
    index: int


@dataclass(frozen=True)
class SelectTier:
    tier: int


@dataclass(frozen=True)
class UpdateQuery:
    query: str


Command = Union[SelectCategory, SelectTier, UpdateQuery]


def apply_command(context: SearchContext, command: Command) -> SearchContext:
    """Return the context that results from applying ``command``."""

    if isinstance(command, SelectCategory):
        return replace(context, category_index=int(command.index))
    if isinstance(command, SelectTier):
        return replace(context, tier=int(command.tier))
    if isinstance(command, UpdateQuery):
        return replace(context, query=command.query or "")
    raise TypeError(f"Unsupported search command: {command!r}")


@dataclass(frozen=True)
class SearchResult:
    context: SearchContext
    phrases: Tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.phrases)


class SearchService:
    """Resolve a :class:`SearchContext` against a word bank and filter it."""

    def __init__(self, word_bank: WordBank) -> None:
        self.word_bank = word_bank
        self._logger = get_logger(__name__).bind(
            component="search_service",
            tiered=word_bank.is_tiered,
        )

        self._metric_request_total = create_counter(
            "phrase_search_requests_total",
            "Total phrase searches executed.",
        )
        self._metric_request_failures = create_counter(
            "phrase_search_request_failures_total",
            "Total phrase searches that raised an exception.",
        )
        self._metric_request_duration = create_histogram(
            "phrase_search_request_seconds",
            "Latency of phrase searches.",
        )
        self._metric_result_size = create_histogram(
            "phrase_search_results",
            "Number of phrases returned per search.",
            buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500, 1000),
        )

    def set_word_bank(self, word_bank: WordBank) -> None:
        self.word_bank = word_bank
        self._logger = self._logger.bind(tiered=word_bank.is_tiered)

    def initial_context(self) -> SearchContext:
        """Context shown on first load: first category, default tier, no query."""

        return SearchContext(category_index=0, tier=self.word_bank.default_tier)

    def search(self, context: SearchContext) -> SearchResult:
        self._metric_request_total.inc()
        attributes = {
            "phrase_search.category_index": context.category_index,
            "phrase_search.tier": context.tier,
            "phrase_search.query_length": len(context.query or ""),
        }
        started = time.perf_counter()
        with start_span("phrase_finder.search", attributes) as span:
            try:
                candidates = self.word_bank.phrases(context.category_index, context.tier)
                matches = tuple(search_phrases(candidates, context.query))
            except Exception as exc:
                self._metric_request_failures.inc()
                record_exception(span, exc)
                self._logger.error(
                    "Phrase search failed",
                    context={"category_index": context.category_index, "error": str(exc)},
                )
                raise
            add_span_attributes(
                span,
                {
                    "phrase_search.candidates": len(candidates),
                    "phrase_search.results": len(matches),
                },
            )

        elapsed = time.perf_counter() - started
        self._metric_request_duration.observe(elapsed)
        self._metric_result_size.observe(len(matches))
        self._logger.debug(
            "Phrase search completed",
            context={
                "category_index": context.category_index,
                "tier": context.tier,
                "candidates": len(candidates),
                "results": len(matches),
                "elapsed_ms": round(elapsed * 1000, 3),
            },
        )
        return SearchResult(context=context, phrases=matches)

    def dispatch(
        self, context: SearchContext, command: Command
    ) -> Tuple[SearchContext, SearchResult]:
        """Apply ``command`` to ``context`` and search the new context once."""

        updated = apply_command(context, command)
        return updated, self.search(updated)


__all__ = [
    "Command",
    "SearchContext",
    "SearchResult",
    "SearchService",
    "SelectCategory",
    "SelectTier",
    "UpdateQuery",
    "apply_command",
]
