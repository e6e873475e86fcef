"""Application wiring for the Phrase Finder project."""

from __future__ import annotations

import os
from typing import Optional, Tuple

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from phrase_finder.utils.logging_config import configure_logging
from phrase_finder.utils.observability import get_logger

from phrase_finder.app.data.word_bank import WordBank, WordBankError, load_word_bank
from phrase_finder.app.services.search_service import (
    Command,
    SearchContext,
    SearchResult,
    SearchService,
)
from phrase_finder.app.ui.gradio import create_interface

SHARE_ENV = "PHRASE_FINDER_SHARE"
PORT_ENV = "PHRASE_FINDER_PORT"
DEFAULT_PORT = 7860


class PhraseFinderApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        word_bank_path: Optional[str] = None,
        *,
        word_bank: Optional[WordBank] = None,
        search_service: Optional[SearchService] = None,
    ) -> None:
        self._logger = get_logger(__name__).bind(component="app_facade")
        self._logger.info(
            "Initialising application facade",
            context={"word_bank_path": word_bank_path},
        )

        if word_bank is None and search_service is not None:
            word_bank = search_service.word_bank
        if word_bank is None:
            try:
                word_bank = load_word_bank(word_bank_path)
            except WordBankError as exc:
                self._logger.error(
                    "Word bank initialisation failed",
                    context={"word_bank_path": word_bank_path, "error": str(exc)},
                )
                raise
        self.word_bank = word_bank

        self.search_service = search_service or SearchService(word_bank)
        if search_service is not None and search_service.word_bank is not word_bank:
            self.search_service.set_word_bank(word_bank)

        self._logger.info(
            "Application dependencies wired",
            context={
                "tiered": word_bank.is_tiered,
                "categories": word_bank.category_count,
                "phrases": len(word_bank),
            },
        )

    # Public API ------------------------------------------------------------
    def initial_context(self) -> SearchContext:
        return self.search_service.initial_context()

    def search(self, context: SearchContext) -> SearchResult:
        return self.search_service.search(context)

    def dispatch(
        self, context: SearchContext, command: Command
    ) -> Tuple[SearchContext, SearchResult]:
        return self.search_service.dispatch(context, command)

    def create_gradio_interface(self):
        return create_interface(self.search_service)


def _should_share_interface() -> bool:
    """Return whether the Gradio UI should request a public share link."""

    env_value = os.environ.get(SHARE_ENV, "")
    if not env_value:
        return False
    return env_value.strip().lower() in {"1", "true", "yes", "on"}


def _server_port() -> int:
    try:
        return int(os.environ.get(PORT_ENV, DEFAULT_PORT))
    except ValueError:
        return DEFAULT_PORT


def main() -> None:
    configure_logging()
    app = PhraseFinderApp()
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=_server_port(),
        share=_should_share_interface(),
    )


__all__ = ["PhraseFinderApp", "main"]


if __name__ == "__main__":
    main()
