"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Any, Optional, Tuple

import gradio as gr

from ..services.result_formatter import PhraseResultFormatter
from ..services.search_service import (
    Command,
    SearchContext,
    SearchService,
    SelectCategory,
    SelectTier,
    UpdateQuery,
)

UIUpdate = Tuple[SearchContext, str, str]


def _coerce_index(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _coerce_tier(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def create_interface(
    search_service: SearchService,
    formatter: Optional[PhraseResultFormatter] = None,
) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    formatter = formatter or PhraseResultFormatter()
    word_bank = search_service.word_bank
    category_choices = [
        word_bank.category_label(index) for index in range(word_bank.category_count)
    ]
    tier_choices = [str(tier) for tier in word_bank.tiers]
    initial_context = search_service.initial_context()

    def _render(context: SearchContext) -> UIUpdate:
        result = search_service.search(context)
        return context, formatter.format_count(result), formatter.format_results(result)

    def _dispatch(context: Optional[SearchContext], command: Command) -> UIUpdate:
        current = context if isinstance(context, SearchContext) else initial_context
        updated, result = search_service.dispatch(current, command)
        return updated, formatter.format_count(result), formatter.format_results(result)

    def on_load() -> UIUpdate:
        return _render(initial_context)

    def on_category(index: Any, context: Optional[SearchContext]) -> UIUpdate:
        return _dispatch(context, SelectCategory(_coerce_index(index)))

    def on_tier(value: Any, context: Optional[SearchContext]) -> UIUpdate:
        tier = _coerce_tier(value)
        if tier is None:
            return _render(context if isinstance(context, SearchContext) else initial_context)
        return _dispatch(context, SelectTier(tier))

    def on_query(query: Optional[str], context: Optional[SearchContext]) -> UIUpdate:
        return _dispatch(context, UpdateQuery(query or ""))

    interface_css = """
    .pf-container {max-width: 1100px; margin: 0 auto; direction: rtl;}
    .pf-sidebar {border-left: 1px solid rgba(15, 23, 42, 0.08); padding-left: 12px;}
    .pf-count {font-weight: 700; font-size: 1.1rem;}
    .pf-results {background: #f8fafc; border-radius: 12px; padding: 12px 16px; max-height: 70vh; overflow-y: auto;}
    """

    with gr.Blocks(
        title="Phrase Finder",
        theme=gr.themes.Soft(),
        css=interface_css,
    ) as interface:
        context_state = gr.State(initial_context)
        with gr.Row(elem_classes=["pf-container"]):
            with gr.Column(scale=1, min_width=180, elem_classes=["pf-sidebar"]):
                category_radio = gr.Radio(
                    choices=category_choices,
                    value=category_choices[0] if category_choices else None,
                    type="index",
                    label="دسته بندی",
                )
            with gr.Column(scale=3):
                tier_radio = gr.Radio(
                    choices=tier_choices,
                    value=str(initial_context.tier) if initial_context.tier is not None else None,
                    label="امتیاز",
                    visible=bool(tier_choices),
                )
                search_box = gr.Textbox(
                    label="جستجو",
                    placeholder="مثلا: *کتاب یا کتاب* (از * برای هر عبارتی استفاده کنید)",
                    lines=1,
                    rtl=True,
                )
                count_md = gr.Markdown(value="0", elem_classes=["pf-count"])
                results_md = gr.Markdown(value="", elem_classes=["pf-results"], rtl=True)

        outputs = [context_state, count_md, results_md]
        category_radio.change(on_category, [category_radio, context_state], outputs)
        tier_radio.change(on_tier, [tier_radio, context_state], outputs)
        search_box.change(on_query, [search_box, context_state], outputs)
        interface.load(on_load, None, outputs)

    return interface


__all__ = ["create_interface"]
