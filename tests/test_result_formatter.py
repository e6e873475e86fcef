from phrase_finder.app.services.result_formatter import PhraseResultFormatter
from phrase_finder.app.services.search_service import SearchContext, SearchResult


def _result(*phrases: str) -> SearchResult:
    return SearchResult(context=SearchContext(), phrases=tuple(phrases))


def test_count_is_rendered_as_text() -> None:
    formatter = PhraseResultFormatter()

    assert formatter.format_count(_result("a", "b", "c")) == "3"
    assert formatter.format_count(_result()) == "0"


def test_results_render_one_item_per_phrase_in_order() -> None:
    formatter = PhraseResultFormatter()

    rendered = formatter.format_results(_result("کتاب", "car"))

    assert rendered.splitlines() == ["- کتاب", "- car"]


def test_results_escape_markup() -> None:
    formatter = PhraseResultFormatter()

    rendered = formatter.format_results(_result("<b>bold</b>", "2*3_x"))

    assert "<b>" not in rendered
    assert "&lt;b&gt;bold&lt;/b&gt;" in rendered
    assert "2\\*3\\_x" in rendered


def test_empty_results_show_message() -> None:
    formatter = PhraseResultFormatter()

    assert formatter.format_results(_result()) == PhraseResultFormatter.empty_message
