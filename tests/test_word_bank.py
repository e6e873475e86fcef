import json
from pathlib import Path

import pytest

from phrase_finder.core import search_phrases
from phrase_finder.app.data.word_bank import (
    DEFAULT_CATEGORIES,
    DEFAULT_TIER,
    WORD_BANK_ENV,
    WordBank,
    WordBankError,
    WordBankFormatError,
    category_key,
    load_word_bank,
    tier_key,
)


def test_key_helpers_zero_pad() -> None:
    assert category_key(0) == "01"
    assert category_key(19) == "20"
    assert tier_key(3) == "03p"
    assert tier_key(10) == "10p"


def test_tiered_bank_resolves_category_and_tier(tiered_bank: WordBank) -> None:
    assert tiered_bank.is_tiered
    assert tiered_bank.tiers == (3, 5)
    assert tiered_bank.phrases(0, 3) == ("carwash", "keycard", "oscar")
    assert tiered_bank.phrases(0, 5) == ("supercar", "caravan")


def test_tiered_bank_defaults_to_tier_three(tiered_bank: WordBank) -> None:
    assert tiered_bank.default_tier == DEFAULT_TIER
    assert tiered_bank.phrases(1) == ("ساعت 12", "ساعت 7", "کتاب")


def test_default_tier_falls_back_to_lowest_available() -> None:
    bank = WordBank.from_mapping({"05p": {"01": ["a"]}, "01p": {"01": ["b"]}})

    assert bank.default_tier == 1
    assert bank.phrases(0) == ("b",)


def test_flat_bank_ignores_tier(flat_bank: WordBank) -> None:
    assert not flat_bank.is_tiered
    assert flat_bank.tiers == ()
    assert flat_bank.default_tier is None
    assert flat_bank.phrases(1) == ("Alpha", "Beta")
    assert flat_bank.phrases(1, tier=5) == ("Alpha", "Beta")


def test_unknown_keys_resolve_to_empty(tiered_bank: WordBank, flat_bank: WordBank) -> None:
    assert tiered_bank.phrases(7, 3) == ()
    assert tiered_bank.phrases(0, 9) == ()
    assert flat_bank.phrases(15) == ()


def test_bank_does_not_share_state_with_source_document(tiered_document: dict) -> None:
    bank = WordBank.from_mapping(tiered_document)
    tiered_document["03p"]["01"].append("mutated")

    assert "mutated" not in bank.phrases(0, 3)


def test_category_labels_fall_back_to_keys(flat_bank: WordBank) -> None:
    assert flat_bank.category_count == len(DEFAULT_CATEGORIES) == 20
    assert flat_bank.category_label(0) == DEFAULT_CATEGORIES[0]
    assert flat_bank.category_label(25) == "26"


def test_len_counts_all_phrases(tiered_bank: WordBank) -> None:
    assert len(tiered_bank) == 8


@pytest.mark.parametrize(
    "document",
    [
        ["not", "a", "mapping"],
        {"01": "a single string"},
        {"01": ["ok", 3]},
        {"01": None},
        {"03p": {"01": ["ok"]}, "04p": ["not", "nested"]},
        {"03p": {"01": ["ok", None]}},
        {"bad": {"01": ["ok"]}},
    ],
)
def test_malformed_documents_are_rejected(document) -> None:
    with pytest.raises(WordBankFormatError):
        WordBank.from_mapping(document)


def test_load_word_bank_from_explicit_path(tmp_path: Path, tiered_document: dict) -> None:
    path = tmp_path / "bank.json"
    path.write_text(json.dumps(tiered_document, ensure_ascii=False), encoding="utf-8")

    bank = load_word_bank(path)

    assert bank.phrases(0, 5) == ("supercar", "caravan")


def test_load_word_bank_honours_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "flat.json"
    path.write_text(json.dumps({"01": ["from env"]}), encoding="utf-8")
    monkeypatch.setenv(WORD_BANK_ENV, str(path))

    bank = load_word_bank()

    assert bank.phrases(0) == ("from env",)


def test_load_word_bank_missing_file(tmp_path: Path) -> None:
    with pytest.raises(WordBankError) as excinfo:
        load_word_bank(tmp_path / "missing.json")

    assert not isinstance(excinfo.value, WordBankFormatError)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_word_bank_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(WordBankFormatError):
        load_word_bank(path)


def test_bundled_word_bank_is_tiered(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(WORD_BANK_ENV, raising=False)

    bank = load_word_bank()

    assert bank.is_tiered
    assert DEFAULT_TIER in bank.tiers
    assert bank.phrases(0)


def test_unpadded_tier_keys_are_canonicalised() -> None:
    bank = WordBank.from_mapping({"3p": {"01": ["short key"]}})

    assert bank.tiers == (3,)
    assert bank.phrases(0, 3) == ("short key",)


def test_persian_digits_in_phrases_are_stored_as_ascii(tiered_bank: WordBank) -> None:
    assert "ساعت 12" in tiered_bank.phrases(1, 3)
    assert "ساعت ۱۲" not in tiered_bank.phrases(1, 3)


def test_flat_bank_repairs_digits_too() -> None:
    bank = WordBank.from_mapping({"01": ["۱۹۸۴", "کتاب ۲"]})

    assert bank.phrases(0) == ("1984", "کتاب 2")


@pytest.mark.parametrize(
    "category, query, expected",
    [
        (10, "۱۹۸۴", ("1984",)),
        (10, "1984", ("1984",)),
        (19, "*۲۰۲۲", ("جام جهانی 2022",)),
        (19, "2022", ("جام جهانی 2022",)),
    ],
)
def test_bundled_phrases_are_found_by_either_digit_form(
    monkeypatch: pytest.MonkeyPatch, category: int, query: str, expected: tuple
) -> None:
    monkeypatch.delenv(WORD_BANK_ENV, raising=False)

    bank = load_word_bank()

    assert tuple(search_phrases(bank.phrases(category, 3), query)) == expected


@pytest.mark.parametrize("index", [-1, -20, 20])
def test_out_of_range_category_labels_use_keys(flat_bank: WordBank, index: int) -> None:
    assert flat_bank.category_label(index) == category_key(index)
