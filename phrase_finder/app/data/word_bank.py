"""Loading and indexing of the category/tier word bank."""

from __future__ import annotations

import json
import os
from importlib import resources
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence, Tuple

from phrase_finder.core import normalize_digits

from ...utils.observability import get_logger

WORD_BANK_ENV = "PHRASE_FINDER_WORD_BANK"

DEFAULT_TIER = 3

DEFAULT_CATEGORIES: Tuple[str, ...] = (
    "اشیاء",
    "عمومی",
    "فیلم و سریال",
    "مشاهیر",
    "اماکن و گردشگری",
    "ورزشی",
    "تکنولوژی و علمی",
    "خوراکی",
    "جانوران",
    "شغل",
    "کتاب",
    "تاریخ",
    "ضرب المثل",
    "انتزاعی",
    "شهر و کشور",
    "موسیقی",
    "کودکان",
    "کارتون",
    "سلبریتی",
    "فوتبال",
)

EntryKey = Tuple[str, ...]

_logger = get_logger(__name__).bind(component="word_bank")


class WordBankError(Exception):
    """Raised when a word bank cannot be read."""


class WordBankFormatError(WordBankError):
    """Raised when a word bank document has an unexpected shape."""


def category_key(index: int) -> str:
    """Return the document key for the zero-based category ``index``."""

    return f"{int(index) + 1:02d}"


def tier_key(tier: int) -> str:
    """Return the document key for point ``tier`` (``3`` -> ``"03p"``)."""

    return f"{int(tier):02d}p"


def _parse_tier_key(key: str) -> Optional[int]:
    if not key.endswith("p"):
        return None
    try:
        return int(key[:-1])
    except ValueError:
        return None


def _validate_phrase_list(value: object, location: str) -> Tuple[str, ...]:
    if (
        isinstance(value, (str, bytes))
        or not isinstance(value, Sequence)
        or not all(isinstance(item, str) for item in value)
    ):
        raise WordBankFormatError(
            f"Invalid data format for key {location!r}. Expected an array of strings."
        )
    # Queries arrive with ASCII digits, so stored phrases must use them too.
    return tuple(normalize_digits(item) for item in value)


class WordBank:
    """Immutable index from ``(tier?, category)`` keys to phrase tuples.

    A flat bank is keyed by category number alone (``{"01": [...]}``); a
    tiered bank nests categories under point tiers (``{"03p": {"01": [...]}}``).
    Both shapes answer the same :meth:`phrases` lookup.
    """

    def __init__(
        self,
        entries: Mapping[EntryKey, Sequence[str]],
        *,
        tiered: bool = False,
        categories: Sequence[str] = DEFAULT_CATEGORIES,
    ) -> None:
        self._entries: Dict[EntryKey, Tuple[str, ...]] = {
            tuple(key): tuple(value) for key, value in entries.items()
        }
        self._tiered = bool(tiered)
        self._categories: Tuple[str, ...] = tuple(categories)

    @classmethod
    def from_mapping(
        cls,
        document: object,
        *,
        categories: Sequence[str] = DEFAULT_CATEGORIES,
    ) -> "WordBank":
        """Validate a decoded JSON ``document`` and build a bank from it."""

        if not isinstance(document, Mapping):
            raise WordBankFormatError("Word bank document must be a JSON object.")

        tiered = any(isinstance(value, Mapping) for value in document.values())
        entries: Dict[EntryKey, Tuple[str, ...]] = {}
        for raw_key, value in document.items():
            key = str(raw_key)
            if not tiered:
                entries[(key,)] = _validate_phrase_list(value, key)
                continue
            tier_number = _parse_tier_key(key)
            if tier_number is None or not isinstance(value, Mapping):
                raise WordBankFormatError(
                    f"Invalid tier {key!r}. Expected a key like '03p' mapping to categories."
                )
            for raw_category, phrases in value.items():
                category = str(raw_category)
                entries[(tier_key(tier_number), category)] = _validate_phrase_list(
                    phrases, f"{key}/{category}"
                )
        return cls(entries, tiered=tiered, categories=categories)

    @property
    def is_tiered(self) -> bool:
        return self._tiered

    @property
    def category_count(self) -> int:
        return len(self._categories)

    @property
    def tiers(self) -> Tuple[int, ...]:
        if not self._tiered:
            return ()
        found = {_parse_tier_key(key[0]) for key in self._entries}
        return tuple(sorted(tier for tier in found if tier is not None))

    @property
    def default_tier(self) -> Optional[int]:
        if not self._tiered:
            return None
        tiers = self.tiers
        if DEFAULT_TIER in tiers or not tiers:
            return DEFAULT_TIER
        return tiers[0]

    def category_label(self, index: int) -> str:
        if 0 <= index < len(self._categories):
            return self._categories[index]
        return category_key(index)

    def phrases(self, category_index: int, tier: Optional[int] = None) -> Tuple[str, ...]:
        """Return the phrase list for a category, and tier on tiered banks.

        Unknown keys resolve to an empty tuple.
        """

        if self._tiered:
            resolved_tier = self.default_tier if tier is None else tier
            key: EntryKey = (tier_key(resolved_tier), category_key(category_index))
        else:
            key = (category_key(category_index),)
        found = self._entries.get(key)
        if found is None:
            _logger.warning("Word bank key missing", context={"key": "/".join(key)})
            return ()
        return found

    def __len__(self) -> int:
        return sum(len(value) for value in self._entries.values())


def _read_document(path: Path) -> object:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise WordBankFormatError(f"Word bank {path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise WordBankError(f"Unable to read word bank {path}: {exc}") from exc


def load_word_bank(
    path: Optional[str | os.PathLike[str]] = None,
    *,
    categories: Sequence[str] = DEFAULT_CATEGORIES,
) -> WordBank:
    """Load a word bank from ``path``, the environment or the bundled data.

    ``path`` wins over ``PHRASE_FINDER_WORD_BANK``; with neither set the
    sample bank shipped in ``phrase_finder/data`` is used.
    """

    source = path or os.environ.get(WORD_BANK_ENV)
    if source:
        document = _read_document(Path(source))
        origin = str(source)
    else:
        resource = (
            resources.files("phrase_finder").joinpath("data").joinpath("word_bank.json")
        )
        try:
            with resource.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except json.JSONDecodeError as exc:
            raise WordBankFormatError(f"Bundled word bank is not valid JSON: {exc}") from exc
        origin = "bundled"

    bank = WordBank.from_mapping(document, categories=categories)
    _logger.info(
        "Word bank loaded",
        context={
            "source": origin,
            "tiered": bank.is_tiered,
            "tiers": list(bank.tiers),
            "entries": len(bank),
        },
    )
    return bank


__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_TIER",
    "WORD_BANK_ENV",
    "WordBank",
    "WordBankError",
    "WordBankFormatError",
    "category_key",
    "load_word_bank",
    "tier_key",
]
