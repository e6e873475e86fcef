import sys
import types
from pathlib import Path

import pytest


class GradioComponent:
    """Records constructor arguments and event bindings of UI components."""

    def __init__(self, *args, **kwargs) -> None:
        self.args = args
        self.kwargs = kwargs
        self.events = []

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        return None

    def change(self, fn, inputs, outputs) -> None:
        self.events.append(("change", fn, inputs, outputs))

    def load(self, fn, inputs, outputs) -> None:
        self.events.append(("load", fn, inputs, outputs))


gradio_stub = types.ModuleType("gradio")
gradio_stub.themes = types.SimpleNamespace(Soft=lambda *_, **__: None)
for attr in ("Blocks", "Row", "Column", "Radio", "Textbox", "Markdown", "State"):
    setattr(gradio_stub, attr, GradioComponent)
sys.modules.setdefault("gradio", gradio_stub)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from phrase_finder.app.data.word_bank import WordBank


SAMPLE_PHRASES = [
    "carwash",
    "keycard",
    "oscar",
    "car",
    "caravan",
    "unearth",
    "unarmed",
    "carmaker",
    "supercar",
    "a car is here",
]


@pytest.fixture
def phrases() -> list[str]:
    """Fresh copy of the sample phrase list for each test."""

    return list(SAMPLE_PHRASES)


@pytest.fixture
def tiered_document() -> dict:
    return {
        "03p": {
            "01": ["carwash", "keycard", "oscar"],
            "02": ["ساعت ۱۲", "ساعت 7", "کتاب"],
        },
        "05p": {
            "01": ["supercar", "caravan"],
        },
    }


@pytest.fixture
def tiered_bank(tiered_document: dict) -> WordBank:
    return WordBank.from_mapping(tiered_document)


@pytest.fixture
def flat_bank() -> WordBank:
    return WordBank.from_mapping(
        {
            "01": list(SAMPLE_PHRASES),
            "02": ["Alpha", "Beta"],
        }
    )
