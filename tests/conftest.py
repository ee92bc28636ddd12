"""Shared pytest fixtures for the Swedish Tutor test suite."""

import random
import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exercises.config import EngineOptions, FillSentenceConfig, SentenceConfig
from exercises.fill_sentence import FillSentenceEngine
from models import (
    BubbleItem,
    FillSentenceMoment,
    Lesson,
    SpeechBubbleConfig,
    SpeechBubbleMoment,
    TextBoxConfig,
    TextBoxMoment,
)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so word bank shuffles are reproducible."""
    return random.Random(1234)


@pytest.fixture
def single_blank_config() -> FillSentenceConfig:
    """One sentence, one blank, one distractor."""
    return FillSentenceConfig(
        sentences=[SentenceConfig(id="s1", raw_text="Den [stora] hunden sprang")],
        distractors=["lilla"],
    )


@pytest.fixture
def two_sentence_config() -> FillSentenceConfig:
    """Two sentences whose blanks share the same expected answer."""
    return FillSentenceConfig(
        sentences=[
            SentenceConfig(id="s1", raw_text="Hunden [springer] fort"),
            SentenceConfig(id="s2", raw_text="Katten [springer] också"),
        ],
        distractors=["sover"],
    )


@pytest.fixture
def multi_blank_config() -> FillSentenceConfig:
    """Two sentences, three blanks, two distractors."""
    return FillSentenceConfig(
        sentences=[
            SentenceConfig(id="s1", raw_text="Den [stora] hunden och den [lilla] katten"),
            SentenceConfig(id="s2", raw_text="Ett [gammalt] hus"),
        ],
        distractors=["blå", "snabba"],
    )


@pytest.fixture
def engine(single_blank_config, rng) -> FillSentenceEngine:
    return FillSentenceEngine(single_blank_config, rng=rng)


@pytest.fixture
def multi_engine(multi_blank_config, rng) -> FillSentenceEngine:
    return FillSentenceEngine(multi_blank_config, rng=rng)


@pytest.fixture
def no_swap_engine(multi_blank_config, rng) -> FillSentenceEngine:
    config = multi_blank_config.model_copy(
        update={"options": EngineOptions(allow_swap=False)}
    )
    return FillSentenceEngine(config, rng=rng)


@pytest.fixture
def sample_lesson(single_blank_config) -> Lesson:
    """Speech bubble, text box, then a fill-sentence exercise."""
    return Lesson(
        id="adjektiv-test",
        title="Adjektiv",
        word_class="adjektiv",
        moments=[
            SpeechBubbleMoment(
                id="m1",
                title="Hej!",
                config=SpeechBubbleConfig(
                    items=[
                        BubbleItem(id="b2", order=2, content="Nu kör vi."),
                        BubbleItem(id="b1", order=1, content="Hej!"),
                    ]
                ),
            ),
            TextBoxMoment(
                id="m2",
                title="Om adjektiv",
                config=TextBoxConfig(text="Adjektiv beskriver substantiv."),
            ),
            FillSentenceMoment(id="m3", title="Fyll i", config=single_blank_config),
        ],
    )
