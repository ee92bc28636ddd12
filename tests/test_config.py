"""Unit tests for exercise and lesson configuration models."""

import pytest
from pydantic import ValidationError

from exercises.config import EngineOptions, FillSentenceConfig, SentenceConfig
from models import FillSentenceMoment, Lesson, MomentType, TextBoxMoment


class TestSentenceConfig:
    """Tests for sentence field aliases."""

    @pytest.mark.parametrize("key", ["text", "rawText", "raw_text"])
    def test_raw_text_aliases(self, key):
        sentence = SentenceConfig.model_validate({"id": "s1", key: "Den [stora] hund"})

        assert sentence.raw_text == "Den [stora] hund"
        assert sentence.answers() == ["stora"]


class TestFillSentenceConfig:
    """Tests for exercise-level validation."""

    def test_defaults(self):
        config = FillSentenceConfig()

        assert config.sentences == []
        assert config.show_immediate_feedback is True
        assert config.options == EngineOptions()
        assert config.is_configured is False

    def test_camel_case_feedback_flag(self):
        config = FillSentenceConfig.model_validate({"showImmediateFeedback": False})

        assert config.show_immediate_feedback is False

    def test_duplicate_sentence_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate sentence id"):
            FillSentenceConfig(
                sentences=[
                    SentenceConfig(id="s1", raw_text="[a]"),
                    SentenceConfig(id="s1", raw_text="[b]"),
                ]
            )

    def test_distractor_equal_to_answer_rejected(self):
        with pytest.raises(ValidationError, match="also a correct answer"):
            FillSentenceConfig(
                sentences=[SentenceConfig(id="s1", raw_text="Den [stora] hunden")],
                distractors=["stora"],
            )

    @pytest.mark.parametrize("raw_text", ["Den [  ] hunden", "Tom [ ] lucka"])
    def test_whitespace_only_blank_rejected(self, raw_text):
        """An empty answer could never be dragged in, so the exercise would never finish."""
        with pytest.raises(ValidationError, match="empty \\[ \\] blank"):
            FillSentenceConfig(sentences=[SentenceConfig(id="s1", raw_text=raw_text)])

    def test_whitespace_only_blank_rejected_at_lesson_load(self):
        with pytest.raises(ValidationError):
            Lesson.model_validate(
                {
                    "id": "l1",
                    "moments": [
                        {
                            "id": "m1",
                            "type": "fyll-mening",
                            "config": {"sentences": [{"id": "s1", "text": "Den [  ] hunden"}]},
                        }
                    ],
                }
            )

    def test_blank_distractor_rejected(self):
        with pytest.raises(ValidationError):
            FillSentenceConfig(distractors=["  "])

    def test_duplicate_distractors_collapsed(self):
        config = FillSentenceConfig(distractors=["blå", "röd", "blå"])

        assert config.distractors == ["blå", "röd"]

    def test_distractor_differing_in_case_is_allowed(self):
        """Matching is case-sensitive, so "Stora" is a different word."""
        config = FillSentenceConfig(
            sentences=[SentenceConfig(id="s1", raw_text="Den [stora] hunden")],
            distractors=["Stora"],
        )

        assert config.distractors == ["Stora"]


class TestLesson:
    """Tests for the tagged moment union."""

    def test_moments_are_dispatched_on_type(self):
        lesson = Lesson.model_validate(
            {
                "id": "l1",
                "title": "Test",
                "wordClass": "adjektiv",
                "moments": [
                    {"id": "m1", "type": "textruta", "config": {"text": "Hej"}},
                    {
                        "id": "m2",
                        "type": "fyll-mening",
                        "config": {"sentences": [{"id": "s1", "text": "[stor]"}]},
                    },
                ],
            }
        )

        assert lesson.word_class == "adjektiv"
        assert isinstance(lesson.moments[0], TextBoxMoment)
        assert isinstance(lesson.moments[1], FillSentenceMoment)
        assert lesson.moments[1].type == MomentType.FILL_SENTENCE
        assert lesson.moments[1].config.sentences[0].raw_text == "[stor]"

    def test_unknown_moment_type_rejected(self):
        with pytest.raises(ValidationError):
            Lesson.model_validate(
                {"id": "l1", "moments": [{"id": "m1", "type": "memory", "config": {}}]}
            )

    def test_invalid_exercise_config_rejected_at_load(self):
        with pytest.raises(ValidationError):
            Lesson.model_validate(
                {
                    "id": "l1",
                    "moments": [
                        {
                            "id": "m1",
                            "type": "fyll-mening",
                            "config": {
                                "sentences": [{"id": "s1", "text": "[stor]"}],
                                "distractors": ["stor"],
                            },
                        }
                    ],
                }
            )

    def test_json_round_trip(self, sample_lesson):
        restored = Lesson.model_validate_json(sample_lesson.model_dump_json())

        assert restored == sample_lesson
