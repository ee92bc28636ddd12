"""Unit tests for the render projection."""

from exercises.config import FillSentenceConfig, SentenceConfig
from exercises.fill_sentence import FillSentenceEngine
from exercises.projection import (
    BlankView,
    BlankVisual,
    TextView,
    feedback_visible,
    project_exercise,
    project_sentence,
)


def blank_views(view) -> list[BlankView]:
    return [part for part in view.parts if isinstance(part, BlankView)]


class TestProjectSentence:
    """Tests for per-blank visual states."""

    def test_empty_blank(self, engine):
        view = project_sentence(engine.sentence("s1"), None, show_feedback=True)

        assert view.parts[0] == TextView(content="Den ")
        assert blank_views(view)[0].visual == BlankVisual.EMPTY
        assert view.feedback is None

    def test_pending_when_feedback_hidden(self, engine):
        engine.place("lilla", "s1", 0)

        view = project_sentence(engine.sentence("s1"), None, show_feedback=False)

        assert blank_views(view)[0].visual == BlankVisual.FILLED_PENDING
        assert view.feedback is None

    def test_correct_and_incorrect(self, multi_engine):
        multi_engine.place("stora", "s1", 0)
        multi_engine.place("blå", "s1", 1)

        view = project_sentence(multi_engine.sentence("s1"), None, show_feedback=True)

        visuals = [b.visual for b in blank_views(view)]
        assert visuals == [BlankVisual.FILLED_CORRECT, BlankVisual.FILLED_INCORRECT]
        assert view.feedback == "retry"

    def test_perfect_feedback(self, engine):
        engine.place("stora", "s1", 0)

        view = project_sentence(engine.sentence("s1"), None, show_feedback=True)

        assert view.feedback == "perfect"

    def test_hover_preview_on_empty_blank(self, engine):
        engine.begin_drag("stora")
        engine.hover_blank("s1", 0)

        view = project_sentence(engine.sentence("s1"), engine.drag, show_feedback=True)

        blank = blank_views(view)[0]
        assert blank.visual == BlankVisual.HOVER_PREVIEW
        assert blank.preview_word == "stora"

    def test_hover_over_filled_blank_has_no_preview_word(self, multi_engine):
        multi_engine.place("stora", "s1", 0)
        multi_engine.begin_drag("blå")
        multi_engine.hover_blank("s1", 0)

        view = project_sentence(
            multi_engine.sentence("s1"), multi_engine.drag, show_feedback=True
        )

        blank = blank_views(view)[0]
        assert blank.visual == BlankVisual.HOVER_PREVIEW
        assert blank.filled_word == "stora"
        assert blank.preview_word is None

    def test_projection_does_not_mutate(self, engine):
        engine.begin_drag("stora")
        engine.hover_blank("s1", 0)
        before = (engine.pool.words, engine.drag.model_copy())

        project_exercise(engine)
        project_exercise(engine)

        assert (engine.pool.words, engine.drag) == before


class TestFeedbackVisible:
    """Immediate versus deferred feedback."""

    def test_immediate(self, engine):
        assert feedback_visible(engine.sentences, True) is True

    def test_deferred_until_all_filled(self, multi_engine):
        assert feedback_visible(multi_engine.sentences, False) is False

        multi_engine.place("stora", "s1", 0)
        multi_engine.place("lilla", "s1", 1)
        assert feedback_visible(multi_engine.sentences, False) is False

        multi_engine.place("gammalt", "s2", 0)
        assert feedback_visible(multi_engine.sentences, False) is True

    def test_deferred_with_no_sentences(self):
        assert feedback_visible([], False) is False


class TestProjectExercise:
    """Tests for the whole-exercise view."""

    def test_not_configured(self, rng):
        engine = FillSentenceEngine(FillSentenceConfig(instruction="Vänta"), rng=rng)

        view = project_exercise(engine)

        assert view.configured is False
        assert view.sentences == []
        assert view.can_progress is False

    def test_deferred_feedback_hides_correctness(self, rng):
        config = FillSentenceConfig(
            sentences=[
                SentenceConfig(id="s1", raw_text="Den [stora] hunden"),
                SentenceConfig(id="s2", raw_text="Ett [litet] hus"),
            ],
            show_immediate_feedback=False,
        )
        engine = FillSentenceEngine(config, rng=rng)
        engine.place("litet", "s1", 0)

        view = project_exercise(engine)

        assert view.show_feedback is False
        assert blank_views(view.sentences[0])[0].visual == BlankVisual.FILLED_PENDING
        assert view.sentences[1].number == 2

    def test_view_reflects_engine(self, engine):
        engine.place("stora", "s1", 0)

        view = project_exercise(engine)

        assert view.configured is True
        assert view.word_bank == ["lilla"]
        assert view.score.correct == 1
        assert view.can_progress is True
