"""View-model projection of engine state.

Pure functions from engine state to what the presentation layer draws.
Nothing here mutates the engine, so it is safe to call on every redraw.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from exercises.evaluation import Score, evaluate
from exercises.fill_sentence import DragContext, FillSentenceEngine
from exercises.template import BlankSegment, SentenceState, TextSegment


class BlankVisual(str, Enum):
    EMPTY = "empty"
    HOVER_PREVIEW = "hover_preview"
    FILLED_PENDING = "filled_pending"
    FILLED_CORRECT = "filled_correct"
    FILLED_INCORRECT = "filled_incorrect"


class TextView(BaseModel):
    kind: Literal["text"] = "text"
    content: str


class BlankView(BaseModel):
    kind: Literal["blank"] = "blank"
    sentence_id: str
    blank_index: int
    visual: BlankVisual
    filled_word: str | None = None
    preview_word: str | None = None  # Dragged word shown over an empty blank


class SentenceView(BaseModel):
    id: str
    number: int  # 1-based display number
    parts: list[TextView | BlankView] = Field(default_factory=list)
    feedback: Literal["perfect", "retry"] | None = None


class ExerciseView(BaseModel):
    """Everything needed to draw one fill-sentence exercise."""

    configured: bool
    instruction: str = ""
    sentences: list[SentenceView] = Field(default_factory=list)
    word_bank: list[str] = Field(default_factory=list)
    dragged_word: str | None = None
    show_feedback: bool = False
    score: Score = Field(default_factory=Score)
    can_progress: bool = False


def blank_visual(
    blank: BlankSegment,
    hovered: bool,
    show_feedback: bool,
) -> BlankVisual:
    """Classify a single blank for display.

    A hovered blank during a drag is always highlighted as a drop preview.
    Correctness is only revealed when ``show_feedback`` is set.
    """
    if hovered:
        return BlankVisual.HOVER_PREVIEW
    if not blank.is_filled:
        return BlankVisual.EMPTY
    if not show_feedback:
        return BlankVisual.FILLED_PENDING
    if blank.is_correct:
        return BlankVisual.FILLED_CORRECT
    return BlankVisual.FILLED_INCORRECT


def project_sentence(
    sentence: SentenceState,
    drag: DragContext | None,
    show_feedback: bool,
    number: int = 1,
) -> SentenceView:
    """Project one sentence into text parts and classified blanks."""
    parts: list[TextView | BlankView] = []
    blank_index = 0

    for segment in sentence.segments:
        if isinstance(segment, TextSegment):
            parts.append(TextView(content=segment.content))
            continue

        hovered = (
            drag is not None
            and drag.hovered is not None
            and drag.hovered.sentence_id == sentence.id
            and drag.hovered.blank_index == blank_index
        )
        parts.append(
            BlankView(
                sentence_id=sentence.id,
                blank_index=blank_index,
                visual=blank_visual(segment, hovered, show_feedback),
                filled_word=segment.filled_word,
                preview_word=drag.dragged_word if hovered and not segment.is_filled else None,
            )
        )
        blank_index += 1

    feedback = None
    if show_feedback and sentence.is_complete:
        feedback = "perfect" if sentence.is_all_correct else "retry"

    return SentenceView(id=sentence.id, number=number, parts=parts, feedback=feedback)


def feedback_visible(
    sentences: list[SentenceState],
    show_immediate_feedback: bool,
) -> bool:
    """Immediate feedback shows correctness as soon as a blank is filled;
    deferred feedback waits until every blank in the exercise is filled.
    """
    if show_immediate_feedback:
        return True
    return len(sentences) > 0 and all(s.is_complete for s in sentences)


def project_exercise(engine: FillSentenceEngine) -> ExerciseView:
    """Project the whole exercise for rendering."""
    if not engine.is_configured:
        return ExerciseView(configured=False, instruction=engine.config.instruction)

    show_feedback = feedback_visible(
        engine.sentences, engine.config.show_immediate_feedback
    )
    completion = evaluate(engine.sentences, engine.options)

    return ExerciseView(
        configured=True,
        instruction=engine.config.instruction,
        sentences=[
            project_sentence(sentence, engine.drag, show_feedback, number)
            for number, sentence in enumerate(engine.sentences, 1)
        ],
        word_bank=engine.pool.words,
        dragged_word=engine.drag.dragged_word if engine.drag else None,
        show_feedback=show_feedback,
        score=completion.score,
        can_progress=completion.can_progress,
    )
