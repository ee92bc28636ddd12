"""Completion evaluation for fill-sentence exercises."""

from pydantic import BaseModel

from exercises.config import EngineOptions
from exercises.template import SentenceState


class Score(BaseModel):
    correct: int = 0
    total: int = 0


class CompletionState(BaseModel):
    """Read-only aggregates derived from the current sentences.

    ``can_progress`` is the only value the lesson player needs: it unlocks
    the "continue" control.
    """

    score: Score
    all_complete: bool
    all_correct: bool
    can_progress: bool


def evaluate(
    sentences: list[SentenceState],
    options: EngineOptions | None = None,
) -> CompletionState:
    """Compute score and completion flags for a list of sentences.

    An exercise without sentences is "not configured" and can never
    progress. Sentences without blanks are vacuously complete and correct.

    Args:
        sentences: Current sentence states.
        options: Engine options; ``gate_on_all_correct`` decides whether
            progression needs every answer right or only every blank filled.

    Returns:
        The derived completion state.
    """
    options = options or EngineOptions()
    blanks = [blank for sentence in sentences for blank in sentence.blanks]

    score = Score(
        correct=sum(1 for blank in blanks if blank.is_correct is True),
        total=len(blanks),
    )
    all_complete = all(sentence.is_complete for sentence in sentences)
    all_correct = all_complete and all(
        sentence.is_all_correct for sentence in sentences
    )

    if not sentences:
        can_progress = False
    elif options.gate_on_all_correct:
        can_progress = all_complete and all_correct
    else:
        can_progress = all_complete

    return CompletionState(
        score=score,
        all_complete=all_complete,
        all_correct=all_correct,
        can_progress=can_progress,
    )
