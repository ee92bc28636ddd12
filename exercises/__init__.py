"""Fill-sentence exercise engine for the Swedish tutor.

Students complete sentences by dragging words from a word bank into
bracketed blanks. The package is split the way the data flows:

Architecture:
- Templates are parsed once into text and blank segments (template)
- The word bank is built and shuffled once per exercise (word_pool)
- The engine owns every later mutation: place, move/swap, remove (fill_sentence)
- Completion and score are derived after every change (evaluation)
- The view-model for drawing is a pure projection of the state (projection)

Configuration:
- FillSentenceConfig: sentences, distractors, feedback mode
- EngineOptions: swap on/off and progression gating

Lesson authoring checks live in ``exercises.validation``; it depends on the
lesson models in ``models`` and is imported from there directly.
"""

from exercises.config import EngineOptions, FillSentenceConfig, SentenceConfig
from exercises.evaluation import CompletionState, Score, evaluate
from exercises.fill_sentence import BlankRef, DragContext, FillSentenceEngine
from exercises.projection import (
    BlankView,
    BlankVisual,
    ExerciseView,
    SentenceView,
    TextView,
    project_exercise,
    project_sentence,
)
from exercises.template import (
    BlankSegment,
    Segment,
    SentenceState,
    TextSegment,
    blank_segments,
    expected_answers,
    parse_sentence,
    parse_template,
)
from exercises.word_pool import WordPool, build_word_pool

__all__ = [
    # Configuration
    "EngineOptions",
    "FillSentenceConfig",
    "SentenceConfig",
    # Templates
    "BlankSegment",
    "Segment",
    "SentenceState",
    "TextSegment",
    "blank_segments",
    "expected_answers",
    "parse_sentence",
    "parse_template",
    # Word bank
    "WordPool",
    "build_word_pool",
    # Engine
    "BlankRef",
    "DragContext",
    "FillSentenceEngine",
    # Evaluation
    "CompletionState",
    "Score",
    "evaluate",
    # Projection
    "BlankView",
    "BlankVisual",
    "ExerciseView",
    "SentenceView",
    "TextView",
    "project_exercise",
    "project_sentence",
]
