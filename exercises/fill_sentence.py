"""Fill-sentence exercise engine.

Students drag words from a word bank into the blanks of one or more
sentences. The engine owns every mutation of blank contents and of the
word bank and keeps the two consistent: each word is either in the bank or
in exactly one blank.

Interaction model (mirrors a drag-and-drop surface):
- ``begin_drag(word, source)`` starts a drag, from the bank (no source) or
  from a filled blank.
- ``hover_blank`` / ``leave_blank`` track the drop target for previews.
  They serve pointer-driven surfaces that redraw while a drag is in
  flight; the terminal UI issues a whole gesture per command and only
  hovers immediately before its drop.
- ``drop_on_blank`` or ``drop_on_pool`` completes the drop.
- ``end_drag`` clears the drag whether or not a drop happened.
- ``remove_from_blank`` is the click-to-remove shortcut.

Operations whose preconditions fail are ignored: a drag surface produces
stray events and none of them should crash the lesson. Every operation
returns True when it changed state and False when it was ignored.
"""

import logging
import random

from pydantic import BaseModel, ConfigDict

from exercises.config import EngineOptions, FillSentenceConfig
from exercises.evaluation import CompletionState, Score, evaluate
from exercises.template import BlankSegment, SentenceState, parse_sentence
from exercises.word_pool import WordPool, build_word_pool

logger = logging.getLogger(__name__)


class BlankRef(BaseModel):
    """Address of a blank: sentence id plus positional blank index."""

    model_config = ConfigDict(frozen=True)

    sentence_id: str
    blank_index: int


class DragContext(BaseModel):
    """Ephemeral drag state. Not part of the exercise's logical state."""

    dragged_word: str
    source: BlankRef | None = None
    hovered: BlankRef | None = None

    @property
    def from_pool(self) -> bool:
        return self.source is None


class FillSentenceEngine:
    """State machine for one fill-sentence exercise instance."""

    def __init__(
        self,
        config: FillSentenceConfig,
        rng: random.Random | None = None,
    ):
        self.rng = rng or random.Random()
        self.config: FillSentenceConfig = config
        self.sentences: list[SentenceState] = []
        self.pool = WordPool()
        self.drag: DragContext | None = None
        self._build()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _build(self) -> None:
        self.sentences = [
            parse_sentence(sentence.id, sentence.raw_text)
            for sentence in self.config.sentences
        ]
        self.pool = WordPool(
            build_word_pool(
                (sentence.segments for sentence in self.sentences),
                self.config.distractors,
                self.rng,
            )
        )
        self.drag = None
        logger.info(
            "Built fill-sentence exercise: %d sentences, %d blanks, %d words",
            len(self.sentences),
            self.score.total,
            len(self.pool),
        )

    def load(self, config: FillSentenceConfig) -> bool:
        """Switch to ``config``, rebuilding from scratch if it differs.

        There is no partial update: any structural change discards all
        placements and any drag in flight.

        Returns:
            True if the exercise was rebuilt.
        """
        if config == self.config:
            return False
        self.config = config
        self._build()
        return True

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def options(self) -> EngineOptions:
        return self.config.options

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    @property
    def completion(self) -> CompletionState:
        return evaluate(self.sentences, self.options)

    @property
    def score(self) -> Score:
        return self.completion.score

    @property
    def can_progress(self) -> bool:
        return self.completion.can_progress

    @property
    def placed_words(self) -> list[str]:
        return [
            blank.filled_word
            for sentence in self.sentences
            for blank in sentence.blanks
            if blank.filled_word is not None
        ]

    def sentence(self, sentence_id: str) -> SentenceState | None:
        for sentence in self.sentences:
            if sentence.id == sentence_id:
                return sentence
        return None

    def blank(self, ref: BlankRef) -> BlankSegment | None:
        sentence = self.sentence(ref.sentence_id)
        if sentence is None:
            return None
        return sentence.blank(ref.blank_index)

    # ------------------------------------------------------------------
    # User-input entry points
    # ------------------------------------------------------------------

    def begin_drag(self, word: str, source: BlankRef | None = None) -> bool:
        """Start dragging ``word``, replacing any previous drag."""
        self.drag = DragContext(dragged_word=word, source=source)
        logger.debug("Drag started: %r from %s", word, source or "pool")
        return True

    def end_drag(self) -> bool:
        if self.drag is None:
            return False
        self.drag = None
        return True

    def hover_blank(self, sentence_id: str, blank_index: int) -> bool:
        """Record the blank currently under the dragged word."""
        ref = BlankRef(sentence_id=sentence_id, blank_index=blank_index)
        if self.drag is None or self.blank(ref) is None:
            return False
        self.drag.hovered = ref
        return True

    def leave_blank(self) -> bool:
        if self.drag is None or self.drag.hovered is None:
            return False
        self.drag.hovered = None
        return True

    def drop_on_blank(self, sentence_id: str, blank_index: int) -> bool:
        """Drop the dragged word onto a blank.

        From the bank: the word leaves the bank; a word already in the
        target goes back to the bank.
        From another blank: the words swap places. With swapping disabled,
        or when the target was empty, the source blank is left empty and
        any displaced word goes back to the bank.

        The drag is consumed by a successful drop.
        """
        drag = self.drag
        if drag is None:
            logger.debug("Ignored drop on %s/%d: no active drag", sentence_id, blank_index)
            return False

        target_ref = BlankRef(sentence_id=sentence_id, blank_index=blank_index)
        target = self.blank(target_ref)
        if target is None:
            logger.debug("Ignored drop on unknown blank %s/%d", sentence_id, blank_index)
            return False

        word = drag.dragged_word
        if drag.from_pool:
            applied = self._place_from_pool(word, target)
        else:
            applied = self._move_between_blanks(word, drag.source, target_ref, target)

        if applied:
            self.drag = None
        return applied

    def drop_on_pool(self) -> bool:
        """Drop the dragged word back on the word bank.

        Only words dragged out of a blank can be dropped here; dropping a
        bank word on the bank does nothing.
        """
        drag = self.drag
        if drag is None or drag.source is None:
            return False
        source = self.blank(drag.source)
        if source is None or source.filled_word != drag.dragged_word:
            logger.debug("Ignored drop on pool: stale drag source %s", drag.source)
            return False

        applied = self._clear_blank(drag.source, source)
        if applied:
            self.drag = None
        return applied

    def remove_from_blank(self, sentence_id: str, blank_index: int) -> bool:
        """Empty a filled blank and return its word to the bank."""
        ref = BlankRef(sentence_id=sentence_id, blank_index=blank_index)
        blank = self.blank(ref)
        if blank is None or not blank.is_filled:
            logger.debug("Ignored remove on empty or unknown blank %s/%d", sentence_id, blank_index)
            return False
        return self._clear_blank(ref, blank)

    # ------------------------------------------------------------------
    # Convenience operations (one complete gesture each)
    # ------------------------------------------------------------------

    def place(self, word: str, sentence_id: str, blank_index: int) -> bool:
        """Drag ``word`` from the bank onto a blank."""
        self.begin_drag(word)
        try:
            return self.drop_on_blank(sentence_id, blank_index)
        finally:
            self.end_drag()

    def move(
        self,
        from_sentence_id: str,
        from_blank_index: int,
        to_sentence_id: str,
        to_blank_index: int,
    ) -> bool:
        """Drag the word in one blank onto another blank."""
        source_ref = BlankRef(sentence_id=from_sentence_id, blank_index=from_blank_index)
        source = self.blank(source_ref)
        if source is None or source.filled_word is None:
            return False
        self.begin_drag(source.filled_word, source_ref)
        try:
            return self.drop_on_blank(to_sentence_id, to_blank_index)
        finally:
            self.end_drag()

    def remove(self, sentence_id: str, blank_index: int) -> bool:
        return self.remove_from_blank(sentence_id, blank_index)

    def drop_to_pool(self, sentence_id: str, blank_index: int) -> bool:
        """Drag the word in a blank back to the bank."""
        source_ref = BlankRef(sentence_id=sentence_id, blank_index=blank_index)
        source = self.blank(source_ref)
        if source is None or source.filled_word is None:
            return False
        self.begin_drag(source.filled_word, source_ref)
        try:
            return self.drop_on_pool()
        finally:
            self.end_drag()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _place_from_pool(self, word: str, target: BlankSegment) -> bool:
        if not self.pool.take(word):
            logger.debug("Ignored placement of %r: not in the word bank", word)
            return False

        displaced = target.filled_word
        target.filled_word = word
        if displaced is not None:
            self.pool.give_back(displaced)

        logger.debug(
            "Placed %r (correct=%s), displaced %r", word, target.is_correct, displaced
        )
        return True

    def _move_between_blanks(
        self,
        word: str,
        source_ref: BlankRef,
        target_ref: BlankRef,
        target: BlankSegment,
    ) -> bool:
        if source_ref == target_ref:
            return False

        source = self.blank(source_ref)
        if source is None or source.filled_word != word:
            logger.debug("Ignored move of %r: stale drag source %s", word, source_ref)
            return False

        displaced = target.filled_word
        target.filled_word = word

        if displaced is not None and self.options.allow_swap:
            source.filled_word = displaced
        else:
            source.filled_word = None
            if displaced is not None:
                self.pool.give_back(displaced)

        logger.debug(
            "Moved %r from %s to %s, displaced %r", word, source_ref, target_ref, displaced
        )
        return True

    def _clear_blank(self, ref: BlankRef, blank: BlankSegment) -> bool:
        word = blank.filled_word
        if word is None:
            return False
        blank.filled_word = None
        self.pool.give_back(word)
        logger.debug("Returned %r from %s to the word bank", word, ref)
        return True
