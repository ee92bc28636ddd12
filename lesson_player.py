"""
Lesson player: steps a student through the moments of a lesson.

Text boxes and speech bubbles can always be continued. A fill-sentence
moment owns a FillSentenceEngine that is rebuilt every time the moment is
entered, and the player only lets the student continue once the engine
reports ``can_progress``.
"""

import logging
import random
from typing import Callable

from exercises.config import FillSentenceConfig
from exercises.fill_sentence import FillSentenceEngine
from models import FillSentenceMoment, Lesson, Moment

logger = logging.getLogger(__name__)

SHOW_INSTRUCTIONS = "show-instructions"


class GuideHooks:
    """Named callbacks for "show this guide again" style triggers.

    Components register the guide they can re-open; anything holding a
    reference to the same GuideHooks can trigger it by name.
    """

    def __init__(self):
        self._callbacks: dict[str, Callable[[], None]] = {}

    def register(self, name: str, callback: Callable[[], None]) -> None:
        self._callbacks[name] = callback

    def unregister(self, name: str) -> None:
        self._callbacks.pop(name, None)

    def is_registered(self, name: str) -> bool:
        return name in self._callbacks

    def trigger(self, name: str) -> bool:
        """Run the callback registered under ``name``. False if none."""
        callback = self._callbacks.get(name)
        if callback is None:
            return False
        callback()
        return True


class LessonPlayer:
    """Tracks the current moment and gates progression through a lesson."""

    def __init__(
        self,
        lesson: Lesson,
        on_next: Callable[[Moment], None] | None = None,
        on_complete: Callable[[Lesson], None] | None = None,
        hooks: GuideHooks | None = None,
        rng: random.Random | None = None,
    ):
        self.lesson = lesson
        self.on_next = on_next
        self.on_complete = on_complete
        self.hooks = hooks or GuideHooks()
        self.rng = rng or random.Random()
        self.index = 0
        self.finished = False
        self.engine: FillSentenceEngine | None = None
        self._enter_moment()

    @property
    def current(self) -> Moment | None:
        if self.finished or self.index >= len(self.lesson.moments):
            return None
        return self.lesson.moments[self.index]

    @property
    def position(self) -> tuple[int, int]:
        """1-based position of the current moment and the moment count."""
        return self.index + 1, len(self.lesson.moments)

    def _enter_moment(self) -> None:
        moment = self.current
        if moment is None:
            self.engine = None
            return

        if isinstance(moment, FillSentenceMoment):
            self.engine = self._engine_for(moment.config)
        else:
            self.engine = None
        logger.info(
            "Entered moment %d/%d (%s): %s",
            self.index + 1,
            len(self.lesson.moments),
            moment.type.value,
            moment.title,
        )

    def _engine_for(self, config: FillSentenceConfig) -> FillSentenceEngine:
        # Always a fresh instance: re-entering a moment starts it over
        return FillSentenceEngine(config, rng=self.rng)

    def can_advance(self) -> bool:
        """Whether the "continue" control should be offered."""
        moment = self.current
        if moment is None:
            return False
        if isinstance(moment, FillSentenceMoment):
            return self.engine is not None and self.engine.can_progress
        return True

    def advance(self) -> bool:
        """Move to the next moment if the current one allows it.

        Calls ``on_next`` with the moment being left, and ``on_complete``
        once the last moment has been left.

        Returns:
            True if the player moved on.
        """
        if not self.can_advance():
            logger.debug("Advance refused at moment %d", self.index + 1)
            return False

        left = self.lesson.moments[self.index]
        if self.on_next is not None:
            self.on_next(left)

        self.index += 1
        if self.index >= len(self.lesson.moments):
            self.finished = True
            self.engine = None
            logger.info("Lesson %s finished", self.lesson.id)
            if self.on_complete is not None:
                self.on_complete(self.lesson)
            return True

        self._enter_moment()
        return True

    def restart_moment(self) -> None:
        """Discard all progress on the current moment."""
        self._enter_moment()

    def show_guide(self, name: str = SHOW_INSTRUCTIONS) -> bool:
        return self.hooks.trigger(name)
