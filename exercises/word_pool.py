"""Word bank construction and bookkeeping.

The pool is the ordered list of words currently available to drag. It is
shuffled once when the exercise is built and keeps that order afterwards;
words returned from blanks are appended at the end.
"""

import random
from typing import Iterable, Iterator

from exercises.template import BlankSegment, Segment


def build_word_pool(
    sentences: Iterable[list[Segment]],
    distractors: Iterable[str],
    rng: random.Random | None = None,
) -> list[str]:
    """Build the shuffled word bank for an exercise.

    Correct answers are collected from every blank of every sentence,
    deduplicated in first-seen order. Distractors are appended as given;
    they are not deduplicated against the answers here, that is left to
    config validation.

    Args:
        sentences: Parsed segment lists, one per sentence.
        distractors: Extra words with no correct slot.
        rng: Random source for the shuffle.

    Returns:
        Shuffled list of words.
    """
    correct_words: list[str] = []
    for segments in sentences:
        for segment in segments:
            if isinstance(segment, BlankSegment) and segment.expected_answer not in correct_words:
                correct_words.append(segment.expected_answer)

    words = correct_words + list(distractors)
    (rng or random).shuffle(words)
    return words


class WordPool:
    """Ordered multiset of the words not currently placed in a blank."""

    def __init__(self, words: Iterable[str] = ()):
        self._words = list(words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordPool({self._words!r})"

    @property
    def words(self) -> list[str]:
        """Snapshot of the pool in display order."""
        return list(self._words)

    def take(self, word: str) -> bool:
        """Remove one occurrence of ``word``. Returns False if absent."""
        try:
            self._words.remove(word)
        except ValueError:
            return False
        return True

    def give_back(self, word: str) -> None:
        """Return a word to the end of the pool."""
        self._words.append(word)
