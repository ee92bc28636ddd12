"""Sentence template parsing.

A template is plain text with blanks written in square brackets::

    "Den [stora] hunden sprang"

Parsing turns it into an ordered list of segments. Blank identity inside a
sentence is positional: the Nth blank segment from the left is blank index N.
"""

import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

BLANK_PATTERN = re.compile(r"\[([^\]]+)\]")


class TextSegment(BaseModel):
    """Literal text between blanks."""

    kind: Literal["text"] = "text"
    content: str


class BlankSegment(BaseModel):
    """A slot the student fills with a word from the word bank."""

    kind: Literal["blank"] = "blank"
    expected_answer: str
    filled_word: str | None = None

    @property
    def is_filled(self) -> bool:
        return self.filled_word is not None

    @property
    def is_correct(self) -> bool | None:
        """Exact, case-sensitive match; None while the blank is empty."""
        if self.filled_word is None:
            return None
        return self.filled_word == self.expected_answer


Segment = Annotated[Union[TextSegment, BlankSegment], Field(discriminator="kind")]


def parse_template(raw_text: str) -> list[Segment]:
    """Split a sentence template into text and blank segments.

    Empty text runs are omitted. Text without any bracket pair becomes a
    single text segment; an unterminated ``[`` is kept as literal text.

    Args:
        raw_text: Sentence with ``[answer]`` markers.

    Returns:
        Segments in order of appearance.
    """
    segments: list[Segment] = []
    last_index = 0

    for match in BLANK_PATTERN.finditer(raw_text):
        if match.start() > last_index:
            segments.append(TextSegment(content=raw_text[last_index : match.start()]))
        segments.append(BlankSegment(expected_answer=match.group(1).strip()))
        last_index = match.end()

    if last_index < len(raw_text):
        segments.append(TextSegment(content=raw_text[last_index:]))

    return segments


def blank_segments(segments: list[Segment]) -> list[BlankSegment]:
    """Return the blanks of a parsed sentence, indexed by blank index."""
    return [s for s in segments if isinstance(s, BlankSegment)]


def expected_answers(segments: list[Segment]) -> list[str]:
    """Return the expected answer of every blank, in blank order."""
    return [blank.expected_answer for blank in blank_segments(segments)]


class SentenceState(BaseModel):
    """A parsed sentence together with the current contents of its blanks.

    Completion predicates are computed from the segments on every access
    and are never stored.
    """

    id: str
    segments: list[Segment] = Field(default_factory=list)

    @property
    def blanks(self) -> list[BlankSegment]:
        return blank_segments(self.segments)

    def blank(self, blank_index: int) -> BlankSegment | None:
        """Return the blank at ``blank_index`` or None if out of range."""
        blanks = self.blanks
        if 0 <= blank_index < len(blanks):
            return blanks[blank_index]
        return None

    @property
    def is_complete(self) -> bool:
        return all(blank.is_filled for blank in self.blanks)

    @property
    def is_all_correct(self) -> bool:
        return all(blank.is_correct is True for blank in self.blanks)


def parse_sentence(sentence_id: str, raw_text: str) -> SentenceState:
    """Parse a template into a fresh sentence with every blank empty."""
    return SentenceState(id=sentence_id, segments=parse_template(raw_text))
