"""Configuration for fill-sentence exercises.

These models describe one exercise instance as authored in a lesson:
the sentence templates, the extra distractor words for the word bank,
and the small set of switches that select between the behaviour variants
of the exercise (swap on/off, progression gated on correctness or only on
completion).
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from exercises.template import expected_answers, parse_template


class EngineOptions(BaseModel):
    """Behaviour switches for the fill-sentence engine."""

    allow_swap: bool = True
    gate_on_all_correct: bool = True


class SentenceConfig(BaseModel):
    """A sentence template with blanks written as ``[answer]``.

    Examples:
        - id="s1", raw_text="Den [stora] hunden sprang"
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    raw_text: str = Field(
        default="",
        validation_alias=AliasChoices("raw_text", "rawText", "text"),
    )

    def answers(self) -> list[str]:
        """Return the trimmed bracket contents in order of appearance."""
        return expected_answers(parse_template(self.raw_text))


class FillSentenceConfig(BaseModel):
    """Configuration for one fill-sentence exercise.

    An empty ``sentences`` list is allowed: it is the "not configured yet"
    state of an exercise that a lesson author has created but not filled in.
    """

    model_config = ConfigDict(populate_by_name=True)

    sentences: list[SentenceConfig] = Field(default_factory=list)
    distractors: list[str] = Field(default_factory=list)
    show_immediate_feedback: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "show_immediate_feedback", "showImmediateFeedback"
        ),
    )
    instruction: str = ""
    options: EngineOptions = Field(default_factory=EngineOptions)

    @model_validator(mode="after")
    def _check_sentences_and_distractors(self) -> "FillSentenceConfig":
        seen_ids: set[str] = set()
        for sentence in self.sentences:
            if sentence.id in seen_ids:
                raise ValueError(f"Duplicate sentence id: {sentence.id}")
            seen_ids.add(sentence.id)
            if any(not answer for answer in sentence.answers()):
                raise ValueError(f"Sentence {sentence.id} has an empty [ ] blank")

        answers = {answer for s in self.sentences for answer in s.answers()}
        distractors: list[str] = []
        for word in self.distractors:
            if not word.strip():
                raise ValueError("Distractor words cannot be blank")
            if word in answers:
                raise ValueError(
                    f"Distractor {word!r} is also a correct answer; "
                    "it would be indistinguishable in the word bank"
                )
            if word not in distractors:
                distractors.append(word)
        self.distractors = distractors
        return self

    @property
    def is_configured(self) -> bool:
        return len(self.sentences) > 0
