"""Authoring checks for lessons.

Structural validity is enforced by the pydantic models when a lesson is
loaded. These checks cover what a well-formed lesson can still get wrong
pedagogically: missing content, exercises with nothing to fill in, and
lessons with too little variety.
"""

from enum import Enum

from pydantic import BaseModel

from exercises.template import blank_segments, parse_template
from models import (
    FillSentenceMoment,
    Lesson,
    MomentType,
    SpeechBubbleMoment,
    TextBoxMoment,
)

MIN_MOMENTS = 3
INTRO_MOMENT_TYPES = {MomentType.TEXT_BOX, MomentType.SPEECH_BUBBLE}


class IssueLevel(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationIssue(BaseModel):
    level: IssueLevel
    message: str
    moment: str | None = None  # Display name, e.g. "Moment 2: Fyll i"


def _moment_name(index: int, title: str) -> str:
    return f"Moment {index + 1}: {title}"


def _check_fill_sentence(moment: FillSentenceMoment, name: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    config = moment.config

    if not config.sentences:
        issues.append(
            ValidationIssue(
                level=IssueLevel.ERROR,
                moment=name,
                message="No sentences to fill in",
            )
        )
        return issues

    for number, sentence in enumerate(config.sentences, 1):
        blanks = blank_segments(parse_template(sentence.raw_text))
        if not blanks:
            issues.append(
                ValidationIssue(
                    level=IssueLevel.ERROR,
                    moment=name,
                    message=f"Sentence {number} has no [blank] to fill in",
                )
            )

    if not config.distractors:
        issues.append(
            ValidationIssue(
                level=IssueLevel.WARNING,
                moment=name,
                message="No distractors - every word in the bank fits somewhere",
            )
        )

    return issues


def validate_lesson(lesson: Lesson) -> list[ValidationIssue]:
    """Check a lesson for authoring problems.

    Args:
        lesson: The lesson to check.

    Returns:
        Issues ordered as: lesson-level checks, per-moment checks, then
        progression and variety hints.
    """
    issues: list[ValidationIssue] = []

    if not lesson.title.strip():
        issues.append(ValidationIssue(level=IssueLevel.ERROR, message="Lesson has no title"))

    if not lesson.word_class:
        issues.append(
            ValidationIssue(level=IssueLevel.ERROR, message="No word class chosen for the lesson")
        )

    if not lesson.moments:
        issues.append(ValidationIssue(level=IssueLevel.ERROR, message="Lesson has no moments"))

    if len(lesson.moments) < MIN_MOMENTS:
        issues.append(
            ValidationIssue(
                level=IssueLevel.WARNING,
                message="Lesson is short - consider adding more moments",
            )
        )

    for index, moment in enumerate(lesson.moments):
        name = _moment_name(index, moment.title)

        if isinstance(moment, TextBoxMoment):
            if not moment.config.text.strip():
                issues.append(
                    ValidationIssue(
                        level=IssueLevel.ERROR, moment=name, message="Text box has no content"
                    )
                )
        elif isinstance(moment, SpeechBubbleMoment):
            if not any(item.content.strip() for item in moment.config.items):
                issues.append(
                    ValidationIssue(
                        level=IssueLevel.ERROR,
                        moment=name,
                        message="Speech bubble has nothing to say",
                    )
                )
        elif isinstance(moment, FillSentenceMoment):
            issues.extend(_check_fill_sentence(moment, name))

    if lesson.moments and lesson.moments[0].type not in INTRO_MOMENT_TYPES:
        issues.append(
            ValidationIssue(
                level=IssueLevel.INFO,
                message="Consider starting with an introduction (text box or speech bubble)",
            )
        )

    moment_types = {moment.type for moment in lesson.moments}
    if len(moment_types) < min(3, len(lesson.moments)):
        issues.append(
            ValidationIssue(
                level=IssueLevel.INFO,
                message="More variety in moment types would make the lesson more engaging",
            )
        )

    return issues


def has_errors(issues: list[ValidationIssue]) -> bool:
    return any(issue.level == IssueLevel.ERROR for issue in issues)
