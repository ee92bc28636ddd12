"""Swedish Tutor UI Module - terminal interface for playing lessons."""

from ui.app import LessonUI, apply_command
from ui.commands import Action, Command, parse_command
from ui.components import (
    ExerciseScreen,
    IssueTable,
    NotConfiguredPanel,
    ResultPanel,
    SentencePanel,
    SpeechBubblePanel,
    TextBoxPanel,
    WordBankPanel,
)
from ui.styles import (
    SWEDISH_BLUE,
    SWEDISH_YELLOW,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "LessonUI",
    "apply_command",
    "Action",
    "Command",
    "parse_command",
    "ExerciseScreen",
    "IssueTable",
    "NotConfiguredPanel",
    "ResultPanel",
    "SentencePanel",
    "SpeechBubblePanel",
    "TextBoxPanel",
    "WordBankPanel",
    "SWEDISH_BLUE",
    "SWEDISH_YELLOW",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
