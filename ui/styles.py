from rich.theme import Theme
from rich.console import Console
from rich.style import Style
from rich.text import Text

from exercises.projection import BlankVisual

SWEDISH_BLUE = "#006AA7"
SWEDISH_YELLOW = "#FECC00"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
WARNING_ORANGE = "#E67E22"
PREVIEW_PURPLE = "#8E44AD"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=SWEDISH_BLUE, bold=True),
        "secondary": Style(color=SWEDISH_YELLOW, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "warning": Style(color=WARNING_ORANGE),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "word": Style(color=TEXT_WHITE, bold=True),
        "title": Style(color=SWEDISH_BLUE, bold=True),
        "subtitle": Style(color=MUTED_GRAY),
    }
)

CONSOLE = Console(theme=DEFAULT_THEME)

BLANK_STYLES = {
    BlankVisual.EMPTY: Style(color=MUTED_GRAY),
    BlankVisual.HOVER_PREVIEW: Style(color=SWEDISH_YELLOW, bold=True, underline=True),
    BlankVisual.FILLED_PENDING: Style(color=INFO_BLUE, bold=True),
    BlankVisual.FILLED_CORRECT: Style(color=SUCCESS_GREEN, bold=True),
    BlankVisual.FILLED_INCORRECT: Style(color=ERROR_RED, bold=True),
}

BLANK_MARKS = {
    BlankVisual.FILLED_CORRECT: " ✓",
    BlankVisual.FILLED_INCORRECT: " ✗",
}


def get_blank_style(visual: BlankVisual) -> Style:
    """Get the style for a blank in the given visual state."""
    return BLANK_STYLES.get(visual, Style())


def get_issue_style(level: str) -> Style:
    """Get style for a validation issue level."""
    styles = {
        "error": Style(color=ERROR_RED, bold=True),
        "warning": Style(color=WARNING_ORANGE, bold=True),
        "info": Style(color=INFO_BLUE),
    }
    return styles.get(level.lower(), Style())


def create_success_header() -> Text:
    """Create the all-correct header."""
    header = Text()
    header.append("🎉 ", Style(color=SWEDISH_YELLOW))
    header.append("Perfekt! Alla rätt!", Style(color=SUCCESS_GREEN, bold=True))
    return header


def create_retry_header() -> Text:
    """Create the not-quite header."""
    header = Text()
    header.append("😅 ", Style(color=SWEDISH_YELLOW))
    header.append("Nästan där!", Style(color=WARNING_ORANGE, bold=True))
    return header
