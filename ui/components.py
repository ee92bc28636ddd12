from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich.align import Align
from rich.console import Group
from rich import box
from typing import List, Optional

from exercises.projection import BlankView, ExerciseView, SentenceView
from exercises.validation import ValidationIssue
from models import BubbleItem
from ui.styles import (
    SWEDISH_BLUE,
    SWEDISH_YELLOW,
    SUCCESS_GREEN,
    ERROR_RED,
    WARNING_ORANGE,
    PREVIEW_PURPLE,
    MUTED_GRAY,
    TEXT_WHITE,
    BLANK_MARKS,
    create_retry_header,
    create_success_header,
    get_blank_style,
    get_issue_style,
)

EMPTY_BLANK_LABEL = "Dra hit ord"
DEFAULT_INSTRUCTION = "Dra rätt ord till luckan i meningen"
DEFAULT_TITLE = "Fyll i rätt ord"


def render_blank(blank: BlankView) -> Text:
    """Render one blank as ``[n: word]`` with its visual-state style."""
    label = f"{blank.blank_index + 1}:"
    style = get_blank_style(blank.visual)

    text = Text()
    text.append("[", style)
    text.append(label, Style(color=MUTED_GRAY))
    if blank.filled_word is not None:
        text.append(f" {blank.filled_word}", style)
        text.append(BLANK_MARKS.get(blank.visual, ""), style)
    elif blank.preview_word is not None:
        text.append(f" {blank.preview_word} ↓", Style(color=PREVIEW_PURPLE, italic=True))
    else:
        text.append(f" {EMPTY_BLANK_LABEL}", style)
    text.append("]", style)
    return text


class SentencePanel:
    """One numbered sentence with its blanks and per-sentence feedback."""

    def __init__(self, sentence: SentenceView):
        self.sentence = sentence

    def render(self) -> Panel:
        content = Text()
        for part in self.sentence.parts:
            if isinstance(part, BlankView):
                content.append(render_blank(part))
            else:
                content.append(part.content, Style(color=TEXT_WHITE))

        if self.sentence.feedback == "perfect":
            content.append("\n\n")
            content.append(
                "✓ Perfekt! Rätt ord i alla luckor!", Style(color=SUCCESS_GREEN, bold=True)
            )
            border = SUCCESS_GREEN
        elif self.sentence.feedback == "retry":
            content.append("\n\n")
            content.append(
                "✗ Inte helt rätt. Försök igen!", Style(color=WARNING_ORANGE, bold=True)
            )
            border = WARNING_ORANGE
        else:
            border = MUTED_GRAY

        return Panel(
            Align.left(content),
            title=str(self.sentence.number),
            title_align="left",
            border_style=border,
            box=box.ROUNDED,
            padding=(0, 1),
        )

    def __rich__(self) -> Panel:
        return self.render()


class WordBankPanel:
    """The word bank ("Ordbank") of words not yet placed."""

    def __init__(
        self,
        words: List[str],
        dragged_word: Optional[str] = None,
        all_done: bool = False,
    ):
        self.words = words
        self.dragged_word = dragged_word
        self.all_done = all_done

    def render(self) -> Panel:
        content = Text()
        if not self.words:
            message = "🎉 Alla ord använda!" if self.all_done else "Inga ord kvar..."
            content.append(message, Style(color=MUTED_GRAY, italic=True))
        for i, word in enumerate(self.words):
            if i:
                content.append("   ")
            style = (
                Style(color=MUTED_GRAY, dim=True)
                if word == self.dragged_word
                else Style(color=TEXT_WHITE, bold=True)
            )
            content.append(f" {word} ", style)

        return Panel(
            Align.center(content),
            title="📚 Ordbank",
            border_style=PREVIEW_PURPLE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ResultPanel:
    """Score summary shown once feedback is visible and every blank is filled."""

    def __init__(self, correct: int, total: int, can_progress: bool):
        self.correct = correct
        self.total = total
        self.can_progress = can_progress

    def render(self) -> Panel:
        content = Text()
        if self.can_progress:
            content.append(create_success_header())
            content.append("\n\n")
            content.append(
                f"Du fick {self.correct} av {self.total} rätt!\n", Style(color=TEXT_WHITE)
            )
            content.append("⭐ Du kan gå vidare! ⭐", Style(color=SUCCESS_GREEN, bold=True))
            border = SUCCESS_GREEN
        else:
            content.append(create_retry_header())
            content.append("\n\n")
            content.append(
                f"Du fick {self.correct} av {self.total} rätt.\n", Style(color=TEXT_WHITE)
            )
            content.append(
                "❌ Du måste ha alla rätt för att gå vidare!", Style(color=ERROR_RED)
            )
            border = WARNING_ORANGE

        return Panel(
            Align.center(content),
            title="Resultat",
            border_style=border,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ExerciseScreen:
    """Full fill-sentence exercise: header, word bank, sentences, result."""

    def __init__(
        self,
        view: ExerciseView,
        title: str = "",
        moment_number: int = 0,
        total_moments: int = 0,
    ):
        self.view = view
        self.title = title or DEFAULT_TITLE
        self.moment_number = moment_number
        self.total_moments = total_moments

    def render(self) -> Panel:
        if not self.view.configured:
            return NotConfiguredPanel().render()

        header = Text()
        if self.total_moments > 0:
            header.append(
                f"Moment {self.moment_number}/{self.total_moments}\n", Style(color=MUTED_GRAY)
            )
        header.append(self.view.instruction or DEFAULT_INSTRUCTION, Style(color=TEXT_WHITE))

        all_complete = all(
            part.filled_word is not None
            for sentence in self.view.sentences
            for part in sentence.parts
            if isinstance(part, BlankView)
        )

        parts = [
            header,
            WordBankPanel(
                self.view.word_bank,
                dragged_word=self.view.dragged_word,
                all_done=self.view.can_progress,
            ).render(),
        ]
        parts.extend(SentencePanel(s).render() for s in self.view.sentences)
        if self.view.show_feedback and all_complete:
            parts.append(
                ResultPanel(
                    self.view.score.correct,
                    self.view.score.total,
                    self.view.can_progress,
                ).render()
            )

        return Panel(
            Group(*parts),
            title=self.title,
            subtitle="p ORD S L · m S L S L · b S L · r S L · o · h · n · q",
            border_style=SWEDISH_BLUE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class NotConfiguredPanel:
    """Placeholder for an exercise without sentences."""

    def render(self) -> Panel:
        content = Text()
        content.append("📝\n\n", Style(color=MUTED_GRAY))
        content.append("Ingen övning konfigurerad ännu", Style(color=MUTED_GRAY))
        return Panel(
            Align.center(content),
            border_style=MUTED_GRAY,
            box=box.ROUNDED,
            padding=(2, 3),
        )

    def __rich__(self) -> Panel:
        return self.render()


class TextBoxPanel:
    """A text-box moment."""

    def __init__(self, title: str, text: str, button_text: str = "Nästa"):
        self.title = title
        self.text = text
        self.button_text = button_text

    def render(self) -> Panel:
        content = Text(self.text, Style(color=TEXT_WHITE))
        return Panel(
            Align.left(content),
            title=self.title,
            subtitle=f"n = {self.button_text}",
            border_style=SWEDISH_BLUE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class SpeechBubblePanel:
    """A speech-bubble moment: the guide's lines in order."""

    def __init__(self, title: str, items: List[BubbleItem]):
        self.title = title
        self.items = items

    def render(self) -> Panel:
        content = Text()
        for i, item in enumerate(self.items):
            if i:
                content.append("\n")
            content.append("💬 ", Style(color=SWEDISH_YELLOW))
            content.append(item.content, Style(color=TEXT_WHITE))
        return Panel(
            Align.left(content),
            title=self.title,
            subtitle="n = Nästa",
            border_style=SWEDISH_YELLOW,
            box=box.ROUNDED,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class IssueTable:
    """Lesson validation issues, one row per issue."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues

    def render(self) -> Panel:
        if not self.issues:
            return Panel(
                Text("✓ No problems found", Style(color=SUCCESS_GREEN, bold=True)),
                title="Validation",
                border_style=SUCCESS_GREEN,
                box=box.HEAVY,
            )

        table = Table(
            show_header=True,
            header_style=Style(color=SWEDISH_BLUE, bold=True),
            border_style=MUTED_GRAY,
            box=box.HEAVY,
        )
        table.add_column("Level")
        table.add_column("Moment", style=Style(color=MUTED_GRAY))
        table.add_column("Message", style=Style(color=TEXT_WHITE))

        for issue in self.issues:
            table.add_row(
                Text(issue.level.value, style=get_issue_style(issue.level.value)),
                issue.moment or "",
                issue.message,
            )

        has_error = any(issue.level.value == "error" for issue in self.issues)
        return Panel(
            Align.center(table),
            title="Validation",
            border_style=ERROR_RED if has_error else SWEDISH_YELLOW,
            box=box.HEAVY,
            padding=(1, 1),
        )

    def __rich__(self) -> Panel:
        return self.render()
