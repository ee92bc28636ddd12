from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from ui.components import (
    ExerciseScreen,
    IssueTable,
    SpeechBubblePanel,
    TextBoxPanel,
)
from ui.commands import Action, Command, parse_command
from ui.styles import (
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    CONSOLE,
)
from typing import List, Optional

from exercises.fill_sentence import BlankRef, FillSentenceEngine
from exercises.projection import project_exercise
from exercises.validation import ValidationIssue
from lesson_player import SHOW_INSTRUCTIONS, LessonPlayer
from models import FillSentenceMoment, SpeechBubbleMoment, TextBoxMoment

INSTRUCTIONS = (
    "💡 Dra ord från ordbanken till luckorna i meningarna\n"
    "   p ORD S L      lägg ORD i mening S, lucka L\n"
    "🔄 Dra ett ord till en fylld ruta för att byta plats på orden\n"
    "   m S L S2 L2    flytta/byt ordet i (S,L) till (S2,L2)\n"
    "↔️  Dra tillbaka till ordbanken för att ta bort ett ord från en ruta\n"
    "   b S L          tillbaka till ordbanken\n"
    "   r S L          ta bort ordet\n"
    "   o              börja om övningen\n"
    "   h              visa instruktionerna igen\n"
    "   n              fortsätt\n"
    "   q              avsluta"
)


def apply_command(engine: FillSentenceEngine, command: Command) -> bool:
    """Replay a typed command on the engine as the equivalent drag gesture.

    Returns:
        True if the engine state changed.
    """
    if command.sentence is None or command.blank is None:
        return False
    if not 1 <= command.sentence <= len(engine.sentences):
        return False
    sentence_id = engine.sentences[command.sentence - 1].id

    if command.action == Action.REMOVE:
        return engine.remove_from_blank(sentence_id, command.blank)

    if command.action == Action.PLACE:
        engine.begin_drag(command.word or "")
        try:
            return engine.drop_on_blank(sentence_id, command.blank)
        finally:
            engine.end_drag()

    source_ref = BlankRef(sentence_id=sentence_id, blank_index=command.blank)
    source = engine.blank(source_ref)
    if source is None or source.filled_word is None:
        return False

    engine.begin_drag(source.filled_word, source_ref)
    try:
        if command.action == Action.BACK:
            return engine.drop_on_pool()
        if command.action == Action.MOVE:
            if command.to_sentence is None or command.to_blank is None:
                return False
            if not 1 <= command.to_sentence <= len(engine.sentences):
                return False
            target_id = engine.sentences[command.to_sentence - 1].id
            engine.hover_blank(target_id, command.to_blank)
            return engine.drop_on_blank(target_id, command.to_blank)
        return False
    finally:
        engine.end_drag()


class LessonUI:
    """Main UI orchestrator for playing a lesson in the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or CONSOLE

    def show_moment(self, player: LessonPlayer) -> None:
        """Render the player's current moment."""
        moment = player.current
        if moment is None:
            return
        number, total = player.position

        if isinstance(moment, TextBoxMoment):
            self.console.print(
                TextBoxPanel(moment.title, moment.config.text, moment.config.button_text)
            )
        elif isinstance(moment, SpeechBubbleMoment):
            self.console.print(
                SpeechBubblePanel(moment.title, moment.config.ordered_items())
            )
        elif isinstance(moment, FillSentenceMoment) and player.engine is not None:
            self.console.print(
                ExerciseScreen(
                    project_exercise(player.engine),
                    title=moment.title,
                    moment_number=number,
                    total_moments=total,
                )
            )
        self.console.print()

    def show_instructions(self) -> None:
        self.console.print(
            Panel(Text(INSTRUCTIONS, style=MUTED_GRAY), title="Tips", border_style=INFO_BLUE)
        )

    def handle_input(self, player: LessonPlayer, user_input: str) -> Optional[Action]:
        """Handle one line of input for the current moment.

        Returns:
            The action taken, or None if the input was rejected.
        """
        command = parse_command(user_input)
        if command is None:
            self.show_error("Okänt kommando. Skriv 'h' för hjälp.")
            return None

        if command.action == Action.QUIT:
            return Action.QUIT
        if command.action == Action.HELP:
            player.show_guide(SHOW_INSTRUCTIONS)
            return Action.HELP
        if command.action == Action.NEXT:
            if player.advance():
                return Action.NEXT
            self.show_error("Du måste ha alla rätt för att gå vidare!")
            return None

        if player.engine is None:
            self.show_error("Det finns inga ord att flytta här.")
            return None
        if command.action == Action.RESTART:
            player.restart_moment()
            return Action.RESTART
        if not apply_command(player.engine, command):
            self.show_error("Det gick inte. Kontrollera ordet och luckan.")
            return None
        return command.action

    def run(self, player: LessonPlayer) -> bool:
        """Play the lesson until it is finished or the student quits.

        Returns:
            True if the lesson was completed.
        """
        player.hooks.register(SHOW_INSTRUCTIONS, self.show_instructions)
        try:
            while not player.finished:
                self.show_moment(player)
                user_input = self.console.input(
                    Text("Ditt drag: ", style=f"bold {MUTED_GRAY}")
                )
                if self.handle_input(player, user_input) == Action.QUIT:
                    self.show_quit_message()
                    return False
        finally:
            player.hooks.unregister(SHOW_INSTRUCTIONS)

        self.show_lesson_complete(player.lesson.title)
        return True

    def show_validation(self, issues: List[ValidationIssue]) -> None:
        """Display lesson validation issues."""
        self.console.print(IssueTable(issues))

    def show_lesson_list(self, rows: List[tuple[str, str, int]]) -> None:
        """Display (id, title, moment count) rows."""
        if not rows:
            self.show_info("No lessons found.")
            return
        for lesson_id, title, moment_count in rows:
            self.console.print(
                Text(f"{lesson_id:<20} {title} ({moment_count} moment)", style=INFO_BLUE)
            )

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style=ERROR_RED),
                title="Error",
                border_style=ERROR_RED,
            )
        )

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=INFO_BLUE))

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(Text(message, style=SUCCESS_GREEN))

    def show_lesson_complete(self, title: str) -> None:
        self.console.print(
            Panel(
                Text(f"🎉 Bra jobbat! Du har klarat {title}!", style=SUCCESS_GREEN),
                title="Klart",
                border_style=SUCCESS_GREEN,
            )
        )

    def show_quit_message(self) -> None:
        """Display the quit message."""
        self.console.print()
        self.console.print(Text("👋 Hej då!", style=MUTED_GRAY))

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()
