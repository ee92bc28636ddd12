import argparse
import logging
import random
import signal
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from exercises.validation import has_errors, validate_lesson
from lesson_player import LessonPlayer
from models import Lesson
from storage import (
    DEFAULT_LESSON_DIR,
    LessonRepository,
    get_lesson_repo,
    get_sqlite_lesson_repo,
    load_lesson_file,
)
from ui import LessonUI

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Swedish Tutor")
    parser.add_argument(
        "--lessons",
        type=Path,
        default=DEFAULT_LESSON_DIR,
        help=f"Directory of JSON lesson files (default: {DEFAULT_LESSON_DIR})",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Read lessons from this SQLite database instead of --lessons",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log engine events at debug level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play a lesson")
    play_parser.add_argument("lesson", help="Lesson ID or path to a lesson JSON file")
    play_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the word bank shuffle",
    )

    validate_parser = subparsers.add_parser("validate", help="Check a lesson for problems")
    validate_parser.add_argument("lesson", help="Lesson ID or path to a lesson JSON file")

    subparsers.add_parser("list", help="List available lessons")

    import_parser = subparsers.add_parser(
        "import", help="Copy a lesson JSON file into the --db database"
    )
    import_parser.add_argument("path", type=Path, help="Lesson JSON file")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def get_repo(args) -> LessonRepository:
    if args.db is not None:
        return get_sqlite_lesson_repo(args.db)
    return get_lesson_repo(args.lessons)


def resolve_lesson(repo: LessonRepository, ref: str) -> Lesson | None:
    """Load a lesson by file path if ``ref`` names a file, else by ID.

    Raises:
        ValueError: If the lesson exists but is malformed.
    """
    path = Path(ref)
    if path.suffix == ".json" and path.exists():
        return load_lesson_file(path)
    return repo.get_by_id(ref)


def create_sigint_handler(ui: LessonUI):
    """Create a SIGINT handler that exits cleanly."""

    def sigint_handler(signum, frame):
        ui.show_quit_message()
        sys.exit(0)

    return sigint_handler


def run_play(args, ui: LessonUI) -> int:
    lesson = resolve_lesson(get_repo(args), args.lesson)
    if lesson is None:
        ui.show_error(f"Lesson not found: {args.lesson}")
        return 1

    signal.signal(signal.SIGINT, create_sigint_handler(ui))

    player = LessonPlayer(lesson, rng=random.Random(args.seed))
    ui.clear_screen()
    ui.show_instructions()
    ui.run(player)
    return 0


def run_validate(args, ui: LessonUI) -> int:
    lesson = resolve_lesson(get_repo(args), args.lesson)
    if lesson is None:
        ui.show_error(f"Lesson not found: {args.lesson}")
        return 1

    issues = validate_lesson(lesson)
    ui.show_validation(issues)
    return 1 if has_errors(issues) else 0


def run_list(args, ui: LessonUI) -> int:
    lessons = get_repo(args).get_all()
    ui.show_lesson_list(
        [(lesson.id, lesson.title, len(lesson.moments)) for lesson in lessons]
    )
    return 0


def run_import(args, ui: LessonUI) -> int:
    if args.db is None:
        ui.show_error("import needs --db")
        return 1
    lesson = load_lesson_file(args.path)
    get_sqlite_lesson_repo(args.db).save(lesson)
    ui.show_success(f"Imported {lesson.id} into {args.db}")
    return 0


COMMANDS = {
    "play": run_play,
    "validate": run_validate,
    "list": run_list,
    "import": run_import,
}


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    ui = LessonUI(console)
    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1

    try:
        return command(args, ui)
    except (ValueError, FileNotFoundError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        ui.show_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
