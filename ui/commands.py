"""Typed commands that stand in for drag-and-drop in the terminal.

Sentence and blank numbers are 1-based as shown on screen; Command stores
them 0-based for blanks, ready for the engine.
"""

from enum import Enum

from pydantic import BaseModel


class Action(str, Enum):
    PLACE = "p"
    MOVE = "m"
    BACK = "b"
    REMOVE = "r"
    RESTART = "o"
    HELP = "h"
    NEXT = "n"
    QUIT = "q"


class Command(BaseModel):
    action: Action
    word: str | None = None
    sentence: int | None = None  # 1-based sentence number
    blank: int | None = None  # 0-based blank index
    to_sentence: int | None = None
    to_blank: int | None = None


def _positive_ints(values: list[str]) -> list[int] | None:
    try:
        numbers = [int(v) for v in values]
    except ValueError:
        return None
    if any(n < 1 for n in numbers):
        return None
    return numbers


def parse_command(user_input: str) -> Command | None:
    """Parse one line of input.

    Examples:
        "p stora 1 1"  -> place "stora" in sentence 1, blank 1
        "m 1 1 2 1"    -> move/swap sentence 1 blank 1 with sentence 2 blank 1
        "b 1 1"        -> drag sentence 1 blank 1 back to the word bank
        "r 1 1"        -> remove the word in sentence 1 blank 1
        "o"            -> start the current exercise over

    Returns:
        The command, or None if the input is not understood.
    """
    tokens = user_input.strip().split()
    if not tokens:
        return None

    try:
        action = Action(tokens[0].lower())
    except ValueError:
        return None
    args = tokens[1:]

    if action in (Action.RESTART, Action.HELP, Action.NEXT, Action.QUIT):
        return Command(action=action) if not args else None

    if action == Action.PLACE:
        # The word itself may contain spaces: everything before the numbers
        if len(args) < 3:
            return None
        numbers = _positive_ints(args[-2:])
        if numbers is None:
            return None
        return Command(
            action=action,
            word=" ".join(args[:-2]),
            sentence=numbers[0],
            blank=numbers[1] - 1,
        )

    if action == Action.MOVE:
        numbers = _positive_ints(args) if len(args) == 4 else None
        if numbers is None:
            return None
        return Command(
            action=action,
            sentence=numbers[0],
            blank=numbers[1] - 1,
            to_sentence=numbers[2],
            to_blank=numbers[3] - 1,
        )

    # BACK and REMOVE
    numbers = _positive_ints(args) if len(args) == 2 else None
    if numbers is None:
        return None
    return Command(action=action, sentence=numbers[0], blank=numbers[1] - 1)
