"""
Player actions and command parsing.

Turns a typed command line into a tagged action and applies it to a
board. Coordinates are typed 1-based as "x y" (column, row).
"""
from dataclasses import dataclass
from enum import Enum, auto

from .board import Board


# ============================================================================
# Constants
# ============================================================================

class ActionKind(Enum):
    """What an action does to its target cell."""

    REVEAL = auto()
    FLAG = auto()
    CHORD = auto()


PREFIXES = {
    "f": ActionKind.FLAG,
    "c": ActionKind.CHORD,
}


class CommandError(ValueError):
    """A command line could not be turned into an action."""


@dataclass(frozen=True)
class Action:
    """A single player action on a 0-based board position."""

    kind: ActionKind
    x: int
    y: int


# ============================================================================
# Parsing
# ============================================================================

def _to_index(value: int) -> int:
    # Lenient: "0" lands on the same cell as "1".
    return max(value - 1, 0)


def parse_command(line: str) -> Action:
    """
    Parse a command such as "3 4", "f 3 4" or "c 3 4".

    Args:
        line: Raw input line.

    Returns:
        Action with 0-based coordinates.

    Raises:
        CommandError: If the line does not hold exactly two integers
            after the optional prefix.
    """
    tokens = line.split()
    kind = ActionKind.REVEAL
    if tokens and tokens[0].lower() in PREFIXES:
        kind = PREFIXES[tokens.pop(0).lower()]

    if len(tokens) != 2:
        raise CommandError(f"Wrong input count ({len(tokens)})")

    coords = []
    for token in tokens:
        try:
            coords.append(int(token))
        except ValueError:
            continue
    if len(coords) != 2:
        raise CommandError(f"Wrong coords count ({len(coords)})")

    x, y = coords
    return Action(kind, _to_index(x), _to_index(y))


def apply_action(board: Board, action: Action) -> int:
    """
    Run an action against a board.

    Returns:
        Number of cells newly revealed (0 for flags).

    Raises:
        OutOfBoundsError: If the action targets a position off the board.
        MineOpenedError: If the action opened a mine.
    """
    if action.kind == ActionKind.FLAG:
        board.toggle_flag(action.x, action.y)
        return 0
    if action.kind == ActionKind.CHORD:
        return board.chord(action.x, action.y)
    return board.reveal(action.x, action.y)
