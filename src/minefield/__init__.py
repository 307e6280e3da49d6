"""
Minefield game module.

Provides the core rules engine: mine placement, the board with cascade
reveal, flagging and chording, plus text rendering, command parsing and
a gymnasium environment for automated agents.
"""
from .cell import Cell, CellContent, CellState
from .errors import (
    EmptyFieldError,
    FieldTooSmallError,
    GenerationError,
    MinefieldError,
    MineOpenedError,
    OutOfBoundsError,
    TooManyMinesError,
)
from .generator import generate_placement, placement_to_contents, validate_dimensions
from .board import (
    Board,
    BoardConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    count_adjacent_mines,
)
from .actions import Action, ActionKind, CommandError, apply_action, parse_command
from .render import cell_symbol, render_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellContent",
    "CellState",
    "MinefieldError",
    "OutOfBoundsError",
    "MineOpenedError",
    "EmptyFieldError",
    "GenerationError",
    "TooManyMinesError",
    "FieldTooSmallError",
    "generate_placement",
    "placement_to_contents",
    "validate_dimensions",
    "Board",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "count_adjacent_mines",
    "Action",
    "ActionKind",
    "CommandError",
    "apply_action",
    "parse_command",
    "cell_symbol",
    "render_board",
    "MinesweeperEnv",
]
