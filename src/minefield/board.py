"""
Board module for the minefield engine.

Implements the board with precomputed adjacency counts, cell revealing
with cascade, flagging, chording and win/loss checks.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellContent
from .errors import EmptyFieldError, MineOpenedError, OutOfBoundsError
from .generator import (
    CELLS_PER_MINE,
    Placement,
    generate_placement,
    placement_to_contents,
    validate_dimensions,
)


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns (x extent).
        height: Number of rows (y extent).
        num_mines: Total mines to place. Defaults to one per ten cells.
    """

    width: int = 9
    height: int = 9
    num_mines: Optional[int] = None

    def __post_init__(self) -> None:
        """Fill in the default mine count and validate."""
        if self.num_mines is None:
            self.num_mines = self.width * self.height // CELLS_PER_MINE
        self._validate()

    def _validate(self) -> None:
        """Apply the generator's checks so bad configs fail early."""
        validate_dimensions(self.width, self.height, self.num_mines)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9)
INTERMEDIATE = BoardConfig(16, 16)
EXPERT = BoardConfig(30, 16)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Adjacency Counts
# ============================================================================

def count_adjacent_mines(cells: Sequence[Sequence[Cell]]) -> np.ndarray:
    """
    Count mines among the up-to-8 neighbors of every cell.

    Mine cells get a count too; the cell itself is never included.

    Args:
        cells: Column-major grid, cells[x][y].

    Returns:
        uint8 array of shape (width, height) indexed [x, y].

    Raises:
        EmptyFieldError: If the grid has no cells or ragged columns.
    """
    if not cells or not cells[0]:
        raise EmptyFieldError("Cannot count neighbors on an empty field")
    height = len(cells[0])
    if any(len(column) != height for column in cells):
        raise EmptyFieldError("Field columns have differing heights")

    mines = np.array(
        [[cell.is_mine for cell in column] for column in cells],
        dtype=np.uint8,
    )
    width = mines.shape[0]
    # Zero border so edge and corner cells see fewer neighbors.
    padded = np.pad(mines, 1)
    counts = np.zeros_like(mines)
    for delta_x in (-1, 0, 1):
        for delta_y in (-1, 0, 1):
            if delta_x == 0 and delta_y == 0:
                continue
            counts += padded[
                1 + delta_x:1 + delta_x + width,
                1 + delta_y:1 + delta_y + height,
            ]
    return counts


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper board.

    Owns the column-major grid of cells (indexed [x][y]) and the adjacency
    counts computed once at construction. Mine positions never change, so
    the counts are never recomputed.
    """

    def __init__(self, cells: List[List[Cell]]) -> None:
        self._counts = count_adjacent_mines(cells)
        self._counts.flags.writeable = False
        self._cells = cells
        self._exploded: Optional[Position] = None

    # ========================================================================
    # Construction (High-level)
    # ========================================================================

    @classmethod
    def with_cells(
        cls, contents: Iterable[Iterable[CellContent]]
    ) -> "Board":
        """
        Build a concealed board from a content grid.

        Args:
            contents: Column-major grid, contents[x][y].
        """
        cells = [[Cell(content) for content in column] for column in contents]
        return cls(cells)

    @classmethod
    def from_placement(
        cls, width: int, height: int, placement: Placement
    ) -> "Board":
        """Build a board with mines at the given positions."""
        return cls.with_cells(placement_to_contents(width, height, placement))

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Generate a random board.

        Raises:
            TooManyMinesError: If density would exceed 10%.
            FieldTooSmallError: If both dimensions are below 8.
        """
        placement = generate_placement(width, height, mine_count, rng)
        return cls.from_placement(width, height, placement)

    @classmethod
    def from_config(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "Board":
        """Generate a random board from a configuration."""
        return cls.generate(config.width, config.height, config.num_mines, rng)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _neighbors(self, x: int, y: int) -> List[Position]:
        """In-bounds 8-neighbors of a position, without a bounds check."""
        neighbors = []
        for delta_x in (-1, 0, 1):
            for delta_y in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring positions.

        Corner cells have 3 neighbors, edge cells 5, interior cells 8.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        self._check_bounds(x, y)
        return self._neighbors(x, y)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> int:
        """
        Reveal a cell at the given position.

        Already revealed and flagged cells are left alone. If the cell has
        no adjacent mines, its neighbors are revealed too, spreading
        through the whole connected zero region and its numbered border.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            Number of cells newly revealed.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
            MineOpenedError: If the cell is a mine. The mine stays revealed.
        """
        self._check_bounds(x, y)
        cell = self._cells[x][y]
        if not cell.reveal():
            return 0

        if cell.is_mine:
            if self._exploded is None:
                self._exploded = (x, y)
            logger.info("Mine opened at (%d, %d)", x, y)
            raise MineOpenedError(x, y)

        revealed = 1
        if self._counts[x, y] == 0:
            revealed += self._cascade(x, y)
        return revealed

    def _cascade(self, x: int, y: int) -> int:
        """
        Reveal outward from a zero cell using a worklist.

        Revealed and flagged cells are skipped, so every cell is opened
        at most once and cycles terminate. Neighbors of a zero cell hold
        no mines, so nothing here can explode.
        """
        revealed = 0
        pending = deque(self._neighbors(x, y))
        while pending:
            next_x, next_y = pending.popleft()
            if not self._cells[next_x][next_y].reveal():
                continue
            revealed += 1
            if self._counts[next_x, next_y] == 0:
                pending.extend(self._neighbors(next_x, next_y))

        logger.debug("Cascade from (%d, %d) opened %d cells", x, y, revealed)
        return revealed

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False if the cell is revealed.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        self._check_bounds(x, y)
        return self._cells[x][y].toggle_flag()

    def chord(self, x: int, y: int) -> int:
        """
        Reveal every unflagged neighbor of a satisfied number.

        Only acts on a revealed cell whose flagged-neighbor count equals
        its adjacency count. Otherwise nothing changes.

        Returns:
            Number of cells newly revealed.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
            MineOpenedError: If a flag was wrong and a mine got opened.
        """
        self._check_bounds(x, y)
        if not self._cells[x][y].is_revealed:
            return 0

        neighbors = self._neighbors(x, y)
        if self._count_adjacent_flags(neighbors) != self._counts[x, y]:
            return 0

        revealed = 0
        for neighbor_x, neighbor_y in neighbors:
            neighbor = self._cells[neighbor_x][neighbor_y]
            if neighbor.is_hidden:
                revealed += self.reveal(neighbor_x, neighbor_y)

        logger.debug("Chord at (%d, %d) opened %d cells", x, y, revealed)
        return revealed

    def _count_adjacent_flags(self, neighbors: Iterable[Position]) -> int:
        """Count flagged cells among the given positions."""
        return sum(1 for x, y in neighbors if self._cells[x][y].is_flagged)

    def reveal_all_mines(self) -> int:
        """
        Reveal every unflagged mine, for showing the board after a loss.

        Returns:
            Number of mines newly revealed.
        """
        return sum(
            1 for column in self._cells for cell in column
            if cell.is_mine and cell.reveal()
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return len(self._cells)

    @property
    def height(self) -> int:
        return len(self._cells[0])

    @property
    def mine_count(self) -> int:
        return sum(cell.is_mine for column in self._cells for cell in column)

    @property
    def flag_count(self) -> int:
        return sum(cell.is_flagged for column in self._cells for cell in column)

    @property
    def adjacent_counts(self) -> np.ndarray:
        """Read-only adjacency counts, shape (width, height), indexed [x, y]."""
        return self._counts

    @property
    def exploded(self) -> Optional[Position]:
        """Position of the first mine opened, or None."""
        return self._exploded

    def is_won(self) -> bool:
        """Check that every empty cell is revealed. Mines do not matter."""
        return all(
            cell.is_revealed
            for column in self._cells for cell in column
            if not cell.is_mine
        )

    def is_lost(self) -> bool:
        """Check if a mine has been opened."""
        return self._exploded is not None

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self.is_lost():
            return GameState.LOST
        if self.is_won():
            return GameState.WON
        return GameState.PLAYING

    def cell(self, x: int, y: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        self._check_bounds(x, y)
        return self._cells[x][y]

    def adjacent_count(self, x: int, y: int) -> int:
        """Number of mines around a position (0-8)."""
        self._check_bounds(x, y)
        return int(self._counts[x, y])

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an automated agent.

        Returns:
            int8 array of shape (width, height) indexed [x, y] where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.width, self.height), dtype=np.int8)
        for x, column in enumerate(self._cells):
            for y, cell in enumerate(column):
                obs[x, y] = cell.to_observation(int(self._counts[x, y]))
        return obs

    def hidden_positions(self) -> List[Position]:
        """
        Get concealed, unflagged positions.

        Returns:
            List of (x, y) positions that a reveal could open.
        """
        return [
            (x, y)
            for x, column in enumerate(self._cells)
            for y, cell in enumerate(column)
            if cell.is_hidden
        ]
