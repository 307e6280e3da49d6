"""
Cell module for the minefield engine.

Represents individual cells on the board with their content
(mine/empty) and their concealed/revealed/flagged state.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellContent(Enum):
    """What a cell holds. Fixed for the life of a board."""

    MINE = auto()
    EMPTY = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    A flagged cell cannot be revealed, and a revealed cell can no longer
    be flagged or unflagged. Revealing is one-way.

    Attributes:
        content: Mine or empty.
        is_revealed: Whether the cell has been opened.
        is_flagged: Whether the player has marked the cell.
    """

    content: CellContent = CellContent.EMPTY
    is_revealed: bool = False
    is_flagged: bool = False

    @classmethod
    def mine(cls) -> "Cell":
        """Create a concealed mine cell."""
        return cls(CellContent.MINE)

    @classmethod
    def empty(cls) -> "Cell":
        """Create a concealed empty cell."""
        return cls(CellContent.EMPTY)

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was newly revealed, False if it was already
            revealed or is protected by a flag.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.content == CellContent.MINE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is concealed and unflagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def state(self) -> CellState:
        """Current visual state."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    def to_observation(self, adjacent_mines: int) -> int:
        """
        Convert cell to observation value for an automated agent.

        Args:
            adjacent_mines: The board's adjacency count for this cell.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.is_flagged:
            return -2
        if not self.is_revealed:
            return -1
        if self.is_mine:
            return 9
        return adjacent_mines
