"""
Pytest configuration and shared fixtures.
"""
import random
from typing import Callable

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, CellContent


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[..., Board]:
    """
    Build a board from text rows, top row first.

    '*' is a mine, anything else is empty. rows[y][x] becomes cell (x, y).
    """
    def build(*rows: str) -> Board:
        width = len(rows[0])
        contents = [
            [
                CellContent.MINE if row[x] == "*" else CellContent.EMPTY
                for row in rows
            ]
            for x in range(width)
        ]
        return Board.with_cells(contents)

    return build


@pytest.fixture
def reference_board() -> Board:
    """3x3 board with mines at (0,2), (1,0), (2,0) and (2,2)."""
    empty, mine = CellContent.EMPTY, CellContent.MINE
    return Board.with_cells([
        [empty, empty, mine],
        [mine, empty, empty],
        [mine, empty, mine],
    ])


@pytest.fixture
def corner_mine_board(make_board) -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return make_board(
        "*..",
        "...",
        "...",
    )


@pytest.fixture
def wall_board(make_board) -> Board:
    """5x4 board split by a column of mines at x=2."""
    return make_board(
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    )


@pytest.fixture
def empty_board(make_board) -> Board:
    """Create a board with no mines for cascade testing."""
    return make_board(*["....."] * 5)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell.mine()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 8)
