"""
Mine placement generator.

Chooses where the mines go before a board exists. The board itself only
ever sees the finished placement.
"""
import logging
import random
from typing import FrozenSet, List, Optional, Tuple

from .cell import CellContent
from .errors import FieldTooSmallError, GenerationError, TooManyMinesError


logger = logging.getLogger(__name__)

Position = Tuple[int, int]
Placement = FrozenSet[Position]


# ============================================================================
# Constants
# ============================================================================

# At most one mine per this many cells.
CELLS_PER_MINE = 10

# At least one side of the field must be this long.
MIN_FIELD_SIDE = 8


# ============================================================================
# Validation
# ============================================================================

def validate_dimensions(width: int, height: int, mine_count: int) -> None:
    """
    Check board parameters, first failure wins.

    Raises:
        GenerationError: If a dimension is below 1 or the mine count is
            negative.
        TooManyMinesError: If width * height < mine_count * 10.
        FieldTooSmallError: If both width and height are below 8.
    """
    if width < 1 or height < 1:
        raise GenerationError(
            f"Board dimensions must be positive ({width}x{height})"
        )
    if mine_count < 0:
        raise GenerationError("Number of mines cannot be negative")
    if width * height < mine_count * CELLS_PER_MINE:
        raise TooManyMinesError(width, height, mine_count)
    if width < MIN_FIELD_SIDE and height < MIN_FIELD_SIDE:
        raise FieldTooSmallError(width, height)


# ============================================================================
# Placement
# ============================================================================

def generate_placement(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Placement:
    """
    Pick mine_count distinct positions uniformly at random.

    Samples one coordinate at a time and keeps it if it is new. Density
    is capped at 10%, so collisions stay rare.

    Args:
        width: Number of columns (x extent).
        height: Number of rows (y extent).
        mine_count: How many mines to place.
        rng: Random source. A fresh unseeded one is used if omitted.

    Returns:
        Frozen set of exactly mine_count (x, y) positions.
    """
    validate_dimensions(width, height, mine_count)
    rng = rng or random.Random()

    mines = set()
    while len(mines) < mine_count:
        mines.add((rng.randrange(width), rng.randrange(height)))

    logger.info(
        "Placed %d mines on a %dx%d field", mine_count, width, height
    )
    return frozenset(mines)


def placement_to_contents(
    width: int, height: int, placement: Placement
) -> List[List[CellContent]]:
    """
    Expand a placement into a column-major content grid.

    Returns:
        Grid indexed as grid[x][y].
    """
    for x, y in placement:
        if not (0 <= x < width and 0 <= y < height):
            raise GenerationError(
                f"Mine position ({x}, {y}) outside {width}x{height} field"
            )
    return [
        [
            CellContent.MINE if (x, y) in placement else CellContent.EMPTY
            for y in range(height)
        ]
        for x in range(width)
    ]
