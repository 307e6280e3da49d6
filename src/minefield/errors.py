"""
Error types for the minefield engine.

Board operations raise these instead of returning status codes. Every
error derives from MinefieldError so callers can catch the whole family.
"""
from typing import Tuple


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class OutOfBoundsError(MinefieldError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Position ({x}, {y}) is outside the board")
        self.x = x
        self.y = y

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y


class MineOpenedError(MinefieldError):
    """
    A mine was revealed.

    This is the loss signal, not a defect: the board stays valid and the
    mine cell is already marked revealed when this is raised.
    """

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Mine opened at ({x}, {y})")
        self.x = x
        self.y = y

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y


class EmptyFieldError(MinefieldError):
    """Adjacency counts were requested for an empty or ragged grid."""


# ============================================================================
# Generation Errors
# ============================================================================

class GenerationError(MinefieldError, ValueError):
    """Board parameters were rejected before any board was built."""


class TooManyMinesError(GenerationError):
    """Mine density would exceed one mine per ten cells."""

    def __init__(self, width: int, height: int, mine_count: int) -> None:
        super().__init__(
            f"Too many mines: {mine_count} mines on a {width}x{height} field "
            f"(max {width * height // 10})"
        )
        self.width = width
        self.height = height
        self.mine_count = mine_count


class FieldTooSmallError(GenerationError):
    """Neither board dimension reaches the minimum size."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"Field too small: {width}x{height} "
            f"(at least one dimension must be 8 or more)"
        )
        self.width = width
        self.height = height
