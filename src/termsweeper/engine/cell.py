"""
Cell module for the termsweeper engine.

A cell knows whether it holds a mine, how many of its neighbors do, and
whether the player has uncovered or marked it. Everything the screen
shows about a cell comes from ``to_observation``.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Display Codes
# ============================================================================

HIDDEN_CODE = -1
MARKED_CODE = -2
MINE_CODE = 9


class CellState(Enum):
    """What the player can see of a cell."""

    HIDDEN = auto()
    MARKED = auto()
    REVEALED = auto()


# Marking flips between these two; revealed cells stay put.
_MARK_FLIP = {
    CellState.HIDDEN: CellState.MARKED,
    CellState.MARKED: CellState.HIDDEN,
}

_COVERED_CODES = {
    CellState.HIDDEN: HIDDEN_CODE,
    CellState.MARKED: MARKED_CODE,
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the minefield.

    Attributes:
        is_mine: Whether stepping here loses the game.
        adjacent_mine_count: Mines among the up to eight surrounding
            cells. Zero until the board places its mines.
        state: HIDDEN, MARKED or REVEALED.
    """

    is_mine: bool = False
    adjacent_mine_count: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """Uncover a hidden cell. Marked and revealed cells refuse."""
        if not self.is_hidden:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_mark(self) -> bool:
        """
        Put a mark on a hidden cell, or take it off a marked one.

        Returns:
            False for a revealed cell, which cannot be marked.
        """
        flipped = _MARK_FLIP.get(self.state)
        if flipped is None:
            return False
        self.state = flipped
        return True

    def clear(self) -> None:
        """Forget the mine layout. The visible state is left alone."""
        self.is_mine = False
        self.adjacent_mine_count = 0

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_marked(self) -> bool:
        return self.state == CellState.MARKED

    def to_observation(self) -> int:
        """
        Display code for the renderer.

        HIDDEN_CODE and MARKED_CODE for covered cells, MINE_CODE for an
        uncovered mine, otherwise the adjacent mine count (0-8).
        """
        if self.state in _COVERED_CODES:
            return _COVERED_CODES[self.state]
        return MINE_CODE if self.is_mine else self.adjacent_mine_count
