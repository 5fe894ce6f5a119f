"""
Cursor module for Minesweeper game.

Tracks the selected cell and moves it one step at a time, clamped to
the board edges.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Cursor movement directions as (row, col) deltas."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


@dataclass
class Cursor:
    """
    Currently selected board position.

    Attributes:
        row: Row index, within [0, height).
        col: Column index, within [0, width).
    """

    row: int = 0
    col: int = 0

    @classmethod
    def centered(cls, height: int, width: int) -> "Cursor":
        """Cursor on the middle cell of a height x width board."""
        return cls(height // 2, width // 2)

    def move(self, direction: Direction, bounds: Tuple[int, int]) -> bool:
        """
        Move one step, staying inside the board.

        Args:
            direction: Where to move.
            bounds: (height, width) of the board.

        Returns:
            True if the cursor moved, False if it was already at that edge.
        """
        height, width = bounds
        delta_row, delta_col = direction.delta
        new_row = min(max(self.row + delta_row, 0), height - 1)
        new_col = min(max(self.col + delta_col, 0), width - 1)
        moved = (new_row, new_col) != (self.row, self.col)
        self.row, self.col = new_row, new_col
        return moved

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col
