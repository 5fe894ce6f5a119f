"""
Pytest configuration and shared fixtures.
"""
import io
import sys
from pathlib import Path
from typing import Callable, Iterable, List

import numpy as np
import pytest
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termsweeper.engine import Board, BoardConfig, Cell, Difficulty, Game


# Beginner layout used by the reference-grid tests. (0, 0) is walled in by
# mines; everything else is reachable from the center.
REFERENCE_MINES = [
    (0, 1), (1, 0), (1, 1),
    (8, 2), (8, 3), (8, 4), (8, 5), (8, 6), (8, 7), (8, 8),
]

# Observation after revealing (4, 4) on the reference layout
REFERENCE_GRID = [
    [-1, -1, 2, 0, 0, 0, 0, 0, 0],
    [-1, -1, 2, 0, 0, 0, 0, 0, 0],
    [2, 2, 1, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 2, 3, 3, 3, 3, 3, 2],
    [0, 1, -1, -1, -1, -1, -1, -1, -1],
]

# Seed for the Beginner game whose first reveal at the center is pinned
SEEDED_REFERENCE_SEED = 2024


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with 1 mine in the corner."""
    board = Board(BoardConfig(3, 3, 1))
    board.set_mines([(0, 0)])
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def reference_board() -> Board:
    """Beginner board with the fixed reference layout."""
    board = Board(Difficulty.BEGINNER.config)
    board.set_mines(REFERENCE_MINES)
    return board


@pytest.fixture
def reference_grid() -> List[List[int]]:
    """Expected observation after revealing the center of reference_board."""
    return [list(row) for row in REFERENCE_GRID]


def _seeded_observation(seed: int, size: int = 9, mines: int = 10) -> List[List[int]]:
    """Draw a Beginner layout from the seed and flood from the center by hand."""
    start = (size // 2, size // 2)
    candidates = [
        (row, col) for row in range(size) for col in range(size)
        if (row, col) != start
    ]
    picks = np.random.default_rng(seed).choice(len(candidates), size=mines, replace=False)
    layout = {candidates[index] for index in picks}

    grid = [[-1] * size for _ in range(size)]
    stack = [start]
    while stack:
        row, col = stack.pop()
        if not (0 <= row < size and 0 <= col < size):
            continue
        if grid[row][col] != -1 or (row, col) in layout:
            continue
        around = [(row + dr, col + dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)]
        grid[row][col] = sum(1 for position in around if position in layout)
        if grid[row][col] == 0:
            stack.extend(around)
    return grid


@pytest.fixture
def seeded_reference():
    """(seed, observation) for a seeded Beginner game after revealing (4, 4)."""
    return SEEDED_REFERENCE_SEED, _seeded_observation(SEEDED_REFERENCE_SEED)


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
    return Cell(is_mine=True)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def seeded_game() -> Game:
    """Beginner game with a fixed seed."""
    return Game(Difficulty.BEGINNER, seed=1234)


@pytest.fixture
def reference_game() -> Game:
    """Beginner game whose board uses the reference layout."""
    game = Game(Difficulty.BEGINNER)
    game.board.set_mines(REFERENCE_MINES)
    return game


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def console() -> Console:
    """Console writing to memory instead of a terminal."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def scripted_keys() -> Callable[[Iterable[str]], Callable[[], str]]:
    """Build a key source that replays the given key names in order."""

    def make(keys: Iterable[str]) -> Callable[[], str]:
        remaining: List[str] = list(keys)

        def read() -> str:
            return remaining.pop(0)

        return read

    return make
