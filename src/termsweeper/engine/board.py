"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counting,
flood-fill revealing and win/loss evaluation.
"""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import ConfigError


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ConfigError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.mine_count > max_mines:
            raise ConfigError(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height

    @property
    def safe_count(self) -> int:
        """Number of cells without a mine."""
        return self.cell_count - self.mine_count


# ============================================================================
# Reveal Outcome
# ============================================================================

class RevealKind(Enum):
    """What a reveal did."""

    REVEALED = auto()
    MINE_HIT = auto()


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of revealing a cell.

    Attributes:
        kind: REVEALED for a safe (or no-op) reveal, MINE_HIT otherwise.
        count: Number of cells newly revealed by the call.
    """

    kind: RevealKind
    count: int = 0

    @classmethod
    def revealed(cls, count: int) -> "RevealOutcome":
        return cls(RevealKind.REVEALED, count)

    @classmethod
    def mine_hit(cls) -> "RevealOutcome":
        return cls(RevealKind.MINE_HIT, 1)

    @property
    def is_mine_hit(self) -> bool:
        return self.kind == RevealKind.MINE_HIT


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement and revealing logic.
    Mines are placed lazily by the first reveal, which is kept mine-free.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines_placed: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    @classmethod
    def from_dimensions(
        cls,
        width: int,
        height: int,
        mine_count: int,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Build a board from raw dimensions.

        Raises:
            ConfigError: If the dimensions or mine count are invalid.
        """
        return cls(BoardConfig(width, height, mine_count), np.random.default_rng(seed))

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._mines_placed = False

    def _iter_cells(self) -> Iterator[Cell]:
        for row in self._grid:
            yield from row

    def place_mines(self, exclude: Optional[Position] = None) -> None:
        """
        Place mines uniformly at random, without replacement.

        Any previous layout is discarded first.

        Args:
            exclude: (row, col) position to keep mine-free.
        """
        candidates = self._get_valid_mine_positions(exclude)
        chosen = self.rng.choice(
            len(candidates), size=self.config.mine_count, replace=False
        )
        self._apply_mines(candidates[index] for index in chosen)

    def set_mines(self, positions: Iterable[Position]) -> None:
        """
        Place mines at explicit positions.

        Args:
            positions: Distinct in-bounds (row, col) tuples, exactly
                ``config.mine_count`` of them.

        Raises:
            ConfigError: If the layout does not fit this board.
        """
        layout = {tuple(position) for position in positions}
        if len(layout) != self.config.mine_count:
            raise ConfigError(
                f"Expected {self.config.mine_count} distinct mine positions, "
                f"got {len(layout)}"
            )
        for row, col in layout:
            if not self.in_bounds(row, col):
                raise ConfigError(f"Mine position ({row}, {col}) is off the board")
        self._apply_mines(layout)

    def _apply_mines(self, positions: Iterable[Position]) -> None:
        for cell in self._iter_cells():
            cell.clear()
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._mines_placed = True

    def _get_valid_mine_positions(
        self, exclude: Optional[Position]
    ) -> List[Position]:
        """Get all valid positions for mine placement."""
        return [
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if (row, col) != exclude
        ]

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                self._grid[row][col].adjacent_mine_count = (
                    self._count_adjacent_mines(row, col)
                )

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for neighbor_row, neighbor_col in self.neighbors(row, col)
            if self._grid[neighbor_row][neighbor_col].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Edge and corner cells have fewer than eight neighbors.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        On first reveal, places mines avoiding this cell. A cell with no
        adjacent mines flood-fills its safe neighbors; numbered cells on
        the rim of the flood are revealed but not expanded.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            MINE_HIT if the cell was a mine, otherwise REVEALED with the
            number of newly revealed cells (0 for a no-op).
        """
        if not self.in_bounds(row, col):
            return RevealOutcome.revealed(0)
        cell = self._grid[row][col]
        if not cell.is_hidden:
            return RevealOutcome.revealed(0)

        if not self._mines_placed:
            self.place_mines(exclude=(row, col))

        cell.reveal()
        if cell.is_mine:
            return RevealOutcome.mine_hit()
        return RevealOutcome.revealed(1 + self._flood_fill(row, col))

    def _flood_fill(self, row: int, col: int) -> int:
        """Reveal the safe region around an already revealed cell."""
        if self._grid[row][col].adjacent_mine_count != 0:
            return 0

        revealed = 0
        queue = deque([(row, col)])
        while queue:
            current_row, current_col = queue.popleft()
            for neighbor_row, neighbor_col in self.neighbors(current_row, current_col):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_mine or not neighbor.reveal():
                    continue
                revealed += 1
                if neighbor.adjacent_mine_count == 0:
                    queue.append((neighbor_row, neighbor_col))
        return revealed

    def toggle_mark(self, row: int, col: int) -> bool:
        """
        Toggle the mark on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the mark was toggled, False otherwise.
        """
        if not self.in_bounds(row, col):
            return False
        return self._grid[row][col].toggle_mark()

    def reveal_mines(self) -> int:
        """Reveal every mine, marked or not. Returns how many were newly shown."""
        shown = 0
        for cell in self._iter_cells():
            if cell.is_mine and not cell.is_revealed:
                if cell.is_marked:
                    cell.toggle_mark()
                cell.reveal()
                shown += 1
        return shown

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def mines_placed(self) -> bool:
        """Whether the mine layout has been decided."""
        return self._mines_placed

    @property
    def is_won(self) -> bool:
        """Every non-mine cell is revealed. Marks do not matter."""
        if not self._mines_placed:
            return False
        return all(
            cell.is_revealed for cell in self._iter_cells() if not cell.is_mine
        )

    @property
    def is_lost(self) -> bool:
        """Some mine has been revealed."""
        return any(cell.is_mine and cell.is_revealed for cell in self._iter_cells())

    @property
    def mine_count(self) -> int:
        """Number of mines currently on the board."""
        return sum(1 for cell in self._iter_cells() if cell.is_mine)

    @property
    def mark_count(self) -> int:
        """Number of marked cells."""
        return sum(1 for cell in self._iter_cells() if cell.is_marked)

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(1 for cell in self._iter_cells() if cell.is_revealed)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array for rendering.

        Returns:
            2D int8 array (height x width) where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs
