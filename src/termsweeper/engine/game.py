"""
Game orchestration for Minesweeper.

Ties a Board, a Cursor and a Difficulty together into a small state
machine driven by player actions.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

import numpy as np

from .board import Board, BoardConfig
from .cursor import Cursor, Direction
from .difficulty import Difficulty


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_over(self) -> bool:
        return self != GameStatus.PLAYING


class Action(Enum):
    """Player inputs understood by the game."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    REVEAL = auto()
    MARK = auto()
    RESTART = auto()
    QUIT = auto()

    @property
    def direction(self) -> Optional[Direction]:
        """Cursor direction for MOVE_* actions, None otherwise."""
        return _MOVE_DIRECTIONS.get(self)


_MOVE_DIRECTIONS = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}


# ============================================================================
# Read-only Snapshot
# ============================================================================

@dataclass(frozen=True)
class GameView:
    """
    Everything a renderer needs to draw one frame.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        cells: Read-only int8 observation grid (see Cell.to_observation).
        cursor: (row, col) of the selected cell.
        status: Current game status.
        difficulty: Preset being played.
        mines_remaining: Mines minus marks; negative when over-marked.
    """

    width: int
    height: int
    cells: np.ndarray
    cursor: Tuple[int, int]
    status: GameStatus
    difficulty: Difficulty
    mines_remaining: int


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper session.

    Reveal, Mark and Move only act while the game is PLAYING. Restart and
    Quit are accepted in every state.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.BEGINNER,
        seed: Optional[int] = None,
        config: Optional[BoardConfig] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            difficulty: Preset to play.
            seed: Seed for mine placement; one generator serves every
                board of this session, restarts included.
            config: Board dimensions overriding the preset's.
        """
        self.difficulty = difficulty
        self.config = config or difficulty.config
        self.rng = np.random.default_rng(seed)
        self.running = True
        self.board: Board
        self.cursor: Cursor
        self.status: GameStatus
        self._new_board()

    def _new_board(self) -> None:
        self.board = Board(self.config, self.rng)
        self.cursor = Cursor.centered(self.config.height, self.config.width)
        self.status = GameStatus.PLAYING

    # ========================================================================
    # Input Handling
    # ========================================================================

    def handle(self, action: Action) -> bool:
        """
        Apply one player action.

        Args:
            action: The action to perform.

        Returns:
            False once the player has asked to quit, True otherwise.
        """
        if action == Action.QUIT:
            self.running = False
        elif action == Action.RESTART:
            self.restart()
        elif self.status.is_over:
            pass
        elif action == Action.REVEAL:
            self.reveal()
        elif action == Action.MARK:
            self.board.toggle_mark(*self.cursor.position)
        elif action.direction is not None:
            self.cursor.move(
                action.direction, (self.config.height, self.config.width)
            )
        return self.running

    def reveal(self) -> None:
        """Reveal the cell under the cursor and update the status."""
        outcome = self.board.reveal(*self.cursor.position)
        if outcome.is_mine_hit:
            self.status = GameStatus.LOST
            self.board.reveal_mines()
        elif self.board.is_won:
            self.status = GameStatus.WON

    def restart(self) -> None:
        """Replace the board with a fresh one of the same difficulty."""
        self._new_board()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def mines_remaining(self) -> int:
        return self.config.mine_count - self.board.mark_count

    def view(self) -> GameView:
        """Snapshot the current state for rendering."""
        cells = self.board.get_observation()
        cells.setflags(write=False)
        return GameView(
            width=self.config.width,
            height=self.config.height,
            cells=cells,
            cursor=self.cursor.position,
            status=self.status,
            difficulty=self.difficulty,
            mines_remaining=self.mines_remaining,
        )
