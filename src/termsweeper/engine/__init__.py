"""
Minesweeper engine.

Provides core game logic: cells, board, cursor, difficulty presets and
the game state machine.
"""
from .errors import SweeperError, ConfigError
from .cell import Cell, CellState
from .board import Board, BoardConfig, RevealKind, RevealOutcome
from .cursor import Cursor, Direction
from .difficulty import Difficulty
from .game import Action, Game, GameStatus, GameView

__all__ = [
    "SweeperError",
    "ConfigError",
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "RevealKind",
    "RevealOutcome",
    "Cursor",
    "Direction",
    "Difficulty",
    "Action",
    "Game",
    "GameStatus",
    "GameView",
]
