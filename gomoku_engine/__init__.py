"""Rule engine and computer opponent for five-in-a-row on a 15x15 board.

Usage:
    from gomoku_engine import GameController, Position, DifficultyLevel

    game = GameController()
    game.set_difficulty(DifficultyLevel.MINIMAX)
    game.apply_human_move(Position(x=7, y=7))
    outcome = game.run_automated_turn()
"""

from gomoku_engine.board_manager import Board
from gomoku_engine.config import EngineSettings
from gomoku_engine.errors import (
    GameAlreadyOverError,
    GomokuError,
    NoLegalMoveError,
    NotYourTurnError,
    OccupiedCellError,
    OutOfBoundsError,
    UndoUnavailableError,
)
from gomoku_engine.game_engine import GameController
from gomoku_engine.models import (
    BOARD_SIZE,
    WIN_LENGTH,
    AIConfig,
    AIType,
    CellState,
    DifficultyLevel,
    GameSnapshot,
    GameStatus,
    Move,
    MoveOutcome,
    Position,
    Side,
)
from gomoku_engine.rules import check_win, find_winning_move

__version__ = "1.0.0"

__all__ = [
    "BOARD_SIZE",
    "WIN_LENGTH",
    "AIConfig",
    "AIType",
    "Board",
    "CellState",
    "DifficultyLevel",
    "EngineSettings",
    "GameAlreadyOverError",
    "GameController",
    "GameSnapshot",
    "GameStatus",
    "GomokuError",
    "Move",
    "MoveOutcome",
    "NoLegalMoveError",
    "NotYourTurnError",
    "OccupiedCellError",
    "OutOfBoundsError",
    "Position",
    "Side",
    "UndoUnavailableError",
    "check_win",
    "find_winning_move",
]
