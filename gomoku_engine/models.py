"""
Pydantic Models for the Gomoku Engine
Value types shared by the board, the rule checks, the AIs and the controller
"""

from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


BOARD_SIZE = 15
WIN_LENGTH = 5
CENTER = BOARD_SIZE // 2
INITIAL_UNDO_BUDGET = 3

# Horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))

# Column labels used by the move log ("H8" is the center cell)
COLUMN_LABELS = "ABCDEFGHIJKLMNO"

Coordinate = Tuple[int, int]


class Side(IntEnum):
    """Participant owning a turn"""
    HUMAN = 1
    AUTOMATED = 2

    @property
    def opponent(self) -> "Side":
        return Side.AUTOMATED if self is Side.HUMAN else Side.HUMAN


class CellState(IntEnum):
    """Content of one grid cell; values match the numpy grid encoding"""
    EMPTY = 0
    HUMAN = 1
    AUTOMATED = 2

    @classmethod
    def of(cls, side: Side) -> "CellState":
        return cls(int(side))

    @property
    def side(self) -> Optional[Side]:
        if self is CellState.EMPTY:
            return None
        return Side(int(self))


class GameStatus(str, Enum):
    """Game status enumeration"""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class DifficultyLevel(IntEnum):
    """Selector for the automated side's strategy"""
    RANDOM = 1
    DEFENSIVE = 2
    SMART = 3
    MINIMAX = 4
    SCORE_HEURISTIC = 5
    PATTERN = 6


class AIType(str, Enum):
    """AI type enumeration"""
    RANDOM = "random"
    DEFENSIVE = "defensive"
    SMART = "smart"
    MINIMAX = "minimax"
    SCORE_HEURISTIC = "score_heuristic"
    PATTERN = "pattern"


class Position(BaseModel):
    """Board position, x is the column and y the row"""
    x: int = Field(ge=0, lt=BOARD_SIZE)
    y: int = Field(ge=0, lt=BOARD_SIZE)

    class Config:
        frozen = True

    @classmethod
    def from_coordinate(cls, coord: Coordinate) -> "Position":
        return cls(x=coord[0], y=coord[1])

    def to_coordinate(self) -> Coordinate:
        return (self.x, self.y)

    def to_label(self) -> str:
        """Human-facing label, column letter then 1-based row ("A1".."O15")"""
        return f"{COLUMN_LABELS[self.x]}{self.y + 1}"


class Move(BaseModel):
    """A stone placed by one side. Immutable once created."""
    position: Position
    side: Side
    move_number: int = Field(ge=1)

    class Config:
        frozen = True


class AIConfig(BaseModel):
    """AI configuration"""
    difficulty: int = Field(DifficultyLevel.SMART, ge=1, le=len(DifficultyLevel))
    rng_seed: Optional[int] = None
    search_depth: int = Field(2, ge=1)
    candidate_radius: int = Field(2, ge=1)


class MoveOutcome(BaseModel):
    """Result of one applied move: the move itself plus the win signal"""
    move: Move
    won: bool
    status: GameStatus

    @property
    def position(self) -> Position:
        return self.move.position


class GameSnapshot(BaseModel):
    """Read-only view of the controller for rendering collaborators"""
    cells: List[List[int]]
    active_side: Side
    status: GameStatus
    winner: Optional[Side] = None
    undo_budget: int
    difficulty: DifficultyLevel
    move_history: List[Move]
