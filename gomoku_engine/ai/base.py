"""
Base AI Player class for the Gomoku engine
Abstract base class that all move-selection strategies inherit from
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar

from ..board_manager import Board
from ..errors import NoLegalMoveError
from ..models import CENTER, AIConfig, Coordinate, Position, Side

logger = logging.getLogger(__name__)

T = TypeVar("T")


def derive_seed(config: AIConfig, side: Side) -> int:
    """
    Derive a deterministic RNG seed when ``AIConfig.rng_seed`` is unset.

    Mixing the difficulty and the side keeps two AIs built from the same
    config on different sides from drawing identical sequences.
    """
    base = (config.difficulty * 1_000_003) ^ (int(side) * 97_911)
    return int(base & 0xFFFFFFFF)


def center_bias_move(board: Board) -> Optional[Coordinate]:
    """Empty cell closest to the center by Manhattan distance.

    Ties go to the first cell in row-major scan order. Returns None on a
    full board.
    """
    best: Optional[Coordinate] = None
    best_distance = float("inf")
    for x, y in board.all_empty_cells():
        distance = abs(x - CENTER) + abs(y - CENTER)
        if distance < best_distance:
            best = (x, y)
            best_distance = distance
    return best


class BaseAI(ABC):
    """Abstract base class for all AI implementations"""

    def __init__(self, side: Side, config: AIConfig):
        """
        Initialize AI player

        Args:
            side: The side this AI places stones for
            config: AI configuration settings
        """
        self.side = side
        self.opponent = side.opponent
        self.config = config
        self.move_count = 0

        if self.config.rng_seed is not None:
            self.rng_seed: int = int(self.config.rng_seed)
        else:
            self.rng_seed = derive_seed(self.config, self.side)
        self.rng: random.Random = random.Random(self.rng_seed)

    def select_move(self, board: Board) -> Position:
        """
        Select the move for the current board

        Args:
            board: Current board; left unchanged on return

        Returns:
            Position of an empty cell

        Raises:
            NoLegalMoveError: If the board has no empty cell
        """
        if board.is_full():
            raise NoLegalMoveError(
                "No empty cell left to play",
                context={"ai": self.__class__.__name__},
            )

        coord = self.choose_move(board)
        self.move_count += 1
        logger.debug(f"{self!r} chose {coord}")
        return Position.from_coordinate(coord)

    @abstractmethod
    def choose_move(self, board: Board) -> Coordinate:
        """
        Strategy hook; only called when at least one empty cell exists

        Args:
            board: Current board. Implementations may probe it but must
                leave it as they found it.

        Returns:
            Coordinate of the chosen empty cell
        """

    def center_bias_move(self, board: Board) -> Coordinate:
        coord = center_bias_move(board)
        if coord is None:
            raise NoLegalMoveError("No empty cell left to play")
        return coord

    def get_random_element(self, items: Sequence[T]) -> Optional[T]:
        """
        Get random element from list using the per-instance RNG.

        Args:
            items: Sequence of items

        Returns:
            Random item or None if list is empty
        """
        if not items:
            return None
        return items[self.rng.randrange(len(items))]

    def __repr__(self) -> str:
        """String representation of AI"""
        return (
            f"{self.__class__.__name__}"
            f"(side={self.side.name}, "
            f"difficulty={self.config.difficulty})"
        )
