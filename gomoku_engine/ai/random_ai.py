"""Random AI implementation for the Gomoku engine.

This agent selects uniformly among the empty cells using the per-instance
RNG on :class:`BaseAI`. It is the lowest difficulty level and the fallback
of :class:`~gomoku_engine.ai.defensive_ai.DefensiveAI`.
"""

from __future__ import annotations

from typing import Optional

from ..board_manager import Board
from ..errors import NoLegalMoveError
from ..models import Coordinate
from .base import BaseAI


class RandomAI(BaseAI):
    """AI that selects a random empty cell."""

    def random_move(self, board: Board) -> Optional[Coordinate]:
        """Pick uniformly from the empty cells listed in scan order, None if full."""
        return self.get_random_element(board.all_empty_cells())

    def choose_move(self, board: Board) -> Coordinate:
        move = self.random_move(board)
        if move is None:
            raise NoLegalMoveError(
                "No empty cell left to play",
                context={"ai": self.__class__.__name__},
            )
        return move
