"""Offense-then-defense AI.

Priority order: complete our own five, block the opponent's five, then
drift toward the center of the board.
"""

from __future__ import annotations

import logging

from ..board_manager import Board
from ..models import Coordinate
from ..rules import find_winning_move
from .base import BaseAI

logger = logging.getLogger(__name__)


class SmartAI(BaseAI):
    """AI that wins when it can and blocks when it must."""

    def choose_move(self, board: Board) -> Coordinate:
        win = find_winning_move(board, self.side)
        if win is not None:
            logger.debug(f"{self!r} completing five at {win}")
            return win

        block = find_winning_move(board, self.opponent)
        if block is not None:
            logger.debug(f"{self!r} blocking five at {block}")
            return block

        return self.center_bias_move(board)
