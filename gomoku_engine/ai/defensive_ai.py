"""Defensive AI: block the opponent's five, otherwise play at random."""

from __future__ import annotations

import logging

from ..board_manager import Board
from ..models import Coordinate
from ..rules import find_winning_move
from .random_ai import RandomAI

logger = logging.getLogger(__name__)


class DefensiveAI(RandomAI):
    """AI that only reacts to immediate threats."""

    def choose_move(self, board: Board) -> Coordinate:
        block = find_winning_move(board, self.opponent)
        if block is not None:
            logger.debug(f"{self!r} blocking five at {block}")
            return block
        return super().choose_move(board)
