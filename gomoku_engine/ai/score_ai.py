"""Weighted positional scoring AI.

Every empty cell is scored from the forward-run counts of both sides
(:func:`~gomoku_engine.ai.evaluation.evaluate_position`), with our own runs
weighted slightly above the opponent's and a small pull toward the center.
"""

from __future__ import annotations

from ..board_manager import Board
from ..models import CENTER, Coordinate
from .base import BaseAI
from .evaluation import evaluate_position

OWN_WEIGHT = 1.1
OPPONENT_WEIGHT = 1.0
CENTER_PENALTY = 0.1


class ScoreHeuristicAI(BaseAI):
    """AI that plays the highest-scoring empty cell (first found on ties)."""

    def score_cell(self, board: Board, coord: Coordinate) -> float:
        x, y = coord
        return (
            OWN_WEIGHT * evaluate_position(board, coord, self.side)
            + OPPONENT_WEIGHT * evaluate_position(board, coord, self.opponent)
            - CENTER_PENALTY * (abs(x - CENTER) + abs(y - CENTER))
        )

    def choose_move(self, board: Board) -> Coordinate:
        best_move: Coordinate | None = None
        best_score = float("-inf")
        for coord in board.all_empty_cells():
            score = self.score_cell(board, coord)
            if score > best_score:
                best_score = score
                best_move = coord
        return best_move
