"""Minimax AI implementation for the Gomoku engine.

Plain depth-limited minimax over a restricted candidate set. There is no
alpha-beta pruning, no transposition table and no iterative deepening: the
only pruning is the neighbourhood restriction of
:meth:`Board.candidate_moves`, recomputed at every node against the current
occupancy.

Leaves are scored with :func:`~gomoku_engine.ai.evaluation.evaluate_board`
from this AI's perspective; the AI's own placements maximise and the
opponent's minimise. The root never evaluates the board itself, it only
compares the scores of its children.
"""

from __future__ import annotations

import logging

from ..board_manager import Board
from ..models import AIConfig, Coordinate, Side
from .base import BaseAI
from .evaluation import evaluate_board

logger = logging.getLogger(__name__)


class MinimaxAI(BaseAI):
    """AI that searches ``config.search_depth`` plies (2 by default)."""

    def __init__(self, side: Side, config: AIConfig) -> None:
        super().__init__(side, config)
        self.max_depth: int = config.search_depth
        self.radius: int = config.candidate_radius
        self.nodes_visited: int = 0

    def choose_move(self, board: Board) -> Coordinate:
        return self.minimax_root(board, self.max_depth)

    def minimax_root(self, board: Board, depth: int) -> Coordinate:
        """Best candidate for this AI, first found on equal scores.

        Falls back to the center-bias move when the board has no stones.
        """
        self.nodes_visited = 0
        candidates = board.candidate_moves(self.radius)
        if not candidates:
            return self.center_bias_move(board)

        best_move: Coordinate | None = None
        best_score = float("-inf")
        for coord in candidates:
            with board.probe(coord, self.side):
                score = self.minimax(board, depth - 1, False)
            if score > best_score:
                best_score = score
                best_move = coord

        logger.debug(
            f"MinimaxAI: depth={depth} candidates={len(candidates)} "
            f"nodes={self.nodes_visited} best={best_move} score={best_score}"
        )
        return best_move

    def minimax(self, board: Board, depth: int, maximizing: bool) -> float:
        """Score of ``board`` with ``depth`` plies left to search.

        Args:
            board: Board to search; every probe is reverted before return
            depth: Remaining plies; 0 scores the board directly
            maximizing: True when this AI is the side to place next
        """
        self.nodes_visited += 1
        if depth == 0:
            return evaluate_board(board, self.side)

        candidates = board.candidate_moves(self.radius)
        if not candidates:
            return evaluate_board(board, self.side)

        mover = self.side if maximizing else self.opponent
        best = float("-inf") if maximizing else float("inf")
        for coord in candidates:
            with board.probe(coord, mover):
                score = self.minimax(board, depth - 1, not maximizing)
            best = max(best, score) if maximizing else min(best, score)
        return best
