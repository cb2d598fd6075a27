"""Pattern-matching AI.

For every empty cell the AI places a tentative stone, reads the 9-cell line
through it along each axis as a string and adds the score of every pattern
from :data:`~gomoku_engine.ai.patterns.PATTERN_SCORES` found in it.
"""

from __future__ import annotations

from ..board_manager import Board
from ..models import DIRECTIONS, CellState, Coordinate
from .base import BaseAI
from .patterns import EMPTY, OFF_BOARD, OPPONENT, OWN, PATTERN_SCORES, WINDOW_REACH


class PatternAI(BaseAI):
    """AI that scores candidate cells by line patterns."""

    def _symbol(self, board: Board, x: int, y: int) -> str:
        if not Board.in_bounds(x, y):
            return OFF_BOARD
        cell = board.grid[y, x]
        if cell == CellState.EMPTY:
            return EMPTY
        return OWN if cell == self.side else OPPONENT

    def line_window(self, board: Board, coord: Coordinate, direction: Coordinate) -> str:
        x, y = coord
        dx, dy = direction
        return "".join(
            self._symbol(board, x + i * dx, y + i * dy)
            for i in range(-WINDOW_REACH, WINDOW_REACH + 1)
        )

    def score_cell(self, board: Board, coord: Coordinate) -> int:
        """Pattern total for ``coord`` with our stone tentatively placed."""
        total = 0
        with board.probe(coord, self.side):
            for direction in DIRECTIONS:
                window = self.line_window(board, coord, direction)
                total += sum(score for pattern, score in PATTERN_SCORES if pattern in window)
        return total

    def choose_move(self, board: Board) -> Coordinate:
        best_move: Coordinate | None = None
        best_score = float("-inf")
        for coord in board.all_empty_cells():
            score = self.score_cell(board, coord)
            if score > best_score:
                best_score = score
                best_move = coord

        if best_move is None:
            return self.center_bias_move(board)
        return best_move
