"""Static evaluation functions used by the search and heuristic AIs.

Two independent scorers live here and are deliberately kept apart:

* :func:`evaluate_board` is the global line-count score consumed by
  :class:`~gomoku_engine.ai.minimax_ai.MinimaxAI` at its leaves.
* :func:`evaluate_position` is the directional run score consumed by
  :class:`~gomoku_engine.ai.score_ai.ScoreHeuristicAI`.

Their counting rules differ (4-cell windows versus forward-only runs) and
each strategy's behaviour depends on the exact one it uses.
"""

from __future__ import annotations

import numpy as np

from ..board_manager import Board
from ..models import DIRECTIONS, Coordinate, Side

# Cells per line window scored by evaluate_board
WINDOW = 4


def evaluate_board(board: Board, perspective: Side = Side.AUTOMATED) -> int:
    """Global line-count score from ``perspective``'s point of view.

    For every cell and axis, look at the 4-cell window starting at the cell
    and running forward along the axis; cells past the edge count as empty.
    A window holding only ``perspective`` stones adds ``10**n``, a window
    holding only opponent stones subtracts ``10**n``; mixed and empty
    windows add nothing.
    """
    size = board.size
    pad = WINDOW - 1
    # Zero padding on every side: off-board cells never match a stone
    padded = np.pad(board.grid, pad, constant_values=0)
    own_value = int(perspective)
    opp_value = int(perspective.opponent)

    score = 0
    for dx, dy in DIRECTIONS:
        own = np.zeros((size, size), dtype=np.int64)
        opp = np.zeros((size, size), dtype=np.int64)
        for i in range(WINDOW):
            oy, ox = pad + i * dy, pad + i * dx
            window = padded[oy:oy + size, ox:ox + size]
            own += window == own_value
            opp += window == opp_value

        own_only = (own > 0) & (opp == 0)
        opp_only = (opp > 0) & (own == 0)
        score += int(np.power(10, own[own_only]).sum())
        score -= int(np.power(10, opp[opp_only]).sum())
    return score


def evaluate_position(board: Board, coord: Coordinate, side: Side) -> int:
    """Directional run score of ``coord`` for ``side``.

    Per axis, count ``side`` stones strictly in the positive direction
    (starting one step away from ``coord``) until the first other cell or the
    edge, then add ``10**count``. The negative direction is never looked at.
    """
    x, y = coord
    grid = board.grid
    total = 0
    for dx, dy in DIRECTIONS:
        count = 0
        nx, ny = x + dx, y + dy
        while Board.in_bounds(nx, ny) and grid[ny, nx] == side:
            count += 1
            nx += dx
            ny += dy
        total += 10 ** count
    return total
