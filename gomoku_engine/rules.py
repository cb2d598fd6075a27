"""Win detection for five-in-a-row.

A win is checked once per placed stone, anchored at that stone, never as a
full-board scan. Runs longer than five also win (no overline exclusion).
"""

from __future__ import annotations

from .board_manager import Board
from .models import DIRECTIONS, WIN_LENGTH, Coordinate, Side


def count_run(board: Board, coord: Coordinate, direction: Coordinate, side: Side) -> int:
    """Count ``side`` stones after ``coord`` along ``direction``.

    The anchor cell itself is not counted; counting stops at the first
    mismatch or at the board edge.
    """
    x, y = coord
    dx, dy = direction
    grid = board.grid
    count = 0
    nx, ny = x + dx, y + dy
    while Board.in_bounds(nx, ny) and grid[ny, nx] == side:
        count += 1
        nx += dx
        ny += dy
    return count


def line_length(board: Board, coord: Coordinate, direction: Coordinate, side: Side) -> int:
    """Length of the run through ``coord`` along one axis, both directions."""
    dx, dy = direction
    return 1 + count_run(board, coord, (dx, dy), side) + count_run(board, coord, (-dx, -dy), side)


def check_win(board: Board, coord: Coordinate, side: Side) -> bool:
    """Return True if the stone at ``coord`` is part of a run of five or more."""
    return any(line_length(board, coord, d, side) >= WIN_LENGTH for d in DIRECTIONS)


def find_winning_move(board: Board, side: Side) -> Coordinate | None:
    """First empty cell (row-major) where ``side`` would complete five."""
    for coord in board.all_empty_cells():
        with board.probe(coord, side):
            won = check_win(board, coord, side)
        if won:
            return coord
    return None
