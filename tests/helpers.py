"""Board-building helpers shared by the test modules."""

from typing import Iterable, Tuple

from gomoku_engine.board_manager import Board
from gomoku_engine.models import Side


def place(board: Board, side: Side, coords: Iterable[Tuple[int, int]]) -> Board:
    """Place ``side`` stones on ``board`` at every coordinate in ``coords``."""
    for coord in coords:
        board.set(coord, side)
    return board


def fill_without_five(board: Board, leave_empty: Iterable[Tuple[int, int]] = ()) -> Board:
    """Fill the board so that no side has more than two in a row on any axis.

    Cells where ``(x // 2 + y)`` is even go to HUMAN (113 cells), the rest to
    AUTOMATED (112 cells). Coordinates in ``leave_empty`` stay empty.
    """
    skip = set(leave_empty)
    for y in range(board.size):
        for x in range(board.size):
            if (x, y) in skip:
                continue
            side = Side.HUMAN if (x // 2 + y) % 2 == 0 else Side.AUTOMATED
            board.set((x, y), side)
    return board


def within_radius(coord: Tuple[int, int], stones: Iterable[Tuple[int, int]], radius: int) -> bool:
    x, y = coord
    return any(max(abs(x - sx), abs(y - sy)) <= radius for sx, sy in stones)
