"""Board model for the Gomoku engine.

The grid is a 15x15 numpy array indexed ``grid[y, x]`` holding
:class:`CellState` values. Only the owner (the controller, or an AI probing
a position) mutates it, and only through :meth:`Board.set`,
:meth:`Board.clear` and :meth:`Board.probe`.

Row-major scan order (y outer, x inner) is the tie-break order for every
strategy, so every method that returns several coordinates returns them in
that order.
"""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np

from .errors import OccupiedCellError, OutOfBoundsError
from .models import BOARD_SIZE, CellState, Coordinate, Side

__all__ = ["Board"]


class Board:
    """15x15 grid of cell states."""

    size: int = BOARD_SIZE

    def __init__(self, grid: np.ndarray | None = None) -> None:
        if grid is None:
            grid = np.zeros((self.size, self.size), dtype=np.int8)
        elif grid.shape != (self.size, self.size):
            raise ValueError(f"Board grid must be {self.size}x{self.size}, got {grid.shape}")
        self.grid: np.ndarray = grid

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @classmethod
    def in_bounds(cls, x: int, y: int) -> bool:
        return 0 <= x < cls.size and 0 <= y < cls.size

    def _require_in_bounds(self, coord: Coordinate) -> None:
        x, y = coord
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y)

    def get(self, coord: Coordinate) -> CellState:
        self._require_in_bounds(coord)
        x, y = coord
        return CellState(int(self.grid[y, x]))

    def is_empty(self, coord: Coordinate) -> bool:
        self._require_in_bounds(coord)
        x, y = coord
        return self.grid[y, x] == CellState.EMPTY

    def set(self, coord: Coordinate, side: Side) -> None:
        """Occupy an empty cell.

        Raises:
            OutOfBoundsError: If the coordinate is off the grid.
            OccupiedCellError: If the cell already holds a stone.
        """
        self._require_in_bounds(coord)
        x, y = coord
        if self.grid[y, x] != CellState.EMPTY:
            raise OccupiedCellError(x, y, context={"occupant": CellState(int(self.grid[y, x])).name})
        self.grid[y, x] = CellState.of(side)

    def clear(self, coord: Coordinate) -> None:
        """Return a cell to EMPTY (undo and probe reversion)."""
        self._require_in_bounds(coord)
        x, y = coord
        self.grid[y, x] = CellState.EMPTY

    @contextmanager
    def probe(self, coord: Coordinate, side: Side) -> Iterator[Board]:
        """Tentatively place ``side`` at ``coord`` for the duration of the block.

        The stone is removed on every exit path, so speculative evaluation
        never leaves residual state on the board.
        """
        self.set(coord, side)
        try:
            yield self
        finally:
            self.clear(coord)

    # ------------------------------------------------------------------
    # Scans
    # ------------------------------------------------------------------

    def all_empty_cells(self) -> list[Coordinate]:
        # argwhere yields (y, x) rows in C order, i.e. row-major scan order
        return [(int(x), int(y)) for y, x in np.argwhere(self.grid == CellState.EMPTY)]

    def stone_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def is_full(self) -> bool:
        return bool(np.all(self.grid != CellState.EMPTY))

    def candidate_moves(self, radius: int = 2) -> list[Coordinate]:
        """Empty cells within a square neighbourhood of any stone.

        A cell qualifies when some occupied cell lies within ``radius`` of it
        along both axes (Chebyshev distance). Returns an empty list when the
        board has no stones.
        """
        occupied = self.grid != CellState.EMPTY
        if not occupied.any():
            return []

        padded = np.pad(occupied, radius, constant_values=False)
        near = np.zeros_like(occupied)
        span = self.size
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                near |= padded[radius + dy:radius + dy + span, radius + dx:radius + dx + span]

        return [(int(x), int(y)) for y, x in np.argwhere(near & ~occupied)]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        self.grid.fill(CellState.EMPTY)

    def copy(self) -> Board:
        return Board(self.grid.copy())

    def to_rows(self) -> list[list[int]]:
        return self.grid.astype(int).tolist()

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        return cls(np.array(rows, dtype=np.int8))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"Board(stones={self.stone_count()})"
