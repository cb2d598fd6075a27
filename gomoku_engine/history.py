"""Move history and the bounded undo ledger."""

from __future__ import annotations

import logging

from .board_manager import Board
from .errors import UndoUnavailableError
from .models import INITIAL_UNDO_BUDGET, Move

logger = logging.getLogger(__name__)

# Undo always retracts one move per side as a unit
UNDO_PAIR = 2


class MoveHistory:
    """Append-only move log with a limited number of two-move rollbacks."""

    def __init__(self, undo_budget: int = INITIAL_UNDO_BUDGET) -> None:
        if undo_budget < 0:
            raise ValueError("undo_budget must be non-negative")
        self._initial_budget = undo_budget
        self._moves: list[Move] = []
        self.undo_budget: int = undo_budget

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def last(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def __len__(self) -> int:
        return len(self._moves)

    def record(self, move: Move) -> None:
        self._moves.append(move)

    def can_undo(self) -> bool:
        return self.undo_budget > 0 and len(self._moves) >= UNDO_PAIR

    def rollback(self, board: Board) -> list[Move]:
        """Pop the last two moves, clear their cells and spend one undo.

        Returns:
            The removed moves, most recent first.

        Raises:
            UndoUnavailableError: If the budget is spent or fewer than two
                moves are recorded. Nothing is mutated in that case.
        """
        if self.undo_budget <= 0:
            raise UndoUnavailableError("No undos left", reason="budget")
        if len(self._moves) < UNDO_PAIR:
            raise UndoUnavailableError(
                "Need two recorded moves to undo",
                reason="history",
                context={"recorded": len(self._moves)},
            )

        removed = [self._moves.pop() for _ in range(UNDO_PAIR)]
        for move in removed:
            board.clear(move.position.to_coordinate())
        self.undo_budget -= 1
        logger.debug(
            "Rolled back %s, %d undo(s) left",
            ", ".join(m.position.to_label() for m in removed),
            self.undo_budget,
        )
        return removed

    def clear(self) -> None:
        self._moves.clear()
        self.undo_budget = self._initial_budget
