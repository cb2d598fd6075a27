import unittest

from gomoku_engine.board_manager import Board
from gomoku_engine.errors import UndoUnavailableError
from gomoku_engine.history import MoveHistory
from gomoku_engine.models import Move, Position, Side


def _move(x: int, y: int, side: Side, number: int) -> Move:
    return Move(position=Position(x=x, y=y), side=side, move_number=number)


class TestMoveHistory(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board()
        self.history = MoveHistory()
        moves = [
            _move(7, 7, Side.HUMAN, 1),
            _move(8, 8, Side.AUTOMATED, 2),
            _move(6, 7, Side.HUMAN, 3),
            _move(6, 6, Side.AUTOMATED, 4),
        ]
        for move in moves:
            self.board.set(move.position.to_coordinate(), move.side)
            self.history.record(move)

    def test_rollback_pops_last_pair(self) -> None:
        removed = self.history.rollback(self.board)

        self.assertEqual([m.move_number for m in removed], [4, 3])
        self.assertEqual(len(self.history), 2)
        self.assertEqual(self.history.undo_budget, 2)
        self.assertTrue(self.board.is_empty((6, 6)))
        self.assertTrue(self.board.is_empty((6, 7)))
        self.assertFalse(self.board.is_empty((8, 8)))

    def test_two_rollbacks_clear_four_moves(self) -> None:
        self.history.rollback(self.board)
        self.history.rollback(self.board)

        self.assertEqual(self.history.undo_budget, 1)
        self.assertEqual(len(self.history), 0)
        self.assertEqual(self.board.stone_count(), 0)

    def test_rollback_needs_two_moves(self) -> None:
        self.history.rollback(self.board)
        self.history.rollback(self.board)
        self.history.record(_move(0, 0, Side.HUMAN, 1))
        self.board.set((0, 0), Side.HUMAN)

        with self.assertRaises(UndoUnavailableError) as ctx:
            self.history.rollback(self.board)
        self.assertEqual(ctx.exception.reason, "history")
        self.assertEqual(self.history.undo_budget, 1)
        self.assertFalse(self.board.is_empty((0, 0)))

    def test_exhausted_budget_is_a_no_op(self) -> None:
        history = MoveHistory(undo_budget=0)
        history.record(_move(1, 1, Side.HUMAN, 1))
        history.record(_move(2, 2, Side.AUTOMATED, 2))
        before = history.moves

        with self.assertRaises(UndoUnavailableError) as ctx:
            history.rollback(self.board)
        self.assertEqual(ctx.exception.reason, "budget")
        self.assertEqual(history.moves, before)
        self.assertFalse(history.can_undo())

    def test_clear_restores_budget(self) -> None:
        self.history.rollback(self.board)
        self.history.clear()
        self.assertEqual(len(self.history), 0)
        self.assertEqual(self.history.undo_budget, 3)
        self.assertIsNone(self.history.last)

    def test_moves_view_is_immutable(self) -> None:
        self.assertIsInstance(self.history.moves, tuple)
        self.assertEqual(self.history.last.move_number, 4)


if __name__ == "__main__":
    unittest.main()
