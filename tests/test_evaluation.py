from gomoku_engine.ai.evaluation import evaluate_board, evaluate_position
from gomoku_engine.models import Side
from tests.helpers import place


def test_empty_board_scores_zero(board):
    assert evaluate_board(board) == 0


def test_single_center_stone(board):
    board.set((7, 7), Side.AUTOMATED)
    # 4 axes x 4 windows containing the stone, 10 each
    assert evaluate_board(board) == 160
    assert evaluate_board(board, Side.HUMAN) == -160


def test_corner_stone_only_sees_forward_windows(board):
    board.set((0, 0), Side.AUTOMATED)
    assert evaluate_board(board) == 40


def test_pair_scores_shared_windows(board):
    place(board, Side.AUTOMATED, [(7, 7), (8, 7)])
    # Horizontal: 10 + 100 + 100 + 100 + 10; other axes: 2 stones x 3 axes x 4 windows x 10
    assert evaluate_board(board) == 320 + 240


def test_mixed_windows_score_nothing(board):
    board.set((7, 7), Side.AUTOMATED)
    board.set((8, 7), Side.HUMAN)
    # Horizontal windows holding both stones cancel out entirely
    horizontal_auto_only = 10  # window starting at x=4
    horizontal_human_only = 10  # window starting at x=8
    other_axes = 3 * 4 * 10
    expected = (horizontal_auto_only + other_axes) - (horizontal_human_only + other_axes)
    assert evaluate_board(board) == expected == 0


def test_human_stones_subtract(board):
    place(board, Side.HUMAN, [(7, 7), (7, 8), (7, 9)])
    assert evaluate_board(board) < 0
    assert evaluate_board(board, Side.HUMAN) == -evaluate_board(board)


def test_position_score_on_empty_board(board):
    assert evaluate_position(board, (7, 7), Side.AUTOMATED) == 4


def test_position_score_counts_forward_run(board):
    place(board, Side.AUTOMATED, [(8, 7), (9, 7)])
    assert evaluate_position(board, (7, 7), Side.AUTOMATED) == 100 + 1 + 1 + 1


def test_position_score_ignores_negative_direction(board):
    place(board, Side.AUTOMATED, [(6, 7), (5, 7), (7, 6)])
    assert evaluate_position(board, (7, 7), Side.AUTOMATED) == 4


def test_position_score_anti_diagonal_and_edge(board):
    place(board, Side.HUMAN, [(1, 13), (2, 12)])
    assert evaluate_position(board, (0, 14), Side.HUMAN) == 100 + 3
    assert evaluate_position(board, (14, 14), Side.HUMAN) == 4
