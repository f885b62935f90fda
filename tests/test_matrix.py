import numpy as np

from brickfall.game import matrix
from brickfall.game.matrix import SCORE_PER_LINE

DOT = np.array([[3]], dtype=np.int8)
BAR = np.array([[0, 0], [2, 2]], dtype=np.int8)


def test_intersects_false_inside_empty_board(empty_board):
    assert not matrix.intersects(empty_board, BAR, 0, 0)
    assert not matrix.intersects(empty_board, BAR, 3, 4)


def test_intersects_out_of_bounds_on_every_side(empty_board):
    assert matrix.intersects(empty_board, DOT, -1, 0)
    assert matrix.intersects(empty_board, DOT, 5, 0)
    assert matrix.intersects(empty_board, DOT, 0, -1)
    assert matrix.intersects(empty_board, DOT, 0, 6)


def test_intersects_ignores_empty_shape_cells_outside_board(empty_board):
    # Row 0 of BAR is empty, so it may hang above the board
    assert not matrix.intersects(empty_board, BAR, 0, -1)
    assert matrix.intersects(empty_board, BAR, 0, 5)


def test_intersects_occupied_cell(empty_board):
    board = empty_board.copy()
    board[2, 3] = 1
    assert matrix.intersects(board, DOT, 3, 2)
    assert not matrix.intersects(board, DOT, 2, 2)


def test_merge_writes_only_covered_cells(empty_board):
    board = empty_board.copy()
    board[0, 0] = 7
    merged = matrix.merge(board, BAR, 1, 2)
    assert merged[3, 1] == 2 and merged[3, 2] == 2
    assert merged[0, 0] == 7
    assert np.count_nonzero(merged) == 3
    # input untouched
    assert np.count_nonzero(board) == 1


def test_merge_is_idempotent(empty_board):
    once = matrix.merge(empty_board, BAR, 2, 1)
    twice = matrix.merge(once, BAR, 2, 1)
    assert np.array_equal(once, twice)


def test_clear_without_full_rows_is_noop():
    board = np.array([[0, 0, 0], [1, 0, 1], [2, 2, 0]], dtype=np.int8)
    result = matrix.clear_full_rows(board)
    assert result.lines_removed == 0
    assert result.score_bonus == 0
    assert np.array_equal(result.new_matrix, board)


def test_clear_single_bottom_row():
    board = np.zeros((4, 3), dtype=np.int8)
    board[3] = [1, 1, 1]
    result = matrix.clear_full_rows(board)
    assert result.lines_removed == 1
    assert result.new_matrix[3].tolist() == [0, 0, 0]
    assert np.array_equal(result.new_matrix[0:3], board[0:3])
    assert result.score_bonus == SCORE_PER_LINE


def test_clear_non_adjacent_rows_keeps_order():
    board = np.array(
        [
            [0, 0, 4],
            [5, 5, 5],
            [1, 0, 0],
            [6, 6, 6],
            [0, 2, 0],
        ],
        dtype=np.int8,
    )
    result = matrix.clear_full_rows(board, score_per_line=10)
    assert result.lines_removed == 2
    assert result.score_bonus == 10 * 4
    assert result.new_matrix.tolist() == [
        [0, 0, 0],
        [0, 0, 0],
        [0, 0, 4],
        [1, 0, 0],
        [0, 2, 0],
    ]


def test_clear_four_rows_is_quadratic():
    board = np.ones((5, 2), dtype=np.int8)
    board[0] = [0, 3]
    result = matrix.clear_full_rows(board)
    assert result.lines_removed == 4
    assert result.score_bonus == SCORE_PER_LINE * 16
    assert result.new_matrix[4].tolist() == [0, 3]
    assert not result.new_matrix[:4].any()


def test_copy_is_independent():
    board = np.zeros((2, 2), dtype=np.int8)
    dup = matrix.copy(board)
    dup[0, 0] = 1
    assert board[0, 0] == 0
    copies = matrix.deep_copy_list([board, board])
    copies[0][1, 1] = 4
    assert copies[1][1, 1] == 0


def test_merge_keeps_wide_color_ids():
    board = np.zeros((3, 3), dtype=np.int64)
    merged = matrix.merge(board, np.array([[200]]), 1, 1)
    assert merged.dtype == np.int64
    assert merged[1, 1] == 200


def test_merge_widens_narrow_board_for_wide_shape(empty_board):
    merged = matrix.merge(empty_board, np.array([[300]], dtype=np.int32), 0, 0)
    assert merged[0, 0] == 300


def test_clear_keeps_wide_color_ids():
    board = np.array([[130, 0], [1, 1]], dtype=np.int32)
    result = matrix.clear_full_rows(board)
    assert result.new_matrix.dtype == np.int32
    assert result.new_matrix.tolist() == [[0, 0], [130, 0]]


def test_copy_keeps_dtype():
    board = np.full((2, 2), 1000, dtype=np.int32)
    assert matrix.copy(board).dtype == np.int32
    assert matrix.copy(board)[0, 0] == 1000
