# tests/test_board.py
from __future__ import annotations

import copy

from tetris_board import can_place, clear_full_lines, merge, new_board, top_row_occupied
from tetris_piece import COLS, ROWS, SHAPES, Piece


def _fill_row(board, y, value=1):
    board[y] = [value] * COLS


def test_new_board_is_empty_and_sized() -> None:
    board = new_board()
    assert len(board) == ROWS
    assert all(len(row) == COLS for row in board)
    assert not any(any(row) for row in board)


def test_can_place_rejects_walls_floor_and_ceiling() -> None:
    board = new_board()
    o = SHAPES[1]
    assert can_place(board, o, 0, 0)
    assert can_place(board, o, COLS - 2, ROWS - 2)
    assert not can_place(board, o, -1, 0)
    assert not can_place(board, o, COLS - 1, 0)
    assert not can_place(board, o, 0, ROWS - 1)
    assert not can_place(board, o, 0, -1)


def test_can_place_ignores_empty_shape_cells() -> None:
    board = new_board()
    t = SHAPES[2]  # ((0,3,0),(3,3,3))
    board[0][0] = 7
    assert can_place(board, t, 0, 0)
    board[1][0] = 7
    assert not can_place(board, t, 0, 0)


def test_can_place_true_implies_cells_in_bounds_and_free() -> None:
    board = new_board()
    board[10][3] = board[19][0] = board[5][9] = 4
    for shape in SHAPES:
        for y in range(-2, ROWS + 1):
            for x in range(-3, COLS + 1):
                if not can_place(board, shape, x, y):
                    continue
                for bx, by in Piece(shape, x, y, 1).cells():
                    assert 0 <= bx < COLS and 0 <= by < ROWS
                    assert board[by][bx] == 0


def test_merge_writes_piece_color() -> None:
    board = new_board()
    piece = Piece.spawn(SHAPES[2])
    piece.y = 5
    merge(board, piece)
    assert board[5][piece.x + 1] == 3
    assert board[6][piece.x:piece.x + 3] == [3, 3, 3]
    assert board[5][piece.x] == 0
    assert sum(v != 0 for row in board for v in row) == 4


def test_top_row_occupied() -> None:
    board = new_board()
    assert not top_row_occupied(board)
    board[1][4] = 2
    assert not top_row_occupied(board)
    board[0][9] = 2
    assert top_row_occupied(board)


def test_clear_with_no_full_rows_leaves_board_unchanged() -> None:
    board = new_board()
    board[19] = [1] * (COLS - 1) + [0]
    board[7][2] = 5
    before = copy.deepcopy(board)
    assert clear_full_lines(board) == 0
    assert board == before


def test_clear_single_row_shifts_rows_above_down() -> None:
    board = new_board()
    for y in range(ROWS):
        board[y][0] = (y % 7) + 1
    _fill_row(board, 12, 6)
    before = copy.deepcopy(board)

    assert clear_full_lines(board) == 1
    assert len(board) == ROWS
    assert board[0] == [0] * COLS
    assert board[1:13] == before[0:12]
    assert board[13:] == before[13:]


def test_clear_non_adjacent_rows() -> None:
    board = new_board()
    _fill_row(board, 19)
    _fill_row(board, 17)
    board[18][3] = 4
    board[16][8] = 5

    assert clear_full_lines(board) == 2
    assert board[19][3] == 4
    assert board[18][8] == 5
    assert board[0] == board[1] == [0] * COLS


def test_clear_adjacent_rows() -> None:
    board = new_board()
    for y in (16, 17, 18, 19):
        _fill_row(board, y)
    board[15][0] = 2
    assert clear_full_lines(board) == 4
    assert board[19][0] == 2
    assert sum(v != 0 for row in board for v in row) == 1


def test_clear_all_rows_full_empties_board() -> None:
    board = [[3] * COLS for _ in range(ROWS)]
    assert clear_full_lines(board) == ROWS
    assert board == new_board()
