import numpy as np
import pytest

from connect_four.game.board import Board
from connect_four.utils import ROWS, COLS, GameResult, Mark, obeys_gravity


def test_new_board_is_empty(empty_board):
    assert empty_board.grid.shape == (ROWS, COLS)
    assert np.all(empty_board.grid == Mark.EMPTY.value)
    assert empty_board.move_count() == 0
    assert empty_board.get_valid_moves() == list(range(COLS))
    assert empty_board.outcome() == GameResult.IN_PROGRESS


def test_drop_settles_at_bottom(empty_board):
    assert empty_board.drop(3, Mark.X)
    assert empty_board.cell(ROWS - 1, 3) == Mark.X
    assert empty_board.last_move == (ROWS - 1, 3)

    assert empty_board.drop(3, Mark.O)
    assert empty_board.cell(ROWS - 2, 3) == Mark.O
    assert empty_board.move_count() == 2


@pytest.mark.parametrize("column", [-1, COLS, 100, "3", 2.0, None, True])
def test_drop_out_of_range_fails_without_change(empty_board, column):
    before = empty_board.snapshot()
    assert not empty_board.drop(column, Mark.X)
    assert not empty_board.is_valid_move(column)
    assert np.array_equal(empty_board.grid, before)


def test_drop_into_full_column_fails_without_change(empty_board):
    mark = Mark.X
    for _ in range(ROWS):
        assert empty_board.drop(0, mark)
        mark = mark.other()
    before = empty_board.snapshot()

    assert not empty_board.is_valid_move(0)
    assert not empty_board.drop(0, Mark.X)
    assert not empty_board.drop(0, Mark.O)
    assert np.array_equal(empty_board.grid, before)
    assert 0 not in empty_board.get_valid_moves()


def test_drop_rejects_empty_mark(empty_board):
    assert not empty_board.drop(2, Mark.EMPTY)
    assert empty_board.move_count() == 0


def test_drop_accepts_numpy_integers(empty_board):
    assert empty_board.drop(np.int64(4), Mark.O)
    assert empty_board.cell(ROWS - 1, 4) == Mark.O


def test_random_drops_keep_columns_stacked():
    rng = np.random.default_rng(1234)
    board = Board()
    mark = Mark.X
    for _ in range(200):
        if board.drop(int(rng.integers(-1, COLS + 1)), mark):
            mark = mark.other()
        assert obeys_gravity(board.grid)
    assert board.move_count() > 0


def test_vertical_win_needs_four_drops(empty_board):
    for _ in range(3):
        empty_board.drop(0, Mark.X)
    assert not empty_board.check_win(Mark.X)

    empty_board.drop(0, Mark.X)
    assert empty_board.check_win(Mark.X)
    assert not empty_board.check_win(Mark.O)
    assert empty_board.outcome() == GameResult.X_WIN


def test_horizontal_win(board_from_rows):
    board = board_from_rows(
        ".......",
        ".......",
        ".......",
        ".......",
        "OOO....",
        "OXXXX..",
    )
    assert board.check_win(Mark.X)
    assert not board.check_win(Mark.O)
    assert board.get_winning_line(Mark.X) == [(5, 1), (5, 2), (5, 3), (5, 4)]


def test_diagonal_up_win(board_from_rows):
    board = board_from_rows(
        ".......",
        ".......",
        "...X...",
        "..XO...",
        ".XOO...",
        "XOOO...",
    )
    assert board.check_win(Mark.X)
    assert not board.check_win(Mark.O)


def test_diagonal_down_win(board_from_rows):
    board = board_from_rows(
        ".......",
        ".......",
        "...X...",
        "...OX..",
        "...OOX.",
        "...OOOX",
    )
    assert board.check_win(Mark.X)
    assert not board.check_win(Mark.O)
    assert sorted(board.get_winning_line(Mark.X)) == [(2, 3), (3, 4), (4, 5), (5, 6)]


def test_three_in_a_row_is_not_a_win(board_from_rows):
    board = board_from_rows(
        ".......",
        ".......",
        ".......",
        "..XO...",
        ".XOO...",
        "XOOO...",
    )
    assert not board.check_win(Mark.X)
    assert not board.check_win(Mark.O)
    assert board.get_winning_line(Mark.X) == []


def test_broken_line_is_not_a_win(board_from_rows):
    board = board_from_rows(
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "XX.XX..",
    )
    assert not board.check_win(Mark.X)


def test_five_in_a_row_is_a_win(board_from_rows):
    board = board_from_rows(
        ".......",
        ".......",
        ".......",
        ".......",
        "OOOO...",
        "XXXXX..",
    )
    assert board.check_win(Mark.X)
    assert board.check_win(Mark.O)


def test_check_win_for_empty_mark_is_false(empty_board):
    assert not empty_board.check_win(Mark.EMPTY)


def test_full_board_without_line_is_a_draw(draw_board):
    assert draw_board.move_count() == ROWS * COLS
    assert draw_board.is_full()
    assert not draw_board.check_win(Mark.X)
    assert not draw_board.check_win(Mark.O)
    assert draw_board.get_valid_moves() == []
    assert draw_board.outcome() == GameResult.DRAW


def test_filling_the_board_by_drops_reaches_a_draw(empty_board, draw_rows):
    for row in reversed(draw_rows):
        for col, symbol in enumerate(row):
            assert empty_board.drop(col, Mark[symbol])
    assert empty_board.is_full()
    assert empty_board.outcome() == GameResult.DRAW


def test_board_with_one_empty_cell_is_not_full(board_from_rows, draw_rows):
    rows = list(draw_rows)
    rows[0] = rows[0][:6] + "."
    board = board_from_rows(*rows)
    assert not board.is_full()
    assert board.get_valid_moves() == [6]
    assert board.outcome() == GameResult.IN_PROGRESS


def test_snapshot_is_read_only_and_detached(empty_board):
    empty_board.drop(2, Mark.X)
    snap = empty_board.snapshot()
    assert not snap.flags.writeable
    with pytest.raises(ValueError):
        snap[0, 0] = Mark.O.value

    empty_board.drop(2, Mark.O)
    assert snap[ROWS - 2, 2] == Mark.EMPTY.value


def test_board_from_snapshot_is_independent(empty_board):
    empty_board.drop(5, Mark.O)
    trial = Board.from_snapshot(empty_board.snapshot())
    assert trial.drop(5, Mark.X)
    assert empty_board.move_count() == 1
    assert trial.move_count() == 2


def test_copy_is_independent(empty_board):
    empty_board.drop(1, Mark.X)
    clone = empty_board.copy()
    clone.drop(1, Mark.O)
    assert empty_board.move_count() == 1
    assert clone.last_move == (ROWS - 2, 1)


@pytest.mark.parametrize("grid", [
    np.zeros((ROWS, COLS + 1), dtype=np.int8),
    np.full((ROWS, COLS), 7, dtype=np.int8),
    np.full((ROWS, COLS), 257, dtype=np.int64),  # would wrap to X as int8
    np.full((ROWS, COLS), 1.7),
    [[300] * COLS for _ in range(ROWS)],
    [["X"] * COLS for _ in range(ROWS)],
])
def test_from_snapshot_rejects_bad_grids(grid):
    with pytest.raises(ValueError):
        Board.from_snapshot(grid)


def test_from_snapshot_rejects_floating_pieces():
    grid = np.zeros((ROWS, COLS), dtype=np.int8)
    grid[2, 3] = Mark.X.value
    with pytest.raises(ValueError):
        Board.from_snapshot(grid)


def test_reset_clears_the_board(empty_board):
    empty_board.drop(0, Mark.X)
    empty_board.reset()
    assert empty_board.move_count() == 0
    assert empty_board.last_move is None


def test_render_matches_grid(empty_board):
    empty_board.drop(0, Mark.X)
    lines = str(empty_board).split("\n")
    assert lines[ROWS - 1] == "X . . . . . ."
    assert lines[-1] == "1 2 3 4 5 6 7"


def test_from_snapshot_accepts_plain_lists():
    rows = [[0] * COLS for _ in range(ROWS)]
    rows[ROWS - 1][3] = Mark.O.value
    board = Board.from_snapshot(rows)
    assert board.grid.dtype == np.int8
    assert board.cell(ROWS - 1, 3) == Mark.O
