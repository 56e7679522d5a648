import pytest

from canvas_tictactoe.game_logic import Board, Cell, LINES


@pytest.fixture
def board():
    return Board()


def test_fresh_board_is_empty(board):
    assert all(board.get_cell(r, c) is Cell.EMPTY for r in range(3) for c in range(3))
    assert not board.is_full()
    assert board.check_win() is None


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (-1, 78), (78, 78)])
def test_get_cell_off_board_is_none(board, row, col):
    assert board.get_cell(row, col) is None


def test_place_sets_cell(board):
    assert board.place(1, 1, Cell.CROSS)
    assert board.get_cell(1, 1) is Cell.CROSS
    assert board.place(0, 0, Cell.CIRCLE)
    assert board.get_cell(0, 0) is Cell.CIRCLE


def test_place_on_occupied_cell_fails(board):
    # same cell twice with different marks
    assert board.place(1, 1, Cell.CROSS)
    before = board.rows()
    assert not board.place(1, 1, Cell.CIRCLE)
    assert board.get_cell(1, 1) is Cell.CROSS
    assert board.rows() == before


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 1), (1, 3), (0, -2)])
def test_place_off_board_fails(board, row, col):
    assert not board.place(row, col, Cell.CROSS)
    assert board.rows() == Board().rows()


def test_place_empty_mark_is_rejected(board):
    assert not board.place(0, 0, Cell.EMPTY)
    assert board.get_cell(0, 0) is Cell.EMPTY


def test_reset_twice_same_as_once(board):
    board.place(0, 0, Cell.CROSS); board.place(2, 2, Cell.CIRCLE)
    board.reset()
    once = board.rows()
    board.reset()
    assert board.rows() == once == Board().rows()


def test_lines_scan_order():
    assert Board().lines() == LINES
    kinds = [line.kind for line in LINES]
    assert kinds == ["row"] * 3 + ["column"] * 3 + ["diagonal", "anti-diagonal"]
    assert LINES[-1].cells == ((2, 0), (1, 1), (0, 2))


@pytest.mark.parametrize("line", LINES, ids=lambda ln: f"{ln.kind}{ln.index}")
@pytest.mark.parametrize("mark", [Cell.CROSS, Cell.CIRCLE])
def test_every_full_line_wins(line, mark):
    board = Board()
    for r, c in line.cells:
        board.place(r, c, mark)
    win = board.check_win()
    assert win is not None
    assert win.line == line
    assert win.mark is mark


def test_mixed_line_does_not_win(board):
    board.place(0, 0, Cell.CROSS); board.place(0, 1, Cell.CROSS); board.place(0, 2, Cell.CIRCLE)
    assert board.check_win() is None


def test_row_of_crosses(board):
    for c in range(3):
        board.place(0, c, Cell.CROSS)
    win = board.check_win()
    assert win.line.kind == "row" and win.line.index == 0
    assert win.mark is Cell.CROSS


def test_anti_diagonal_of_circles(board):
    for r, c in [(2, 0), (1, 1), (0, 2)]:
        board.place(r, c, Cell.CIRCLE)
    win = board.check_win()
    assert win.line.kind == "anti-diagonal"
    assert win.line.start == (2, 0) and win.line.end == (0, 2)
    assert win.mark is Cell.CIRCLE


def test_full_board_without_winner(board):
    # X O X / X O O / O X X
    layout = ["XOX", "XOO", "OXX"]
    for r, row in enumerate(layout):
        for c, ch in enumerate(row):
            board.place(r, c, Cell.CROSS if ch == "X" else Cell.CIRCLE)
    assert board.is_full()
    assert board.check_win() is None


def test_first_winning_line_is_reported(board):
    # row 0 and column 0 both complete; rows are scanned first
    for r, c in [(0, 0), (0, 1), (0, 2), (1, 0), (2, 0)]:
        board.place(r, c, Cell.CROSS)
    win = board.check_win()
    assert (win.line.kind, win.line.index) == ("row", 0)


def test_str_dump(board):
    board.place(0, 0, Cell.CROSS); board.place(1, 1, Cell.CIRCLE)
    assert str(board) == "X..\n.O.\n..."


def test_opponent():
    assert Cell.CROSS.opponent() is Cell.CIRCLE
    assert Cell.CIRCLE.opponent() is Cell.CROSS
    with pytest.raises(ValueError):
        Cell.EMPTY.opponent()
