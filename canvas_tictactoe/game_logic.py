from collections import namedtuple
from enum import IntEnum


BOARD_SIZE = 3  # fixed 3x3 grid


class Cell(IntEnum):
    """
    tri-state cell value
    """
    EMPTY = 0
    CROSS = 1
    CIRCLE = -1

    @property
    def symbol(self):
        # one char for text dumps
        return {Cell.EMPTY: '.', Cell.CROSS: 'X', Cell.CIRCLE: 'O'}[self]

    def opponent(self):
        if self is Cell.EMPTY:
            raise ValueError("empty cell has no opponent")
        return Cell.CIRCLE if self is Cell.CROSS else Cell.CROSS


class Line(namedtuple("Line", "kind index cells")):
    """
    one scanned row, column or diagonal: kind, index, three (row, col) cells
    """
    __slots__ = ()

    @property
    def start(self):
        return self.cells[0]

    @property
    def end(self):
        return self.cells[-1]


Win = namedtuple("Win", "line mark")


def _scan_lines():
    # rows, then columns, then main diag, then anti-diag
    n = BOARD_SIZE
    lines = [Line("row", r, tuple((r, c) for c in range(n))) for r in range(n)]
    lines += [Line("column", c, tuple((r, c) for r in range(n))) for c in range(n)]
    lines.append(Line("diagonal", 0, tuple((i, i) for i in range(n))))
    lines.append(Line("anti-diagonal", 0, tuple((n - 1 - i, i) for i in range(n))))
    return tuple(lines)


LINES = _scan_lines()


class Board:
    """
    3x3 grid of cells: placement, fullness and win detection
    """
    def __init__(self):
        self.size = BOARD_SIZE
        self.reset()

    def reset(self):
        """
        clear every cell
        """
        self._grid = [[Cell.EMPTY for _ in range(self.size)]
                      for _ in range(self.size)]

    def _in_range(self, row, column):
        return 0 <= row < self.size and 0 <= column < self.size

    def get_cell(self, row, column):
        """
        cell value, or None when the address is off the board
        """
        if not self._in_range(row, column):
            return None
        return self._grid[row][column]

    def place(self, row, column, mark):
        """
        put mark on an empty cell
        returns: True if placed, False if off-board or occupied (board untouched)
        """
        mark = Cell(mark)
        if mark is Cell.EMPTY or self.get_cell(row, column) is not Cell.EMPTY:
            return False
        self._grid[row][column] = mark
        return True

    def is_full(self):
        """
        no empty cell left
        """
        return all(cell is not Cell.EMPTY for row in self._grid for cell in row)

    def lines(self):
        return LINES

    def check_win(self):
        """
        scan rows, cols, diags; first line holding three of one mark wins
        returns: Win(line, mark) or None
        """
        for line in LINES:
            values = [self._grid[r][c] for r, c in line.cells]
            for mark in (Cell.CROSS, Cell.CIRCLE):
                # count per mark instead of summing signed values
                if values.count(mark) == self.size:
                    return Win(line, mark)
        return None

    def rows(self):
        # snapshot for display
        return tuple(tuple(row) for row in self._grid)

    def __str__(self):
        return "\n".join("".join(cell.symbol for cell in row)
                         for row in self._grid)
