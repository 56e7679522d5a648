import logging
import random
from enum import Enum

from .game_logic import Board, Cell
from .instructions import ClearSurface, DrawGrid, DrawMark, DrawWinLine

logger = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    OVER = "over"  # won or full


class GameController:
    """
    turn order and game flow; every click returns the drawing it caused
    """
    def __init__(self, mapper, board=None, first_mark=None, rng=None):
        """
        first_mark: Cell.CROSS / Cell.CIRCLE, or None to draw one from rng
        rng: random.Random used once for the starting mark (fresh one if omitted)
        """
        self.mapper = mapper
        self.board = board if board is not None else Board()
        if first_mark is None:
            first_mark = (rng or random.Random()).choice((Cell.CROSS, Cell.CIRCLE))
        first_mark = Cell(first_mark)
        if first_mark is Cell.EMPTY:
            raise ValueError("first mark must be CROSS or CIRCLE")
        self.first_mark = first_mark
        self.current_mark = first_mark
        self.state = GameState.IN_PROGRESS
        self.winner = None  # last Win, if any

    @property
    def is_over(self):
        return self.state is GameState.OVER

    def start(self):
        """
        fresh round: empty board, starting mark restored
        """
        self.board.reset()
        self.current_mark = self.first_mark
        self.state = GameState.IN_PROGRESS
        self.winner = None
        logger.debug("new round, %s to play", self.current_mark.name)
        return [ClearSurface(),
                DrawGrid(self.mapper.cell_width, self.mapper.cell_height)]

    def click(self, x, y):
        """
        handle one pointer click at surface-local (x, y)
        returns: list of drawing instructions (empty if the click was ignored)
        """
        # any click after the end just restarts
        if self.is_over:
            return self.start()

        row, col = self.mapper.cell_at(x, y)
        mark = self.current_mark
        if not self.board.place(row, col, mark):
            logger.debug("ignored click at (%s, %s) -> cell (%d, %d)", x, y, row, col)
            return []

        ox, oy = self.mapper.cell_origin(row, col)
        out = [DrawMark(mark, row, col, ox, oy)]
        logger.debug("%s placed at (%d, %d)\n%s", mark.name, row, col, self.board)

        win = self.board.check_win()
        if win:
            self.winner = win
            self.state = GameState.OVER
            out.append(DrawWinLine(win.mark, win.line.start, win.line.end,
                                   self.mapper.cell_center(*win.line.start),
                                   self.mapper.cell_center(*win.line.end)))
            logger.debug("%s wins on %s %d", win.mark.name, win.line.kind, win.line.index)
        elif self.board.is_full():
            self.state = GameState.OVER
            logger.debug("board full, draw")
        else:
            self.current_mark = mark.opponent()
        return out
