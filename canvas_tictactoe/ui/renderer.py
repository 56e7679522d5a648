from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QPainter, QPen

from .. import config
from ..game_logic import BOARD_SIZE, Cell
from ..instructions import ClearSurface, DrawGrid, DrawMark, DrawWinLine


class Renderer:
    """
    paints controller instructions with a QPainter; keeps no game state
    """
    def __init__(self, cell_width, cell_height):
        self.cell_width = cell_width
        self.cell_height = cell_height

    @staticmethod
    def mark_color(mark):
        return config.CROSS_COLOR if mark is Cell.CROSS else config.CIRCLE_COLOR

    def paint(self, painter, instructions):
        painter.setRenderHint(QPainter.Antialiasing, True)
        for ins in instructions:
            if isinstance(ins, ClearSurface):
                self.clear(painter)
            elif isinstance(ins, DrawGrid):
                self.draw_grid(painter)
            elif isinstance(ins, DrawMark):
                if ins.mark is Cell.CROSS:
                    self.draw_cross(painter, ins.x, ins.y)
                else:
                    self.draw_circle(painter, ins.x, ins.y)
            elif isinstance(ins, DrawWinLine):
                self.draw_win_line(painter, ins)
            else:
                raise TypeError(f"unknown drawing instruction: {ins!r}")

    def clear(self, painter):
        w, h = self.cell_width * BOARD_SIZE, self.cell_height * BOARD_SIZE
        painter.fillRect(QRectF(0, 0, w, h), config.BACKGROUND_COLOR)

    def draw_grid(self, painter):
        # outer frame + every cell outline
        painter.setPen(QPen(config.GRID_COLOR, config.GRID_WIDTH))
        painter.setBrush(Qt.NoBrush)
        cw, ch = self.cell_width, self.cell_height
        painter.drawRect(QRectF(0, 0, cw * BOARD_SIZE, ch * BOARD_SIZE))
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                painter.drawRect(QRectF(c * cw, r * ch, cw, ch))

    def draw_cross(self, painter, x, y):
        off = config.MARK_INSET
        cw, ch = self.cell_width, self.cell_height
        painter.setPen(QPen(config.CROSS_COLOR, config.MARK_WIDTH))
        # two crossing strokes
        painter.drawLine(QPointF(x + off, y + off), QPointF(x + cw - off, y + ch - off))
        painter.drawLine(QPointF(x + cw - off, y + off), QPointF(x + off, y + ch - off))

    def draw_circle(self, painter, x, y):
        rad = min(self.cell_width, self.cell_height) / 2 - config.MARK_INSET
        painter.setPen(QPen(config.CIRCLE_COLOR, config.MARK_WIDTH))
        painter.setBrush(Qt.NoBrush)
        painter.drawEllipse(QPointF(x + self.cell_width / 2, y + self.cell_height / 2), rad, rad)

    def draw_win_line(self, painter, ins):
        # opposite mark's colour so it shows over the winning glyphs
        color = self.mark_color(ins.mark.opponent())
        painter.setPen(QPen(color, config.WIN_LINE_WIDTH, Qt.SolidLine, Qt.RoundCap))
        painter.drawLine(QPointF(*ins.start_point), QPointF(*ins.end_point))
