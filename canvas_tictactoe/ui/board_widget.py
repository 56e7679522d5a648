from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtGui import QPainter

from ..game_logic import BOARD_SIZE
from ..instructions import ClearSurface
from .renderer import Renderer


class BoardWidget(QWidget):
    """
    drawing surface: feeds clicks to the controller, replays what it asks to draw
    """
    board_changed = Signal()  # emitted after a click changed the picture

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        mapper = controller.mapper
        self.renderer = Renderer(mapper.cell_width, mapper.cell_height)
        side = QSize(int(mapper.cell_width * BOARD_SIZE), int(mapper.cell_height * BOARD_SIZE))
        self.setFixedSize(side)
        self.display_list = []          # everything drawn since last clear
        self.apply(controller.start())

    def sizeHint(self):
        return self.size()

    def apply(self, instructions):
        """
        append instructions to the display list and schedule a repaint
        returns: True if anything new is to be drawn
        """
        if not instructions:
            return False
        for ins in instructions:
            # a clear wipes everything queued before it
            if isinstance(ins, ClearSurface):
                self.display_list = []
            self.display_list.append(ins)
        self.update()
        return True

    def new_game(self):
        self.apply(self.controller.start())
        self.board_changed.emit()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self.renderer.paint(painter, self.display_list)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        map click to the controller; ignored clicks draw nothing
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        if self.apply(self.controller.click(pos.x(), pos.y())):
            self.board_changed.emit()
