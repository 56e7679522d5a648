import math

from .game_logic import BOARD_SIZE


class InputMapper:
    """
    pointer position <-> cell address for a fixed cell size
    """
    def __init__(self, cell_width, cell_height):
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError(f"cell size must be positive, got {cell_width}x{cell_height}")
        self.cell_width = cell_width
        self.cell_height = cell_height

    @classmethod
    def for_surface(cls, width, height):
        # whole surface split into a 3x3 grid
        return cls(width / BOARD_SIZE, height / BOARD_SIZE)

    def cell_at(self, x, y):
        """
        (row, col) under a surface-local point; not clamped, the board rejects strays
        """
        row = math.floor(y / self.cell_height)
        col = math.floor(x / self.cell_width)
        return row, col

    def cell_origin(self, row, col):
        # top-left corner of the cell
        return col * self.cell_width, row * self.cell_height

    def cell_center(self, row, col):
        x, y = self.cell_origin(row, col)
        return x + self.cell_width / 2, y + self.cell_height / 2
