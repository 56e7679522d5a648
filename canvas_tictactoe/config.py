from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# SURFACE
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
SURFACE_SIZE = 300          # px, square drawing surface

# -----------------------------------------------------------------------------
# DRAWING
# -----------------------------------------------------------------------------

BACKGROUND_COLOR = QColor("white")
GRID_COLOR = QColor("black")
CROSS_COLOR = QColor("blue")
CIRCLE_COLOR = QColor("darkgreen")

GRID_WIDTH = 1
MARK_WIDTH = 7
WIN_LINE_WIDTH = 12
MARK_INSET = 5              # gap between glyph and cell border

# -----------------------------------------------------------------------------
# OPTIONS
# -----------------------------------------------------------------------------

FIRST_MARK_CHOICES = ("cross", "circle", "random")
DEFAULT_FIRST_MARK = "random"
DEFAULT_LOG_LEVEL = "WARNING"
