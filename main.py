import argparse
import logging
import random
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from canvas_tictactoe import config
from canvas_tictactoe.controller import GameController
from canvas_tictactoe.game_logic import Cell
from canvas_tictactoe.input_mapper import InputMapper
from canvas_tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)

FIRST_MARKS = {"cross": Cell.CROSS, "circle": Cell.CIRCLE, "random": None}

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the default dark theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# OPTIONS
# -----------------------------------------------------------------------------

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Click-to-play tic-tac-toe")
    parser.add_argument("--size", type=int, default=config.SURFACE_SIZE,
                        help="side of the square board in pixels (default: %(default)s)")
    parser.add_argument("--first", choices=config.FIRST_MARK_CHOICES,
                        default=config.DEFAULT_FIRST_MARK,
                        help="mark that opens every round (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random opening mark")
    parser.add_argument("--log-level", default=config.DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: %(default)s)")
    args = parser.parse_args(argv)
    if args.size < 3:
        parser.error("--size must be at least 3 pixels")
    return args


def build_controller(args) -> GameController:
    mapper = InputMapper.for_surface(args.size, args.size)
    return GameController(mapper, first_mark=FIRST_MARKS[args.first],
                          rng=random.Random(args.seed))

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(build_controller(args))
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
