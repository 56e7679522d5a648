import logging

from ..game_logic import Cell
from ..ui.board_widget import BoardWidget
from .. import config

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

MARK_NAMES = {Cell.CROSS: "cross", Cell.CIRCLE: "circle"}


class TicTacToeWindow(QMainWindow):
    """
    main window: board surface, menu and status line
    """
    def __init__(self, controller):
        """
        init ui widgets, signals
        """
        super().__init__()
        self.controller = controller
        self.board_widget = BoardWidget(controller, parent=self)
        self._setup_ui()
        self._refresh_status()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QPushButton { padding: 4px 12px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 0, Qt.AlignCenter)
        self.board_widget.board_changed.connect(self._refresh_status)

        self._create_bottom_controls()     # status + button
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("New Game"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success:   style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot()
    def _refresh_status(self):
        # describe whatever the controller is in now
        ctl = self.controller
        if ctl.winner:
            name = MARK_NAMES[ctl.winner.mark]
            self._update_message(f"{name} wins! click to play again", is_success=True)
        elif ctl.is_over:
            self._update_message("it's a draw! click to play again", is_success=True)
        else:
            self._update_message(f"{MARK_NAMES[ctl.current_mark]}'s turn", is_turn=True)

    @Slot()
    def reset_game(self):
        logger.debug("new game requested from the window")
        self.board_widget.new_game()
