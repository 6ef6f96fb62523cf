from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Signal, Slot


class GameWindow(QMainWindow):
    """
    main window: board, status line, game menu
    """
    closed = Signal()                 # window went away
    new_game_requested = Signal()

    def __init__(self, rows=3, columns=3, first_mark='X'):
        """
        init ui widgets, signals
        """
        super().__init__()
        self.board_widget = BoardWidget(rows, columns, first_mark, parent=self)
        self.is_closed = False
        self._setup_ui()
        self.show_message("Starting game...")

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self._create_bottom_controls()     # status line
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.resize(420, 480)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(lambda: self.new_game_requested.emit())
        self.new_game_action.setEnabled(False)   # only once a game ends
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        hl.addWidget(self.message_label)

    @Slot(str)
    def show_message(self, text, is_error=False,
                     is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def set_game_over(self, over):
        # new game only makes sense after a result
        self.new_game_action.setEnabled(over)
        if over:
            self.board_widget.set_accept_clicks(False)

    def closeEvent(self, event):
        # wake anything waiting on a click
        self.is_closed = True
        self.board_widget.set_accept_clicks(False)
        self.closed.emit()
        event.accept()
