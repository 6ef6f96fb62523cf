import logging

from PySide6.QtCore import QEventLoop

from ..exceptions import ViewClosedError
from ..views.base import GameView
from .main_window import GameWindow

logger = logging.getLogger(__name__)


class QtView(GameView):
    """
    window frontend; get_user_input waits for a click in a local event loop
    so the controller's turn loop runs unchanged on the gui thread
    """
    def __init__(self, rows=3, columns=3, first_mark='X', window=None):
        if window is None:
            window = GameWindow(rows, columns, first_mark)
        self.window = window

    @property
    def board_widget(self):
        return self.window.board_widget

    def clear(self):
        """
        reset window state before the next game
        """
        self.board_widget.set_winner(None)
        self.window.set_game_over(False)

    def display_grid(self, grid):
        self.board_widget.set_grid(grid)

    def display_message(self, player):
        self.window.show_message(f"{player.name}'s turn ({player.mark})", is_turn=True)

    def display_error_message(self):
        self.window.show_message("Cell unavailable, pick another one.", is_error=True)

    def get_user_input(self):
        """
        block until a cell is clicked
        returns: (row, col) ints
        raises: ViewClosedError if the window closes first
        """
        if self.window.is_closed:
            raise ViewClosedError("window already closed")
        picked = []
        loop = QEventLoop()

        def on_click(row, col):
            picked.append((row, col))
            loop.quit()

        def on_close():
            loop.quit()

        self.board_widget.cell_clicked.connect(on_click)
        self.window.closed.connect(on_close)
        self.board_widget.set_accept_clicks(True)
        try:
            loop.exec()
        finally:
            self.board_widget.set_accept_clicks(False)
            self.board_widget.cell_clicked.disconnect(on_click)
            self.window.closed.disconnect(on_close)

        if not picked:
            raise ViewClosedError("window closed while waiting for a move")
        logger.debug("clicked cell %s", picked[0])
        return picked[0]

    def display_winner(self, player):
        self.board_widget.set_winner(player.mark)
        self.window.show_message(f"{player.name} ({player.mark}) wins!", is_success=True)
        self.window.set_game_over(True)

    def display_draw(self):
        self.window.show_message("It's a draw!", is_success=True)
        self.window.set_game_over(True)
