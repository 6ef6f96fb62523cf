import logging
import sys

from .config import GameConfig
from .controller import GameController
from .exceptions import ViewClosedError
from .views.console import ConsoleView

logger = logging.getLogger(__name__)


def run_console(config):
    """
    play one game in the terminal
    """
    print("--- Welcome to Tic-Tac-Toe ---")
    controller = GameController.from_config(config, ConsoleView())
    try:
        controller.play()
    except (KeyboardInterrupt, EOFError):
        print("\n[!] Game interrupted by user.")
        return 1
    return 0


def run_qt(config):
    """
    open the window and keep starting games until it is closed
    """
    # Qt only loaded for the window view
    from PySide6.QtCore import QTimer
    from PySide6.QtWidgets import QApplication
    from .ui.qt_view import QtView
    from .ui.theme import apply_default_palette

    app = QApplication.instance() or QApplication(sys.argv)
    apply_default_palette(app)

    view = QtView(config.rows, config.columns, config.player1_mark)

    def start_game():
        view.clear()
        controller = GameController.from_config(config, view)
        try:
            controller.play()
        except ViewClosedError:
            logger.info("window closed mid-game")

    view.window.new_game_requested.connect(start_game)
    view.window.show()
    # start once the event loop is running
    QTimer.singleShot(0, start_game)
    return app.exec()


def main(argv=None):
    config = GameConfig.from_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if config.view == "qt":
        return run_qt(config)
    return run_console(config)
