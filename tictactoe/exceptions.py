class TicTacToeError(Exception):
    """base for game errors"""


class InvalidInputError(TicTacToeError, ValueError):
    """
    coordinates could not be read from the view
    """


class ViewContractError(TicTacToeError, TypeError):
    """
    view is missing one of the capabilities the controller calls
    """


class ViewClosedError(TicTacToeError):
    """
    window closed while waiting for a move
    """


class GameOverError(TicTacToeError):
    """
    move requested after the game already ended
    """
