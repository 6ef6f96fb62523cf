from abc import ABC, abstractmethod

# methods the controller requires from every view
VIEW_CAPABILITIES = (
    "display_grid",
    "display_message",
    "display_error_message",
    "get_user_input",
    "display_winner",
)


class GameView(ABC):
    """
    what the controller needs from a console or window frontend
    """

    @abstractmethod
    def display_grid(self, grid):
        """render current board"""

    @abstractmethod
    def display_message(self, player):
        """render whose turn it is"""

    @abstractmethod
    def display_error_message(self):
        """render 'cell unavailable' feedback"""

    @abstractmethod
    def get_user_input(self):
        """
        wait for one move and return (row, col)
        values may be text or ints; raise InvalidInputError for junk
        """

    @abstractmethod
    def display_winner(self, player):
        """render end-of-game winner"""

    def display_draw(self):
        """
        render end-of-game draw; optional, views without it just show the grid
        """


def missing_capabilities(view):
    """
    names from VIEW_CAPABILITIES the object doesn't provide as callables
    """
    return [name for name in VIEW_CAPABILITIES
            if not callable(getattr(view, name, None))]
