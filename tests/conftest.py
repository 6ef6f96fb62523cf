import os

import pytest

from tictactoe.game_logic import Board
from tictactoe.player import Player
from tictactoe.views.base import GameView

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ScriptedView(GameView):
    """
    plays back a fixed list of moves and records every call
    """
    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = []
        self.errors = 0
        self.winner = None
        self.drawn = False

    def display_grid(self, grid):
        self.calls.append(("grid", [list(row) for row in grid]))

    def display_message(self, player):
        self.calls.append(("turn", player))

    def display_error_message(self):
        self.errors += 1
        self.calls.append(("error",))

    def get_user_input(self):
        move = self.moves.pop(0)
        if isinstance(move, Exception):
            raise move
        return move

    def display_winner(self, player):
        self.winner = player
        self.calls.append(("winner", player))

    def display_draw(self):
        self.drawn = True
        self.calls.append(("draw",))

    def turns(self):
        return [c[1] for c in self.calls if c[0] == "turn"]


@pytest.fixture
def board():
    return Board(3, 3)


@pytest.fixture
def players():
    return Player("Alice", "X"), Player("Bob", "O")


@pytest.fixture
def scripted_view():
    return ScriptedView
