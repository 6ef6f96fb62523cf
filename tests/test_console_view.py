import pytest

from tictactoe.controller import GameController, GameStatus
from tictactoe.exceptions import InvalidInputError
from tictactoe.player import Player
from tictactoe.views.console import ConsoleView


def feed(lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return fake_input


@pytest.mark.parametrize("line, expected", [
    ("1,2", ("1", "2")),
    (" 0 , 2 ", ("0", "2")),
    ("2 1", ("2", "1")),
    ("a,b", ("a", "b")),
])
def test_input_is_split_into_two_tokens(line, expected):
    view = ConsoleView(input_func=feed([line]))
    assert view.get_user_input() == expected


@pytest.mark.parametrize("line", ["", "12", "1,2,3", ","])
def test_wrong_number_of_tokens_is_rejected(line):
    view = ConsoleView(input_func=feed([line]))
    with pytest.raises(InvalidInputError):
        view.get_user_input()


def test_grid_shows_marks_and_indices(capsys):
    ConsoleView().display_grid([["X", None, None], [None, "O", None], [None, None, None]])
    out = capsys.readouterr().out
    assert "0  X | 1 | 2" in out
    assert "1  0 | O | 2" in out
    assert "   0   1   2" in out


def test_messages(capsys):
    view = ConsoleView()
    alice = Player("Alice", "X")
    view.display_message(alice)
    view.display_error_message()
    view.display_winner(alice)
    view.display_draw()
    out = capsys.readouterr().out
    assert "Alice's turn (X)." in out
    assert "Cell unavailable" in out
    assert "Alice (X) won!!!" in out
    assert "It's a Tie!" in out


def test_full_console_game(board, players, capsys):
    lines = ["0,0", "0,0", "oops", "1,0", "0 1", "1,1", "0,2"]
    view = ConsoleView(input_func=feed(lines))
    game = GameController(board, players[0], players[1], view)
    assert game.play() is GameStatus.WON
    out = capsys.readouterr().out
    assert out.count("Cell unavailable") == 2
    assert "Alice (X) won!!!" in out


def test_end_of_input_propagates(board, players):
    view = ConsoleView(input_func=feed([]))
    game = GameController(board, players[0], players[1], view)
    with pytest.raises(EOFError):
        game.play()
