import pytest

from tictactoe.config import GameConfig


def test_defaults():
    config = GameConfig.from_args([])
    assert config == GameConfig()
    assert (config.rows, config.columns) == (3, 3)
    assert config.view == "console"
    assert (config.player1_mark, config.player2_mark) == ("X", "O")


def test_options():
    config = GameConfig.from_args([
        "--view", "qt", "--rows", "4", "--columns", "5",
        "--player1", "Ann", "--player2", "Ben", "-v",
    ])
    assert config.view == "qt"
    assert (config.rows, config.columns) == (4, 5)
    assert (config.player1_name, config.player2_name) == ("Ann", "Ben")
    assert config.verbose


@pytest.mark.parametrize("argv", [
    ["--rows", "0"],
    ["--columns", "-2"],
    ["--rows", "three"],
    ["--view", "web"],
])
def test_bad_options_exit(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        GameConfig.from_args(argv)
    assert exc.value.code == 2
    assert "error" in capsys.readouterr().err
