import argparse
from dataclasses import dataclass

VIEWS = ("console", "qt")


@dataclass
class GameConfig:
    """
    everything fixed once per game
    """
    rows: int = 3
    columns: int = 3
    player1_name: str = "Player 1"
    player2_name: str = "Player 2"
    player1_mark: str = "X"
    player2_mark: str = "O"
    view: str = "console"
    verbose: bool = False

    @classmethod
    def from_args(cls, argv=None):
        """
        parse command line options into a config
        """
        args = build_parser().parse_args(argv)
        return cls(rows=args.rows, columns=args.columns,
                   player1_name=args.player1, player2_name=args.player2,
                   view=args.view, verbose=args.verbose)


def _positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser():
    defaults = GameConfig()
    parser = argparse.ArgumentParser(prog="tictactoe",
                                     description="Two-player Tic-Tac-Toe.")
    parser.add_argument("--view", choices=VIEWS, default=defaults.view,
                        help="console text or Qt window (default: %(default)s)")
    parser.add_argument("--rows", type=_positive_int, default=defaults.rows,
                        help="board rows (default: %(default)s)")
    parser.add_argument("--columns", type=_positive_int, default=defaults.columns,
                        help="board columns (default: %(default)s)")
    parser.add_argument("--player1", default=defaults.player1_name,
                        help=f"name of the player using {defaults.player1_mark}")
    parser.add_argument("--player2", default=defaults.player2_name,
                        help=f"name of the player using {defaults.player2_mark}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser
