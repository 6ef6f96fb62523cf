import logging
from enum import Enum

from .exceptions import GameOverError, InvalidInputError, ViewContractError
from .game_logic import Board
from .player import Player
from .views.base import missing_capabilities

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


def parse_coordinate(value):
    """
    turn one coordinate from a view into an int
    accepts ints and numeric text; anything else is InvalidInputError
    """
    # bool is an int subclass, a click never produces one
    if isinstance(value, bool):
        raise InvalidInputError(f"not a coordinate: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidInputError(f"not a number: {value!r}") from None
    raise InvalidInputError(f"not a coordinate: {value!r}")


def parse_move(move):
    """
    (row, col) pair from a view -> (int, int)
    """
    # "12" would unpack into two characters
    if isinstance(move, str):
        raise InvalidInputError(f"expected a (row, col) pair, got {move!r}")
    try:
        row, col = move
    except (TypeError, ValueError):
        raise InvalidInputError(f"expected a (row, col) pair, got {move!r}") from None
    return parse_coordinate(row), parse_coordinate(col)


class GameController:
    """
    turn loop: ask the view for a move, apply it to the board, repeat
    """
    def __init__(self, board, player1, player2, view):
        missing = missing_capabilities(view)
        if missing:
            raise ViewContractError(
                f"{type(view).__name__} is missing: {', '.join(missing)}")
        if player1.mark == player2.mark:
            raise ValueError(f"players need different marks, both use {player1.mark!r}")
        self.board = board
        self.players = (player1, player2)
        self.view = view
        self.active_player = player1
        self.status = GameStatus.IN_PROGRESS
        self.winner = None

    @classmethod
    def from_config(cls, config, view):
        """
        fresh board + players for one game
        """
        board = Board(config.rows, config.columns)
        return cls(board,
                   Player(config.player1_name, config.player1_mark),
                   Player(config.player2_name, config.player2_mark),
                   view)

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    def switch_player(self):
        p1, p2 = self.players
        self.active_player = p2 if self.active_player is p1 else p1

    def _read_move(self):
        # malformed input counts as an invalid move
        try:
            return parse_move(self.view.get_user_input())
        except InvalidInputError as e:
            logger.warning("bad input from %s: %s", self.active_player.name, e)
            return None

    def play_turn(self):
        """
        one iteration: show board, get a move, apply it, check result
        returns: status after the turn
        """
        if self.is_over:
            raise GameOverError(f"game already finished ({self.status.value})")

        player = self.active_player
        self.view.display_grid(self.board.grid)
        self.view.display_message(player)

        move = self._read_move()
        if move is None or not self.board.is_cell_available(*move):
            if move is not None:
                logger.debug("%s picked unavailable cell %s", player.name, move)
            self.view.display_error_message()
            return self.status

        row, col = move
        self.board.place_mark(row, col, player.mark)
        logger.debug("%s placed %s at (%d, %d)", player.name, player.mark, row, col)

        # win before draw: a full board with a line is a win
        if self.board.check_win(player.mark):
            self.status = GameStatus.WON
            self.winner = player
        elif self.board.check_draw():
            self.status = GameStatus.DRAWN
        else:
            self.switch_player()
        return self.status

    def play(self):
        """
        run turns until win or draw, then show the result
        """
        while not self.is_over:
            self.play_turn()

        self.view.display_grid(self.board.grid)
        if self.status is GameStatus.WON:
            logger.info("%s won after %d moves", self.winner.name, self.board.move_count)
            self.view.display_winner(self.winner)
        else:
            logger.info("draw after %d moves", self.board.move_count)
            display_draw = getattr(self.view, "display_draw", None)
            if callable(display_draw):
                display_draw()
        return self.status
