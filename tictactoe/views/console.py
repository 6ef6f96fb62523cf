import re

from ..exceptions import InvalidInputError
from .base import GameView

_SEPARATORS = re.compile(r"[,\s]+")


class ConsoleView(GameView):
    """
    text frontend: prints the board, reads 'row,col' from stdin
    """
    def __init__(self, input_func=None, output_func=None):
        self._input = input_func or input
        self._print = output_func or print

    def display_grid(self, grid):
        """Prints the board with row/column numbers, empty cells show their column index."""
        columns = len(grid[0]) if grid else 0
        rule = "-" * (4 * columns + 1)
        self._print("\n" + rule)
        for i, row in enumerate(grid):
            self._print(f"{i}  {' | '.join(cell if cell else str(j) for j, cell in enumerate(row))}")
            if i < len(grid) - 1:
                self._print("  " + "-" * (4 * columns - 1))
        self._print("   " + "   ".join(str(j) for j in range(columns)))
        self._print(rule)

    def display_message(self, player):
        self._print(f"{player.name}'s turn ({player.mark}).")

    def display_error_message(self):
        self._print("!! Cell unavailable. Try again.")

    def get_user_input(self):
        """
        read one move, split on comma or whitespace
        returns: (row, col) as text, the controller turns them into ints
        """
        line = self._input("Enter move (row,col): ").strip()
        parts = [p for p in _SEPARATORS.split(line) if p]
        if len(parts) != 2:
            raise InvalidInputError(f"expected 'row,col', got {line!r}")
        return parts[0], parts[1]

    def display_winner(self, player):
        self._print("\n--- Game Over ---")
        self._print(f"{player.name} ({player.mark}) won!!!")

    def display_draw(self):
        self._print("\n--- Game Over ---")
        self._print("It's a Tie!")
