def _is_index(value):
    # bool is an int subclass but never a coordinate
    return isinstance(value, int) and not isinstance(value, bool)


class Board:
    """
    tic-tac-toe grid state and win/draw checks
    """
    def __init__(self, rows=3, columns=3):
        """
        build an empty rows x columns grid
        """
        if not _is_index(rows) or not _is_index(columns) \
           or rows < 1 or columns < 1:
            raise ValueError(f"board size must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.move_count = 0               # successful placements
        self._grid = self._empty_grid()

    def _empty_grid(self):
        return [[None for _ in range(self.columns)] for _ in range(self.rows)]

    @property
    def grid(self):
        # live grid, views only read it
        return self._grid

    @property
    def is_square(self):
        return self.rows == self.columns

    def is_cell_available(self, x, y):
        """
        true if (x, y) is on the board and empty
        """
        if not (_is_index(x) and _is_index(y)):
            return False
        if not (0 <= x < self.rows and 0 <= y < self.columns):
            return False
        return self._grid[x][y] is None

    def place_mark(self, x, y, mark):
        """
        put mark at (x, y) if the cell is available
        returns: True when placed, False otherwise
        """
        if not self.is_cell_available(x, y):
            return False
        self._grid[x][y] = mark
        self.move_count += 1
        return True

    def check_win(self, mark):
        """
        scan rows, cols, diags for a full line of mark
        """
        g = self._grid
        # rows
        if any(all(cell == mark for cell in row) for row in g):
            return True
        # cols
        if any(all(g[r][c] == mark for r in range(self.rows))
               for c in range(self.columns)):
            return True
        if not self.is_square:
            return False
        n = self.rows
        # main diag
        if all(g[i][i] == mark for i in range(n)):
            return True
        # anti-diag
        return all(g[i][n - 1 - i] == mark for i in range(n))

    def check_draw(self):
        """
        no empty cells left; check_win goes first
        """
        return all(cell is not None for row in self._grid for cell in row)

    def __str__(self):
        return "\n".join(" ".join(cell or "." for cell in row) for row in self._grid)
