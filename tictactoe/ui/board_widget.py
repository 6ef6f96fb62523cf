from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen, QFont

FIRST_MARK_COLOR = QColor("#8acaff")
SECOND_MARK_COLOR = QColor("#ff8a8a")


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, rows=3, columns=3, first_mark='X', parent=None):
        super().__init__(parent)
        self.rows, self.columns = rows, columns
        self.first_mark = first_mark    # drawn as a cross, others as a ring
        self.grid = [[None] * columns for _ in range(rows)]
        self.winner_mark = None
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(50 * columns, 50 * rows))
        self._accept_clicks = False     # only while a move is awaited

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def set_grid(self, grid):
        # copy so repaint shows the state at display time
        self.grid = [list(row) for row in grid]
        self.update()

    def set_winner(self, mark):
        self.winner_mark = mark
        self.update()

    def heightForWidth(self, width):
        # keep cells square
        return int(width * self.rows / self.columns)

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        """
        cell size and top-left offset of the grid inside the widget
        """
        w, h = self.width(), self.height()
        cell = min(w / self.columns, h / self.rows)
        ox = (w - cell * self.columns) / 2
        oy = (h - cell * self.rows) / 2
        return cell, ox, oy

    def _mark_color(self, mark):
        return FIRST_MARK_COLOR if mark == self.first_mark else SECOND_MARK_COLOR

    def paintEvent(self, event):
        """
        draw grid, marks, and highlight winner
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), QColor("#333"))
            cell, ox, oy = self._geometry()
            width, height = cell * self.columns, cell * self.rows
            # grid lines
            painter.setPen(QPen(QColor("#555"), 2))
            for c in range(1, self.columns):
                x = ox + c * cell
                painter.drawLine(QPointF(x, oy), QPointF(x, oy + height))
            for r in range(1, self.rows):
                y = oy + r * cell
                painter.drawLine(QPointF(ox, y), QPointF(ox + width, y))
            # draw marks
            for r, row in enumerate(self.grid):
                for c, sym in enumerate(row):
                    if not sym: continue
                    cx = ox + c * cell + cell / 2
                    cy = oy + r * cell + cell / 2
                    rad = cell / 2 * 0.7
                    painter.setPen(QPen(self._mark_color(sym), 4))
                    if sym == self.first_mark:
                        # two crossing lines
                        painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                        painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                    else:
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # if someone won, draw their mark over the board
            if self.winner_mark:
                side = min(width, height)
                painter.setFont(QFont("Arial", max(1, int(side * 0.6)), QFont.Bold))
                painter.setPen(QPen(self._mark_color(self.winner_mark), 10,
                                    Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawText(QRectF(ox, oy, width, height), Qt.AlignCenter, self.winner_mark)
        finally:
            painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        cell, ox, oy = self._geometry()
        if cell <= 0:
            return None
        if not (ox <= x < ox + cell * self.columns and oy <= y < oy + cell * self.rows):
            return None
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp to valid range
        row = max(0, min(row, self.rows - 1)); col = max(0, min(col, self.columns - 1))
        return row, col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        hit = self.cell_at(pos.x(), pos.y())
        if hit is not None:
            self.cell_clicked.emit(*hit)  # notify view
