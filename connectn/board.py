"""The game grid and win detection."""

from __future__ import annotations

from collections.abc import Sequence

EMPTY = "."
TOKENS = frozenset("$#")


def is_token(c: str) -> bool:
    """Return True if ``c`` is a player's token on the grid."""
    return c in TOKENS


def line_wins(cells: Sequence[str], p: int) -> bool:
    """Return True if the first ``p`` cells hold the same player token."""
    if not cells or not is_token(cells[0]):
        return False
    if len(cells) < p:
        return False
    first = cells[0]
    return all(c == first for c in cells[:p])


class Board:
    """A rows x columns grid; row 0 is the top, tokens fall to the bottom."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 1 or columns < 1:
            raise ValueError("a board needs at least one row and one column")
        self.rows = rows
        self.columns = columns
        self.free = rows * columns
        self.cells: list[list[str]] = [[EMPTY] * columns for _ in range(rows)]

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, columns={self.columns}, free={self.free})"

    def square_wins(self, i: int, j: int, p: int) -> bool:
        """Check the p x p square whose top-left corner is (i, j)."""
        g = self.cells
        span = range(p)
        if any(line_wins([g[i + k][j + l] for l in span], p) for k in span):
            return True
        if any(line_wins([g[i + k][j + l] for k in span], p) for l in span):
            return True
        if line_wins([g[i + k][j + k] for k in span], p):
            return True
        return line_wins([g[i + k][p + j - 1 - k] for k in span], p)

    def check_win(self, p: int) -> bool:
        """Return True if some player has ``p`` aligned tokens."""
        if p < 1:
            raise ValueError("the number of tokens to connect must be positive")
        return any(
            self.square_wins(i, j, p)
            for i in range(self.rows - p + 1)
            for j in range(self.columns - p + 1)
        )

    def is_playable(self) -> bool:
        """Return True while free cells remain."""
        return self.free > 0

    def copy(self) -> Board:
        """Return an independent copy of the board."""
        res = Board(self.rows, self.columns)
        res.free = self.free
        res.cells = [list(row) for row in self.cells]
        return res

    def playable_positions(self) -> list[bool]:
        """For each column, whether a token can still be dropped in it."""
        return [cell == EMPTY for cell in self.cells[0]]

    def render(self) -> str:
        """Return the text drawing of the board."""
        separator = "-----" * self.columns
        lines: list[str] = []
        for row in self.cells:
            lines.append("".join(f"| {c} |" for c in row))
            lines.append(separator)
        return "\n".join(lines) + "\n"