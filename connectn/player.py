"""Players and the moves they make on a board."""

from __future__ import annotations

from dataclasses import dataclass

from connectn.board import EMPTY, Board

RED = (230, 41, 55)
YELLOW = (253, 249, 0)


@dataclass(eq=False)
class Player:
    """A player: display name, grid sign, display symbol and colour."""

    name: str
    sign: str
    symbol: str
    color: tuple[int, int, int]

    def play(self, board: Board, column: int) -> int:
        """Drop a token in ``column`` and return the row where it landed."""
        if not 0 <= column < board.columns:
            raise ValueError(f"column {column} is outside the board")
        if board.cells[0][column] != EMPTY:
            raise ValueError(f"column {column} is full")
        row = 0
        while row < board.rows and board.cells[row][column] == EMPTY:
            row += 1
        board.cells[row - 1][column] = self.sign
        board.free -= 1
        return row - 1

    def simulate(self, board: Board, column: int) -> Board:
        """Return a copy of ``board`` with this player's move applied."""
        result = board.copy()
        self.play(result, column)
        return result

    def describe(self) -> str:
        """Return the player's name and display symbol."""
        return f"{self.name}: {self.symbol}"


def make_player(name: str, sign: str) -> Player:
    """Create a player; '$' plays as X in red, any other sign as O in yellow."""
    first = sign == "$"
    return Player(
        name=name,
        sign=sign,
        symbol="X" if first else "O",
        color=RED if first else YELLOW,
    )