"""A board paired with its evaluation, and the evaluation function."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from connectn.board import EMPTY, Board
from connectn.player import Player

WIN_SCORE = 1000
THREE_SCORE = 50
TWO_SCORE = 10


@dataclass
class Item:
    """A board position and the score given to it."""

    board: Board | None = None
    score: int = 0

    def copy(self) -> Item:
        """Return a copy with an independent board."""
        board = self.board.copy() if self.board is not None else None
        return Item(board, self.score)


def _owned_by(c: str, player: Player) -> bool:
    return c == player.symbol or c == player.sign


def line_score(cells: Sequence[str], p1: Player, p2: Player) -> int:
    """Score a line of cells: positive favours ``p1``, negative ``p2``."""
    score = 0
    p1_count = p2_count = empty_count = 0
    for c in cells:
        if _owned_by(c, p1):
            p1_count += 1
            p2_count = 0
        elif _owned_by(c, p2):
            p2_count += 1
            p1_count = 0
        elif c == EMPTY:
            empty_count += 1

        if p1_count == 4:
            return WIN_SCORE
        if p2_count == 4:
            return -WIN_SCORE

        if empty_count > 0:
            if p1_count == 3:
                score += THREE_SCORE
            if p2_count == 3:
                score -= THREE_SCORE
            if p1_count == 2:
                score += TWO_SCORE
            if p2_count == 2:
                score -= TWO_SCORE
    return score


def calculate_score(board: Board | None, n: int, p1: Player, p2: Player) -> int:
    """Evaluate a board over its rows, columns and length-``n`` diagonals."""
    if board is None:
        return 0
    g = board.cells
    k, l = board.rows, board.columns

    total = sum(line_score(row, p1, p2) for row in g)
    total += sum(line_score([row[j] for row in g], p1, p2) for j in range(l))

    for i in range(k - n + 1):
        for j in range(l - n + 1):
            total += line_score([g[i + p][j + p] for p in range(n)], p1, p2)
    for i in range(k - n + 1):
        for j in range(l - n + 1):
            total += line_score([g[k - i - p - 1][j + p] for p in range(n)], p1, p2)
    return total