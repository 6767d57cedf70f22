"""Minimax search over game trees to choose a column."""

from __future__ import annotations

import math
from collections.abc import Sequence

from connectn.item import calculate_score
from connectn.player import Player
from connectn.tree import Tree

MAXIMIZER_SIGN = "$"


def min_child(children: Sequence[Tree]) -> int:
    """Return the lowest score among ``children``."""
    if not children:
        raise ValueError("no children to compare")
    return min(child.item.score for child in children)


def max_child(children: Sequence[Tree]) -> int:
    """Return the highest score among ``children``."""
    if not children:
        raise ValueError("no children to compare")
    return max(child.item.score for child in children)


def minimax(tree: Tree, p1: Player, p2: Player, n: int) -> None:
    """Score every node: leaves by evaluation, inner nodes from their children."""
    if not tree.children:
        tree.item.score = calculate_score(tree.item.board, n, p1, p2)
        return
    for child in tree.children:
        minimax(child, p2, p1, n)
    if p2.sign == MAXIMIZER_SIGN:
        tree.item.score = max_child(tree.children)
    else:
        tree.item.score = min_child(tree.children)


def best_move(tree: Tree, depth: int, p1: Player, p2: Player, n: int) -> int:
    """Search ``depth`` plies from ``tree`` and return the chosen column, or -1."""
    tree.produce_children(depth, p1, p2)
    minimax(tree, p1, p2, n)

    if not tree.children:
        return -1

    maximizing = p1.sign == MAXIMIZER_SIGN
    best_score = -math.inf if maximizing else math.inf
    best: Tree | None = None
    for child in tree.children:
        score = child.item.score
        if (maximizing and score >= best_score) or (
            not maximizing and score <= best_score
        ):
            best_score = score
            best = child

    root_board = tree.item.board
    if best is not None and best.item.board is not None:
        old, new = root_board.cells, best.item.board.cells
        for j in range(root_board.columns):
            if any(old_row[j] != new_row[j] for old_row, new_row in zip(old, new)):
                return j

    for column, playable in enumerate(root_board.playable_positions()):
        if playable:
            return column
    return -1