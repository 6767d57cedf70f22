"""Game trees of board positions, built by trying every playable column."""

from __future__ import annotations

from collections.abc import Sequence

from connectn.item import Item
from connectn.player import Player


class Tree:
    """A node holding a position, its depth and the positions reachable from it.

    New children are placed in front of the existing ones, so the most
    recently added child comes first.
    """

    def __init__(self, item: Item | None = None, depth: int = 0) -> None:
        self.item = item if item is not None else Item()
        self.depth = depth
        self.children: list[Tree] = []

    def __repr__(self) -> str:
        return (
            f"Tree(depth={self.depth}, score={self.item.score}, "
            f"children={len(self.children)})"
        )

    def add_child(self, child: Tree) -> None:
        """Put ``child`` first among the children, one level below this node."""
        child.depth = self.depth + 1
        self.children.insert(0, child)

    def produce_children(self, depth: int, player1: Player, player2: Player) -> None:
        """Grow the tree ``depth`` plies deep, ``player1`` moving first."""
        if depth <= 0:
            return
        board = self.item.board
        if board is None:
            raise ValueError("cannot expand a node without a board")
        for column, playable in enumerate(board.playable_positions()):
            if playable:
                self.add_child(Tree(Item(player1.simulate(board, column), 0)))
        for child in self.children:
            child.produce_children(depth - 1, player2, player1)

    def copy(self) -> Tree:
        """Return a childless copy of this node with an independent board."""
        return Tree(self.item.copy(), self.depth)

    def render(self) -> str:
        """Return a text dump of every board and score in the tree."""
        return _render_chain([self])


def _render_node(node: Tree) -> str:
    board = node.item.board
    text = board.render() if board is not None else ""
    return f"{text}{node.item.score}\n\n"


def _render_chain(nodes: Sequence[Tree]) -> str:
    if not nodes:
        return ""
    head = nodes[0]
    return (
        _render_node(head)
        + _render_chain(nodes[1:])
        + "\n"
        + _render_chain(head.children)
    )