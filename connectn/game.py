"""Game rules, settings and the computer opponent, independent of drawing."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from connectn.algorithm import best_move
from connectn.board import EMPTY, Board
from connectn.item import Item, calculate_score
from connectn.player import Player, make_player
from connectn.tree import Tree

DEFAULT_CONNECT_N = 4
DEFAULT_ROWS = 6
DEFAULT_COLUMNS = 7
HUMAN_NAME = "Joueur 2"
AI_NAME = "Ordinateur"


class GameState(enum.Enum):
    """The screens the game moves between."""

    CONFIG = enum.auto()
    PLAY = enum.auto()
    GAME_OVER = enum.auto()


@dataclass
class Parameter:
    """A bounded integer setting changed one step at a time."""

    value: int
    minimum: int
    maximum: int
    label: str

    def increase(self) -> bool:
        """Add one unless at the maximum; return whether the value changed."""
        if self.value < self.maximum:
            self.value += 1
            return True
        return False

    def decrease(self) -> bool:
        """Subtract one unless at the minimum; return whether the value changed."""
        if self.value > self.minimum:
            self.value -= 1
            return True
        return False


def _first_completing_column(board: Board, connect_n: int, player: Player) -> int | None:
    for column, playable in enumerate(board.playable_positions()):
        if playable and player.simulate(board, column).check_win(connect_n):
            return column
    return None


def immediate_move(
    board: Board, connect_n: int, ai: Player, opponent: Player
) -> int | None:
    """Return a column that wins for ``ai`` now, else one that blocks ``opponent``."""
    winning = _first_completing_column(board, connect_n, ai)
    if winning is not None:
        return winning
    return _first_completing_column(board, connect_n, opponent)


def ai_depth(board: Board) -> int:
    """Choose the search depth from the board size and how full it is."""
    empty = sum(row.count(EMPTY) for row in board.cells)
    if board.columns >= 10 or board.rows >= 10:
        return 4
    if empty < 15:
        return 7
    if empty > board.rows * board.columns - 10:
        return 5
    return 6


def choose_ai_move(
    board: Board, connect_n: int, human: Player, ai: Player
) -> int | None:
    """Pick the computer's column, or None when the board is full."""
    move = immediate_move(board, connect_n, ai, human)
    if move is not None:
        return move

    root = Item(board.copy())
    root.score = calculate_score(root.board, connect_n, human, ai)
    column = best_move(Tree(root), ai_depth(board), human, ai, connect_n)
    if 0 <= column < board.columns and board.cells[0][column] == EMPTY:
        return column
    return next(
        (c for c, ok in enumerate(board.playable_positions()) if ok), None
    )


class Game:
    """The state of one session: settings, board, players and whose turn it is."""

    def __init__(self) -> None:
        self.player1 = make_player("Joueur 1", "$")
        self.player2 = make_player(HUMAN_NAME, "#")
        self.use_ai = False
        self.state = GameState.CONFIG
        self.board: Board | None = None
        self.connect_n = DEFAULT_CONNECT_N
        self.connect_n_param = Parameter(DEFAULT_CONNECT_N, 3, 10, "Jetons à connecter")
        self.rows_param = Parameter(DEFAULT_ROWS, 4, 20, "Lignes")
        self.columns_param = Parameter(DEFAULT_COLUMNS, 4, 20, "Colonnes")
        self.current = self.player1
        self.is_draw = False
        self.last_move: tuple[int, int] | None = None

    @property
    def parameters(self) -> list[Parameter]:
        """The configurable settings, in display order."""
        return [self.connect_n_param, self.rows_param, self.columns_param]

    @property
    def winner(self) -> Player | None:
        """The player who won, once the game is over and not drawn."""
        if self.state is GameState.GAME_OVER and not self.is_draw:
            return self.current
        return None

    @property
    def ai_to_move(self) -> bool:
        """True when the computer should play next."""
        return (
            self.state is GameState.PLAY
            and self.use_ai
            and self.current is self.player2
        )

    def set_ai(self, enabled: bool) -> None:
        """Turn the computer opponent on or off."""
        self.use_ai = enabled
        self.player2.name = AI_NAME if enabled else HUMAN_NAME

    def start(
        self,
        connect_n: int | None = None,
        rows: int | None = None,
        columns: int | None = None,
    ) -> None:
        """Begin a game; omitted settings come from the parameters."""
        connect_n = self.connect_n_param.value if connect_n is None else connect_n
        rows = self.rows_param.value if rows is None else rows
        columns = self.columns_param.value if columns is None else columns
        if connect_n > rows and connect_n > columns:
            connect_n = max(rows, columns)
        self.connect_n_param.value = connect_n
        self.rows_param.value = rows
        self.columns_param.value = columns

        self.connect_n = connect_n
        self.board = Board(rows, columns)
        self.state = GameState.PLAY
        self.current = self.player1
        self.is_draw = False
        self.last_move = None

    def _require_play(self) -> Board:
        if self.state is not GameState.PLAY or self.board is None:
            raise RuntimeError("no game is in progress")
        return self.board

    def _apply(self, board: Board, column: int, player: Player) -> int:
        row = player.play(board, column)
        self.last_move = (row, column)
        if board.check_win(self.connect_n):
            self.is_draw = False
            self.state = GameState.GAME_OVER
        elif not board.is_playable():
            self.is_draw = True
            self.state = GameState.GAME_OVER
        elif self.use_ai:
            self.current = self.player2 if player is self.player1 else self.player1
        else:
            self.current = self.player2 if self.current is self.player1 else self.player1
        return row

    def play_human(self, column: int) -> int:
        """Play the current human's token in ``column``; return the landing row."""
        board = self._require_play()
        if self.ai_to_move:
            raise RuntimeError("it is the computer's turn")
        if not 0 <= column < board.columns or board.cells[0][column] != EMPTY:
            raise ValueError(f"column {column} cannot be played")
        return self._apply(board, column, self.current)

    def play_ai(self) -> int:
        """Let the computer play; return the column it chose."""
        board = self._require_play()
        if not self.ai_to_move:
            raise RuntimeError("it is not the computer's turn")
        column = choose_ai_move(board, self.connect_n, self.player1, self.player2)
        if column is None:
            raise RuntimeError("no column can be played")
        self._apply(board, column, self.player2)
        return column

    def restart(self) -> None:
        """Go back to the settings screen after a finished game."""
        if self.state is not GameState.GAME_OVER:
            raise RuntimeError("the game is not over")
        self.state = GameState.CONFIG