# connectn

connectn is a Connect-N game. Players drop tokens into a grid whose size you
choose. The first player to line up N tokens in a row, a column or a diagonal
wins. Two people can play on the same screen, or one person can play against
a computer opponent that looks ahead with minimax.

## Installing

```
pip install .
```

The game window is drawn with `pygame`, which this installs.

## Playing

```
connectn
```

The only option is `--help`. The window opens on a configuration screen with
these settings:

- **Jetons à connecter**, the number of tokens to line up: 3 to 10, default 4
- **Lignes**, the number of rows: 4 to 20, default 6
- **Colonnes**, the number of columns: 4 to 20, default 7
- **Jouer contre l'IA**, a checkbox that makes the second player the computer

Click the `+` and `-` buttons to change a value. Click **COMMENCER** to start.
If the number of tokens to connect is larger than both the row count and the
column count, it is lowered to the larger of the two when the game starts.

While you play, the column under the mouse shows a preview of your move.
Click to drop a token there. Player 1 is red and player 2 is yellow. When
someone wins or the grid is full, the screen shows the winner or
"Match nul!". The **REJOUER** button then returns to the configuration
screen.

## The computer opponent

The computer waits half a second before each move. It first looks for a
column that wins straight away and plays it. If there is none, it looks for a
column that would let you win straight away and blocks it.

If neither exists, it builds a game tree and runs minimax over it. Leaf
positions are scored by looking along rows, columns and diagonals of length
N:

- a run of four tokens scores ±1000
- a run of three scores ±50 once an empty cell has been seen in that line
- a run of two scores ±10 under the same condition

The search depth depends on the grid:

| Situation | Depth |
|---|---|
| 10 or more rows or columns | 4 |
| fewer than 15 empty cells | 7 |
| fewer than 10 tokens played | 5 |
| any other position | 6 |

## Using the library

The game rules work without a window:

```python
from connectn.game import Game

game = Game()
game.set_ai(True)
game.start(4, 6, 7)
game.play_human(3)
game.play_ai()
print(game.board.render())
```

An illegal move raises an error:

- `Game.play_human` raises `ValueError` for a column that is full or off the board.
- `Game.play_human` and `Game.play_ai` raise `RuntimeError` when it is not that side's turn or no game is in progress.

The building blocks can also be used on their own:

| Module | Provides |
|---|---|
| `connectn.board` | `Board`, with `check_win`, `playable_positions`, `copy` and `render` |
| `connectn.player` | `Player` and `make_player`, with `play` and `simulate` |
| `connectn.item` | `Item`, plus `line_score` and `calculate_score` |
| `connectn.tree` | `Tree`, a game tree grown with `produce_children` |
| `connectn.algorithm` | `minimax` and `best_move` |
| `connectn.game` | `immediate_move`, `ai_depth` and `choose_ai_move` |
| `connectn.app` | `App`, the pygame front end, and `main` |

## Running the tests

```
pip install ".[test]"
pytest
```