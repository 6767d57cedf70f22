import pygame
import pytest

from connectn.app import (
    AI_DELAY,
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    CELL_SIZE,
    DARKBLUE,
    App,
    column_at,
    is_valid_move,
)
from connectn.board import Board
from connectn.game import GameState
from connectn.player import RED, make_player


def cell_center(row, column):
    return (
        BOARD_OFFSET_X + column * CELL_SIZE + CELL_SIZE // 2,
        BOARD_OFFSET_Y + row * CELL_SIZE + CELL_SIZE // 2,
    )


def started_app(rows=6, columns=7, connect_n=4, ai=False):
    app = App()
    if ai:
        app.handle_click(*app.ai_checkbox.center)
    app.game.start(connect_n, rows, columns)
    return app


def test_column_at_top_left_corner():
    assert column_at(BOARD_OFFSET_X, BOARD_OFFSET_Y, 6, 7) == 0


def test_column_at_inside_cells():
    for column in range(7):
        x, y = cell_center(2, column)
        assert column_at(x, y, 6, 7) == column


@pytest.mark.parametrize(
    "x,y",
    [
        (BOARD_OFFSET_X - 1, BOARD_OFFSET_Y + 10),
        (BOARD_OFFSET_X + 10, BOARD_OFFSET_Y - 1),
        (BOARD_OFFSET_X + 10, BOARD_OFFSET_Y + 6 * CELL_SIZE + 1),
        (BOARD_OFFSET_X + 7 * CELL_SIZE, BOARD_OFFSET_Y + 10),
    ],
)
def test_column_at_outside(x, y):
    assert column_at(x, y, 6, 7) is None


def test_is_valid_move():
    board = Board(4, 4)
    assert is_valid_move(board, 0) is True
    assert is_valid_move(board, -1) is False
    assert is_valid_move(board, 4) is False
    assert is_valid_move(None, 0) is False
    assert is_valid_move(board, None) is False


def test_is_valid_move_full_column():
    board = Board(4, 4)
    player = make_player("A", "$")
    for _ in range(4):
        player.play(board, 1)
    assert is_valid_move(board, 1) is False
    assert is_valid_move(board, 2) is True


def test_parameter_buttons_change_values():
    app = App()
    param, up, down = app.param_buttons[0]
    before = param.value
    app.handle_click(*up.center)
    assert param.value == before + 1
    app.handle_click(*down.center)
    app.handle_click(*down.center)
    assert param.value == before - 1


def test_parameter_button_stops_at_maximum():
    app = App()
    param, up, _ = app.param_buttons[1]
    for _ in range(param.maximum + 5):
        app.handle_click(*up.center)
    assert param.value == param.maximum


def test_checkbox_toggles_ai():
    app = App()
    app.handle_click(*app.ai_checkbox.center)
    assert app.game.use_ai is True
    assert app.game.player2.name == "Ordinateur"
    app.handle_click(*app.ai_checkbox.center)
    assert app.game.use_ai is False
    assert app.game.player2.name == "Joueur 2"


def test_start_button_begins_game():
    app = App()
    app.handle_click(*app.start_button.center)
    assert app.game.state is GameState.PLAY
    assert (app.game.board.rows, app.game.board.columns) == (6, 7)


def test_click_on_board_plays_human_move():
    app = started_app()
    app.handle_click(*cell_center(1, 0))
    board = app.game.board
    assert board.cells[board.rows - 1][0] == "$"
    assert app.game.current is app.game.player2


def test_click_outside_board_plays_nothing():
    app = started_app()
    app.handle_click(5, 5)
    assert app.game.board.free == app.game.board.rows * app.game.board.columns
    assert app.game.current is app.game.player1


def test_ai_waits_before_playing():
    app = started_app(ai=True)
    app.handle_click(*cell_center(0, 3))
    assert app.game.ai_to_move
    assert app.update(0.0) is None
    assert app.update(AI_DELAY / 2) is None
    column = app.update(AI_DELAY + 0.01)
    board = app.game.board
    assert column is not None
    assert "#" in [row[column] for row in board.cells]
    assert app.game.current is app.game.player1


def test_update_tracks_hover_column():
    app = started_app()
    app.mouse_pos = cell_center(0, 2)
    app.update(0.0)
    assert app.hover_column == 2
    app.mouse_pos = (0, 0)
    app.update(0.0)
    assert app.hover_column is None


def test_win_then_restart():
    app = started_app(rows=4, columns=4, connect_n=4)
    for column in [0, 1, 0, 1, 0, 1, 0]:
        app.handle_click(*cell_center(0, column))
    assert app.game.state is GameState.GAME_OVER
    assert app.game.winner is app.game.player1
    app.handle_click(0, 0)
    assert app.game.state is GameState.GAME_OVER
    app.handle_click(*app.restart_button.center)
    assert app.game.state is GameState.CONFIG


def test_draw_play_shows_token():
    app = started_app()
    app.handle_click(*cell_center(0, 0))
    surface = pygame.Surface((app.width, app.height))
    app.draw(surface)
    x, y = cell_center(app.game.board.rows - 1, 0)
    assert tuple(surface.get_at((x, y)))[:3] == RED


def test_draw_config_shows_parameter_button():
    app = App()
    surface = pygame.Surface((app.width, app.height))
    app.draw(surface)
    _, up, _ = app.param_buttons[0]
    assert tuple(surface.get_at((up.x + 1, up.y + 1)))[:3] == DARKBLUE