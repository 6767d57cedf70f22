"""The graphical front end: screens, mouse handling and the main loop."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

import pygame

from connectn.board import EMPTY, Board
from connectn.game import Game, GameState, Parameter

CELL_SIZE = 80
BOARD_OFFSET_X = 100
BOARD_OFFSET_Y = 200
SCREEN_PADDING = 80
BUTTON_SIZE = 40

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 800
FPS = 60
AI_DELAY = 0.5
TITLE = "Puissance N"

PARAM_X = 80
PARAM_Y = 150
PARAM_SPACING = 50

RAYWHITE = (245, 245, 245)
DARKBLUE = (0, 82, 172)
DARKGRAY = (80, 80, 80)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (230, 41, 55)
YELLOW = (253, 249, 0)

Color = tuple[int, int, int]


def column_at(x: float, y: float, rows: int, columns: int) -> int | None:
    """Return the board column under the point (x, y), or None."""
    if not BOARD_OFFSET_Y <= y <= BOARD_OFFSET_Y + rows * CELL_SIZE:
        return None
    if not BOARD_OFFSET_X <= x <= BOARD_OFFSET_X + columns * CELL_SIZE:
        return None
    column = int((x - BOARD_OFFSET_X) // CELL_SIZE)
    if 0 <= column < columns:
        return column
    return None


def is_valid_move(board: Board | None, column: int | None) -> bool:
    """Return True if a token can be dropped in ``column``."""
    if board is None or column is None:
        return False
    if not 0 <= column < board.columns:
        return False
    return board.cells[0][column] == EMPTY


def _brightness(color: Color, factor: float) -> Color:
    if factor < 0:
        return tuple(int(c * (1 + factor)) for c in color)  # type: ignore[return-value]
    return tuple(int(c + (255 - c) * factor) for c in color)  # type: ignore[return-value]


class App:
    """Window-independent application state plus drawing and the event loop."""

    def __init__(self) -> None:
        self.game = Game()
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.mouse_pos: tuple[int, int] = (0, 0)
        self.hover_column: int | None = None
        self._ai_started: float | None = None
        self._fonts: dict[int, pygame.font.Font] = {}

        up_x = PARAM_X + 300
        down_x = up_x + BUTTON_SIZE + 10
        self.param_buttons: list[tuple[Parameter, pygame.Rect, pygame.Rect]] = [
            (
                param,
                pygame.Rect(up_x, PARAM_Y + i * PARAM_SPACING, BUTTON_SIZE, BUTTON_SIZE),
                pygame.Rect(down_x, PARAM_Y + i * PARAM_SPACING, BUTTON_SIZE, BUTTON_SIZE),
            )
            for i, param in enumerate(self.game.parameters)
        ]
        self.ai_checkbox = pygame.Rect(PARAM_X, PARAM_Y + PARAM_SPACING * 3 + 10, 30, 30)
        self.start_button = pygame.Rect(self.width // 2 - 150, self.height - 120, 300, 70)
        self.restart_button = pygame.Rect(self.width // 2 - 150, self.height - 120, 300, 70)

    # ---- input -------------------------------------------------------

    def handle_click(self, x: int, y: int) -> None:
        """React to a left click at (x, y) on the current screen."""
        self.mouse_pos = (x, y)
        game = self.game
        point = (x, y)
        if game.state is GameState.CONFIG:
            for param, up, down in self.param_buttons:
                changed = up.collidepoint(point) and param.increase()
                if not changed and down.collidepoint(point):
                    param.decrease()
            if self.ai_checkbox.collidepoint(point):
                game.set_ai(not game.use_ai)
            if self.start_button.collidepoint(point):
                game.start()
                self._ai_started = None
                self.hover_column = None
        elif game.state is GameState.PLAY:
            if game.ai_to_move or game.board is None:
                return
            column = column_at(x, y, game.board.rows, game.board.columns)
            if is_valid_move(game.board, column):
                game.play_human(column)
        elif game.state is GameState.GAME_OVER:
            if self.restart_button.collidepoint(point):
                game.restart()

    def update(self, now: float) -> int | None:
        """Advance time-driven state; return the column the computer played, if any."""
        game = self.game
        if game.state is not GameState.PLAY or game.board is None:
            self.hover_column = None
            self._ai_started = None
            return None
        self.hover_column = column_at(
            *self.mouse_pos, game.board.rows, game.board.columns
        )
        if not game.ai_to_move:
            return None
        if self._ai_started is None:
            self._ai_started = now
            return None
        if now - self._ai_started < AI_DELAY:
            return None
        self._ai_started = None
        return game.play_ai()

    # ---- drawing -----------------------------------------------------

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface: pygame.Surface, text: str, x: float, y: float,
              size: int, color: Color) -> None:
        surface.blit(self._font(size).render(text, True, color), (int(x), int(y)))

    def _text_width(self, text: str, size: int) -> int:
        return self._font(size).size(text)[0]

    def _button(self, surface: pygame.Surface, rect: pygame.Rect, text: str,
                color: Color) -> None:
        hovered = rect.collidepoint(self.mouse_pos)
        fill = _brightness(color, 0.2) if hovered else color
        pygame.draw.rect(surface, fill, rect)
        pygame.draw.rect(surface, _brightness(fill, -0.2), rect, width=2)
        width = self._text_width(text, 24)
        self._text(surface, text, rect.x + (rect.width - width) / 2,
                   rect.y + rect.height / 2 - 12, 24, WHITE)

    def _small_button(self, surface: pygame.Surface, rect: pygame.Rect, text: str) -> None:
        pygame.draw.rect(surface, DARKBLUE, rect)
        width = self._text_width(text, 24)
        self._text(surface, text, rect.x + (rect.width - width) / 2,
                   rect.y + (rect.height - 24) / 2, 24, WHITE)

    def _draw_parameter(self, surface: pygame.Surface, param: Parameter,
                        up: pygame.Rect, down: pygame.Rect, x: int, y: int) -> None:
        self._text(surface, f"{param.label}: {param.value}", x, y + 10, 24, BLACK)
        self._small_button(surface, up, "+")
        self._small_button(surface, down, "-")
        self._text(surface, f"(min: {param.minimum}, max: {param.maximum})",
                   x + 400, y + 10, 18, DARKGRAY)

    def _draw_config(self, surface: pygame.Surface) -> None:
        title = "PUISSANCE N"
        self._text(surface, title, self.width / 2 - self._text_width(title, 60) / 2,
                   30, 60, DARKBLUE)
        prompt = "Configurez votre jeu:"
        self._text(surface, prompt, self.width / 2 - self._text_width(prompt, 40) / 2,
                   100, 40, BLACK)
        for i, (param, up, down) in enumerate(self.param_buttons):
            self._draw_parameter(surface, param, up, down, PARAM_X,
                                 PARAM_Y + i * PARAM_SPACING)
        box = self.ai_checkbox
        pygame.draw.rect(surface, BLACK, box, width=1)
        if self.game.use_ai:
            pygame.draw.rect(surface, BLACK, box.inflate(-10, -10))
        self._text(surface, "Jouer contre l'IA", box.x + 40, box.y + 5, 24, BLACK)
        self._button(surface, self.start_button, "COMMENCER", DARKBLUE)

    def _draw_board(self, surface: pygame.Surface, board: Board) -> None:
        pygame.draw.rect(surface, DARKBLUE, pygame.Rect(
            BOARD_OFFSET_X - 10, BOARD_OFFSET_Y - 10,
            board.columns * CELL_SIZE + 20, board.rows * CELL_SIZE + 20,
        ))
        radius = CELL_SIZE // 2 - 5
        for r, row in enumerate(board.cells):
            for c, cell in enumerate(row):
                center = (BOARD_OFFSET_X + c * CELL_SIZE + CELL_SIZE // 2,
                          BOARD_OFFSET_Y + r * CELL_SIZE + CELL_SIZE // 2)
                pygame.draw.circle(surface, RAYWHITE, center, radius)
                if cell == "$":
                    pygame.draw.circle(surface, RED, center, radius)
                elif cell == "#":
                    pygame.draw.circle(surface, YELLOW, center, radius)
        for c in range(board.columns):
            self._text(surface, str(c + 1),
                       BOARD_OFFSET_X + c * CELL_SIZE + CELL_SIZE // 2 - 5,
                       BOARD_OFFSET_Y - 30, 20, DARKGRAY)

    def _draw_play(self, surface: pygame.Surface, board: Board) -> None:
        game = self.game
        self._text(surface, f"PUISSANCE {game.connect_n}", 30, 30, 40, DARKBLUE)
        self._text(surface, f"Tour: {game.current.name}", 30, 80, 30, game.current.color)
        self._text(surface, f"Pièces à connecter: {game.connect_n}", 30, 120, 24, DARKBLUE)
        if is_valid_move(board, self.hover_column):
            radius = CELL_SIZE // 2 - 5
            ghost = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(ghost, (*game.current.color, 128), (radius, radius), radius)
            center_x = BOARD_OFFSET_X + self.hover_column * CELL_SIZE + CELL_SIZE // 2
            surface.blit(ghost, (center_x - radius, BOARD_OFFSET_Y - 40 - radius))
        self._draw_board(surface, board)

    def _draw_game_over(self, surface: pygame.Surface, board: Board) -> None:
        game = self.game
        self._text(surface, f"PUISSANCE {game.connect_n}", 30, 30, 40, DARKBLUE)
        winner = game.winner
        if winner is not None:
            self._text(surface, f"{winner.name} a gagné!", 30, 80, 36, winner.color)
        else:
            self._text(surface, "Match nul!", 30, 80, 36, DARKGRAY)
        self._button(surface, self.restart_button, "REJOUER", DARKBLUE)
        self._draw_board(surface, board)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current screen onto ``surface``."""
        surface.fill(RAYWHITE)
        state = self.game.state
        board = self.game.board
        if state is GameState.CONFIG:
            self._draw_config(surface)
        elif state is GameState.PLAY and board is not None:
            self._draw_play(surface, board)
        elif state is GameState.GAME_OVER and board is not None:
            self._draw_game_over(surface, board)

    # ---- main loop ---------------------------------------------------

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEMOTION:
                        self.mouse_pos = event.pos
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(*event.pos)
                self.update(time.monotonic())
                self.draw(screen)
                pygame.display.flip()
                clock.tick(FPS)
        finally:
            self._fonts.clear()
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="connectn", description="Play Connect N.")
    parser.parse_args(argv)
    App().run()
    return 0