"""Main game window: board, counters, buttons and the event loop."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence
from typing import Protocol

import pygame

from .board import TILE_SIZE, Board
from .config import load_config
from .leaderboard_view import show_leaderboard
from .textures import DEFAULT_IMAGE_DIR, TextureManager
from .welcome import PANEL_HEIGHT, show_welcome

DIGIT_WIDTH = 21
DIGIT_HEIGHT = 32
MINUS_FRAME = 10
BLANK_FRAME = 11
MAX_TIMER = 999

_BACKGROUND = (255, 255, 255)
_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3


class _TextureSource(Protocol):
    def get(self, filename: str) -> pygame.Surface: ...


class Stopwatch:
    """Whole-second game timer that can be paused and resumed.

    While paused the reading keeps advancing; resuming shifts the start
    forward by the length of the pause, so the paused span is not counted.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()
        self._paused_at: float | None = None

    @property
    def paused(self) -> bool:
        return self._paused_at is not None

    def restart(self) -> None:
        """Start counting from zero, running."""
        self._start = self._clock()
        self._paused_at = None

    def pause(self) -> None:
        """Remember when the pause began; no effect if already paused."""
        if self._paused_at is None:
            self._paused_at = self._clock()

    def resume(self) -> None:
        """End a pause, discounting its length; no effect if running."""
        if self._paused_at is not None:
            self._start += self._clock() - self._paused_at
            self._paused_at = None

    def elapsed(self) -> int:
        """Whole seconds since the start."""
        return int(self._clock() - self._start)


def counter_frames(remaining: int) -> tuple[int, int, int]:
    """Digit frames for the mine counter: sign (or blank), tens, units."""
    sign = MINUS_FRAME if remaining < 0 else BLANK_FRAME
    value = abs(remaining)
    return sign, (value // 10) % 10, value % 10


def timer_frames(elapsed: int) -> tuple[int, int, int]:
    """Digit frames for the timer, clamped to 0..999."""
    value = max(0, min(elapsed, MAX_TIMER))
    return value // 100, (value // 10) % 10, value % 10


def draw_board(
    surface: pygame.Surface, board: Board, textures: _TextureSource
) -> list[tuple[str, tuple[float, float]]]:
    """Draw every tile; return the images drawn with their positions, in order."""
    drawn: list[tuple[str, tuple[float, float]]] = []

    def blit(name: str, position: tuple[float, float]) -> None:
        surface.blit(textures.get(name), position)
        drawn.append((name, position))

    for tile in board.tiles:
        position = tile.position
        if not tile.revealed and tile.flagged:
            blit("tile_revealed.png", position)
            blit("flag.png", position)
        elif not tile.revealed:
            blit("tile_hidden.png", position)
        else:
            blit("tile_revealed.png", position)
            if tile.mine:
                blit("mine.png", position)
            elif tile.adjacent_mines > 0:
                blit(f"number_{tile.adjacent_mines}.png", position)
    return drawn


def _draw_digits(
    surface: pygame.Surface,
    digits: pygame.Surface,
    frames: Sequence[int],
    x: float,
    y: float,
) -> None:
    for i, frame in enumerate(frames):
        area = pygame.Rect(DIGIT_WIDTH * frame, 0, DIGIT_WIDTH, DIGIT_HEIGHT)
        surface.blit(digits, (x + DIGIT_WIDTH * i, y), area)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="minefield", description="Play minesweeper.")
    parser.add_argument("--config", default="config.cfg", help="board configuration file")
    parser.add_argument("--images", default=DEFAULT_IMAGE_DIR, help="directory of images")
    parser.add_argument("--font", default="font.ttf", help="font file")
    parser.add_argument("--leaderboard", default="leaderboard.txt", help="leaderboard file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    args = _parse_args(argv)
    player = show_welcome(args.config, args.font)
    if not player:
        pygame.quit()
        return 0

    config = load_config(args.config)
    width = config.cols * TILE_SIZE
    height = config.rows * TILE_SIZE + PANEL_HEIGHT
    panel_y = config.rows * TILE_SIZE

    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Minesweeper")
        textures = TextureManager(args.images)
        board = Board(config.cols, config.rows, config.mines)
        stopwatch = Stopwatch()
        frame_clock = pygame.time.Clock()

        def button(name: str, x: int) -> pygame.Rect:
            return textures.get(name).get_rect(topleft=(x, panel_y + 32))

        face_rect = button("face_happy.png", width // 2 - 16)
        debug_rect = button("debug.png", width - 304)
        pause_rect = button("pause.png", width - 240)
        lb_rect = button("leaderboard.png", width - 176)

        face = "face_happy.png"
        debug_mode = False
        paused = False

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                if event.type != pygame.MOUSEBUTTONDOWN:
                    continue
                px, py = event.pos
                gx, gy = px // TILE_SIZE, py // TILE_SIZE
                on_board = 0 <= gx < config.cols and 0 <= gy < config.rows

                if event.button == _LEFT_BUTTON:
                    if face_rect.collidepoint(px, py):
                        board.reset()
                        face = "face_happy.png"
                        paused = False
                        stopwatch.restart()
                    elif debug_rect.collidepoint(px, py) and not board.game_over:
                        debug_mode = not debug_mode
                    elif pause_rect.collidepoint(px, py) and not board.game_over:
                        paused = not paused
                        if paused:
                            stopwatch.pause()
                        else:
                            stopwatch.resume()
                    elif lb_rect.collidepoint(px, py):
                        was_paused = paused
                        paused = True
                        show_leaderboard(
                            stopwatch.elapsed(), player, args.leaderboard, args.font
                        )
                        screen = pygame.display.get_surface()
                        paused = was_paused
                    elif not paused and on_board:
                        board.reveal_at(gx, gy)
                elif event.button == _RIGHT_BUTTON and not paused and on_board:
                    board.flag_at(gx, gy)

            if not running:
                break

            if not board.game_over and board.is_win():
                face = "face_win.png"
            if board.game_over:
                face = "face_lose.png"

            screen.fill(_BACKGROUND)
            if paused:
                revealed = textures.get("tile_revealed.png")
                for tile in board.tiles:
                    screen.blit(revealed, (tile.x * TILE_SIZE, tile.y * TILE_SIZE))
            else:
                draw_board(screen, board, textures)
                if debug_mode and not board.game_over:
                    mine = textures.get("mine.png")
                    for tile in board.tiles:
                        if tile.mine and not tile.revealed:
                            screen.blit(mine, (tile.x * TILE_SIZE, tile.y * TILE_SIZE))

            screen.blit(textures.get(face), face_rect)
            screen.blit(textures.get("debug.png"), debug_rect)
            screen.blit(textures.get("play.png" if paused else "pause.png"), pause_rect)
            screen.blit(textures.get("leaderboard.png"), lb_rect)

            digits = textures.get("digits.png")
            _draw_digits(screen, digits, counter_frames(board.remaining_mines()), 33, panel_y + 16)
            _draw_digits(screen, digits, timer_frames(stopwatch.elapsed()), width - 70, panel_y + 16)

            pygame.display.flip()
            frame_clock.tick(60)
    finally:
        pygame.quit()
    return 0