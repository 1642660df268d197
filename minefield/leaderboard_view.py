"""Window that records a time and shows the leaderboard."""

from __future__ import annotations

import os
from collections.abc import Iterable

import pygame

from .leaderboard import Entry, format_listing, record_time

LEADERBOARD_SIZE = (400, 300)
TITLE = "LEADERBOARD"

_BACKGROUND = (0, 0, 192)
_TEXT_COLOR = (255, 255, 255)
_TITLE_Y = 40


def _load_font(path: str | os.PathLike[str] | None, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        raise RuntimeError(f"Cannot load font: {path}") from exc


def render_leaderboard(
    surface: pygame.Surface, font: pygame.font.Font, entries: Iterable[Entry]
) -> list[str]:
    """Draw the title and the ranked listing; return the lines drawn, title first."""
    entries = list(entries)
    width, height = surface.get_size()
    surface.fill(_BACKGROUND)

    was_bold, was_underlined = font.get_bold(), font.get_underline()
    font.set_bold(True)
    font.set_underline(True)
    try:
        title = font.render(TITLE, True, _TEXT_COLOR)
    finally:
        font.set_bold(was_bold)
        font.set_underline(was_underlined)
    surface.blit(title, title.get_rect(center=(width // 2, _TITLE_Y)))

    lines = format_listing(entries).split("\n") if entries else []
    if lines:
        images = [font.render(line.expandtabs(), True, _TEXT_COLOR) for line in lines]
        line_height = font.get_linesize()
        block_width = max(image.get_width() for image in images)
        left = (width - block_width) // 2
        top = (height - line_height * len(images)) // 2
        for row, image in enumerate(images):
            surface.blit(image, (left, top + row * line_height))
    return [TITLE, *lines]


def show_leaderboard(
    elapsed: int,
    player_name: str,
    path: str | os.PathLike[str] = "leaderboard.txt",
    font_path: str | os.PathLike[str] | None = "font.ttf",
) -> list[Entry]:
    """Record the player's time, show the top entries until closed, and return them."""
    pygame.init()
    previous = pygame.display.get_surface()
    restore = None
    if previous is not None:
        caption = pygame.display.get_caption()
        restore = (previous.get_size(), caption[0] if caption else "")

    font = _load_font(font_path, 18)
    entries = record_time(path, elapsed, player_name)

    screen = pygame.display.set_mode(LEADERBOARD_SIZE)
    pygame.display.set_caption("Leaderboard")
    try:
        open_ = True
        while open_:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    open_ = False
            render_leaderboard(screen, font, entries)
            pygame.display.flip()
    finally:
        if restore is not None:
            size, title = restore
            pygame.display.set_mode(size)
            pygame.display.set_caption(title)
    return entries