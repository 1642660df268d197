"""Welcome screen that asks the player for a name."""

from __future__ import annotations

import os

import pygame

from .board import TILE_SIZE
from .config import load_config

MAX_NAME_LENGTH = 10
PANEL_HEIGHT = 100

_BACKGROUND = (0, 0, 255)
_TEXT_COLOR = (255, 255, 255)
_INPUT_COLOR = (255, 255, 0)


class NameInput:
    """Player-name editor: ASCII letters only, first capitalised, the rest lower case."""

    def __init__(self, max_length: int = MAX_NAME_LENGTH) -> None:
        self.max_length = max_length
        self._name = ""
        self._edited = False

    @property
    def name(self) -> str:
        return self._name

    def add_char(self, char: str) -> bool:
        """Append a letter if it is allowed; return whether it was taken."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if not (char.isascii() and char.isalpha()):
            return False
        if len(self._name) >= self.max_length:
            return False
        self._name += char.lower() if self._name else char.upper()
        self._edited = True
        return True

    def backspace(self) -> bool:
        """Remove the last letter; return whether anything was removed."""
        if not self._name:
            return False
        self._name = self._name[:-1]
        self._edited = True
        return True

    def display(self) -> str:
        """Text shown in the input field: the name with a cursor once edited."""
        return f"{self._name}|" if self._edited else ""


def _load_font(path: str | os.PathLike[str] | None, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        raise RuntimeError(f"Cannot load font: {path}") from exc


def _blit_centered(screen: pygame.Surface, image: pygame.Surface, x: float, y: float) -> None:
    screen.blit(image, image.get_rect(center=(round(x), round(y))))


def show_welcome(
    config_path: str | os.PathLike[str] = "config.cfg",
    font_path: str | os.PathLike[str] | None = "font.ttf",
) -> str:
    """Ask for the player's name; return it, or an empty string if the window is closed."""
    config = load_config(config_path)
    width = config.cols * TILE_SIZE
    height = config.rows * TILE_SIZE + PANEL_HEIGHT

    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Welcome to Minesweeper")

    title_font = _load_font(font_path, 24)
    title_font.set_bold(True)
    title_font.set_underline(True)
    prompt_font = _load_font(font_path, 20)
    input_font = _load_font(font_path, 18)

    title = title_font.render("WELCOME TO MINESWEEPER!", True, _TEXT_COLOR)
    prompt = prompt_font.render("Enter your name:", True, _TEXT_COLOR)
    center_x, center_y = width / 2, height / 2
    entry = NameInput()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return ""
            if event.type == pygame.TEXTINPUT:
                for char in event.text:
                    entry.add_char(char)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_BACKSPACE:
                    entry.backspace()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER) and entry.name:
                    return entry.name

        screen.fill(_BACKGROUND)
        _blit_centered(screen, title, center_x, center_y - 150)
        _blit_centered(screen, prompt, center_x, center_y - 75)
        shown = entry.display()
        if shown:
            _blit_centered(
                screen, input_font.render(shown, True, _INPUT_COLOR), center_x, center_y - 45
            )
        pygame.display.flip()