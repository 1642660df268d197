import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest import mock

import pygame
import pytest

from minefield.config import ConfigError
from minefield.welcome import MAX_NAME_LENGTH, NameInput, show_welcome


def test_first_letter_upper_rest_lower():
    entry = NameInput()
    for char in "aBC":
        assert entry.add_char(char)
    assert entry.name == "Abc"


def test_display_is_empty_until_edited():
    entry = NameInput()
    assert entry.display() == ""
    entry.add_char("z")
    assert entry.display() == entry.name + "|"


def test_rejects_non_letters():
    entry = NameInput()
    for char in ("1", " ", "-", "\u00e9"):
        assert not entry.add_char(char)
    assert entry.name == ""
    assert entry.display() == ""


def test_rejects_multi_character_input():
    with pytest.raises(ValueError):
        NameInput().add_char("ab")


def test_length_is_limited():
    entry = NameInput()
    accepted = [entry.add_char("q") for _ in range(MAX_NAME_LENGTH + 3)]
    assert len(entry.name) == MAX_NAME_LENGTH
    assert accepted.count(True) == MAX_NAME_LENGTH
    assert entry.name[0].isupper() and entry.name[1:].islower()


def test_backspace_removes_last_letter():
    entry = NameInput()
    for char in "max":
        entry.add_char(char)
    assert entry.backspace()
    assert entry.name == "Ma"
    assert entry.display() == "Ma|"


def test_backspace_on_empty_does_nothing():
    entry = NameInput()
    assert not entry.backspace()
    assert entry.display() == ""


def test_capitalises_again_after_clearing():
    entry = NameInput()
    entry.add_char("a")
    entry.backspace()
    entry.add_char("b")
    assert entry.name == "B"
    assert entry.display() == "B|"


def _config(tmp_path):
    path = tmp_path / "config.cfg"
    path.write_text("10 8 5", encoding="utf-8")
    return path


def test_show_welcome_returns_typed_name(tmp_path):
    events = [
        pygame.event.Event(pygame.TEXTINPUT, text="jOe9"),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE),
        pygame.event.Event(pygame.TEXTINPUT, text="y"),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN),
    ]
    with mock.patch("pygame.event.get", return_value=events):
        name = show_welcome(_config(tmp_path), None)
    assert name == "Joy"
    assert pygame.display.get_surface().get_size() == (10 * 32, 8 * 32 + 100)


def test_show_welcome_close_returns_empty(tmp_path):
    events = [
        pygame.event.Event(pygame.TEXTINPUT, text="ann"),
        pygame.event.Event(pygame.QUIT),
    ]
    with mock.patch("pygame.event.get", return_value=events):
        assert show_welcome(_config(tmp_path), None) == ""


def test_show_welcome_ignores_enter_without_name(tmp_path):
    batches = [
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    with mock.patch("pygame.event.get", side_effect=batches):
        assert show_welcome(_config(tmp_path), None) == ""


def test_show_welcome_missing_config(tmp_path):
    with pytest.raises(ConfigError):
        show_welcome(tmp_path / "absent.cfg", None)


def test_show_welcome_missing_font(tmp_path):
    with pytest.raises(RuntimeError, match="Cannot load font"):
        show_welcome(_config(tmp_path), tmp_path / "absent.ttf")