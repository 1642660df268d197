"""Cached loading of image files used to draw the game."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

DEFAULT_IMAGE_DIR = "images"


class TextureError(RuntimeError):
    """Raised when an image file cannot be loaded."""


class TextureManager:
    """Loads images from a directory once and hands out the cached surfaces."""

    def __init__(self, directory: str | os.PathLike[str] = DEFAULT_IMAGE_DIR) -> None:
        self.directory = Path(directory)
        self._cache: dict[str, pygame.Surface] = {}

    def get(self, filename: str) -> pygame.Surface:
        """Return the image called ``filename``, loading it on first use."""
        cached = self._cache.get(filename)
        if cached is not None:
            return cached
        try:
            surface = pygame.image.load(os.fspath(self.directory / filename))
        except (OSError, pygame.error) as exc:
            raise TextureError(f"Failed to load texture: {filename}") from exc
        self._cache[filename] = surface
        return surface

    def __contains__(self, filename: object) -> bool:
        return filename in self._cache

    def __len__(self) -> int:
        return len(self._cache)