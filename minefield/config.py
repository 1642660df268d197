"""Board configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass


class ConfigError(Exception):
    """Raised when the configuration file is missing or malformed."""


@dataclass(frozen=True)
class Config:
    """Board dimensions and mine count."""

    cols: int
    rows: int
    mines: int


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read three whitespace-separated integers: columns, rows, mines."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError(f"Cannot open config file: {os.fspath(path)}") from exc

    fields = text.split()
    if len(fields) < 3:
        raise ConfigError(f"config file {os.fspath(path)} needs columns, rows and mines")
    try:
        cols, rows, mines = (int(f) for f in fields[:3])
    except ValueError as exc:
        raise ConfigError(f"config file {os.fspath(path)} holds a non-integer value") from exc
    return Config(cols, rows, mines)