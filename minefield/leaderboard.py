"""Leaderboard file storage and formatting."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class Entry:
    """One leaderboard line; ``is_new`` marks the entry just recorded."""

    time_sec: int
    name: str
    is_new: bool = False


def _leading_int(text: str) -> int:
    stripped = text.lstrip()
    end = 1 if stripped[:1] in ("+", "-") else 0
    while end < len(stripped) and stripped[end].isdigit():
        end += 1
    digits = stripped[:end]
    if not digits.lstrip("+-"):
        raise ValueError(f"invalid time field: {text!r}")
    return int(digits)


def parse_time(text: str) -> int:
    """Convert an ``MM:SS`` string to seconds."""
    return _leading_int(text[0:2]) * 60 + _leading_int(text[3:5])


def format_time(seconds: int) -> str:
    """Format seconds as zero-padded ``MM:SS``."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def read_leaderboard(path: str | os.PathLike[str]) -> list[Entry]:
    """Read ``MM:SS,name`` lines; a missing file is an empty leaderboard."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return []
    entries = []
    for line in lines:
        time_text, comma, name = line.partition(",")
        if not comma:
            raise ValueError(f"malformed leaderboard line: {line!r}")
        entries.append(Entry(parse_time(time_text), name))
    return entries


def update_leaderboard(
    entries: Iterable[Entry], elapsed: int, name: str, limit: int = DEFAULT_LIMIT
) -> list[Entry]:
    """Add a new entry, sort by time and keep the fastest ``limit`` entries."""
    ranked = sorted([*entries, Entry(elapsed, name, True)], key=lambda e: e.time_sec)
    return ranked[:limit]


def write_leaderboard(path: str | os.PathLike[str], entries: Iterable[Entry]) -> None:
    """Write entries as ``MM:SS,name`` lines with no trailing newline."""
    text = "\n".join(f"{format_time(e.time_sec)},{e.name}" for e in entries)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def record_time(path: str | os.PathLike[str], elapsed: int, name: str) -> list[Entry]:
    """Merge a new time into the stored leaderboard and save it."""
    entries = update_leaderboard(read_leaderboard(path), elapsed, name, DEFAULT_LIMIT)
    write_leaderboard(path, entries)
    return entries


def format_listing(entries: Iterable[Entry]) -> str:
    """Numbered, tab-separated listing; the new entry is marked with ``*``."""
    return "\n\n".join(
        f"{rank}.\t{format_time(e.time_sec)}\t{e.name}{'*' if e.is_new else ''}"
        for rank, e in enumerate(entries, start=1)
    )