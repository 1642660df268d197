"""The minefield grid and its game rules."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Iterator

from .tile import Tile

TILE_SIZE = 32

_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class Board:
    """A grid of tiles with randomly placed mines."""

    def __init__(
        self,
        cols: int,
        rows: int,
        mines: int,
        y_offset: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError(f"board must have positive size, got {cols}x{rows}")
        if not 0 <= mines <= cols * rows:
            raise ValueError(f"cannot place {mines} mines on a {cols}x{rows} board")
        self.cols = cols
        self.rows = rows
        self.mine_count = mines
        self.y_offset = y_offset
        self._rng = rng if rng is not None else random.Random()
        self._game_over = False
        self._grid: list[list[Tile]] = []
        self.reset()

    def _build(self) -> None:
        self._game_over = False
        self._grid = [
            [Tile(x, y, TILE_SIZE, self.y_offset) for x in range(self.cols)]
            for y in range(self.rows)
        ]
        for y, row in enumerate(self._grid):
            for x, tile in enumerate(row):
                for nx, ny in self._neighbor_coords(x, y):
                    tile.add_neighbor(self._grid[ny][nx])

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def _neighbor_coords(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for dx, dy in _OFFSETS:
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny):
                yield nx, ny

    def reset(self) -> None:
        """Start a new game with freshly shuffled mines."""
        self._build()
        for index in self._rng.sample(range(self.cols * self.rows), self.mine_count):
            self._grid[index // self.cols][index % self.cols].mine = True

    def place_mines_at(self, positions: Iterable[tuple[int, int]]) -> None:
        """Start a new game with mines at exactly the given (x, y) positions."""
        spots = set(positions)
        for x, y in spots:
            if not self._in_bounds(x, y):
                raise ValueError(f"mine position ({x}, {y}) is off the board")
        self._build()
        for x, y in spots:
            self._grid[y][x].mine = True
        self.mine_count = len(spots)

    def reveal_at(self, x: int, y: int) -> None:
        """Reveal a tile, flooding outward across tiles with no adjacent mines."""
        if self._game_over or not self._in_bounds(x, y):
            return
        start = self._grid[y][x]
        if start.revealed or start.flagged:
            return
        if start.mine:
            self._game_over = True
            self.reveal_all_mines()
            return

        queue = deque([(x, y)])
        while queue:
            cx, cy = queue.popleft()
            tile = self._grid[cy][cx]
            if tile.revealed or tile.flagged:
                continue
            tile.reveal()
            if tile.adjacent_mines == 0:
                for nx, ny in self._neighbor_coords(cx, cy):
                    neighbor = self._grid[ny][nx]
                    if not neighbor.revealed and not neighbor.mine:
                        queue.append((nx, ny))

    def flag_at(self, x: int, y: int) -> None:
        """Toggle the flag on a tile while the game is running."""
        if self._game_over or not self._in_bounds(x, y):
            return
        self._grid[y][x].toggle_flag()

    def is_win(self) -> bool:
        """True when every safe tile has been revealed."""
        safe_revealed = sum(1 for t in self.tiles if not t.mine and t.revealed)
        return safe_revealed == self.cols * self.rows - self.mine_count

    @property
    def game_over(self) -> bool:
        """True once a mine has been revealed."""
        return self._game_over

    def remaining_mines(self) -> int:
        """Mine count minus the number of placed flags; may be negative."""
        return self.mine_count - sum(1 for t in self.tiles if t.flagged)

    def reveal_all_mines(self) -> None:
        for tile in self.tiles:
            if tile.mine and not tile.revealed:
                tile.reveal()

    def tile(self, x: int, y: int) -> Tile:
        if not self._in_bounds(x, y):
            raise IndexError(f"no tile at ({x}, {y})")
        return self._grid[y][x]

    @property
    def tiles(self) -> tuple[Tile, ...]:
        """All tiles in row-major order."""
        return tuple(t for row in self._grid for t in row)