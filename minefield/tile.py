"""A single cell of the minefield."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class TileState(enum.Enum):
    """Visibility state of a tile."""

    HIDDEN = "hidden"
    REVEALED = "revealed"
    FLAGGED = "flagged"


@dataclass(eq=False)
class Tile:
    """A grid cell that may hold a mine and knows its neighbours."""

    x: int
    y: int
    size: int = 32
    y_offset: float = 0.0
    mine: bool = False
    adjacent_mines: int = 0
    state: TileState = TileState.HIDDEN
    neighbors: list[Tile] = field(default_factory=list, repr=False)

    def add_neighbor(self, tile: Tile) -> None:
        """Register an adjacent tile."""
        self.neighbors.append(tile)

    def reveal(self) -> None:
        """Uncover a hidden tile, counting adjacent mines unless it is one."""
        if self.state is not TileState.HIDDEN:
            return
        self.state = TileState.REVEALED
        if self.mine:
            return
        self.adjacent_mines = sum(1 for n in self.neighbors if n.mine)

    def toggle_flag(self) -> None:
        """Flag a hidden tile, or unflag a flagged one; revealed tiles are untouched."""
        if self.state is TileState.HIDDEN:
            self.state = TileState.FLAGGED
        elif self.state is TileState.FLAGGED:
            self.state = TileState.HIDDEN

    @property
    def revealed(self) -> bool:
        return self.state is TileState.REVEALED

    @property
    def flagged(self) -> bool:
        return self.state is TileState.FLAGGED

    @property
    def position(self) -> tuple[float, float]:
        """Pixel position of the tile's top-left corner."""
        return float(self.x * self.size), float(self.y * self.size + self.y_offset)