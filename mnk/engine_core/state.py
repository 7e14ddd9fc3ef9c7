"""
Board State - Tiles, coordinates and the game board.

Design principles:
- Flat row-major grid: cell (x, y) lives at index y * width + x
- Bounds are checked at the accessor boundary
- Append-only placement: a non-empty cell never changes
- Settings are shared read-only, never re-validated here
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from ..settings import Settings
from .action import PlacementError, PlacementResult


class Tile(Enum):
    """Occupancy state of a single cell."""
    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def is_player(self) -> bool:
        return self in PLAYERS


_SYMBOLS = {
    Tile.EMPTY: " ",
    Tile.PLAYER_A: "X",
    Tile.PLAYER_B: "O",
}

PLAYERS = (Tile.PLAYER_A, Tile.PLAYER_B)


def next_player(player: Tile) -> Tile:
    """
    Return the player who moves after `player`.

    Adding a third player means adding a branch here.
    """
    if player is Tile.PLAYER_A:
        return Tile.PLAYER_B
    if player is Tile.PLAYER_B:
        return Tile.PLAYER_A
    raise ValueError(f"{player} is not a player")


@dataclass(frozen=True)
class Coordinates:
    """Zero-based board position: x is the column, y is the row."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass
class Board:
    """
    Authoritative cell state for one game.

    Mutated only through place(). Created empty at game start and
    discarded when the game ends.
    """
    settings: Settings
    _cells: list[Tile] = field(init=False, repr=False)

    def __post_init__(self):
        self._cells = [Tile.EMPTY] * self.settings.cell_count

    @classmethod
    def create(cls, settings: Settings) -> Board:
        """Allocate an empty width x height board."""
        return cls(settings=settings)

    @property
    def width(self) -> int:
        return self.settings.width

    @property
    def height(self) -> int:
        return self.settings.height

    @property
    def matches(self) -> int:
        return self.settings.matches

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def cell_at(self, x: int, y: int) -> Tile:
        """Get the tile at (x, y). Raises IndexError when out of bounds."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} board")
        return self._cells[self._index(x, y)]

    def place(self, player: Tile, x: int, y: int) -> PlacementResult:
        """
        Place a player's tile at (x, y).

        Fails with OUT_OF_BOUNDS or CELL_OCCUPIED and leaves the board
        unchanged; otherwise the cell goes from EMPTY to `player`.
        """
        if not player.is_player:
            raise ValueError("Cannot place an empty tile")

        if not self.in_bounds(x, y):
            return PlacementResult.failure(PlacementError.OUT_OF_BOUNDS)

        index = self._index(x, y)
        if self._cells[index] is not Tile.EMPTY:
            return PlacementResult.failure(PlacementError.CELL_OCCUPIED)

        self._cells[index] = player
        return PlacementResult.ok()

    def empty_cells(self) -> int:
        return sum(1 for tile in self._cells if tile is Tile.EMPTY)

    def is_full(self) -> bool:
        return all(tile is not Tile.EMPTY for tile in self._cells)

    def is_draw(self) -> bool:
        """
        True when no empty cells are left.

        Only meaningful after the last placement was checked for a win:
        a full board with a winning line is a win.
        """
        return self.is_full()

    def rows(self) -> Iterator[tuple[Tile, ...]]:
        """Yield each row, top (y = 0) to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield tuple(self._cells[start:start + self.width])

    def snapshot(self) -> tuple[Tile, ...]:
        """Immutable copy of the flat grid."""
        return tuple(self._cells)
