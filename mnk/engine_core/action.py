"""
Placement Results - Outcome of trying to put a tile on the board.

Placement failures are values, not exceptions: a rejected move is a
normal part of play (the same player is asked again), so callers
inspect the result instead of catching errors.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class PlacementError(Enum):
    """Why a placement was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    PlacementError.OUT_OF_BOUNDS: "Coordinates outside of valid range",
    PlacementError.CELL_OCCUPIED: "These coordinates are already taken!",
}


@dataclass(frozen=True)
class PlacementResult:
    """
    Result of Board.place().

    On failure the board is untouched and error says why.
    """
    success: bool
    error: PlacementError | None = None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @classmethod
    def ok(cls) -> PlacementResult:
        return cls(success=True)

    @classmethod
    def failure(cls, error: PlacementError) -> PlacementResult:
        return cls(success=False, error=error)

    def __bool__(self) -> bool:
        return self.success
