"""
Game Logs - Ordered, append-only move history.

Two levels:
- GameLog: the turns of one game, optionally with that game's settings
- LogCollection: every completed GameLog in a session, in play order

Nothing is ever removed. Consumers get tuples, so the order they see is
turn order and they cannot mutate the log in place.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from ..settings import Settings
from .state import Coordinates, Tile


@dataclass(frozen=True)
class TurnLog:
    """One recorded move."""
    turn_number: int
    player: Tile
    location: Coordinates

    def __post_init__(self):
        if self.turn_number < 1:
            raise ValueError("turn_number starts at 1")
        if not self.player.is_player:
            raise ValueError("A turn must be made by a player")

    @property
    def x(self) -> int:
        return self.location.x

    @property
    def y(self) -> int:
        return self.location.y


@dataclass
class GameLog:
    """
    The complete ordered turn history of one game.

    settings is a snapshot of the game's settings when the session was
    configured to keep one (settings can change between games).
    """
    settings: Settings | None = None
    _entries: list[TurnLog] = field(default_factory=list, repr=False)

    def append(self, entry: TurnLog) -> None:
        """Record the next turn. Turn numbers must follow on exactly."""
        expected = len(self._entries) + 1
        if entry.turn_number != expected:
            raise ValueError(
                f"Expected turn {expected}, got turn {entry.turn_number}"
            )
        self._entries.append(entry)

    def entries(self) -> tuple[TurnLog, ...]:
        return tuple(self._entries)

    @property
    def last_entry(self) -> TurnLog | None:
        return self._entries[-1] if self._entries else None

    @property
    def has_settings(self) -> bool:
        return self.settings is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TurnLog]:
        return iter(self.entries())


@dataclass
class LogCollection:
    """All completed game logs of a session, in the order they were played."""
    _games: list[GameLog] = field(default_factory=list, repr=False)

    def append(self, game_log: GameLog) -> None:
        self._games.append(game_log)

    def entries(self) -> tuple[GameLog, ...]:
        return tuple(self._games)

    @property
    def is_empty(self) -> bool:
        return len(self._games) == 0

    def __len__(self) -> int:
        return len(self._games)

    def __iter__(self) -> Iterator[GameLog]:
        return iter(self.entries())
