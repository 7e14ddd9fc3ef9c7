"""
Game Session - Drives one game from an empty board to a win or draw.

States:
    AWAITING_MOVE -> WON | DRAWN

A rejected placement is a retry, not a transition: the state and the
player to move stay the same. Every successful placement consumes one
empty cell, so a session ends after at most width * height placements.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable
import logging

from ..settings import Settings
from ..engine_core.state import Board, Coordinates, Tile, next_player
from ..engine_core.action import PlacementError
from ..engine_core.win_checker import check_win
from ..engine_core.game_log import GameLog, TurnLog

logger = logging.getLogger(__name__)


MoveProvider = Callable[[Tile, Board], Coordinates]
TurnObserver = Callable[["TurnResult", Board], None]


class SessionState(Enum):
    """State of a game session."""
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAWN = "drawn"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionState.AWAITING_MOVE


class GameOverError(Exception):
    """Raised when a move is submitted to a finished session."""


@dataclass(frozen=True)
class TurnResult:
    """
    Result of submitting one move.

    player is who moved (or tried to). turn_number is set only when the
    move was recorded.
    """
    success: bool
    state: SessionState
    player: Tile
    location: Coordinates
    error: PlacementError | None = None
    winner: Tile | None = None
    turn_number: int | None = None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None


class GameSession:
    """
    One game of M-N-K.

    Usage:
        session = GameSession(settings)
        while not session.is_over:
            result = session.submit_move(x, y)
            if not result.success:
                # same player asked again
                ...
        log = session.game_log

    Or let the session pull moves itself:
        log = GameSession(settings).play(move_provider)
    """

    def __init__(self, settings: Settings, include_settings_snapshot: bool = False):
        self.settings = settings
        self.board: Board | None = Board.create(settings)
        self.game_log = GameLog(settings=settings if include_settings_snapshot else None)
        self.state = SessionState.AWAITING_MOVE
        self.player_to_move = Tile.PLAYER_A
        self.winner: Tile | None = None

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    @property
    def turns_played(self) -> int:
        return len(self.game_log)

    def submit_move(self, x: int, y: int) -> TurnResult:
        """
        Try to place the current player's tile at (x, y).

        Raises GameOverError if the game has already ended.
        """
        if self.is_over or self.board is None:
            raise GameOverError(f"Game is over ({self.state.value})")

        player = self.player_to_move
        location = Coordinates(x, y)

        placement = self.board.place(player, x, y)
        if not placement.success:
            logger.debug("Rejected %s at %s: %s", player.name, location, placement.error.value)
            return TurnResult(
                success=False,
                state=self.state,
                player=player,
                location=location,
                error=placement.error,
            )

        entry = TurnLog(
            turn_number=len(self.game_log) + 1,
            player=player,
            location=location,
        )
        self.game_log.append(entry)

        if check_win(self.board, player, x, y):
            self.state = SessionState.WON
            self.winner = player
            logger.info("%s won on turn %d", player.name, entry.turn_number)
        elif self.board.is_draw():
            self.state = SessionState.DRAWN
            logger.info("Draw after %d turns", entry.turn_number)
        else:
            self.player_to_move = next_player(player)

        return TurnResult(
            success=True,
            state=self.state,
            player=player,
            location=location,
            winner=self.winner,
            turn_number=entry.turn_number,
        )

    def play(self, move_provider: MoveProvider, observer: TurnObserver | None = None) -> GameLog:
        """
        Run the game to completion, asking move_provider for each move.

        observer (if given) sees every TurnResult along with the board.
        The board is released when the game ends; the log is returned.
        """
        while not self.is_over:
            coords = move_provider(self.player_to_move, self.board)
            result = self.submit_move(coords.x, coords.y)
            if observer:
                observer(result, self.board)

        self.board = None
        return self.game_log
