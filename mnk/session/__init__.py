"""
Session Module - Runs games.

A GameSession is one play-through:
- Created with validated settings
- Owns its board and game log
- Ends on a win or a draw, handing the log to the caller

The GameLoop is the menu around it and keeps every finished game's log.
"""

from .game_session import GameSession, GameOverError, SessionState, TurnResult, MoveProvider
from .game_loop import GameLoop, MenuItem, menu_items

__all__ = [
    "GameSession",
    "GameOverError",
    "SessionState",
    "TurnResult",
    "MoveProvider",
    "GameLoop",
    "MenuItem",
    "menu_items",
]
