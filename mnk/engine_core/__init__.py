"""
Engine Core - Board state, placement rules, win detection and move history.

The engine:
1. Creates an empty Board from validated Settings
2. Places tiles, rejecting out-of-bounds or occupied cells
3. Checks the lines through each new tile for a win
4. Reports a draw when the board fills without a win
5. Records every successful move in a GameLog
"""

from .state import Board, Coordinates, Tile, PLAYERS, next_player
from .action import PlacementError, PlacementResult
from .win_checker import check_win, count_direction, AXES
from .game_log import TurnLog, GameLog, LogCollection

__all__ = [
    "Board",
    "Coordinates",
    "Tile",
    "PLAYERS",
    "next_player",
    "PlacementError",
    "PlacementResult",
    "check_win",
    "count_direction",
    "AXES",
    "TurnLog",
    "GameLog",
    "LogCollection",
]
