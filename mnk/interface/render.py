"""
Terminal Rendering - Text output for boards, settings and game logs.

Everything here returns strings; printing is left to the caller so the
same formatting serves the screen and saved log files.
"""

from __future__ import annotations
from typing import Iterable

from ..settings import Settings
from ..engine_core.state import Board, Tile
from ..engine_core.game_log import GameLog, TurnLog


COL_RESET = "\x1b[0m"
COL_ERROR = "\x1b[97;41m"
CLEAR_SCREEN = "\x1b[1J\x1b[1;1H"

_TILE_COLOURS = {
    Tile.PLAYER_A: "\x1b[31m",  # red
    Tile.PLAYER_B: "\x1b[32m",  # green
}

# Box-drawing characters
TOP_LEFT, TOP_T, TOP_RIGHT = "┌", "┬", "┐"
LEFT_T, CROSS, RIGHT_T = "├", "┼", "┤"
BOTTOM_LEFT, BOTTOM_T, BOTTOM_RIGHT = "└", "┴", "┘"
HORIZONTAL, VERTICAL = "─", "│"

WELCOME_MESSAGE = (
    "   ~~~~~  Welcome to M-N-K Tic-Tac-Toe!!  ~~~~~\n\n"
    "The rules of the game are:\n"
    "- The board is M cells wide and N cells high\n"
    "- Players take turns placing a tile on an empty space on the board\n"
    "- The first player to place K tiles in a row wins!\n"
    "- Tiles can be lined up vertically, horizontally, or diagonally\n"
)


def render_tile(tile: Tile, color: bool = True) -> str:
    """A tile padded to three characters, coloured per player."""
    text = f" {tile.symbol} "
    if color and tile in _TILE_COLOURS:
        return f"{_TILE_COLOURS[tile]}{text}{COL_RESET}"
    return text


def _border(width: int, left: str, middle: str, right: str) -> str:
    segment = HORIZONTAL * 3
    return "  " + left + middle.join([segment] * width) + right


def render_board(board: Board, color: bool = True) -> str:
    """
    Draw the board with column numbers above and row numbers on the left.
    """
    width = board.width
    lines = ["Current Game Board:"]
    lines.append(" " + "".join(f"{i:4d}" for i in range(width)))
    lines.append(_border(width, TOP_LEFT, TOP_T, TOP_RIGHT))

    rows = list(board.rows())
    for y, row in enumerate(rows):
        cells = VERTICAL.join(render_tile(tile, color) for tile in row)
        lines.append(f"{y:2d}{VERTICAL}{cells}{VERTICAL}")
        if y < len(rows) - 1:
            lines.append(_border(width, LEFT_T, CROSS, RIGHT_T))

    lines.append(_border(width, BOTTOM_LEFT, BOTTOM_T, BOTTOM_RIGHT))
    return "\n".join(lines)


def format_error(message: str, color: bool = True) -> str:
    if color:
        return f"{COL_ERROR}ERROR:{COL_RESET} {message}"
    return f"ERROR: {message}"


def describe_settings(settings: Settings) -> str:
    """Human-readable settings summary for the View Settings screen."""
    return (
        "\nThe game's settings are:\n\n"
        f"  Board size: {settings.width}x{settings.height}\n"
        f"  Win condition: {settings.matches} tiles in a row\n"
    )


def format_settings_block(settings: Settings) -> str:
    return (
        "SETTINGS:\n"
        f"  M: {settings.width}\n"
        f"  N: {settings.height}\n"
        f"  K: {settings.matches}\n\n"
    )


def _log_symbol(player: Tile) -> str:
    return player.symbol if player.is_player else "N"


def format_turn_log(entry: TurnLog) -> str:
    return (
        f"  Turn: {entry.turn_number}\n"
        f"  Player: {_log_symbol(entry.player)}\n"
        f"  Location: {entry.x},{entry.y}\n\n"
    )


def format_game_log(game_log: GameLog) -> str:
    """One game's turns, preceded by its settings snapshot if it has one."""
    parts = []
    if game_log.settings is not None:
        parts.append(format_settings_block(game_log.settings))
    parts.extend(format_turn_log(entry) for entry in game_log.entries())
    return "".join(parts)


def game_banner(game_number: int) -> str:
    return (
        "##################\n"
        f"###   GAME {game_number:2d}  ###\n"
        "##################\n"
    )


def format_log_collection(
    game_logs: Iterable[GameLog],
    settings: Settings,
    include_settings_snapshot: bool = False,
) -> str:
    """
    Every game in play order.

    Without per-game snapshots the current settings are printed once at
    the top. With them, each game prints its own block and no global one.
    """
    parts = []
    if not include_settings_snapshot:
        parts.append(format_settings_block(settings))

    for number, game_log in enumerate(game_logs, start=1):
        parts.append(game_banner(number))
        parts.append(format_game_log(game_log))

    return "".join(parts)
