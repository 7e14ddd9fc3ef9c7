"""
Interface - Terminal rendering and console input.
"""

from .render import (
    render_board,
    render_tile,
    format_error,
    describe_settings,
    format_settings_block,
    format_turn_log,
    format_game_log,
    format_log_collection,
    CLEAR_SCREEN,
    WELCOME_MESSAGE,
)
from .prompt import ConsolePrompt, ConsoleMoveProvider, parse_coordinates, parse_int

__all__ = [
    "render_board",
    "render_tile",
    "format_error",
    "describe_settings",
    "format_settings_block",
    "format_turn_log",
    "format_game_log",
    "format_log_collection",
    "CLEAR_SCREEN",
    "WELCOME_MESSAGE",
    "ConsolePrompt",
    "ConsoleMoveProvider",
    "parse_coordinates",
    "parse_int",
]
