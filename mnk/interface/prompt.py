"""
Console Input - Line-oriented prompting and parsing.

Parsing is separate from prompting so it can be tested without a
terminal. ConsolePrompt takes its input and output functions as
arguments; the defaults are the builtins input() and print().
"""

from __future__ import annotations
import re
from typing import Callable, Sequence, TypeVar

from ..engine_core.state import Board, Coordinates, Tile
from .render import format_error


T = TypeVar("T")

# [ws] int [ws] , [ws] int [ws]
_COORD_PATTERN = re.compile(r"^\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*$")
_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)\s*$")


def parse_coordinates(text: str) -> Coordinates | None:
    """Parse "x,y". Returns None if the text is not a coordinate pair."""
    match = _COORD_PATTERN.match(text)
    if not match:
        return None
    return Coordinates(int(match.group(1)), int(match.group(2)))


def parse_int(text: str) -> int | None:
    match = _INT_PATTERN.match(text)
    if not match:
        return None
    return int(match.group(1))


class ConsolePrompt:
    """Prompts that keep asking until the input parses."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        color: bool = True,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.color = color

    def show(self, text: str) -> None:
        self.output_fn(text)

    def show_error(self, message: str) -> None:
        self.output_fn(format_error(message, self.color))

    def get_int(self, prompt: str) -> int:
        while True:
            value = parse_int(self.input_fn(prompt))
            if value is not None:
                return value
            self.show_error("Please enter a valid number")

    def get_int_in_range(self, prompt: str, low: int, high: int) -> int:
        while True:
            value = self.get_int(prompt)
            if low <= value <= high:
                return value
            self.show_error("Setting outside of valid range")

    def get_coordinates(self, prompt: str) -> Coordinates:
        while True:
            coords = parse_coordinates(self.input_fn(prompt))
            if coords is not None:
                return coords
            self.show_error("Please enter valid coordinates")

    def choose(self, title: str, options: Sequence[T], labels: Sequence[str]) -> T:
        """Print a numbered menu and return the chosen option."""
        lines = [f"\n{title}:"]
        lines.extend(f">> {i}. {label}" for i, label in enumerate(labels, start=1))
        self.output_fn("\n".join(lines))

        prompt = "Please select an option: "
        while True:
            choice = self.get_int(prompt)
            if 1 <= choice <= len(options):
                return options[choice - 1]
            prompt = "Please enter a valid option: "

    def enter_to_continue(self) -> None:
        self.input_fn("Press [ENTER] ")


class ConsoleMoveProvider:
    """Move provider that asks the person at the terminal."""

    def __init__(self, prompt: ConsolePrompt):
        self.prompt = prompt

    def __call__(self, player: Tile, board: Board) -> Coordinates:
        self.prompt.show(f"Player {player.symbol}'s turn")
        return self.prompt.get_coordinates("Place a tile (x,y): ")
