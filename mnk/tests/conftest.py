"""
Pytest fixtures for MNK tests.
"""

import pytest

from ..settings import Settings
from ..engine_core.state import Board, Coordinates, Tile
from ..interface.prompt import ConsolePrompt


class ScriptedMoves:
    """Move provider that replays a fixed list of (x, y) moves."""

    def __init__(self, moves):
        self.moves = list(moves)
        self.requests = []

    def __call__(self, player, board):
        self.requests.append(player)
        if not self.moves:
            raise AssertionError("Move script ran out")
        x, y = self.moves.pop(0)
        return Coordinates(x, y)


class ScriptedPrompt(ConsolePrompt):
    """ConsolePrompt fed from a list of input lines, capturing output."""

    def __init__(self, lines, color=False):
        self.lines = list(lines)
        self.output = []
        super().__init__(input_fn=self._next_line, output_fn=self.output.append, color=color)

    def _next_line(self, prompt):
        if not self.lines:
            raise AssertionError(f"Input script ran out at prompt {prompt!r}")
        return self.lines.pop(0)

    @property
    def text(self):
        return "\n".join(self.output)


def fill(board, placements):
    """Place tiles from a {(x, y): Tile} mapping."""
    for (x, y), tile in placements.items():
        assert board.place(tile, x, y).success
    return board


def unchecked_settings(width, height, matches):
    """
    Settings built without validation.

    The engine trusts its settings, so it must still behave on shapes
    the settings layer would reject (e.g. a 1x5 strip with K=5).
    """
    return Settings.model_construct(width=width, height=height, matches=matches)


def board_from_rows(rows, matches):
    """Build a board from strings like ["XO.", ".X.", "..O"]."""
    symbols = {"X": Tile.PLAYER_A, "O": Tile.PLAYER_B}
    settings = Settings(width=len(rows[0]), height=len(rows), matches=matches)
    board = Board.create(settings)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in symbols:
                board.place(symbols[ch], x, y)
    return board


@pytest.fixture
def settings_3x3() -> Settings:
    return Settings(width=3, height=3, matches=3)


@pytest.fixture
def settings_5x5_k4() -> Settings:
    return Settings(width=5, height=5, matches=4)


@pytest.fixture
def board_3x3(settings_3x3) -> Board:
    return Board.create(settings_3x3)
