"""
Win Checker - Decides whether the tile just placed completes a line.

Only the lines through the newly placed tile are scanned. A new tile
is the only cell that can complete a new line, so the rest of the
board never needs a rescan.

Axes are checked in this order, stopping at the first win:
    (1, 0)  - horizontal
    (0, 1)  - vertical
    (1, 1)  - descending diagonal
    (1, -1) - rising diagonal
"""

from __future__ import annotations

from .state import Board, Tile


AXES: tuple[tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (1, 1),
    (1, -1),
)


def check_win(board: Board, player: Tile, x: int, y: int) -> bool:
    """
    Return True if the tile at (x, y) is part of a run of at least
    board.matches tiles owned by `player`.

    Precondition: board.cell_at(x, y) == player. Does not mutate the board.
    """
    for dx, dy in AXES:
        if count_direction(board, player, x, y, dx, dy) >= board.matches:
            return True
    return False


def count_direction(board: Board, player: Tile, x: int, y: int, dx: int, dy: int) -> int:
    """
    Count contiguous `player` tiles along one axis through (x, y).

    The forward scan starts on (x, y) itself so the placed tile is
    counted once; the backward scan starts one step behind it.
    """
    forward = _scan(board, player, x, y, dx, dy)
    backward = _scan(board, player, x - dx, y - dy, -dx, -dy)
    return forward + backward


def _scan(board: Board, player: Tile, x: int, y: int, dx: int, dy: int) -> int:
    count = 0
    while board.in_bounds(x, y) and board.cell_at(x, y) is player:
        count += 1
        x += dx
        y += dy
    return count
