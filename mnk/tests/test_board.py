"""
Tests for the board.

Tests:
- Creation from settings
- Placement rules and atomicity
- Full/draw detection
- Player rotation
"""

import pytest

from ..settings import Settings
from ..engine_core.state import PLAYERS, Board, Coordinates, Tile, next_player
from ..engine_core.action import PlacementError
from .conftest import fill


class TestBoardCreation:
    """Tests for a fresh board."""

    def test_new_board_is_empty(self, board_3x3):
        """Every cell starts empty."""
        assert all(tile is Tile.EMPTY for tile in board_3x3.snapshot())
        assert board_3x3.empty_cells() == 9

    def test_dimensions_match_settings(self):
        """Grid size follows the settings."""
        board = Board.create(Settings(width=4, height=2, matches=2))
        assert board.dimensions == (4, 2)
        assert len(board.snapshot()) == 8
        assert len(list(board.rows())) == 2
        assert all(len(row) == 4 for row in board.rows())

    @pytest.mark.parametrize("width,height,matches", [(1, 1, 1), (3, 3, 3), (7, 2, 2), (99, 99, 5)])
    def test_grid_length_is_cell_count(self, width, height, matches):
        """The grid is always allocated from the settings."""
        settings = Settings(width=width, height=height, matches=matches)
        board = Board(settings)
        assert len(board.snapshot()) == settings.cell_count
        assert board.empty_cells() == settings.cell_count
        assert not board.is_full()

    def test_grid_cannot_be_passed_in(self, settings_3x3):
        """Callers cannot hand in a grid of the wrong size."""
        with pytest.raises(TypeError):
            Board(settings_3x3, [Tile.EMPTY] * 2)
        with pytest.raises(TypeError):
            Board(settings=settings_3x3, _cells=[Tile.EMPTY] * 2)

    def test_cell_at_out_of_bounds_raises(self, board_3x3):
        """Accessor rejects coordinates off the board."""
        with pytest.raises(IndexError):
            board_3x3.cell_at(3, 0)
        with pytest.raises(IndexError):
            board_3x3.cell_at(0, -1)


class TestPlacement:
    """Tests for Board.place()."""

    def test_place_on_empty_cell(self, board_3x3):
        """Placing on an empty cell succeeds."""
        result = board_3x3.place(Tile.PLAYER_A, 1, 2)
        assert result.success
        assert result.error is None
        assert board_3x3.cell_at(1, 2) is Tile.PLAYER_A

    def test_row_major_layout(self):
        """x is the column, y is the row."""
        board = Board.create(Settings(width=3, height=2, matches=2))
        board.place(Tile.PLAYER_B, 2, 0)
        rows = list(board.rows())
        assert rows[0] == (Tile.EMPTY, Tile.EMPTY, Tile.PLAYER_B)
        assert rows[1] == (Tile.EMPTY, Tile.EMPTY, Tile.EMPTY)

    def test_out_of_bounds(self, board_3x3):
        """(5,5) on a 3x3 board is rejected and the board is unchanged."""
        before = board_3x3.snapshot()
        result = board_3x3.place(Tile.PLAYER_A, 5, 5)

        assert not result.success
        assert result.error is PlacementError.OUT_OF_BOUNDS
        assert board_3x3.snapshot() == before

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3), (-1, -1)])
    def test_out_of_bounds_edges(self, board_3x3, x, y):
        """Every side of the board is bounded."""
        assert board_3x3.place(Tile.PLAYER_A, x, y).error is PlacementError.OUT_OF_BOUNDS

    def test_cell_occupied(self, board_3x3):
        """Placing on a taken cell fails and leaves it alone."""
        board_3x3.place(Tile.PLAYER_A, 0, 0)
        before = board_3x3.snapshot()

        result = board_3x3.place(Tile.PLAYER_B, 0, 0)

        assert not result.success
        assert result.error is PlacementError.CELL_OCCUPIED
        assert "taken" in result.message
        assert board_3x3.snapshot() == before
        assert board_3x3.cell_at(0, 0) is Tile.PLAYER_A

    def test_same_player_cannot_replace_own_tile(self, board_3x3):
        """Occupied means occupied, whoever owns it."""
        board_3x3.place(Tile.PLAYER_A, 1, 1)
        assert board_3x3.place(Tile.PLAYER_A, 1, 1).error is PlacementError.CELL_OCCUPIED

    def test_failed_placements_never_change_grid(self, board_3x3):
        """Any failing placement leaves the grid identical."""
        fill(board_3x3, {(0, 0): Tile.PLAYER_A, (2, 1): Tile.PLAYER_B})
        attempts = [(0, 0), (2, 1), (3, 3), (-1, 2), (1, 9)]
        for x, y in attempts:
            before = board_3x3.snapshot()
            assert not board_3x3.place(Tile.PLAYER_B, x, y)
            assert board_3x3.snapshot() == before

    def test_placing_empty_tile_is_a_bug(self, board_3x3):
        """Only players place tiles."""
        with pytest.raises(ValueError):
            board_3x3.place(Tile.EMPTY, 0, 0)


class TestDraw:
    """Tests for full-board detection."""

    def test_partial_board_is_not_draw(self, board_3x3):
        board_3x3.place(Tile.PLAYER_A, 0, 0)
        assert not board_3x3.is_full()
        assert not board_3x3.is_draw()

    def test_full_board(self, board_3x3):
        """A board with no empty cells is full."""
        for y in range(3):
            for x in range(3):
                board_3x3.place(Tile.PLAYER_A if (x + y) % 2 else Tile.PLAYER_B, x, y)
        assert board_3x3.is_full()
        assert board_3x3.is_draw()
        assert board_3x3.empty_cells() == 0

    def test_single_cell_board(self):
        """A 1x1 board is full after one move."""
        board = Board.create(Settings(width=1, height=1, matches=1))
        assert not board.is_full()
        board.place(Tile.PLAYER_A, 0, 0)
        assert board.is_full()


class TestPlayers:
    """Tests for tiles and turn rotation."""

    def test_rotation_is_two_cycle(self):
        assert next_player(Tile.PLAYER_A) is Tile.PLAYER_B
        assert next_player(Tile.PLAYER_B) is Tile.PLAYER_A
        assert next_player(next_player(Tile.PLAYER_A)) is Tile.PLAYER_A

    def test_empty_has_no_next_player(self):
        with pytest.raises(ValueError):
            next_player(Tile.EMPTY)

    def test_symbols(self):
        assert Tile.PLAYER_A.symbol == "X"
        assert Tile.PLAYER_B.symbol == "O"
        assert Tile.EMPTY.symbol == " "

    def test_players_are_the_non_empty_tiles(self):
        assert PLAYERS == (Tile.PLAYER_A, Tile.PLAYER_B)
        assert [tile for tile in Tile if tile.is_player] == list(PLAYERS)
        assert next_player(PLAYERS[0]) is PLAYERS[1]

    def test_coordinates_are_values(self):
        assert Coordinates(1, 2) == Coordinates(1, 2)
        assert str(Coordinates(1, 2)) == "1,2"
        with pytest.raises(AttributeError):
            Coordinates(1, 2).x = 5
