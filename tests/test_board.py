"""Tests for the board model and its row/column line views."""

import pytest

from scrabbler.board import Board, coordinates, perpendicular
from scrabbler.constants import BONUS_GRID, BOARD_SIZE
from scrabbler.errors import IllegalMoveError
from scrabbler.move import Move, Placement


def _rows(*filled):
    """15 empty rows with ``(row, text)`` overrides."""
    rows = ["." * BOARD_SIZE] * BOARD_SIZE
    for r, text in filled:
        rows[r] = text
    return rows


class TestPremiums:
    def test_layout_is_symmetric(self):
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                assert BONUS_GRID[r][c] == BONUS_GRID[c][r]
                assert BONUS_GRID[r][c] == BONUS_GRID[BOARD_SIZE - 1 - r][c]

    def test_premium_counts(self):
        flat = [b for row in BONUS_GRID for b in row]
        assert flat.count("TW") == 8
        assert flat.count("DW") == 16
        assert flat.count("TL") == 12
        assert flat.count("DL") == 24
        assert flat.count("*") == 1

    def test_square_multipliers(self):
        board = Board()
        assert board.square(7, 7).word_multiplier == 2
        assert board.square(0, 0).word_multiplier == 3
        assert board.square(1, 5).letter_multiplier == 3
        assert board.square(0, 3).letter_multiplier == 2
        assert board.square(0, 1).letter_multiplier == 1
        assert board.square(0, 1).word_multiplier == 1


class TestLines:
    def test_views_share_squares(self):
        board = Board()
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                assert board.squares_in_row(r)[c] is board.squares_in_col(c)[r]

    def test_place_visible_through_both_axes(self):
        board = Board()
        board.place(3, 4, "Q")
        assert board.line("H", 3)[4].letter == "Q"
        assert board.line("V", 4)[3].letter == "Q"
        assert board.get(3, 4) == "Q"

    def test_line_coordinates(self):
        board = Board()
        for axis in ("H", "V"):
            for index in (0, 6, 14):
                for pos, sq in enumerate(board.line(axis, index)):
                    assert (sq.row, sq.col) == coordinates(axis, index, pos)

    def test_unknown_axis(self):
        with pytest.raises(ValueError):
            Board().line("D", 0)
        with pytest.raises(ValueError):
            perpendicular("D")

    def test_perpendicular(self):
        assert perpendicular("H") == "V"
        assert perpendicular("V") == "H"


class TestPlacement:
    def test_new_board_is_empty(self):
        board = Board()
        assert board.is_empty()
        assert board.count_tiles() == 0
        assert list(board.tiles()) == []

    def test_place_clears_empty_flag(self):
        board = Board()
        board.place(7, 7, "A")
        assert not board.is_empty()
        assert board.count_tiles() == 1
        assert board.is_occupied(7, 7)
        assert not board.is_vacant(7, 7)

    def test_place_on_occupied_square_is_rejected(self):
        board = Board()
        board.place(7, 7, "A")
        with pytest.raises(IllegalMoveError):
            board.place(7, 7, "B")
        assert board.get(7, 7) == "A"

    @pytest.mark.parametrize("row,col,letter", [(15, 0, "A"), (-1, 3, "A"), (0, 0, "a"), (0, 0, "?")])
    def test_bad_placements(self, row, col, letter):
        with pytest.raises(IllegalMoveError):
            Board().place(row, col, letter)

    def test_off_board_reads(self):
        board = Board()
        assert board.get(-1, 0) is None
        assert not board.is_occupied(0, 15)
        assert not board.is_vacant(15, 15)

    def test_neighbors_at_corner(self):
        coords = {(sq.row, sq.col) for sq in Board().neighbors(0, 0)}
        assert coords == {(1, 0), (0, 1)}


class TestFromRows:
    def test_blank_tiles_score_zero(self):
        board = Board.from_rows(_rows((7, "......cAT......")))
        sq = board.square(7, 6)
        assert sq.letter == "C"
        assert sq.is_blank
        assert sq.value == 0
        assert board.square(7, 7).value == 1

    def test_to_rows_round_trip(self):
        rows = _rows((7, "......cAT......"), (8, "........O......"))
        assert Board.from_rows(rows).to_rows() == rows

    def test_from_string(self):
        text = "\n".join(_rows((0, "QI.............")))
        board = Board.from_string(text)
        assert board.get(0, 0) == "Q"
        assert board.get(0, 1) == "I"

    def test_bad_dimensions(self):
        with pytest.raises(ValueError):
            Board.from_rows(["." * BOARD_SIZE] * 14)
        with pytest.raises(ValueError):
            Board.from_rows(_rows((3, "....")))

    def test_bad_character(self):
        with pytest.raises(ValueError):
            Board.from_rows(_rows((3, "...3...........")))

    def test_copy_is_independent(self):
        board = Board.from_rows(_rows((7, "......CAT......")))
        clone = board.copy()
        clone.place(7, 9, "S")
        assert board.get(7, 9) is None
        assert clone.to_rows()[7] == "......CATS....."
        assert board.count_tiles() == 3

    def test_str_shows_tiles_and_premiums(self):
        text = str(Board.from_rows(_rows((7, "......cAT......"))))
        assert " c " in text
        assert " A " in text
        assert " TW" in text


class TestApply:
    def _cat(self, rack="ACT", blank_c=False):
        placements = (
            Placement(7, 6, "C", blank_c),
            Placement(7, 7, "A"),
            Placement(7, 8, "T"),
        )
        return Move("CAT", 7, 6, "H", 10, placements, rack=rack)

    def test_apply_places_tiles(self):
        board = Board()
        board.apply(self._cat())
        assert board.to_rows()[7] == "......CAT......"

    def test_apply_with_blank(self):
        board = Board()
        board.apply(self._cat(rack="?AT", blank_c=True))
        assert board.square(7, 6).is_blank

    def test_tile_missing_from_rack(self):
        board = Board()
        with pytest.raises(IllegalMoveError, match="Rack"):
            board.apply(self._cat(rack="AT?"))  # C is not flagged as a blank
        assert board.is_empty()

    def test_blank_missing_from_rack(self):
        with pytest.raises(IllegalMoveError):
            Board().apply(self._cat(rack="CAT", blank_c=True))

    def test_occupied_square_leaves_board_unchanged(self):
        board = Board.from_rows(_rows((7, "........X......")))
        with pytest.raises(IllegalMoveError):
            board.apply(self._cat())
        assert board.count_tiles() == 1
        assert board.get(7, 6) is None

    def test_placements_off_line(self):
        move = Move("AT", 7, 7, "H", 0, (Placement(7, 7, "A"), Placement(8, 8, "T")), rack="AT")
        with pytest.raises(IllegalMoveError):
            Board().apply(move)

    def test_repeated_square(self):
        move = Move("AA", 7, 7, "H", 0, (Placement(7, 7, "A"), Placement(7, 7, "A")), rack="AA")
        with pytest.raises(IllegalMoveError):
            Board().apply(move)

    def test_empty_move(self):
        with pytest.raises(IllegalMoveError):
            Board().apply(Move("", 7, 7, "H", 0, (), rack="A"))
