"""Tests for coordinate notation."""

from string import ascii_uppercase

import pytest

from mini_chess.board import initial_layout
from mini_chess.coordinates import Position, decode, encode, file_label, rank_label


@pytest.mark.parametrize("coord, expected", [
    ("A1", Position(0, 7)),
    ("a1", Position(0, 7)),
    ("H8", Position(7, 0)),
    ("h8", Position(7, 0)),
    ("B3", Position(1, 5)),
    ("e4", Position(4, 4)),
])
def test_decode_valid(coord: str, expected: Position) -> None:
    """Test valid coordinates on an 8x8 board."""
    assert decode(coord, 8, 8) == expected


@pytest.mark.parametrize("coord", ["I8", "A9", "A0", "J1", "AA", "11", "", "A1B", "A", "@1", "a:", "a-1", "ß1", "a١"])
def test_decode_invalid(coord: str) -> None:
    """Test malformed or out-of-board coordinates on an 8x8 board."""
    assert decode(coord, 8, 8) is None


def test_decode_accepts_exactly_the_board() -> None:
    """Test every letter/digit pair decodes iff it names a cell of a 6x7 board."""
    width, height = 6, 7
    for letter in ascii_uppercase:
        for digit in "0123456789":
            position = decode(f"{letter}{digit}", width, height)
            column = ascii_uppercase.index(letter)
            rank = int(digit)
            if column < width and 1 <= rank <= height:
                assert position == Position(column, height - rank)
            else:
                assert position is None


def test_decode_tall_board_stops_at_rank_nine() -> None:
    """Test ranks above 9 cannot be written on a 12-high board."""
    assert decode("A9", 8, 12) == Position(0, 3)
    assert decode("A1", 8, 12) == Position(0, 11)
    assert decode("A:", 8, 12) is None
    assert decode("A;", 8, 12) is None


def test_decode_wide_board_letters() -> None:
    """Test files run from A to L on a 12-wide board."""
    assert decode("L1", 12, 6) == Position(11, 5)
    assert decode("M1", 12, 6) is None


def test_encode() -> None:
    """Test writing positions in notation."""
    assert encode(Position(0, 7), 8, 8) == "A1"
    assert encode(Position(7, 0), 8, 8) == "H8"
    assert encode(Position(8, 0), 8, 8) is None
    assert encode(Position(0, 0), 8, 12) is None


def test_labels() -> None:
    """Test file letters and rank numbers."""
    assert file_label(0) == "A"
    assert file_label(11) == "L"
    assert rank_label(0, 8) == 8
    assert rank_label(7, 8) == 1


@pytest.mark.parametrize("width, height", [(w, h) for w in range(6, 13) for h in range(6, 10)])
def test_initial_pieces_round_trip(width: int, height: int) -> None:
    """Test the label of every starting cell decodes back to the same cell."""
    for position in initial_layout(width, height):
        label = f"{file_label(position.column)}{rank_label(position.row, height)}"
        assert decode(label, width, height) == position
        assert encode(position, width, height) == label
