"""Translation between human notation ("B3") and grid positions."""

from dataclasses import dataclass
from string import ascii_uppercase
from typing import Optional

# Ranks are written with a single digit, so rank 9 is the highest one that can be named
MAX_NOTATION_RANK = 9


@dataclass(frozen=True)
class Position:
    """
    Zero-based grid position.

    Row 0 is the top rank as drawn on screen, so human rank ``r`` on a board
    of height ``h`` lives on row ``h - r``.
    """

    column: int
    row: int


def file_label(column: int) -> str:
    return ascii_uppercase[column]


def rank_label(row: int, height: int) -> int:
    return height - row


def decode(coord: str, width: int, height: int) -> Optional[Position]:
    """
    Decode human notation into a grid position.

    The first character is a case-insensitive file letter, the second a
    single rank digit. Ranks above 9 cannot be written and are rejected even
    on boards that are taller than that.

    :param coord: Coordinate such as 'b3' or 'B3'
    :type coord: str
    :param width: Board width
    :type width: int
    :param height: Board height
    :type height: int
    :return: Position on the board, or None if the coordinate is invalid
    :rtype: Optional[Position]
    """
    if len(coord) != 2:
        return None

    letter = coord[0].upper()
    digit = coord[1]

    if len(letter) != 1 or letter not in ascii_uppercase[:width]:
        return None

    if digit not in "0123456789":
        return None

    rank = int(digit)
    if rank < 1 or rank > min(height, MAX_NOTATION_RANK):
        return None

    return Position(column=ascii_uppercase.index(letter), row=height - rank)


def encode(position: Position, width: int, height: int) -> Optional[str]:
    """
    Write a grid position in human notation.

    :param position: Position to encode
    :type position: Position
    :param width: Board width
    :type width: int
    :param height: Board height
    :type height: int
    :return: Notation such as 'B3', or None if the position cannot be written
    :rtype: Optional[str]
    """
    if not (0 <= position.column < width and 0 <= position.row < height):
        return None

    rank = rank_label(position.row, height)
    if rank > MAX_NOTATION_RANK:
        return None

    return f"{file_label(position.column)}{rank}"
