"""Board dimensions and piece placement."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from mini_chess.coordinates import Position
from mini_chess.exceptions import MalformedDimensionError
from mini_chess.pieces import Piece

MIN_BOARD_SIZE = 6
MAX_BOARD_SIZE = 12


def validate_board_size(side: int) -> bool:
    """
    Check that a board dimension lies within the supported bounds.

    :param side: Width or height
    :type side: int
    :return: True if the value is between 6 and 12 inclusive
    :rtype: bool
    """
    return MIN_BOARD_SIZE <= side <= MAX_BOARD_SIZE


def parse_dimension(raw: str) -> int:
    """
    Parse a width or height typed by the player.

    Only an optional sign followed by ASCII digits is accepted, with no
    surrounding whitespace.

    :param raw: Raw input, expected to be a decimal integer
    :type raw: str
    :return: Validated dimension
    :rtype: int
    :raises MalformedDimensionError: If the input is not a number or is out of bounds
    """
    digits = raw[1:] if raw.startswith(("+", "-")) else raw
    if not raw.isascii() or not digits.isdigit():
        raise MalformedDimensionError(MIN_BOARD_SIZE, MAX_BOARD_SIZE)

    side = int(raw)
    if not validate_board_size(side):
        raise MalformedDimensionError(MIN_BOARD_SIZE, MAX_BOARD_SIZE)
    return side


@dataclass(frozen=True)
class BoardSize:
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def initial_layout(width: int, height: int) -> Dict[Position, Piece]:
    """
    Build the starting placement for a board.

    Black starts on the top row in the three rightmost columns (Horse, Tower,
    King from left to right). White starts on the bottom row in the three
    leftmost columns (King, Tower, Horse). Boards too small to hold a home
    rank get no pieces.

    :param width: Board width
    :type width: int
    :param height: Board height
    :type height: int
    :return: Mapping of occupied positions to pieces
    :rtype: Dict[Position, Piece]
    """
    layout: Dict[Position, Piece] = {}
    if width < 3 or height < 1:
        return layout

    layout[Position(width - 3, 0)] = Piece.BLACK_HORSE
    layout[Position(width - 2, 0)] = Piece.BLACK_TOWER
    layout[Position(width - 1, 0)] = Piece.BLACK_KING

    layout[Position(0, height - 1)] = Piece.WHITE_KING
    layout[Position(1, height - 1)] = Piece.WHITE_TOWER
    layout[Position(2, height - 1)] = Piece.WHITE_HORSE
    return layout


@dataclass
class BoardState:
    """
    Sparse placement of pieces on a board of fixed size.

    Only occupied cells are stored. Bounds are not checked here; positions
    arrive already decoded against the board size.
    """

    size: BoardSize
    pieces: Dict[Position, Piece] = field(default_factory=dict)

    @classmethod
    def initial(cls, size: BoardSize) -> "BoardState":
        """
        Create a board in the starting position.

        :param size: Board dimensions
        :type size: BoardSize
        :return: Freshly populated board
        :rtype: BoardState
        """
        return cls(size, initial_layout(size.width, size.height))

    def piece_at(self, position: Position) -> Optional[Piece]:
        return self.pieces.get(position)

    def place(self, position: Position, piece: Piece) -> None:
        self.pieces[position] = piece

    def remove(self, position: Position) -> Optional[Piece]:
        return self.pieces.pop(position, None)

    def __len__(self) -> int:
        return len(self.pieces)
