"""Piece definitions and their display glyphs."""

from enum import Enum
from typing import Dict

import chess


class Color(Enum):
    """Side a piece belongs to."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class PieceKind(Enum):
    """The three piece types each side owns."""

    KING = "king"
    TOWER = "tower"
    HORSE = "horse"


class Piece(Enum):
    """
    One of the six pieces that can stand on the board.

    A piece has no identity beyond its color and kind, so two pieces of the
    same color and kind are the same member.
    """

    WHITE_KING = (Color.WHITE, PieceKind.KING)
    WHITE_TOWER = (Color.WHITE, PieceKind.TOWER)
    WHITE_HORSE = (Color.WHITE, PieceKind.HORSE)
    BLACK_KING = (Color.BLACK, PieceKind.KING)
    BLACK_TOWER = (Color.BLACK, PieceKind.TOWER)
    BLACK_HORSE = (Color.BLACK, PieceKind.HORSE)

    def __init__(self, color: Color, kind: PieceKind) -> None:
        self.color = color
        self.kind = kind

    @classmethod
    def of(cls, color: Color, kind: PieceKind) -> "Piece":
        """
        Look up the piece with the given color and kind.

        :param color: Side of the piece
        :type color: Color
        :param kind: Type of the piece
        :type kind: PieceKind
        :return: Matching piece
        :rtype: Piece
        """
        return cls((color, kind))

    @property
    def glyph(self) -> str:
        return PIECE_GLYPHS[self]

    @property
    def is_king(self) -> bool:
        return self.kind is PieceKind.KING


# Tower and Horse are drawn with the rook and knight symbols
_CHESS_PIECE_TYPES: Dict[PieceKind, chess.PieceType] = {
    PieceKind.KING: chess.KING,
    PieceKind.TOWER: chess.ROOK,
    PieceKind.HORSE: chess.KNIGHT,
}

PIECE_GLYPHS: Dict[Piece, str] = {
    piece: chess.Piece(_CHESS_PIECE_TYPES[piece.kind], piece.color is Color.WHITE).unicode_symbol()
    for piece in Piece
}

EMPTY_GLYPH = " "
