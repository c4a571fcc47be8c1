"""
Movement geometry for each piece kind.

The predicates only look at the shape of a move. Occupancy, captures and
turn order are checked by the game session.
"""

from typing import Callable, Dict

from mini_chess.pieces import PieceKind

MovementRule = Callable[[int, int, int, int], bool]

TOWER_RANGE = 3


def is_valid_king_move(from_col: int, from_row: int, to_col: int, to_row: int) -> bool:
    """One step in any direction."""
    col_diff = abs(to_col - from_col)
    row_diff = abs(to_row - from_row)
    return col_diff <= 1 and row_diff <= 1 and not (col_diff == 0 and row_diff == 0)


def is_valid_tower_move(from_col: int, from_row: int, to_col: int, to_row: int) -> bool:
    """
    Straight or diagonal line of one to three cells.

    Pieces standing in between do not block the Tower.
    """
    col_diff = abs(to_col - from_col)
    row_diff = abs(to_row - from_row)

    straight_move = (col_diff == 0 and 0 < row_diff <= TOWER_RANGE) or (
        row_diff == 0 and 0 < col_diff <= TOWER_RANGE
    )
    diagonal_move = col_diff == row_diff and 0 < col_diff <= TOWER_RANGE

    return straight_move or diagonal_move


def is_valid_horse_move(from_col: int, from_row: int, to_col: int, to_row: int) -> bool:
    """Knight jump: two cells one way and one the other."""
    col_diff = abs(to_col - from_col)
    row_diff = abs(to_row - from_row)
    return (col_diff, row_diff) in ((2, 1), (1, 2))


MOVEMENT_RULES: Dict[PieceKind, MovementRule] = {
    PieceKind.KING: is_valid_king_move,
    PieceKind.TOWER: is_valid_tower_move,
    PieceKind.HORSE: is_valid_horse_move,
}
