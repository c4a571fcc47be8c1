"""Board and message box TUI rendering module."""

from typing import List

from mini_chess.board import BoardState
from mini_chess.coordinates import Position, file_label, rank_label
from mini_chess.pieces import EMPTY_GLYPH

TOP_LEFT = "\u250c"  # ┌
TOP_RIGHT = "\u2510"  # ┐
BOTTOM_LEFT = "\u2514"  # └
BOTTOM_RIGHT = "\u2518"  # ┘
HORIZONTAL = "\u2500"  # ─
VERTICAL = "\u2502"  # │
CROSS = "\u253c"  # ┼
RIGHT_TEE = "\u2524"  # ┤
LEFT_TEE = "\u251c"  # ├
TOP_TEE = "\u252c"  # ┬
BOTTOM_TEE = "\u2534"  # ┴

MARGIN = "    "
CELL_RULE = HORIZONTAL * 3

BOX_PADDING = 5
# Markers that take two columns in a terminal
WIDE_MARKERS = ("\u2b1b", "\u2b1c")  # ⬛ ⬜


class BoardRenderer:
    """
    Renders the board as a box-drawn grid with file letters and rank numbers.

    Each cell is three characters wide with the piece glyph in the middle.
    Ranks are numbered from the board height at the top down to 1.
    """

    @staticmethod
    def render(board: BoardState) -> str:
        """
        Render the board state as a text grid.

        :param board: Board to draw
        :type board: BoardState
        :return: Multi-line drawing, each line terminated by a newline
        :rtype: str
        """
        width = board.size.width
        height = board.size.height

        lines = [MARGIN + "".join(f"  {file_label(column)} " for column in range(width))]
        lines.append(MARGIN + TOP_LEFT + TOP_TEE.join([CELL_RULE] * width) + TOP_RIGHT)

        separator = MARGIN + LEFT_TEE + CROSS.join([CELL_RULE] * width) + RIGHT_TEE
        for row in range(height):
            if row > 0:
                lines.append(separator)
            cells = [BoardRenderer._cell(board, Position(column, row)) for column in range(width)]
            lines.append(f" {rank_label(row, height):2d} " + VERTICAL + VERTICAL.join(cells) + VERTICAL)

        lines.append(MARGIN + BOTTOM_LEFT + BOTTOM_TEE.join([CELL_RULE] * width) + BOTTOM_RIGHT)
        return "".join(line + "\n" for line in lines)

    @staticmethod
    def _cell(board: BoardState, position: Position) -> str:
        piece = board.piece_at(position)
        glyph = piece.glyph if piece else EMPTY_GLYPH
        return f" {glyph} "


def draw_box_message(message: str) -> str:
    """
    Frame a message in a box drawn with line characters.

    The frame is sized from the UTF-8 length of the message plus five cells
    of padding on each side. Plain ASCII text fills it exactly. A message
    carrying one of the square markers is also expected to end in an emoji,
    and together they are three bytes longer than the cells they take in a
    fixed-width terminal, so the padding grows by one leading and two
    trailing cells to keep the box rectangular.

    :param message: Text to frame, a single line
    :type message: str
    :return: Three-line box, each line terminated by a newline
    :rtype: str
    """
    leading = BOX_PADDING
    trailing = BOX_PADDING
    if any(marker in message for marker in WIDE_MARKERS):
        leading += 1
        trailing += 2

    inner_width = BOX_PADDING + len(message.encode("utf-8")) + BOX_PADDING
    lines: List[str] = [
        TOP_LEFT + HORIZONTAL * inner_width + TOP_RIGHT,
        VERTICAL + " " * leading + message + " " * trailing + VERTICAL,
        BOTTOM_LEFT + HORIZONTAL * inner_width + BOTTOM_RIGHT,
    ]
    return "".join(line + "\n" for line in lines)
