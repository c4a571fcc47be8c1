"""Tests for board and message box rendering."""

import pytest
from rich.cells import cell_len

from mini_chess.board import BoardSize, BoardState
from mini_chess.coordinates import Position
from mini_chess.pieces import Piece
from mini_chess.renderer import BoardRenderer, draw_box_message

INITIAL_6X6 = (
    "      A   B   C   D   E   F \n"
    "    ┌───┬───┬───┬───┬───┬───┐\n"
    "  6 │   │   │   │ ♞ │ ♜ │ ♚ │\n"
    "    ├───┼───┼───┼───┼───┼───┤\n"
    "  5 │   │   │   │   │   │   │\n"
    "    ├───┼───┼───┼───┼───┼───┤\n"
    "  4 │   │   │   │   │   │   │\n"
    "    ├───┼───┼───┼───┼───┼───┤\n"
    "  3 │   │   │   │   │   │   │\n"
    "    ├───┼───┼───┼───┼───┼───┤\n"
    "  2 │   │   │   │   │   │   │\n"
    "    ├───┼───┼───┼───┼───┼───┤\n"
    "  1 │ ♔ │ ♖ │ ♘ │   │   │   │\n"
    "    └───┴───┴───┴───┴───┴───┘\n"
)


class TestBoardRenderer:
    """Test cases for BoardRenderer."""

    def test_render_initial(self) -> None:
        """Test the starting 6x6 board drawing."""
        board = BoardState.initial(BoardSize(6, 6))
        assert BoardRenderer.render(board) == INITIAL_6X6

    def test_render_is_deterministic(self) -> None:
        """Test equal boards render identically."""
        first = BoardState.initial(BoardSize(9, 7))
        second = BoardState.initial(BoardSize(9, 7))
        assert BoardRenderer.render(first) == BoardRenderer.render(second)

    def test_render_line_count(self) -> None:
        """Test a board has a header, two borders and rank/separator lines."""
        for width, height in [(6, 6), (12, 6), (6, 12), (12, 12)]:
            rendered = BoardRenderer.render(BoardState.initial(BoardSize(width, height)))
            lines = rendered.splitlines()
            assert len(lines) == 2 * height + 2
            assert len({len(line) for line in lines[1:]}) == 1
            assert len(lines[1]) == 4 + 4 * width + 1

    def test_render_two_digit_ranks(self) -> None:
        """Test rank labels are right-aligned to two digits."""
        rendered = BoardRenderer.render(BoardState.initial(BoardSize(6, 12)))
        lines = rendered.splitlines()
        assert lines[2].startswith(" 12 │")
        assert lines[4].startswith(" 11 │")
        assert lines[-2].startswith("  1 │")

    def test_render_wide_board_letters(self) -> None:
        """Test files are labelled A to L on a 12-wide board."""
        header = BoardRenderer.render(BoardState.initial(BoardSize(12, 6))).splitlines()[0]
        assert header.split() == list("ABCDEFGHIJKL")

    def test_render_moved_piece(self) -> None:
        """Test a piece is drawn on the cell it occupies."""
        board = BoardState(BoardSize(6, 6))
        board.place(Position(3, 2), Piece.WHITE_HORSE)
        lines = BoardRenderer.render(board).splitlines()
        assert lines[6] == "  4 │   │   │   │ ♘ │   │   │"


class TestDrawBoxMessage:
    """Test cases for draw_box_message."""

    def test_plain_message(self) -> None:
        """Test a message is framed with five cells of padding each side."""
        assert draw_box_message("Game Over!") == (
            "┌────────────────────┐\n"
            "│     Game Over!     │\n"
            "└────────────────────┘\n"
        )

    def test_win_banner_layout(self) -> None:
        """Test a marker message gets one extra leading and two extra trailing cells."""
        lines = draw_box_message("⬜ White wins! \U0001f389").splitlines()
        assert lines[0] == "┌" + "─" * 30 + "┐"
        assert lines[1] == "│      ⬜ White wins! \U0001f389       │"
        assert lines[2] == "└" + "─" * 30 + "┘"

    @pytest.mark.parametrize("message", [
        "",
        "x",
        "Game Over!",
        "Welcome to Mini Chess",
        "⬜ White wins! \U0001f389",
        "⬛ Black wins! \U0001f389",
    ])
    def test_box_is_rectangular_in_terminal(self, message: str) -> None:
        """Test all three lines take the same number of terminal columns."""
        lines = draw_box_message(message).splitlines()
        assert len(lines) == 3
        assert len({cell_len(line) for line in lines}) == 1
