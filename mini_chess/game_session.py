"""Game session state machine: board sizing, turns, moves and match end."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Optional, Tuple

from mini_chess.board import MAX_BOARD_SIZE, MIN_BOARD_SIZE, BoardSize, BoardState, parse_dimension
from mini_chess.commands import (
    HELP_MESSAGE,
    ExitCommand,
    HelpCommand,
    MoveCommand,
    RestartCommand,
    parse_command,
)
from mini_chess.coordinates import Position, decode
from mini_chess.exceptions import (
    GameError,
    GameStateError,
    IllegalMoveError,
    InvalidCoordinatesError,
    NoPieceError,
    SelfCaptureError,
    UnknownPieceKindError,
    WrongTurnBlackError,
    WrongTurnWhiteError,
)
from mini_chess.history import create_log_file, write_to_history
from mini_chess.pieces import Color, Piece
from mini_chess.renderer import BoardRenderer, draw_box_message
from mini_chess.rules import MOVEMENT_RULES

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Mini Chess"
SIZE_INSTRUCTIONS = (
    "Select board size to start.\n"
    f"Values must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE} on each dimension."
)
PROMPT_WIDTH = "Enter Board width (X): "
PROMPT_HEIGHT = "Enter Board height (Y): "
PROMPT_COMMAND = "Type a command (type help for options): "

GAME_STARTED_RECORD = "Game started with board size {size}"
GAME_RESET_RECORD = "Game reset"
GAME_ENDED_RECORD = "Game ended by player"
GAME_OVER_RECORD = "Game Over!"
GAME_OVER_THANKS = "Game Over! Thanks for playing!"

WIN_ANNOUNCEMENTS = {
    Color.WHITE: "⬜ White wins! \U0001f389",
    Color.BLACK: "⬛ Black wins! \U0001f389",
}
TURN_INDICATORS = {
    Color.WHITE: "⬜ Turn: White",
    Color.BLACK: "⬛ Turn: Black",
}


class Phase(Enum):
    AWAITING_WIDTH = auto()
    AWAITING_HEIGHT = auto()
    IN_PROGRESS = auto()
    FINISHED = auto()


class MoveOutcome(Enum):
    MOVED = auto()
    CAPTURED = auto()
    WON = auto()
    REJECTED = auto()


@dataclass
class MoveResult:
    """
    Result of a move attempt.

    :param outcome: What happened to the match
    :type outcome: MoveOutcome
    :param message: Move summary, or the rejection reason
    :type message: str
    :param captured: Piece taken off the board, if any
    :type captured: Optional[Piece]
    :param error: Error that caused a rejection
    :type error: Optional[GameError]
    """

    outcome: MoveOutcome
    message: str
    captured: Optional[Piece] = None
    error: Optional[GameError] = None

    @property
    def accepted(self) -> bool:
        return self.outcome is not MoveOutcome.REJECTED


class GameSession:
    """
    A single local match between White and Black.

    The session first collects the board width and height, then accepts
    moves until a King is captured or the players leave. Rejected input
    never changes the board or the turn.

    :param history_dir: Directory for the history log, defaults to the configured one
    :type history_dir: Optional[Path]
    :param clock: Source of the match start time
    :type clock: Callable[[], datetime]
    """

    def __init__(self, history_dir: Optional[Path] = None, clock: Callable[[], datetime] = datetime.now):
        self.history_dir = history_dir
        self.clock = clock
        self.phase = Phase.AWAITING_WIDTH
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.board: Optional[BoardState] = None
        self.turn = Color.WHITE
        self.start_time: Optional[datetime] = None
        self.log_file: Optional[Path] = None
        self.winner: Optional[Color] = None
        self.notice = ""
        self.show_help = False

    @property
    def size(self) -> Optional[BoardSize]:
        if self.width is None or self.height is None:
            return None
        return BoardSize(self.width, self.height)

    @property
    def is_finished(self) -> bool:
        return self.phase is Phase.FINISHED

    @property
    def prompt(self) -> str:
        if self.phase is Phase.AWAITING_WIDTH:
            return PROMPT_WIDTH
        if self.phase is Phase.AWAITING_HEIGHT:
            return PROMPT_HEIGHT
        return PROMPT_COMMAND

    def clear_notice(self) -> None:
        self.notice = ""
        self.show_help = False

    def submit_dimension(self, raw: str) -> bool:
        """
        Accept the next board dimension typed by the player.

        The first accepted value is the width, the second the height, after
        which the match starts.

        :param raw: Raw input
        :type raw: str
        :return: True if the value was accepted
        :rtype: bool
        """
        if self.phase not in (Phase.AWAITING_WIDTH, Phase.AWAITING_HEIGHT):
            self.notice = GameStateError().notice
            return False

        try:
            side = parse_dimension(raw)
        except GameError as e:
            logger.debug(f"[GameSession] Rejected board dimension {raw!r}")
            self.notice = e.notice
            return False

        if self.phase is Phase.AWAITING_WIDTH:
            self.width = side
            self.phase = Phase.AWAITING_HEIGHT
            return True

        self.height = side
        self._start_match()
        self.notice = f"Creating board of size {self.size}"
        return True

    def restart(self) -> None:
        """Throw the current board away and start over with the same dimensions."""
        if self.phase is not Phase.IN_PROGRESS:
            self.notice = GameStateError().notice
            return

        write_to_history(GAME_RESET_RECORD, self.log_file)
        self._start_match()

    def exit_game(self) -> None:
        """End the match at the players' request."""
        if self.log_file is not None:
            write_to_history(GAME_ENDED_RECORD, self.log_file)
        logger.debug("[GameSession] Match ended by player")
        self.phase = Phase.FINISHED

    def apply_move(self, source: str, target: str) -> MoveResult:
        """
        Validate and play a move.

        :param source: Coordinate of the piece to move, e.g. 'b1'
        :type source: str
        :param target: Destination coordinate
        :type target: str
        :return: Outcome of the attempt
        :rtype: MoveResult
        """
        try:
            from_pos, to_pos, piece = self._validate_move(source, target)
        except GameError as e:
            logger.debug(f"[GameSession] Rejected move {source} -> {target}: {e}")
            self.notice = e.notice
            return MoveResult(MoveOutcome.REJECTED, e.notice, error=e)

        captured = self.board.piece_at(to_pos)
        self.board.remove(from_pos)
        self.board.place(to_pos, piece)

        summary = f"Moved {piece.glyph} from {source} to {target}."
        if captured is not None:
            summary += f" Captured {captured.glyph}"

        write_to_history(summary, self.log_file)
        self.notice = summary

        if captured is not None and captured.is_king:
            self.winner = piece.color
            self.phase = Phase.FINISHED
            write_to_history(f"{piece.color.display_name} wins!", self.log_file)
            write_to_history(GAME_OVER_RECORD, self.log_file)
            logger.debug(f"[GameSession] {piece.color.display_name} captured the King")
            return MoveResult(MoveOutcome.WON, summary, captured=captured)

        self.turn = self.turn.opponent
        logger.debug(f"[GameSession] {summary} Next turn: {self.turn.display_name}")

        outcome = MoveOutcome.CAPTURED if captured is not None else MoveOutcome.MOVED
        return MoveResult(outcome, summary, captured=captured)

    def render(self) -> str:
        """
        Draw the full frame for the current phase.

        :return: Text to display as is
        :rtype: str
        """
        if self.phase in (Phase.AWAITING_WIDTH, Phase.AWAITING_HEIGHT):
            parts = [draw_box_message(WELCOME_MESSAGE), "\n", SIZE_INSTRUCTIONS, "\n"]
            if self.notice:
                parts += ["\n", self.notice, "\n"]
            return "".join(parts)

        parts = ["\n\n"]
        if self.board is not None:
            parts.append(BoardRenderer.render(self.board))

        if self.winner is not None:
            parts += [
                "\n", self.notice, "\n",
                draw_box_message(WIN_ANNOUNCEMENTS[self.winner]),
                "\n", GAME_OVER_THANKS, "\n",
            ]
        elif self.is_finished:
            parts += ["\n", GAME_OVER_THANKS, "\n"]
        else:
            parts += ["\n", TURN_INDICATORS[self.turn], "\n"]
            if self.notice:
                parts += ["\n", self.notice, "\n"]
            if self.show_help:
                parts += ["\n", HELP_MESSAGE, "\n"]
        return "".join(parts)

    def _start_match(self) -> None:
        self.board = BoardState.initial(self.size)
        self.start_time = self.clock()
        self.log_file = create_log_file(self.start_time, self.history_dir)
        self.turn = Color.WHITE
        self.winner = None
        self.phase = Phase.IN_PROGRESS
        write_to_history(GAME_STARTED_RECORD.format(size=self.size), self.log_file)
        logger.debug(f"[GameSession] Match started on a {self.size} board, logging to {self.log_file}")

    def _validate_move(self, source: str, target: str) -> Tuple[Position, Position, Piece]:
        if self.phase is not Phase.IN_PROGRESS:
            raise GameStateError()

        from_pos = decode(source, self.width, self.height)
        to_pos = decode(target, self.width, self.height)
        if from_pos is None or to_pos is None:
            raise InvalidCoordinatesError()

        piece = self.board.piece_at(from_pos)
        if piece is None:
            raise NoPieceError()

        if piece.color is not self.turn:
            if self.turn is Color.WHITE:
                raise WrongTurnWhiteError()
            raise WrongTurnBlackError()

        movement_rule = MOVEMENT_RULES.get(piece.kind)
        if movement_rule is None:
            raise UnknownPieceKindError()
        if not movement_rule(from_pos.column, from_pos.row, to_pos.column, to_pos.row):
            raise IllegalMoveError()

        occupant = self.board.piece_at(to_pos)
        if occupant is not None and occupant.color is piece.color:
            raise SelfCaptureError()

        return from_pos, to_pos, piece


def step(session: GameSession, line: str) -> Tuple[GameSession, str]:
    """
    Feed one line of player input to the session.

    While the board is being sized the line is a raw dimension; during play
    it is decoded into a command. A finished session ignores further input.

    :param session: Session to advance
    :type session: GameSession
    :param line: Line typed by the player
    :type line: str
    :return: The advanced session and the frame to display
    :rtype: Tuple[GameSession, str]
    """
    if session.is_finished:
        return session, session.render()

    session.clear_notice()

    if session.phase in (Phase.AWAITING_WIDTH, Phase.AWAITING_HEIGHT):
        session.submit_dimension(line)
        return session, session.render()

    try:
        command = parse_command(line)
    except GameError as e:
        session.notice = e.notice
        return session, session.render()

    if isinstance(command, MoveCommand):
        session.apply_move(command.source, command.target)
    elif isinstance(command, RestartCommand):
        session.restart()
    elif isinstance(command, ExitCommand):
        session.exit_game()
    elif isinstance(command, HelpCommand):
        session.show_help = True

    return session, session.render()
