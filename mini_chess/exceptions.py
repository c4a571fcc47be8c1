"""Errors raised while sizing the board, parsing commands and validating moves."""

from typing import Optional


class GameError(Exception):
    """
    Base class for every recoverable gameplay error.

    Each subclass carries a fixed message that is shown to the player as is.
    """

    message = "Something went wrong."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)

    @property
    def notice(self) -> str:
        return str(self)


class GameStateError(GameError):
    message = "The match is not accepting that input right now."


class MalformedDimensionError(GameError):
    def __init__(self, low: int, high: int) -> None:
        super().__init__(f"Invalid input. Please enter a number between {low} and {high}.")


class InvalidCoordinatesError(GameError):
    message = "Invalid coordinates."


class NoPieceError(GameError):
    message = "No piece at the source coordinate."


class WrongTurnError(GameError):
    message = "It's not your turn."


class WrongTurnWhiteError(WrongTurnError):
    message = "It's White's turn. You can only move white pieces."


class WrongTurnBlackError(WrongTurnError):
    message = "It's Black's turn. You can only move black pieces."


class UnknownPieceKindError(GameError):
    message = "Unknown piece type."


class IllegalMoveError(GameError):
    message = "Invalid move for this piece type."


class SelfCaptureError(GameError):
    message = "Cannot capture your own piece."


class UnknownCommandError(GameError):
    message = "Unknown command. Type 'help' for available commands."


class MoveUsageError(GameError):
    message = "Usage: move <from> <to>"
