"""Commands accepted while a match is in progress."""

from dataclasses import dataclass
from typing import Union

from mini_chess.exceptions import MoveUsageError, UnknownCommandError


@dataclass(frozen=True)
class MoveCommand:
    source: str
    target: str


@dataclass(frozen=True)
class RestartCommand:
    pass


@dataclass(frozen=True)
class ExitCommand:
    pass


@dataclass(frozen=True)
class HelpCommand:
    pass


Command = Union[MoveCommand, RestartCommand, ExitCommand, HelpCommand]

HELP_MESSAGE = """Available commands:
  move <from> <to>       Move a piece (e.g. move B1 C3)
  restart                Restart the match
  exit                   Exit the game
  help                   Show this list"""


def parse_command(line: str) -> Command:
    """
    Decode a line typed by the player into a command.

    The line is lower-cased and split on whitespace. ``mv`` and ``h`` are
    accepted as short forms of ``move`` and ``help``; extra tokens after a
    complete command are ignored.

    :param line: Raw input line
    :type line: str
    :return: Parsed command
    :rtype: Command
    :raises MoveUsageError: If a move lacks its source or target
    :raises UnknownCommandError: If the verb is not recognised
    """
    tokens = line.lower().split()
    if not tokens:
        raise UnknownCommandError()

    verb = tokens[0]
    if verb in ("move", "mv"):
        if len(tokens) < 3:
            raise MoveUsageError()
        return MoveCommand(source=tokens[1], target=tokens[2])
    if verb == "restart":
        return RestartCommand()
    if verb == "exit":
        return ExitCommand()
    if verb in ("help", "h"):
        return HelpCommand()

    raise UnknownCommandError()
