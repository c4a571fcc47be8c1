"""Main entry point for the mini chess terminal game."""

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from rich.console import Console

from mini_chess.game_session import GameSession, step
from mini_chess.history import HISTORY_DIR

logger = logging.getLogger(__name__)


def show(console: Console, frame: str) -> None:
    """
    Redraw the screen with a frame produced by the session.

    :param console: Console to draw on
    :type console: Console
    :param frame: Frame text, printed verbatim
    :type frame: str
    """
    console.clear()
    console.print(frame, markup=False, highlight=False, soft_wrap=True, end="")


def run(
    session: GameSession,
    console: Console,
    read_line: Optional[Callable[[str], str]] = None,
    preset: Sequence[str] = (),
) -> GameSession:
    """
    Prompt for input and advance the session until the match is over.

    Ctrl-C and end of input leave the game like the ``exit`` command.

    :param session: Session to play
    :type session: GameSession
    :param console: Console used for output
    :type console: Console
    :param read_line: Reads one line after showing a prompt, defaults to console.input
    :type read_line: Optional[Callable[[str], str]]
    :param preset: Lines fed to the session before prompting, e.g. board dimensions
    :type preset: Sequence[str]
    :return: The finished session
    :rtype: GameSession
    """
    if read_line is None:
        read_line = console.input

    frame = session.render()
    for line in preset:
        session, frame = step(session, line)

    while not session.is_finished:
        show(console, frame)
        try:
            line = read_line(session.prompt)
        except (KeyboardInterrupt, EOFError):
            logger.debug("[Main] Input closed, leaving the game")
            session.exit_game()
            frame = session.render()
            break
        session, frame = step(session, line)

    show(console, frame)
    return session


def main() -> None:
    """
    Start an interactive match in the terminal.

    The board size is asked for interactively unless given with --width and
    --height. Each match is logged to a text file in the history directory.
    """
    parser = argparse.ArgumentParser(description="Mini Chess: King, Tower and Horse on a custom board")
    parser.add_argument("--history-dir", type=Path, default=HISTORY_DIR,
                        help=f"Directory for game history logs (default: {HISTORY_DIR})")
    parser.add_argument("--width", type=str, default=None, help="Board width, skips the width prompt")
    parser.add_argument("--height", type=str, default=None, help="Board height, skips the height prompt")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    args = parser.parse_args()
    if args.height is not None and args.width is None:
        parser.error("--height requires --width")

    logging.basicConfig(level=getattr(logging, args.log_level))

    preset = [value for value in (args.width, args.height) if value is not None]
    run(GameSession(history_dir=args.history_dir), Console(), preset=preset)


if __name__ == "__main__":
    main()
