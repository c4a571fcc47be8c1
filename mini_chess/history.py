"""Append-only, human-readable game history."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

HISTORY_DIR = Path(os.environ.get("MINI_CHESS_HISTORY_DIR", "history"))


def log_file_name(start_time: datetime) -> str:
    """
    Name of the log file for a match started at the given time.

    :param start_time: Match start
    :type start_time: datetime
    :return: File name such as 'game_19_10_14_05_09.txt' (day, month, hour, minute, second)
    :rtype: str
    """
    return f"game_{start_time:%d}_{start_time:%m}_{start_time:%H}_{start_time:%M}_{start_time:%S}.txt"


def create_log_file(start_time: datetime, history_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Make sure the history directory exists and pick the log file for a match.

    :param start_time: Match start, used to name the file
    :type start_time: datetime
    :param history_dir: Directory holding the logs, defaults to HISTORY_DIR
    :type history_dir: Optional[Path]
    :return: Path of the log file, or None if the directory cannot be created
    :rtype: Optional[Path]
    """
    directory = history_dir if history_dir is not None else HISTORY_DIR
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug(f"[History] Cannot create history directory {directory}: {e}")
        return None

    return directory / log_file_name(start_time)


def write_to_history(message: str, log_file: Optional[Path]) -> bool:
    """
    Append one record to the history log.

    Writing is best effort: failures are logged and reported through the
    return value only.

    :param message: Record text, a trailing newline is added if missing
    :type message: str
    :param log_file: Log file of the current match
    :type log_file: Optional[Path]
    :return: True if the record was written
    :rtype: bool
    """
    if log_file is None:
        logger.debug("[History] No log file specified, dropping record")
        return False

    if not message.endswith("\n"):
        message += "\n"

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, 'a', encoding='utf-8') as f:
            f.write(message)
    except OSError as e:
        logger.debug(f"[History] Failed to write to {log_file}: {e}")
        return False

    return True
