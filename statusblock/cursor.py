"""
One-shot query for the terminal's cursor position.

This is separate from the status block: nothing in the block lifecycle calls
it. It asks the terminal with a Device Status Report (``ESC[6n``), reads the
``ESC[{row};{col}R`` reply from the input side, and hands back the position.

The input terminal has to be in raw mode while the reply is read, otherwise
the reply would wait for Enter and be echoed to the screen. Raw mode is always
undone before returning, whether the reply parsed or not.
"""

import os
import re
import select
import sys
import termios
import tty
from typing import NamedTuple, TextIO

from .exceptions import CursorPositionError

CURSOR_POSITION_REQUEST = "\x1b[6n"
CURSOR_POSITION_REPLY = re.compile(r"\[(\d+);(\d+)R")

# Longest reply we will wait for, e.g. "\x1b[9999;9999R" plus some slack
MAX_REPLY_LENGTH = 32


class CursorPosition(NamedTuple):
    row: int
    column: int


def parse_cursor_response(response: str) -> CursorPosition:
    """Extract the 1-based row and column from a cursor position report."""
    match = CURSOR_POSITION_REPLY.search(response)
    if not match:
        raise CursorPositionError(response)
    return CursorPosition(int(match.group(1)), int(match.group(2)))


def get_cursor_position(
    stdin: TextIO | None = None, stdout: TextIO | None = None, timeout: float = 1.0
) -> CursorPosition:
    """Ask the terminal where the cursor is.

    Args:
        stdin: Terminal input to read the reply from. Defaults to sys.stdin.
        stdout: Terminal output to send the request to. Defaults to sys.stdout.
        timeout: Seconds to wait for each byte of the reply.

    Returns:
        The 1-based cursor position.

    Raises:
        CursorPositionError: The reply was missing, truncated or malformed.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        stdout.write(CURSOR_POSITION_REQUEST)
        stdout.flush()
        response = _read_reply(fd, timeout)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    return parse_cursor_response(response)


def _read_reply(fd: int, timeout: float) -> str:
    chunks: list[str] = []
    while len(chunks) < MAX_REPLY_LENGTH:
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            break
        char = os.read(fd, 1).decode("ascii", errors="replace")
        if not char:
            break
        chunks.append(char)
        if char == "R":
            break
    return "".join(chunks)
