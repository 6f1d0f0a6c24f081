"""
Tests for the cursor position query (statusblock/cursor.py).

The query talks to a real terminal, so these tests replace the terminal
plumbing (termios, tty, select and os.read) with mocks and check two things:

  1. **TestParseCursorResponse**: replies in the ``ESC[row;colR`` format are
     parsed, anything else raises CursorPositionError.

  2. **TestGetCursorPosition**: the request is written, the reply is read up
     to the terminating ``R``, and the saved terminal attributes are restored
     on the success path and on every failure path.
"""

import io
from unittest.mock import MagicMock, patch

import pytest

from statusblock.cursor import (
    CURSOR_POSITION_REQUEST,
    MAX_REPLY_LENGTH,
    CursorPosition,
    get_cursor_position,
    parse_cursor_response,
)
from statusblock.exceptions import CursorPositionError, StatusBlockError


class TestParseCursorResponse:
    """Tests for parse_cursor_response."""

    def test_parses_reply(self):
        assert parse_cursor_response("\x1b[12;40R") == CursorPosition(12, 40)

    def test_reply_with_leading_noise(self):
        """Typed-ahead input before the reply is skipped."""
        assert parse_cursor_response("abc\x1b[3;7R") == CursorPosition(3, 7)

    @pytest.mark.parametrize("response", ["", "garbage", "\x1b[12R", "\x1b[a;bR", "\x1b[12;40"])
    def test_rejects_malformed(self, response):
        with pytest.raises(CursorPositionError) as exc_info:
            parse_cursor_response(response)
        assert exc_info.value.response == response

    def test_error_is_value_error(self):
        """CursorPositionError is catchable as ValueError and StatusBlockError."""
        with pytest.raises(ValueError):
            parse_cursor_response("nope")
        with pytest.raises(StatusBlockError):
            parse_cursor_response("nope")


@pytest.fixture
def terminal_mocks():
    """Patch the terminal modules used by get_cursor_position."""
    with (
        patch("statusblock.cursor.termios") as mock_termios,
        patch("statusblock.cursor.tty") as mock_tty,
        patch("statusblock.cursor.select") as mock_select,
        patch("statusblock.cursor.os") as mock_os,
    ):
        mock_select.select.return_value = ([3], [], [])
        yield mock_termios, mock_tty, mock_select, mock_os


def make_stdin():
    stdin = MagicMock()
    stdin.fileno.return_value = 3
    return stdin


def reply_bytes(text):
    return [ch.encode() for ch in text]


class TestGetCursorPosition:
    """Tests for get_cursor_position."""

    def test_reads_position(self, terminal_mocks):
        mock_termios, mock_tty, _, mock_os = terminal_mocks
        mock_os.read.side_effect = reply_bytes("\x1b[5;7R")
        stdout = io.StringIO()

        position = get_cursor_position(make_stdin(), stdout)

        assert position == CursorPosition(5, 7)
        assert stdout.getvalue() == CURSOR_POSITION_REQUEST
        mock_tty.setraw.assert_called_once_with(3)
        mock_termios.tcsetattr.assert_called_once_with(
            3, mock_termios.TCSADRAIN, mock_termios.tcgetattr.return_value
        )

    def test_stops_reading_at_terminator(self, terminal_mocks):
        _, _, _, mock_os = terminal_mocks
        mock_os.read.side_effect = reply_bytes("\x1b[5;7Rextra")

        get_cursor_position(make_stdin(), io.StringIO())

        assert mock_os.read.call_count == len("\x1b[5;7R")

    def test_malformed_reply_restores_terminal(self, terminal_mocks):
        mock_termios, _, _, mock_os = terminal_mocks
        mock_os.read.side_effect = reply_bytes("\x1b[xyzR")

        with pytest.raises(CursorPositionError):
            get_cursor_position(make_stdin(), io.StringIO())

        mock_termios.tcsetattr.assert_called_once()

    def test_timeout_restores_terminal(self, terminal_mocks):
        """No reply at all is a parse failure, not a hang."""
        mock_termios, _, mock_select, mock_os = terminal_mocks
        mock_select.select.return_value = ([], [], [])

        with pytest.raises(CursorPositionError):
            get_cursor_position(make_stdin(), io.StringIO(), timeout=0.01)

        mock_os.read.assert_not_called()
        mock_termios.tcsetattr.assert_called_once()

    def test_endless_reply_is_capped(self, terminal_mocks):
        _, _, _, mock_os = terminal_mocks
        mock_os.read.return_value = b"x"

        with pytest.raises(CursorPositionError):
            get_cursor_position(make_stdin(), io.StringIO())

        assert mock_os.read.call_count == MAX_REPLY_LENGTH

    def test_read_error_restores_terminal(self, terminal_mocks):
        mock_termios, _, _, mock_os = terminal_mocks
        mock_os.read.side_effect = OSError("terminal went away")

        with pytest.raises(OSError):
            get_cursor_position(make_stdin(), io.StringIO())

        mock_termios.tcsetattr.assert_called_once()
