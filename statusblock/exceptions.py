"""Exceptions raised by statusblock."""


class StatusBlockError(Exception):
    """Base class for all statusblock errors."""


class LineIndexError(StatusBlockError, IndexError):
    """A fixed-size block was given a line key outside its range."""

    def __init__(self, key: object, total_lines: int) -> None:
        self.key = key
        self.total_lines = total_lines
        super().__init__(f"Status line {key!r} is out of range (block has {total_lines} lines)")


class InterceptionError(StatusBlockError):
    """An output channel is already intercepted by someone else."""


class CursorPositionError(StatusBlockError, ValueError):
    """The terminal's cursor position report could not be parsed."""

    def __init__(self, response: str) -> None:
        self.response = response
        super().__init__(f"Failed to parse cursor position from {response!r}")
