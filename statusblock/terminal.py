"""
Terminal access for the status block.

The block needs very little from a terminal: its current size, a way to move
the cursor to an absolute position, two flavours of line erase, and raw
character output. `Terminal` provides exactly that on top of a Rich Console.

Escape sequences come from Rich's `Control` helpers rather than hand-written
strings, so the wire format is the standard ANSI one Rich already emits:

    ESC[{row};{col}H   absolute cursor position (1-based on the wire)
    ESC[2K             erase the whole current line
    ESC[0K             erase from the cursor to the end of the line

Geometry is never cached. Every positioning call re-reads the console size, so
a resize between two updates is picked up on the next one.
"""

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from .config import FALLBACK_WIDTH
from .console import console as shared_console

ERASE_TO_END = 0
ERASE_WHOLE_LINE = 2


class Terminal:
    """Cursor movement, erasing and raw output on a Rich console."""

    def __init__(self, console: Console | None = None, fallback_width: int | None = None):
        self.console = console or shared_console
        self.fallback_width = fallback_width or FALLBACK_WIDTH

    @property
    def columns(self) -> int | None:
        """Current column count, or None when the terminal cannot tell us."""
        return self.console.size.width or None

    @property
    def rows(self) -> int:
        return self.console.size.height

    @property
    def width(self) -> int:
        """Column count to truncate against, falling back when unavailable."""
        columns = self.columns
        if not columns or columns <= 0:
            return self.fallback_width
        return columns

    def row_of(self, screen_line: int) -> int:
        """Map a block line to its 1-based terminal row.

        Line 0 sits just above the last terminal row; the last row itself is
        where the cursor is parked between updates.
        """
        return self.rows - screen_line - 1

    def move_to(self, screen_line: int, column_offset: int = 0) -> None:
        self._move_to_row(self.row_of(screen_line), column_offset)

    def move_to_bottom(self) -> None:
        """Move to the first column of the last terminal row."""
        self._move_to_row(self.rows, 0)

    def clear_line(self) -> None:
        self.write(str(Control((ControlType.ERASE_IN_LINE, ERASE_WHOLE_LINE))))

    def clear_to_end(self) -> None:
        self.write(str(Control((ControlType.ERASE_IN_LINE, ERASE_TO_END))))

    def newlines(self, count: int) -> None:
        if count > 0:
            self.write("\n" * count)

    def write(self, text: str) -> None:
        if text:
            self.console.file.write(text)

    def flush(self) -> None:
        self.console.file.flush()

    def _move_to_row(self, row: int, column_offset: int) -> None:
        # Control.move_to takes 0-based coordinates and renders them 1-based.
        self.write(str(Control.move_to(column_offset, max(row, 1) - 1)))
