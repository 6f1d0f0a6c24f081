"""
The status block: named status lines pinned to the bottom of the terminal.

A StatusBlock keeps one StatusEntry per line key and draws them on the bottom
rows of the terminal, while ordinary log output scrolls above it. It comes in
two flavours, chosen by the constructor:

  - Fixed size, ``StatusBlock(total_lines=3)``: keys are the integers 0..2,
    every line exists (blank) from ``start()`` on, and other keys are rejected
    with LineIndexError.
  - Dynamic, ``StatusBlock()``: any hashable key, and a new line is added to
    the block the first time a key is used.

Layout:
  Screen line 0 is the row just above the last terminal row, line 1 is above
  that, and so on. The last terminal row is where the cursor rests between
  updates, so stray output that bypasses the channel lands below the block.

Keeping the screen right:
  The terminal is shared with the output channel, and the only coordination
  is the ``dirty`` flag. An update on a clean block rewrites a single line,
  skipping whatever prefix it shares with the previous text. As soon as log
  output is about to be printed, the interceptor hook blanks the block, puts
  the cursor on the block's top row so the log takes its place, and marks the
  block dirty. The next update then redraws every line from wherever the log
  left the cursor, which pushes the log up and rebuilds the block beneath it.

  Where the cursor is matters for that redraw, so the block tracks it
  explicitly (``_cursor_at_top``) instead of assuming it: either it sits where
  the block should start (after start() or after intercepted output), or it
  is parked on the last row.
"""

from collections.abc import Hashable
from dataclasses import dataclass

from .channel import OutputChannel
from .exceptions import LineIndexError, StatusBlockError
from .interceptor import ConsoleInterceptor
from .terminal import Terminal
from .utils import common_prefix_length, truncate_to_width


@dataclass
class StatusEntry:
    """One status line. `content` is stored untruncated."""

    key: Hashable
    content: str
    screen_line: int


class StatusBlock:
    """Multi-line status display anchored to the bottom of the terminal."""

    def __init__(
        self,
        total_lines: int | None = None,
        *,
        terminal: Terminal | None = None,
        channel: OutputChannel | None = None,
    ):
        if total_lines is not None and total_lines < 0:
            raise ValueError(f"total_lines must not be negative, got {total_lines}")
        self.total_lines = total_lines

        # The renderer and the channel must share one console
        if terminal is None:
            terminal = Terminal(channel.console if channel is not None else None)
        if channel is None:
            channel = OutputChannel(terminal.console)
        self.terminal = terminal
        self.channel = channel

        self._interceptor = ConsoleInterceptor(channel, self._before_output)
        self._entries: dict[Hashable, StatusEntry] = {}
        self._dirty = False
        self._cursor_at_top = False
        self._active = False

    @property
    def fixed(self) -> bool:
        return self.total_lines is not None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def num_lines(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[StatusEntry]:
        """Entries in ascending screen line order."""
        # Insertion order is screen line order
        return list(self._entries.values())

    def content(self, key: Hashable) -> str:
        if self.fixed:
            self._check_key(key)
        return self._entries[key].content

    def start(self) -> None:
        """Begin a session with an empty block and take over the output channel.

        In the fixed-size flavour every line is created blank and the space for
        the block is allocated straight away.

        Raises InterceptionError if another block is active on the same channel.
        """
        self._interceptor.install()
        self._entries = {}
        self._active = True
        # Nothing is on screen yet: the cursor marks where the block will start
        self._dirty = True
        self._cursor_at_top = True

        if self.fixed:
            for line in range(self.total_lines):
                self._entries[line] = StatusEntry(line, "", line)
            self.redraw_all()
            self._park()

    def update(self, key: Hashable, content: str) -> None:
        """Set the text of one status line and bring the screen up to date.

        Unchanged content produces no output at all. A key seen for the first
        time (dynamic flavour) gets the next screen line and grows the block by
        one row, which forces a full redraw.
        """
        if not self._active:
            raise StatusBlockError("Status block is not started")
        if self.fixed:
            self._check_key(key)

        entry = self._entries.get(key)
        if entry is not None and entry.content == content:
            return

        offset = 0
        if entry is None:
            entry = StatusEntry(key, content, len(self._entries))
            self._entries[key] = entry
            self._grow()
        else:
            offset = common_prefix_length(entry.content, content)
            entry.content = content

        if self._dirty:
            self.redraw_all()
        else:
            self._write_line(entry, offset)
        self._park()

    def redraw_all(self) -> None:
        """Rewrite every line of the block and clear the dirty flag.

        Writing one newline per line first guarantees the rows exist: when the
        cursor sits below fresh log output this scrolls the log up out of the
        block's way, and from the block's own top row it just walks down to the
        last row. Redrawing twice in a row leaves the same image.
        """
        if not self._cursor_at_top:
            self._move_to_top()
        self.terminal.newlines(self.num_lines)
        for entry in self.entries:
            self._write_line(entry, 0)
        self._dirty = False
        self._cursor_at_top = False
        self.terminal.flush()

    def stop(self) -> None:
        """Release the output channel and park the cursor below the block.

        The block stays visible on screen. The store is discarded, so the next
        start() begins from scratch.
        """
        self._interceptor.remove()
        self._active = False
        self.terminal.move_to_bottom()
        self.terminal.flush()
        self._entries = {}
        self._dirty = False
        self._cursor_at_top = False

    def __enter__(self) -> "StatusBlock":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def _check_key(self, key: Hashable) -> None:
        assert self.total_lines is not None
        if isinstance(key, bool) or not isinstance(key, int) or not 0 <= key < self.total_lines:
            raise LineIndexError(key, self.total_lines)

    def _grow(self) -> None:
        if not self._cursor_at_top:
            # A newline on the last row scrolls the screen up by one, opening a
            # row for the new line on top of the block
            self.terminal.move_to_bottom()
            self.terminal.newlines(1)
        self._dirty = True

    def _write_line(self, entry: StatusEntry, offset: int) -> None:
        width = self.terminal.width
        offset = min(offset, max(width - 1, 0))
        self.terminal.move_to(entry.screen_line, offset)
        if offset == 0:
            self.terminal.clear_line()
        self.terminal.write(truncate_to_width(entry.content, offset, width))
        if offset > 0:
            self.terminal.clear_to_end()

    def _move_to_top(self) -> None:
        self.terminal.move_to(self.num_lines - 1)

    def _park(self) -> None:
        self.terminal.move_to_bottom()
        self.terminal.flush()
        self._cursor_at_top = False

    def _before_output(self) -> None:
        """Interception hook: make room for output printed through the channel."""
        if self._dirty:
            # Already blanked (or never drawn); the pending redraw covers it
            return
        if self._entries:
            for line in reversed(range(self.num_lines)):
                self.terminal.move_to(line)
                self.terminal.clear_line()
            self._move_to_top()
            self.terminal.flush()
        self._dirty = True
        self._cursor_at_top = True
