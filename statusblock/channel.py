"""
Output channel: the logging entry points that share the terminal with the block.

`OutputChannel` bundles the three ordinary logging entry points (`log`, `error`
and `warning`) around one Rich Console. Code that logs through a channel does
not need to know a status block exists: while a block is active it holds the
channel's single interception slot, and every entry point gives the block a
chance to clear itself before the text is printed.

The standard `logging` module can join in through `ChannelHandler`, a
`RichHandler` that runs the same interception step before emitting a record.
Rich recommends that log handlers and live displays share one Console, and the
handler defaults to the channel's console for that reason.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler

from .console import console as shared_console
from .exceptions import InterceptionError

if TYPE_CHECKING:
    from .interceptor import ConsoleInterceptor


class OutputChannel:
    """Three logging entry points printing through one Rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console
        self._interceptor: ConsoleInterceptor | None = None

    @property
    def interceptor(self) -> ConsoleInterceptor | None:
        return self._interceptor

    def log(self, *objects: Any, **kwargs: Any) -> None:
        self._emit(objects, kwargs)

    def error(self, *objects: Any, **kwargs: Any) -> None:
        kwargs.setdefault("style", "red")
        self._emit(objects, kwargs)

    def warning(self, *objects: Any, **kwargs: Any) -> None:
        kwargs.setdefault("style", "yellow")
        self._emit(objects, kwargs)

    def before_output(self) -> None:
        """Give the installed interceptor a chance to run before output."""
        if self._interceptor is not None:
            self._interceptor.before_output()

    def attach(self, interceptor: ConsoleInterceptor) -> None:
        """Hand the interception slot to `interceptor`.

        Raises InterceptionError if a different interceptor already holds it.
        """
        if self._interceptor is not None and self._interceptor is not interceptor:
            raise InterceptionError(
                "Output channel is already intercepted; stop the other status block first"
            )
        self._interceptor = interceptor

    def detach(self, interceptor: ConsoleInterceptor) -> None:
        if self._interceptor is interceptor:
            self._interceptor = None

    def handler(self, **kwargs: Any) -> ChannelHandler:
        """Build a logging handler that prints through this channel."""
        return ChannelHandler(self, **kwargs)

    def _emit(self, objects: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self.before_output()
        self.console.print(*objects, **kwargs)


class ChannelHandler(RichHandler):
    """RichHandler that lets the channel's interceptor run before each record."""

    def __init__(self, channel: OutputChannel, level: int | str = logging.NOTSET, **kwargs: Any):
        kwargs.setdefault("console", channel.console)
        super().__init__(level, **kwargs)
        self.channel = channel

    def emit(self, record: logging.LogRecord) -> None:
        self.channel.before_output()
        super().emit(record)
