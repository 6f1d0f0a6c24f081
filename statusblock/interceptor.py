"""
Console interception as an explicit capability.

A `ConsoleInterceptor` pairs an `OutputChannel` with a callback. Installing it
takes the channel's single interception slot, so every `log`, `error` and
`warning` call (and every record through a `ChannelHandler`) runs the callback
before printing. Removing it gives the slot back and the entry points print
unwrapped again.

Nothing global is patched. Because the slot belongs to the channel, a second
interceptor cannot quietly replace the first: installing it raises
`InterceptionError` until the first one is removed.
"""

from collections.abc import Callable

from .channel import OutputChannel


class ConsoleInterceptor:
    """Runs `before_output` ahead of everything printed through a channel."""

    def __init__(self, channel: OutputChannel, before_output: Callable[[], None]):
        self.channel = channel
        self._before_output = before_output

    @property
    def active(self) -> bool:
        return self.channel.interceptor is self

    def install(self) -> None:
        self.channel.attach(self)

    def remove(self) -> None:
        # Safe to call when not installed
        self.channel.detach(self)

    def before_output(self) -> None:
        self._before_output()
