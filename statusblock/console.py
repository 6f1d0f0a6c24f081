"""
Shared Rich Console singleton for terminal output.

The status block, the output channel and the configuration warnings all write
to the same terminal. Rich's Console owns the terminal state we care about
(its size and the file it writes to), so every part of the package imports and
shares this one instance instead of creating its own.

Sharing one Console matters more here than in most programs: the status block
draws with absolute cursor positioning, and any output that reaches the
terminal through a different object would land in rows the block does not know
about. Routing everything through one Console keeps the writes in one ordered
stream, and tests can swap this object out in one place.

Usage:
    from .console import console
    console.print("[yellow]Warning: something odd[/yellow]")
"""

from rich.console import Console

# The shared console instance. The default OutputChannel and Terminal both wrap
# it, so log lines and status redraws never race for the cursor.
console = Console()
