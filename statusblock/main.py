"""
Demo: a status block updating at the bottom of the terminal while logs scroll.

Every step picks a random status line and rewrites it with the current time.
Every few steps two log lines are printed through the output channel, which
makes the block step aside and redraw itself underneath them.

All parameters come from configuration (environment, .env, or
~/.statusblock/config.json); see config.py for the names.
"""

import random
import time
from datetime import datetime

from .block import StatusBlock
from .channel import OutputChannel
from .config import (
    DEFAULT_CONFIG,
    get_bool_setting,
    get_float_setting,
    get_int_setting,
)
from .console import console


def run_demo(
    block: StatusBlock,
    num_lines: int,
    steps: int,
    interval: float,
    log_every: int,
    dynamic: bool = False,
) -> None:
    """Drive `block` through `steps` random updates with interleaved logging."""
    channel = block.channel
    with block:
        for i in range(1, steps + 1):
            line = random.randrange(num_lines)
            if log_every > 0 and i % log_every == 0:
                channel.log("one thing")
                channel.log("and another")
            key = f"task-{line}" if dynamic else line
            block.update(key, f"For line {line} at {datetime.now():%H:%M:%S}: {i}")
            if interval > 0:
                time.sleep(interval)


def main():
    num_lines = get_int_setting(
        "STATUSBLOCK_DEMO_LINES", int(DEFAULT_CONFIG["STATUSBLOCK_DEMO_LINES"])
    )
    steps = get_int_setting("STATUSBLOCK_DEMO_STEPS", int(DEFAULT_CONFIG["STATUSBLOCK_DEMO_STEPS"]))
    interval = get_float_setting(
        "STATUSBLOCK_DEMO_INTERVAL", float(DEFAULT_CONFIG["STATUSBLOCK_DEMO_INTERVAL"])
    )
    log_every = get_int_setting(
        "STATUSBLOCK_DEMO_LOG_EVERY", int(DEFAULT_CONFIG["STATUSBLOCK_DEMO_LOG_EVERY"])
    )
    dynamic = get_bool_setting("STATUSBLOCK_DEMO_DYNAMIC", False)

    if num_lines < 1:
        console.print(
            f"[yellow]Warning: STATUSBLOCK_DEMO_LINES must be at least 1, got {num_lines}; using 1[/yellow]"
        )
        num_lines = 1

    channel = OutputChannel(console)
    block = StatusBlock(None if dynamic else num_lines, channel=channel)
    try:
        run_demo(block, num_lines, steps, interval, log_every, dynamic=dynamic)
    except KeyboardInterrupt:
        pass

    channel.log("Done.")
