"""statusblock - Multi-line status display pinned to the bottom of the terminal"""

from .block import StatusBlock, StatusEntry
from .channel import ChannelHandler, OutputChannel
from .config import (
    CONFIG_FILE,
    DEFAULT_CONFIG,
    FALLBACK_WIDTH,
    STATUSBLOCK_DIR,
    get_bool_setting,
    get_float_setting,
    get_int_setting,
    get_setting,
    load_config,
)
from .console import console
from .cursor import CursorPosition, get_cursor_position, parse_cursor_response
from .exceptions import (
    CursorPositionError,
    InterceptionError,
    LineIndexError,
    StatusBlockError,
)
from .interceptor import ConsoleInterceptor
from .terminal import Terminal
from .utils import common_prefix_length, truncate_to_width

__all__ = [
    # Block
    "StatusBlock",
    "StatusEntry",
    # Output
    "ChannelHandler",
    "ConsoleInterceptor",
    "OutputChannel",
    "Terminal",
    "console",
    # Config
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "FALLBACK_WIDTH",
    "STATUSBLOCK_DIR",
    "get_bool_setting",
    "get_float_setting",
    "get_int_setting",
    "get_setting",
    "load_config",
    # Cursor
    "CursorPosition",
    "get_cursor_position",
    "parse_cursor_response",
    # Errors
    "CursorPositionError",
    "InterceptionError",
    "LineIndexError",
    "StatusBlockError",
    # Utils
    "common_prefix_length",
    "truncate_to_width",
]
