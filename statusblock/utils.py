"""
Utility functions for statusblock.

Pure string helpers used by the status block when it decides how much of a line
to rewrite. They take no terminal state and have no side effects, which keeps
them trivially testable on their own.
"""


def common_prefix_length(a: str, b: str) -> int:
    """Count the characters that `a` and `b` share at their start.

    The scan compares corresponding characters up to the length of the shorter
    string and stops at the first mismatch, so the result is between zero and
    ``min(len(a), len(b))``.

    The status block uses this when patching a single line: the shared prefix
    is already on screen, so only the differing suffix needs to be written,
    followed by an erase-to-end-of-line.

    Examples:
        >>> common_prefix_length("abcxy", "abcde")
        3
        >>> common_prefix_length("", "x")
        0
    """
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def truncate_to_width(text: str, offset: int, columns: int) -> str:
    """Return the visible part of `text` from `offset` for a terminal `columns` wide.

    The last column is never written to, so the cut is at ``columns - 1``.
    Truncation counts characters, not display cells.
    """
    return text[offset : max(columns - 1, 0)]
