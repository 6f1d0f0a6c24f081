"""
Tests for the pure string helpers (statusblock/utils.py).

`common_prefix_length` decides how much of a status line can be left alone
when it is patched in place, and `truncate_to_width` decides what part of the
stored text reaches the screen. Neither touches the terminal, so they are
tested directly with plain values:

  1. **TestCommonPrefixLength**: the result is the length of the longest
     shared leading substring, never more than the shorter string.

  2. **TestTruncateToWidth**: the cut happens one column before the terminal
     edge, the offset is honoured, and the input is never modified.
"""

import pytest

from statusblock.utils import common_prefix_length, truncate_to_width


class TestCommonPrefixLength:
    """Tests for common_prefix_length."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("abcxy", "abcde", 3),
            ("", "x", 0),
            ("abc", "abc", 3),
            ("abc", "abcdef", 3),
            ("abcdef", "abc", 3),
            ("xbc", "abc", 0),
            ("", "", 0),
        ],
    )
    def test_known_pairs(self, a, b, expected):
        assert common_prefix_length(a, b) == expected

    def test_symmetric(self):
        """The order of the arguments does not matter."""
        pairs = [("status: ok", "status: failed"), ("12:00:01", "12:00:59"), ("a", "")]
        for a, b in pairs:
            assert common_prefix_length(a, b) == common_prefix_length(b, a)

    def test_bounded_by_shorter_string(self):
        for a, b in [("aaaa", "aa"), ("aa", "aaaa"), ("", "anything")]:
            assert common_prefix_length(a, b) <= min(len(a), len(b))

    def test_prefix_really_is_common(self):
        """The counted characters match and the next one (if any) differs."""
        a, b = "For line 3 at 10:15:02: 7", "For line 3 at 10:15:09: 8"
        n = common_prefix_length(a, b)
        assert a[:n] == b[:n]
        assert a[n] != b[n]

    def test_unicode_counts_characters(self):
        assert common_prefix_length("héllo", "hélp") == 3


class TestTruncateToWidth:
    """Tests for truncate_to_width."""

    def test_cuts_before_last_column(self):
        assert truncate_to_width("x" * 100, 0, 80) == "x" * 79

    def test_short_text_unchanged(self):
        assert truncate_to_width("hello", 0, 80) == "hello"

    def test_offset_returns_suffix(self):
        assert truncate_to_width("abcdef", 3, 80) == "def"

    def test_offset_with_truncation(self):
        assert truncate_to_width("abcdefghij", 2, 6) == "cde"

    def test_offset_past_visible_width(self):
        assert truncate_to_width("abcdefghij", 8, 6) == ""

    def test_tiny_terminal(self):
        assert truncate_to_width("abc", 0, 1) == ""
        assert truncate_to_width("abc", 0, 0) == ""

    def test_input_not_modified(self):
        text = "y" * 20
        truncate_to_width(text, 0, 5)
        assert text == "y" * 20
