"""
Unit Tests for Core Utilities.
"""

from datetime import datetime

from notekeeper.backend.core.utils import derive_title, utc_now


class TestUtcNow:
    """Tests for utc_now."""

    def test_is_naive(self):
        """Timestamps are stored without tzinfo."""
        assert utc_now().tzinfo is None

    def test_returns_datetime(self):
        assert isinstance(utc_now(), datetime)


class TestDeriveTitle:
    """Tests for deriving a title from note content."""

    def test_first_line(self):
        assert derive_title("Buy milk\nand eggs", 255) == "Buy milk"

    def test_single_line(self):
        assert derive_title("Just one line", 255) == "Just one line"

    def test_empty_content(self):
        assert derive_title("", 255) == ""

    def test_leading_newline_gives_empty_title(self):
        """Only the first segment counts, even when it is empty."""
        assert derive_title("\nsecond line", 255) == ""

    def test_exactly_max_length_is_kept(self):
        line = "a" * 255
        assert derive_title(line + "\nmore", 255) == line

    def test_one_over_max_length_is_truncated(self):
        line = "a" * 255 + "b"
        title = derive_title(line, 255)
        assert len(title) == 255
        assert title == line[:255]

    def test_carriage_return_is_kept(self):
        """Only \\n splits lines."""
        assert derive_title("Title\r\nBody", 255) == "Title\r"
