"""
Tests for core.error_channel module.
"""

import pytest

from core.error_channel import ErrorChannel


class TestErrorChannel:
    """Tests for ErrorChannel."""

    def test_empty_before_set(self, error_channel):
        """Test get() before any set() returns an empty message."""
        assert error_channel.get() == ""

    def test_keeps_last_message(self, error_channel):
        """Test only the most recent message is kept."""
        error_channel.set("invalid ROI: invalid window")
        error_channel.set("invalid Mode: invalid sensor mode")

        assert error_channel.get() == "invalid Mode: invalid sensor mode"

    def test_truncates_to_capacity(self):
        """Test messages keep at most capacity - 1 characters."""
        channel = ErrorChannel(capacity=16)

        channel.set("x" * 100)

        assert channel.get() == "x" * 15

    def test_default_capacity(self, error_channel):
        """Test the default capacity keeps 255 characters."""
        error_channel.set("y" * 300)

        assert len(error_channel.get()) == 255

    def test_clear(self, error_channel):
        """Test clear() empties the slot."""
        error_channel.set("invalid ROI: invalid window")
        error_channel.clear()

        assert error_channel.get() == ""

    def test_invalid_capacity(self):
        """Test capacity must be positive."""
        with pytest.raises(ValueError):
            ErrorChannel(capacity=0)
