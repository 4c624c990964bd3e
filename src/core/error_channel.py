"""
Error Channel - single-slot store for the last error message.

The slot keeps the most recent message only, truncated to the channel
capacity. There is no locking: callers serialize writers.
"""

import logging

from common.constants import ErrorConstants

logger = logging.getLogger(__name__)


class ErrorChannel:
    """Holds the most recently reported error message."""

    def __init__(self, capacity: int = ErrorConstants.DEFAULT_BUFFER_SIZE):
        if capacity < 1:
            raise ValueError(f"Error channel capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._message = ""

    def set(self, message: str) -> None:
        """Store a message, keeping at most capacity - 1 characters."""
        self._message = message[: self.capacity - 1]
        logger.debug(f"Error reported: {self._message}")

    def get(self) -> str:
        """Return the last message, or an empty string if none was set."""
        return self._message

    def clear(self) -> None:
        """Empty the slot so get() returns an empty string."""
        self._message = ""
