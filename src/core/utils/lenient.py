"""
Lenient number parsing.

Control buffers and startup variables never fail on a bad number: the
longest valid numeric prefix is used, and text without one reads as zero.
"""

import re
from typing import Optional

from common.constants import WireConstants

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)", re.ASCII
)


def parse_int(text: Optional[str]) -> int:
    """
    Parse the leading integer of a string.

    Args:
        text: Raw value (may be None or empty)

    Returns:
        Parsed integer, or 0 when no digits lead the string

    Example:
        >>> parse_int("12abc")
        12
        >>> parse_int("abc")
        0
    """
    if not text:
        return 0

    match = _INT_PREFIX.match(text)
    if match is None:
        return 0

    try:
        return int(match.group(1))
    except ValueError:
        # Longer than the interpreter's integer string limit
        return 0


def parse_float(text: Optional[str]) -> float:
    """
    Parse the leading decimal number of a string.

    Args:
        text: Raw value (may be None or empty)

    Returns:
        Parsed float, or 0.0 when no number leads the string

    Example:
        >>> parse_float("1.5x")
        1.5
        >>> parse_float("-.25")
        -0.25
    """
    if not text:
        return 0.0

    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def parse_flag(text: Optional[str]) -> bool:
    """Flags are set only by the literal "1"."""
    return text == WireConstants.TRUE_LITERAL
