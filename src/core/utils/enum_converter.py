"""
Enum conversion utilities.

Parses strings into enums, with a fallback variant for unrecognized input.
"""

from typing import Any, Type, TypeVar

T = TypeVar("T")


def parse_enum(value: Any, enum_class: Type[T], default: T) -> T:
    """
    Parse value to enum with fallback to default.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Variant returned when the value is not recognized

    Returns:
        Parsed enum value or default

    Example:
        >>> parse_enum("main", H264Profile, H264Profile.HIGH)
        <H264Profile.MAIN: 'main'>
        >>> parse_enum("nonsense", H264Profile, H264Profile.HIGH)
        <H264Profile.HIGH: 'high'>
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    # None or missing value
    if value is None:
        return default

    try:
        return enum_class(value)
    except ValueError:
        return default
