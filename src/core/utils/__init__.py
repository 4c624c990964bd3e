"""
Utility modules for core functionality - functional architecture.

This package contains reusable utility functions for domain-agnostic operations.

Modules:
- enum_converter: Enum parsing with a fallback variant
- lenient: Number parsing that never fails
"""

# Enum converter functions
from .enum_converter import parse_enum

# Lenient parsing functions
from .lenient import parse_flag, parse_float, parse_int

__all__ = [
    # Enum converter
    "parse_enum",
    # Lenient parsing
    "parse_int",
    "parse_float",
    "parse_flag",
]
