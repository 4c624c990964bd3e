"""
Centralized enums for the camera parameter model.

This module contains all enumeration types used throughout the system,
providing a single source of truth for enum definitions.
"""

from enum import Enum


# H264 encoder enums
class H264Profile(str, Enum):
    """H264 encoding profiles accepted by the encoder."""

    BASELINE = "baseline"
    MAIN = "main"
    HIGH = "high"


class H264Level(str, Enum):
    """H264 encoding levels accepted by the encoder."""

    LEVEL_4_0 = "4.0"
    LEVEL_4_1 = "4.1"
    LEVEL_4_2 = "4.2"


# Sensor mode packing
class SensorPacking(str, Enum):
    """Raw sensor pixel packing, as written in a sensor mode string."""

    PACKED = "P"
    UNPACKED = "U"
