"""
Types package - fundamental types without external dependencies.

This package contains basic types that are used throughout the system:
- Enums (H264Profile, H264Level, SensorPacking)
- Constants (BufferConstants, WireConstants, etc.)
- Base models (Window, SensorMode)

IMPORTANT: This package must NOT import from any other project packages
(schemas, core) to avoid circular dependencies.
"""

# Export base models
from common.base import SensorMode, Window

# Export all constants
from common.constants import (
    BufferConstants,
    CameraDefaults,
    ErrorConstants,
    SystemConstants,
    WireConstants,
)

# Export all enums
from common.enums import H264Level, H264Profile, SensorPacking

__all__ = [
    # Enums
    "H264Level",
    "H264Profile",
    "SensorPacking",
    # Constants
    "BufferConstants",
    "CameraDefaults",
    "ErrorConstants",
    "SystemConstants",
    "WireConstants",
    # Base models
    "SensorMode",
    "Window",
]
