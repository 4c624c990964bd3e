"""
Schemas Package

This package contains the Pydantic schemas of the camera parameter model.

These schemas are shared across all application layers:
- Core (loading, parsing, serialization)
- The control loop host
- The external capture pipeline, which reads fields directly
"""

# Re-export base types from common package for convenience
from common.base import SensorMode, Window
from common.enums import H264Level, H264Profile

# Base schemas
from .base import BaseParameterModel

# Parameter model
from .parameters import ParameterSet

# Explicitly declare public API for re-export
__all__ = [
    # Parameter model
    "ParameterSet",
    # Sub-objects
    "SensorMode",
    "Window",
    # Enums
    "H264Level",
    "H264Profile",
    # Base schemas
    "BaseParameterModel",
]
