"""
Base data models - fundamental types without dependencies.

This module contains the sub-objects a parameter set owns:
- Window: normalized rectangle used for ROI and autofocus targeting
- SensorMode: raw sensor mode descriptor

IMPORTANT: This module must NOT import from schemas or core
to avoid circular dependencies.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Window(BaseModel):
    """
    Rectangular region in normalized sensor coordinates.

    Used both for the region of interest (digital crop) and for the
    autofocus metering window.
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., description="Width")
    height: float = Field(..., description="Height")

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for logging and API output."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


class SensorMode(BaseModel):
    """Raw sensor mode: output size, bit depth and packing."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    bit_depth: int = 12
    packed: bool = True

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for logging and API output."""
        return {
            "width": self.width,
            "height": self.height,
            "bit_depth": self.bit_depth,
            "packed": self.packed,
        }
