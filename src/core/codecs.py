"""
Sub-object codec - text forms of Window and SensorMode values.

Window:      "x,y,width,height"                  e.g. "0.25,0.25,0.5,0.5"
SensorMode:  "width:height[:bit_depth[:packing]]" e.g. "4056:3040:12:P"

Decoders raise DecodeException with a short reason; callers re-raise with
the name of the field being populated.
"""

import logging
import re

from common.base import SensorMode, Window
from common.constants import WireConstants
from common.enums import SensorPacking
from core.exceptions import DecodeException

logger = logging.getLogger(__name__)

_FLOAT = re.compile(
    r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$", re.ASCII
)
_UINT = re.compile(r"\s*\+?[0-9]+$", re.ASCII)


class SubObjectCodec:
    """Decodes and encodes the sub-objects owned by a parameter set."""

    def decode_window(self, text: str) -> Window:
        """
        Decode a window string.

        Args:
            text: Four comma-separated floats

        Returns:
            Window instance

        Raises:
            DecodeException: If the text is not exactly four numbers
        """
        parts = text.split(WireConstants.WINDOW_SEPARATOR)
        if len(parts) != WireConstants.WINDOW_FIELDS or not all(_FLOAT.match(p) for p in parts):
            raise DecodeException("window", text, "invalid window")

        x, y, width, height = (float(p) for p in parts)
        return Window(x=x, y=y, width=width, height=height)

    def decode_sensor_mode(self, text: str) -> SensorMode:
        """
        Decode a sensor mode string.

        Width and height are required. Bit depth defaults to 12 and packing
        to packed. Packing is "P" or "U", in either case.

        Raises:
            DecodeException: If width and height cannot be read
        """
        parts = text.split(WireConstants.SENSOR_MODE_SEPARATOR)

        numbers = []
        for part in parts[:3]:
            if not _UINT.match(part):
                break
            try:
                numbers.append(int(part))
            except ValueError as e:
                raise DecodeException("sensor mode", text, "invalid sensor mode") from e

        if len(numbers) < WireConstants.SENSOR_MODE_MIN_FIELDS:
            raise DecodeException("sensor mode", text, "invalid sensor mode")

        bit_depth = WireConstants.SENSOR_MODE_DEFAULT_BIT_DEPTH
        if len(numbers) == 3:
            bit_depth = numbers[2]

        packed = True
        if len(numbers) == 3 and len(parts) > 3 and parts[3]:
            packing = parts[3][0].upper()
            if packing == SensorPacking.UNPACKED.value:
                packed = False
            elif packing != SensorPacking.PACKED.value:
                logger.debug(f"Unknown sensor packing '{parts[3]}', assuming packed")

        return SensorMode(width=numbers[0], height=numbers[1], bit_depth=bit_depth, packed=packed)

    def encode_window(self, window: Window) -> str:
        """Encode a window as four comma-separated floats."""
        return WireConstants.WINDOW_SEPARATOR.join(
            repr(float(v)) for v in (window.x, window.y, window.width, window.height)
        )

    def encode_sensor_mode(self, mode: SensorMode) -> str:
        """Encode a sensor mode in its full four-field form."""
        packing = SensorPacking.PACKED if mode.packed else SensorPacking.UNPACKED
        return WireConstants.SENSOR_MODE_SEPARATOR.join(
            [str(mode.width), str(mode.height), str(mode.bit_depth), packing.value]
        )
