"""
Wire Format Serializer - writes a parameter set as a control buffer.

The output lists every wire key in canonical order, so applying it to any
parameter set reproduces all wire-visible fields. Buffer counts are not on
the wire.
"""

import logging
from enum import Enum
from typing import Any, List, Optional

from common.base import SensorMode, Window
from common.constants import WireConstants
from core.codecs import SubObjectCodec
from core.exceptions import SerializationException
from core.wire_parser import WIRE_FIELDS
from schemas.parameters import ParameterSet

logger = logging.getLogger(__name__)


class WireFormatSerializer:
    """Encodes ParameterSet values in the control buffer grammar."""

    def __init__(self, codec: Optional[SubObjectCodec] = None):
        self.codec = codec if codec is not None else SubObjectCodec()

    def serialize(self, params: ParameterSet) -> bytes:
        """
        Encode all wire-visible fields.

        Args:
            params: Parameter set to encode

        Returns:
            Control buffer bytes

        Raises:
            SerializationException: If a string value contains a separator
        """
        entries: List[str] = []
        for key, field in WIRE_FIELDS.items():
            value = self._format(key, getattr(params, field.attribute))
            entries.append(f"{key}{WireConstants.KEY_VALUE_SEPARATOR}{value}")

        return WireConstants.ENTRY_SEPARATOR.join(entries).encode(WireConstants.ENCODING)

    def _format(self, key: str, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, Window):
            return self.codec.encode_window(value)
        if isinstance(value, SensorMode):
            return self.codec.encode_sensor_mode(value)
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, bool):
            return WireConstants.TRUE_LITERAL if value else WireConstants.FALSE_LITERAL
        if isinstance(value, float):
            return repr(value)
        if isinstance(value, int):
            return str(value)

        if WireConstants.ENTRY_SEPARATOR in value:
            raise SerializationException(key, f"value '{value}' contains a space")
        return value


def serialize(params: ParameterSet) -> bytes:
    """Encode a parameter set as a control buffer."""
    return WireFormatSerializer().serialize(params)
