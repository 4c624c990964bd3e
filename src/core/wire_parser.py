"""
Wire Format Parser - applies control buffers to a live parameter set.

A control buffer is a list of space-separated "Key=value" entries:

    Width=1280 Height=720 ROI=0.25,0.25,0.5,0.5 Profile=main

Rules:
- Keys are matched case-sensitively against WIRE_FIELDS; unknown keys are ignored.
- Keys not present in the buffer leave their field untouched.
- Scalar values are parsed leniently (bad numbers read as zero).
- Sub-object values (ROI, AfWindow, Mode) go through the codec. A decode
  failure stops processing immediately; entries already applied stay applied.
- An empty sub-object value clears the field.
- After a successful buffer the runtime buffer counts are set.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from common.base import SensorMode, Window
from common.constants import BufferConstants, WireConstants
from common.enums import H264Level, H264Profile
from core.codecs import SubObjectCodec
from core.error_channel import ErrorChannel
from core.exceptions import DecodeException
from core.utils import parse_enum, parse_flag, parse_float, parse_int
from schemas.parameters import ParameterSet

logger = logging.getLogger(__name__)


def _parse_string(value: str) -> str:
    return value


def _parse_profile(value: str) -> H264Profile:
    return parse_enum(value, H264Profile, H264Profile.HIGH)


def _parse_level(value: str) -> H264Level:
    return parse_enum(value, H264Level, H264Level.LEVEL_4_2)


def _decode_window(codec: SubObjectCodec, value: str) -> Window:
    return codec.decode_window(value)


def _decode_sensor_mode(codec: SubObjectCodec, value: str) -> SensorMode:
    return codec.decode_sensor_mode(value)


@dataclass(frozen=True)
class WireField:
    """
    One recognized wire key.

    Scalar fields parse with parse(value). Sub-object fields parse with
    parse(codec, value) and are cleared by an empty value.
    """

    key: str
    attribute: str
    parse: Callable[..., Any]
    sub_object: bool = False


_FIELDS = (
    WireField("CameraID", "camera_id", parse_int),
    WireField("Width", "width", parse_int),
    WireField("Height", "height", parse_int),
    WireField("HFlip", "h_flip", parse_flag),
    WireField("VFlip", "v_flip", parse_flag),
    WireField("Brightness", "brightness", parse_float),
    WireField("Contrast", "contrast", parse_float),
    WireField("Saturation", "saturation", parse_float),
    WireField("Sharpness", "sharpness", parse_float),
    WireField("Exposure", "exposure", _parse_string),
    WireField("AWB", "awb", _parse_string),
    WireField("Denoise", "denoise", _parse_string),
    WireField("Shutter", "shutter", parse_int),
    WireField("Metering", "metering", _parse_string),
    WireField("Gain", "gain", parse_float),
    WireField("EV", "ev", parse_float),
    WireField("ROI", "roi", _decode_window, sub_object=True),
    WireField("TuningFile", "tuning_file", _parse_string),
    WireField("Mode", "mode", _decode_sensor_mode, sub_object=True),
    WireField("FPS", "fps", parse_int),
    WireField("IDRPeriod", "idr_period", parse_int),
    WireField("Bitrate", "bitrate", parse_int),
    WireField("Profile", "profile", _parse_profile),
    WireField("Level", "level", _parse_level),
    WireField("AfMode", "af_mode", _parse_string),
    WireField("AfRange", "af_range", _parse_string),
    WireField("AfSpeed", "af_speed", _parse_string),
    WireField("LensPosition", "lens_position", parse_float),
    WireField("AfWindow", "af_window", _decode_window, sub_object=True),
)

# Insertion order is the canonical wire order
WIRE_FIELDS: Dict[str, WireField] = {field.key: field for field in _FIELDS}


class WireFormatParser:
    """Applies control buffers to a ParameterSet in place."""

    def __init__(
        self,
        error_channel: Optional[ErrorChannel] = None,
        codec: Optional[SubObjectCodec] = None,
    ):
        self.error_channel = error_channel if error_channel is not None else ErrorChannel()
        self.codec = codec if codec is not None else SubObjectCodec()

    def apply(self, buffer: Union[bytes, str], target: ParameterSet) -> None:
        """
        Apply one control buffer to target.

        Args:
            buffer: Encoded control buffer
            target: Parameter set to mutate

        Raises:
            DecodeException: If a sub-object value is malformed. Entries before
                the failing one remain applied and the buffer counts are not
                updated.
        """
        if isinstance(buffer, bytes):
            buffer = buffer.decode(WireConstants.ENCODING, errors="replace")

        for entry in buffer.split(WireConstants.ENTRY_SEPARATOR):
            if not entry:
                continue

            key, separator, value = entry.partition(WireConstants.KEY_VALUE_SEPARATOR)
            if not separator:
                logger.debug(f"Skipping malformed entry '{entry}'")
                continue

            field = WIRE_FIELDS.get(key)
            if field is None:
                logger.debug(f"Ignoring unknown key '{key}'")
                continue

            self._apply_field(field, value, target)

        target.set_buffer_count(
            BufferConstants.RUNTIME_BUFFER_COUNT, BufferConstants.CAPTURE_BUFFER_FACTOR
        )

    def _apply_field(self, field: WireField, value: str, target: ParameterSet) -> None:
        if not field.sub_object:
            setattr(target, field.attribute, field.parse(value))
            return

        # Empty value clears; the previous object is released with the reference
        if not value:
            setattr(target, field.attribute, None)
            return

        try:
            decoded = field.parse(self.codec, value)
        except DecodeException as e:
            error = DecodeException(field.key, value, e.reason)
            self.error_channel.set(error.message)
            logger.warning(f"Rejected control buffer: {error.message} ('{value}')")
            raise error from e

        setattr(target, field.attribute, decoded)

    @property
    def last_error(self) -> str:
        """Last message written to the error channel."""
        return self.error_channel.get()


def apply(
    buffer: Union[bytes, str], target: ParameterSet, error_channel: Optional[ErrorChannel] = None
) -> None:
    """Apply one control buffer to target using a one-off parser."""
    WireFormatParser(error_channel=error_channel).apply(buffer, target)
