"""
Environment Loader - builds the startup parameter set.

Every variable in STARTUP_VARIABLES is required. A missing variable is a
fatal precondition: no default is substituted. Present values are parsed
leniently, and PROFILE / LEVEL fall back to high / 4.2 when unrecognized.
"""

import logging
import os
from typing import Mapping, Optional

from common.constants import BufferConstants
from common.enums import H264Level, H264Profile
from core.codecs import SubObjectCodec
from core.exceptions import DecodeException, MissingEnvironmentVariableException
from core.utils import parse_enum, parse_flag, parse_float, parse_int
from schemas.parameters import ParameterSet

logger = logging.getLogger(__name__)

STARTUP_VARIABLES = (
    "CAMERA_ID",
    "WIDTH",
    "HEIGHT",
    "H_FLIP",
    "V_FLIP",
    "BRIGHTNESS",
    "CONTRAST",
    "SATURATION",
    "SHARPNESS",
    "EXPOSURE",
    "AWB",
    "DENOISE",
    "SHUTTER",
    "METERING",
    "GAIN",
    "EV",
    "ROI",
    "TUNING_FILE",
    "FPS",
    "IDR_PERIOD",
    "BITRATE",
    "PROFILE",
    "LEVEL",
)


class EnvironmentLoader:
    """Populates a ParameterSet from the process environment."""

    def __init__(self, codec: Optional[SubObjectCodec] = None):
        self.codec = codec if codec is not None else SubObjectCodec()

    def load(self, environ: Optional[Mapping[str, str]] = None) -> ParameterSet:
        """
        Build the startup parameter set.

        Args:
            environ: Variables to read from (defaults to os.environ)

        Returns:
            Fully populated ParameterSet with startup buffer counts

        Raises:
            MissingEnvironmentVariableException: If any required variable is unset
            DecodeException: If ROI is set but malformed
        """
        env = os.environ if environ is None else environ

        missing = [name for name in STARTUP_VARIABLES if name not in env]
        if missing:
            logger.error(f"Cannot start without environment variables: {', '.join(missing)}")
            raise MissingEnvironmentVariableException(missing)

        roi = None
        if env["ROI"]:
            try:
                roi = self.codec.decode_window(env["ROI"])
            except DecodeException as e:
                raise DecodeException("ROI", env["ROI"], e.reason) from e

        params = ParameterSet(
            camera_id=parse_int(env["CAMERA_ID"]),
            width=parse_int(env["WIDTH"]),
            height=parse_int(env["HEIGHT"]),
            h_flip=parse_flag(env["H_FLIP"]),
            v_flip=parse_flag(env["V_FLIP"]),
            brightness=parse_float(env["BRIGHTNESS"]),
            contrast=parse_float(env["CONTRAST"]),
            saturation=parse_float(env["SATURATION"]),
            sharpness=parse_float(env["SHARPNESS"]),
            exposure=env["EXPOSURE"],
            awb=env["AWB"],
            denoise=env["DENOISE"],
            shutter=parse_int(env["SHUTTER"]),
            metering=env["METERING"],
            gain=parse_float(env["GAIN"]),
            ev=parse_float(env["EV"]),
            roi=roi,
            tuning_file=env["TUNING_FILE"],
            fps=parse_int(env["FPS"]),
            idr_period=parse_int(env["IDR_PERIOD"]),
            bitrate=parse_int(env["BITRATE"]),
            profile=parse_enum(env["PROFILE"], H264Profile, H264Profile.HIGH),
            level=parse_enum(env["LEVEL"], H264Level, H264Level.LEVEL_4_2),
        )
        params.set_buffer_count(
            BufferConstants.STARTUP_BUFFER_COUNT, BufferConstants.CAPTURE_BUFFER_FACTOR
        )

        logger.info(
            f"Loaded camera {params.camera_id} parameters: {params.width}x{params.height} "
            f"@ {params.fps} fps, {params.bitrate} bps, "
            f"profile {params.profile.value}, level {params.level.value}"
        )
        return params


def load(environ: Optional[Mapping[str, str]] = None) -> ParameterSet:
    """Build the startup parameter set from the environment."""
    return EnvironmentLoader().load(environ)
