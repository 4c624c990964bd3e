"""
Camera parameter set.

One instance describes everything the capture/encode pipeline needs. It is
either built once from the startup environment or default-initialized and
then updated in place from control buffers.

Owned attachments (strings and the optional sub-objects) are released by
overwriting them; destroy() in core.lifecycle releases all of them at once.
Instances carry no locking: callers serialize access.
"""

from typing import ClassVar, Optional, Tuple

from pydantic import Field, PrivateAttr

from common.base import SensorMode, Window
from common.constants import CameraDefaults
from common.enums import H264Level, H264Profile
from schemas.base import BaseParameterModel


class ParameterSet(BaseParameterModel):
    """Runtime configuration of the camera process."""

    OWNED_STRINGS: ClassVar[Tuple[str, ...]] = (
        "exposure",
        "awb",
        "denoise",
        "metering",
        "tuning_file",
        "af_mode",
        "af_range",
        "af_speed",
    )
    OWNED_OBJECTS: ClassVar[Tuple[str, ...]] = ("roi", "mode", "af_window")

    # === Sensor selection and geometry ===
    camera_id: int = Field(default=0, description="Index of the camera to open")
    width: int = Field(default=0, description="Output width in pixels")
    height: int = Field(default=0, description="Output height in pixels")
    h_flip: bool = Field(default=False, description="Mirror horizontally")
    v_flip: bool = Field(default=False, description="Mirror vertically")

    # === Image quality ===
    brightness: float = 0.0
    contrast: float = 0.0
    saturation: float = 0.0
    sharpness: float = 0.0

    # === Exposure and white balance ===
    exposure: str = Field(default="", description="Exposure mode")
    awb: str = Field(default="", description="Auto white balance mode")
    denoise: str = Field(default="", description="Denoise mode")
    shutter: int = Field(default=0, description="Shutter speed in microseconds")
    metering: str = Field(default="", description="Metering mode")
    gain: float = 0.0
    ev: float = Field(default=0.0, description="Exposure value compensation")

    # === Crop, tuning and sensor mode ===
    roi: Optional[Window] = Field(default=None, description="Region of interest")
    tuning_file: str = Field(default="", description="Path of the sensor tuning file")
    mode: Optional[SensorMode] = Field(default=None, description="Raw sensor mode")

    # === Encoder ===
    fps: int = 0
    idr_period: int = Field(default=0, description="Frames between IDR frames")
    bitrate: int = Field(default=0, description="Target bitrate in bits per second")
    profile: H264Profile = H264Profile.HIGH
    level: H264Level = H264Level.LEVEL_4_2

    # === Autofocus ===
    af_mode: str = ""
    af_range: str = ""
    af_speed: str = ""
    lens_position: float = 0.0
    af_window: Optional[Window] = Field(default=None, description="Autofocus window")

    # === Buffers ===
    buffer_count: int = 0
    capture_buffer_count: int = Field(
        default=0, description="Always twice buffer_count after populating"
    )

    _destroyed: bool = PrivateAttr(default=False)

    @classmethod
    def with_defaults(cls) -> "ParameterSet":
        """
        Create a parameter set filled with the stream path defaults.

        Returns:
            ParameterSet with the defaults applied to unset camera settings
        """
        return cls(
            width=CameraDefaults.WIDTH,
            height=CameraDefaults.HEIGHT,
            contrast=CameraDefaults.CONTRAST,
            saturation=CameraDefaults.SATURATION,
            sharpness=CameraDefaults.SHARPNESS,
            fps=CameraDefaults.FPS,
            idr_period=CameraDefaults.IDR_PERIOD,
            bitrate=CameraDefaults.BITRATE,
            profile=H264Profile(CameraDefaults.PROFILE),
            level=H264Level(CameraDefaults.LEVEL),
        )

    @property
    def destroyed(self) -> bool:
        """True once all owned attachments have been released."""
        return self._destroyed

    def set_buffer_count(self, count: int, factor: int) -> None:
        """Set the buffer count and the capture buffer count derived from it."""
        self.buffer_count = count
        self.capture_buffer_count = count * factor
