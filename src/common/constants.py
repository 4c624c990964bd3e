"""
Constants and configuration values for the camera parameter model.
Centralizes all magic numbers and configuration constants.
"""


# Buffer Constants
class BufferConstants:
    """Hardware buffer counts set by each populate operation."""

    # Environment startup
    STARTUP_BUFFER_COUNT = 3

    # After a control buffer has been applied
    RUNTIME_BUFFER_COUNT = 6

    # Capture buffers are always double the encoder buffers
    CAPTURE_BUFFER_FACTOR = 2


# Wire Format Constants
class WireConstants:
    """Grammar of control buffers."""

    ENTRY_SEPARATOR = " "
    KEY_VALUE_SEPARATOR = "="
    ENCODING = "utf-8"

    # Sub-object grammars
    WINDOW_SEPARATOR = ","
    WINDOW_FIELDS = 4
    SENSOR_MODE_SEPARATOR = ":"
    SENSOR_MODE_MIN_FIELDS = 2
    SENSOR_MODE_DEFAULT_BIT_DEPTH = 12

    # Booleans are true only for this literal
    TRUE_LITERAL = "1"
    FALSE_LITERAL = "0"


# Error Reporting Constants
class ErrorConstants:
    """Constants for the error channel."""

    # Includes the terminator slot, so at most 255 characters are kept
    DEFAULT_BUFFER_SIZE = 256
    MIN_BUFFER_SIZE = 16
    MAX_BUFFER_SIZE = 4096


# Camera Default Constants
class CameraDefaults:
    """Values applied to unset camera settings of a stream path."""

    WIDTH = 1920
    HEIGHT = 1080
    CONTRAST = 1.0
    SATURATION = 1.0
    SHARPNESS = 1.0
    FPS = 30
    IDR_PERIOD = 60
    BITRATE = 1000000
    PROFILE = "main"
    LEVEL = "4.1"


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
    LOG_FILE_BACKUP_COUNT = 5
