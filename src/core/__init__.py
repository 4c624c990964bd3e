"""
Core modules for the camera parameter model
"""

from .codecs import SubObjectCodec
from .environment_loader import EnvironmentLoader
from .error_channel import ErrorChannel
from .exceptions import (
    DecodeException,
    MissingEnvironmentVariableException,
    ParameterException,
    SerializationException,
)
from .lifecycle import destroy
from .serializer import WireFormatSerializer
from .wire_parser import WIRE_FIELDS, WireFormatParser

__all__ = [
    "DecodeException",
    "EnvironmentLoader",
    "ErrorChannel",
    "MissingEnvironmentVariableException",
    "ParameterException",
    "SerializationException",
    "SubObjectCodec",
    "WIRE_FIELDS",
    "WireFormatParser",
    "WireFormatSerializer",
    "destroy",
]
