"""
Pytest configuration and fixtures for camera parameter tests
"""

import pytest

from core.codecs import SubObjectCodec
from core.environment_loader import STARTUP_VARIABLES
from core.error_channel import ErrorChannel
from core.wire_parser import WireFormatParser
from schemas import ParameterSet


@pytest.fixture
def camera_environ():
    """Complete startup environment as a plain mapping"""
    return {
        "CAMERA_ID": "0",
        "WIDTH": "1920",
        "HEIGHT": "1080",
        "H_FLIP": "1",
        "V_FLIP": "0",
        "BRIGHTNESS": "0.1",
        "CONTRAST": "1",
        "SATURATION": "1",
        "SHARPNESS": "1",
        "EXPOSURE": "normal",
        "AWB": "auto",
        "DENOISE": "off",
        "SHUTTER": "0",
        "METERING": "centre",
        "GAIN": "0",
        "EV": "0",
        "ROI": "",
        "TUNING_FILE": "",
        "FPS": "30",
        "IDR_PERIOD": "60",
        "BITRATE": "1000000",
        "PROFILE": "main",
        "LEVEL": "4.1",
    }


@pytest.fixture
def camera_env(monkeypatch, camera_environ):
    """Install the startup environment into os.environ"""
    for name in STARTUP_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    for name, value in camera_environ.items():
        monkeypatch.setenv(name, value)
    return camera_environ


@pytest.fixture
def params():
    """Default-initialized parameter set"""
    return ParameterSet()


@pytest.fixture
def error_channel():
    """Empty error channel"""
    return ErrorChannel()


@pytest.fixture
def codec():
    """Sub-object codec"""
    return SubObjectCodec()


@pytest.fixture
def parser(error_channel, codec):
    """Wire parser reporting into the error_channel fixture"""
    return WireFormatParser(error_channel=error_channel, codec=codec)
