"""
Tests for core.serializer module.
"""

import pytest

from common.base import SensorMode, Window
from common.enums import H264Level, H264Profile
from core.exceptions import SerializationException
from core.serializer import WireFormatSerializer, serialize
from core.wire_parser import WIRE_FIELDS
from schemas import ParameterSet


class TestWireFormatSerializer:
    """Tests for WireFormatSerializer."""

    def test_every_key_written_in_order(self, params):
        """Test the buffer lists every wire key in canonical order."""
        buffer = serialize(params).decode()

        keys = [entry.partition("=")[0] for entry in buffer.split(" ")]
        assert keys == list(WIRE_FIELDS)

    def test_value_formats(self):
        """Test flags, enums and sub-objects are written in wire form."""
        params = ParameterSet(
            h_flip=True,
            profile=H264Profile.BASELINE,
            level=H264Level.LEVEL_4_0,
            roi=Window(x=0.0, y=0.0, width=0.5, height=0.5),
            mode=SensorMode(width=1920, height=1080),
        )

        entries = serialize(params).decode().split(" ")

        assert "HFlip=1" in entries
        assert "VFlip=0" in entries
        assert "Profile=baseline" in entries
        assert "Level=4.0" in entries
        assert "ROI=0.0,0.0,0.5,0.5" in entries
        assert "Mode=1920:1080:12:P" in entries
        assert "AfWindow=" in entries

    def test_parser_reproduces_fields(self, parser):
        """Test applying the serialized buffer reproduces wire-visible fields."""
        source = ParameterSet.with_defaults()
        source.camera_id = 1
        source.v_flip = True
        source.ev = -0.5
        source.exposure = "long"
        source.af_window = Window(x=0.25, y=0.25, width=0.5, height=0.5)
        source.mode = SensorMode(width=2028, height=1080, bit_depth=12, packed=False)

        target = ParameterSet()
        parser.apply(WireFormatSerializer().serialize(source), target)

        for field in WIRE_FIELDS.values():
            assert getattr(target, field.attribute) == getattr(source, field.attribute)

    def test_string_with_space_rejected(self, params):
        """Test strings that cannot be represented raise."""
        params.tuning_file = "/home/pi/my tuning.json"

        with pytest.raises(SerializationException) as exc_info:
            serialize(params)

        assert exc_info.value.field == "TuningFile"
