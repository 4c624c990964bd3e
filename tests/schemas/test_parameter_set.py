"""
Unit tests for the parameter set schema and its sub-objects
"""

import pytest
from pydantic import ValidationError

from common.base import SensorMode, Window
from common.enums import H264Level, H264Profile
from schemas import ParameterSet


class TestParameterSet:
    """Tests for ParameterSet"""

    def test_default_initialized(self):
        """Test all optional fields start absent"""
        params = ParameterSet()

        assert params.roi is None
        assert params.mode is None
        assert params.af_window is None
        assert params.profile == H264Profile.HIGH
        assert params.level == H264Level.LEVEL_4_2
        assert params.buffer_count == 0
        assert params.destroyed is False

    def test_with_defaults(self):
        """Test stream path defaults"""
        params = ParameterSet.with_defaults()

        assert (params.width, params.height) == (1920, 1080)
        assert params.contrast == 1.0
        assert params.saturation == 1.0
        assert params.sharpness == 1.0
        assert params.fps == 30
        assert params.idr_period == 60
        assert params.bitrate == 1000000
        assert params.profile == H264Profile.MAIN
        assert params.level == H264Level.LEVEL_4_1

    def test_set_buffer_count(self):
        """Test capture buffer count is derived"""
        params = ParameterSet()

        params.set_buffer_count(4, 2)

        assert params.buffer_count == 4
        assert params.capture_buffer_count == 8

    def test_to_dict(self):
        """Test export converts enums and sub-objects"""
        params = ParameterSet(roi=Window(x=0, y=0, width=1, height=1))

        data = params.to_dict()

        assert data["profile"] == "high"
        assert data["level"] == "4.2"
        assert data["roi"] == {"x": 0.0, "y": 0.0, "width": 1.0, "height": 1.0}
        assert data["mode"] is None

    def test_unknown_field_rejected(self):
        """Test construction rejects unknown fields"""
        with pytest.raises(ValidationError):
            ParameterSet(zoom=2)

    def test_owned_attachment_names(self):
        """Test owned attachment lists name real fields"""
        for name in ParameterSet.OWNED_STRINGS + ParameterSet.OWNED_OBJECTS:
            assert name in ParameterSet.model_fields


class TestSubObjects:
    """Tests for Window and SensorMode"""

    def test_window_is_immutable(self):
        """Test windows cannot be modified in place"""
        window = Window(x=0, y=0, width=1, height=1)

        with pytest.raises(ValidationError):
            window.x = 0.5

    def test_sensor_mode_defaults(self):
        """Test bit depth and packing defaults"""
        mode = SensorMode(width=1920, height=1080)

        assert mode.to_dict() == {"width": 1920, "height": 1080, "bit_depth": 12, "packed": True}
