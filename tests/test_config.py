"""
Tests for settings loading
"""

import pytest
import yaml
from pydantic import ValidationError

from config import ControlConfig, Settings, SystemConfig, get_settings, reload_settings


class TestSystemConfig:
    """Tests for SystemConfig"""

    def test_defaults(self):
        """Test default values"""
        config = SystemConfig()

        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_log_level_uppercased(self, monkeypatch):
        """Test log level from environment is normalized"""
        monkeypatch.setenv("RPICAM_SYSTEM_LOG_LEVEL", "debug")

        assert SystemConfig().log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected"""
        with pytest.raises(ValidationError):
            SystemConfig(log_level="LOUD")


class TestControlConfig:
    """Tests for ControlConfig"""

    def test_defaults(self):
        """Test default values"""
        config = ControlConfig()

        assert config.error_buffer_size == 256
        assert config.startup_from_environment is True

    def test_buffer_size_bounds(self):
        """Test error buffer size limits"""
        with pytest.raises(ValidationError):
            ControlConfig(error_buffer_size=1)


class TestSettings:
    """Tests for Settings"""

    def test_nested_environment(self, monkeypatch):
        """Test nested values from environment variables"""
        monkeypatch.setenv("RPICAM_CONTROL__ERROR_BUFFER_SIZE", "512")

        settings = Settings()

        assert settings.control.error_buffer_size == 512

    def test_config_file(self, tmp_path):
        """Test values are read from a YAML file"""
        config_file = tmp_path / "rpicam.yaml"
        config_file.write_text(
            yaml.dump({"system": {"log_level": "WARNING"}, "control": {"error_buffer_size": 64}})
        )

        settings = Settings(config_file=str(config_file))

        assert settings.system.log_level == "WARNING"
        assert settings.control.error_buffer_size == 64

    def test_save_to_file(self, tmp_path):
        """Test settings round-trip through a YAML file"""
        path = tmp_path / "saved.yaml"
        settings = Settings(control=ControlConfig(error_buffer_size=128))

        settings.save_to_file(str(path))

        data = yaml.safe_load(path.read_text())
        assert data["control"]["error_buffer_size"] == 128
        assert "config_file" not in data

    def test_cached_settings(self):
        """Test get_settings caches and reload_settings refreshes"""
        first = get_settings()

        assert get_settings() is first
        assert reload_settings() is not first
