"""
Configuration management using Pydantic for the camera parameter service.
Provides type-safe configuration with validation and environment variable support.

Camera parameters themselves are not configured here: they come from the
startup environment (core.environment_loader) and from control buffers.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.constants import ErrorConstants, SystemConstants

logger = logging.getLogger(__name__)


class SystemConfig(BaseSettings):
    """System configuration."""

    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Log file path")
    log_format: str = Field(default=SystemConstants.LOG_FORMAT, description="Log record format")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    model_config = SettingsConfigDict(env_prefix="RPICAM_SYSTEM_", extra="ignore")


class ControlConfig(BaseSettings):
    """Control channel configuration."""

    error_buffer_size: int = Field(
        default=ErrorConstants.DEFAULT_BUFFER_SIZE,
        ge=ErrorConstants.MIN_BUFFER_SIZE,
        le=ErrorConstants.MAX_BUFFER_SIZE,
        description="Capacity of the error channel, including the terminator slot",
    )
    startup_from_environment: bool = Field(
        default=True,
        description="Load startup parameters from the environment instead of path defaults",
    )

    model_config = SettingsConfigDict(env_prefix="RPICAM_CONTROL_", extra="ignore")


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-configurations
    system: SystemConfig = Field(default_factory=SystemConfig)
    control: ControlConfig = Field(default_factory=ControlConfig)

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """Load configuration from YAML file if specified."""
        import os

        config_file = values.get("config_file") or os.getenv("RPICAM_CONFIG_FILE")

        if config_file and Path(config_file).exists():
            import yaml

            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
                    if file_config:
                        # Merge file config with values (env vars take precedence)
                        for key, value in file_config.items():
                            if key not in values or values[key] is None:
                                values[key] = value
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")

        return values

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        import yaml

        config_dict = self.to_dict()
        with open(path, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False)

    model_config = SettingsConfigDict(
        env_prefix="RPICAM_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()
