"""Configuration management for shapecodec.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CodecConfig: Import/export settings
- AnalyzerConfig: Shape classification thresholds
- LoggingConfig: Logging settings
- ShapeCodecSettings: Main application settings
"""

from shapecodec.config.settings import (
    AnalyzerConfig,
    CodecConfig,
    LoggingConfig,
    ShapeCodecSettings,
    get_default_settings,
)

__all__ = [
    "AnalyzerConfig",
    "CodecConfig",
    "LoggingConfig",
    "ShapeCodecSettings",
    "get_default_settings",
]
