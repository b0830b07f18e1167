"""Configuration settings for Shapecodec."""

from pathlib import Path

from pydantic import BaseModel, Field


class CodecConfig(BaseModel):
    """Configuration for interchange import and export.

    The workspace is a square of logical units; imported drawings are
    translated so their combined bounding box is centered on it.
    """

    workspace_size: float = Field(
        default=50.0,
        gt=0.0,
        description="Side length of the square logical workspace",
    )
    reference_layer: str = Field(
        default="REFERENCE",
        description="Layer name written for reference paths",
    )
    design_layer: str = Field(
        default="OXIDED",
        description="Layer name written for design paths (legacy label)",
    )


class AnalyzerConfig(BaseModel):
    """Thresholds for bounding-box shape classification.

    Downstream display depends on these exact values; change them only
    together with the measurement panel.
    """

    extent_epsilon: float = Field(
        default=1e-3,
        ge=0.0,
        description="Extents below this collapse to zero",
    )
    tolerance_ratio: float = Field(
        default=0.05,
        ge=0.0,
        le=1.0,
        description="Round tolerance as a fraction of the shorter extent",
    )
    tolerance_min: float = Field(
        default=0.05,
        ge=0.0,
        description="Lower clamp for the round tolerance",
    )
    tolerance_max: float = Field(
        default=0.5,
        ge=0.0,
        description="Upper clamp for the round tolerance",
    )

    def round_tolerance(self, width: float, height: float) -> float:
        """Get the width/height difference still considered round.

        Args:
            width: Bounding box width
            height: Bounding box height

        Returns:
            Clamped tolerance
        """
        scaled = min(width, height) * self.tolerance_ratio
        return max(self.tolerance_min, min(scaled, self.tolerance_max))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ShapeCodecSettings(BaseModel):
    """Main application settings."""

    codec: CodecConfig = Field(default_factory=CodecConfig)
    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapeCodecSettings:
    """Get default application settings."""
    return ShapeCodecSettings()
