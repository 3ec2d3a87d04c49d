"""Configuration settings for Bitmapsdf."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from bitmapsdf.domain import ChannelRole


class DistanceMode(str, Enum):
    """How the field distance is specified."""

    NORMALIZED = "normalized"
    PIXELS = "pixels"
    ABSOLUTE = "absolute"


class RGBAMode(str, Enum):
    """Which channels are regenerated."""

    PRESERVE_RGB = "preserve_rgb"
    RESAMPLE = "resample"


class DistanceFieldConfig(BaseModel):
    """Configuration for distance field generation.

    The field distance is the full width of the encoded band: points further
    than half of it from the contour saturate to 0 or 255.
    """

    distance_mode: DistanceMode = Field(
        default=DistanceMode.PIXELS,
        description="How the field distance is specified",
    )
    normalized_distance: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Field distance as a fraction of the shorter source dimension",
    )
    pixel_distance: float = Field(
        default=8.0,
        gt=0.0,
        description="Field distance in output pixels",
    )
    absolute_distance: float = Field(
        default=16.0,
        gt=0.0,
        description="Field distance in source pixels",
    )
    invert_distance: bool = Field(
        default=False,
        description="Swap which side of the contour encodes above the midpoint",
    )
    rgba_mode: RGBAMode = Field(
        default=RGBAMode.RESAMPLE,
        description="Transform only alpha in place, or regenerate every channel",
    )
    texture_size: int = Field(
        default=64,
        ge=1,
        le=8192,
        description="Output size of the shorter source dimension (resample mode)",
    )
    channels: set[ChannelRole] = Field(
        default_factory=lambda: set(ChannelRole),
        description="Channel roles regenerated in resample mode",
    )
    grayscale: bool = Field(
        default=False,
        description="Request a single output channel",
    )
    num_channels: int = Field(
        default=0,
        ge=0,
        le=4,
        exclude=True,
        description="Derived number of desired channels (set by the converter)",
    )

    def uses_channel(self, role: ChannelRole) -> bool:
        """Whether a channel role is regenerated in resample mode."""
        return role in self.channels

    def field_distance(self, source_width: int, source_height: int, scale: float) -> float:
        """Resolve the configured distance into source pixel units.

        Args:
            source_width: Source width in pixels
            source_height: Source height in pixels
            scale: Output size divided by source size

        Returns:
            Field distance in source pixels
        """
        if self.distance_mode == DistanceMode.NORMALIZED:
            return self.normalized_distance * min(source_width, source_height)
        if self.distance_mode == DistanceMode.PIXELS:
            return self.pixel_distance / scale
        return self.absolute_distance


class ProcessingConfig(BaseModel):
    """Configuration for the parallel pixel phases."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker threads (None = auto)",
    )
    rows_per_task: int = Field(
        default=16,
        ge=1,
        description="Rows handed to a worker at a time",
    )
    parallel_fill_min_width: int = Field(
        default=1024,
        ge=1,
        description="Row width from which uniform fills run row-parallel",
    )


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


class SdfSettings(BaseModel):
    """Main application settings."""

    distance_field: DistanceFieldConfig = Field(default_factory=DistanceFieldConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SdfSettings:
    """Get default application settings."""
    return SdfSettings()
