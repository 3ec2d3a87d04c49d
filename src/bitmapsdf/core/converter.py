"""Conversion orchestration for the distance field pipeline.

This module coordinates the per-channel workflow:

1. Classify the source pixel layout into channel roles
2. Decide between the in-place (preserve RGB) and resample paths
3. For each channel: find intersections, extract edges, render
4. Fill channels that are not (or cannot be) distance transformed

Key components:
- SdfConverter: Main orchestrator class
- convert_bitmap: Functional shortcut around SdfConverter
"""

import time
from dataclasses import dataclass, field
from enum import Enum

import structlog

from bitmapsdf.config import DistanceFieldConfig, RGBAMode, SdfSettings
from bitmapsdf.core.channels import classify_channels
from bitmapsdf.core.edges import extract_edges
from bitmapsdf.core.filler import fill_channel
from bitmapsdf.core.intersections import find_intersections
from bitmapsdf.core.renderer import render_distance_field
from bitmapsdf.domain import ChannelRole, EdgeList, IntersectionMap, PixelBuffer
from bitmapsdf.exceptions import InsufficientIntersectionsError
from bitmapsdf.utils import ConversionLogger, ConversionStats

# Constant written to an alpha channel without contour information
OPAQUE = 255


class ChannelStatus(str, Enum):
    """What happened to a channel during conversion."""

    RENDERED = "rendered"
    FILLED = "filled"
    UNCHANGED = "unchanged"


@dataclass
class ChannelOutcome:
    """Per-channel conversion record.

    Attributes:
        offset: Byte offset of the channel
        role: Channel role
        status: What was written to the channel
        intersections: Crossings found (0 if the channel was not scanned)
        edges: Segments extracted (0 if the channel was not rendered)
        reason: Why a channel was not rendered
    """

    offset: int
    role: ChannelRole
    status: ChannelStatus
    intersections: int = 0
    edges: int = 0
    reason: str | None = None

    @property
    def missing_contour(self) -> bool:
        """True when the channel was scanned but lacked crossings."""
        return self.reason == "insufficient intersections"


@dataclass
class ConversionResult:
    """Outcome of converting one bitmap.

    Attributes:
        buffer: Output pixels (the input buffer itself for in-place conversion)
        in_place: Whether the input buffer was modified in place
        scale: Output size divided by source size
        field_distance: Field distance in source pixels
        config: Distance field settings with the derived channel count
        channels: Outcome of every channel, by offset
        stats: Counters and timing
    """

    buffer: PixelBuffer
    in_place: bool
    scale: float
    field_distance: float
    config: DistanceFieldConfig
    channels: list[ChannelOutcome] = field(default_factory=list)
    stats: ConversionStats = field(default_factory=ConversionStats)

    @property
    def rendered_channels(self) -> list[ChannelOutcome]:
        return [c for c in self.channels if c.status == ChannelStatus.RENDERED]

    @property
    def success(self) -> bool:
        """True when at least one channel holds a distance field."""
        return bool(self.rendered_channels)

    def raise_for_missing(self) -> None:
        """Raise for the first channel that lacked contour information.

        Raises:
            InsufficientIntersectionsError: If any scanned channel had fewer
                than two crossings
        """
        for outcome in self.channels:
            if outcome.missing_contour:
                raise InsufficientIntersectionsError(outcome.role.value, outcome.intersections)


class SdfConverter:
    """Converts pixel buffers into signed distance fields.

    Example:
        settings = SdfSettings()
        converter = SdfConverter(settings)
        result = converter.convert(buffer)
        if result.success:
            save(result.buffer)
    """

    def __init__(
        self,
        settings: SdfSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize converter with configuration.

        Args:
            settings: Bitmapsdf settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or SdfSettings()
        self.logger = logger or structlog.get_logger(__name__)

    def convert(self, buffer: PixelBuffer) -> ConversionResult:
        """Convert a bitmap to a distance field.

        Args:
            buffer: Source pixels; modified only on the preserve RGB path

        Returns:
            ConversionResult holding the output buffer and per-channel outcomes

        Raises:
            UnsupportedFormatError: If the pixel layout cannot be converted
        """
        conversion_logger = ConversionLogger(self.logger)
        stats = conversion_logger.stats
        stats.start_time = time.time()

        roles = classify_channels(buffer.pixel_format)

        config = self.settings.distance_field.model_copy(deep=True)
        config.num_channels = 1 if config.grayscale else len(roles)
        preserve_rgb = config.num_channels > 1 and config.rgba_mode == RGBAMode.PRESERVE_RGB

        width, height = buffer.size
        if preserve_rgb:
            scale = 1.0
        else:
            scale = config.texture_size / min(width, height)
        field_distance = config.field_distance(width, height, scale)

        self.logger.info(
            "Starting conversion",
            size=f"{width}x{height}",
            pixel_format=buffer.pixel_format.value,
            mode="preserve_rgb" if preserve_rgb else "resample",
            scale=round(scale, 4),
            field_distance=round(field_distance, 3),
        )

        if preserve_rgb:
            output = buffer
            outcomes = self._convert_in_place(
                buffer, roles, config, field_distance, conversion_logger
            )
        else:
            output = PixelBuffer.create(
                (width * config.texture_size) // min(width, height),
                (height * config.texture_size) // min(width, height),
                buffer.pixel_format,
            )
            outcomes = self._convert_resampled(
                buffer, output, roles, config, field_distance, conversion_logger
            )

        stats.end_time = time.time()
        self.logger.info(
            "Conversion complete",
            output=f"{output.width}x{output.height}",
            rendered=stats.rendered_count,
            filled=stats.filled_count,
            unchanged=stats.unchanged_count,
            duration_ms=round(stats.duration_ms, 2),
        )

        return ConversionResult(
            buffer=output,
            in_place=preserve_rgb,
            scale=scale,
            field_distance=field_distance,
            config=config,
            channels=outcomes,
            stats=stats,
        )

    def _trace_channel(
        self, buffer: PixelBuffer, offset: int
    ) -> tuple[IntersectionMap, EdgeList | None]:
        """Find a channel's crossings and, if there are enough, its edges."""
        processing = self.settings.processing
        intersections = find_intersections(
            buffer,
            offset,
            rows_per_task=processing.rows_per_task,
            max_workers=processing.max_workers,
        )
        if not intersections.is_sufficient:
            return intersections, None
        return intersections, extract_edges(intersections)

    def _render(
        self,
        source: PixelBuffer,
        output: PixelBuffer,
        offset: int,
        role: ChannelRole,
        config: DistanceFieldConfig,
        field_distance: float,
        conversion_logger: ConversionLogger,
    ) -> ChannelOutcome:
        """Trace and render one channel, or report it as lacking crossings."""
        start_time = time.time()
        conversion_logger.log_channel_start(role.value, offset)

        intersections, edges = self._trace_channel(source, offset)
        if edges is None:
            return ChannelOutcome(
                offset=offset,
                role=role,
                status=ChannelStatus.UNCHANGED,
                intersections=intersections.count,
                reason="insufficient intersections",
            )

        render_distance_field(
            source,
            offset,
            field_distance,
            config.invert_distance,
            edges,
            output,
            rows_per_task=self.settings.processing.rows_per_task,
            max_workers=self.settings.processing.max_workers,
        )

        conversion_logger.log_channel_rendered(
            role.value,
            intersections=intersections.count,
            edges=edges.segment_count,
            duration_ms=(time.time() - start_time) * 1000,
        )
        return ChannelOutcome(
            offset=offset,
            role=role,
            status=ChannelStatus.RENDERED,
            intersections=intersections.count,
            edges=edges.segment_count,
        )

    def _convert_in_place(
        self,
        buffer: PixelBuffer,
        roles: tuple[ChannelRole, ...],
        config: DistanceFieldConfig,
        field_distance: float,
        conversion_logger: ConversionLogger,
    ) -> list[ChannelOutcome]:
        """Transform the alpha channel in place, leaving colour untouched."""
        outcomes: list[ChannelOutcome] = []
        for offset, role in enumerate(roles):
            if role != ChannelRole.ALPHA:
                outcomes.append(
                    ChannelOutcome(
                        offset=offset,
                        role=role,
                        status=ChannelStatus.UNCHANGED,
                        reason="colour preserved",
                    )
                )
                continue

            outcome = self._render(
                buffer, buffer, offset, role, config, field_distance, conversion_logger
            )
            if outcome.status == ChannelStatus.UNCHANGED:
                conversion_logger.log_channel_unchanged(
                    role.value, "No alpha information found for distance field generation"
                )
            outcomes.append(outcome)
        return outcomes

    def _convert_resampled(
        self,
        source: PixelBuffer,
        output: PixelBuffer,
        roles: tuple[ChannelRole, ...],
        config: DistanceFieldConfig,
        field_distance: float,
        conversion_logger: ConversionLogger,
    ) -> list[ChannelOutcome]:
        """Regenerate every channel at the output resolution."""
        processing = self.settings.processing
        outcomes: list[ChannelOutcome] = []

        for offset, role in enumerate(roles):
            if config.uses_channel(role):
                outcome = self._render(
                    source, output, offset, role, config, field_distance, conversion_logger
                )
                if outcome.status == ChannelStatus.RENDERED:
                    outcomes.append(outcome)
                    continue
            else:
                outcome = ChannelOutcome(
                    offset=offset,
                    role=role,
                    status=ChannelStatus.UNCHANGED,
                    reason="channel not selected",
                )

            value = OPAQUE if role == ChannelRole.ALPHA else 0
            fill_channel(
                output,
                offset,
                value,
                parallel_min_width=processing.parallel_fill_min_width,
                max_workers=processing.max_workers,
            )
            conversion_logger.log_channel_filled(role.value, value, outcome.reason or "")
            outcome.status = ChannelStatus.FILLED
            outcomes.append(outcome)

        return outcomes


def convert_bitmap(
    buffer: PixelBuffer,
    settings: SdfSettings | None = None,
) -> ConversionResult:
    """Convert a bitmap with the given (or default) settings.

    Args:
        buffer: Source pixels
        settings: Bitmapsdf settings

    Returns:
        ConversionResult
    """
    return SdfConverter(settings).convert(buffer)
