"""Core processing algorithms for bitmapsdf.

This module contains the distance field pipeline:

- Channel classification (pixel layout to channel roles)
- Intersection detection (sub-pixel threshold crossings per cell)
- Edge extraction (crossings to contour segments)
- Distance field rendering (windowed nearest-segment distance, signed)
- Uniform channel fill (constant channels)

All stages operate on numpy arrays and split per-pixel work into row bands
mapped over a thread pool.

Key functions:
- classify_channels: Map a pixel layout to channel roles
- find_intersections: Locate threshold crossings in one channel
- extract_edges: Build contour segments from an intersection map
- render_distance_field: Render one channel's signed distance field
- fill_channel: Stamp a constant across one channel
- transform_position: Centre-preserving coordinate mapping
- bilinear_sample: Bilinear channel sampling

Key classes:
- SdfConverter: Orchestrates a full bitmap conversion
"""

from bitmapsdf.core.channels import classify_channels
from bitmapsdf.core.converter import (
    ChannelOutcome,
    ChannelStatus,
    ConversionResult,
    SdfConverter,
    convert_bitmap,
)
from bitmapsdf.core.edges import extract_edges
from bitmapsdf.core.filler import fill_channel
from bitmapsdf.core.intersections import find_intersections
from bitmapsdf.core.renderer import quantize_distance, render_distance_field
from bitmapsdf.core.sampling import (
    bilinear_sample,
    closest_point_on_segment,
    squared_distance_to_segment,
    transform_position,
)

__all__ = [
    # Converter classes
    "ChannelOutcome",
    "ChannelStatus",
    "ConversionResult",
    "SdfConverter",
    # Pipeline functions
    "bilinear_sample",
    "classify_channels",
    "closest_point_on_segment",
    "convert_bitmap",
    "extract_edges",
    "fill_channel",
    "find_intersections",
    "quantize_distance",
    "render_distance_field",
    "squared_distance_to_segment",
    "transform_position",
]
