"""Domain models for bitmapsdf.

This module contains the value types shared by the conversion pipeline:

- Pixel layouts and channel roles
- PixelBuffer, a bounds-aware accessor over raw pixel bytes
- IntersectionMap and EdgeList, the per-channel scratch state

Key classes:
- PixelFormat: Enumerated source pixel layouts
- ChannelRole: Red/Green/Blue/Alpha role of a byte offset
- PixelBuffer: Row-major pixel storage
- IntersectionMap: Sub-pixel threshold crossings per grid cell
- EdgeList: Line segments approximating a channel's iso-contour
"""

from bitmapsdf.domain.field import NO_CROSSING, THRESHOLD, EdgeList, IntersectionMap
from bitmapsdf.domain.pixels import ChannelRole, PixelBuffer, PixelFormat

__all__: list[str] = [
    # Constants
    "NO_CROSSING",
    "THRESHOLD",
    # Enums
    "ChannelRole",
    "PixelFormat",
    # Core types
    "PixelBuffer",
    "IntersectionMap",
    "EdgeList",
]
