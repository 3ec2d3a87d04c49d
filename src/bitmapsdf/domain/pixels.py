"""Core pixel types for bitmap representation.

This module defines the pixel-level types shared across bitmapsdf:
- PixelFormat: Enumerated source pixel layouts
- ChannelRole: The role a byte offset plays within a pixel
- PixelBuffer: A bounds-aware row-major view over raw pixel bytes
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class PixelFormat(str, Enum):
    """Source pixel layout.

    Only the 8-bit per sample layouts can be converted; the wider layouts
    exist so that bitmaps carrying them can be recognised and rejected.
    """

    G8 = "G8"
    BGRA8 = "BGRA8"
    BGRE8 = "BGRE8"
    RGBA8 = "RGBA8"
    G16 = "G16"
    RGBA16 = "RGBA16"
    RGBA16F = "RGBA16F"
    R32F = "R32F"

    @property
    def bytes_per_pixel(self) -> int:
        """Number of bytes a single pixel occupies."""
        return _BYTES_PER_PIXEL[self]


_BYTES_PER_PIXEL = {
    PixelFormat.G8: 1,
    PixelFormat.BGRA8: 4,
    PixelFormat.BGRE8: 4,
    PixelFormat.RGBA8: 4,
    PixelFormat.G16: 2,
    PixelFormat.RGBA16: 8,
    PixelFormat.RGBA16F: 8,
    PixelFormat.R32F: 4,
}


class ChannelRole(str, Enum):
    """Role of one channel within a pixel."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ALPHA = "alpha"


@dataclass
class PixelBuffer:
    """Row-major pixel storage.

    Wraps a ``uint8`` array of shape ``(height, width, stride)`` so that
    channel access goes through numpy indexing instead of hand-computed
    byte offsets.

    Attributes:
        data: Pixel bytes, shape (height, width, stride)
        pixel_format: Layout of each pixel
    """

    data: np.ndarray
    pixel_format: PixelFormat

    def __post_init__(self) -> None:
        if self.data.ndim != 3:
            raise ValueError(
                f"Pixel data must have shape (height, width, stride), got {self.data.shape}"
            )
        if self.data.dtype != np.uint8:
            raise ValueError(f"Pixel data must be uint8, got {self.data.dtype}")
        if self.data.shape[2] != self.pixel_format.bytes_per_pixel:
            raise ValueError(
                f"Stride {self.data.shape[2]} does not match {self.pixel_format.value} "
                f"({self.pixel_format.bytes_per_pixel} bytes per pixel)"
            )

    @classmethod
    def create(cls, width: int, height: int, pixel_format: PixelFormat) -> "PixelBuffer":
        """Allocate a zero-filled buffer."""
        data = np.zeros((height, width, pixel_format.bytes_per_pixel), dtype=np.uint8)
        return cls(data=data, pixel_format=pixel_format)

    @classmethod
    def from_bytes(
        cls,
        raw: bytes,
        width: int,
        height: int,
        pixel_format: PixelFormat,
    ) -> "PixelBuffer":
        """Build a buffer from tightly packed row-major bytes.

        Args:
            raw: Pixel bytes, ``width * height * stride`` long
            width: Width in pixels
            height: Height in pixels
            pixel_format: Layout of each pixel

        Returns:
            PixelBuffer owning a copy of the bytes

        Raises:
            ValueError: If the byte count does not match the dimensions
        """
        stride = pixel_format.bytes_per_pixel
        expected = width * height * stride
        if len(raw) != expected:
            raise ValueError(f"Expected {expected} bytes, got {len(raw)}")
        data = np.frombuffer(raw, dtype=np.uint8).reshape(height, width, stride).copy()
        return cls(data=data, pixel_format=pixel_format)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def stride(self) -> int:
        """Bytes per pixel."""
        return int(self.data.shape[2])

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def channel(self, offset: int) -> np.ndarray:
        """Return a writable (height, width) view of one channel.

        Raises:
            IndexError: If the offset lies outside the pixel stride
        """
        if not 0 <= offset < self.stride:
            raise IndexError(f"Channel offset {offset} outside stride {self.stride}")
        return self.data[:, :, offset]

    def sample(self, x: int, y: int, offset: int) -> int:
        """Read one channel sample, bounds checked."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return int(self.channel(offset)[y, x])

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(data=self.data.copy(), pixel_format=self.pixel_format)

    def to_bytes(self) -> bytes:
        """Serialize to tightly packed row-major bytes."""
        return self.data.tobytes()
