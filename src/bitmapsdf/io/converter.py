"""Converters between Pillow images and PixelBuffer.

Pillow modes map onto pixel layouts as follows:
- ``L`` becomes G8
- ``I;16`` variants become G16
- ``I`` and ``F`` become R32F
- ``RGBA`` becomes RGBA8
- every other mode is converted to ``RGBA`` first
"""

import numpy as np
from PIL import Image

from bitmapsdf.domain import PixelBuffer, PixelFormat

_SIXTEEN_BIT_MODES = frozenset({"I;16", "I;16L", "I;16B", "I;16N"})
_FLOAT_MODES = frozenset({"I", "F"})

# Byte order permutation from BGRA storage to RGBA
_BGRA_TO_RGBA = [2, 1, 0, 3]


def image_format(image: Image.Image) -> PixelFormat:
    """Return the pixel layout an image is read as."""
    if image.mode == "L":
        return PixelFormat.G8
    if image.mode in _SIXTEEN_BIT_MODES:
        return PixelFormat.G16
    if image.mode in _FLOAT_MODES:
        return PixelFormat.R32F
    return PixelFormat.RGBA8


def image_to_buffer(image: Image.Image) -> PixelBuffer:
    """Convert a Pillow image to a PixelBuffer.

    Args:
        image: Loaded Pillow image

    Returns:
        PixelBuffer owning a copy of the pixel bytes
    """
    pixel_format = image_format(image)
    width, height = image.size

    if pixel_format == PixelFormat.G8:
        data = np.asarray(image, dtype=np.uint8)[:, :, np.newaxis]
    elif pixel_format == PixelFormat.G16:
        samples = np.asarray(image).astype(np.uint16)
        data = samples.view(np.uint8).reshape(height, width, 2)
    elif pixel_format == PixelFormat.R32F:
        samples = np.asarray(image).astype(np.float32)
        data = samples.view(np.uint8).reshape(height, width, 4)
    else:
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        data = np.asarray(rgba, dtype=np.uint8)

    return PixelBuffer(data=np.ascontiguousarray(data).copy(), pixel_format=pixel_format)


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    """Convert an 8-bit PixelBuffer to a Pillow image.

    Args:
        buffer: Pixels in G8 or a four channel 8-bit layout

    Returns:
        ``L`` image for G8, ``RGBA`` image otherwise

    Raises:
        ValueError: If the layout has no 8-bit Pillow equivalent
    """
    if buffer.pixel_format == PixelFormat.G8:
        return Image.fromarray(np.ascontiguousarray(buffer.data[:, :, 0]))
    if buffer.pixel_format == PixelFormat.RGBA8:
        return Image.fromarray(np.ascontiguousarray(buffer.data))
    if buffer.pixel_format in (PixelFormat.BGRA8, PixelFormat.BGRE8):
        return Image.fromarray(np.ascontiguousarray(buffer.data[:, :, _BGRA_TO_RGBA]))

    raise ValueError(f"Cannot write pixel format {buffer.pixel_format.value}")
