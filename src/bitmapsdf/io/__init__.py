"""Bitmap I/O layer for bitmapsdf.

This module handles reading and writing bitmap files using Pillow.
It provides a clean abstraction layer between Pillow images and the
domain models.

Key responsibilities:
- Load image files and detect their pixel layout
- Convert Pillow images to PixelBuffer and back
- Write distance fields with the -sdf naming convention

Key classes:
- BitmapReader: Load bitmaps and expose pixels
- BitmapWriter: Save pixel buffers
"""

from bitmapsdf.io.reader import BitmapReader
from bitmapsdf.io.writer import BitmapWriter

__all__ = [
    "BitmapReader",
    "BitmapWriter",
]
