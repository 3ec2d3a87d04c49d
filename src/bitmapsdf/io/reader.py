"""Bitmap reader for loading source images.

This module provides the BitmapReader class for loading image files
and exposing their pixels as a PixelBuffer.
"""

from pathlib import Path

from PIL import Image

from bitmapsdf.domain import PixelBuffer, PixelFormat
from bitmapsdf.io.converter import image_format, image_to_buffer


class BitmapReader:
    """Loads bitmaps with Pillow.

    Example:
        reader = BitmapReader(Path("icon.png"))
        reader.load()
        buffer = reader.read()
    """

    def __init__(self, bitmap_path: Path) -> None:
        """Initialize the bitmap reader.

        Args:
            bitmap_path: Path to an image file Pillow can open
        """
        self._bitmap_path = bitmap_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Load the bitmap file.

        Raises:
            FileNotFoundError: If the file does not exist
            PIL.UnidentifiedImageError: If the file is not a readable image
        """
        if not self._bitmap_path.exists():
            raise FileNotFoundError(f"Bitmap file not found: {self._bitmap_path}")

        image = Image.open(self._bitmap_path)
        image.load()
        self._image = image

    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Bitmap not loaded. Call load() first.")
        return self._image

    @property
    def format(self) -> PixelFormat:
        """Pixel layout the bitmap is read as.

        Raises:
            RuntimeError: If the bitmap has not been loaded yet
        """
        return image_format(self._require_image())

    @property
    def size(self) -> tuple[int, int]:
        """Width and height in pixels.

        Raises:
            RuntimeError: If the bitmap has not been loaded yet
        """
        return self._require_image().size

    def read(self) -> PixelBuffer:
        """Return the bitmap's pixels.

        Raises:
            RuntimeError: If the bitmap has not been loaded yet
        """
        return image_to_buffer(self._require_image())

    def close(self) -> None:
        """Close the image and free resources."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "BitmapReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
