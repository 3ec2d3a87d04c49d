"""Bitmap writer for saving distance fields."""

from pathlib import Path

from bitmapsdf.domain import PixelBuffer
from bitmapsdf.io.converter import buffer_to_image


class BitmapWriter:
    """Writes pixel buffers to image files.

    The output format follows the file extension.

    Example:
        writer = BitmapWriter(Path("icon-sdf.png"))
        writer.save(result.buffer)
    """

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    def save(self, buffer: PixelBuffer) -> None:
        """Save the pixels to the output path.

        Raises:
            ValueError: If the pixel layout cannot be written
            OSError: If the file cannot be written
        """
        image = buffer_to_image(buffer)
        image.save(self._output_path)

    @staticmethod
    def get_sdf_path(input_path: Path) -> Path:
        """Generate output path with the distance field naming convention.

        Converts: icon.png -> icon-sdf.png
                  glyph_A.tga -> glyph_A-sdf.tga

        Args:
            input_path: Original bitmap path

        Returns:
            Path with -sdf suffix before extension
        """
        return input_path.parent / f"{input_path.stem}-sdf{input_path.suffix}"
