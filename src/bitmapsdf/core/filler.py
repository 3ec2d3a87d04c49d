"""Uniform channel fill for channels that are not distance transformed."""

from bitmapsdf.core._parallel import map_row_bands
from bitmapsdf.domain import PixelBuffer


def fill_channel(
    buffer: PixelBuffer,
    offset: int,
    value: int,
    parallel_min_width: int = 1024,
    max_workers: int | None = None,
) -> None:
    """Write ``value`` to every sample of one channel.

    Narrow images are filled in a single pass; rows only get spread over
    workers once they are at least ``parallel_min_width`` samples wide.

    Args:
        buffer: Pixels to modify in place
        offset: Byte offset of the channel
        value: Constant in [0, 255]
        parallel_min_width: Row width from which the fill runs row-parallel
        max_workers: Thread pool size (None = auto)

    Raises:
        ValueError: If value is outside the 8-bit range
    """
    if not 0 <= value <= 255:
        raise ValueError(f"Fill value must be in [0, 255], got {value}")

    pixels = buffer.channel(offset)
    if buffer.width < parallel_min_width:
        pixels[:] = value
        return

    def fill_rows(start: int, stop: int) -> None:
        pixels[start:stop] = value

    map_row_bands(buffer.height, fill_rows, rows_per_task=1, max_workers=max_workers)
