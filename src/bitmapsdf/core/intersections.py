"""Sub-pixel threshold crossing detection.

Each grid cell is anchored at a source sample (x, y). The cell's "top"
parameter locates the threshold crossing between (x, y) and its right
neighbour, and its "left" parameter the crossing between (x, y) and the
sample below it. Parameters come from linear interpolation of the two
intensities against THRESHOLD.
"""

import numpy as np
import structlog

from bitmapsdf.core._parallel import map_row_bands
from bitmapsdf.domain import NO_CROSSING, THRESHOLD, IntersectionMap, PixelBuffer

logger = structlog.get_logger(__name__)


def crossing_parameters(start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """Interpolate where intensity crosses THRESHOLD between two samples.

    Computes ``t = (THRESHOLD - start) / (end - start)``. A zero denominator
    or a parameter above 1 yields NO_CROSSING. Parameters at or below zero
    are kept as they are.

    Args:
        start: Intensities at the segment starts
        end: Intensities at the segment ends, same shape

    Returns:
        Float array of crossing parameters
    """
    v0 = start.astype(np.float64)
    denominator = end.astype(np.float64) - v0
    params = np.full(v0.shape, NO_CROSSING, dtype=np.float64)
    np.divide(THRESHOLD - v0, denominator, out=params, where=denominator != 0.0)
    params[params > 1.0] = NO_CROSSING
    return params


def count_crossings(params: np.ndarray) -> int:
    """Count parameters lying in [0, 1)."""
    return int(np.count_nonzero((params >= 0.0) & (params < 1.0)))


def find_intersections(
    buffer: PixelBuffer,
    offset: int,
    rows_per_task: int = 16,
    max_workers: int | None = None,
) -> IntersectionMap:
    """Scan one channel for threshold crossings.

    Rows of the intersection grid are independent, so the scan runs as a
    parallel map over row bands followed by a sum of the per-band counts.
    A bitmap narrower or shorter than two pixels has no cells and yields an
    empty map with a zero count.

    Args:
        buffer: Source pixels
        offset: Byte offset of the channel to scan
        rows_per_task: Grid rows handed to each worker
        max_workers: Thread pool size (None = auto)

    Returns:
        IntersectionMap of shape (height-1, width-1)
    """
    pixels = buffer.channel(offset)
    map_height = max(buffer.height - 1, 0)
    map_width = max(buffer.width - 1, 0)
    top = np.empty((map_height, map_width), dtype=np.float64)
    left = np.empty((map_height, map_width), dtype=np.float64)

    def scan(start: int, stop: int) -> int:
        current = pixels[start:stop, :-1]
        top[start:stop] = crossing_parameters(current, pixels[start:stop, 1:])
        left[start:stop] = crossing_parameters(current, pixels[start + 1 : stop + 1, :-1])
        return count_crossings(top[start:stop]) + count_crossings(left[start:stop])

    count = sum(
        map_row_bands(map_height, scan, rows_per_task=rows_per_task, max_workers=max_workers)
    )

    logger.debug("Intersections found", offset=offset, count=count)
    return IntersectionMap(top=top, left=left, count=count)
