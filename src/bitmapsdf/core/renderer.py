"""Distance field rendering.

Every output pixel is mapped into source space, measured against the
contour segments inside a square search window, signed by thresholding the
bilinearly sampled source intensity, and quantized to 8 bits.
"""

import numpy as np
import structlog

from bitmapsdf.core._parallel import map_row_bands
from bitmapsdf.core.sampling import (
    bilinear_sample,
    squared_distance_to_segment,
    transform_position,
)
from bitmapsdf.domain import THRESHOLD, EdgeList, PixelBuffer

logger = structlog.get_logger(__name__)

# Upper bound on point/segment pairs evaluated in one vectorized block
_MAX_PAIRS_PER_BLOCK = 1 << 20


def quantize_distance(
    distance: np.ndarray,
    outside: np.ndarray,
    field_distance: float,
    invert: bool,
) -> np.ndarray:
    """Encode unsigned distances as 8-bit signed distance values.

    Points outside the contour (XOR ``invert``) get a negative distance and
    encode below the midpoint; points inside encode above it.

    Args:
        distance: Unsigned distances in source pixels
        outside: True where the sampled intensity is below THRESHOLD
        field_distance: Full width of the encoded distance band
        invert: Swap the sign convention

    Returns:
        uint8 array of encoded values
    """
    signed = np.where(np.logical_xor(outside, invert), -distance, distance)
    normalized = signed / field_distance + 0.5
    return np.clip(np.floor(normalized * 255.0), 0, 255).astype(np.uint8)


def _row_min_distance_sq(
    xs: np.ndarray,
    y: float,
    segments: np.ndarray,
    half_distance: float,
) -> np.ndarray:
    """Minimum squared distance from points on one row to windowed segments."""
    min_sq = np.full(xs.shape, half_distance * half_distance, dtype=np.float64)

    # Both endpoints must lie within the window; the y test is shared by the row
    near_row = np.all(np.abs(segments[:, :, 1] - y) <= half_distance, axis=1)
    candidates = segments[near_row]
    if len(candidates) == 0:
        return min_sq

    ax = candidates[:, 0, 0]
    ay = candidates[:, 0, 1]
    bx = candidates[:, 1, 0]
    by = candidates[:, 1, 1]

    block = max(1, _MAX_PAIRS_PER_BLOCK // len(candidates))
    for start in range(0, len(xs), block):
        px = xs[start : start + block, np.newaxis]
        in_window = (np.abs(px - ax) <= half_distance) & (np.abs(px - bx) <= half_distance)
        if not in_window.any():
            continue
        dist_sq = squared_distance_to_segment(px, y, ax, ay, bx, by)
        dist_sq = np.where(in_window, dist_sq, np.inf)
        window = min_sq[start : start + block]
        np.minimum(window, dist_sq.min(axis=1), out=window)

    return min_sq


def render_distance_field(
    source: PixelBuffer,
    offset: int,
    field_distance: float,
    invert: bool,
    edges: EdgeList,
    output: PixelBuffer,
    rows_per_task: int = 16,
    max_workers: int | None = None,
) -> PixelBuffer:
    """Render one channel's signed distance field into ``output``.

    ``output`` may be ``source`` itself for in-place conversion; intensities
    used for the inside/outside test are read from a snapshot of the source
    channel taken before any pixel is written. Only the channel at
    ``offset`` of ``output`` is modified.

    Args:
        source: Source pixels
        offset: Byte offset of the channel in both buffers
        field_distance: Full width of the encoded band, in source pixels
        invert: Swap the sign convention
        edges: Contour segments of the source channel
        output: Destination buffer, any size, same stride as ``source``
        rows_per_task: Output rows handed to each worker
        max_workers: Thread pool size (None = auto)

    Returns:
        The ``output`` buffer

    Raises:
        ValueError: If the field distance is not positive or strides differ
    """
    if field_distance <= 0.0:
        raise ValueError(f"Field distance must be positive, got {field_distance}")
    if output.stride != source.stride:
        raise ValueError(
            f"Output stride {output.stride} does not match source stride {source.stride}"
        )

    source_pixels = source.channel(offset).copy()
    output_pixels = output.channel(offset)
    half_distance = field_distance * 0.5
    segments = edges.segments

    out_width, out_height = output.size
    src_width, src_height = source.size
    source_xs, _ = transform_position(
        out_width, out_height, src_width, src_height, np.arange(out_width), 0.0
    )

    def render_rows(start: int, stop: int) -> None:
        for row in range(start, stop):
            _, source_y = transform_position(
                out_width, out_height, src_width, src_height, 0.0, row
            )
            y = float(source_y)
            min_sq = _row_min_distance_sq(source_xs, y, segments, half_distance)
            intensity = bilinear_sample(source_pixels, source_xs, np.full(out_width, y))
            output_pixels[row] = quantize_distance(
                np.sqrt(min_sq), intensity < THRESHOLD, field_distance, invert
            )

    map_row_bands(out_height, render_rows, rows_per_task=rows_per_task, max_workers=max_workers)

    logger.debug(
        "Distance field rendered",
        offset=offset,
        source=f"{src_width}x{src_height}",
        output=f"{out_width}x{out_height}",
        field_distance=round(field_distance, 3),
        segments=edges.segment_count,
    )
    return output
