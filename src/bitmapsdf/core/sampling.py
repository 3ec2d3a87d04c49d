"""Coordinate mapping and sampling helpers.

All functions accept scalars or numpy arrays and broadcast like numpy
ufuncs.
"""

import numpy as np
from numpy.typing import ArrayLike


def transform_position(
    from_width: float,
    from_height: float,
    to_width: float,
    to_height: float,
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[np.ndarray, np.ndarray]:
    """Map pixel coordinates between two grids with coincident centres.

    The position is taken relative to the centre ``(dim - 1) / 2`` of the
    source grid, scaled by the ratio of the two grid sizes, and re-anchored on
    the centre of the destination grid.

    Args:
        from_width: Width of the grid the coordinates live in
        from_height: Height of the grid the coordinates live in
        to_width: Width of the destination grid
        to_height: Height of the destination grid
        x: X coordinate(s) in the source grid
        y: Y coordinate(s) in the source grid

    Returns:
        Tuple of (x, y) in the destination grid
    """
    from_cx = (from_width - 1.0) / 2.0
    from_cy = (from_height - 1.0) / 2.0
    to_cx = (to_width - 1.0) / 2.0
    to_cy = (to_height - 1.0) / 2.0

    to_x = to_cx + (np.asarray(x, dtype=np.float64) - from_cx) * (to_width / from_width)
    to_y = to_cy + (np.asarray(y, dtype=np.float64) - from_cy) * (to_height / from_height)
    return to_x, to_y


def bilinear_sample(pixels: np.ndarray, x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Bilinearly interpolate a channel at fractional coordinates.

    Coordinates are clamped to the channel bounds, the X axis against the
    width and the Y axis against the height. The result is rounded half up
    to an integer.

    Args:
        pixels: Channel samples, shape (height, width)
        x: X coordinate(s)
        y: Y coordinate(s)

    Returns:
        Integer array of interpolated samples
    """
    height, width = pixels.shape
    x = np.clip(np.asarray(x, dtype=np.float64), 0.0, width - 1.0)
    y = np.clip(np.asarray(y, dtype=np.float64), 0.0, height - 1.0)

    top = np.floor(y).astype(np.intp)
    left = np.floor(x).astype(np.intp)
    bottom = np.minimum(top + 1, height - 1)
    right = np.minimum(left + 1, width - 1)
    bottom_weight = y - top
    right_weight = x - left

    lt = pixels[top, left].astype(np.float64)
    rt = pixels[top, right].astype(np.float64)
    lb = pixels[bottom, left].astype(np.float64)
    rb = pixels[bottom, right].astype(np.float64)

    top_val = lt * (1.0 - right_weight) + rt * right_weight
    bottom_val = lb * (1.0 - right_weight) + rb * right_weight
    value = top_val * (1.0 - bottom_weight) + bottom_val * bottom_weight
    return np.floor(value + 0.5).astype(np.int64)


def closest_point_on_segment(
    px: ArrayLike,
    py: ArrayLike,
    ax: ArrayLike,
    ay: ArrayLike,
    bx: ArrayLike,
    by: ArrayLike,
) -> tuple[np.ndarray, np.ndarray]:
    """Project points onto segments, clamped to the segment endpoints.

    Degenerate (zero length) segments project onto their start point.

    Returns:
        Tuple of (x, y) of the closest points
    """
    ax = np.asarray(ax, dtype=np.float64)
    ay = np.asarray(ay, dtype=np.float64)
    seg_x = np.asarray(bx, dtype=np.float64) - ax
    seg_y = np.asarray(by, dtype=np.float64) - ay
    to_px = np.asarray(px, dtype=np.float64) - ax
    to_py = np.asarray(py, dtype=np.float64) - ay

    dot = to_px * seg_x + to_py * seg_y
    length_sq = seg_x * seg_x + seg_y * seg_y
    t = np.zeros(np.broadcast(dot, length_sq).shape, dtype=np.float64)
    np.divide(dot, length_sq, out=t, where=length_sq > 0.0)
    t = np.clip(t, 0.0, 1.0)
    return ax + seg_x * t, ay + seg_y * t


def squared_distance_to_segment(
    px: ArrayLike,
    py: ArrayLike,
    ax: ArrayLike,
    ay: ArrayLike,
    bx: ArrayLike,
    by: ArrayLike,
) -> np.ndarray:
    """Squared distance from points to the closest point on segments."""
    cx, cy = closest_point_on_segment(px, py, ax, ay, bx, by)
    dx = np.asarray(px, dtype=np.float64) - cx
    dy = np.asarray(py, dtype=np.float64) - cy
    return dx * dx + dy * dy
