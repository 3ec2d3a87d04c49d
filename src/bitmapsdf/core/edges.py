"""Contour segment extraction from an intersection map.

Every cell gathers crossing points on its four sides, in the order top,
bottom, left, right. Two or three points produce one segment joining the
first two; four points (a saddle cell) produce two segments, pairing the
first two and the last two points. The saddle pairing follows gathering
order and does not choose between the two possible diagonals.
"""

import numpy as np
import structlog

from bitmapsdf.domain import EdgeList, IntersectionMap

logger = structlog.get_logger(__name__)

# Stand-in for a side whose neighbouring cell lies outside the grid
_MISSING = -1.0


def _horizontal_valid(params: np.ndarray) -> np.ndarray:
    return (params >= 0.0) & (params < 1.0)


def _vertical_valid(params: np.ndarray) -> np.ndarray:
    return (params > 0.0) & (params < 1.0)


def extract_edges(intersections: IntersectionMap) -> EdgeList:
    """Convert a crossing grid into line segments.

    Top and bottom crossings are accepted for parameters in [0, 1); left and
    right crossings only for parameters in (0, 1). Segments are emitted in
    row-major cell order.

    Args:
        intersections: Crossing grid for one channel

    Returns:
        EdgeList with endpoints in source pixel space
    """
    height, width = intersections.height, intersections.width
    if height == 0 or width == 0:
        return EdgeList.empty()

    top = intersections.top
    left = intersections.left

    bottom = np.full_like(top, _MISSING)
    bottom[:-1] = top[1:]
    right = np.full_like(left, _MISSING)
    right[:, :-1] = left[:, 1:]

    valid = np.stack(
        [
            _horizontal_valid(top),
            _horizontal_valid(bottom),
            _vertical_valid(left),
            _vertical_valid(right),
        ],
        axis=-1,
    )

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    top_t, bottom_t, left_t, right_t = (
        np.where(valid[..., side], params, 0.0)
        for side, params in enumerate((top, bottom, left, right))
    )

    # (height, width, side, xy)
    points = np.stack(
        [
            np.stack([xs + top_t, ys], axis=-1),
            np.stack([xs + bottom_t, ys + 1.0], axis=-1),
            np.stack([xs, ys + left_t], axis=-1),
            np.stack([xs + 1.0, ys + right_t], axis=-1),
        ],
        axis=2,
    )

    # Move valid points to the front of each cell, keeping side order
    order = np.argsort(~valid, axis=-1, kind="stable")
    gathered = np.take_along_axis(points, order[..., np.newaxis], axis=2)

    num_points = valid.sum(axis=-1)
    emit = np.stack([num_points >= 2, num_points == 4], axis=-1)
    segments = gathered.reshape(height, width, 2, 2, 2)[emit]

    edges = EdgeList(points=segments.reshape(-1, 2))
    logger.debug("Edges extracted", segments=edges.segment_count)
    return edges
