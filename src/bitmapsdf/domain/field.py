"""Scratch types produced while tracing a channel's iso-contour.

- IntersectionMap: Per-cell threshold crossing parameters
- EdgeList: Line segments approximating the iso-contour
"""

from dataclasses import dataclass

import numpy as np

# Sentinel stored for a cell side without a usable crossing
NO_CROSSING = -np.inf

# Midpoint of the 8-bit range separating inside from outside
THRESHOLD = 127


@dataclass
class IntersectionMap:
    """Threshold crossings for a grid of (width-1) x (height-1) cells.

    ``top[y, x]`` holds the crossing parameter between samples (x, y) and
    (x+1, y); ``left[y, x]`` holds the one between (x, y) and (x, y+1). A
    value is either the interpolation parameter or NO_CROSSING. Negative
    parameters are kept; they are rejected during edge extraction.

    Attributes:
        top: Horizontal crossing parameters, shape (height-1, width-1)
        left: Vertical crossing parameters, shape (height-1, width-1)
        count: Number of parameters in [0, 1)
    """

    top: np.ndarray
    left: np.ndarray
    count: int = 0

    def __post_init__(self) -> None:
        if self.top.shape != self.left.shape:
            raise ValueError(
                f"Top {self.top.shape} and left {self.left.shape} grids must match"
            )

    @property
    def width(self) -> int:
        return int(self.top.shape[1])

    @property
    def height(self) -> int:
        return int(self.top.shape[0])

    @property
    def is_sufficient(self) -> bool:
        """At least two crossings are needed to form a segment."""
        return self.count > 1


@dataclass
class EdgeList:
    """Flat list of contour segments.

    Points are stored as consecutive pairs: rows 2i and 2i+1 of ``points``
    are the endpoints of segment i, in source pixel space.

    Attributes:
        points: Segment endpoints, shape (2 * segment_count, 2) as (x, y)
    """

    points: np.ndarray

    def __post_init__(self) -> None:
        if self.points.ndim != 2 or self.points.shape[1] != 2:
            raise ValueError(f"Edge points must have shape (n, 2), got {self.points.shape}")
        if len(self.points) % 2:
            raise ValueError("Edge list must hold an even number of points")

    @classmethod
    def empty(cls) -> "EdgeList":
        return cls(points=np.empty((0, 2), dtype=np.float64))

    @property
    def segments(self) -> np.ndarray:
        """Segments as an array of shape (segment_count, 2, 2)."""
        return self.points.reshape(-1, 2, 2)

    @property
    def segment_count(self) -> int:
        return len(self.points) // 2

    def __len__(self) -> int:
        return self.segment_count

    def is_empty(self) -> bool:
        return self.segment_count == 0
