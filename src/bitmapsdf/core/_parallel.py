"""Row-band parallel map used by the per-pixel phases.

Work is split into bands of consecutive rows and mapped over a thread pool.
numpy releases the GIL inside its array kernels, so bands make progress
concurrently without copying pixel data into worker processes.
"""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")


def row_bands(height: int, rows_per_task: int) -> list[tuple[int, int]]:
    """Split ``range(height)`` into ``(start, stop)`` bands."""
    return [
        (start, min(start + rows_per_task, height))
        for start in range(0, height, rows_per_task)
    ]


def map_row_bands(
    height: int,
    task: Callable[[int, int], T],
    rows_per_task: int = 16,
    max_workers: int | None = None,
) -> list[T]:
    """Run ``task(start, stop)`` for every row band and collect the results.

    Results are returned in band order. Exceptions raised by a task propagate
    to the caller.

    Args:
        height: Number of rows to cover
        task: Callable receiving a half-open row range
        rows_per_task: Rows per band
        max_workers: Thread pool size (None = auto)

    Returns:
        One result per band
    """
    bands = row_bands(height, rows_per_task)
    if len(bands) <= 1 or max_workers == 1:
        return [task(start, stop) for start, stop in bands]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda band: task(*band), bands))
