"""Column reductions over per-file line counts."""

from typing import Optional, Sequence

import numpy as np


def _as_matrix(rows: Sequence[Sequence[int]], width: int) -> np.ndarray:
    matrix = np.asarray(rows, dtype=np.int64)
    return matrix.reshape(len(rows), width)


def column_maxima(rows: Sequence[Sequence[int]], width: int) -> list[int]:
    """
    Maximum of every column.

    Args:
        rows: One row of counts per observation
        width: Number of columns

    Returns:
        Per-column maxima; all zeros when there are no rows
    """
    if not rows:
        return [0] * width
    return [int(v) for v in _as_matrix(rows, width).max(axis=0)]


def column_means(rows: Sequence[Sequence[int]], width: int) -> Optional[list[float]]:
    """
    Arithmetic mean of every column.

    Returns None when there are no rows: an average over nothing has no value.
    """
    if not rows:
        return None
    return [float(v) for v in _as_matrix(rows, width).mean(axis=0)]
