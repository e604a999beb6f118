"""Elementwise arithmetic over fixed-length embedding vectors."""
from __future__ import annotations

import numpy as np
from scipy.spatial import distance

from .errors import DimensionMismatchError

__all__ = [
    "subtract",
    "euclidean_distance",
]


def _as_pair(a, b):
    a = np.asarray(a, dtype=np.float64).ravel()
    b = np.asarray(b, dtype=np.float64).ravel()
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(a.shape[0], b.shape[0])
    return a, b


def subtract(a, b) -> np.ndarray:
    """
    Elementwise difference ``a[i] - b[i]``.

    Args:
        a: First vector (any 1-D array-like of numbers)
        b: Second vector, same length as ``a``

    Returns:
        A new float64 array; neither input is modified.

    Raises:
        DimensionMismatchError: If the vectors differ in length.

    Example:
        >>> subtract([3.0, 2.0], [1.0, 1.0])
        array([2., 1.])
    """
    a, b = _as_pair(a, b)
    return np.subtract(a, b)


def euclidean_distance(a, b) -> float:
    """
    Square root of the summed squared elementwise differences.

    Raises:
        DimensionMismatchError: If the vectors differ in length.

    Example:
        >>> euclidean_distance([0.0, 3.0], [4.0, 0.0])
        5.0
    """
    a, b = _as_pair(a, b)
    if a.size == 0:
        return 0.0
    return float(distance.euclidean(a, b))
