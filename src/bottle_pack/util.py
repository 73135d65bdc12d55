# MIT License (see LICENSE)
"""
Utility functions for 2D point math.

Points travel through the packer as numpy arrays of shape (N, 2) so that
candidate batches can be checked without Python-level loops. These helpers
convert between that representation and the Point value type.
"""
from __future__ import annotations

import numpy as np

from .types import Point


def as_points_array(points) -> np.ndarray:
    """
    Convert a sequence of points to a float64 array of shape (N, 2).

    An empty sequence yields an array of shape (0, 2) so that broadcasting
    against it still works.
    """
    arr = np.array([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return arr.reshape(-1, 2)


def to_point(row: np.ndarray) -> Point:
    """Convert a length-2 array to a Point with plain float coordinates."""
    return Point(float(row[0]), float(row[1]))


def distance(a, b) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))
