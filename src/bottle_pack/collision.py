# MIT License (see LICENSE)
"""
Spacing checks between candidate centres and already placed circles.

Two circles collide when their centres are closer than the minimum
distance (circle radius times the spacing factor). Checks are vectorized:
a batch of N candidates is compared against M placed centres with one
(N, M) squared-distance matrix, so no sqrt is taken.
"""
from __future__ import annotations

import numpy as np

# Absolute slack on the minimum distance. Grid cells are exactly one minimum
# distance apart, so neighbours must not be rejected by rounding.
DISTANCE_EPS: float = 1e-9


def clearance_mask(candidates: np.ndarray, placed: np.ndarray, min_distance: float) -> np.ndarray:
    """
    Boolean mask of candidates (N, 2) that keep min_distance from every
    placed centre (M, 2).

    With no placed centres every candidate is clear.
    """
    if len(placed) == 0:
        return np.ones(len(candidates), dtype=bool)
    diff = candidates[:, None, :] - placed[None, :, :]
    d2 = np.einsum("nmk,nmk->nm", diff, diff)
    limit = max(min_distance - DISTANCE_EPS, 0.0)
    return np.all(d2 >= limit * limit, axis=1)


def has_collision(candidate, placed: np.ndarray, min_distance: float) -> bool:
    """True if a single candidate is closer than min_distance to any placed centre."""
    arr = np.array([[candidate[0], candidate[1]]], dtype=np.float64)
    return not bool(clearance_mask(arr, placed, min_distance)[0])


def pairwise_distances(points: np.ndarray) -> np.ndarray:
    """
    Condensed upper-triangle distances between all point pairs.

    Returns an array of length N * (N - 1) / 2; empty for fewer than two points.
    """
    n = len(points)
    if n < 2:
        return np.zeros(0, dtype=np.float64)
    i, j = np.triu_indices(n, k=1)
    diff = points[i] - points[j]
    return np.hypot(diff[:, 0], diff[:, 1])
