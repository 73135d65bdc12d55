# MIT License (see LICENSE)
"""
Checks of the properties every placement result must have.

Used for verifying packer output in tests and, with PackingConfig.verify,
after every packing call:
  - no two centres closer than circle_radius * spacing_factor;
  - every centre inside the safe region;
  - every centre within its rounded corner.
"""
from __future__ import annotations

import numpy as np

from .collision import DISTANCE_EPS, pairwise_distances
from .config import PackingConfig
from .geometry import PackingContext, inside_region_mask, rounded_corner_mask
from .types import PackingRequest, Point
from .util import as_points_array


def min_pairwise_distance(points: list[Point]) -> float:
    """
    Smallest centre-to-centre distance among the points.

    Returns inf for fewer than two points.
    """
    d = pairwise_distances(as_points_array(points))
    return float(d.min()) if len(d) else float("inf")


def find_violations(points: list[Point], request: PackingRequest,
                    config: PackingConfig | None = None) -> list[str]:
    """
    Describe every invariant the points break for the given request.

    Args:
        points: Packer output.
        request: The request that produced it.
        config: Parameters used for packing.

    Returns:
        Human-readable problems; an empty list means the result is valid.
    """
    problems: list[str] = []
    if len(points) > max(request.count, 0):
        problems.append(f"{len(points)} points for a request of {request.count}")
    if not points:
        return problems

    context = PackingContext.from_request(request, config)
    arr = as_points_array(points)

    closest = min_pairwise_distance(points)
    if closest < context.min_distance - DISTANCE_EPS:
        problems.append(f"centres {closest:.4f} apart, minimum is {context.min_distance:.4f}")

    for idx in np.flatnonzero(~inside_region_mask(arr, context.region)):
        problems.append(f"point {idx} {tuple(arr[idx])} outside safe region")

    corner_ok = rounded_corner_mask(arr, context.region, context.adjusted_corner_radius)
    for idx in np.flatnonzero(~corner_ok):
        problems.append(f"point {idx} {tuple(arr[idx])} outside rounded corner")

    return problems
