# MIT License (see LICENSE)
"""
Container geometry: safe region, rounded corners and boundary outline.

The container is a rounded rectangle. Circle centres must stay inside the
safe region, which is the container shrunk by the boundary inset plus one
margin (circle radius + buffer) on every side. Inside the safe region, the
four corners are cut by quarter circles so that circles near a corner follow
the rounded boundary.

Corner handling is a single parameterised test. Each corner is described by
its outward signs (sx, sy); a point belongs to a corner's quadrant when its
offset (dx, dy) from the corner centre points outward on both axes:

    sx * dx >= 0  and  sy * dy >= 0

and such a point must lie within the adjusted corner radius of that centre.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .config import PackingConfig
from .types import PackingRequest, Rect, Size

# Outward signs of the four corners: bottom-left, bottom-right, top-left, top-right.
CORNER_SIGNS: tuple[tuple[int, int], ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def safe_region(size: Size, circle_radius: float, config: PackingConfig | None = None) -> Rect:
    """
    Rectangle in which circle centres may be placed.

    Inset from the container on every side by boundary_inset + margin, where
    margin = circle_radius + margin_buffer.
    """
    config = config or PackingConfig()
    margin = circle_radius + config.margin_buffer
    return Rect(0.0, 0.0, size.width, size.height).inset(config.boundary_inset + margin)


def corner_centers(region: Rect, adjusted_radius: float) -> np.ndarray:
    """
    Centres of the four corner arcs, shape (4, 2), in CORNER_SIGNS order.

    Each centre is the matching region corner moved inward by adjusted_radius
    on both axes.
    """
    centers = []
    for sx, sy in CORNER_SIGNS:
        cx = region.max_x if sx > 0 else region.min_x
        cy = region.max_y if sy > 0 else region.min_y
        centers.append((cx - sx * adjusted_radius, cy - sy * adjusted_radius))
    return np.array(centers, dtype=np.float64)


def inside_region_mask(points: np.ndarray, region: Rect) -> np.ndarray:
    """Boolean mask of points (N, 2) lying in the closed region."""
    if region.is_empty:
        return np.zeros(len(points), dtype=bool)
    x = points[:, 0]
    y = points[:, 1]
    return (x >= region.min_x) & (x <= region.max_x) & (y >= region.min_y) & (y <= region.max_y)


def rounded_corner_mask(points: np.ndarray, region: Rect, adjusted_radius: float) -> np.ndarray:
    """
    Boolean mask of points (N, 2) that satisfy the rounded-corner constraint.

    A point in no corner quadrant is unconstrained. A point in one or more
    corner quadrants must be within adjusted_radius of each such corner centre.
    """
    ok = np.ones(len(points), dtype=bool)
    signs = np.array(CORNER_SIGNS, dtype=np.float64)
    r2 = adjusted_radius * adjusted_radius
    for (sx, sy), center in zip(signs, corner_centers(region, adjusted_radius)):
        dx = points[:, 0] - center[0]
        dy = points[:, 1] - center[1]
        in_quadrant = (sx * dx >= 0) & (sy * dy >= 0)
        # A negative radius admits no point of the quadrant.
        outside_arc = (dx * dx + dy * dy > r2) | (adjusted_radius < 0)
        ok &= ~(in_quadrant & outside_arc)
    return ok


def boundary_outline(size: Size, corner_radius: float, inset: float,
                     segments_per_corner: int = 8) -> np.ndarray:
    """
    Vertices of the rounded-rectangle container boundary.

    The rectangle is the container inset by `inset`; corners are rounded by
    corner_radius, clamped to half the shorter side. Vertices run
    counter-clockwise starting at the bottom-right arc, with
    segments_per_corner + 1 vertices per arc, shape (4 * (segments + 1), 2).

    The physics collaborator uses this as an edge-loop collision boundary.
    """
    rect = Rect(0.0, 0.0, size.width, size.height).inset(inset)
    r = max(0.0, min(corner_radius, rect.width / 2, rect.height / 2))
    # Arc centres in CCW order with the start angle of each quarter arc.
    arcs = (
        (rect.max_x - r, rect.min_y + r, -0.5 * np.pi),
        (rect.max_x - r, rect.max_y - r, 0.0),
        (rect.min_x + r, rect.max_y - r, 0.5 * np.pi),
        (rect.min_x + r, rect.min_y + r, np.pi),
    )
    t = np.linspace(0.0, 0.5 * np.pi, segments_per_corner + 1)
    parts = []
    for cx, cy, start in arcs:
        ang = start + t
        parts.append(np.column_stack((cx + r * np.cos(ang), cy + r * np.sin(ang))))
    return np.vstack(parts)


@dataclass(frozen=True)
class PackingContext:
    """
    Derived quantities for one packing call.

    Built once per request and shared by the placement strategies.

    Attributes:
        request: The originating request.
        config: Parameters in effect.
        margin: circle_radius + margin_buffer.
        region: Safe region for centres.
        adjusted_corner_radius: corner_radius - margin.
        min_distance: Minimum centre-to-centre distance.
    """
    request: PackingRequest
    config: PackingConfig
    margin: float
    region: Rect
    adjusted_corner_radius: float
    min_distance: float

    @classmethod
    def from_request(cls, request: PackingRequest,
                     config: PackingConfig | None = None) -> PackingContext:
        config = config or PackingConfig()
        margin = request.circle_radius + config.margin_buffer
        return cls(
            request=request,
            config=config,
            margin=margin,
            region=safe_region(request.container_size, request.circle_radius, config),
            adjusted_corner_radius=request.corner_radius - margin,
            min_distance=request.circle_radius * config.spacing_factor,
        )

    @property
    def grid_spacing(self) -> float:
        """Spacing of the fallback grid; equal to the minimum distance."""
        return self.min_distance

    def valid_position_mask(self, points: np.ndarray) -> np.ndarray:
        """Mask of points inside the safe region and its rounded corners."""
        return inside_region_mask(points, self.region) & rounded_corner_mask(
            points, self.region, self.adjusted_corner_radius
        )

    def is_valid_position(self, point) -> bool:
        """Scalar form of valid_position_mask for a single point."""
        arr = np.array([[point[0], point[1]]], dtype=np.float64)
        return bool(self.valid_position_mask(arr)[0])
