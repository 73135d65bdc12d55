# MIT License (see LICENSE)
"""
Core value types for circle packing.

Defines the plain geometric values exchanged with callers:
- Point: a circle centre.
- Size: container width and height.
- Rect: an axis-aligned rectangle (used for the safe region).
- PackingRequest: the immutable input of one packing call.

Coordinates follow the scene convention of the bottle demo: origin at the
bottom-left of the container, y pointing up.
"""
from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Iterator


# =============================================================================
# Geometric values
# =============================================================================

@dataclass(frozen=True)
class Point:
    """
    A 2D coordinate pair.

    Iterates as (x, y) so it can be unpacked or passed to numpy directly.
    """
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]


@dataclass(frozen=True)
class Size:
    """Width and height of a container."""
    width: float
    height: float

    def __iter__(self) -> Iterator[float]:
        yield self.width
        yield self.height


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle given by its bottom-left origin and extent.

    Width or height may be negative when an inset consumed the whole
    container; such a rectangle contains no points.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """True when the rectangle has negative width or height."""
        return self.width < 0 or self.height < 0

    def contains(self, point) -> bool:
        """Closed-interval containment test on both axes."""
        if self.is_empty:
            return False
        px, py = point[0], point[1]
        return self.min_x <= px <= self.max_x and self.min_y <= py <= self.max_y

    def inset(self, dx: float, dy: float | None = None) -> Rect:
        """Return the rectangle shrunk by dx (and dy) on every side."""
        if dy is None:
            dy = dx
        return Rect(self.x + dx, self.y + dy, self.width - 2 * dx, self.height - 2 * dy)


# =============================================================================
# Packing input
# =============================================================================

@dataclass(frozen=True)
class PackingRequest:
    """
    Input of a single packing call.

    Attributes:
        count: Number of circles to place.
        container_size: Size of the rounded-rectangle container.
        corner_radius: Corner radius of the container boundary.
        circle_radius: Radius of every circle.
    """
    count: int
    container_size: Size
    corner_radius: float
    circle_radius: float

    def __post_init__(self) -> None:
        """Accept (width, height) tuples for the container size."""
        if not isinstance(self.container_size, Size):
            w, h = self.container_size
            object.__setattr__(self, "container_size", Size(float(w), float(h)))

    @property
    def is_degenerate(self) -> bool:
        """
        True for inputs the packer treats as having no solution.

        Negative counts, radii and container dimensions that are not finite
        positive numbers, and a NaN corner radius are all answered with an
        empty result.
        """
        return (
            self.count < 0
            or not _finite_positive(self.circle_radius)
            or not _finite_positive(self.container_size.width)
            or not _finite_positive(self.container_size.height)
            or math.isnan(self.corner_radius)
        )


def _finite_positive(value: float) -> bool:
    """False for zero, negatives, NaN and infinities."""
    return math.isfinite(value) and value > 0
