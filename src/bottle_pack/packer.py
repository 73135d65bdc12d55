# MIT License (see LICENSE)
"""
The circle packer.

Places circles one at a time inside a rounded-rectangle container. Each
circle is searched for with every earlier circle as an obstacle, first by
random sampling and then, if the random budget runs out, by a spiral grid
search from the middle of the safe region. A circle neither phase can place
is dropped and the next one is tried, so the result may be shorter than the
requested count.

Structure:
    - pack(): functional entry point with the bottle defaults.
    - CirclePacker: configurable packer holding a PackingConfig, an
      optional injected strategy and an optional Profiler.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

import numpy as np

from .config import PackingConfig
from .geometry import PackingContext
from .invariants import find_violations
from .profiler import Profiler
from .strategies import FallbackPlacement, PlacementStrategy, default_strategy
from .types import PackingRequest, Point, Size

logger = logging.getLogger(__name__)


class CapacityError(ValueError):
    """
    Raised in strict mode when fewer circles than requested could be placed.

    Attributes:
        requested: Number of circles asked for.
        placed: The points that were placed.
    """

    def __init__(self, requested: int, placed: list[Point]) -> None:
        super().__init__(f"Placed {len(placed)} of {requested} circles")
        self.requested = requested
        self.placed = placed


@dataclass
class CirclePacker:
    """
    Packs equal circles into a rounded-rectangle container.

    Attributes:
        config: Packing parameters (attempt budget, insets, spacing).
        rng: numpy Generator or integer seed feeding the random search.
             None draws fresh entropy per packer.
        strategy: Placement strategy override. Defaults to random search
                  with spiral grid fallback built from rng and profiler.
                  An injected strategy owns its own random source, so
                  passing rng as well is rejected.
        profiler: Optional Profiler collecting phase timings and counters.
                  With an injected strategy only the placed_/dropped
                  counters are recorded here; section timings come from
                  a FallbackPlacement built with the same profiler.

    Raises:
        ValueError: If both rng and strategy are given.
    """
    config: PackingConfig | None = None
    rng: np.random.Generator | int | None = None
    strategy: PlacementStrategy | None = None
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = PackingConfig()
        if self.strategy is None:
            self.strategy = default_strategy(self.rng, profiler=self.profiler)
        elif self.rng is not None:
            raise ValueError("rng has no effect on an injected strategy; seed the strategy instead")

    def pack(self, request: PackingRequest) -> list[Point]:
        """
        Compute centres for request.count circles.

        Returns:
            Points in placement order, at most request.count of them. Empty
            for a zero count or degenerate input.

        Raises:
            CapacityError: Only with config.strict, when the result is short.
        """
        points = self._pack(request)
        if self.config.strict and len(points) < max(request.count, 0):
            raise CapacityError(request.count, points)
        return points

    def _pack(self, request: PackingRequest) -> list[Point]:
        if request.count == 0 or request.is_degenerate:
            return []
        context = PackingContext.from_request(request, self.config)
        if context.region.is_empty:
            logger.debug("Safe region is empty for container %s", request.container_size)
            return []

        prof = self.profiler
        placed = np.zeros((0, 2), dtype=np.float64)
        points: list[Point] = []
        for i in range(request.count):
            point = self.strategy.find(placed, context)
            if point is None:
                logger.debug("Dropped circle %d of %d", i + 1, request.count)
                if prof:
                    prof.count("dropped")
                continue
            points.append(point)
            placed = np.vstack((placed, (point.x, point.y)))
            if prof:
                prof.count(f"placed_{self._phase_name()}")

        logger.info(
            "Packed %d of %d circles (r=%.2f) into %.1fx%.1f",
            len(points), request.count, request.circle_radius,
            request.container_size.width, request.container_size.height,
        )
        if self.config.verify:
            for problem in find_violations(points, request, self.config):
                logger.error("Placement invariant violated: %s", problem)
        return points

    def _phase_name(self) -> str:
        if isinstance(self.strategy, FallbackPlacement) and self.strategy.last_used:
            return self.strategy.last_used
        return self.strategy.name


def pack(count: int, container_size: Size | tuple[float, float], corner_radius: float,
         circle_radius: float, *, rng: np.random.Generator | int | None = None,
         config: PackingConfig | None = None, strategy: PlacementStrategy | None = None,
         profiler: Profiler | None = None) -> list[Point]:
    """
    Place `count` non-overlapping circles inside a rounded rectangle.

    Args:
        count: Number of circles.
        container_size: Container (width, height).
        corner_radius: Corner radius of the container boundary.
        circle_radius: Radius of each circle.
        rng: Random source for the random search (Generator or seed).
        config: Packing parameters; defaults reproduce the bottle demo.
        strategy: Placement strategy override. Cannot be combined with rng.
        profiler: Optional Profiler. Section timings are only recorded for
                  the default strategy.

    Returns:
        Up to `count` centre points in placement order. Circles that could
        not be placed are omitted.

    Raises:
        ValueError: If both rng and strategy are given.
    """
    request = PackingRequest(count, container_size, corner_radius, circle_radius)
    packer = CirclePacker(config=config, rng=rng, strategy=strategy, profiler=profiler)
    return packer.pack(request)
