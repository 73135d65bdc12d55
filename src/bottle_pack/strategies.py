# MIT License (see LICENSE)
"""
Placement strategies for finding the next circle centre.

A strategy receives the centres placed so far and the packing context and
returns one new valid centre, or None if it cannot find one. Strategies
compose: the default packer runs a random search and falls back to a
deterministic spiral grid search when the random budget runs out.

    strategy = FallbackPlacement(RandomPlacement(rng), GridPlacement())
    point = strategy.find(placed, context)

Tests can inject either member alone to force a particular path.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
import logging

import numpy as np

from .collision import clearance_mask
from .geometry import PackingContext
from .profiler import Profiler
from .types import Point
from .util import to_point

logger = logging.getLogger(__name__)


class PlacementStrategy(ABC):
    """
    Abstract base class for placement strategies.

    Subclasses implement find(); `name` labels the strategy in logs and
    profiler counters.
    """

    name: str = "strategy"

    @abstractmethod
    def find(self, placed: np.ndarray, context: PackingContext) -> Point | None:
        """
        Find a centre for one more circle.

        Args:
            placed: Centres accepted so far, shape (M, 2).
            context: Derived geometry of the current request.

        Returns:
            A centre inside the safe region, clear of the rounded corners and
            at least context.min_distance from every placed centre, or None.
        """
        ...

    def first_acceptable(self, candidates: np.ndarray, placed: np.ndarray,
                         context: PackingContext) -> Point | None:
        """Return the first candidate (in array order) passing every check."""
        if len(candidates) == 0:
            return None
        ok = context.valid_position_mask(candidates) & clearance_mask(
            candidates, placed, context.min_distance
        )
        hits = np.flatnonzero(ok)
        if len(hits) == 0:
            return None
        return to_point(candidates[hits[0]])


# =============================================================================
# Random search
# =============================================================================

class RandomPlacement(PlacementStrategy):
    """
    Uniform random search inside the safe region.

    Draws at most `max_attempts` candidates (the config value when not given)
    in batches of `batch_size` and returns the first acceptable one in draw
    order.
    """

    name = "random"

    def __init__(self, rng: np.random.Generator | int | None = None,
                 max_attempts: int | None = None, batch_size: int | None = None) -> None:
        """
        Args:
            rng: numpy Generator, an integer seed, or None for fresh entropy.
            max_attempts: Override of config.max_random_attempts.
            batch_size: Override of config.sample_batch_size.
        """
        self.rng = np.random.default_rng(rng)
        self.max_attempts = max_attempts
        self.batch_size = batch_size

    def sample(self, n: int, context: PackingContext) -> np.ndarray:
        """Draw n uniform candidates inside the safe region, shape (n, 2)."""
        region = context.region
        return self.rng.uniform(
            low=(region.min_x, region.min_y),
            high=(region.max_x, region.max_y),
            size=(n, 2),
        )

    def find(self, placed: np.ndarray, context: PackingContext) -> Point | None:
        if context.region.is_empty:
            return None
        budget = self.max_attempts
        if budget is None:
            budget = context.config.max_random_attempts
        batch = max(1, self.batch_size or context.config.sample_batch_size)

        remaining = budget
        while remaining > 0:
            n = min(batch, remaining)
            point = self.first_acceptable(self.sample(n, context), placed, context)
            if point is not None:
                return point
            remaining -= n
        return None


# =============================================================================
# Spiral grid search
# =============================================================================

def grid_dimensions(context: PackingContext) -> tuple[int, int]:
    """
    Number of (cols, rows) of the fallback grid.

    floor(region extent / spacing) on each axis; zero for an empty region.
    """
    region = context.region
    spacing = context.grid_spacing
    if region.is_empty or spacing <= 0:
        return (0, 0)
    return (int(np.floor(region.width / spacing)), int(np.floor(region.height / spacing)))


def spiral_ring(center_col: int, center_row: int, radius: int,
                cols: int, rows: int) -> list[tuple[int, int]]:
    """
    Grid cells on one ring of the spiral search.

    Ring 0 is the centre cell. Ring r >= 1 is every cell on the border of the
    (2r+1) x (2r+1) square around the centre, clipped to the grid, in
    row-major order. Cells are (col, row) pairs.
    """
    if radius < 0 or cols <= 0 or rows <= 0:
        return []
    if radius == 0:
        return [(center_col, center_row)]

    min_row = max(0, center_row - radius)
    max_row = min(rows - 1, center_row + radius)
    min_col = max(0, center_col - radius)
    max_col = min(cols - 1, center_col + radius)

    cells = []
    for row in range(min_row, max_row + 1):
        for col in range(min_col, max_col + 1):
            if row in (min_row, max_row) or col in (min_col, max_col):
                cells.append((col, row))
    return cells


def spiral_cells(cols: int, rows: int) -> list[tuple[int, int]]:
    """All cells visited by the spiral search, in search order."""
    center_col, center_row = cols // 2, rows // 2
    cells = []
    for radius in range(max(cols, rows)):
        cells.extend(spiral_ring(center_col, center_row, radius, cols, rows))
    return cells


class GridPlacement(PlacementStrategy):
    """
    Deterministic spiral search over a regular grid in the safe region.

    Grid spacing equals the minimum centre distance. Rings are searched
    outward from the middle cell and the first acceptable cell wins, so the
    result depends only on the request and the placed centres.
    """

    name = "grid"

    def cell_position(self, col: int, row: int, context: PackingContext) -> tuple[float, float]:
        """Convert a grid cell to coordinates: region origin + (col, row) * spacing."""
        spacing = context.grid_spacing
        return (context.region.min_x + col * spacing, context.region.min_y + row * spacing)

    def find(self, placed: np.ndarray, context: PackingContext) -> Point | None:
        cols, rows = grid_dimensions(context)
        center_col, center_row = cols // 2, rows // 2
        # Ring by ring keeps the search lazy; most calls stop near the centre.
        for radius in range(max(cols, rows)):
            ring = spiral_ring(center_col, center_row, radius, cols, rows)
            if not ring:
                continue
            candidates = np.array(
                [self.cell_position(c, r, context) for c, r in ring], dtype=np.float64
            )
            point = self.first_acceptable(candidates, placed, context)
            if point is not None:
                return point
        return None


# =============================================================================
# Composition
# =============================================================================

class FallbackPlacement(PlacementStrategy):
    """
    Try each member strategy in order and return the first hit.

    `last_used` holds the name of the member that produced the most recent
    result, or None when every member failed. When a profiler is attached,
    each member's search is timed under its name.
    """

    name = "fallback"

    def __init__(self, *strategies: PlacementStrategy, profiler: Profiler | None = None) -> None:
        self.strategies = strategies
        self.profiler = profiler
        self.last_used: str | None = None

    def find(self, placed: np.ndarray, context: PackingContext) -> Point | None:
        self.last_used = None
        prof = self.profiler
        for strategy in self.strategies:
            if prof:
                with prof.section(strategy.name):
                    point = strategy.find(placed, context)
            else:
                point = strategy.find(placed, context)
            if point is not None:
                self.last_used = strategy.name
                return point
            logger.debug("%s placement failed with %d circles placed", strategy.name, len(placed))
        return None


def default_strategy(rng: np.random.Generator | int | None = None,
                     profiler: Profiler | None = None) -> FallbackPlacement:
    """Random search backed by the spiral grid search."""
    return FallbackPlacement(RandomPlacement(rng), GridPlacement(), profiler=profiler)
