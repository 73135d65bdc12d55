import numpy as np
import pytest
from bottle_pack.config import PackingConfig
from bottle_pack.geometry import PackingContext
from bottle_pack.strategies import (
    FallbackPlacement,
    GridPlacement,
    PlacementStrategy,
    RandomPlacement,
    default_strategy,
    grid_dimensions,
    spiral_cells,
    spiral_ring,
)
from bottle_pack.profiler import Profiler
from bottle_pack.types import PackingRequest, Point, Size
from bottle_pack.util import distance

BOTTLE = PackingRequest(17, Size(290, 345), 85.0, 20.0)
NONE_PLACED = np.zeros((0, 2), dtype=np.float64)


def test_spiral_ring_zero_is_center():
    assert spiral_ring(2, 3, 0, 5, 6) == [(2, 3)]


def test_spiral_ring_one_is_row_major_border():
    assert spiral_ring(2, 3, 1, 5, 6) == [
        (1, 2), (2, 2), (3, 2),
        (1, 3),         (3, 3),
        (1, 4), (2, 4), (3, 4),
    ]


def test_spiral_ring_is_clipped_to_grid():
    ring = spiral_ring(0, 0, 2, 2, 2)
    assert ring == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert spiral_ring(1, 1, 1, 0, 3) == []


def test_spiral_cells_cover_whole_grid():
    cells = spiral_cells(5, 6)
    assert cells[0] == (2, 3)
    assert set(cells) == {(c, r) for c in range(5) for r in range(6)}


def test_grid_dimensions_for_bottle():
    ctx = PackingContext.from_request(BOTTLE)
    # floor(236 / 44) = 5, floor(291 / 44) = 6
    assert grid_dimensions(ctx) == (5, 6)


def test_grid_dimensions_empty_region():
    ctx = PackingContext.from_request(PackingRequest(3, Size(50, 50), 10.0, 20.0))
    assert grid_dimensions(ctx) == (0, 0)
    assert GridPlacement().find(NONE_PLACED, ctx) is None


def test_grid_starts_at_middle_cell():
    ctx = PackingContext.from_request(BOTTLE)
    # Middle cell (2, 3) -> (27 + 2*44, 27 + 3*44)
    assert tuple(GridPlacement().find(NONE_PLACED, ctx)) == pytest.approx((115.0, 159.0))


def test_grid_moves_to_first_free_cell_of_next_ring():
    ctx = PackingContext.from_request(BOTTLE)
    placed = np.array([[115.0, 159.0]])
    # First cell of ring 1 in row-major order is (1, 2).
    assert tuple(GridPlacement().find(placed, ctx)) == pytest.approx((71.0, 115.0))


def test_grid_is_deterministic():
    ctx = PackingContext.from_request(BOTTLE)
    placed = np.array([[115.0, 159.0], [71.0, 115.0], [150.0, 250.0]])
    grid = GridPlacement()
    assert grid.find(placed, ctx) == grid.find(placed, ctx)
    assert GridPlacement().find(placed, ctx) == grid.find(placed.copy(), ctx)


def test_grid_returns_none_when_full():
    ctx = PackingContext.from_request(BOTTLE)
    cols, rows = grid_dimensions(ctx)
    grid = GridPlacement()
    # Every grid position is occupied, so every cell collides.
    placed = np.array([grid.cell_position(c, r, ctx) for c in range(cols) for r in range(rows)])
    assert grid.find(placed, ctx) is None


def test_random_placement_is_valid():
    ctx = PackingContext.from_request(BOTTLE)
    placed = np.array([[115.0, 159.0]])
    p = RandomPlacement(rng=3).find(placed, ctx)
    assert p is not None
    assert ctx.is_valid_position(p)
    assert distance(p, (115.0, 159.0)) >= ctx.min_distance


def test_random_placement_reproducible_with_seed():
    ctx = PackingContext.from_request(BOTTLE)
    a = RandomPlacement(rng=11).find(NONE_PLACED, ctx)
    b = RandomPlacement(rng=11).find(NONE_PLACED, ctx)
    assert a == b


def test_random_placement_zero_budget_finds_nothing():
    ctx = PackingContext.from_request(BOTTLE)
    assert RandomPlacement(rng=0, max_attempts=0).find(NONE_PLACED, ctx) is None


def test_random_placement_uses_config_budget():
    ctx = PackingContext.from_request(BOTTLE, PackingConfig(max_random_attempts=0))
    assert RandomPlacement(rng=0).find(NONE_PLACED, ctx) is None


class _Counting(PlacementStrategy):
    name = "counting"

    def __init__(self, result):
        self.result = result
        self.calls = 0

    def find(self, placed, context):
        self.calls += 1
        return self.result


def test_fallback_tries_members_in_order():
    ctx = PackingContext.from_request(BOTTLE)
    first = _Counting(None)
    second = _Counting(Point(100.0, 100.0))
    third = _Counting(Point(0.0, 0.0))
    chain = FallbackPlacement(first, second, third)

    assert chain.find(NONE_PLACED, ctx) == Point(100.0, 100.0)
    assert chain.last_used == "counting"
    assert (first.calls, second.calls, third.calls) == (1, 1, 0)


def test_fallback_uses_grid_when_random_budget_is_empty():
    ctx = PackingContext.from_request(BOTTLE)
    chain = FallbackPlacement(RandomPlacement(rng=0, max_attempts=0), GridPlacement())
    assert tuple(chain.find(NONE_PLACED, ctx)) == pytest.approx((115.0, 159.0))
    assert chain.last_used == "grid"


def test_fallback_times_members_with_profiler():
    ctx = PackingContext.from_request(BOTTLE)
    prof = Profiler()
    chain = default_strategy(rng=5, profiler=prof)
    assert chain.find(NONE_PLACED, ctx) is not None
    assert chain.last_used == "random"
    summary = prof.stats.summary()
    assert summary["random"]["n"] == 1
    assert "grid" not in summary


def test_fallback_reports_total_failure():
    ctx = PackingContext.from_request(BOTTLE)
    chain = FallbackPlacement(_Counting(None), _Counting(None))
    assert chain.find(NONE_PLACED, ctx) is None
    assert chain.last_used is None
