# MIT License (see LICENSE)
"""
Per-phase instrumentation for packing runs.

A placement phase is one strategy's search for one circle ("random" or
"grid"). FallbackPlacement times each phase it runs; CirclePacker counts
the outcome of every circle as placed_<phase> or dropped.

Example:
    profiler = Profiler()
    points = pack(17, (290, 345), 85, 20, profiler=profiler)
    print(profiler.stats.placed, profiler.stats.summary()["random"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field

PLACED_PREFIX = "placed_"


@dataclass
class PhaseTiming:
    """Running totals of the searches made by one phase."""
    n: int = 0
    total: float = 0.0
    worst: float = 0.0

    def record(self, dt: float) -> None:
        self.n += 1
        self.total += dt
        self.worst = max(self.worst, dt)


@dataclass
class ProfileStats:
    """
    Phase timings and circle outcome counters of one or more packing runs.
    """
    phases: dict[str, PhaseTiming] = field(default_factory=dict)
    counters: dict[str, int] = field(default_factory=dict)

    def add(self, phase: str, dt: float) -> None:
        """Record one search of `phase` that took dt seconds."""
        self.phases.setdefault(phase, PhaseTiming()).record(dt)

    def count(self, name: str, n: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + n

    @property
    def placed(self) -> int:
        """Circles placed by any phase."""
        return sum(n for name, n in self.counters.items() if name.startswith(PLACED_PREFIX))

    @property
    def dropped(self) -> int:
        return self.counters.get("dropped", 0)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Flatten phases and counters into one report.

        Returns:
            Phase name to {'n', 'mean_ms', 'max_ms'} (searches run, mean and
            worst search time), and counter name to {'n'}.
        """
        out = {
            phase: {"n": t.n, "mean_ms": 1e3 * t.total / t.n, "max_ms": 1e3 * t.worst}
            for phase, t in self.phases.items()
        }
        for name, n in self.counters.items():
            out[name] = {"n": n}
        return out


class _PhaseTimer:
    """Times one phase search and files it on exit, also when it raised."""

    def __init__(self, stats: ProfileStats, phase: str) -> None:
        self.stats = stats
        self.phase = phase
        self.t0 = 0.0

    def __enter__(self) -> _PhaseTimer:
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stats.add(self.phase, time.perf_counter() - self.t0)


class Profiler:
    """
    Collects placement phase timings and circle outcomes.

    Usage:
        profiler = Profiler()
        with profiler.section("grid"):
            strategy.find(placed, context)
        profiler.count("dropped")
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _PhaseTimer:
        """Context manager timing one search of the phase `name`."""
        return _PhaseTimer(self.stats, name)

    def count(self, name: str, n: int = 1) -> None:
        """Tally a circle outcome such as 'placed_random' or 'dropped'."""
        self.stats.count(name, n)
