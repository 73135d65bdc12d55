# MIT License (see LICENSE)
"""
bottle_pack - Initial sphere placement for a rounded-rectangle bottle.

This package computes non-overlapping circle centres inside a container with
rounded corners. The physics and rendering side spawns one body per centre;
this package emits geometry only.

Main entry points:
    - pack: Place N circles and return their centres.
    - CirclePacker: Configurable packer with injectable strategy and RNG.
    - Bottle: The demo container with its sphere kinds.
    - PackingConfig: Attempt budget, insets and spacing.

Submodules:
    - geometry: Safe region, rounded corners, boundary outline.
    - strategies: Random search and spiral grid fallback.
    - invariants: Verification of placement results.
    - io: JSON serialization.

Example:
    from bottle_pack import pack

    points = pack(17, (290, 345), corner_radius=85, circle_radius=20, rng=42)
"""
import logging

from .config import PackingConfig
from .layout import Bottle, SphereKind, SpherePlacement
from .packer import CapacityError, CirclePacker, pack
from .profiler import Profiler
from .strategies import FallbackPlacement, GridPlacement, PlacementStrategy, RandomPlacement
from .types import PackingRequest, Point, Rect, Size

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Packing
    "pack",
    "CirclePacker",
    "CapacityError",
    "PackingConfig",
    # Strategies
    "PlacementStrategy",
    "RandomPlacement",
    "GridPlacement",
    "FallbackPlacement",
    # Layout
    "Bottle",
    "SphereKind",
    "SpherePlacement",
    # Values
    "Point",
    "Size",
    "Rect",
    "PackingRequest",
    # Instrumentation
    "Profiler",
]
