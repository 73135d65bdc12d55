# MIT License (see LICENSE)
"""
Bottle layouts: which sphere goes where.

The Bottle class describes the demo container and its contents:
- The container size and the corner radius of its boundary.
- The sphere radius shared by all spheres.
- The sphere kinds and how many of each to spawn.

populate() expands the kinds into a shuffled item list, packs one circle per
item, and pairs item i with point i. The physics collaborator spawns one body
per returned placement and builds its edge-loop boundary from
boundary_outline().

Structure:
    - User creates a Bottle (size from the view, defaults for the rest).
    - User calls populate() once per scene setup.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

import numpy as np

from . import constants
from .config import PackingConfig
from .geometry import boundary_outline
from .packer import CirclePacker
from .types import PackingRequest, Point, Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SphereKind:
    """
    A kind of sphere and how many of it go into the bottle.

    Attributes:
        name: Identifier used by the renderer to pick a texture.
        quantity: Number of spheres of this kind.
    """
    name: str
    quantity: int


DEFAULT_KINDS: tuple[SphereKind, ...] = (
    SphereKind("perfect", 7),
    SphereKind("nice", 5),
    SphereKind("good", 5),
)


@dataclass(frozen=True)
class SpherePlacement:
    """
    One sphere to spawn.

    Attributes:
        id: 1-based index in spawn order.
        kind: Name of the sphere kind.
        position: Centre of the sphere.
    """
    id: int
    kind: str
    position: Point


@dataclass
class Bottle:
    """
    The demo container and the spheres that fill it.

    Attributes:
        size: Container size (the scene size in the demo).
        corner_radius: Corner radius of the boundary (default: 85).
        sphere_radius: Radius of every sphere (default: 20).
        kinds: Sphere kinds with their quantities.
        config: Packing parameters.
    """
    size: Size | tuple[float, float]
    corner_radius: float = constants.DEFAULT_CORNER_RADIUS
    sphere_radius: float = constants.DEFAULT_SPHERE_RADIUS
    kinds: tuple[SphereKind, ...] = field(default=DEFAULT_KINDS)
    config: PackingConfig = field(default_factory=PackingConfig)

    def __post_init__(self) -> None:
        """Accept (width, height) tuples for the size."""
        if not isinstance(self.size, Size):
            w, h = self.size
            self.size = Size(float(w), float(h))
        self.kinds = tuple(self.kinds)

    @property
    def total(self) -> int:
        """Total number of spheres across all kinds."""
        return sum(max(k.quantity, 0) for k in self.kinds)

    def shuffled_kinds(self, rng: np.random.Generator | int | None = None) -> list[str]:
        """Kind names repeated by quantity, in random order."""
        rng = np.random.default_rng(rng)
        names = [k.name for k in self.kinds for _ in range(max(k.quantity, 0))]
        order = rng.permutation(len(names))
        return [names[i] for i in order]

    def request(self) -> PackingRequest:
        """The packing request for all spheres of this bottle."""
        return PackingRequest(self.total, self.size, self.corner_radius, self.sphere_radius)

    def populate(self, rng: np.random.Generator | int | None = None,
                 packer: CirclePacker | None = None) -> list[SpherePlacement]:
        """
        Choose a kind and a position for every sphere that fits.

        Args:
            rng: Random source for the shuffle, and for the packing when no
                 packer is given.
            packer: Packer override; built from self.config when None.

        Returns:
            Placements in spawn order. When the container cannot hold every
            sphere, the trailing items of the shuffled list are left out.
        """
        rng = np.random.default_rng(rng)
        items = self.shuffled_kinds(rng)
        if packer is None:
            packer = CirclePacker(config=self.config, rng=rng)
        points = packer.pack(self.request())

        if len(points) < len(items):
            logger.warning(
                "Bottle %.1fx%.1f holds %d of %d spheres; skipping the rest",
                self.size.width, self.size.height, len(points), len(items),
            )
        return [
            SpherePlacement(id=i + 1, kind=kind, position=point)
            for i, (kind, point) in enumerate(zip(items, points))
        ]

    def boundary_outline(self, segments_per_corner: int = 8) -> np.ndarray:
        """Vertices of the container boundary; see geometry.boundary_outline."""
        return boundary_outline(
            self.size, self.corner_radius, self.config.boundary_inset, segments_per_corner
        )
