# MIT License (see LICENSE)
"""
Fixed parameters of the circle packing routine.

All lengths are in the caller's coordinate units (points on screen in the
bottle demo). These are the defaults of PackingConfig; override them there
rather than editing this module.
"""
from __future__ import annotations

# Random candidates drawn per circle before falling back to the grid search.
MAX_RANDOM_ATTEMPTS: int = 1000

# Distance between the container edge and the drawn boundary.
BOUNDARY_INSET: float = 4.0

# Extra clearance added to the circle radius to form the placement margin.
MARGIN_BUFFER: float = 3.0

# Minimum centre-to-centre distance as a multiple of the circle radius.
# Slightly above 2.0 so neighbouring circles do not touch.
MIN_SPACING_FACTOR: float = 2.2

# Random candidates evaluated per vectorized batch.
SAMPLE_BATCH_SIZE: int = 64

# Bottle defaults used by the demo scene.
DEFAULT_CORNER_RADIUS: float = 85.0
DEFAULT_SPHERE_RADIUS: float = 20.0
