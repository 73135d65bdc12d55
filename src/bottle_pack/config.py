# MIT License (see LICENSE)
"""
Tunable parameters of the circle packer.

PackingConfig bundles the constants the placement phases depend on. The
defaults reproduce the bottle demo; tests and callers override individual
fields with dataclasses.replace() or by loading a JSON document
(see io.json_io.config_from_json).
"""
from __future__ import annotations
from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class PackingConfig:
    """
    Parameters shared by all placement strategies.

    Attributes:
        max_random_attempts: Random candidates tried per circle before the
                             grid fallback runs.
        boundary_inset: Gap between the container edge and its boundary.
        margin_buffer: Clearance added to the circle radius to form the margin.
        spacing_factor: Minimum centre distance as a multiple of the radius.
                        Also the grid spacing of the fallback search.
        sample_batch_size: Random candidates evaluated per numpy batch.
        strict: Raise CapacityError instead of returning a short result.
        verify: Check the result against the placement invariants and log
                any violation at ERROR level.
    """
    max_random_attempts: int = constants.MAX_RANDOM_ATTEMPTS
    boundary_inset: float = constants.BOUNDARY_INSET
    margin_buffer: float = constants.MARGIN_BUFFER
    spacing_factor: float = constants.MIN_SPACING_FACTOR
    sample_batch_size: int = constants.SAMPLE_BATCH_SIZE
    strict: bool = False
    verify: bool = False
