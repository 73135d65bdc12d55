# MIT License (see LICENSE)
"""
JSON serialization for packing requests, configs and bottle layouts.

Layout files are what the rendering side reads to spawn spheres; request
and bottle files let a run be reproduced from disk.

JSON Schema Overview:
---------------------
Request:
{
  "count": int,                      # Required
  "container": [width, height],      # Required
  "corner_radius": float,            # Default: 0
  "circle_radius": float             # Required
}

Bottle:
{
  "size": [width, height],           # Required
  "corner_radius": float,            # Default: 85
  "sphere_radius": float,            # Default: 20
  "kinds": [                         # Default: perfect x7, nice x5, good x5
    {"name": string, "quantity": int}
  ],
  "config": { ... }                  # Optional, see below
}

Config (all optional):
{
  "max_random_attempts": int,        # Default: 1000
  "boundary_inset": float,           # Default: 4
  "margin_buffer": float,            # Default: 3
  "spacing_factor": float,           # Default: 2.2
  "sample_batch_size": int,          # Default: 64
  "strict": bool,                    # Default: false
  "verify": bool                     # Default: false
}

Layout (output only):
{
  "size": [width, height],
  "corner_radius": float,
  "sphere_radius": float,
  "boundary": [[x, y], ...],         # CCW outline of the container
  "spheres": [
    {"id": int, "kind": string, "position": [x, y]}
  ]
}
"""
from __future__ import annotations
import json
from typing import Any

import numpy as np

from .. import constants
from ..config import PackingConfig
from ..layout import Bottle, SphereKind, SpherePlacement, DEFAULT_KINDS
from ..types import PackingRequest, Size


def load_json(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


# =============================================================================
# Requests
# =============================================================================

def request_from_json(d: dict[str, Any]) -> PackingRequest:
    """
    Parse a packing request from a dictionary.

    Raises:
        ValueError: If a required field is missing or malformed.
    """
    for key in ("count", "container", "circle_radius"):
        if key not in d:
            raise ValueError(f"Request missing required '{key}' field.")

    w, h = _size_field(d["container"], "Container")
    return PackingRequest(
        count=_int_field(d["count"], "Count"),
        container_size=Size(w, h),
        corner_radius=_float_field(d.get("corner_radius", 0.0), "Corner radius"),
        circle_radius=_float_field(d["circle_radius"], "Circle radius"),
    )


def request_to_json(request: PackingRequest) -> dict[str, Any]:
    """Serialize a PackingRequest to a dictionary (round-trip compatible)."""
    return {
        "count": request.count,
        "container": list(request.container_size),
        "corner_radius": request.corner_radius,
        "circle_radius": request.circle_radius,
    }


def load_request(path: str) -> PackingRequest:
    """Load a PackingRequest from a JSON file."""
    return request_from_json(load_json(path))


# =============================================================================
# Config
# =============================================================================

def config_from_json(d: dict[str, Any]) -> PackingConfig:
    """
    Build a PackingConfig, using the defaults for missing keys.

    Raises:
        ValueError: If a numeric field is not a number.
    """
    return PackingConfig(
        max_random_attempts=_int_field(
            d.get("max_random_attempts", constants.MAX_RANDOM_ATTEMPTS), "Max random attempts"),
        boundary_inset=_float_field(d.get("boundary_inset", constants.BOUNDARY_INSET), "Boundary inset"),
        margin_buffer=_float_field(d.get("margin_buffer", constants.MARGIN_BUFFER), "Margin buffer"),
        spacing_factor=_float_field(
            d.get("spacing_factor", constants.MIN_SPACING_FACTOR), "Spacing factor"),
        sample_batch_size=_int_field(
            d.get("sample_batch_size", constants.SAMPLE_BATCH_SIZE), "Sample batch size"),
        strict=bool(d.get("strict", False)),
        verify=bool(d.get("verify", False)),
    )


def config_to_json(config: PackingConfig) -> dict[str, Any]:
    """
    Serialize a PackingConfig to a dictionary.

    Only fields that differ from the defaults are written.
    """
    defaults = PackingConfig()
    result = {}
    for key in (
        "max_random_attempts", "boundary_inset", "margin_buffer",
        "spacing_factor", "sample_batch_size", "strict", "verify",
    ):
        value = getattr(config, key)
        if value != getattr(defaults, key):
            result[key] = value
    return result


# =============================================================================
# Bottles and layouts
# =============================================================================

def bottle_from_json(d: dict[str, Any]) -> Bottle:
    """
    Parse a Bottle definition from a dictionary.

    Raises:
        ValueError: If the size is missing or a kind is malformed.
    """
    if "size" not in d:
        raise ValueError("Bottle definition missing required 'size' field.")

    kinds = DEFAULT_KINDS
    if "kinds" in d:
        parsed = []
        for k in d["kinds"]:
            if not isinstance(k, dict) or "name" not in k or "quantity" not in k:
                raise ValueError(f"Sphere kind needs 'name' and 'quantity', got {k}")
            quantity = _int_field(k["quantity"], "Sphere quantity")
            if quantity < 0:
                raise ValueError(f"Sphere quantity must be non-negative, got {quantity}")
            parsed.append(SphereKind(name=str(k["name"]), quantity=quantity))
        kinds = tuple(parsed)

    w, h = _size_field(d["size"], "Bottle size")
    return Bottle(
        size=Size(w, h),
        corner_radius=_float_field(
            d.get("corner_radius", constants.DEFAULT_CORNER_RADIUS), "Corner radius"),
        sphere_radius=_float_field(
            d.get("sphere_radius", constants.DEFAULT_SPHERE_RADIUS), "Sphere radius"),
        kinds=kinds,
        config=config_from_json(d.get("config", {})),
    )


def load_bottle(path: str) -> Bottle:
    """Load a Bottle definition from a JSON file."""
    return bottle_from_json(load_json(path))


def placement_to_json(p: SpherePlacement) -> dict[str, Any]:
    """Serialize one sphere placement."""
    return {"id": p.id, "kind": p.kind, "position": [p.position.x, p.position.y]}


def layout_to_json(bottle: Bottle, placements: list[SpherePlacement],
                   segments_per_corner: int = 8) -> dict[str, Any]:
    """
    Serialize a populated bottle for the rendering side.

    Captured state includes the container geometry, its boundary outline and
    every sphere placement in spawn order.
    """
    return {
        "size": list(bottle.size),
        "corner_radius": bottle.corner_radius,
        "sphere_radius": bottle.sphere_radius,
        "boundary": _to_list(bottle.boundary_outline(segments_per_corner)),
        "spheres": [placement_to_json(p) for p in placements],
    }


def save_layout(bottle: Bottle, placements: list[SpherePlacement], path: str,
                indent: int = 2) -> None:
    """Save a populated bottle layout to a JSON file on disk."""
    data = layout_to_json(bottle, placements)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def _to_list(arr: Any) -> list:
    """Helper: Convert numpy array or tuple to a clean (nested) list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)


def _float_field(value: Any, field: str) -> float:
    """Helper: Parse a number, naming the field in the error."""
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number, got {value}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be a number, got {value}") from None


def _int_field(value: Any, field: str) -> int:
    """Helper: Parse a whole number (2 or 2.0, not 2.5), naming the field in the error."""
    number = _float_field(value, field)
    if not number.is_integer():
        raise ValueError(f"{field} must be an integer, got {value}")
    return int(number)


def _size_field(value: Any, field: str) -> tuple[float, float]:
    """Helper: Parse a [width, height] pair, naming the field in the error."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{field} must be [width, height], got {value}")
    return (_float_field(value[0], field), _float_field(value[1], field))
