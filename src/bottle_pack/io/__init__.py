# MIT License (see LICENSE)
"""
Input/Output utilities for bottle layouts.

This subpackage provides:
    - Request and config parsing from JSON documents.
    - Bottle definitions loaded from JSON files.
    - Layout export: populated bottles saved for the rendering side.

Typical usage:
    from bottle_pack.io import load_bottle, save_layout

    bottle = load_bottle("bottle.json")
    save_layout(bottle, bottle.populate(rng=7), "layout.json")
"""
from .json_io import (
    load_json,
    load_request,
    load_bottle,
    save_layout,
    request_from_json,
    request_to_json,
    config_from_json,
    config_to_json,
    bottle_from_json,
    layout_to_json,
    placement_to_json,
)

__all__ = [
    # Loading
    "load_json",
    "load_request",
    "load_bottle",
    # Saving
    "save_layout",
    # Serialization
    "request_from_json",
    "request_to_json",
    "config_from_json",
    "config_to_json",
    "bottle_from_json",
    "layout_to_json",
    "placement_to_json",
]
