"""Run-configuration helpers for box-wall distance queries."""

from .service import (
    clear_config_cache,
    distance_to_box_from_outside,
    distance_to_nearest_wall,
    distance_to_wall_along_direction,
    get_containment_details,
    load_bounds,
    load_box,
)

__all__ = [
    "clear_config_cache",
    "distance_to_box_from_outside",
    "distance_to_nearest_wall",
    "distance_to_wall_along_direction",
    "get_containment_details",
    "load_bounds",
    "load_box",
]
