"""Box-wall queries driven by a run configuration file.

These functions load the detector box from a JSON run configuration once,
then answer distance queries against it. They are meant for analysis code
that does not want to carry a BoxWallDistance instance around.

Example:
    ```python
    from geoalgo.runconfig import distance_to_nearest_wall, get_containment_details

    if distance_to_nearest_wall(shower_start) > 10:
        ...

    details = get_containment_details(shower_start, shower_direction)
    print(details["distance_along_direction"])
    ```
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.box_wall import BoxWallDistance, PointLike
from ..core.models import DEFAULT_BOX_BOUNDS, BoxBounds

logger = logging.getLogger(__name__)

# Default config path (can be overridden)
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "default_box.json"

# Cached bounds to avoid reloading on every call
_cached_bounds: Optional[BoxBounds] = None
_cached_config_path: Optional[str] = None


def load_bounds(config_path: Optional[Union[str, Path]] = None) -> BoxBounds:
    """Load box bounds, with caching for performance.

    Args:
        config_path: Path to config file. If None, uses the default file, or
            the built-in default box when that file is not present.

    Returns:
        BoxBounds object.
    """
    global _cached_bounds, _cached_config_path

    use_default = config_path is None
    if use_default:
        config_path = DEFAULT_CONFIG_PATH

    config_path_str = str(config_path)

    # Return cached bounds if path matches
    if _cached_bounds is not None and _cached_config_path == config_path_str:
        return _cached_bounds

    if use_default and not Path(config_path).exists():
        logger.info("No config at %s, using built-in default box", config_path)
        bounds = DEFAULT_BOX_BOUNDS
    else:
        bounds = BoxBounds.from_json_file(config_path)
        logger.info("Loaded box configuration from %s", config_path)

    _cached_bounds = bounds
    _cached_config_path = config_path_str

    return _cached_bounds


def load_box(config_path: Optional[Union[str, Path]] = None) -> BoxWallDistance:
    """Return a new BoxWallDistance configured from the run configuration.

    Each call returns a separate instance, so callers may reconfigure it
    without affecting anyone else.
    """
    return BoxWallDistance.from_bounds(load_bounds(config_path))


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if you've modified the config file and want to reload it.
    """
    global _cached_bounds, _cached_config_path
    _cached_bounds = None
    _cached_config_path = None
    logger.debug("Box configuration cache cleared")


def distance_to_nearest_wall(
    point: PointLike,
    config_path: Optional[Union[str, Path]] = None,
) -> float:
    """Distance from point to the closest wall of the configured box (-1 if outside)."""
    return load_box(config_path).distance_to_nearest_wall(point)


def distance_to_wall_along_direction(
    point: PointLike,
    direction: PointLike,
    forward: bool = True,
    config_path: Optional[Union[str, Path]] = None,
) -> float:
    """Exit distance of a ray from point along direction (-1 if point is outside)."""
    return load_box(config_path).distance_to_wall_along_direction(point, direction, forward)


def distance_to_box_from_outside(
    point: PointLike,
    config_path: Optional[Union[str, Path]] = None,
) -> float:
    """Distance from an outside point to the configured box (-1 if inside)."""
    return load_box(config_path).distance_to_box_from_outside(point)


def get_containment_details(
    point: PointLike,
    direction: Optional[PointLike] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> dict:
    """Get every box-wall quantity for a point in one call.

    Args:
        point: Point to test (at least three coordinates).
        direction: Optional direction; when given, the forward and backward
            exit distances along it are included.
        config_path: Optional path to config file.

    Returns:
        Dictionary with:
        - inside: Whether the point is inside the box (boundary included)
        - distance_to_nearest_wall: Distance to the closest wall, or -1
        - distance_from_outside: Distance to the box from outside, or -1
        - distance_along_direction: Forward exit distance (only with direction)
        - distance_against_direction: Backward exit distance (only with direction)
        - box_min / box_max: Box corners as lists

    Example:
        >>> details = get_containment_details([128, 0, 500], [0, 1, 0])
        >>> details["distance_along_direction"]
        116.5
    """
    box = load_box(config_path)

    details = {
        "inside": box.contains(point),
        "distance_to_nearest_wall": box.distance_to_nearest_wall(point),
        "distance_from_outside": box.distance_to_box_from_outside(point),
        "box_min": box.min.tolist(),
        "box_max": box.max.tolist(),
    }

    if direction is not None:
        details["distance_along_direction"] = box.distance_to_wall_along_direction(
            point, direction, forward=True
        )
        details["distance_against_direction"] = box.distance_to_wall_along_direction(
            point, direction, forward=False
        )

    return details
