"""Configuration models for the box-wall distance queries."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class BoxBounds:
    """Lower and upper corners of an axis-aligned box.

    The defaults describe the detector active volume (in cm) used as the
    standard box: roughly 256 x 233 x 1037, centered on y = 0.

    Attributes:
        x_min, x_max: Bounds along x.
        y_min, y_max: Bounds along y.
        z_min, z_max: Bounds along z.
        units: Length unit of the coordinates (informational only).
    """

    x_min: float = 0.0
    x_max: float = 256.35
    y_min: float = -116.5
    y_max: float = 116.5
    z_min: float = 0.0
    z_max: float = 1036.8
    units: str = "cm"

    @property
    def min_corner(self) -> np.ndarray:
        """Lower corner (x_min, y_min, z_min)."""
        return np.array([self.x_min, self.y_min, self.z_min], dtype=float)

    @property
    def max_corner(self) -> np.ndarray:
        """Upper corner (x_max, y_max, z_max)."""
        return np.array([self.x_max, self.y_max, self.z_max], dtype=float)

    @property
    def size(self) -> np.ndarray:
        """Edge lengths along x, y and z."""
        return self.max_corner - self.min_corner

    @classmethod
    def from_json_file(cls, path: str | Path) -> BoxBounds:
        """Load box bounds from a JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        bounds = cls.from_dict(data)
        logger.debug("Loaded box bounds from %s: %s", path, bounds)
        return bounds

    @classmethod
    def from_dict(cls, data: dict) -> BoxBounds:
        """Create box bounds from a dictionary.

        Accepts either corner lists or the six flat keys, optionally nested
        under a "box" key:

            {"box": {"min": [0, -116.5, 0], "max": [256.35, 116.5, 1036.8]}}
            {"x_min": 0, "x_max": 256.35, ...}

        Keys that are not given keep their default values.
        """
        box = data.get("box", data)
        if not isinstance(box, dict):
            raise ValueError(f"Box configuration must be a mapping, got {type(box).__name__}")

        defaults = cls()
        if "min" in box or "max" in box:
            x_min, y_min, z_min = _corner(box, "min", defaults.min_corner)
            x_max, y_max, z_max = _corner(box, "max", defaults.max_corner)
        else:
            x_min = float(box.get("x_min", defaults.x_min))
            x_max = float(box.get("x_max", defaults.x_max))
            y_min = float(box.get("y_min", defaults.y_min))
            y_max = float(box.get("y_max", defaults.y_max))
            z_min = float(box.get("z_min", defaults.z_min))
            z_max = float(box.get("z_max", defaults.z_max))

        bounds = cls(
            x_min=x_min,
            x_max=x_max,
            y_min=y_min,
            y_max=y_max,
            z_min=z_min,
            z_max=z_max,
            units=data.get("units", box.get("units", defaults.units)),
        )

        if np.any(bounds.min_corner > bounds.max_corner):
            # Not rejected: ordering is the caller's responsibility.
            logger.warning("Box min corner exceeds max corner on some axis: %s", bounds)

        return bounds

    def to_dict(self) -> dict:
        """Convert box bounds to a dictionary."""
        return {
            "units": self.units,
            "box": {
                "min": self.min_corner.tolist(),
                "max": self.max_corner.tolist(),
            },
        }


def _corner(box: dict, key: str, default: np.ndarray) -> tuple[float, float, float]:
    value: Optional[list] = box.get(key)
    if value is None:
        return tuple(float(v) for v in default)
    if len(value) != 3:
        raise ValueError(f"Box '{key}' corner must have 3 coordinates, got {len(value)}")
    return tuple(float(v) for v in value)


DEFAULT_BOX_BOUNDS = BoxBounds()
