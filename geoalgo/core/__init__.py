"""Geometry primitives: points, trajectories and box-wall distances."""

from .exceptions import GeoAlgoError, DimensionMismatch, DegenerateDirection
from .point import Point, INVALID_COORDINATE
from .trajectory import Trajectory
from .models import BoxBounds, DEFAULT_BOX_BOUNDS
from .box_wall import BoxWallDistance, OUTSIDE_SENTINEL, INSIDE_SENTINEL

__all__ = [
    "GeoAlgoError",
    "DimensionMismatch",
    "DegenerateDirection",
    "Point",
    "INVALID_COORDINATE",
    "Trajectory",
    "BoxBounds",
    "DEFAULT_BOX_BOUNDS",
    "BoxWallDistance",
    "OUTSIDE_SENTINEL",
    "INSIDE_SENTINEL",
]
