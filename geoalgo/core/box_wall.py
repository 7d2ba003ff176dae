"""Distances between points and the walls of an axis-aligned box.

The box is fixed by its lower and upper corners. Three queries are provided:

- distance_to_nearest_wall: for a point inside the box, the distance to the
  closest of the six walls.
- distance_to_wall_along_direction: for a point inside the box, how far a
  ray from that point travels before leaving the box.
- distance_to_box_from_outside: for a point outside the box, the distance to
  the walls on the first axis (x, then y, then z) that the point is outside of.

Queries whose precondition on box membership does not hold return -1 instead
of raising. Real distances are never negative.
"""

import math
from typing import Optional, Union

import numpy as np

from .exceptions import DegenerateDirection, DimensionMismatch
from .models import DEFAULT_BOX_BOUNDS, BoxBounds
from .point import Point

# Returned when a query needs the point inside the box and it is not.
OUTSIDE_SENTINEL = -1.0
# Returned by distance_to_box_from_outside when the point is inside the box.
INSIDE_SENTINEL = -1.0

PointLike = Union[Point, np.ndarray, list, tuple]


def _as_xyz(point: PointLike) -> np.ndarray:
    """Return the first three coordinates of point as a float array.

    Raises:
        DimensionMismatch: If point has fewer than three coordinates.
    """
    if isinstance(point, Point):
        coords = point.to_array()
    else:
        coords = np.array(point, dtype=float).reshape(-1)
    if coords.shape[0] < 3:
        raise DimensionMismatch(3, coords.shape[0])
    return coords[:3]


class BoxWallDistance:
    """Distance queries against the walls of an axis-aligned box.

    Examples:
        >>> box = BoxWallDistance()
        >>> box.distance_to_nearest_wall([128, 0, 500])
        116.5
        >>> box.distance_to_wall_along_direction([0, 0, 0], [1, 0, 0])
        256.35
    """

    def __init__(
        self,
        x_min: Optional[float] = None,
        x_max: Optional[float] = None,
        y_min: Optional[float] = None,
        y_max: Optional[float] = None,
        z_min: Optional[float] = None,
        z_max: Optional[float] = None,
    ):
        self._min = np.zeros(3)
        self._max = np.zeros(3)
        self.reset()

        explicit = (x_min, x_max, y_min, y_max, z_min, z_max)
        if any(v is not None for v in explicit):
            if any(v is None for v in explicit):
                raise TypeError("BoxWallDistance needs all six bounds or none")
            self.set_max(x_max, y_max, z_max)
            self.set_min(x_min, y_min, z_min)

    @classmethod
    def from_bounds(cls, bounds: BoxBounds) -> "BoxWallDistance":
        """Create a box from a BoxBounds configuration."""
        box = cls()
        box.set_min(*bounds.min_corner)
        box.set_max(*bounds.max_corner)
        return box

    def reset(self) -> None:
        """Restore the default box."""
        self._min[:] = DEFAULT_BOX_BOUNDS.min_corner
        self._max[:] = DEFAULT_BOX_BOUNDS.max_corner

    def set_min(self, x: float, y: float, z: float) -> None:
        """Set the lower corner. Ordering against the upper corner is not checked."""
        self._min[:] = (x, y, z)

    def set_max(self, x: float, y: float, z: float) -> None:
        """Set the upper corner. Ordering against the lower corner is not checked."""
        self._max[:] = (x, y, z)

    @property
    def min(self) -> np.ndarray:
        return self._min.copy()

    @property
    def max(self) -> np.ndarray:
        return self._max.copy()

    @property
    def bounds(self) -> BoxBounds:
        """Current corners as a BoxBounds."""
        x_min, y_min, z_min = self._min.tolist()
        x_max, y_max, z_max = self._max.tolist()
        return BoxBounds(
            x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max, z_min=z_min, z_max=z_max
        )

    def __repr__(self) -> str:
        return f"BoxWallDistance(min={self._min.tolist()}, max={self._max.tolist()})"

    def _inside(self, xyz: np.ndarray) -> bool:
        return not bool(np.any((xyz < self._min) | (self._max < xyz)))

    def contains(self, point: PointLike) -> bool:
        """True if point is inside the box or on its boundary."""
        return self._inside(_as_xyz(point))

    def distance_to_nearest_wall(self, point: PointLike) -> float:
        """Distance from a point inside the box to the closest wall.

        For each axis, takes the nearer of the two planes bounding that axis,
        then returns the smallest of the three.

        Args:
            point: At least three coordinates; only x, y, z are used.

        Returns:
            The distance, or -1 if the point is outside the box.
        """
        xyz = _as_xyz(point)
        if not self._inside(xyz):
            return OUTSIDE_SENTINEL

        per_axis = np.minimum(xyz - self._min, self._max - xyz)
        return float(per_axis.min())

    def distance_to_wall_along_direction(
        self,
        point: PointLike,
        direction: PointLike,
        forward: bool = True,
    ) -> float:
        """Distance travelled along a ray from point until it leaves the box.

        The direction is normalized first, and reversed when forward is False.
        For each axis the ray is intersected with the plane it is heading
        toward (the lower plane when the component is negative, the upper one
        otherwise). An axis whose component is exactly zero is never crossed
        and contributes infinity. The smallest of the three is the exit
        distance.

        Args:
            point: Ray origin, at least three coordinates.
            direction: Ray direction, at least three coordinates, any length.
            forward: Travel along direction if True, against it if False.

        Returns:
            The exit distance, or -1 if the point is outside the box.

        Raises:
            DegenerateDirection: If direction has zero length.
        """
        xyz = _as_xyz(point)
        dir_xyz = _as_xyz(direction)
        if not self._inside(xyz):
            return OUTSIDE_SENTINEL

        magnitude = math.hypot(*dir_xyz)
        if magnitude == 0:
            raise DegenerateDirection()

        dir_xyz = dir_xyz / magnitude
        if not forward:
            dir_xyz = -dir_xyz

        return min(self._exit_distance(axis, xyz[axis], dir_xyz[axis]) for axis in range(3))

    def _exit_distance(self, axis: int, coord: float, component: float) -> float:
        if component == 0:
            return math.inf
        if component < 0:
            return float((coord - self._min[axis]) / -component)
        return float((self._max[axis] - coord) / component)

    def distance_to_box_from_outside(self, point: PointLike) -> float:
        """Distance from a point outside the box to its walls.

        Only one axis is considered: the first of x, y that the point lies
        outside of, falling back to z. The result is the smaller distance to
        that axis's two planes. For points outside on several axes this is not
        the true distance to the box.

        Returns:
            The distance, or -1 if the point is strictly inside the box.
        """
        xyz = _as_xyz(point)
        strictly_inside = np.all((self._min < xyz) & (xyz < self._max))
        if strictly_inside:
            return INSIDE_SENTINEL

        for axis in (0, 1):
            if xyz[axis] > self._max[axis] or xyz[axis] < self._min[axis]:
                return self._nearer_plane_distance(axis, xyz[axis])
        return self._nearer_plane_distance(2, xyz[2])

    def _nearer_plane_distance(self, axis: int, coord: float) -> float:
        return float(min(abs(coord - self._min[axis]), abs(coord - self._max[axis])))
