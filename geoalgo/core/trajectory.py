"""Ordered, dimension-uniform sequence of points (a piecewise-linear path)."""

import numbers
from typing import Iterable, Iterator, Optional, Union

import numpy as np

from .exceptions import DimensionMismatch
from .point import Point, _distance_unchecked


def _to_point(value) -> Point:
    """Copy a Point, or build one from a raw coordinate sequence."""
    if isinstance(value, Point):
        return value.copy()
    if isinstance(value, numbers.Number):
        raise TypeError(
            f"Trajectory elements must be points or coordinate sequences, got {value!r}"
        )
    return Point(value)


class Trajectory:
    """A piecewise-linear path through points of one fixed dimension.

    The dimension is set by the first point added; every later point must
    match it. The trajectory stores its own copies of the points.

    Construction:
        Trajectory()                     -> empty
        Trajectory(npoints, ndimension)  -> npoints invalid points of ndimension
        Trajectory(points)               -> from Points or coordinate sequences

    Examples:
        >>> Trajectory([(0, 0, 0), (3, 4, 0), (3, 4, 5)]).length()
        10.0
    """

    def __init__(self, *args):
        self._points: list[Point] = []
        if not args:
            return
        if len(args) == 1:
            self.extend(args[0])
        elif len(args) == 2:
            npoints, ndimension = args
            if not all(isinstance(n, (int, np.integer)) for n in args):
                raise TypeError(
                    "Trajectory(npoints, ndimension) expects two integers; "
                    "pass points as a single sequence"
                )
            self._points = [Point(int(ndimension)) for _ in range(int(npoints))]
        else:
            raise TypeError(f"Trajectory() takes at most 2 arguments, got {len(args)}")

    @property
    def dim(self) -> Optional[int]:
        """Dimension of the points, or None while the trajectory is empty."""
        if not self._points:
            return None
        return self._points[0].dim

    def compat(self, other: Union[Point, "Trajectory"]) -> None:
        """Raise DimensionMismatch if other cannot share this trajectory's dimension.

        An empty trajectory (on either side) is compatible with anything.
        """
        if not self._points:
            return
        if isinstance(other, Trajectory):
            if not other._points:
                return
            other_dim = other.dim
        else:
            other_dim = len(other)
        if self.dim != other_dim:
            raise DimensionMismatch(self.dim, other_dim)

    def append(self, point) -> None:
        """Append a copy of point, checking its dimension.

        Raises:
            DimensionMismatch: If point's dimension differs from the trajectory's.
        """
        point = _to_point(point)
        self.compat(point)
        self._points.append(point)

    def extend(self, points: Iterable) -> None:
        for point in points:
            self.append(point)

    def length(self) -> float:
        """Sum of the distances between consecutive points.

        Returns 0 for trajectories with fewer than two points.
        """
        if len(self._points) < 2:
            return 0.0

        length = 0.0
        for start, end in zip(self._points[:-1], self._points[1:]):
            length += _distance_unchecked(start, end)
        return length

    def to_array(self) -> np.ndarray:
        """Return the points as an (npoints, dim) array."""
        if not self._points:
            return np.empty((0, 0))
        return np.array([p.to_array() for p in self._points])

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Trajectory(self._points[index])
        return self._points[index]

    def __setitem__(self, index: int, value) -> None:
        point = _to_point(value)
        if len(self._points) > 1:
            self.compat(point)
        self._points[index] = point

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Trajectory):
            return NotImplemented
        return self._points == other._points

    __hash__ = None

    def __repr__(self) -> str:
        return f"Trajectory({[p.tolist() for p in self._points]!r})"

    def __str__(self) -> str:
        lines = [f"Trajectory with {len(self._points)} points"]
        lines.extend(f"  {p!r}" for p in self._points)
        return "\n".join(lines)
