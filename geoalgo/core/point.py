"""N-dimensional point / vector type.

A Point is a plain value type wrapping an owned, fixed-length float buffer.
Its dimension is set at construction and never changes. Every operation that
combines two points checks that both have the same dimension before touching
any coordinate, and raises DimensionMismatch otherwise.

Scalar multiplication and division are not checked: they apply to every
coordinate regardless of dimension.
"""

import math
import numbers
from typing import Iterator

import numpy as np

from .exceptions import DimensionMismatch

# Marks coordinates of a point that was sized but never filled in.
INVALID_COORDINATE = float(np.finfo(float).max)


class Point:
    """An n-dimensional point (or vector from the origin).

    Construction:
        Point()              -> dimension 0
        Point(n)             -> dimension n, all coordinates INVALID_COORDINATE
        Point([x, y, ...])   -> coordinates copied from any sequence or array
        Point(x, y)          -> 2D point
        Point(x, y, z)       -> 3D point

    Examples:
        >>> Point(0, 0, 0).distance(Point(3, 4, 0))
        5.0
        >>> Point(1, 2) + Point(3, 4)
        Point(4.0, 6.0)
    """

    __slots__ = ("_coords",)
    __hash__ = None
    # numpy operands on the left defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, *args):
        if not args:
            coords = np.empty(0, dtype=float)
        elif len(args) == 1:
            coords = _coords_from(args[0])
        elif len(args) in (2, 3):
            coords = np.array(args, dtype=float)
        else:
            raise TypeError(
                f"Point() takes a size, a coordinate sequence, or 2-3 coordinates; "
                f"got {len(args)} arguments"
            )
        self._coords = coords

    @property
    def dim(self) -> int:
        """Number of coordinates."""
        return self._coords.shape[0]

    def __len__(self) -> int:
        return self._coords.shape[0]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Point(self._coords[index])
        return float(self._coords[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._coords[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords.tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._coords, other._coords))

    def __repr__(self) -> str:
        return "Point(" + ", ".join(repr(v) for v in self._coords.tolist()) + ")"

    def copy(self) -> "Point":
        """Return an independent copy of this point."""
        return Point(self._coords)

    def __copy__(self) -> "Point":
        return self.copy()

    def __deepcopy__(self, memo) -> "Point":
        return self.copy()

    def to_array(self) -> np.ndarray:
        """Return the coordinates as a new numpy array."""
        return self._coords.copy()

    def tolist(self) -> list[float]:
        return self._coords.tolist()

    def is_valid(self) -> bool:
        """False if any coordinate still holds the INVALID_COORDINATE marker."""
        return not bool(np.any(self._coords == INVALID_COORDINATE))

    def compat(self, other) -> None:
        """Raise DimensionMismatch unless other has the same dimension."""
        other_dim = len(other)
        if self.dim != other_dim:
            raise DimensionMismatch(self.dim, other_dim)

    def squared_distance(self, other=None) -> float:
        """Squared distance to another point, or from the origin if omitted.

        Args:
            other: Point (or coordinate sequence) of the same dimension.

        Returns:
            Sum of per-axis squared differences.

        Raises:
            DimensionMismatch: If other has a different dimension.
        """
        if other is None:
            return float(np.dot(self._coords, self._coords))
        other = _as_point(other)
        self.compat(other)
        return _squared_distance_unchecked(self, other)

    def distance(self, other=None) -> float:
        """Euclidean distance to another point, or from the origin if omitted."""
        return math.sqrt(self.squared_distance(other))

    def dot_product(self, other) -> float:
        """Sum of pairwise coordinate products.

        Raises:
            DimensionMismatch: If other has a different dimension.
        """
        other = _as_point(other)
        self.compat(other)
        return float(np.dot(self._coords, other._coords))

    def __iadd__(self, other) -> "Point":
        if not _is_vector(other):
            return NotImplemented
        other = _as_point(other)
        self.compat(other)
        self._coords += other._coords
        return self

    def __isub__(self, other) -> "Point":
        if not _is_vector(other):
            return NotImplemented
        other = _as_point(other)
        self.compat(other)
        self._coords -= other._coords
        return self

    def __imul__(self, scalar: float) -> "Point":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self._coords *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Point":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self._coords /= scalar
        return self

    def __add__(self, other) -> "Point":
        if not _is_vector(other):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other) -> "Point":
        if not _is_vector(other):
            return NotImplemented
        result = _as_point(other)
        result += self
        return result

    def __sub__(self, other) -> "Point":
        if not _is_vector(other):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, other) -> "Point":
        if not _is_vector(other):
            return NotImplemented
        result = _as_point(other)
        result -= self
        return result

    def __mul__(self, other):
        # point * point is the dot product, point * scalar scales
        if _is_vector(other):
            return self.dot_product(other)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Point(self._coords * other)

    def __rmul__(self, other):
        if _is_vector(other):
            return self.dot_product(other)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Point(self._coords * other)

    def __truediv__(self, scalar: float) -> "Point":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Point(self._coords / scalar)

    def __neg__(self) -> "Point":
        return Point(-self._coords)


def _is_vector(value) -> bool:
    return isinstance(value, (Point, np.ndarray, list, tuple))


def _as_point(value) -> Point:
    """Return value as a Point, converting arrays, lists and tuples."""
    if isinstance(value, Point):
        return value
    if not _is_vector(value):
        raise TypeError(f"expected a Point or coordinate sequence, got {type(value).__name__}")
    return Point(value)


def _coords_from(value) -> np.ndarray:
    """Build the coordinate buffer for the single-argument constructor."""
    if isinstance(value, Point):
        return value._coords.copy()
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"Point dimension must be non-negative, got {value}")
        return np.full(int(value), INVALID_COORDINATE, dtype=float)
    if not isinstance(value, np.ndarray):
        value = list(value)
    coords = np.array(value, dtype=float)
    if coords.ndim != 1:
        raise ValueError(
            f"Point coordinates must be a flat sequence, got shape {coords.shape}"
        )
    return coords


# Unchecked fast path, for callers that already guarantee equal dimensions
# (Trajectory keeps all of its points at one dimension).


def _squared_distance_unchecked(a: Point, b: Point) -> float:
    diff = b._coords - a._coords
    return float(np.dot(diff, diff))


def _distance_unchecked(a: Point, b: Point) -> float:
    return math.sqrt(_squared_distance_unchecked(a, b))
