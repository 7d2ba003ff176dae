"""Exceptions raised by the geometry primitives."""


class GeoAlgoError(Exception):
    """Base class for all geometry errors."""


class DimensionMismatch(GeoAlgoError, ValueError):
    """Raised when two operands do not have the same number of coordinates.

    Attributes:
        expected: Dimension of the left-hand operand (or the required size).
        actual: Dimension of the operand that was rejected.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"size mismatch: {expected} != {actual}")


class DegenerateDirection(GeoAlgoError, ValueError):
    """Raised when a direction vector has zero length and cannot be normalized."""

    def __init__(self, message: str = "Direction vector magnitude is 0"):
        super().__init__(message)
