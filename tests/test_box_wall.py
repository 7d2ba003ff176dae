"""Tests for the box-wall distance queries."""

import math

import numpy as np
import pytest

from geoalgo.core.box_wall import BoxWallDistance, INSIDE_SENTINEL, OUTSIDE_SENTINEL
from geoalgo.core.exceptions import DegenerateDirection, DimensionMismatch
from geoalgo.core.models import BoxBounds
from geoalgo.core.point import Point


@pytest.fixture
def box() -> BoxWallDistance:
    """Box with the default detector bounds."""
    return BoxWallDistance()


@pytest.fixture
def unit_box() -> BoxWallDistance:
    """A 10 x 10 x 10 box at the origin, easier to reason about."""
    return BoxWallDistance(0, 10, 0, 10, 0, 10)


class TestConfiguration:
    """Tests for the box configuration."""

    def test_default_bounds(self, box):
        np.testing.assert_array_almost_equal(box.min, [0.0, -116.5, 0.0])
        np.testing.assert_array_almost_equal(box.max, [256.35, 116.5, 1036.8])

    def test_explicit_constructor(self, unit_box):
        np.testing.assert_array_equal(unit_box.min, [0, 0, 0])
        np.testing.assert_array_equal(unit_box.max, [10, 10, 10])

    def test_partial_bounds_rejected(self):
        with pytest.raises(TypeError):
            BoxWallDistance(0, 10)

    def test_setters_and_reset(self, box):
        box.set_min(-1, -2, -3)
        box.set_max(1, 2, 3)
        np.testing.assert_array_equal(box.min, [-1, -2, -3])
        np.testing.assert_array_equal(box.max, [1, 2, 3])
        box.reset()
        np.testing.assert_array_almost_equal(box.max, [256.35, 116.5, 1036.8])

    def test_setters_do_not_validate_order(self, box):
        """Inverted corners are stored as given."""
        box.set_min(10, 10, 10)
        box.set_max(0, 0, 0)
        np.testing.assert_array_equal(box.min, [10, 10, 10])

    def test_corner_properties_are_copies(self, box):
        corner = box.min
        corner[0] = 1000
        assert box.min[0] == 0.0

    def test_from_bounds_round_trip(self):
        bounds = BoxBounds(x_min=1, x_max=2, y_min=3, y_max=4, z_min=5, z_max=6)
        box = BoxWallDistance.from_bounds(bounds)
        assert box.bounds == bounds

    def test_contains(self, unit_box):
        assert unit_box.contains([5, 5, 5])
        assert unit_box.contains([0, 10, 5])  # boundary counts as inside
        assert not unit_box.contains([-0.1, 5, 5])

    def test_short_point_rejected(self, box):
        with pytest.raises(DimensionMismatch):
            box.contains([1, 2])

    def test_extra_coordinates_ignored(self, unit_box):
        assert unit_box.distance_to_nearest_wall([5, 5, 5, 999]) == pytest.approx(5.0)


class TestDistanceToNearestWall:
    """Tests for distance_to_nearest_wall."""

    def test_default_box_interior_point(self, box):
        """Nearest wall for (128, 0, 500) is one of the y walls."""
        expected = min(128, 256.35 - 128, 116.5 - 0, 116.5 - 0, 500, 1036.8 - 500)
        assert box.distance_to_nearest_wall([128, 0, 500]) == pytest.approx(expected)
        assert box.distance_to_nearest_wall([128, 0, 500]) == pytest.approx(116.5)

    def test_outside_on_x_returns_sentinel(self, box):
        assert box.distance_to_nearest_wall([-5, 0, 500]) == -1
        assert box.distance_to_nearest_wall([-5, 0, 500]) == OUTSIDE_SENTINEL

    def test_outside_on_each_axis(self, unit_box):
        for point in ([11, 5, 5], [5, -1, 5], [5, 5, 10.5]):
            assert unit_box.distance_to_nearest_wall(point) == -1

    def test_on_boundary_is_zero(self, unit_box):
        assert unit_box.distance_to_nearest_wall([0, 5, 5]) == 0.0
        assert unit_box.distance_to_nearest_wall([5, 5, 10]) == 0.0

    def test_nearer_of_two_planes(self, unit_box):
        assert unit_box.distance_to_nearest_wall([8, 5, 5]) == pytest.approx(2.0)
        assert unit_box.distance_to_nearest_wall([5, 1, 5]) == pytest.approx(1.0)

    def test_closest_face_not_corner_distance(self, unit_box):
        """Near a corner the answer is the closest face, not the corner distance."""
        assert unit_box.distance_to_nearest_wall([1, 1, 1]) == pytest.approx(1.0)

    def test_accepts_point(self, box):
        assert box.distance_to_nearest_wall(Point(128, 0, 500)) == pytest.approx(116.5)

    def test_idempotent(self, box):
        """Repeated queries against an unchanged box give identical results."""
        queries = [
            lambda: box.distance_to_nearest_wall([100, 20, 300]),
            lambda: box.distance_to_wall_along_direction([100, 20, 300], [0.3, -0.2, 1.0]),
            lambda: box.distance_to_wall_along_direction(
                [100, 20, 300], [0.3, -0.2, 1.0], forward=False
            ),
            lambda: box.distance_to_box_from_outside([300, 20, 300]),
            lambda: box.distance_to_box_from_outside([100, 20, 300]),
        ]
        for query in queries:
            results = {query() for _ in range(5)}
            assert len(results) == 1


class TestDistanceToWallAlongDirection:
    """Tests for distance_to_wall_along_direction."""

    def test_forward_along_x_from_origin(self, box):
        assert box.distance_to_wall_along_direction(
            [0, 0, 0], [1, 0, 0], forward=True
        ) == pytest.approx(256.35)

    def test_backward_along_x_from_origin(self, box):
        """Reversed direction points straight into the x wall the point sits on."""
        assert box.distance_to_wall_along_direction([0, 0, 0], [1, 0, 0], forward=False) == 0

    def test_direction_is_normalized(self, unit_box):
        short = unit_box.distance_to_wall_along_direction([2, 5, 5], [0.5, 0, 0])
        long = unit_box.distance_to_wall_along_direction([2, 5, 5], [50, 0, 0])
        assert short == pytest.approx(8.0)
        assert long == pytest.approx(8.0)

    def test_each_axis_uses_its_own_bounds(self, unit_box):
        assert unit_box.distance_to_wall_along_direction([5, 3, 5], [0, 1, 0]) == pytest.approx(7.0)
        assert unit_box.distance_to_wall_along_direction([5, 3, 5], [0, -1, 0]) == pytest.approx(3.0)
        assert unit_box.distance_to_wall_along_direction([5, 5, 9], [0, 0, 1]) == pytest.approx(1.0)
        assert unit_box.distance_to_wall_along_direction([5, 5, 9], [0, 0, -1]) == pytest.approx(9.0)

    def test_y_exit_in_default_box(self, box):
        """The y walls are at +-116.5 and are hit from inside along y."""
        assert box.distance_to_wall_along_direction([128, 0, 500], [0, 1, 0]) == pytest.approx(116.5)
        assert box.distance_to_wall_along_direction([128, 100, 500], [0, -1, 0]) == pytest.approx(216.5)

    def test_diagonal_exit(self, unit_box):
        """A 45 degree ray exits through whichever wall comes first."""
        d = unit_box.distance_to_wall_along_direction([5, 8, 5], [1, 1, 0])
        assert d == pytest.approx(2.0 * math.sqrt(2))

    def test_zero_component_axis_never_limits(self, unit_box):
        """Motion parallel to a pair of walls is limited only by the other axes."""
        assert unit_box.distance_to_wall_along_direction([5, 5, 5], [1, 0, 0]) == pytest.approx(5.0)

    def test_exit_distance_leaves_box(self, unit_box):
        """Travelling the exit distance lands on the boundary, not beyond."""
        rng = np.random.default_rng(3)
        for _ in range(50):
            start = rng.uniform(0.5, 9.5, 3)
            direction = rng.normal(size=3)
            d = unit_box.distance_to_wall_along_direction(start, direction)
            end = start + d * direction / np.linalg.norm(direction)
            gap_to_walls = np.minimum(end - unit_box.min, unit_box.max - end)
            assert gap_to_walls.min() == pytest.approx(0.0, abs=1e-9)
            assert gap_to_walls.min() > -1e-9

    def test_outside_returns_sentinel(self, box):
        assert box.distance_to_wall_along_direction([-1, 0, 0], [1, 0, 0]) == OUTSIDE_SENTINEL

    def test_outside_checked_before_direction(self, box):
        """An outside point yields -1 even with a zero direction."""
        assert box.distance_to_wall_along_direction([-1, 0, 0], [0, 0, 0]) == -1

    def test_zero_direction_raises(self, box):
        with pytest.raises(DegenerateDirection):
            box.distance_to_wall_along_direction([10, 0, 10], [0, 0, 0])

    def test_zero_direction_is_a_value_error(self, box):
        with pytest.raises(ValueError):
            box.distance_to_wall_along_direction([10, 0, 10], [0, 0, 0])

    def test_short_direction_rejected(self, box):
        with pytest.raises(DimensionMismatch):
            box.distance_to_wall_along_direction([10, 0, 10], [1, 0])

    def test_huge_direction_is_normalized(self, unit_box):
        """Very long direction vectors do not overflow while normalizing."""
        d = unit_box.distance_to_wall_along_direction([2, 5, 5], [1e200, 0, 0])
        assert d == pytest.approx(8.0)
        d = unit_box.distance_to_wall_along_direction([2, 5, 5], [1e200, 1e200, 0])
        assert d == pytest.approx(5.0 * math.sqrt(2))

    def test_tiny_direction_is_normalized(self, unit_box):
        """Very short but nonzero direction vectors are still usable."""
        d = unit_box.distance_to_wall_along_direction([2, 5, 5], [1e-200, 0, 0])
        assert d == pytest.approx(8.0)
        d = unit_box.distance_to_wall_along_direction([2, 5, 5], [1e-200, 0, 0], forward=False)
        assert d == pytest.approx(2.0)

    def test_accepts_points(self, unit_box):
        d = unit_box.distance_to_wall_along_direction(Point(5, 5, 5), Point(0, 0, 2))
        assert d == pytest.approx(5.0)


class TestDistanceToBoxFromOutside:
    """Tests for distance_to_box_from_outside."""

    def test_outside_on_x(self, box):
        assert box.distance_to_box_from_outside([-10, 0, 500]) == pytest.approx(10.0)

    def test_outside_beyond_max(self, unit_box):
        assert unit_box.distance_to_box_from_outside([13, 5, 5]) == pytest.approx(3.0)
        assert unit_box.distance_to_box_from_outside([5, 12, 5]) == pytest.approx(2.0)
        assert unit_box.distance_to_box_from_outside([5, 5, -4]) == pytest.approx(4.0)

    def test_strictly_inside_returns_sentinel(self, box):
        assert box.distance_to_box_from_outside([128, 0, 500]) == INSIDE_SENTINEL
        assert box.distance_to_box_from_outside([128, 0, 500]) == -1

    def test_x_has_priority_over_other_axes(self, unit_box):
        """Outside on x and z: only x is considered, even though z is farther.

        This is not the true distance to the box (that would be sqrt(1 + 25)),
        but the first out-of-range axis decides the answer.
        """
        assert unit_box.distance_to_box_from_outside([11, 5, 15]) == pytest.approx(1.0)

    def test_y_has_priority_over_z(self, unit_box):
        """Outside on y and z: the y distance is returned even though z is nearer."""
        assert unit_box.distance_to_box_from_outside([5, 20, 10.5]) == pytest.approx(10.0)

    def test_point_on_face_falls_back_to_z(self, unit_box):
        """A point lying on an x face is not strictly inside, and is not
        outside on x or y, so the z plane distances are returned."""
        assert unit_box.distance_to_box_from_outside([0, 5, 3]) == pytest.approx(3.0)

    def test_point_on_z_face_is_zero(self, unit_box):
        assert unit_box.distance_to_box_from_outside([5, 5, 10]) == 0.0
