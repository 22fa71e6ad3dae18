import math

import pytest

from spiderchart.geometry import (
    RadialGeometry,
    outer_radius_for,
    point_in_polygon,
    polygon_path,
)


@pytest.fixture
def geometry():
    return RadialGeometry(axis_count=5, max_value=1.0, outer_radius=150)


def test_outer_radius_uses_smaller_side():
    assert outer_radius_for(300, 300) == 150
    assert outer_radius_for(400, 200) == 100


def test_value_to_radius_is_linear_and_monotonic(geometry):
    assert geometry.value_to_radius(0) == 0
    assert geometry.value_to_radius(1.0) == 150
    values = [0, 0.1, 0.25, 0.5, 0.75, 1.0]
    radii = [geometry.value_to_radius(v) for v in values]
    assert radii == sorted(radii)
    assert len(set(radii)) == len(radii)


def test_radius_to_value_inverts_value_to_radius(geometry):
    for value in (0, 0.2, 0.5, 0.9, 1.0):
        assert geometry.radius_to_value(geometry.value_to_radius(value)) == pytest.approx(value)


def test_axis_angles_are_evenly_spaced():
    for n in (3, 5, 8):
        g = RadialGeometry(n, 1.0, 100)
        step = 2 * math.pi / n
        for i in range(n):
            diff = (g.axis_angle((i + 1) % n) - g.axis_angle(i)) % (2 * math.pi)
            assert diff == pytest.approx(step)


def test_axis_angles_are_normalized():
    g = RadialGeometry(6, 1.0, 100)
    angles = [g.axis_angle(i) for i in range(6)]
    assert all(0 <= a < 2 * math.pi for a in angles)
    assert angles[0] == pytest.approx(3 * math.pi / 2)
    assert angles[2] == pytest.approx(math.pi / 6)


def test_axis_zero_points_up(geometry):
    x, y = geometry.value_to_point(1.0, 0)
    assert x == pytest.approx(0, abs=1e-9)
    assert y == pytest.approx(-150)


def test_axes_proceed_clockwise():
    g = RadialGeometry(4, 1.0, 100)
    # In screen coordinates, axis 1 of 4 points right and axis 2 points down
    assert g.value_to_point(1.0, 1) == pytest.approx((100, 0), abs=1e-9)
    assert g.value_to_point(1.0, 2) == pytest.approx((0, 100), abs=1e-9)


def test_model_to_polygon_has_one_point_per_axis(geometry):
    model = [0.1, 0.2, 0.3, 0.4, 0.5]
    points = geometry.model_to_polygon(model)
    assert len(points) == 5
    for i, (x, y) in enumerate(points):
        r = geometry.value_to_radius(model[i])
        angle = geometry.axis_angle(i)
        assert x == pytest.approx(r * math.cos(angle))
        assert y == pytest.approx(r * math.sin(angle))


def test_background_rings_ordered_outer_to_inner(geometry):
    rings = geometry.background_rings(4)
    assert [r.level for r in rings] == [4, 3, 2, 1]
    assert [r.value for r in rings] == pytest.approx([1.0, 0.75, 0.5, 0.25])
    for ring in rings:
        assert len(ring.points) == 5
        for x, y in ring.points:
            assert math.hypot(x, y) == pytest.approx(geometry.value_to_radius(ring.value))


def test_level_label_positions_run_up_axis_zero(geometry):
    labels = geometry.level_label_positions(5)
    assert [level for level, _, _ in labels] == [5, 4, 3, 2, 1]
    assert labels[0][2] == pytest.approx(-150)
    assert labels[-1][1] == pytest.approx(0.2)


def test_polygon_path_is_closed():
    path = polygon_path([(0, -10), (10, 0), (0, 10)])
    assert path == "M0.000,-10.000L10.000,0.000L0.000,10.000Z"
    assert polygon_path([]) == ""


def test_point_in_polygon():
    square = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
    assert point_in_polygon((0, 0), square)
    assert point_in_polygon((0.9, -0.5), square)
    assert not point_in_polygon((1.5, 0), square)
    assert not point_in_polygon((0, -2), square)
