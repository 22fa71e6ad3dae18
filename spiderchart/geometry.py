"""
Pure geometry for the spider chart.

Coordinate System (SVG):
- Origin at the chart center, Y increases downward
- Axis 0 points up (angle -pi/2), axes proceed clockwise

NO UI imports - all functions are pure and deterministic.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Ring:
    """Background reference polygon at a fixed value level."""
    level: int
    value: float
    points: List[Point]


def outer_radius_for(w: float, h: float) -> float:
    """Radius of the outermost ring for a chart area of w x h."""
    return min(w / 2, h / 2)


class RadialGeometry:
    """
    Linear radial scale shared by every model and every background ring.

    Maps values in [0, max_value] to radii in [0, outer_radius] and axis
    indexes to angles.
    """

    def __init__(self, axis_count: int, max_value: float, outer_radius: float):
        if axis_count < 1:
            raise ValueError("a spider chart needs at least one axis")
        self.axis_count = axis_count
        self.max_value = max_value
        self.outer_radius = outer_radius
        self.angle_slice = math.pi * 2 / axis_count

    def value_to_radius(self, value: float) -> float:
        return value / self.max_value * self.outer_radius

    def radius_to_value(self, radius: float) -> float:
        return radius / self.outer_radius * self.max_value

    def axis_angle(self, index: int) -> float:
        """Angle of axis `index` in [0, 2pi); axis 0 points up in screen coordinates."""
        return (index * self.angle_slice - math.pi / 2) % (2 * math.pi)

    def value_to_point(self, value: float, axis_index: int) -> Point:
        r = self.value_to_radius(value)
        angle = self.axis_angle(axis_index)
        return (r * math.cos(angle), r * math.sin(angle))

    def model_to_polygon(self, model: Sequence[float]) -> List[Point]:
        """One point per axis; the last point implicitly connects back to the first."""
        return [self.value_to_point(value, i) for i, value in enumerate(model)]

    def background_rings(self, level_count: int) -> List[Ring]:
        """Rings ordered outer to inner, ring k at max_value * k / level_count."""
        rings = []
        for level in range(level_count, 0, -1):
            value = self.max_value * level / level_count
            rings.append(Ring(level, value, self.model_to_polygon([value] * self.axis_count)))
        return rings

    def level_label_positions(self, level_count: int) -> List[Tuple[int, float, float]]:
        """(level, value, y) anchors for the level labels drawn along axis 0, outer to inner."""
        return [
            (level, self.max_value * level / level_count, -level * self.outer_radius / level_count)
            for level in range(level_count, 0, -1)
        ]


def polygon_path(points: Sequence[Point]) -> str:
    """Closed SVG path data for a polygon ("linear-closed" interpolation)."""
    if not points:
        return ""
    head = f"M{points[0][0]:.3f},{points[0][1]:.3f}"
    tail = "".join(f"L{x:.3f},{y:.3f}" for x, y in points[1:])
    return f"{head}{tail}Z"


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting test."""
    x, y = point
    inside = False
    n = len(polygon)
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        if (y1 > y) != (y2 > y):
            x_cross = x1 + (y - y1) * (x2 - x1) / (y2 - y1)
            if x < x_cross:
                inside = not inside
    return inside


def distance(a: Point, b: Point) -> float:
    return math.sqrt((a[0] - b[0])**2 + (a[1] - b[1])**2)
