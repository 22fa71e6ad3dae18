"""
Axis reference geometry.

The endpoint of every axis at max_value is computed once per render and
consulted by the drag controller to keep a dragged vertex on its axis.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from spiderchart.edit.constants import AXIS_EPSILON
from spiderchart.geometry import RadialGeometry


@dataclass(frozen=True)
class AxisEndpoint:
    index: int
    name: str
    x: float
    y: float

    @property
    def is_vertical(self) -> bool:
        """Axes with a near-zero x extent are projected on y instead of x."""
        return abs(self.x) < AXIS_EPSILON


class AxisModel:
    """Read-only, index-keyed collection of AxisEndpoint."""

    def __init__(self, endpoints: Sequence[AxisEndpoint]):
        self._endpoints: Tuple[AxisEndpoint, ...] = tuple(endpoints)

    @classmethod
    def build(cls, axis_names: Sequence[str], geometry: RadialGeometry) -> 'AxisModel':
        endpoints: List[AxisEndpoint] = []
        for i, name in enumerate(axis_names):
            x, y = geometry.value_to_point(geometry.max_value, i)
            endpoints.append(AxisEndpoint(i, name, x, y))
        return cls(endpoints)

    def __getitem__(self, index: int) -> AxisEndpoint:
        return self._endpoints[index]

    def __len__(self) -> int:
        return len(self._endpoints)

    def __iter__(self) -> Iterator[AxisEndpoint]:
        return iter(self._endpoints)

    def label_position(self, index: int, ratio: float) -> Tuple[float, float]:
        endpoint = self._endpoints[index]
        return (endpoint.x * ratio, endpoint.y * ratio)
