"""
Drag Controller - Single writer of the chart's data matrix.

A drag gesture is scoped to one vertex, one (model_index, axis_index) pair.
Every pointer delta is projected onto the vertex's axis, clamped to the
[0, max_value] segment, converted back to a data value and written into the
matrix. Only the last model of the matrix is editable; gestures on any other
model are no-ops.

The gesture keeps the vertex's current screen position in memory; the
rendered scene is a projection of it and is never read back.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from spiderchart.edit.constants import VALUE_PRECISION
from spiderchart.geometry import RadialGeometry

if TYPE_CHECKING:
    from spiderchart.axes import AxisEndpoint, AxisModel

logger = logging.getLogger(__name__)


@dataclass
class DragGesture:
    """State of one in-progress drag, created on start and discarded on end."""
    model_index: int
    axis_index: int
    origin_point: Tuple[float, float]
    current_point: Tuple[float, float]
    value: float


@dataclass(frozen=True)
class DragStep:
    """Result of constraining one pointer delta to an axis."""
    x: float
    y: float
    value: float


def _clamp_to_segment(new: float, limit: float) -> float:
    if new * limit <= 0:
        return 0.0
    elif abs(new) > abs(limit):
        return limit
    return new


def constrain_to_axis(endpoint: 'AxisEndpoint', current: Tuple[float, float],
                      dx: float, dy: float, max_value: float) -> DragStep:
    """
    Move `current` by (dx, dy) constrained to the segment from the origin to `endpoint`.

    Vertical axes follow the y component of the delta, all others follow x.
    Positions past the endpoint clamp to it; positions at or past the origin
    snap to zero.
    """
    max_x, max_y = endpoint.x, endpoint.y

    if endpoint.is_vertical:
        new_x = 0.0
        new_y = _clamp_to_segment(current[1] + dy, max_y)
        value = max_value * new_y / max_y
    else:
        new_x = _clamp_to_segment(current[0] + dx, max_x)
        new_y = new_x * max_y / max_x
        value = max_value * new_x / max_x

    # + 0.0 turns -0.0 into 0.0
    return DragStep(new_x + 0.0, new_y + 0.0, round(value, VALUE_PRECISION) + 0.0)


class DragController:
    """Applies constrained vertex drags to the data matrix."""

    def __init__(self, data: List[List[float]], axis_model: 'AxisModel', geometry: RadialGeometry):
        self._data = data
        self._axis_model = axis_model
        self._geometry = geometry
        self._on_step: Optional[Callable[[DragGesture, DragStep], None]] = None
        self._on_commit: Optional[Callable[[int, float], None]] = None

    @property
    def editable_index(self) -> int:
        return len(self._data) - 1

    def is_editable(self, model_index: int) -> bool:
        return model_index == self.editable_index

    def set_on_step(self, callback: Callable[[DragGesture, DragStep], None]):
        self._on_step = callback

    def set_on_commit(self, callback: Callable[[int, float], None]):
        self._on_commit = callback

    def begin(self, model_index: int, axis_index: int) -> Optional[DragGesture]:
        if not self.is_editable(model_index):
            logger.debug(f"Ignoring drag on read-only model {model_index}")
            return None

        value = self._data[model_index][axis_index]
        point = self._geometry.value_to_point(value, axis_index)
        return DragGesture(model_index, axis_index, origin_point=point, current_point=point, value=value)

    def move(self, gesture: DragGesture, dx: float, dy: float) -> Optional[DragStep]:
        if not self.is_editable(gesture.model_index):
            return None

        endpoint = self._axis_model[gesture.axis_index]
        step = constrain_to_axis(endpoint, gesture.current_point, dx, dy, self._geometry.max_value)

        self._data[gesture.model_index][gesture.axis_index] = step.value
        gesture.current_point = (step.x, step.y)
        gesture.value = step.value
        logger.debug(f"Axis {gesture.axis_index} dragged to {step.value} at ({step.x:.2f}, {step.y:.2f})")

        if self._on_step:
            self._on_step(gesture, step)
        return step

    def end(self, gesture: DragGesture) -> Optional[float]:
        if not self.is_editable(gesture.model_index):
            return None

        value = self._data[gesture.model_index][gesture.axis_index]
        logger.info(f"Committed axis {gesture.axis_index} = {value}")
        if self._on_commit:
            self._on_commit(gesture.axis_index, value)
        return value
