"""
Spider chart: keeps the data matrix and the SVG scene in sync.

render() is the public entry point. It mounts a freshly built chart into a
host node of a Document, replacing any chart previously mounted there, and
returns the SpiderChart that owns the scene.

Ownership of the data matrix: the DragController is its only writer. The
chart reads it to draw and hands the committed value to the caller's on_edit
callback when a gesture ends.

Callers must not re-render while a drag gesture is active.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import svgwrite

from spiderchart.axes import AxisModel
from spiderchart.chart_builder import build_chart
from spiderchart.config import ChartConfig, resolve_config
from spiderchart.edit.constants import (
    DIMMED_AREA_OPACITY,
    HOVER_AREA_OPACITY,
    TOOLTIP_OFFSET,
    VERTEX_HIT_SLACK,
)
from spiderchart.edit.controller import DragController, DragGesture, DragStep
from spiderchart.geometry import (
    RadialGeometry,
    distance,
    outer_radius_for,
    point_in_polygon,
    polygon_path,
)
from spiderchart.scene import Document, Host, raise_to_top, set_path_data
from spiderchart.text import format_percent

logger = logging.getLogger(__name__)

OnEdit = Callable[[int, float], None]

# Document used when render() is called without an explicit one
DOCUMENT = Document()


class ShapeMismatchError(ValueError):
    """A model does not hold exactly one value per axis."""


class ContainerNotFoundError(LookupError):
    """The container selector matched no node in the document."""


class SpiderChart:
    """
    One rendered chart: geometry, axis model, scene and drag controller.

    Coordinates passed to the hit-testing and drag methods are in chart space
    (origin at the chart center); use to_chart_coords() for canvas pixels.
    """

    def __init__(self, axis_names: Sequence[str], data: List[List[float]],
                 config: ChartConfig, on_edit: Optional[OnEdit] = None):
        self.axis_names = list(axis_names)
        self.data = data
        self.config = config
        self.on_edit = on_edit

        self.geometry = RadialGeometry(len(self.axis_names), config.max_value,
                                       outer_radius_for(config.w, config.h))
        self.axis_model = AxisModel.build(self.axis_names, self.geometry)
        self.elements = build_chart(self.axis_model, data, self.geometry, config)

        self.controller = DragController(data, self.axis_model, self.geometry)
        self.controller.set_on_step(self._on_drag_step)
        self.controller.set_on_commit(self._on_commit)
        self._gesture: Optional[DragGesture] = None

    @property
    def svg(self) -> svgwrite.Drawing:
        return self.elements.svg

    @property
    def editable_index(self) -> int:
        return len(self.data) - 1

    @property
    def gesture(self) -> Optional[DragGesture]:
        return self._gesture

    @property
    def is_dragging(self) -> bool:
        return self._gesture is not None

    def to_chart_coords(self, px: float, py: float) -> Tuple[float, float]:
        cx, cy = self.config.center
        return (px - cx, py - cy)

    # --- Hit testing ---

    def vertex_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """(model_index, axis_index) of the topmost vertex under the point."""
        radius = self.config.vertex_radius + VERTEX_HIT_SLACK
        for model_index in range(len(self.data) - 1, -1, -1):
            for axis_index, value in enumerate(self.data[model_index]):
                point = self.geometry.value_to_point(value, axis_index)
                if distance((x, y), point) <= radius:
                    return (model_index, axis_index)
        return None

    def area_at(self, x: float, y: float) -> Optional[int]:
        """Index of the topmost model whose area contains the point."""
        for model_index in range(len(self.data) - 1, -1, -1):
            polygon = self.geometry.model_to_polygon(self.data[model_index])
            if point_in_polygon((x, y), polygon):
                return model_index
        return None

    # --- Hover ---

    def highlight_area(self, model_index: int) -> None:
        for i, area in enumerate(self.elements.areas):
            area['fill-opacity'] = HOVER_AREA_OPACITY if i == model_index else DIMMED_AREA_OPACITY

    def reset_areas(self) -> None:
        for area in self.elements.areas:
            area['fill-opacity'] = self.config.area_opacity

    def show_tooltip(self, model_index: int, axis_index: int) -> None:
        value = self.data[model_index][axis_index]
        x, y = self.geometry.value_to_point(value, axis_index)
        self._place_tooltip(x, y, value)

    def hide_tooltip(self) -> None:
        self.elements.tooltip['opacity'] = 0

    def _place_tooltip(self, x: float, y: float, value: float) -> None:
        tooltip = self.elements.tooltip
        tooltip['x'] = x - TOOLTIP_OFFSET
        tooltip['y'] = y - TOOLTIP_OFFSET
        tooltip.text = format_percent(value)
        tooltip['opacity'] = 1

    # --- Dragging ---

    def start_drag(self, model_index: int, axis_index: int) -> Optional[DragGesture]:
        """Begin a gesture on a vertex. A gesture still in progress is committed first."""
        if self._gesture is not None:
            logger.debug(f"Committing unfinished drag on axis {self._gesture.axis_index}")
            self.end_drag()
        self._gesture = self.controller.begin(model_index, axis_index)
        return self._gesture

    def drag(self, dx: float, dy: float) -> Optional[DragStep]:
        if self._gesture is None:
            return None
        return self.controller.move(self._gesture, dx, dy)

    def end_drag(self) -> Optional[float]:
        gesture, self._gesture = self._gesture, None
        if gesture is None:
            return None
        return self.controller.end(gesture)

    def redraw_model(self, model_index: int) -> None:
        """Re-derive the area and outline of one model from the data matrix."""
        path = polygon_path(self.geometry.model_to_polygon(self.data[model_index]))
        set_path_data(self.elements.areas[model_index], path)
        set_path_data(self.elements.strokes[model_index], path)

    def _on_drag_step(self, gesture: DragGesture, step: DragStep) -> None:
        vertex = self.elements.vertexes[gesture.model_index][gesture.axis_index]
        raise_to_top(self.elements.wrappers[gesture.model_index], vertex)
        vertex['cx'] = step.x
        vertex['cy'] = step.y
        self.redraw_model(gesture.model_index)
        self._place_tooltip(step.x, step.y, step.value)

    def _on_commit(self, axis_index: int, value: float) -> None:
        if self.on_edit:
            self.on_edit(axis_index, value)


def _check_shape(axis_names: Sequence[str], data: Sequence[Sequence[float]]) -> None:
    if not axis_names:
        raise ValueError("a spider chart needs at least one axis")
    for i, model in enumerate(data):
        if len(model) != len(axis_names):
            raise ShapeMismatchError(
                f"model {i} has {len(model)} values but there are {len(axis_names)} axes"
            )


def render(container: Union[str, Host], axis_names: Sequence[str], data: List[List[float]],
           config_overrides: Optional[Dict[str, Any]] = None, on_edit: Optional[OnEdit] = None,
           document: Optional[Document] = None) -> SpiderChart:
    """
    Render a spider chart into `container` and return it.

    Args:
        container: "#id" selector of a host in the document, or the Host itself
        axis_names: Axis names, one per dimension
        data: Data matrix, one list of values per model; the last model is editable
            and is mutated in place by drags
        config_overrides: Partial ChartConfig; None values keep the defaults
        on_edit: Called with (axis_index, new_value) once per completed drag
        document: Document to resolve the selector in (defaults to DOCUMENT)

    Raises:
        ShapeMismatchError: A model's length differs from the axis count
        ContainerNotFoundError: The selector matched nothing
    """
    if isinstance(container, Host):
        host = container
    else:
        document = document or DOCUMENT
        host = document.host(container)
        if host is None:
            logger.warning(f"No container matches '{container}'")
            raise ContainerNotFoundError(container)

    _check_shape(axis_names, data)
    config = resolve_config(config_overrides)

    # Remove whatever chart was mounted here before
    host.unmount_all('svg')

    chart = SpiderChart(axis_names, data, config, on_edit)
    host.mount(chart.svg)
    logger.info(f"Rendered spider chart with {len(axis_names)} axes and {len(data)} models")
    return chart
