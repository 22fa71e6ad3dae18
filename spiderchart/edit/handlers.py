"""
Pointer Handlers - Event handlers wiring canvas pointer events to a chart.

This module keeps the NiceGUI view free of interaction logic: it converts
pointer payloads to chart coordinates, runs hit testing, and drives the
chart's hover and drag methods.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:
    from spiderchart.spider_chart import SpiderChart

logger = logging.getLogger(__name__)


def normalize_pointer_payload(raw_payload: Any) -> Optional[Tuple[float, float]]:
    """Extract canvas (x, y) from a pointer event payload, or None if it has none."""
    if isinstance(raw_payload, dict):
        x = raw_payload.get('offsetX', raw_payload.get('x'))
        y = raw_payload.get('offsetY', raw_payload.get('y'))
        if x is None or y is None:
            return None
        return (float(x), float(y))
    if isinstance(raw_payload, (list, tuple)) and len(raw_payload) >= 2:
        return (float(raw_payload[0]), float(raw_payload[1]))
    return None


def pointer_id(raw_payload: Any) -> Optional[Any]:
    """The pointerId of a pointer event payload, or None when the payload carries none."""
    if isinstance(raw_payload, dict):
        return raw_payload.get('pointerId')
    return None


def setup_pointer_handlers(get_chart: Callable[[], 'SpiderChart'], refresh: Callable[[], None]) -> Dict[str, Callable]:
    """
    Set up pointer event handlers for a chart.

    A drag belongs to the pointer that started it. Events from other pointers
    (a second finger on a touch screen) neither start nor move a drag while
    one is active.

    Args:
        get_chart: Returns the chart currently mounted (it changes on re-render)
        refresh: Called after any change to the chart's scene

    Returns:
        Dict with handler functions for binding to UI events
    """
    state: Dict[str, Any] = {'last_pointer': None, 'pointer_id': None, 'hovered_area': None}

    def _args(event) -> Any:
        return event.args if hasattr(event, 'args') else event

    def _is_other_pointer(event) -> bool:
        return pointer_id(_args(event)) != state['pointer_id']

    def handle_pointer_down(event):
        """Start a drag when the pointer goes down on an editable vertex."""
        pos = normalize_pointer_payload(_args(event))
        if pos is None:
            return
        chart = get_chart()
        if chart.is_dragging and _is_other_pointer(event):
            logger.debug(f"Ignoring pointer {pointer_id(_args(event))} during an active drag")
            return

        hit = chart.vertex_at(*chart.to_chart_coords(*pos))
        if hit is None:
            return

        model_index, axis_index = hit
        logger.debug(f"Pointer down on vertex {hit}")
        # A pointer going down again without an up in between commits its old drag here
        if chart.start_drag(model_index, axis_index) is not None:
            state['last_pointer'] = pos
            state['pointer_id'] = pointer_id(_args(event))
        chart.show_tooltip(model_index, axis_index)
        refresh()

    def handle_pointer_move(event):
        """Drag the active vertex, or update hover emphasis when idle."""
        pos = normalize_pointer_payload(_args(event))
        if pos is None:
            return
        chart = get_chart()

        if chart.is_dragging and state['last_pointer'] is not None:
            if _is_other_pointer(event):
                return
            last_x, last_y = state['last_pointer']
            state['last_pointer'] = pos
            chart.drag(pos[0] - last_x, pos[1] - last_y)
            refresh()
            return

        x, y = chart.to_chart_coords(*pos)
        changed = False

        area = chart.area_at(x, y)
        if area != state['hovered_area']:
            state['hovered_area'] = area
            if area is None:
                chart.reset_areas()
            else:
                chart.highlight_area(area)
            changed = True

        vertex = chart.vertex_at(x, y)
        if vertex is not None:
            chart.show_tooltip(*vertex)
            changed = True
        elif chart.elements.tooltip.attribs.get('opacity'):
            chart.hide_tooltip()
            changed = True

        if changed:
            refresh()

    def handle_pointer_up(event=None):
        """Commit the active drag, if this pointer owns it."""
        chart = get_chart()
        if not chart.is_dragging:
            state['last_pointer'] = None
            return
        if event is not None and _is_other_pointer(event):
            return
        state['last_pointer'] = None
        state['pointer_id'] = None
        chart.end_drag()
        chart.hide_tooltip()
        refresh()

    def handle_pointer_leave(event=None):
        """Commit any active drag and clear hover emphasis."""
        handle_pointer_up()
        chart = get_chart()
        if state['hovered_area'] is not None:
            state['hovered_area'] = None
            chart.reset_areas()
            chart.hide_tooltip()
            refresh()

    return {
        'handle_pointer_down': handle_pointer_down,
        'handle_pointer_move': handle_pointer_move,
        'handle_pointer_up': handle_pointer_up,
        'handle_pointer_leave': handle_pointer_leave,
    }
