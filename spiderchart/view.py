"""
NiceGUI view for the spider chart.

The chart's scene tree is serialised to SVG and shown in a ui.html element.
Inner SVG elements ignore pointer events, so offsetX/offsetY of every pointer
event are relative to the SVG canvas; hit testing happens in Python.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from nicegui import ui

from spiderchart.edit.handlers import setup_pointer_handlers
from spiderchart.scene import Document
from spiderchart.spider_chart import OnEdit, SpiderChart, render

logger = logging.getLogger(__name__)

POINTER_ARGS = ['offsetX', 'offsetY', 'pointerId']

# Seconds between pointermove events sent to the server
POINTER_MOVE_THROTTLE = 0.02


class SpiderChartPanel:
    """Mounts one spider chart in the current NiceGUI context."""

    def __init__(self, axis_names: Sequence[str], data: List[List[float]],
                 config_overrides: Optional[Dict[str, Any]] = None,
                 on_edit: Optional[OnEdit] = None, host_id: str = 'spider-chart'):
        self.axis_names = list(axis_names)
        self.config_overrides = config_overrides
        self.on_edit = on_edit
        self._document = Document()
        self._selector = f'#{host_id}'
        self._document.create_host(host_id)
        self.chart: SpiderChart = render(self._selector, self.axis_names, data,
                                         config_overrides, on_edit, document=self._document)
        self.canvas = None

    def markup(self) -> str:
        return self.chart.svg.tostring()

    def mount(self):
        """Create the ui.html element and bind pointer events. Call inside a NiceGUI layout."""
        handlers = setup_pointer_handlers(lambda: self.chart, self.refresh)

        self.canvas = ui.html(self.markup(), sanitize=False).style(
            f'width:{self.chart.config.canvas_width:g}px;'
            f'height:{self.chart.config.canvas_height:g}px;'
            'touch-action:none;'
        )
        self.canvas.on('pointerdown', handlers['handle_pointer_down'], POINTER_ARGS)
        self.canvas.on('pointermove', handlers['handle_pointer_move'], POINTER_ARGS,
                       throttle=POINTER_MOVE_THROTTLE)
        self.canvas.on('pointerup', handlers['handle_pointer_up'], POINTER_ARGS)
        self.canvas.on('pointerleave', handlers['handle_pointer_leave'], POINTER_ARGS)
        return self.canvas

    def refresh(self):
        if self.canvas is not None:
            self.canvas.set_content(self.markup())

    def rerender(self, data: Optional[List[List[float]]] = None):
        """Full render into the same host; replaces the mounted chart."""
        if self.chart.is_dragging:
            logger.warning("Re-render requested during a drag; committing the drag first")
            self.chart.end_drag()
        if data is None:
            data = self.chart.data
        self.chart = render(self._selector, self.axis_names, data,
                            self.config_overrides, self.on_edit, document=self._document)
        self.refresh()
