"""
Vertex editing for the spider chart.

This package provides drag-to-edit for the editable (last) model:
- DragController: Axis-constrained drag logic, sole writer of the data matrix
- DragGesture / DragStep: Explicit per-gesture state and per-step result
- setup_pointer_handlers: Pointer event handlers for the NiceGUI view

Usage:
    from spiderchart.edit import DragController, constrain_to_axis
    from spiderchart.edit.handlers import setup_pointer_handlers
"""

from spiderchart.edit.constants import (
    AXIS_EPSILON,
    VALUE_PRECISION,
    VERTEX_HIT_SLACK,
    TOOLTIP_OFFSET,
)
from spiderchart.edit.controller import DragController, DragGesture, DragStep, constrain_to_axis
from spiderchart.edit.handlers import setup_pointer_handlers, normalize_pointer_payload

__all__ = [
    'DragController',
    'DragGesture',
    'DragStep',
    'constrain_to_axis',
    'setup_pointer_handlers',
    'normalize_pointer_payload',
    'AXIS_EPSILON',
    'VALUE_PRECISION',
    'VERTEX_HIT_SLACK',
    'TOOLTIP_OFFSET',
]
