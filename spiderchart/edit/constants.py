"""
Shared constants for vertex dragging and pointer hit testing.
"""

# Axes whose endpoint x magnitude is below this are treated as vertical
AXIS_EPSILON = 1e-6

# Decimal places kept for dragged values
VALUE_PRECISION = 4

# Extra pixels around a vertex marker that still count as a hit
VERTEX_HIT_SLACK = 4

# Offset in pixels of the value label from the vertex it describes
TOOLTIP_OFFSET = 10

# Area fill opacities used while hovering a model
HOVER_AREA_OPACITY = 0.7
DIMMED_AREA_OPACITY = 0.1
