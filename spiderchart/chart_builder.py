"""
Scene builder for the spider chart.

This module turns the geometry, axis model, configuration and data matrix into
an svgwrite Drawing: the background web, level and axis labels, and one
wrapper group per model holding its area, glow outline and vertex markers.
Presentation is set through SVG attributes so the chart can update any of
them in place.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

import svgwrite
from svgwrite.base import BaseElement
from svgwrite.container import Group
from svgwrite.path import Path
from svgwrite.text import Text

from spiderchart.axes import AxisModel
from spiderchart.config import ChartConfig
from spiderchart.geometry import RadialGeometry, polygon_path
from spiderchart.text import estimate_text_width, format_percent, wrap_words

# Styling for the static layout
WEB_STROKE = 'grey'
WEB_FILL = '#CDCDCD'
AXIS_STROKE = '#EEEEEE'
LEVEL_LABEL_COLOR = '#737373'
LEVEL_LABEL_FONT_SIZE = 10
AXIS_LABEL_FONT_SIZE = 11
LINE_HEIGHT_EM = 1.4
VERTEX_FILL_OPACITY = 0.8


@dataclass
class ChartElements:
    """Handles to the scene elements the chart updates after the initial build."""
    svg: svgwrite.Drawing
    root: Group
    wrappers: List[Group] = field(default_factory=list)
    areas: List[Path] = field(default_factory=list)
    strokes: List[Path] = field(default_factory=list)
    vertexes: List[List[BaseElement]] = field(default_factory=list)
    tooltip: Text = None


def build_drawing(config: ChartConfig) -> svgwrite.Drawing:
    return svgwrite.Drawing(
        size=(config.canvas_width, config.canvas_height),
        debug=False,
        class_='spider',
        style='touch-action: none; user-select: none',
    )


def build_glow_filter(dwg: svgwrite.Drawing):
    """Outside glow used by the model outlines."""
    glow = dwg.filter(id='glow')
    glow.feGaussianBlur(in_='SourceGraphic', stdDeviation=2.5, result='coloredBlur')
    glow.feMerge(['coloredBlur', 'SourceGraphic'])
    dwg.defs.add(glow)
    return glow


def build_web(dwg: svgwrite.Drawing, parent: Group, geometry: RadialGeometry,
              config: ChartConfig) -> List[Path]:
    """Background rings, outermost first. The outer ring is drawn fully opaque."""
    rings = []
    for i, ring in enumerate(geometry.background_rings(config.levels)):
        rings.append(parent.add(dwg.path(
            d=polygon_path(ring.points),
            class_='web',
            data_level=ring.level,
            stroke=WEB_STROKE,
            stroke_opacity=1.0 if i == 0 else 0.5,
            stroke_width='1px',
            fill=WEB_FILL,
            fill_opacity=config.background_opacity,
        )))
    return rings


def build_level_labels(dwg: svgwrite.Drawing, parent: Group, geometry: RadialGeometry,
                       config: ChartConfig) -> List[Text]:
    labels = []
    for level, value, y in geometry.level_label_positions(config.levels):
        labels.append(parent.add(dwg.text(
            format_percent(value),
            insert=(4, y),
            dy=['0.4em'],
            class_='axisLabel',
            fill=LEVEL_LABEL_COLOR,
            font_size=f'{LEVEL_LABEL_FONT_SIZE}px',
        )))
    return labels


def build_axes(dwg: svgwrite.Drawing, parent: Group, axis_model: AxisModel,
               config: ChartConfig) -> List[Group]:
    """One group per axis holding the axis line and its wrapped name label."""
    groups = []
    for endpoint in axis_model:
        axis = parent.add(dwg.g(class_='axis'))
        axis.add(dwg.line(
            start=(0, 0), end=(endpoint.x, endpoint.y),
            class_='line', stroke=AXIS_STROKE, stroke_width='2px',
        ))

        x, y = axis_model.label_position(endpoint.index, config.label_position_ratio)
        legend = axis.add(dwg.text(
            '', insert=(x, y), dy=['0.35em'],
            class_='legend', text_anchor='middle', font_size=f'{AXIS_LABEL_FONT_SIZE}px',
        ))

        lines = wrap_words(
            endpoint.name, config.text_wrap_width,
            lambda text: estimate_text_width(text, AXIS_LABEL_FONT_SIZE),
        )
        for line_number, line in enumerate(lines):
            dy = line_number * LINE_HEIGHT_EM + 0.35
            legend.add(dwg.tspan(line, insert=(x, y), dy=[f'{dy:g}em']))
        groups.append(axis)
    return groups


def build_models(dwg: svgwrite.Drawing, elements: ChartElements, data: Sequence[Sequence[float]],
                 geometry: RadialGeometry, config: ChartConfig) -> None:
    """Area, glow outline and vertex markers for every model."""
    editable_index = len(data) - 1

    for model_index, model in enumerate(data):
        color = config.color(model_index)
        wrapper = elements.root.add(dwg.g(class_='spiderWrapper', data_model=model_index))
        path = polygon_path(geometry.model_to_polygon(model))

        elements.areas.append(wrapper.add(dwg.path(
            d=path,
            class_='spiderArea',
            id=f'spiderArea{model_index}',
            fill=color,
            fill_opacity=config.area_opacity,
            style='transition: fill-opacity 200ms',
        )))

        elements.strokes.append(wrapper.add(dwg.path(
            d=path,
            class_='spiderStroke',
            id=f'spiderStroke{model_index}',
            stroke=color,
            stroke_width=f'{config.stroke_width}px',
            fill='none',
            filter='url(#glow)',
        )))

        markers = []
        for axis_index, value in enumerate(model):
            markers.append(wrapper.add(dwg.circle(
                center=geometry.value_to_point(value, axis_index),
                r=config.vertex_radius,
                class_='spiderVertex',
                data_model=model_index,
                data_axis=axis_index,
                fill=color,
                fill_opacity=VERTEX_FILL_OPACITY,
                cursor='pointer' if model_index == editable_index else 'default',
            )))
        elements.wrappers.append(wrapper)
        elements.vertexes.append(markers)


def build_chart(axis_model: AxisModel, data: Sequence[Sequence[float]],
                geometry: RadialGeometry, config: ChartConfig) -> ChartElements:
    """Build the complete scene for one render."""
    dwg = build_drawing(config)
    build_glow_filter(dwg)

    cx, cy = config.center
    root = dwg.add(dwg.g(transform=f'translate({cx:g},{cy:g})', pointer_events='none'))

    grid = root.add(dwg.g(class_='axisWrapper'))
    build_web(dwg, grid, geometry, config)
    build_level_labels(dwg, grid, geometry, config)
    build_axes(dwg, grid, axis_model, config)

    elements = ChartElements(svg=dwg, root=root)
    build_models(dwg, elements, data, geometry, config)

    elements.tooltip = root.add(dwg.text(
        '', insert=(0, 0), class_='tooltip', opacity=0, style='transition: opacity 200ms',
    ))
    return elements
