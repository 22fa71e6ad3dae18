import math
from types import SimpleNamespace

import pytest

from spiderchart import Document, render
from spiderchart.edit.handlers import normalize_pointer_payload, pointer_id, setup_pointer_handlers

CENTER = 210


def pointer(x, y, pointer_id=None):
    args = {'offsetX': x, 'offsetY': y}
    if pointer_id is not None:
        args['pointerId'] = pointer_id
    return SimpleNamespace(args=args)


def canvas_point(chart, value, axis_index):
    x, y = chart.geometry.value_to_point(value, axis_index)
    return (x + CENTER, y + CENTER)


@pytest.fixture
def setup():
    doc = Document()
    doc.create_host('chart')
    data = [[0.5, 0.5, 0.5], [0.2, 0.2, 0.2]]
    edits = []
    chart = render('#chart', ["A", "B", "C"], data, None,
                   lambda axis, value: edits.append((axis, value)), document=doc)
    refreshes = []
    handlers = setup_pointer_handlers(lambda: chart, lambda: refreshes.append(1))
    return SimpleNamespace(chart=chart, data=data, edits=edits, refreshes=refreshes, handlers=handlers)


def test_normalize_pointer_payload_handles_dict():
    assert normalize_pointer_payload({'offsetX': 3, 'offsetY': 4}) == (3.0, 4.0)
    assert normalize_pointer_payload({'x': 1, 'y': 2}) == (1.0, 2.0)


def test_normalize_pointer_payload_handles_list():
    assert normalize_pointer_payload([5, 6]) == (5.0, 6.0)


def test_normalize_pointer_payload_rejects_incomplete():
    assert normalize_pointer_payload({'offsetX': 3}) is None
    assert normalize_pointer_payload('nope') is None
    assert normalize_pointer_payload([1]) is None


def test_drag_flow_through_pointer_events(setup):
    chart, h = setup.chart, setup.handlers
    start = canvas_point(chart, 0.2, 1)
    end = canvas_point(chart, 1.0, 1)

    h['handle_pointer_down'](pointer(*start))
    assert chart.is_dragging
    h['handle_pointer_move'](pointer((start[0] + end[0]) / 2, (start[1] + end[1]) / 2))
    assert setup.edits == []
    h['handle_pointer_move'](pointer(*end))
    h['handle_pointer_up'](pointer(*end))

    assert not chart.is_dragging
    assert setup.data[1][1] == 1.0
    assert setup.edits == [(1, 1.0)]
    assert chart.elements.tooltip['opacity'] == 0
    assert len(setup.refreshes) >= 4


def test_pointer_down_on_read_only_vertex_does_not_drag(setup):
    chart, h = setup.chart, setup.handlers
    h['handle_pointer_down'](pointer(*canvas_point(chart, 0.5, 0)))
    assert not chart.is_dragging
    assert chart.elements.tooltip.text == '50%'
    h['handle_pointer_move'](pointer(CENTER + 50, CENTER + 50))
    h['handle_pointer_up'](pointer(CENTER + 50, CENTER + 50))
    assert setup.data == [[0.5, 0.5, 0.5], [0.2, 0.2, 0.2]]
    assert setup.edits == []


def test_pointer_down_on_empty_space_is_ignored(setup):
    setup.handlers['handle_pointer_down'](pointer(5, 5))
    assert not setup.chart.is_dragging
    assert setup.refreshes == []


def test_hover_highlights_area_under_pointer(setup):
    chart, h = setup.chart, setup.handlers
    angle = chart.geometry.axis_angle(1)
    h['handle_pointer_move'](pointer(CENTER + 60 * math.cos(angle), CENTER + 60 * math.sin(angle)))
    assert chart.elements.areas[0]['fill-opacity'] == 0.7
    assert chart.elements.areas[1]['fill-opacity'] == 0.1

    h['handle_pointer_move'](pointer(2, 2))
    assert all(a['fill-opacity'] == chart.config.area_opacity for a in chart.elements.areas)


def test_hover_over_vertex_shows_tooltip(setup):
    chart, h = setup.chart, setup.handlers
    h['handle_pointer_move'](pointer(*canvas_point(chart, 0.5, 2)))
    assert chart.elements.tooltip['opacity'] == 1
    h['handle_pointer_move'](pointer(2, 2))
    assert chart.elements.tooltip['opacity'] == 0


def test_pointer_leave_commits_drag(setup):
    chart, h = setup.chart, setup.handlers
    h['handle_pointer_down'](pointer(*canvas_point(chart, 0.2, 0)))
    h['handle_pointer_move'](pointer(CENTER, CENTER - 60))
    h['handle_pointer_leave'](pointer(CENTER, CENTER - 60))
    assert setup.edits == [(0, 0.4)]
    assert not chart.is_dragging


def test_pointer_down_again_commits_unfinished_drag(setup):
    # The pointerup of the first drag never arrives
    chart, h = setup.chart, setup.handlers
    h['handle_pointer_down'](pointer(*canvas_point(chart, 0.2, 0)))
    h['handle_pointer_move'](pointer(CENTER, CENTER - 60))
    assert setup.data[1][0] == 0.4

    h['handle_pointer_down'](pointer(*canvas_point(chart, 0.2, 1)))
    assert setup.edits == [(0, 0.4)]
    assert chart.gesture.axis_index == 1

    h['handle_pointer_up'](pointer(*canvas_point(chart, 0.2, 1)))
    assert setup.edits == [(0, 0.4), (1, 0.2)]


def test_second_pointer_does_not_take_over_drag(setup):
    chart, h = setup.chart, setup.handlers
    h['handle_pointer_down'](pointer(*canvas_point(chart, 0.2, 0), pointer_id=1))
    h['handle_pointer_down'](pointer(*canvas_point(chart, 0.2, 1), pointer_id=2))
    assert chart.gesture.axis_index == 0
    assert setup.edits == []

    h['handle_pointer_move'](pointer(CENTER + 80, CENTER + 80, pointer_id=2))
    h['handle_pointer_up'](pointer(CENTER + 80, CENTER + 80, pointer_id=2))
    assert chart.is_dragging
    assert setup.data[1] == [0.2, 0.2, 0.2]

    h['handle_pointer_move'](pointer(CENTER, CENTER - 60, pointer_id=1))
    h['handle_pointer_up'](pointer(CENTER, CENTER - 60, pointer_id=1))
    assert not chart.is_dragging
    assert setup.data[1] == [0.4, 0.2, 0.2]
    assert setup.edits == [(0, 0.4)]


def test_pointer_id_read_from_payload():
    assert pointer_id({'offsetX': 1, 'offsetY': 2, 'pointerId': 7}) == 7
    assert pointer_id({'offsetX': 1, 'offsetY': 2}) is None
    assert pointer_id([1, 2]) is None
