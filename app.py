"""
Main NiceGUI application for the editable spider chart.

Shows a sample comparison of several models on shared axes. The last model
is editable: drag its vertexes along their axes to change its values.
"""

import copy
import logging
import sys

from nicegui import ui
from dotenv import load_dotenv
load_dotenv()

from spiderchart.colors import palette_from
from spiderchart.config import get_chart_overrides, get_server_settings
from spiderchart.text import format_percent
from spiderchart.view import SpiderChartPanel

settings = get_server_settings()
logging.basicConfig(
    level=settings['log_level'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

SAMPLE_AXES = [
    'Battery Life', 'Brand', 'Contract Cost', 'Design And Quality',
    'Have Internet Connectivity', 'Large Screen', 'Price Of Device', 'To Be A Smartphone',
]

# Reference models in muted tones, the editable model in orange
MODEL_COLORS = ['#7f7f7f', '#1f77b4', '#ff7f0e']

SAMPLE_DATA = [
    [0.22, 0.28, 0.29, 0.17, 0.22, 0.02, 0.21, 0.50],
    [0.27, 0.16, 0.35, 0.13, 0.20, 0.13, 0.35, 0.38],
    [0.26, 0.10, 0.30, 0.14, 0.22, 0.04, 0.41, 0.30],
]


@ui.page('/')
def main_page():
    data = copy.deepcopy(SAMPLE_DATA)

    def on_edit(axis_index: int, value: float):
        axis = SAMPLE_AXES[axis_index]
        last_edit_label.text = f'Last edit: {axis} = {format_percent(value)}'
        ui.notify(f'{axis} set to {format_percent(value)}', position='bottom', timeout=1000)
        logger.info(f"Edited '{axis}' to {value}")

    def reset():
        panel.rerender(copy.deepcopy(SAMPLE_DATA))
        last_edit_label.text = 'Last edit: none'
        ui.notify('Chart reset', type='info', position='bottom', timeout=800)

    with ui.column().classes('w-full items-center gap-2 p-4'):
        ui.label('Spider Chart').classes('text-xl font-bold')
        ui.label('Drag the vertexes of the last model along their axes.').classes('text-gray-500 text-sm')

        overrides = {'color': palette_from(MODEL_COLORS), **get_chart_overrides()}
        panel = SpiderChartPanel(SAMPLE_AXES, data, overrides, on_edit)
        panel.mount()

        with ui.row().classes('items-center gap-4'):
            last_edit_label = ui.label('Last edit: none').classes('text-sm')
            ui.button('Reset', on_click=reset).props('flat dense icon=restart_alt')


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='Spider Chart',
        host=settings['host'],
        port=settings['port'],
        reload=not getattr(sys, 'frozen', False),
    )
