"""
Editable spider (radar) chart.
"""

from .config import ChartConfig, resolve_config
from .spider_chart import SpiderChart, render, ShapeMismatchError, ContainerNotFoundError
from .scene import Document, Host

__all__ = [
    'ChartConfig',
    'resolve_config',
    'SpiderChart',
    'render',
    'ShapeMismatchError',
    'ContainerNotFoundError',
    'Document',
    'Host',
]
