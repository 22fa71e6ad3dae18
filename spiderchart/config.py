"""
Configuration management for the spider chart.

Handles:
- Chart configuration defaults and caller overrides (ChartConfig)
- Chart overrides read from config.json under the "chart" key
- Server settings read from the environment (.env is loaded by app.py)

config.json is located by spiderchart.paths (SPIDERCHART_CONFIG or the project root).
"""

import json
import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, Optional

from spiderchart.colors import category10
from spiderchart.paths import get_config_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Margin:
    top: float = 60
    right: float = 60
    bottom: float = 60
    left: float = 60


@dataclass(frozen=True)
class ChartConfig:
    """Immutable chart configuration. Every field has a default."""
    w: float = 300                          # Width of the chart area
    h: float = 300                          # Height of the chart area
    margin: Margin = field(default_factory=Margin)
    levels: int = 5                         # Count of background rings
    max_value: float = 1.0                  # Value represented by the outermost ring
    label_position_ratio: float = 1.2       # Axis label distance relative to the outer ring
    text_wrap_width: float = 60             # Pixels after which an axis label wraps
    area_opacity: float = 0.35
    vertex_radius: float = 6
    background_opacity: float = 0.1
    stroke_width: float = 2
    color: Callable[[int], str] = category10  # Color strategy: model index -> hex color

    @property
    def canvas_width(self) -> float:
        return self.w + self.margin.left + self.margin.right

    @property
    def canvas_height(self) -> float:
        return self.h + self.margin.top + self.margin.bottom

    @property
    def center(self) -> tuple:
        return (self.w / 2 + self.margin.left, self.h / 2 + self.margin.top)


# Option names used by the JavaScript widget this chart replaces
_ALIASES = {
    'maxValue': 'max_value',
    'labelPositionRatio': 'label_position_ratio',
    'textWrapWidth': 'text_wrap_width',
    'areaOpacity': 'area_opacity',
    'vertexRadius': 'vertex_radius',
    'backgroundOpacity': 'background_opacity',
    'strokeWidth': 'stroke_width',
}

_FIELD_NAMES = {f.name for f in fields(ChartConfig)}


def _merge_margin(value: Any) -> Margin:
    if isinstance(value, Margin):
        return value
    if isinstance(value, dict):
        sides = {k: v for k, v in value.items() if k in ('top', 'right', 'bottom', 'left') and v is not None}
        return replace(Margin(), **sides)
    return Margin(value, value, value, value)


def resolve_config(overrides: Optional[Dict[str, Any]] = None) -> ChartConfig:
    """
    Build a ChartConfig from defaults plus caller overrides.

    Keys with a None value keep their default. Unrecognised keys are ignored.
    camelCase option names are accepted as aliases of the snake_case fields.
    """
    values: Dict[str, Any] = {}
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        name = _ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            logger.debug(f"Ignoring unknown chart option '{key}'")
            continue
        if name == 'margin':
            value = _merge_margin(value)
        values[name] = value

    config = replace(ChartConfig(), **values)
    if config.levels < 1:
        raise ValueError(f"levels must be at least 1, got {config.levels}")
    if config.max_value <= 0:
        raise ValueError(f"max_value must be positive, got {config.max_value}")
    return config


def load_config() -> dict:
    """Load configuration from config.json."""
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError):
            logger.warning(f"Could not read {config_path}, using defaults")
            return {}
    return {}


def get_chart_overrides() -> Dict[str, Any]:
    """Return the persisted chart overrides (the "chart" section of config.json)."""
    chart = load_config().get("chart", {})
    return chart if isinstance(chart, dict) else {}


def get_server_settings() -> Dict[str, Any]:
    """
    Get host/port/log level for the demo app.

    Priority:
    1. Environment variables SPIDERCHART_HOST / SPIDERCHART_PORT / SPIDERCHART_LOG_LEVEL
    2. The "server" section of config.json
    3. Built-in defaults
    """
    stored = load_config().get("server", {})
    return {
        'host': os.environ.get("SPIDERCHART_HOST", stored.get('host', '127.0.0.1')),
        'port': int(os.environ.get("SPIDERCHART_PORT", stored.get('port', 8081))),
        'log_level': os.environ.get("SPIDERCHART_LOG_LEVEL", stored.get('log_level', 'INFO')).upper(),
    }
