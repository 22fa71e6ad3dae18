"""
Location of the chart's config.json.

SPIDERCHART_CONFIG names the file explicitly. Otherwise it sits next to the
executable when frozen (PyInstaller) and at the project root in development.
"""

import os
import sys
from pathlib import Path


def get_app_dir() -> Path:
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """Path of the file holding chart overrides and server settings."""
    explicit = os.environ.get("SPIDERCHART_CONFIG")
    if explicit:
        return Path(explicit).expanduser()
    return get_app_dir() / "config.json"
