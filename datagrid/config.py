"""
Configuration management for the data grid demo.

Settings are resolved in this order (later wins):
1. Built-in defaults
2. config.json next to the project root
3. Environment variables (a .env file is loaded by app.py)

Recognised environment variables:
  DATAGRID_TITLE, DATAGRID_PORT, DATAGRID_THEME,
  DATAGRID_LOG_LEVEL, DATAGRID_COLUMNS_FILE
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from datagrid.paths import get_config_path
from datagrid.types import DEFAULT_THEME, THEMES

logger = logging.getLogger(__name__)

DEFAULTS = {
    'title': 'Data Grid',
    'port': 8080,
    'theme': DEFAULT_THEME,
    'log_level': 'INFO',
    'columns_file': None,
}

ENV_PREFIX = 'DATAGRID_'


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.json."""
    config_path = config_path or get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable config {config_path}: {e}")
            return {}
    return {}


def get_settings(config_path: Optional[Path] = None) -> dict:
    """Return the effective settings dict."""
    settings = dict(DEFAULTS)
    settings.update({k: v for k, v in load_config(config_path).items() if k in DEFAULTS})

    for key in DEFAULTS:
        env_value = os.environ.get(ENV_PREFIX + key.upper())
        if env_value:
            settings[key] = env_value

    try:
        settings['port'] = int(settings['port'])
    except (TypeError, ValueError):
        logger.warning(f"Invalid port {settings['port']!r}, using {DEFAULTS['port']}")
        settings['port'] = DEFAULTS['port']

    if settings['theme'] not in THEMES:
        logger.warning(f"Unknown theme {settings['theme']!r}, using {DEFAULT_THEME}")
        settings['theme'] = DEFAULT_THEME

    settings['log_level'] = str(settings['log_level']).upper()
    return settings
