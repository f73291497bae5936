"""
Path utilities for the data grid demo.

Handles path resolution for both development mode and frozen (PyInstaller) executables.
- In development: paths are relative to the project root
- When frozen: paths are relative to the executable location
"""

import sys
from pathlib import Path


def get_app_dir() -> Path:
    """
    Get the application directory.

    - In development: the project root (parent of datagrid/)
    - When frozen: the directory containing the executable
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_app_dir() / "config.json"


def resolve_path(path: str) -> Path:
    """Resolve ``path`` against the application directory unless it is absolute."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return get_app_dir() / candidate
