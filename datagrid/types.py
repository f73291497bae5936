"""
Shared value types for the grid interaction layer.
"""

from dataclasses import dataclass
from typing import Callable, Literal, Union

# Unique identifier of a grid row. The hosting grid assigns it.
RowKey = Union[str, int]

Theme = Literal['light', 'dark']

DEFAULT_THEME: Theme = 'light'
THEMES = ('light', 'dark')

# Detail row content: plain text, or a callable that builds elements in place
DetailContent = Union[str, Callable[[], None]]


@dataclass(frozen=True)
class Position:
    """Screen coordinate in CSS pixels."""
    x: float = 0
    y: float = 0
