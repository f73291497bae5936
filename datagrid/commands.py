"""
Command values returned by the grid controllers.

Every controller operation returns a list of these records describing what
happened, so a host can dispatch on plain values instead of relying on
render callbacks. UI hosts may ignore them and use the registered callbacks.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from datagrid.types import RowKey


@dataclass(frozen=True)
class SelectionChanged:
    """The effective selection is (or is proposed to become) ``keys``."""
    keys: Tuple[RowKey, ...]
    applied: bool = True


@dataclass(frozen=True)
class RowSelectionRequested:
    row_key: RowKey
    selected: bool


@dataclass(frozen=True)
class SelectAllRequested:
    selected: bool


@dataclass(frozen=True)
class EditStarted:
    row_key: RowKey
    column_key: str
    value: Any


@dataclass(frozen=True)
class EditReplaced:
    """An unsaved session was discarded because a new edit started."""
    row_key: RowKey
    column_key: str
    discarded_value: Any


@dataclass(frozen=True)
class EditValueChanged:
    value: Any


@dataclass(frozen=True)
class CommitRequested:
    row_key: RowKey
    column_key: str
    value: Any


@dataclass(frozen=True)
class EditCancelled:
    row_key: RowKey
    column_key: str


@dataclass(frozen=True)
class MenuActionInvoked:
    index: int
    label: str


@dataclass(frozen=True)
class MenuClosed:
    reason: str
    index: Optional[int] = None
