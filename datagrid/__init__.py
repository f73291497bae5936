"""
datagrid: the interaction layer of a NiceGUI data grid.

Row selection, a single inline edit session, a positioned context menu and
full-width detail rows. The controllers are plain Python and can be driven
without a browser; GridHost composes them and DataGrid (datagrid.grid)
renders a GridHost with NiceGUI.
"""

from datagrid.columns import Column, coerce_value, load_columns
from datagrid.edit import EditSession, EditSessionController
from datagrid.host import GridHost
from datagrid.menu import ContextMenuOverlay, ContextMenuState, MenuOption
from datagrid.selection import Controlled, SelectionController, Uncontrolled
from datagrid.types import Position, RowKey

__version__ = '0.1.0'

__all__ = [
    'Column',
    'coerce_value',
    'load_columns',
    'EditSession',
    'EditSessionController',
    'GridHost',
    'ContextMenuOverlay',
    'ContextMenuState',
    'MenuOption',
    'Controlled',
    'SelectionController',
    'Uncontrolled',
    'Position',
    'RowKey',
]
