"""
Column definitions for the data grid.

Columns can be declared in code or loaded from a definition file
(JSON or YAML) of the form:

    columns:
      - key: name
        header: Name
        editor: text
      - key: role
        header: Role
        editor: select
        options:
          - {label: Admin, value: admin}
          - {label: User, value: user}

Loading never raises: problems are collected as human-readable messages.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

# Valid inline editor types
VALID_EDITORS = frozenset(['text', 'number', 'select'])


@dataclass
class Column:
    key: str
    header: str
    editor: Optional[str] = None
    options: List[Dict[str, Any]] = field(default_factory=list)
    editable: bool = True
    width: Optional[str] = None
    class_name: str = ''
    header_class_name: str = ''
    visible: bool = True
    # Custom cell renderer: fn(value, row). It may build NiceGUI elements
    # itself (return None) or return a value to show as text.
    render: Optional[Callable[[Any, Dict[str, Any]], Any]] = None

    @property
    def is_editable(self) -> bool:
        return self.editable and self.editor is not None

    def option_map(self) -> Dict[Any, str]:
        """Map option values to labels, as ui.select expects."""
        return {opt.get('value'): opt.get('label', str(opt.get('value'))) for opt in self.options}


def coerce_value(column: Column, raw: Any) -> Any:
    """
    Convert raw editor input to the column's value type.

    Number editors parse ints and floats; integral floats (ui.number always
    emits floats) become ints. Input that does not parse is returned
    unchanged so the commit callback can decide what to do.
    """
    if column.editor != 'number' or raw is None or isinstance(raw, (bool, int)):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else raw
    text = str(raw).strip()
    if text == '':
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return raw


def _validate_column(entry: Any, index: int) -> List[str]:
    """Validate a single column definition. Returns list of error messages."""
    if not isinstance(entry, dict):
        return [f"Column {index}: must be an object"]

    errors = []
    key = entry.get('key')
    if not key:
        errors.append(f"Column {index}: missing required 'key' property")
        return errors
    if not isinstance(key, str) or not re.match(r'^[A-Za-z_][A-Za-z0-9_]*$', key):
        errors.append(f"Column '{key}': key must start with a letter or _ and use only letters, digits, _")

    editor = entry.get('editor')
    if editor is not None and editor not in VALID_EDITORS:
        errors.append(f"Column '{key}': invalid editor '{editor}' (must be: {', '.join(sorted(VALID_EDITORS))})")

    options = entry.get('options')
    if options is not None:
        if not isinstance(options, list):
            errors.append(f"Column '{key}': 'options' must be an array")
        elif not all(isinstance(o, dict) and 'value' in o for o in options):
            errors.append(f"Column '{key}': every option needs a 'value'")
    if editor == 'select' and not options:
        errors.append(f"Column '{key}': select editor requires 'options'")

    for flag in ('editable', 'visible'):
        if flag in entry and not isinstance(entry[flag], bool):
            errors.append(f"Column '{key}': '{flag}' must be a boolean")

    return errors


def parse_columns(definition: Any) -> Tuple[List[Column], List[str]]:
    """Build Column objects from a parsed definition. Invalid entries are skipped."""
    if isinstance(definition, dict):
        entries = definition.get('columns')
    else:
        entries = definition

    if not isinstance(entries, list):
        return [], ["Definition must contain a 'columns' array"]

    columns: List[Column] = []
    errors: List[str] = []
    seen_keys = set()
    for i, entry in enumerate(entries):
        entry_errors = _validate_column(entry, i)
        key = entry.get('key') if isinstance(entry, dict) else None
        if key and key in seen_keys:
            entry_errors.append(f"Duplicate column key '{key}'")
        if entry_errors:
            errors.extend(entry_errors)
            continue
        seen_keys.add(key)
        columns.append(Column(
            key=key,
            header=entry.get('header') or key.replace('_', ' ').title(),
            editor=entry.get('editor'),
            options=list(entry.get('options') or []),
            editable=entry.get('editable', True),
            width=entry.get('width'),
            class_name=entry.get('class_name', ''),
            header_class_name=entry.get('header_class_name', ''),
            visible=entry.get('visible', True),
        ))
    return columns, errors


def load_columns(path: Path) -> Tuple[List[Column], List[str]]:
    """
    Load column definitions from a .json, .yaml or .yml file.

    Returns (columns, validation_errors).
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() in ('.yaml', '.yml'):
                definition = yaml.safe_load(f)
            else:
                definition = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load column definitions from {path}: {e}")
        return [], [f"Failed to load {path.name}: {e}"]

    columns, errors = parse_columns(definition)
    for error in errors:
        logger.warning(f"{path.name}: {error}")
    return columns, errors
