from __future__ import annotations

from typing import Any, Dict, List, Sequence

import pandas as pd

from .config import DEFAULT_PLACEHOLDER
from .values import ARRAY, Cell, to_display_string

_MISSING = object()


def format_cell(value: Any, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Render one flat record value as display text.

    Nulls become the placeholder. Array cells list one element per line.
    """
    if isinstance(value, Cell):
        if value.kind == ARRAY:
            return "\n".join(format_cell(item, placeholder) for item in value.value)
        value = value.value
    if value is None:
        return placeholder
    return to_display_string(value)


def build_table(
    records: Sequence[Dict[str, Any]],
    selected_fields: Sequence[str],
    placeholder: str = DEFAULT_PLACEHOLDER,
    missing: str = "",
) -> pd.DataFrame:
    """Build the display table: one row per record, one column per selected field.

    A field the record does not carry renders as `missing`, an explicit null
    as `placeholder`, so the two stay distinguishable.
    """
    columns = list(selected_fields)
    rows: List[List[str]] = []
    for record in records:
        row = []
        for field in columns:
            value = record.get(field, _MISSING)
            row.append(missing if value is _MISSING else format_cell(value, placeholder))
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def records_to_json(records: Sequence[Dict[str, Any]], limit: int = 0) -> List[Dict[str, Any]]:
    """JSON-serializable view of flat records; `limit` > 0 keeps the first rows."""
    if limit > 0:
        records = records[:limit]
    return [
        {key: value.to_dict() if isinstance(value, Cell) else value for key, value in record.items()}
        for record in records
    ]
