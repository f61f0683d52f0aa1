from __future__ import annotations

from typing import Any, Dict, List

from .errors import UnsupportedTopLevelShape
from .values import JsonKind, classify, describe_kind


def normalize_records(data: Any) -> List[Dict[str, Any]]:
    """Turn parsed input into the list of objects to flatten.

    A single object becomes a one-element list. A list must hold objects
    only; anything else is rejected rather than flattened into something
    that only looks right.
    """
    kind = classify(data)
    if kind is JsonKind.OBJECT:
        return [data]
    if kind is not JsonKind.ARRAY:
        raise UnsupportedTopLevelShape(describe_kind(data))

    items: List[Dict[str, Any]] = []
    for index, item in enumerate(data):
        if classify(item) is not JsonKind.OBJECT:
            raise UnsupportedTopLevelShape(describe_kind(item), index=index)
        items.append(item)
    return items
