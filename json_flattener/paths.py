from __future__ import annotations

from typing import Any


def join_key(prefix: str, key: Any) -> str:
    """Append an object key to a flat path.

    Keys are used verbatim: a literal key such as 'gpt-3.5' is not escaped,
    so it can produce the same flat path as a nested object. That case is
    caught when the record is assembled, not here.
    """
    if not isinstance(key, str):
        key = str(key)
    return f"{prefix}.{key}" if prefix else key


def index_key(prefix: str, index: int) -> str:
    return f"{prefix}[{index}]"
