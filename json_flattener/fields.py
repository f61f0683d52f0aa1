from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .values import SIMPLE, check_policy

FlatRecord = Dict[str, Any]


def discover_fields(records: Sequence[FlatRecord], policy: str) -> List[str]:
    """List the selectable fields of a batch of flat records.

    The simple policy only looks at the first record, so keys that appear
    later in a heterogeneous batch are not offered. The advanced policy
    scans every record and keeps first-seen order.
    """
    check_policy(policy)
    if not records:
        return []
    if policy == SIMPLE:
        return list(records[0].keys())

    seen: Dict[str, None] = {}
    for record in records:
        for key in record:
            if key not in seen:
                seen[key] = None
    return list(seen)


def missing_fields(records: Sequence[FlatRecord], fields: Sequence[str]) -> Dict[int, List[str]]:
    """Map record index to the fields that record does not carry."""
    missing: Dict[int, List[str]] = {}
    for index, record in enumerate(records):
        absent = [f for f in fields if f not in record]
        if absent:
            missing[index] = absent
    return missing
