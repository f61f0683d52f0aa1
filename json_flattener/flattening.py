from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple

from .config import DEFAULT_MAX_DEPTH, max_safe_depth
from .errors import CyclicStructureError, DepthExceededError, FlattenError, KeyCollisionError
from .fields import discover_fields
from .paths import index_key, join_key
from .records import normalize_records
from .values import ADVANCED, SIMPLE, Cell, JsonKind, check_policy, classify, is_primitive, to_display_string

logger = logging.getLogger(__name__)

FlatRecord = Dict[str, Any]
Collision = Tuple[int, str]

ON_COLLISION = ("warn", "error")


@dataclass
class FlattenResult:
    """Records and field list produced by one flatten run."""

    records: List[FlatRecord]
    fields: List[str]
    policy: str
    collisions: List[Collision] = field(default_factory=list)


class _RecordBuilder:
    """Walks one input object and assembles its flat record."""

    def __init__(self, policy: str, max_depth: int, on_collision: str, record_index: int = 0):
        self.policy = policy
        self.max_depth = max_depth
        self.on_collision = on_collision
        self.record_index = record_index
        self.record: FlatRecord = {}
        self.collisions: List[Collision] = []
        self._active: Set[int] = set()

    def build(self, obj: Dict[str, Any]) -> FlatRecord:
        if self.policy == SIMPLE:
            self._visit_simple(obj, '', 0)
        else:
            self._visit_advanced(obj, '', 0)
        return self.record

    def _assign(self, key: str, value: Any) -> None:
        if key in self.record:
            if self.on_collision == "error":
                raise KeyCollisionError(key, self.record_index)
            logger.warning("Flat key %r collides in record %d; later value wins", key, self.record_index)
            self.collisions.append((self.record_index, key))
        self.record[key] = value

    def _enter(self, container: Any, path: str, depth: int) -> None:
        if depth > self.max_depth:
            raise DepthExceededError(path, self.max_depth)
        marker = id(container)
        if marker in self._active:
            raise CyclicStructureError(path)
        self._active.add(marker)

    def _leave(self, container: Any) -> None:
        self._active.discard(id(container))

    def _check_nested_arrays(self, items: Any, path: str, depth: int) -> None:
        # Stringifying an array walks its nested arrays, so they get the same guard.
        self._enter(items, path, depth)
        try:
            for index, item in enumerate(items):
                if classify(item) is JsonKind.ARRAY:
                    self._check_nested_arrays(item, index_key(path, index), depth + 1)
        finally:
            self._leave(items)

    def _visit_simple(self, value: Any, prefix: str, depth: int) -> None:
        kind = classify(value)
        if kind is JsonKind.OBJECT and value:
            self._enter(value, prefix, depth)
            try:
                for key, child in value.items():
                    self._visit_simple(child, join_key(prefix, key), depth + 1)
            finally:
                self._leave(value)
        elif kind in (JsonKind.OBJECT, JsonKind.ARRAY) and not value:
            if depth > 0:
                self._assign(prefix, None)
        elif kind is JsonKind.NULL:
            self._assign(prefix, None)
        else:
            if kind is JsonKind.ARRAY:
                self._check_nested_arrays(value, prefix, depth)
            self._assign(prefix, to_display_string(value))

    def _visit_advanced(self, value: Any, prefix: str, depth: int) -> None:
        kind = classify(value)
        if kind is JsonKind.NULL:
            self._assign(prefix, Cell.primitive(None))
        elif kind is JsonKind.SCALAR:
            self._assign(prefix, Cell.primitive(value))
        elif kind is JsonKind.OTHER:
            self._assign(prefix, Cell.primitive(str(value)))
        elif kind is JsonKind.ARRAY:
            if all(is_primitive(item) for item in value):
                self._assign(prefix, Cell.array(value))
                return
            self._enter(value, prefix, depth)
            try:
                for index, item in enumerate(value):
                    self._visit_advanced(item, index_key(prefix, index), depth + 1)
            finally:
                self._leave(value)
        elif not value:
            if depth > 0:
                self._assign(prefix, Cell.primitive(None))
        else:
            self._enter(value, prefix, depth)
            try:
                for key, child in value.items():
                    self._visit_advanced(child, join_key(prefix, key), depth + 1)
            finally:
                self._leave(value)


def _flatten_records(
    data: Any,
    policy: str,
    max_depth: int,
    on_collision: str,
) -> Tuple[List[FlatRecord], List[Collision]]:
    check_policy(policy)
    if on_collision not in ON_COLLISION:
        raise ValueError(f"on_collision must be one of {', '.join(ON_COLLISION)}, got {on_collision!r}.")

    limit = max_safe_depth()
    if max_depth > limit:
        logger.warning("max_depth %d exceeds the interpreter recursion budget; using %d", max_depth, limit)
        max_depth = limit

    records: List[FlatRecord] = []
    collisions: List[Collision] = []
    for index, obj in enumerate(normalize_records(data)):
        builder = _RecordBuilder(policy, max_depth, on_collision, record_index=index)
        try:
            records.append(builder.build(obj))
        except FlattenError as e:
            logger.error("Error flattening record at index %d: %s", index, e)
            raise
        collisions.extend(builder.collisions)
    return records, collisions


def flatten(
    data: Any,
    policy: str = ADVANCED,
    max_depth: int = DEFAULT_MAX_DEPTH,
    on_collision: str = "warn",
) -> List[FlatRecord]:
    """Flatten a parsed JSON object, or a list of objects, into flat records.

    One record is produced per input object, keys in input order. Raises
    `UnsupportedTopLevelShape` for any other top-level value,
    `CyclicStructureError` / `DepthExceededError` for runaway structures and,
    with on_collision="error", `KeyCollisionError`.
    """
    records, _ = _flatten_records(data, policy, max_depth, on_collision)
    return records


def flatten_batch(
    data: Any,
    policy: str = ADVANCED,
    max_depth: int = DEFAULT_MAX_DEPTH,
    on_collision: str = "warn",
) -> FlattenResult:
    records, collisions = _flatten_records(data, policy, max_depth, on_collision)
    fields = discover_fields(records, policy)
    logger.debug(
        "Flattened %d records into %d fields (policy=%s, collisions=%d)",
        len(records),
        len(fields),
        policy,
        len(collisions),
    )
    return FlattenResult(records=records, fields=fields, policy=policy, collisions=collisions)


def flatten_simple(obj: Dict[str, Any], max_depth: int = DEFAULT_MAX_DEPTH) -> FlatRecord:
    """Flatten a single object with the simple policy."""
    return flatten(obj, SIMPLE, max_depth=max_depth)[0]


def flatten_advanced(obj: Dict[str, Any], max_depth: int = DEFAULT_MAX_DEPTH) -> FlatRecord:
    """Flatten a single object with the advanced policy."""
    return flatten(obj, ADVANCED, max_depth=max_depth)[0]
