"""Errors raised while parsing and flattening JSON input."""

from __future__ import annotations

from typing import Optional


class FlattenError(Exception):
    """Base class for every error that aborts a flatten run."""


class ParseError(FlattenError, ValueError):
    """Raised when the input text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        self.lineno = lineno
        self.colno = colno
        if lineno is not None and colno is not None:
            message = f"{message} (line {lineno}, column {colno})"
        super().__init__(message)


class UnsupportedTopLevelShape(FlattenError):
    """Raised when the input is neither an object nor a list of objects."""

    def __init__(self, kind: str, index: Optional[int] = None):
        self.kind = kind
        self.index = index
        if index is None:
            message = f"Expected a JSON object or an array of objects, got {kind}."
        else:
            message = f"Expected an object at index {index} of the top-level array, got {kind}."
        super().__init__(message)


class CyclicStructureError(FlattenError):
    """Raised when a container is reachable from itself."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cyclic reference detected at '{path or '(root)'}'.")


class DepthExceededError(FlattenError):
    """Raised when nesting goes deeper than the configured limit."""

    def __init__(self, path: str, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Nesting deeper than {max_depth} levels at '{path}'.")


class KeyCollisionError(FlattenError):
    """Raised when two different locations flatten to the same key."""

    def __init__(self, key: str, record_index: Optional[int] = None):
        self.key = key
        self.record_index = record_index
        where = f" in record {record_index}" if record_index is not None else ""
        super().__init__(f"Flat key '{key}' is produced by more than one location{where}.")
