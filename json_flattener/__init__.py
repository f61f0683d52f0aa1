"""Core logic for the JSON Flattener and Field Selector.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse JSON text
- flatten objects into dot/bracket-path keyed records
- discover the selectable field list
- build the display table
"""

from .errors import (
    CyclicStructureError,
    DepthExceededError,
    FlattenError,
    KeyCollisionError,
    ParseError,
    UnsupportedTopLevelShape,
)
from .fields import discover_fields
from .flattening import FlattenResult, flatten, flatten_advanced, flatten_batch, flatten_simple
from .values import Cell

__all__ = [
    "Cell",
    "CyclicStructureError",
    "DepthExceededError",
    "FlattenError",
    "FlattenResult",
    "KeyCollisionError",
    "ParseError",
    "UnsupportedTopLevelShape",
    "discover_fields",
    "flatten",
    "flatten_advanced",
    "flatten_batch",
    "flatten_simple",
]
