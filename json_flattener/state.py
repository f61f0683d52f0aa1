from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import pandas as pd

from .config import DEFAULT_MAX_DEPTH, DEFAULT_PLACEHOLDER
from .flattening import FlattenResult, flatten_batch
from .io_utils import parse_json_text
from .rendering import build_table
from .values import ADVANCED, check_policy

logger = logging.getLogger(__name__)


@dataclass
class FlattenSession:
    """UI state for one browser session.

    `result` always holds the last successful flatten; a failed run leaves
    it and the field selection as they were.
    """

    input_text: str = ""
    policy: str = ADVANCED
    result: Optional[FlattenResult] = None
    selected_fields: List[str] = field(default_factory=list)

    @property
    def fields(self) -> List[str]:
        return list(self.result.fields) if self.result else []

    def run(self, text: str, policy: Optional[str] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> FlattenResult:
        policy = check_policy(policy or self.policy)
        data = parse_json_text(text)
        result = flatten_batch(data, policy, max_depth=max_depth)

        self.input_text = text
        self.policy = policy
        self.result = result
        self.selected_fields = list(result.fields)
        logger.debug("Session now holds %d records", len(result.records))
        return result

    def select_fields(self, names: Iterable[str]) -> List[str]:
        wanted = set(names or [])
        self.selected_fields = [f for f in self.fields if f in wanted]
        return self.selected_fields

    def select_all(self) -> List[str]:
        self.selected_fields = self.fields
        return self.selected_fields

    def clear_selection(self) -> List[str]:
        self.selected_fields = []
        return self.selected_fields

    def table(self, placeholder: str = DEFAULT_PLACEHOLDER) -> pd.DataFrame:
        records = self.result.records if self.result else []
        return build_table(records, self.selected_fields, placeholder)
