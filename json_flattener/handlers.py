from __future__ import annotations

import logging
from typing import List

import gradio as gr

from .config import Settings
from .errors import FlattenError, ParseError
from .fields import discover_fields, missing_fields
from .flattening import FlattenResult
from .io_utils import read_json_content
from .rendering import records_to_json
from .state import FlattenSession
from .values import ADVANCED

logger = logging.getLogger(__name__)


def summarize_result(result: FlattenResult) -> str:
    parts: List[str] = [f"Flattened {len(result.records)} record(s) into {len(result.fields)} field(s)."]

    hidden = [f for f in discover_fields(result.records, ADVANCED) if f not in result.fields]
    if hidden:
        parts.append(f"{len(hidden)} field(s) appear only after the first record and are not selectable.")

    incomplete = missing_fields(result.records, result.fields)
    if incomplete:
        parts.append(f"{len(incomplete)} record(s) lack some fields.")

    if result.collisions:
        keys = sorted({key for _, key in result.collisions})
        parts.append(f"Warning: {len(result.collisions)} key collision(s) on {', '.join(keys)}.")
    return " ".join(parts)


def load_file_into_input(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."
    try:
        text = read_json_content(file_obj)
    except (OSError, UnicodeDecodeError) as e:
        return gr.update(), f"Error reading file: {str(e)}"
    return text, "File loaded. Press 'Flatten JSON' to continue."


def flatten_handler(settings: Settings, text, policy, session):
    session = session or FlattenSession(policy=settings.policy)
    try:
        result = session.run(text, policy or settings.policy, max_depth=settings.max_depth)
    except ParseError as e:
        logger.info("Rejected input: %s", e)
        return session, gr.update(), gr.update(), gr.update(), f"Invalid JSON. Please check your input. ({e})"
    except FlattenError as e:
        logger.info("Flatten failed: %s", e)
        return session, gr.update(), gr.update(), gr.update(), f"Error: {e}"

    checkbox = gr.update(choices=result.fields, value=session.selected_fields)
    preview = records_to_json(result.records, limit=settings.preview_rows)
    return session, checkbox, session.table(settings.placeholder), preview, summarize_result(result)


def selection_change_handler(settings: Settings, selected, session):
    session = session or FlattenSession(policy=settings.policy)
    session.select_fields(selected or [])
    return session, session.table(settings.placeholder)


def select_all_handler(settings: Settings, session):
    session = session or FlattenSession(policy=settings.policy)
    session.select_all()
    return session, gr.update(value=session.selected_fields), session.table(settings.placeholder)


def clear_selection_handler(settings: Settings, session):
    session = session or FlattenSession(policy=settings.policy)
    session.clear_selection()
    return session, gr.update(value=[]), session.table(settings.placeholder)
