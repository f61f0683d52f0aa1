from __future__ import annotations

import json
from typing import Any

from .errors import ParseError


def parse_json_text(text: str) -> Any:
    """Parse raw JSON text, raising ParseError on empty or malformed input."""
    if text is None or not str(text).strip():
        raise ParseError("No JSON input provided.")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc.msg}", exc.lineno, exc.colno) from exc


def read_json_content(file_obj) -> str:
    """Read the text of an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()
