"""Runtime settings, read from the environment (and a local .env file)."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .values import ADVANCED, POLICIES

DEFAULT_POLICY = ADVANCED
DEFAULT_MAX_DEPTH = 256
DEFAULT_PLACEHOLDER = "N/A"
DEFAULT_PREVIEW_ROWS = 3

# Stack frames kept free for callers (Gradio worker, test runner) below the flattener.
RECURSION_MARGIN = 250

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    policy: str = DEFAULT_POLICY
    max_depth: int = DEFAULT_MAX_DEPTH
    placeholder: str = DEFAULT_PLACEHOLDER
    preview_rows: int = DEFAULT_PREVIEW_ROWS
    log_level: str = "INFO"
    server_name: Optional[str] = None
    server_port: Optional[int] = None


def _positive_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def max_safe_depth() -> int:
    """Deepest nesting the flattener can walk without hitting RecursionError."""
    return max(1, sys.getrecursionlimit() - RECURSION_MARGIN)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from `env`, or from os.environ after loading .env."""
    if env is None:
        load_dotenv()
        env = os.environ

    policy = env.get("JSON_FLATTENER_POLICY", DEFAULT_POLICY).strip().lower()
    if policy not in POLICIES:
        raise ValueError(f"JSON_FLATTENER_POLICY must be one of {', '.join(POLICIES)}, got {policy!r}")

    log_level = env.get("JSON_FLATTENER_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"JSON_FLATTENER_LOG_LEVEL is not a logging level: {log_level!r}")

    max_depth = _positive_int(env, "JSON_FLATTENER_MAX_DEPTH", DEFAULT_MAX_DEPTH)
    if max_depth > max_safe_depth():
        raise ValueError(
            f"JSON_FLATTENER_MAX_DEPTH must be at most {max_safe_depth()} "
            f"(recursion limit {sys.getrecursionlimit()}), got {max_depth}"
        )

    return Settings(
        policy=policy,
        max_depth=max_depth,
        placeholder=env.get("JSON_FLATTENER_PLACEHOLDER", DEFAULT_PLACEHOLDER),
        preview_rows=_positive_int(env, "JSON_FLATTENER_PREVIEW_ROWS", DEFAULT_PREVIEW_ROWS),
        log_level=log_level,
        server_name=env.get("GRADIO_SERVER_NAME") or None,
        server_port=_positive_int(env, "GRADIO_SERVER_PORT", None),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
