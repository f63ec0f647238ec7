# -*- coding: utf-8 -*-
"""
Runtime settings, read from environment variables.

NAVX_ROWS / NAVX_COLS    default grid size (10 x 10)
NAVX_HISTORY_PATH        JSON-lines run history (results/history.jsonl)
NAVX_ALLOWED_ORIGINS     comma-separated CORS origins for the history API ("*")
NAVX_ANIMATION_MS        delay between replay frames in ms (80)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class Settings:
    rows: int = 10
    cols: int = 10
    history_path: str = os.path.join("results", "history.jsonl")
    allowed_origins: Tuple[str, ...] = ("*",)
    animation_ms: int = 80


def _int_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        val = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got '{raw}'") from None
    if val < 1:
        raise ValueError(f"{key} must be positive, got {val}")
    return val


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    defaults = Settings()
    origins = env.get("NAVX_ALLOWED_ORIGINS", "")
    return Settings(
        rows=_int_env(env, "NAVX_ROWS", defaults.rows),
        cols=_int_env(env, "NAVX_COLS", defaults.cols),
        history_path=env.get("NAVX_HISTORY_PATH") or defaults.history_path,
        allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or defaults.allowed_origins,
        animation_ms=_int_env(env, "NAVX_ANIMATION_MS", defaults.animation_ms),
    )
