from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_MAX_EXPANSION_DEPTH = 1000
_DEFAULT_MAX_EVAL_DEPTH = 10000
_DEFAULT_PROMPT = '> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def path_from_env(var: str) -> Optional[Path]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def get_max_expansion_depth() -> int:
    return int_from_env('LSON_MAX_EXPANSION_DEPTH', _DEFAULT_MAX_EXPANSION_DEPTH)


def get_max_eval_depth() -> int:
    return int_from_env('LSON_MAX_EVAL_DEPTH', _DEFAULT_MAX_EVAL_DEPTH)


def get_prompt() -> str:
    return os.environ.get('LSON_PROMPT', _DEFAULT_PROMPT)


def get_prelude_path() -> Optional[Path]:
    return path_from_env('LSON_PRELUDE_PATH')


def get_history_file() -> Optional[Path]:
    return path_from_env('LSON_HISTORY_FILE')


def get_log_level() -> int:
    name = os.environ.get('LSON_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    if not isinstance(level, int):
        raise ValueError(f"LSON_LOG_LEVEL is not a logging level: {name!r}")
    return level
