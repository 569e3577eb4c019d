from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_MAX_DEPTH = 150
_DEFAULT_MAX_NESTING = 200
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """Maximum nesting of S-expression reductions before a depth error."""
    return int_from_env('LISPY_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_max_nesting() -> int:
    """Maximum bracket nesting the reader accepts."""
    return int_from_env('LISPY_MAX_NESTING', _DEFAULT_MAX_NESTING)


def get_log_level() -> int:
    raw = os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a "Level x" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
