from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

# Environment variables read by the driver
PRELUDE_VAR = 'SXEVAL_PRELUDE_PATH'
RECURSION_LIMIT_VAR = 'SXEVAL_RECURSION_LIMIT'
LOG_LEVEL_VAR = 'SXEVAL_LOG_LEVEL'

_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str) -> Optional[Path]:
    raw = os.environ.get(var, '').strip()
    return Path(raw) if raw else None


def get_prelude_path() -> Optional[Path]:
    """File of forms to evaluate into every new session, if configured."""
    return path_from_env(PRELUDE_VAR)


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get(RECURSION_LIMIT_VAR, '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f'{RECURSION_LIMIT_VAR} must be an integer, got {raw!r}') from None
    if limit <= 0:
        raise ValueError(f'{RECURSION_LIMIT_VAR} must be positive, got {limit}')
    return limit


def get_log_level() -> int:
    name = os.environ.get(LOG_LEVEL_VAR, _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f'{LOG_LEVEL_VAR} is not a log level: {name!r}')
    return level
