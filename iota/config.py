from __future__ import annotations
import logging
import os
import sys
from typing import Optional


_DEFAULT_LOG_LEVEL = logging.WARNING
_DEFAULT_RECURSION_LIMIT = 10000
_LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def _from_env(var: str) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def get_log_level() -> int:
    """Log level named by IOTA_LOGLEVEL, WARNING when unset or unknown."""
    raw = _from_env('IOTA_LOGLEVEL')
    if raw is None:
        return _DEFAULT_LOG_LEVEL
    level = getattr(logging, raw.upper(), None)
    if isinstance(level, int):
        return level
    return _DEFAULT_LOG_LEVEL


def get_recursion_limit() -> int:
    """Host recursion limit from IOTA_RECURSION_LIMIT, or the default."""
    raw = _from_env('IOTA_RECURSION_LIMIT')
    if raw is None:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def configure_logging(level: Optional[int] = None) -> None:
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


def apply_recursion_limit() -> None:
    # Never lowers the current limit.
    limit = get_recursion_limit()
    if limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)
