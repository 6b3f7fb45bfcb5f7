"""
Runtime configuration read from the environment.

    GIGAINT_CHECK_INVARIANTS  run canonical-form checks on every composed result
    GIGAINT_MEMO_MIN_BUCKETS  lower bound on power_mod memo bucket count
    GIGAINT_LOG_LEVEL         logging level used by the command-line tool
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_MEMO_MIN_BUCKETS = 8


def _bool_env(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return bool(default)
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int_env(name: str, *, default: int, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip(), 10)
    except ValueError:
        logger.warning("ignoring non-integer %s=%r", name, raw)
        return default
    return max(minimum, value)


@dataclass(frozen=True)
class GigaintConfig:
    # Validate every BigInt produced by the composer (debug aid; costs one
    # pass over the digits per result).
    check_invariants: bool = False
    memo_min_buckets: int = DEFAULT_MEMO_MIN_BUCKETS
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def load_config() -> GigaintConfig:
    """Read ``GigaintConfig`` from the environment (cached; see ``cache_clear``)."""
    level = os.environ.get("GIGAINT_LOG_LEVEL", "").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("ignoring unknown GIGAINT_LOG_LEVEL=%r", level)
        level = "WARNING"
    return GigaintConfig(
        check_invariants=_bool_env("GIGAINT_CHECK_INVARIANTS", default=False),
        memo_min_buckets=_int_env(
            "GIGAINT_MEMO_MIN_BUCKETS", default=DEFAULT_MEMO_MIN_BUCKETS, minimum=1,
        ),
        log_level=level,
    )
