"""Memoized modular exponentiation on magnitudes.

The exponent is split into ``e0 = floor(e / 2)`` and ``e1 = e - e0``; the
result is ``(b**e0 mod m) * (b**e1 mod m) mod m``. The two halves are equal or
differ by one, so each level of the split holds at most two distinct
exponents. A ``MemoCache`` scoped to one top-level call maps each exponent
already seen to its result.

The split is unrolled without recursion: the distinct exponents are collected
level by level down to 1, then the cache is filled from the smallest exponent
upward. Work is O(log2(e)) modular multiplications and memory is
O(log2(e)) cache entries.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_MEMO_MIN_BUCKETS
from ..errors import DivisionByZeroError
from ..kernels.digits import compare, divmod_digits, halve, increment, is_one, is_zero, multiply
from ..kernels.types import ONE, ZERO, DigitVector
from ..state.memo import MemoCache

logger = logging.getLogger(__name__)


def _bit_length(n: DigitVector) -> int:
    bits = 0
    while not is_zero(n):
        n, _ = halve(n)
        bits += 1
    return bits


def _split(exponent: DigitVector) -> tuple[DigitVector, DigitVector]:
    e0, odd = halve(exponent)
    return e0, (e0 if odd == 0 else increment(e0))


def memo_bucket_count(exponent: DigitVector, minimum: int = DEFAULT_MEMO_MIN_BUCKETS) -> int:
    """Buckets for one call: about one per bit of the exponent."""
    return max(minimum, _bit_length(exponent), 1)


def power_mod_cached(
    base: DigitVector,
    exponent: DigitVector,
    modulus: DigitVector,
    cache: MemoCache[DigitVector, DigitVector],
) -> DigitVector:
    """(base ** exponent) mod modulus, memoizing per-exponent results in ``cache``.

    ``cache`` must only hold results for this ``base``/``modulus`` pair. Every
    half exponent met on the way down is left in the cache; ``exponent``
    itself is not.
    """
    if is_zero(modulus):
        raise DivisionByZeroError("division by zero")
    if compare(base, modulus) >= 0:
        base = divmod_digits(base, modulus)[1]
    if is_zero(base) or is_one(modulus):
        return ZERO
    if is_one(base) or is_zero(exponent):
        return ONE
    if is_one(exponent):
        return base

    # Top-down: distinct exponents > 1 per level that are not cached yet.
    levels: list[list[DigitVector]] = []
    level = [exponent]
    while level:
        pending: list[DigitVector] = []
        for e in level:
            for half in _split(e):
                if is_one(half):
                    if half not in cache:
                        cache.insert(half, base)
                elif half not in cache and half not in pending:
                    pending.append(half)
        if pending:
            levels.append(pending)
        level = pending

    # Bottom-up: every half of a level is cached before the level itself.
    for pending in reversed(levels):
        for e in pending:
            cache.insert(e, _combine(e, modulus, cache))
    return _combine(exponent, modulus, cache)


def _combine(
    exponent: DigitVector,
    modulus: DigitVector,
    cache: MemoCache[DigitVector, DigitVector],
) -> DigitVector:
    e0, e1 = _split(exponent)
    product = multiply(cache.get(e0), cache.get(e1))
    return divmod_digits(product, modulus)[1]


def power_mod_digits(
    base: DigitVector,
    exponent: DigitVector,
    modulus: DigitVector,
    *,
    min_buckets: int = DEFAULT_MEMO_MIN_BUCKETS,
) -> DigitVector:
    """Top-level entry: builds and discards the memo cache for one call."""
    if is_zero(modulus):
        raise DivisionByZeroError("division by zero")
    cache: MemoCache[DigitVector, DigitVector] = MemoCache(
        memo_bucket_count(exponent, min_buckets),
    )
    result = power_mod_cached(base, exponent, modulus, cache)
    logger.debug(
        "power_mod: exponent=%d cells, buckets=%d, memo entries=%d",
        len(exponent), cache.bucket_count, len(cache),
    )
    return result
