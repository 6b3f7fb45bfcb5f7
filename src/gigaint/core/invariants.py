"""Invariant checkers for digit vectors and BigInt values.

Each function returns True when the invariant holds. ``check_digits()`` and
``check_all()`` return the list of violated invariant IDs (empty = all pass).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..kernels.digits import decimal_length, is_zero
from ..kernels.types import RADIX, DigitVector

if TYPE_CHECKING:
    from .bigint import BigInt


def inv_digits_nonempty(v: DigitVector) -> bool:
    return isinstance(v.cells, tuple) and len(v.cells) >= 1


def inv_digits_in_range(v: DigitVector) -> bool:
    return all(
        isinstance(d, int) and not isinstance(d, bool) and 0 <= d < RADIX for d in v.cells
    )


def inv_digits_canonical(v: DigitVector) -> bool:
    return len(v.cells) == 1 or v.cells[-1] != 0


def inv_no_negative_zero(n: BigInt) -> bool:
    return not (n.negative and is_zero(n.digits))


def inv_decimal_length_matches(n: BigInt) -> bool:
    return n.decimal_length == decimal_length(n.digits)


_DIGIT_INVARIANTS: dict[str, Callable[[DigitVector], bool]] = {
    "digits_nonempty": inv_digits_nonempty,
    "digits_in_range": inv_digits_in_range,
    "digits_canonical": inv_digits_canonical,
}

_BIGINT_INVARIANTS: dict[str, Callable[[BigInt], bool]] = {
    "no_negative_zero": inv_no_negative_zero,
    "decimal_length_matches": inv_decimal_length_matches,
}


def check_digits(v: DigitVector) -> list[str]:
    violations: list[str] = []
    for name, fn in _DIGIT_INVARIANTS.items():
        if not fn(v):
            violations.append(name)
            if name == "digits_nonempty":
                # Later checks index the top cell.
                break
    return violations


def check_all(n: BigInt) -> list[str]:
    """Digit checks first; value-level checks only run on well-formed digits."""
    violations = check_digits(n.digits)
    if violations:
        return violations
    return [name for name, fn in _BIGINT_INVARIANTS.items() if not fn(n)]
