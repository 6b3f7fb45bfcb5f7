"""BigInt <-> plain dict conversion.

Round-trip property (tested): ``bigint_from_dict(bigint_to_dict(n)) == n``.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.bigint import BigInt
from ..core.invariants import check_all
from ..errors import InvariantError
from ..kernels.types import DigitVector


def bigint_to_dict(n: BigInt) -> dict[str, Any]:
    return {
        "negative": n.negative,
        "decimal_length": n.decimal_length,
        "digits": list(n.digits.cells),
    }


def bigint_from_dict(d: Mapping[str, Any]) -> BigInt:
    """Rebuild a BigInt. Raises KeyError on missing fields, TypeError on bad
    field types and InvariantError when the value is not canonical."""
    negative = d["negative"]
    if not isinstance(negative, bool):
        raise TypeError(f"negative must be bool, got {type(negative).__name__}")
    length = d["decimal_length"]
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"decimal_length must be int, got {type(length).__name__}")
    raw = d["digits"]
    if not isinstance(raw, (list, tuple)):
        raise TypeError(f"digits must be a list, got {type(raw).__name__}")

    value = BigInt(negative, length, DigitVector(tuple(raw)))
    violations = check_all(value)
    if violations:
        raise InvariantError(violations)
    return value
