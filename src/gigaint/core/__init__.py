"""
Signed arithmetic over the digit kernel.
"""

from .bigint import (
    BigInt,
    abs_,
    add,
    compare,
    copy,
    divide,
    divmod_,
    eq,
    from_int,
    from_str,
    gt,
    hash_bigint,
    log,
    modulo,
    multiply,
    negate,
    power_mod,
    st,
    subtract,
    to_str,
)
from .engine import OpResult, Operation, evaluate, evaluate_or_raise
from .invariants import check_all, check_digits
