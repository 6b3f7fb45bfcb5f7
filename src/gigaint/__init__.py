"""`gigaint`: arbitrary-precision signed integers in pure Python.

Magnitudes are little-endian vectors of radix-10^9 digits (``gigaint.kernels``);
``BigInt`` adds the sign and exposes the arithmetic (``gigaint.core``):
- construction from decimal text or ints, decimal stringification,
- add / subtract / multiply, floor-style divide / modulo,
- integer logarithm and memoized modular exponentiation,
- total ordering, 32-bit hashing, copying.

Not intended for cryptographic use: nothing here runs in constant time.

Public API:
- `BigInt`, `from_str(s)`, `from_int(n)`, `to_str(n)`
- `add`, `subtract`, `multiply`, `divide`, `modulo`, `log`, `power_mod`
- `evaluate(op, *operands) -> OpResult` (never raises for arithmetic errors)
- `evaluate_or_raise(op, *operands) -> BigInt`
"""

from .core.bigint import (
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
from .core.engine import OpResult, Operation, evaluate, evaluate_or_raise
from .errors import (
    ArityError,
    BigIntError,
    DivisionByZeroError,
    ErrorKind,
    InvariantError,
    MalformedLiteralError,
    MathDomainError,
    MemoKeyError,
    OperandTypeError,
    UnknownOperationError,
    UseAfterFreeError,
)
from .state.handles import Handle, free
from .state.memo import MemoCache

__version__ = "0.5.0"

__all__ = [
    "BigInt",
    "from_str",
    "from_int",
    "to_str",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "divmod_",
    "log",
    "power_mod",
    "abs_",
    "negate",
    "compare",
    "gt",
    "st",
    "eq",
    "hash_bigint",
    "copy",
    "free",
    "Handle",
    "MemoCache",
    "Operation",
    "OpResult",
    "evaluate",
    "evaluate_or_raise",
    "ErrorKind",
    "BigIntError",
    "DivisionByZeroError",
    "MathDomainError",
    "MalformedLiteralError",
    "InvariantError",
    "UseAfterFreeError",
    "MemoKeyError",
    "OperandTypeError",
    "ArityError",
    "UnknownOperationError",
]
