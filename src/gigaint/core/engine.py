"""Dispatch-table engine over the BigInt operations.

``evaluate(op, *operands)`` is the fallible entry point. It:

1. Resolves the operation name.
2. Checks the operand count.
3. Coerces operands (``BigInt``, ``int`` or decimal ``str``).
4. Runs the operation and returns an ``OpResult``: accepted with a value, or
   rejected with an ``ErrorKind`` and a message. A rejected result never
   carries a partial value.

``evaluate_or_raise`` is the same but raises the typed exception instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, unique
from typing import Callable, Union

from ..errors import (
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
from . import bigint as bi
from .bigint import BigInt

logger = logging.getLogger(__name__)

OperandLike = Union[BigInt, int, str]


@unique
class Operation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULO = "modulo"
    LOG = "log"
    POWER_MOD = "power_mod"
    ABS = "abs"
    NEGATE = "negate"
    COMPARE = "compare"


@dataclass(frozen=True)
class OpResult:
    """Result of a single evaluation."""

    ok: bool
    value: BigInt | None = None
    error_kind: ErrorKind | None = None
    message: str | None = None
    violations: tuple[str, ...] = ()


def _compare(a: BigInt, b: BigInt) -> BigInt:
    return bi.from_int(bi.compare(a, b))


_DISPATCH: dict[Operation, tuple[int, Callable[..., BigInt]]] = {
    Operation.ADD: (2, bi.add),
    Operation.SUBTRACT: (2, bi.subtract),
    Operation.MULTIPLY: (2, bi.multiply),
    Operation.DIVIDE: (2, bi.divide),
    Operation.MODULO: (2, bi.modulo),
    Operation.LOG: (2, bi.log),
    Operation.POWER_MOD: (3, bi.power_mod),
    Operation.ABS: (1, bi.abs_),
    Operation.NEGATE: (1, bi.negate),
    Operation.COMPARE: (2, _compare),
}

_EXCEPTIONS: dict[ErrorKind, type[BigIntError]] = {
    ErrorKind.DIVISION_BY_ZERO: DivisionByZeroError,
    ErrorKind.MATH_DOMAIN: MathDomainError,
    ErrorKind.MALFORMED_LITERAL: MalformedLiteralError,
    ErrorKind.USE_AFTER_FREE: UseAfterFreeError,
    ErrorKind.MISSING_KEY: MemoKeyError,
    ErrorKind.ARITY: ArityError,
    ErrorKind.UNKNOWN_OPERATION: UnknownOperationError,
    ErrorKind.OPERAND_TYPE: OperandTypeError,
}


def arity(op: Operation) -> int:
    return _DISPATCH[op][0]


def coerce_operand(value: OperandLike) -> BigInt:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, str):
        return bi.from_str(value.strip())
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandTypeError(f"operand must be BigInt, int or str, got {type(value).__name__}")
    return bi.from_int(value)


def _reject(kind: ErrorKind, message: str, violations: tuple[str, ...] = ()) -> OpResult:
    logger.debug("rejected: %s: %s", kind.value, message)
    return OpResult(ok=False, error_kind=kind, message=message, violations=violations)


def evaluate(op: Operation | str, *operands: OperandLike) -> OpResult:
    """Run one operation, reporting failures as a rejected ``OpResult``."""
    if isinstance(op, Operation):
        operation = op
    else:
        try:
            operation = Operation(op)
        except ValueError:
            return _reject(ErrorKind.UNKNOWN_OPERATION, f"unknown operation: {op!r}")

    expected, fn = _DISPATCH[operation]
    if len(operands) != expected:
        return _reject(
            ErrorKind.ARITY,
            f"{operation.value} takes {expected} operand(s), got {len(operands)}",
        )

    try:
        args = [coerce_operand(x) for x in operands]
        value = fn(*args)
    except InvariantError as exc:
        return _reject(exc.kind, str(exc), tuple(exc.violations))
    except BigIntError as exc:
        return _reject(exc.kind, str(exc))
    return OpResult(ok=True, value=value)


def evaluate_or_raise(op: Operation | str, *operands: OperandLike) -> BigInt:
    """Like ``evaluate()`` but returns the value or raises the typed exception.

    Raises:
        DivisionByZeroError: zero divisor or modulus.
        MathDomainError: operand outside the operation's domain.
        MalformedLiteralError: a ``str`` operand is not a decimal literal.
        InvariantError: a result failed canonical-form checks.
        ArityError / UnknownOperationError / OperandTypeError: bad call shape.
    """
    result = evaluate(op, *operands)
    if result.ok:
        assert result.value is not None
        return result.value

    kind = result.error_kind or ErrorKind.INVARIANT
    if kind is ErrorKind.INVARIANT:
        raise InvariantError(list(result.violations))
    raise _EXCEPTIONS[kind](result.message or kind.value)
