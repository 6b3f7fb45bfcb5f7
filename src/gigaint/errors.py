"""Exception types for gigaint.

Every exception carries an ``ErrorKind`` so that ``engine.evaluate()`` can
report failures as values and ``engine.evaluate_or_raise()`` can map them back.
Where a builtin exception already names the failure, the gigaint type also
subclasses it (``ZeroDivisionError``, ``ValueError``, ``KeyError``).
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class ErrorKind(Enum):
    DIVISION_BY_ZERO = "division_by_zero"
    MATH_DOMAIN = "math_domain"
    MALFORMED_LITERAL = "malformed_literal"
    INVARIANT = "invariant"
    USE_AFTER_FREE = "use_after_free"
    MISSING_KEY = "missing_key"
    ARITY = "arity"
    UNKNOWN_OPERATION = "unknown_operation"
    OPERAND_TYPE = "operand_type"


class BigIntError(Exception):
    """Base class for all gigaint failures."""

    kind: ErrorKind = ErrorKind.INVARIANT


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """Raised on division, modulo or power_mod by a zero divisor/modulus."""

    kind = ErrorKind.DIVISION_BY_ZERO


class MathDomainError(BigIntError, ValueError):
    """Raised when an operand lies outside the operation's domain."""

    kind = ErrorKind.MATH_DOMAIN


class MalformedLiteralError(BigIntError, ValueError):
    """Raised when decimal text is not an optional '-' followed by digits."""

    kind = ErrorKind.MALFORMED_LITERAL


class InvariantError(BigIntError):
    """Raised when a value violates one or more canonical-form invariants."""

    kind = ErrorKind.INVARIANT

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")


class UseAfterFreeError(BigIntError):
    """Raised when a released handle is read or released again."""

    kind = ErrorKind.USE_AFTER_FREE


class ArityError(BigIntError, TypeError):
    """Raised when an engine operation receives the wrong number of operands."""

    kind = ErrorKind.ARITY


class UnknownOperationError(BigIntError, ValueError):
    """Raised when an engine operation name is not recognised."""

    kind = ErrorKind.UNKNOWN_OPERATION


class OperandTypeError(BigIntError, TypeError):
    """Raised when an engine operand is not a BigInt, int or decimal str."""

    kind = ErrorKind.OPERAND_TYPE


class MemoKeyError(BigIntError, KeyError):
    """Raised by ``MemoCache.remove()`` for a key that is not present."""

    kind = ErrorKind.MISSING_KEY

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
