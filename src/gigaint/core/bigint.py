"""
Signed arbitrary-precision integers (sign/magnitude over the digit kernel).

A ``BigInt`` is an immutable ``{negative, decimal_length, digits}`` value.
Zero is never negative. All arithmetic is exposed as module-level functions
(``add``, ``subtract``, ``multiply``, ``divide``, ``modulo``, ``log``,
``power_mod``, ...) and as Python operators on the class.

Rounding: ``divide``/``modulo`` follow the floor convention used by Python's
``//`` and ``%``: the remainder takes the divisor's sign and
``divide(n, d) * d + modulo(n, d) == n`` for every nonzero ``d``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from ..config import load_config
from ..errors import DivisionByZeroError, InvariantError, MalformedLiteralError, MathDomainError
from ..kernels import digits as kd
from ..kernels.types import ONE, RADIX, UINT32_MAX, ZERO, DigitVector, fold_hash
from .invariants import check_all
from .power_mod import power_mod_digits

_LITERAL_RE = re.compile(r"-?[0-9]+")

Operand = Union["BigInt", int]


def _preview(text: str, limit: int = 40) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


@dataclass(frozen=True, eq=False)
class BigInt:
    negative: bool
    decimal_length: int
    digits: DigitVector

    # -- Construction -------------------------------------------------------

    @classmethod
    def from_str(cls, s: str) -> BigInt:
        return from_str(s)

    @classmethod
    def from_int(cls, n: int) -> BigInt:
        return from_int(n)

    # -- Views ----------------------------------------------------------------

    @property
    def sign_len(self) -> int:
        """Packed sign/length: ``len`` when non-negative, ``1 - len`` when negative."""
        return 1 - self.decimal_length if self.negative else self.decimal_length

    def __str__(self) -> str:
        return to_str(self)

    def __repr__(self) -> str:
        return f"BigInt('{_preview(to_str(self))}')"

    def __int__(self) -> int:
        value = 0
        for d in reversed(self.digits.cells):
            value = value * RADIX + d
        return -value if self.negative else value

    def __bool__(self) -> bool:
        return not kd.is_zero(self.digits)

    def __hash__(self) -> int:
        return hash_bigint(self)

    # -- Comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return eq(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return st(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return not gt(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return gt(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return not st(self, other)

    # -- Arithmetic -----------------------------------------------------------

    def __neg__(self) -> BigInt:
        return negate(self)

    def __pos__(self) -> BigInt:
        return self

    def __abs__(self) -> BigInt:
        return abs_(self)

    def __add__(self, other: Operand) -> BigInt:
        return add(self, _coerce(other))

    def __radd__(self, other: Operand) -> BigInt:
        return add(_coerce(other), self)

    def __sub__(self, other: Operand) -> BigInt:
        return subtract(self, _coerce(other))

    def __rsub__(self, other: Operand) -> BigInt:
        return subtract(_coerce(other), self)

    def __mul__(self, other: Operand) -> BigInt:
        return multiply(self, _coerce(other))

    def __rmul__(self, other: Operand) -> BigInt:
        return multiply(_coerce(other), self)

    def __floordiv__(self, other: Operand) -> BigInt:
        return divide(self, _coerce(other))

    def __rfloordiv__(self, other: Operand) -> BigInt:
        return divide(_coerce(other), self)

    def __mod__(self, other: Operand) -> BigInt:
        return modulo(self, _coerce(other))

    def __rmod__(self, other: Operand) -> BigInt:
        return modulo(_coerce(other), self)

    def __divmod__(self, other: Operand) -> tuple[BigInt, BigInt]:
        return divmod_(self, _coerce(other))

    def __pow__(self, exponent: Operand, modulus: Operand | None = None) -> BigInt:
        if modulus is None:
            raise TypeError("BigInt only supports three-argument pow(base, exp, mod)")
        return power_mod(self, _coerce(exponent), _coerce(modulus))


def _coerce(value: Operand) -> BigInt:
    if isinstance(value, BigInt):
        return value
    return from_int(value)


def _make(digits: DigitVector, negative: bool = False) -> BigInt:
    value = BigInt(
        negative=negative and not kd.is_zero(digits),
        decimal_length=kd.decimal_length(digits),
        digits=digits,
    )
    if load_config().check_invariants:
        violations = check_all(value)
        if violations:
            raise InvariantError(violations)
    return value


# -- Construction / conversion -------------------------------------------------

def from_str(s: str) -> BigInt:
    """Parse an optional '-' followed by ASCII decimal digits."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    if _LITERAL_RE.fullmatch(s) is None:
        raise MalformedLiteralError(f"malformed decimal literal: {_preview(s)!r}")
    negative = s.startswith("-")
    return _make(kd.parse(s[1:] if negative else s), negative)


def from_int(n: int) -> BigInt:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    magnitude = -n if n < 0 else n
    if magnitude <= UINT32_MAX:
        return _make(kd.from_machine_int(magnitude), n < 0)
    cells: list[int] = []
    while magnitude:
        magnitude, cell = divmod(magnitude, RADIX)
        cells.append(cell)
    return _make(DigitVector(tuple(cells)), n < 0)


def to_str(n: BigInt) -> str:
    return ("-" if n.negative else "") + str(n.digits)


# -- Sign utilities ------------------------------------------------------------

def negate(n: BigInt) -> BigInt:
    if kd.is_zero(n.digits):
        return n
    return BigInt(not n.negative, n.decimal_length, n.digits)


def abs_(n: BigInt) -> BigInt:
    return BigInt(False, n.decimal_length, n.digits) if n.negative else n


def copy(n: BigInt) -> BigInt:
    """New BigInt and DigitVector records over the same cell tuple.

    The tuple is immutable, so sharing it is equivalent to a deep copy.
    """
    return BigInt(n.negative, n.decimal_length, DigitVector(n.digits.cells))


# -- Additive --------------------------------------------------------------------

def add(a: BigInt, b: BigInt) -> BigInt:
    if a.negative != b.negative:
        # a + b == a - (-b); subtract picks the sign of the larger magnitude.
        return subtract(a, negate(b))
    return _make(kd.add(a.digits, b.digits), a.negative)


def subtract(a: BigInt, b: BigInt) -> BigInt:
    if a.negative != b.negative:
        return _make(kd.add(a.digits, b.digits), a.negative)
    if kd.compare(a.digits, b.digits) >= 0:
        return _make(kd.subtract(a.digits, b.digits), a.negative)
    return _make(kd.subtract(b.digits, a.digits), not a.negative)


# -- Multiplicative ----------------------------------------------------------------

def multiply(a: BigInt, b: BigInt) -> BigInt:
    if kd.is_zero(a.digits) or kd.is_zero(b.digits):
        return _make(ZERO)
    return _make(kd.multiply(a.digits, b.digits), a.negative != b.negative)


def divide(n: BigInt, d: BigInt) -> BigInt:
    """Floor division."""
    if kd.is_zero(d.digits):
        raise DivisionByZeroError("division by zero")
    differ = n.negative != d.negative
    if kd.compare(d.digits, n.digits) > 0:
        if differ and not kd.is_zero(n.digits):
            return _make(ONE, True)
        return _make(ZERO)
    if kd.is_one(d.digits):
        return _make(n.digits, n.negative != d.negative)

    quotient, remainder = kd.divmod_digits(n.digits, d.digits)
    if differ and not kd.is_zero(remainder):
        quotient = kd.increment(quotient)
    return _make(quotient, differ)


def modulo(n: BigInt, m: BigInt) -> BigInt:
    """Remainder with the divisor's sign."""
    if kd.is_zero(m.digits):
        raise DivisionByZeroError("division by zero")
    if kd.is_one(m.digits):
        return _make(ZERO)

    _, remainder = kd.divmod_digits(n.digits, m.digits)
    if n.negative != m.negative and not kd.is_zero(remainder):
        remainder = kd.subtract(m.digits, remainder)
    return _make(remainder, m.negative)


def divmod_(n: BigInt, d: BigInt) -> tuple[BigInt, BigInt]:
    return divide(n, d), modulo(n, d)


def log(n: BigInt, base: BigInt) -> BigInt:
    """Largest e with base**e <= n, by repeated division."""
    if n.negative or kd.is_zero(n.digits):
        raise MathDomainError(f"math domain error: log of non-positive {_preview(to_str(n))}")
    if base.negative or kd.compare(base.digits, ONE) <= 0:
        raise MathDomainError(f"math domain error: log base {_preview(to_str(base))} <= 1")
    return _make(kd.log_digits(n.digits, base.digits))


def power_mod(base: BigInt, exponent: BigInt, modulus: BigInt) -> BigInt:
    """``modulo(base ** exponent, modulus)`` without building the power."""
    if kd.is_zero(modulus.digits):
        raise DivisionByZeroError("division by zero")
    if exponent.negative:
        raise MathDomainError("math domain error: negative exponent")
    r = power_mod_digits(
        base.digits,
        exponent.digits,
        modulus.digits,
        min_buckets=load_config().memo_min_buckets,
    )
    # RADIX is even, so the low cell carries the exponent's parity.
    odd = exponent.digits[0] % 2 == 1
    return modulo(_make(r, base.negative and odd), modulus)


# -- Comparison ----------------------------------------------------------------

def compare(a: BigInt, b: BigInt) -> int:
    """1, 0 or -1: packed sign/length first, then magnitude (flipped when negative)."""
    if a.sign_len != b.sign_len:
        return 1 if a.sign_len > b.sign_len else -1
    order = kd.compare(a.digits, b.digits)
    return -order if a.negative else order


def gt(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) > 0


def st(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) < 0


def eq(a: BigInt, b: BigInt) -> bool:
    return a.sign_len == b.sign_len and kd.eq(a.digits, b.digits)


def hash_bigint(n: BigInt) -> int:
    """32-bit, non-cryptographic; equal values hash equal."""
    return fold_hash(RADIX * n.sign_len, n.digits.cells)
