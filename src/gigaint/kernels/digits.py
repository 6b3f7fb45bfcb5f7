"""
Digit-vector kernel: unsigned arithmetic on radix-10^9 magnitudes.

Every function is pure: inputs are immutable ``DigitVector`` values and every
result is a new vector in canonical form (no leading zero cells, zero is
``(0,)``).

Algorithm Design:
- add/subtract: carry/borrow propagation, O(max(len(a), len(b)))
- multiply: schoolbook, O(len(a) * len(b))
- divmod: digit-at-a-time long division; each quotient digit is found by an
  exponential search followed by a binary search (``single_divmod``)
- halve: one pass with a single-bit carry, used by the exponent split
"""

from __future__ import annotations

from ..errors import DivisionByZeroError, MathDomainError
from .types import ONE, RADIX, RADIX_WIDTH, UINT32_MAX, ZERO, DigitVector, QuoRem


def _trim(cells: list[int]) -> DigitVector:
    while len(cells) > 1 and cells[-1] == 0:
        cells.pop()
    return DigitVector(tuple(cells))


# -- Construction / conversion ----------------------------------------------

def parse(decimal_digits: str) -> DigitVector:
    """Chunk unsigned decimal text into 9-digit cells from the least significant end."""
    if not decimal_digits:
        raise ValueError("decimal_digits must be non-empty")
    cells: list[int] = []
    end = len(decimal_digits)
    while end > 0:
        start = max(0, end - RADIX_WIDTH)
        cells.append(int(decimal_digits[start:end]))
        end = start
    return _trim(cells)


def from_machine_int(magnitude: int) -> DigitVector:
    """Vector for an unsigned 32-bit value (one or two cells)."""
    if magnitude < 0 or magnitude > UINT32_MAX:
        raise OverflowError(f"magnitude out of uint32 range: {magnitude}")
    if magnitude < RADIX:
        return DigitVector((magnitude,))
    return DigitVector((magnitude % RADIX, magnitude // RADIX))


def to_machine_int(n: DigitVector) -> int:
    """Inverse of ``from_machine_int`` for vectors of at most two cells."""
    if len(n) > 2:
        raise OverflowError(f"{len(n)}-cell vector does not fit a machine int")
    if len(n) == 1:
        return n[0]
    return n[1] * RADIX + n[0]


def decimal_length(n: DigitVector) -> int:
    """Number of decimal digits of the magnitude (zero has one)."""
    return len(str(n[-1])) + RADIX_WIDTH * (len(n) - 1)


# -- Predicates / comparison --------------------------------------------------

def is_zero(n: DigitVector) -> bool:
    return len(n) == 1 and n[0] == 0


def is_one(n: DigitVector) -> bool:
    return len(n) == 1 and n[0] == 1


def compare(a: DigitVector, b: DigitVector) -> int:
    """1 if a > b, 0 if equal, -1 if a < b.

    Active length decides first; equal lengths compare most significant first.
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0


def gt(a: DigitVector, b: DigitVector) -> bool:
    return compare(a, b) > 0


def st(a: DigitVector, b: DigitVector) -> bool:
    return compare(a, b) < 0


def eq(a: DigitVector, b: DigitVector) -> bool:
    return compare(a, b) == 0


def hash_digits(n: DigitVector) -> int:
    """32-bit bucket hash; equal vectors hash equal."""
    return hash(n)


# -- Additive ------------------------------------------------------------------

def add(a: DigitVector, b: DigitVector) -> DigitVector:
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    cells: list[int] = []
    carry = 0
    for i, d in enumerate(longer):
        if i >= len(shorter) and carry == 0:
            # Nothing left to add: copy the remaining high cells once.
            cells.extend(longer.cells[i:])
            break
        total = d + carry + (shorter[i] if i < len(shorter) else 0)
        if total >= RADIX:
            cells.append(total - RADIX)
            carry = 1
        else:
            cells.append(total)
            carry = 0
    if carry:
        cells.append(carry)
    return DigitVector(tuple(cells))


def subtract(a: DigitVector, b: DigitVector) -> DigitVector:
    """a - b for a >= b."""
    if compare(a, b) < 0:
        raise ValueError("subtrahend is larger than minuend")
    cells: list[int] = []
    borrow = 0
    for i, d in enumerate(a):
        if i >= len(b) and borrow == 0:
            cells.extend(a.cells[i:])
            break
        diff = d - borrow - (b[i] if i < len(b) else 0)
        if diff < 0:
            cells.append(diff + RADIX)
            borrow = 1
        else:
            cells.append(diff)
            borrow = 0
    return _trim(cells)


def increment(n: DigitVector) -> DigitVector:
    cells = list(n.cells)
    for i, d in enumerate(cells):
        if d < RADIX - 1:
            cells[i] = d + 1
            return DigitVector(tuple(cells))
        cells[i] = 0
    cells.append(1)
    return DigitVector(tuple(cells))


def decrement(n: DigitVector) -> DigitVector:
    """n - 1, halting at zero."""
    if is_zero(n):
        return ZERO
    cells = list(n.cells)
    for i, d in enumerate(cells):
        if d >= 1:
            cells[i] = d - 1
            break
        cells[i] = RADIX - 1
    return _trim(cells)


# -- Multiplicative ------------------------------------------------------------

def multiply(a: DigitVector, b: DigitVector) -> DigitVector:
    if is_zero(a) or is_zero(b):
        return ZERO
    if is_one(a):
        return b
    if is_one(b):
        return a

    cells = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        carry = 0
        for j, y in enumerate(b):
            acc = cells[i + j] + x * y + carry
            cells[i + j] = acc % RADIX
            carry = acc // RADIX
        cells[i + len(b)] = carry

    if cells[-1] == 0:
        cells.pop()
    return DigitVector(tuple(cells))


def right_shift(n: DigitVector) -> DigitVector:
    """n * RADIX: prepend a zero cell. Zero stays zero."""
    if is_zero(n):
        return ZERO
    return DigitVector((0,) + n.cells)


def slice_digits(n: DigitVector, start: int, end: int) -> DigitVector:
    """Cells ``[start, end)``, 1-indexed from the least significant cell.

    The window is trimmed to canonical form.
    """
    if not 1 <= start < end <= len(n) + 1:
        raise IndexError(f"invalid window [{start}, {end}) for {len(n)} cells")
    return _trim(list(n.cells[start - 1:end - 1]))


# -- Division ------------------------------------------------------------------

def single_divmod(dividend: DigitVector, divisor: DigitVector) -> QuoRem:
    """Quotient ``q < RADIX`` and remainder with ``dividend = q * divisor + r``.

    The caller guarantees that the quotient fits in one cell.
    """
    if is_zero(divisor):
        raise DivisionByZeroError("division by zero")

    # Exponential phase: double the trial quotient until it overshoots.
    step = 1
    while True:
        order = compare(multiply(from_machine_int(step), divisor), dividend)
        if order == 0:
            return QuoRem(step, ZERO)
        if order > 0:
            break
        step *= 2

    # Binary phase: low * divisor <= dividend < high * divisor.
    low, high = step // 2, step
    while high - low > 1:
        mid = (low + high) // 2
        if compare(multiply(from_machine_int(mid), divisor), dividend) > 0:
            high = mid
        else:
            low = mid

    remainder = subtract(dividend, multiply(from_machine_int(low), divisor))
    return QuoRem(low, remainder)


def divmod_digits(n: DigitVector, m: DigitVector) -> tuple[DigitVector, DigitVector]:
    """Long division: ``(n // m, n % m)``."""
    if is_zero(m):
        raise DivisionByZeroError("division by zero")
    if compare(n, m) < 0:
        return ZERO, n

    # First window: the top len(m) cells, widened by one when still below m.
    places = len(n) - len(m) + 1
    window = slice_digits(n, places, len(n) + 1)
    if compare(window, m) >= 0:
        carry = ZERO
    else:
        places -= 1
        carry = right_shift(window)
        window = slice_digits(n, places, places + 1)

    quotient = [0] * places
    for pos in range(places, 0, -1):
        step = single_divmod(add(window, carry), m)
        quotient[pos - 1] = step.quotient
        if pos > 1:
            carry = right_shift(step.remainder)
            window = slice_digits(n, pos - 1, pos)
        else:
            carry = step.remainder

    return _trim(quotient), carry


def halve(n: DigitVector) -> tuple[DigitVector, int]:
    """``(n // 2, n % 2)`` in one pass from the most significant cell."""
    cells = [0] * len(n)
    carry = 0
    for i in range(len(n) - 1, -1, -1):
        cur = carry * RADIX + n[i]
        cells[i] = cur // 2
        carry = cur % 2
    return _trim(cells), carry


def log_digits(n: DigitVector, base: DigitVector) -> DigitVector:
    """Largest e with base**e <= n, counting repeated divisions."""
    if is_zero(n) or compare(base, ONE) <= 0:
        raise MathDomainError("math domain error")
    if is_one(n):
        return ZERO

    exponent = ZERO
    quotient = n
    while not is_zero(quotient):
        exponent = increment(exponent)
        quotient, _ = divmod_digits(quotient, base)
    return decrement(exponent)
