"""
Kernel layer.

`gigaint.kernels` holds the unsigned digit-vector arithmetic. Magnitudes are
little-endian radix-10^9 ``DigitVector`` values; the signed composer in
`gigaint.core` builds on these functions and never touches cells directly.
"""

from .types import ONE, RADIX, RADIX_WIDTH, TWO, ZERO, DigitVector, QuoRem

__all__ = [
    "DigitVector",
    "QuoRem",
    "RADIX",
    "RADIX_WIDTH",
    "ZERO",
    "ONE",
    "TWO",
]
