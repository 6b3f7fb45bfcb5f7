"""Data types for the digit-vector kernel.

Units/conventions:
- a digit is one radix-10^9 cell, ``0 <= d < RADIX``;
- cells are little-endian (``cells[0]`` is least significant);
- the canonical zero is ``(0,)``; no other vector has a zero top cell.
"""

from __future__ import annotations

from dataclasses import dataclass

RADIX: int = 1_000_000_000  # 10**9
RADIX_WIDTH: int = 9  # decimal digits per cell
UINT32_MAX: int = 0xFFFF_FFFF
HASH_MASK: int = 0xFFFF_FFFF


def fold_hash(seed: int, cells: tuple[int, ...]) -> int:
    """Fold little-endian cells into a 32-bit bucket hash.

    The seed is truncated to 32 bits and shifted left by the most significant
    cell (shift count modulo 32), then every cell is folded in with
    ``h = (h + 3137 * d) % 1000003``. Not cryptographic.
    """
    h = seed & HASH_MASK
    h = (h << (cells[-1] & 31)) & HASH_MASK
    for d in cells:
        h = (h + 3137 * d) % 1_000_003
    return h


@dataclass(frozen=True)
class DigitVector:
    """Unsigned magnitude as little-endian radix-10^9 digits."""

    cells: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __hash__(self) -> int:
        size = len(self.cells)
        return fold_hash(size * (RADIX << size), self.cells)

    def __str__(self) -> str:
        top = len(self.cells) - 1
        return str(self.cells[top]) + "".join(
            str(self.cells[i]).zfill(RADIX_WIDTH) for i in range(top - 1, -1, -1)
        )

    def __repr__(self) -> str:
        return f"DigitVector({list(self.cells)!r})"


@dataclass(frozen=True)
class QuoRem:
    """One long-division step: single-digit quotient and its remainder."""

    quotient: int
    remainder: DigitVector


ZERO = DigitVector((0,))
ONE = DigitVector((1,))
TWO = DigitVector((2,))
