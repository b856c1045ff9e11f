"""Overflow-checked fixed-width unsigned arithmetic.

Python integers never overflow, but sizes and running totals in the core are
modelled on a fixed machine word. Every operation returns the wrapped result
together with a flag telling whether the true result did not fit.
"""

from __future__ import annotations

SIZE_BITS = 64


def _limit(bits: int) -> int:
    return 1 << bits


def safe_add(a: int, b: int, bits: int = SIZE_BITS) -> tuple[int, bool]:
    """Add two unsigned values.

    Returns:
        (wrapped_result, overflowed)
    """
    total = a + b
    limit = _limit(bits)
    return total % limit, total >= limit


def safe_sub(a: int, b: int, bits: int = SIZE_BITS) -> tuple[int, bool]:
    """Subtract b from a; underflow below zero counts as overflow."""
    return (a - b) % _limit(bits), b > a


def safe_mul(a: int, b: int, bits: int = SIZE_BITS) -> tuple[int, bool]:
    """Multiply two unsigned values."""
    product = a * b
    limit = _limit(bits)
    return product % limit, product >= limit
