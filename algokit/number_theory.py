"""Modular exponentiation and inverses by Fermat's little theorem."""

from __future__ import annotations

import math


def power_mod(x: int, y: int, m: int) -> int:
    """Return ``x ** y`` modulo ``m``; an exponent of zero always gives 1."""
    if y < 0:
        raise ValueError("exponent must not be negative")
    if m <= 0:
        raise ValueError("modulus must be positive")
    if y == 0:
        return 1
    return pow(x, y, m)


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo the prime ``m``.

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    if m < 2:
        raise ValueError("modulus must be a prime")
    if math.gcd(a, m) != 1:
        raise ValueError("Inverse doesn't exist")
    return power_mod(a, m - 2, m)