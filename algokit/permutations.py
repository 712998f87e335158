"""Permutations in Johnson-Trotter (plain change) order."""

from __future__ import annotations

import math
from collections.abc import Iterator


def johnson_trotter(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every permutation of ``1 .. n``, each one adjacent swap from the last."""
    if n < 0:
        raise ValueError("n must not be negative")

    perm = list(range(1, n + 1))
    points_left = {value: True for value in perm}
    yield tuple(perm)

    for _ in range(math.factorial(n) - 1):
        mobile = 0
        position = target = -1
        for index, value in enumerate(perm):
            neighbour = index - 1 if points_left[value] else index + 1
            if 0 <= neighbour < n and perm[neighbour] < value and value > mobile:
                mobile, position, target = value, index, neighbour

        perm[position], perm[target] = perm[target], perm[position]
        for value in perm:
            if value > mobile:
                points_left[value] = not points_left[value]
        yield tuple(perm)