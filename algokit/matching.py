"""Stable matching by the Gale-Shapley proposal algorithm.

Preferences form one table of ``2 * n`` rows. Rows ``0 .. n-1`` belong to
the men and list women, numbered ``n .. 2n-1``, from most to least
preferred; rows ``n .. 2n-1`` belong to the women and list men likewise.
"""

from __future__ import annotations

from typing import Sequence

Preferences = Sequence[Sequence[int]]


def prefers_current(prefer: Preferences, woman: int, man: int, current: int) -> bool:
    """Return whether ``woman`` prefers her ``current`` partner to ``man``."""
    for choice in prefer[woman]:
        if choice == current:
            return True
        if choice == man:
            return False
    raise ValueError(f"woman {woman} ranks neither {man} nor {current}")


def stable_marriage(prefer: Preferences) -> list[int]:
    """Return the partner of each woman, indexed from woman ``n`` upwards."""
    if not prefer:
        return []
    n = len(prefer[0])
    if len(prefer) != 2 * n:
        raise ValueError("preference table must have two rows per participant")

    partners: list[int | None] = [None] * n
    engaged = [False] * n
    free = n

    while free:
        man = engaged.index(False)
        for woman in prefer[man]:
            if engaged[man]:
                break
            slot = woman - n
            if not 0 <= slot < n:
                raise ValueError(f"{woman} is not a woman")
            current = partners[slot]
            if current is None:
                partners[slot] = man
                engaged[man] = True
                free -= 1
            elif not prefers_current(prefer, woman, man, current):
                partners[slot] = man
                engaged[man] = True
                engaged[current] = False
        if not engaged[man]:
            raise ValueError(f"man {man} was rejected by every woman on his list")

    return [partner for partner in partners if partner is not None]