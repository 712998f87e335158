"""Compare the sets of values in prefixes of two sequences by XOR hashing.

Each distinct value is given a random 63-bit hash. The hash of a set is the
XOR of its members' hashes, so two prefixes hold the same set of values
exactly when their hashes agree, up to a negligible chance of collision.
"""

from __future__ import annotations

import argparse
import random
import sys
from itertools import chain
from typing import Hashable, Iterable, Mapping, Sequence


def _prefix_hashes(values: Iterable[Hashable], hashes: Mapping[Hashable, int]) -> list[int]:
    seen: set[Hashable] = set()
    acc = 0
    prefixes = [0]
    for value in values:
        if value not in seen:
            seen.add(value)
            acc ^= hashes[value]
        prefixes.append(acc)
    return prefixes


class PrefixSetMatcher:
    """Answers whether a prefix of ``a`` and a prefix of ``b`` hold the same set."""

    def __init__(
        self,
        a: Sequence[Hashable],
        b: Sequence[Hashable],
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        hashes: dict[Hashable, int] = {}
        for value in chain(a, b):
            if value not in hashes:
                hashes[value] = rng.getrandbits(63)
        self._a_prefixes = _prefix_hashes(a, hashes)
        self._b_prefixes = _prefix_hashes(b, hashes)

    def same_prefix_sets(self, a_length: int, b_length: int) -> bool:
        """Return whether the first ``a_length`` of ``a`` and ``b_length`` of ``b`` hold the same values."""
        if not 0 <= a_length < len(self._a_prefixes):
            raise IndexError(f"prefix length {a_length} is out of range for a")
        if not 0 <= b_length < len(self._b_prefixes):
            raise IndexError(f"prefix length {b_length} is out of range for b")
        return self._a_prefixes[a_length] == self._b_prefixes[b_length]


def main(argv: Sequence[str] | None = None) -> int:
    """Read two sequences and prefix-length queries from stdin; print Yes or No for each."""
    parser = argparse.ArgumentParser(
        description="Check whether prefixes of two sequences hold the same set of values."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the value hashes")
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        length = int(next(tokens))
        a = [int(next(tokens)) for _ in range(length)]
        b = [int(next(tokens)) for _ in range(length)]
        matcher = PrefixSetMatcher(a, b, random.Random(args.seed))
        query_count = int(next(tokens))
        answers = []
        for _ in range(query_count):
            a_length = int(next(tokens))
            b_length = int(next(tokens))
            answers.append("Yes" if matcher.same_prefix_sets(a_length, b_length) else "No")
    except StopIteration:
        parser.error("input ended early")
    except ValueError as exc:
        parser.error(f"malformed input: {exc}")
    except IndexError as exc:
        parser.error(str(exc))

    sys.stdout.write("".join(f"{answer}\n" for answer in answers))
    return 0