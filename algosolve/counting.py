"""Counting problems over bit strings, sums, residues and digits."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations
from operator import xor

MOD = 1_000_000_007
TOPIC_BITS = 500


def _topic_mask(topic: str) -> int:
    bits = topic[:TOPIC_BITS]
    if set(bits) - {"0", "1"}:
        raise ValueError(f"topic must hold only 0 and 1, got {topic!r}")
    return int(bits, 2) if bits else 0


def acm_team(topics: Sequence[str]) -> tuple[int, int]:
    """Return the most topics a pair can know, and how many pairs know that many.

    Each entry is a string of ``0`` and ``1``, one character per topic;
    only the first 500 characters count.
    """
    if not topics:
        raise ValueError("at least one attendee is needed")
    masks = [_topic_mask(topic) for topic in topics]
    best = 0
    teams = 0
    for first, second in combinations(masks, 2):
        known = (first | second).bit_count()
        if known > best:
            best, teams = known, 1
        elif known == best:
            teams += 1
    return best, teams


def count_divisible_subarrays(numbers: Iterable[int], k: int) -> int:
    """Return how many runs of consecutive numbers have a sum divisible by ``k``."""
    if k < 1:
        raise ValueError(f"divisor must be positive, got {k}")
    residues = Counter({0: 1})
    total = 0
    for number in numbers:
        total = (total + number) % k
        residues[total] += 1
    return sum(count * (count - 1) // 2 for count in residues.values())


def stones(n: int, a: int, b: int) -> list[int]:
    """Return, ascending, every value the last of ``n`` stones can hold.

    The first stone holds 0 and each next one differs from its
    predecessor by ``a`` or ``b``.
    """
    if n < 1:
        raise ValueError(f"there must be at least one stone, got {n}")
    if a == b:
        return [(n - 1) * a]
    return sorted((n - i) * a + (i - 1) * b for i in range(1, n + 1))


def non_divisible_subset(k: int, numbers: Iterable[int]) -> int:
    """Return the size of the largest subset where no pair sums to a multiple of ``k``.

    The numbers are taken to be distinct.
    """
    if k < 1:
        raise ValueError(f"divisor must be positive, got {k}")
    residues = Counter(number % k for number in numbers)
    size = sum(
        max(residues[r], residues[k - r]) for r in range(1, k) if r < k - r
    )
    if residues[0]:
        size += 1
    if k % 2 == 0 and residues[k // 2]:
        size += 1
    return size


def substrings(digits: str) -> int:
    """Return the sum of all substrings of a digit string, modulo 1e9+7."""
    if not digits:
        raise ValueError("digit string must not be empty")
    if not all("0" <= ch <= "9" for ch in digits):
        raise ValueError(f"expected only decimal digits, got {digits!r}")
    ending_here = 0
    total = 0
    for position, ch in enumerate(digits, start=1):
        ending_here = (position * int(ch) + 10 * ending_here) % MOD
        total = (total + ending_here) % MOD
    return total


def sansa_xor(numbers: Sequence[int]) -> int:
    """Return the XOR of the XORs of every contiguous run of ``numbers``."""
    n = len(numbers)
    return reduce(
        xor,
        (value for i, value in enumerate(numbers) if (i + 1) * (n - i) % 2 == 1),
        0,
    )