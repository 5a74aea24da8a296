"""Greedy algorithms over sequences of numbers and digits."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def candies(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children in a row.

    Every child gets at least one candy. A child rated higher than a
    neighbour gets more candies than that neighbour.
    """
    counts = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            counts[i] = counts[i - 1] + 1
    for i in reversed(range(len(ratings) - 1)):
        if ratings[i] > ratings[i + 1]:
            counts[i] = max(counts[i], counts[i + 1] + 1)
    return sum(counts)


def fair_rations(loaves: Sequence[int]) -> str:
    """Return how many loaves to hand out so everyone holds an even number.

    A loaf always goes to two neighbours at once. Returns ``"NO"`` when
    that cannot be done.
    """
    if not loaves:
        raise ValueError("at least one person is needed")
    if any(count < 0 for count in loaves):
        raise ValueError("loaf counts must not be negative")
    handed_out = 0
    carry = 0
    for count in loaves[:-1]:
        if (count + carry) % 2 == 1:
            carry = 1
            handed_out += 2
        else:
            carry = 0
    return str(handed_out) if (loaves[-1] + carry) % 2 == 0 else "NO"


def pylons(k: int, towns: Sequence[int]) -> int:
    """Return the fewest plants to switch on so every town has power.

    ``towns`` holds 1 where a town can host a plant. A plant lights every
    town less than ``k`` away from it. Returns -1 when that is impossible.
    """
    if k < 1:
        raise ValueError(f"distribution range must be positive, got {k}")
    n = len(towns)
    # Distance from each town to the next tower after it; None when there is none.
    next_tower: list[int | None] = [None] * n
    distance: int | None = None
    for i in reversed(range(n)):
        next_tower[i] = distance
        if towns[i] == 1:
            distance = 1
        elif distance is not None:
            distance += 1

    plants = 0
    skipped = 0
    for i, (has_tower, ahead) in enumerate(zip(towns, next_tower)):
        if ahead is None:
            if skipped >= k or n - i > k:
                return -1
            plants += 1
            break
        if has_tower == 0:
            skipped += 1
            continue
        if skipped + ahead < k:
            skipped += 1
            continue
        if skipped >= k:
            return -1
        plants += 1
        skipped = 1 - k
    return plants


def get_minimum_cost(k: int, prices: Iterable[int]) -> int:
    """Return the least a group of ``k`` friends pays for all flowers.

    A friend's ``m``-th flower costs ``m`` times its price.
    """
    if k < 1:
        raise ValueError(f"there must be at least one friend, got {k}")
    multipliers = [1] * k
    total = 0
    for price in sorted(prices, reverse=True):
        multiplier = heapq.heappop(multipliers)
        total += price * multiplier
        heapq.heappush(multipliers, multiplier + 1)
    return total


def luck_balance(k: int, contests: Iterable[tuple[int, int]]) -> int:
    """Return the most luck saved when at most ``k`` important contests are lost.

    Each contest is ``(luck, importance)``, with importance 0 for
    unimportant contests. Losing a contest adds its luck, winning subtracts it.
    """
    luck = 0
    important: list[int] = []
    for value, importance in contests:
        if importance == 0:
            luck += value
        else:
            important.append(value)
    important.sort(reverse=True)
    losses = max(k, 0)
    luck += sum(important[:losses])
    luck -= sum(important[losses:])
    return luck


def truck_tour(pumps: Iterable[tuple[int, int]]) -> int:
    """Return the first pump from which a circular tour can be completed.

    Each pump is ``(petrol, distance to the next pump)``. Returns -1 when
    no start works.
    """
    total_petrol = 0
    total_distance = 0
    start = 0
    tank = 0
    for i, (petrol, distance) in enumerate(pumps):
        total_petrol += petrol
        total_distance += distance
        tank += petrol - distance
        if tank < 0:
            start = i + 1
            tank = 0
    return -1 if total_petrol < total_distance else start


def highest_value_palindrome(s: str, k: int) -> str:
    """Return the largest palindrome reachable by changing at most ``k`` digits.

    Returns ``"-1"`` when no palindrome is reachable.
    """
    n = len(s)
    half = n // 2
    digits = list(s)
    diff = sum(1 for a, b in zip(s[:half], reversed(s)) if a != b)
    if diff > k:
        return "-1"
    if n == 0:
        return s
    remaining = k
    for i in range(half + 1):
        if remaining <= 0:
            break
        j = n - 1 - i
        if digits[i] != digits[j]:
            diff -= 1
            if digits[i] == "9" or digits[j] == "9":
                digits[i] = digits[j] = "9"
                remaining -= 1
            elif remaining - 2 >= diff:
                digits[i] = digits[j] = "9"
                remaining -= 2
            else:
                digits[i] = digits[j] = max(digits[i], digits[j])
                remaining -= 1
        elif i != j and digits[i] < "9" and remaining - 2 >= diff:
            digits[i] = digits[j] = "9"
            remaining -= 2
        elif i == j and digits[i] < "9" and remaining - 1 >= diff:
            digits[i] = "9"
            remaining -= 1
    return "".join(digits)