"""Board walks, breadth-first search and prime sieving by stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import count, islice

_DIRECTIONS = (
    (-1, 0), (1, 0),
    (0, -1), (0, 1),
    (-1, -1), (-1, 1),
    (1, -1), (1, 1),
)


def queens_attack(
    n: int,
    queen_row: int,
    queen_col: int,
    obstacles: Iterable[Sequence[int]],
) -> int:
    """Return how many squares of an ``n`` by ``n`` board a queen can attack.

    Rows and columns are numbered from 1; obstacles block the squares
    they stand on and all squares behind them.
    """
    blocked = {(row, col) for row, col in obstacles}
    moves = 0
    for dr, dc in _DIRECTIONS:
        row, col = queen_row + dr, queen_col + dc
        while 1 <= row <= n and 1 <= col <= n and (row, col) not in blocked:
            moves += 1
            row += dr
            col += dc
    return moves


def special_multiple(n: int) -> str:
    """Return the smallest multiple of ``n`` written only with digits 9 and 0."""
    if n == 0:
        raise ValueError("n must not be zero")
    queue = deque([9])
    while True:
        current = queue.popleft()
        if current % n == 0:
            return str(current)
        queue.append(current * 10)
        queue.append(current * 10 + 9)


def _primes() -> Iterator[int]:
    found: list[int] = []
    for candidate in count(2):
        if all(candidate % p for p in found if p * p <= candidate):
            found.append(candidate)
            yield candidate


def first_primes(count: int) -> list[int]:
    """Return the first ``count`` primes in ascending order."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return list(islice(_primes(), count))


def waiter(plates: Sequence[int], q: int) -> list[int]:
    """Return plate numbers in the order the waiter stacks them up.

    ``plates`` lists the pile from bottom to top. In round ``i`` the pile is
    taken off from the top: plates divisible by the ``i``-th prime go to an
    answer pile, the others to a new pile. Each answer pile is read from the
    top; after ``q`` rounds, or when no plates are left, the remaining pile
    is read from the top.
    """
    if q < 0:
        raise ValueError(f"number of rounds must not be negative, got {q}")
    pile = list(plates)
    order: list[int] = []
    for prime in islice(_primes(), q):
        divisible: list[int] = []
        rest: list[int] = []
        for plate in reversed(pile):
            (divisible if plate % prime == 0 else rest).append(plate)
        order.extend(reversed(divisible))
        pile = rest
        if not pile:
            break
    order.extend(reversed(pile))
    return order