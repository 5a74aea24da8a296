"""Selection and scheduling problems solved with heaps and counting."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from collections.abc import Hashable, Iterable, Sequence
from itertools import islice


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``, counting from 1."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    heap = list(nums[:k])
    heapq.heapify(heap)
    for value in nums[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def top_k_frequent(nums: Sequence[Hashable], k: int) -> list[Hashable]:
    """Return up to ``k`` values, the most frequent first.

    Values equally frequent keep the order in which they first appear.
    """
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    buckets: defaultdict[int, list[Hashable]] = defaultdict(list)
    for value, count in Counter(nums).items():
        buckets[count].append(value)
    ordered = (
        value for count in sorted(buckets, reverse=True) for value in buckets[count]
    )
    return list(islice(ordered, k))


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[tuple[int, int]]:
    """Return the ``k`` pairs with the smallest sums, the largest sum first.

    ``nums2`` is expected to be sorted in ascending order. Pairs come out
    ordered by (sum, first, second) descending.
    """
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if k > len(nums1) * len(nums2):
        raise ValueError(f"only {len(nums1) * len(nums2)} pairs exist, {k} requested")
    if k == 0:
        return []
    # Max-heap of (sum, a, b) kept at size k by negating every field.
    heap: list[tuple[int, int, int]] = []
    for a in nums1:
        for b in nums2:
            total = a + b
            if len(heap) < k:
                heapq.heappush(heap, (-total, -a, -b))
            elif total < -heap[0][0]:
                heapq.heapreplace(heap, (-total, -a, -b))
            else:
                break
    ordered = sorted(((-s, -a, -b) for s, a, b in heap), reverse=True)
    return [(a, b) for _, a, b in ordered]


def least_interval(tasks: Iterable[str], n: int) -> int:
    """Return the time units needed to run ``tasks`` with cooldown ``n``.

    Tasks are single upper-case letters; two runs of the same task must be
    at least ``n`` units apart.
    """
    if n < 0:
        raise ValueError(f"cooldown must not be negative, got {n}")
    counts = Counter(tasks)
    for task in counts:
        if not (len(task) == 1 and "A" <= task <= "Z"):
            raise ValueError(f"task must be a letter from A to Z, got {task!r}")
    heap = [-count for count in counts.values()]
    heapq.heapify(heap)

    time = 0
    while heap:
        remaining: list[int] = []
        cycle = n + 1
        while cycle and heap:
            count = -heapq.heappop(heap)
            if count > 1:
                remaining.append(count - 1)
            time += 1
            cycle -= 1
        for count in remaining:
            heapq.heappush(heap, -count)
        if not heap:
            break
        time += cycle
    return time


def most_booked(n: int, meetings: Iterable[Sequence[int]]) -> int:
    """Return the room, numbered from 0, that held the most meetings.

    Meetings go, in order of start, to the lowest free room; when none is
    free the meeting is delayed to the room that frees up first. Ties go to
    the lowest room.
    """
    if n < 1:
        raise ValueError(f"there must be at least one room, got {n}")
    held = [0] * n
    free_at = [0] * n
    for start, end in sorted(tuple(meeting) for meeting in meetings):
        room = next((r for r, time in enumerate(free_at) if time <= start), None)
        if room is None:
            room = min(range(n), key=free_at.__getitem__)
            free_at[room] += end - start
        else:
            free_at[room] = end
        held[room] += 1
    return max(range(n), key=held.__getitem__)