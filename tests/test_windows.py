import random

import pytest

from algosolve.windows import max_sliding_window, shortest_subarray


def test_max_sliding_window_example():
    nums = [1, 3, -1, -3, 5, 3, 6, 7]
    assert max_sliding_window(nums, 3) == [3, 3, 5, 5, 6, 7]


def test_max_sliding_window_size_one_is_identity():
    nums = [4, -2, 9, 9, 0]
    assert max_sliding_window(nums, 1) == nums


def test_max_sliding_window_larger_than_input():
    assert max_sliding_window([1, 2], 3) == []


def test_max_sliding_window_each_value_is_its_window_max():
    rng = random.Random(1)
    for _ in range(40):
        nums = [rng.randint(-30, 30) for _ in range(rng.randint(1, 25))]
        k = rng.randint(1, len(nums))
        result = max_sliding_window(nums, k)
        assert len(result) == len(nums) - k + 1
        for start, value in enumerate(result):
            window = nums[start : start + k]
            assert value in window
            assert all(value >= other for other in window)


@pytest.mark.parametrize("k", [0, -2])
def test_max_sliding_window_rejects_bad_size(k):
    with pytest.raises(ValueError):
        max_sliding_window([1, 2, 3], k)


@pytest.mark.parametrize(
    "nums, k, expected",
    [
        ([1], 1, 1),
        ([1, 2], 4, -1),
        ([2, -1, 2], 3, 3),
    ],
)
def test_shortest_subarray_examples(nums, k, expected):
    assert shortest_subarray(nums, k) == expected


def test_shortest_subarray_empty_input():
    assert shortest_subarray([], 1) == -1


def test_shortest_subarray_is_shortest():
    rng = random.Random(9)
    for _ in range(60):
        nums = [rng.randint(-10, 10) for _ in range(rng.randint(1, 12))]
        k = rng.randint(1, 25)
        result = shortest_subarray(nums, k)
        run_sums = {
            (i, j): sum(nums[i:j])
            for i in range(len(nums))
            for j in range(i + 1, len(nums) + 1)
        }
        reaching = [j - i for (i, j), total in run_sums.items() if total >= k]
        if result == -1:
            assert reaching == []
        else:
            assert result in reaching
            assert all(length >= result for length in reaching)