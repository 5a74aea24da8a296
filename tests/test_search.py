import pytest

from algosolve.search import first_primes, queens_attack, special_multiple, waiter


def test_queens_attack_open_board_sample():
    assert queens_attack(4, 4, 4, []) == 9


def test_queens_attack_with_obstacles_sample():
    assert queens_attack(5, 4, 3, [(5, 5), (4, 2), (2, 3)]) == 10


def test_queens_attack_single_square_board():
    assert queens_attack(1, 1, 1, []) == 0


def test_queens_attack_obstacles_never_add_moves():
    free = queens_attack(8, 4, 5, [])
    blocked = queens_attack(8, 4, 5, [(4, 7), (2, 3), (6, 5)])
    assert blocked < free


def test_queens_attack_surrounded_queen():
    around = [(r, c) for r in (2, 3, 4) for c in (2, 3, 4) if (r, c) != (3, 3)]
    assert queens_attack(5, 3, 3, around) == 0


def test_queens_attack_obstacle_far_from_lines_changes_nothing():
    assert queens_attack(6, 1, 1, [(2, 4)]) == queens_attack(6, 1, 1, [])


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7, 9, 12, 25])
def test_special_multiple_is_a_multiple_of_nines_and_zeros(n):
    result = special_multiple(n)
    assert set(result) <= {"9", "0"}
    assert result.startswith("9")
    assert int(result) % n == 0


def test_special_multiple_nine():
    assert special_multiple(9) == "9"


def test_special_multiple_is_smallest_for_two():
    assert special_multiple(2) == "90"


def test_special_multiple_rejects_zero():
    with pytest.raises(ValueError):
        special_multiple(0)


def test_first_primes_start():
    assert first_primes(5) == [2, 3, 5, 7, 11]


def test_first_primes_are_prime_and_increasing():
    primes = first_primes(60)
    assert len(primes) == 60
    assert primes == sorted(set(primes))
    for p in primes:
        assert all(p % d for d in range(2, int(p**0.5) + 1))


def test_first_primes_empty():
    assert first_primes(0) == []


def test_first_primes_rejects_negative():
    with pytest.raises(ValueError):
        first_primes(-1)


def test_waiter_sample():
    assert waiter([3, 4, 7, 6, 5], 1) == [4, 6, 3, 7, 5]


def test_waiter_no_rounds_reads_pile_from_top():
    assert waiter([1, 2, 3], 0) == [3, 2, 1]


def test_waiter_output_is_permutation():
    plates = [2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13]
    result = waiter(plates, 4)
    assert sorted(result) == sorted(plates)


def test_waiter_stops_when_pile_empties():
    plates = [4, 8, 16]
    result = waiter(plates, 3)
    assert sorted(result) == plates


def test_waiter_rejects_negative_rounds():
    with pytest.raises(ValueError):
        waiter([1, 2], -1)