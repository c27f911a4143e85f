import pytest

from problemset.linear import josephus, nearest_smaller_values


def test_nearest_smaller_values_worked_example():
    assert nearest_smaller_values([2, 5, 1, 4, 8, 3, 2, 5]) == [0, 1, 0, 3, 4, 3, 3, 7]


def test_nearest_smaller_values_increasing_points_to_previous():
    values = [1, 2, 3, 4, 5, 6]
    assert nearest_smaller_values(values) == list(range(len(values)))


def test_nearest_smaller_values_non_increasing_has_none():
    assert nearest_smaller_values([9, 7, 7, 3, 1]) == [0] * 5


def test_nearest_smaller_values_empty():
    assert nearest_smaller_values([]) == []


def test_nearest_smaller_values_invariant():
    values = [4, 1, 7, 3, 3, 9, 2, 6, 5, 8]
    result = nearest_smaller_values(values)
    for i, position in enumerate(result):
        between = values[position:i] if position else values[:i]
        if position:
            assert values[position - 1] < values[i]
        assert all(v >= values[i] for v in between)


def test_josephus_worked_example():
    assert josephus(7) == [2, 4, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("n", [1, 2, 5, 16, 33])
def test_josephus_is_a_permutation(n):
    order = josephus(n)
    assert sorted(order) == list(range(1, n + 1))


def test_josephus_single_child():
    assert josephus(1) == [1]


def test_josephus_even_children_leave_first():
    n = 10
    assert josephus(n)[: n // 2] == list(range(2, n + 1, 2))


@pytest.mark.parametrize("n", [0, -3])
def test_josephus_rejects_non_positive(n):
    with pytest.raises(ValueError):
        josephus(n)