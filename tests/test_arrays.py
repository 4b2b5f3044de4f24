import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from diffsolver.arrays import (
    can_form_pairs,
    difference_of_sums,
    max_adjacent_distance,
    max_distance,
    maximum_difference,
    minimize_max,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=30)


def test_maximum_difference_worked_example():
    assert maximum_difference([7, 1, 5, 4]) == 4


@given(int_lists)
def test_maximum_difference_minus_one_iff_no_increase(nums):
    has_increase = any(nums[j] > nums[i] for i in range(len(nums)) for j in range(i + 1, len(nums)))
    assert (maximum_difference(nums) == -1) == (not has_increase)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=2, max_size=30, unique=True))
def test_maximum_difference_sorted_spans_range(nums):
    ordered = sorted(nums)
    assert maximum_difference(ordered) == ordered[-1] - ordered[0]


@given(int_lists)
def test_maximum_difference_bounded_by_spread(nums):
    assert maximum_difference(nums) <= max(nums) - min(nums)


def test_maximum_difference_rejects_empty():
    with pytest.raises(ValueError):
        maximum_difference([])


def test_max_distance_worked_example():
    assert max_distance([1, 8, 3, 8, 3]) == 4


def test_max_distance_two_houses():
    assert max_distance([0, 1]) == 1


@given(st.lists(st.integers(min_value=0, max_value=3), min_size=2, max_size=25))
def test_max_distance_is_the_furthest_differing_pair(colors):
    assume(len(set(colors)) > 1)
    result = max_distance(colors)
    n = len(colors)
    assert any(colors[i] != colors[i + result] for i in range(n - result))
    assert all(
        colors[i] == colors[i + d] for d in range(result + 1, n) for i in range(n - d)
    )


@given(st.lists(st.integers(min_value=0, max_value=3), min_size=2, max_size=25))
def test_max_distance_full_span_when_ends_differ(colors):
    assume(colors[0] != colors[-1])
    assert max_distance(colors) == len(colors) - 1


def test_can_form_pairs_adjacent():
    assert can_form_pairs([1, 2, 3, 4], 2, 1) is True


def test_can_form_pairs_zero_tolerance_distinct():
    assert can_form_pairs([1, 2, 3, 4], 1, 0) is False


def test_minimize_max_worked_example():
    assert minimize_max([10, 1, 2, 7, 1, 3], 2) == 1


def test_minimize_max_no_pairs_needed():
    assert minimize_max([5, 40, 3], 0) == 0


def test_minimize_max_leaves_input_untouched():
    nums = [9, 3, 7, 1]
    minimize_max(nums, 1)
    assert nums == [9, 3, 7, 1]


@given(st.data())
def test_minimize_max_is_tightest_feasible(data):
    nums = data.draw(st.lists(st.integers(min_value=0, max_value=500), min_size=2, max_size=20))
    p = data.draw(st.integers(min_value=1, max_value=len(nums) // 2))
    ordered = sorted(nums)
    result = minimize_max(nums, p)
    assert can_form_pairs(ordered, p, result)
    if result > 0:
        assert not can_form_pairs(ordered, p, result - 1)


def test_minimize_max_rejects_empty():
    with pytest.raises(ValueError):
        minimize_max([], 0)


def test_difference_of_sums_worked_example():
    assert difference_of_sums(10, 3) == 19


@given(st.integers(min_value=1, max_value=2000))
def test_difference_of_sums_no_multiples(n):
    assert difference_of_sums(n, n + 1) == n * (n + 1) // 2


@given(st.integers(min_value=1, max_value=2000))
def test_difference_of_sums_every_number_divisible(n):
    assert difference_of_sums(n, 1) == -(n * (n + 1) // 2)


def test_difference_of_sums_rejects_zero_divisor():
    with pytest.raises(ValueError):
        difference_of_sums(5, 0)


def test_max_adjacent_distance_symmetric_values():
    assert max_adjacent_distance([-5, -10, -5]) == 5


@given(int_lists, st.integers(min_value=0, max_value=29))
def test_max_adjacent_distance_rotation_invariant(nums, shift):
    k = shift % len(nums)
    assert max_adjacent_distance(nums[k:] + nums[:k]) == max_adjacent_distance(nums)


@given(int_lists)
def test_max_adjacent_distance_reversal_and_wrap(nums):
    result = max_adjacent_distance(nums)
    assert result == max_adjacent_distance(nums[::-1])
    assert result >= abs(nums[0] - nums[-1])


def test_max_adjacent_distance_rejects_empty():
    with pytest.raises(ValueError):
        max_adjacent_distance([])