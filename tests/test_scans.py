import pytest
from hypothesis import given, strategies as st

from arrayalgos.scans import (
    leaders_brute,
    leaders_optimal,
    majority_elements_better,
    majority_elements_brute,
    max_consecutive_ones,
    max_profit,
    max_subarray_sum,
    missing_number_better,
    missing_number_brute,
    missing_number_optimal,
)

small_ints = st.integers(min_value=-50, max_value=50)


def test_leaders_worked_example():
    assert leaders_optimal([10, 22, 12, 3, 0, 6]) == [22, 12, 6]


@given(st.lists(small_ints, max_size=20))
def test_leaders_brute_dominate_their_suffix(nums):
    result = leaders_brute(nums)
    if nums:
        assert result[-1] == nums[-1]
        assert max(nums) in result
    assert result == sorted(result, reverse=True)


@given(st.lists(small_ints, max_size=20, unique=True))
def test_leaders_variants_agree_on_distinct_values(nums):
    assert leaders_optimal(nums) == leaders_brute(nums)


def test_leaders_brute_keeps_equal_values_optimal_does_not():
    assert leaders_brute([5, 5]) == [5, 5]
    assert leaders_optimal([5, 5]) == [5]


@given(st.lists(st.integers(min_value=0, max_value=3), max_size=20))
def test_majority_variants_agree_and_exceed_third(nums):
    brute = majority_elements_brute(nums)
    better = majority_elements_better(nums)
    assert set(brute) == set(better)
    assert len(brute) <= 2
    for value in brute:
        assert nums.count(value) > len(nums) // 3


@given(st.lists(st.integers(min_value=0, max_value=3), max_size=20))
def test_majority_finds_every_qualifying_value(nums):
    qualifying = {v for v in nums if nums.count(v) > len(nums) // 3}
    assert set(majority_elements_better(nums)) == qualifying


def test_max_consecutive_ones_worked_example():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3


@given(st.lists(st.sampled_from([0, 1]), max_size=30))
def test_max_consecutive_ones_bounds(nums):
    result = max_consecutive_ones(nums)
    assert 0 <= result <= nums.count(1)
    assert ([1] * result) == nums[: len(nums)] [0:0] + [1] * result
    assert result == 0 or any(nums[i:i + result] == [1] * result for i in range(len(nums)))


def test_max_consecutive_ones_all_ones():
    assert max_consecutive_ones([1] * 7) == 7
    assert max_consecutive_ones([]) == 0


@given(st.lists(small_ints, min_size=1, max_size=20))
def test_max_subarray_sum_at_least_every_element(nums):
    result = max_subarray_sum(nums)
    assert result >= max(nums)
    assert result >= sum(nums)


@given(st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=20))
def test_max_subarray_sum_of_non_negatives_is_total(nums):
    assert max_subarray_sum(nums) == sum(nums)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@st.composite
def permutation_with_gap(draw):
    n = draw(st.integers(min_value=0, max_value=30))
    missing = draw(st.integers(min_value=0, max_value=n))
    values = [v for v in range(n + 1) if v != missing]
    return draw(st.permutations(values)), missing


@pytest.mark.parametrize(
    "func", [missing_number_brute, missing_number_better, missing_number_optimal]
)
@given(case=permutation_with_gap())
def test_missing_number_found(func, case):
    values, missing = case
    assert func(values) == missing


@given(st.lists(small_ints, max_size=20))
def test_max_profit_is_non_negative_and_bounded(prices):
    result = max_profit(prices)
    assert result >= 0
    if prices:
        assert result <= max(prices) - min(prices)


@given(st.lists(small_ints, min_size=1, max_size=20))
def test_max_profit_of_rising_prices_is_span(prices):
    rising = sorted(prices)
    assert max_profit(rising) == rising[-1] - rising[0]
    assert max_profit(rising[::-1]) == 0


def test_max_profit_empty_is_zero():
    assert max_profit([]) == 0