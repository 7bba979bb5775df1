from collections import Counter
from itertools import permutations

import pytest

from dsakit.arrays import (
    car_fleet,
    combination_sum,
    group_anagrams,
    largest_rectangle_area,
    next_greater_element,
    next_greater_elements,
    next_permutation,
    plus_one,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, 5, 0, 8], 4)],
)
def test_two_sum_finds_valid_pair(nums, target):
    i, j = two_sum(nums, target)
    assert 0 <= i < j < len(nums)
    assert nums[i] + nums[j] == target


def test_two_sum_prefers_smallest_first_index():
    nums = [1, 4, 2, 3]
    i, _ = two_sum(nums, 5)
    assert i == 0


def test_two_sum_without_solution_returns_empty():
    assert two_sum([1, 2, 3], 100) == []
    assert two_sum([], 0) == []


def test_next_permutation_walks_all_permutations_in_order():
    start = [1, 2, 3, 4]
    expected = [list(p) for p in permutations(start)]
    current = list(start)
    seen = []
    for _ in expected:
        seen.append(list(current))
        next_permutation(current)
    assert seen == expected
    assert current == start


def test_next_permutation_wraps_last_to_first():
    nums = [5, 4, 3, 1]
    next_permutation(nums)
    assert nums == sorted([5, 4, 3, 1])


def test_next_permutation_with_duplicates_stays_a_rearrangement():
    nums = [1, 5, 1]
    original = Counter(nums)
    next_permutation(nums)
    assert Counter(nums) == original
    assert nums > [1, 5, 1]


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_results_are_valid_and_distinct():
    candidates = [2, 3, 5]
    results = combination_sum(candidates, 8)
    assert results
    for combo in results:
        assert sum(combo) == 8
        indices = [candidates.index(c) for c in combo]
        assert indices == sorted(indices)
    assert len({tuple(c) for c in results}) == len(results)


def test_combination_sum_no_solution():
    assert combination_sum([2], 1) == []


def test_combination_sum_rejects_non_positive_candidates():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_group_anagrams_groups_correctly():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    keys = ["".join(sorted(g[0])) for g in groups]
    assert len(set(keys)) == len(groups)
    for group in groups:
        assert len({"".join(sorted(w)) for w in group}) == 1


def test_group_anagrams_keeps_first_seen_order():
    groups = group_anagrams(["ab", "cd", "ba"])
    assert groups == [["ab", "ba"], ["cd"]]


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [9], [9, 9, 9], [1, 9], [0]])
def test_plus_one_adds_one(digits):
    number = int("".join(map(str, digits)))
    result = plus_one(list(digits))
    assert int("".join(map(str, result))) == number + 1
    assert all(0 <= d <= 9 for d in result)


def test_plus_one_updates_argument():
    digits = [1, 2]
    result = plus_one(digits)
    assert result is digits


def test_largest_rectangle_worked_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize("heights", [[2, 4], [1, 1, 1], [6, 2, 5, 4, 5, 1, 6], [3]])
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def _check_next_greater(sequence, value_index, result):
    later = [v for v in sequence[value_index + 1 :] if v > sequence[value_index]]
    if later:
        assert result == later[0]
    else:
        assert result == -1


def test_next_greater_element_matches_definition():
    nums2 = [1, 3, 4, 2]
    nums1 = [4, 1, 2]
    result = next_greater_element(nums1, nums2)
    assert len(result) == len(nums1)
    for value, answer in zip(nums1, result):
        _check_next_greater(nums2, nums2.index(value), answer)


def test_next_greater_element_missing_value_is_zero():
    assert next_greater_element([42], [1, 2]) == [0]


def test_next_greater_elements_circular():
    nums = [1, 2, 3, 4, 3]
    result = next_greater_elements(nums)
    for index, answer in enumerate(result):
        rotated = nums[index:] + nums[:index]
        _check_next_greater(rotated, 0, answer)


def test_next_greater_elements_maximum_has_none():
    nums = [5, 1, 2]
    assert next_greater_elements(nums)[0] == -1
    assert next_greater_elements([]) == []


def test_car_fleet_worked_example():
    assert car_fleet(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3]) == 3


def test_car_fleet_equal_speeds_never_merge():
    positions = [0, 2, 4, 6]
    assert car_fleet(10, positions, [1] * len(positions)) == len(positions)


def test_car_fleet_fast_car_behind_catches_up():
    assert car_fleet(10, [0, 5], [10, 1]) == 1


def test_car_fleet_length_mismatch():
    with pytest.raises(ValueError):
        car_fleet(10, [1, 2], [1])