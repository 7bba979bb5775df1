"""Algorithms over lists of integers and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first pair of indices whose values add up to ``target``.

    Pairs are tried in order of the first index, then the second. An empty
    list means no pair exists.
    """
    for i, j in combinations(range(len(nums)), 2):
        if nums[i] + nums[j] == target:
            return [i, j]
    return []


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps around to the first, sorted ascending.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return
    swap = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[:pivot:-1]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of candidates, each reusable, summing to target.

    Each combination lists candidates in the order they appear in
    ``candidates``.
    """
    if any(c <= 0 for c in candidates):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def search(remaining: int, start: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        if remaining < 0:
            return
        for index in range(start, len(candidates)):
            chosen.append(candidates[index])
            search(remaining - candidates[index], index)
            chosen.pop()

    search(target, 0)
    return results


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the number held as decimal digits; updates and returns ``digits``."""
    for index in range(len(digits) - 1, -1, -1):
        if digits[index] < 9:
            digits[index] += 1
            return digits
        digits[index] = 0
    digits.insert(0, 1)
    return digits


def _previous_smaller(heights: Sequence[int]) -> list[int]:
    """Index of the nearest bar to the left that is lower, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for index, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(index)
    return result


def _next_smaller(heights: Sequence[int]) -> list[int]:
    """Index of the nearest bar to the right that is lower, or ``len(heights)``."""
    size = len(heights)
    result = [size] * size
    stack: list[int] = []
    for index in range(size - 1, -1, -1):
        while stack and heights[stack[-1]] >= heights[index]:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(index)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under the histogram."""
    if not heights:
        return 0
    prev = _previous_smaller(heights)
    nxt = _next_smaller(heights)
    return max(h * (n - p - 1) for h, p, n in zip(heights, prev, nxt))


def next_greater_element(nums1: Iterable[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first larger value after it in ``nums2``.

    The answer is -1 when there is none, and 0 for a value not in ``nums2``.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    return [greater.get(value, 0) for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each value, the first larger value going round the list circularly, or -1."""
    size = len(nums)
    answer = [-1] * size
    stack: list[int] = []
    for index in range(2 * size - 1, -1, -1):
        value = nums[index % size]
        while stack and stack[-1] <= value:
            stack.pop()
        if index < size and stack:
            answer[index] = stack[-1]
        stack.append(value)
    return answer


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many car fleets arrive at ``target``.

    A car that catches up with a slower one ahead joins it as a fleet.
    """
    if len(position) != len(speed):
        raise ValueError("position and speed must have the same length")
    times: list[float] = []
    for pos, spd in sorted(zip(position, speed), key=lambda car: car[0]):
        time = (target - pos) / spd
        while times and time >= times[-1]:
            times.pop()
        times.append(time)
    return len(times)