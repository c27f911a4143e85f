"""Searching problems: sums of two, three and four values, best subarrays, playlists and towers."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from collections.abc import Iterable
from itertools import accumulate, combinations


def sum_of_two_values(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions of two distinct values summing to ``target``, or None."""
    values = list(values)
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(values):
        positions[value].append(index)
    for index, value in enumerate(values):
        partner = target - value
        found = positions.get(partner, [])
        if value != partner and found:
            return index + 1, found[0] + 1
        if value == partner and len(found) > 1:
            return index + 1, found[1] + 1
    return None


def sum_of_three_values(values: Iterable[int], target: int) -> tuple[int, int, int] | None:
    """Return 1-based positions of three distinct values summing to ``target``, or None."""
    pairs = sorted((value, index) for index, value in enumerate(values))
    for pivot, (value, original) in enumerate(pairs):
        need = target - value
        left, right = 0, len(pairs) - 1
        while left < right:
            total = pairs[left][0] + pairs[right][0]
            if left != pivot and right != pivot and total == need:
                return original + 1, pairs[left][1] + 1, pairs[right][1] + 1
            if total < need:
                left += 1
            else:
                right -= 1
    return None


def sum_of_four_values(
    values: Iterable[int], target: int
) -> tuple[int, int, int, int] | None:
    """Return 1-based positions of four distinct values summing to ``target``, or None."""
    values = list(values)
    by_sum: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for i, j in combinations(range(len(values)), 2):
        by_sum[values[i] + values[j]].append((i, j))
    for i, j in combinations(range(len(values)), 2):
        for k, m in by_sum.get(target - values[i] - values[j], ()):
            if {i, j}.isdisjoint((k, m)):
                return i + 1, j + 1, k + 1, m + 1
    return None


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        running = max(running, 0)
    if best is None:
        raise ValueError("at least one value is required")
    return best


def max_subarray_sum_prefix(values: Iterable[int]) -> int:
    """Return a subarray sum found from the last maximal prefix sum.

    The largest prefix sum, less the smallest non-positive prefix before it, is
    compared with the largest single value.
    """
    values = list(values)
    if not values:
        raise ValueError("at least one value is required")
    prefixes = list(accumulate(values))
    highest = max(prefixes)
    last = len(prefixes) - 1 - prefixes[::-1].index(highest)
    lowest = min([0, *prefixes[:last]])
    return max(highest - lowest, max(values))


def playlist(songs: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive songs with no repeats."""
    last_seen: dict[int, int] = {}
    start = 0
    longest = 0
    for index, song in enumerate(songs):
        previous = last_seen.get(song)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[song] = index
        longest = max(longest, index - start + 1)
    return longest


def towers(cubes: Iterable[int]) -> int:
    """Return the fewest towers for cubes placed in order.

    A cube goes on a tower whose top is strictly larger; the greedy choice is the
    smallest such top.
    """
    tops: list[int] = []
    for cube in cubes:
        slot = bisect_right(tops, cube)
        if slot == len(tops):
            tops.append(cube)
        else:
            tops[slot] = cube
    return len(tops)