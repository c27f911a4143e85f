"""Counting subarrays whose elements sum to a target."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import accumulate


def subarray_sums_positive(values: Iterable[int], target: int) -> int:
    """Count contiguous subarrays of positive ``values`` that sum to ``target``.

    Uses a sliding window, so every value must be positive.
    """
    values = list(values)
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    count = 0
    window = 0
    left = 0
    for right, value in enumerate(values):
        window += value
        while window > target and left <= right:
            window -= values[left]
            left += 1
        if window == target and left <= right:
            count += 1
    return count


def subarray_sums(values: Iterable[int], target: int) -> int:
    """Count contiguous subarrays of ``values`` (any sign) that sum to ``target``."""
    seen = Counter({0: 1})
    count = 0
    for prefix in accumulate(values):
        count += seen[prefix - target]
        seen[prefix] += 1
    return count