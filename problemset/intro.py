"""Introductory problems: arrays, permutations, spirals, knights, sets and piles."""

from __future__ import annotations


def increasing_array(values: list[int]) -> int:
    """Return the fewest unit increments that make ``values`` non-decreasing."""
    moves = 0
    highest = None
    for value in values:
        if highest is None or value >= highest:
            highest = value
        else:
            moves += highest - value
    return moves


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Returns None when no such permutation exists.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return [1]
    if n in (2, 3):
        return None
    if n == 4:
        return [2, 4, 1, 3]
    return list(range(n, 0, -2)) + list(range(n - 1, 0, -2))


def number_spiral(row: int, col: int) -> int:
    """Return the number at (row, col), both 1-based, in the number spiral."""
    if row < 1 or col < 1:
        raise ValueError("row and column are 1-based")
    layer = max(row, col)
    diagonal = layer * layer - (layer - 1)
    if row < layer:
        offset = layer - row
        return diagonal - offset if layer % 2 == 0 else diagonal + offset
    offset = layer - col
    return diagonal + offset if layer % 2 == 0 else diagonal - offset


def two_knights(n: int) -> list[int]:
    """Return, for each k in 1..n, the ways to place two non-attacking knights on a k x k board."""
    return [(k - 1) * (k + 4) * ((k * k - 3 * k + 4) // 2) for k in range(1, n + 1)]


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or return None if impossible."""
    total = n * (n + 1) // 2
    if total % 2:
        return None
    remaining = total // 2
    first: list[int] = []
    second: list[int] = []
    for value in range(n, 0, -1):
        if remaining >= value:
            remaining -= value
            first.append(value)
        else:
            second.append(value)
    return first, second


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    count = 0
    power = 5
    while n // power > 0:
        count += n // power
        power *= 5
    return count


def coin_piles(a: int, b: int) -> bool:
    """Tell whether two piles can be emptied by taking 2 from one and 1 from the other."""
    if max(a, b) > 2 * min(a, b):
        return False
    return (a + b) % 3 == 0