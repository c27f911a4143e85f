"""Sorting and greedy problems: matching, tickets, gondolas, rounds, crowds, movies, sticks and coins."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate, chain

from sortedcontainers import SortedList


def apartments(applicants: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Return how many applicants get an apartment.

    An applicant wanting size ``d`` accepts any apartment whose size lies in
    ``[d - tolerance, d + tolerance]``; each apartment goes to at most one applicant.
    """
    if tolerance < 0:
        raise ValueError("tolerance must be non-negative")
    wanted = sorted(applicants)
    offered = sorted(sizes)
    matched = 0
    j = 0
    for desired in wanted:
        if j >= len(offered):
            break
        while j < len(offered) and offered[j] < desired - tolerance:
            j += 1
        if j < len(offered) and offered[j] <= desired + tolerance:
            matched += 1
            j += 1
    return matched


def concert_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int | None]:
    """Sell tickets to customers in order.

    Each customer buys the most expensive remaining ticket not above their offer.
    The result holds the price paid by each customer, or None if they got nothing.
    """
    available = SortedList(prices)
    sold: list[int | None] = []
    for offer in offers:
        index = available.bisect_right(offer)
        sold.append(available.pop(index - 1) if index else None)
    return sold


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Return the fewest gondolas for children of ``weights``, at most two per gondola.

    Two children share a gondola only if their total weight is at most ``limit``.
    """
    ordered = sorted(weights, reverse=True)
    heavy = 0
    light = len(ordered) - 1
    gondolas = 0
    while heavy < light:
        if ordered[heavy] + ordered[light] <= limit:
            light -= 1
        heavy += 1
        gondolas += 1
    if heavy == light:
        gondolas += 1
    return gondolas


def collecting_numbers(values: Iterable[int]) -> int:
    """Return the rounds needed to collect 1..n in order, scanning left to right each round.

    ``values`` must be a permutation of 1..n.
    """
    values = list(values)
    if sorted(values) != list(range(1, len(values) + 1)):
        raise ValueError("values must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(values)}
    return 1 + sum(position[k] < position[k - 1] for k in range(2, len(values) + 1))


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at once.

    Each customer is an (arrival, leaving) pair; one leaving at the moment another
    arrives is not counted as present together with them.
    """
    events = sorted(
        chain.from_iterable(((arrive, 1), (leave, -1)) for arrive, leave in intervals)
    )
    return max(chain([0], accumulate(delta for _, delta in events)))


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most (start, end) movies that can be watched entirely, one at a time."""
    ordered = sorted(movies, key=lambda movie: (movie[1], -movie[0]))
    watched = 0
    free_from: int | None = None
    for start, end in ordered:
        if free_from is None or start >= free_from:
            watched += 1
            free_from = end
    return watched


def stick_lengths(lengths: Iterable[int]) -> int:
    """Return the least total change that makes every stick the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("at least one stick is required")

    def cost(target: int) -> int:
        return sum(abs(length - target) for length in ordered)

    middle = len(ordered) // 2
    if len(ordered) % 2:
        return cost(ordered[middle])
    return min(cost(ordered[middle]), cost(ordered[middle - 1]))


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Return the smallest positive sum that no subset of ``coins`` makes."""
    smallest = 1
    for coin in sorted(coins):
        if coin > smallest:
            break
        smallest += coin
    return smallest