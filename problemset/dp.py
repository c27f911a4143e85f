"""Dynamic-programming problems: dice sums, coin change and the book-shop knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import takewhile

from .modular import MOD

DIE_FACES = 6


def dice_combinations(n: int) -> int:
    """Return the number of ordered dice throws summing to ``n``, modulo MOD."""
    if n < 0:
        raise ValueError("n must be non-negative")
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[max(0, total - DIE_FACES):total]) % MOD
    return ways[n]


def minimizing_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or None if it cannot be made.

    Every coin value may be used any number of times.
    """
    coins = sorted(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must be non-negative")
    best: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        options = [
            best[amount - coin]
            for coin in takewhile(lambda c: c <= amount, coins)
            if best[amount - coin] is not None
        ]
        if options:
            best[amount] = min(options) + 1
    return best[target]


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages obtainable by buying each book at most once within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must be non-negative")
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        if price < 0:
            raise ValueError("prices must be non-negative")
        for spend in range(budget, price - 1, -1):
            best[spend] = max(best[spend], best[spend - price] + value)
    return best[budget]