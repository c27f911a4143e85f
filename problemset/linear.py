"""Linear-scan problems: nearest smaller values and the Josephus elimination order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def nearest_smaller_values(values: Iterable[int]) -> list[int]:
    """For each value, return the 1-based position of the nearest smaller value to its left.

    Zero means no smaller value lies to the left.
    """
    values = list(values)
    stack: list[int] = []
    nearest: list[int] = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        nearest.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return nearest


def josephus(n: int) -> list[int]:
    """Return the order in which children 1..n leave when every second one is removed."""
    if n < 1:
        raise ValueError("n must be positive")
    circle = deque(range(1, n + 1))
    order: list[int] = []
    while len(circle) > 1:
        circle.rotate(-1)
        order.append(circle.popleft())
    order.append(circle[0])
    return order