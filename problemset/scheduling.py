"""Scheduling problems: traffic lights on a street, hotel rooms and factory machines."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from sortedcontainers import SortedList, SortedSet


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """Return the longest unlit stretch of the street after each light is added.

    The street runs from 0 to ``length``; each position must lie in ``[0, length)``.
    """
    if length <= 0:
        raise ValueError("length must be positive")
    lamps = SortedSet([0, length])
    gaps = SortedList([length])
    longest: list[int] = []
    for position in positions:
        if not 0 <= position < length:
            raise ValueError(f"position {position} lies outside [0, {length})")
        index = lamps.bisect_right(position)
        high = lamps[index]
        low = lamps[index - 1]
        gaps.remove(high - low)
        gaps.add(position - low)
        gaps.add(high - position)
        lamps.add(position)
        longest.append(gaps[-1])
    return longest


class Allocation(NamedTuple):
    """The number of rooms used and the 1-based room given to each customer, in input order."""

    rooms: int
    assignment: list[int]


def room_allocation(customers: Iterable[tuple[int, int]]) -> Allocation:
    """Give rooms to (arrival, departure) customers using as few rooms as possible.

    A room is free for a new customer only if its last guest left strictly
    before the new one arrives.
    """
    ordered = sorted(
        (arrive, leave, index) for index, (arrive, leave) in enumerate(customers)
    )
    assignment = [0] * len(ordered)
    occupied: list[tuple[int, int]] = []
    rooms = 0
    for arrive, leave, index in ordered:
        if not occupied or occupied[0][0] >= arrive:
            rooms += 1
            room = rooms
            heapq.heappush(occupied, (leave, room))
        else:
            _, room = heapq.heapreplace(occupied, (leave, occupied[0][1]))
        assignment[index] = room
    return Allocation(rooms, assignment)


def factory_machines(times: Sequence[int], products: int) -> int:
    """Return the least time in which machines with the given ``times`` make ``products`` items.

    Each machine makes one item per its time, and all machines work at once.
    """
    if not times:
        raise ValueError("at least one machine is required")
    if any(time <= 0 for time in times):
        raise ValueError("machine times must be positive")
    if products < 0:
        raise ValueError("products must be non-negative")
    best = products * min(times)
    low, high = 1, best
    while low <= high:
        middle = (low + high) // 2
        if sum(middle // time for time in times) >= products:
            best = min(best, middle)
            high = middle - 1
        else:
            low = middle + 1
    return best