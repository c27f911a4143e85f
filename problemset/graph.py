"""Grid and graph problems: counting rooms and reconnecting cables with a disjoint-set union."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from sortedcontainers import SortedSet

WALL = "#"
_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


class DSU:
    """Disjoint-set union with path compression and union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(n))
        self.size = [1] * n

    def __len__(self) -> int:
        return len(self.parent)

    def leader(self, v: int) -> int:
        """Return the representative of the set containing ``v``."""
        root = v
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[v] != root:
            self.parent[v], v = root, self.parent[v]
        return root

    def merge(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; return False if they were already one."""
        u, v = self.leader(u), self.leader(v)
        if u == v:
            return False
        if self.size[u] < self.size[v]:
            u, v = v, u
        self.parent[v] = u
        self.size[u] += self.size[v]
        return True

    def same(self, u: int, v: int) -> bool:
        """Tell whether ``u`` and ``v`` lie in the same set."""
        return self.leader(u) == self.leader(v)


def count_rooms(grid: Sequence[str]) -> int:
    """Count the connected regions of floor cells; '#' marks a wall."""
    rows = [row.strip() for row in grid]
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == WALL or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                x, y = queue.popleft()
                for dx, dy in _STEPS:
                    nx, ny = x + dx, y + dy
                    if (
                        0 <= nx < len(rows)
                        and 0 <= ny < len(rows[nx])
                        and rows[nx][ny] != WALL
                        and (nx, ny) not in seen
                    ):
                        seen.add((nx, ny))
                        queue.append((nx, ny))
    return rooms


class Reconnection(NamedTuple):
    """Move the cable numbered ``cable`` so it joins ``server`` to ``target`` (all 1-based)."""

    cable: int
    server: int
    target: int


def reconnect_cables(n: int, cables: Iterable[tuple[int, int]]) -> list[Reconnection]:
    """Plan cable moves that connect all ``n`` servers.

    Cables are (u, v) pairs of 1-based servers, numbered from 1 in the given order.
    Only redundant cables are moved, each keeping its end at ``v``.  When too few
    redundant cables exist, the plan connects as much as they allow.
    """
    dsu = DSU(n)
    leaders = SortedSet(range(n))

    def join(u: int, v: int) -> None:
        u, v = dsu.leader(u), dsu.leader(v)
        leaders.discard(u)
        leaders.discard(v)
        dsu.merge(u, v)
        leaders.add(dsu.leader(u))

    spare: list[tuple[int, int]] = []
    for number, (u, v) in enumerate(cables, start=1):
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"cable {number} joins servers outside 1..{n}")
        u, v = u - 1, v - 1
        if dsu.same(u, v):
            spare.append((number, v))
        else:
            join(u, v)

    moves: list[Reconnection] = []
    for number, v in spare:
        if len(leaders) <= 1:
            break
        connect = leaders[0]
        if dsu.same(connect, v):
            connect = leaders[leaders.bisect_right(connect)]
        moves.append(Reconnection(number, v + 1, connect + 1))
        join(connect, v)
    return moves