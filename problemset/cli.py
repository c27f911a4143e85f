"""Command line: run a problem on whitespace-separated integers read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from .linear import josephus, nearest_smaller_values
from .scheduling import traffic_lights


def _take(tokens: Iterator[int], count: int) -> list[int]:
    taken = [value for _, value in zip(range(count), tokens)]
    if len(taken) != count:
        raise ValueError(f"expected {count} numbers, got {len(taken)}")
    return taken


def _run_josephus(tokens: Iterator[int]) -> list[int]:
    (n,) = _take(tokens, 1)
    return josephus(n)


def _run_nearest_smaller(tokens: Iterator[int]) -> list[int]:
    (n,) = _take(tokens, 1)
    return nearest_smaller_values(_take(tokens, n))


def _run_traffic_lights(tokens: Iterator[int]) -> list[int]:
    length, n = _take(tokens, 2)
    return traffic_lights(length, _take(tokens, n))


_COMMANDS = {
    "josephus": _run_josephus,
    "nearest-smaller": _run_nearest_smaller,
    "traffic-lights": _run_traffic_lights,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer on one line."""
    parser = argparse.ArgumentParser(prog="problemset", description=__doc__)
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        tokens = iter([int(token) for token in sys.stdin.read().split()])
        result = _COMMANDS[args.command](tokens)
    except ValueError as error:
        print(f"problemset: {error}", file=sys.stderr)
        return 1
    print(" ".join(map(str, result)))
    return 0


if __name__ == "__main__":
    sys.exit(main())