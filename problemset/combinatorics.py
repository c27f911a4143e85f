"""Complete-search problems: palindromes, Gray codes, subsets, permutations and queens."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import permutations
from string import ascii_uppercase

BOARD_SIZE = 8


def palindrome_reorder(text: str) -> str | None:
    """Reorder the uppercase letters of ``text`` into a palindrome.

    Returns None when no palindrome can be formed.
    """
    invalid = set(text) - set(ascii_uppercase)
    if invalid:
        raise ValueError(f"only letters A-Z are allowed, got {sorted(invalid)!r}")
    counts = Counter(text)
    odd = [letter for letter in ascii_uppercase if counts[letter] % 2]
    if len(odd) > 1:
        return None
    middle = odd[0] * counts[odd[0]] if odd else ""
    left = "".join(
        letter * (counts[letter] // 2)
        for letter in reversed(ascii_uppercase)
        if counts[letter] and counts[letter] % 2 == 0
    )
    return left + middle + left[::-1]


def gray_code(n: int) -> list[str]:
    """Return the reflected binary Gray code of width ``n`` as bit strings."""
    if n < 1:
        raise ValueError("n must be positive")
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def apple_division(weights: Iterable[int]) -> int:
    """Return the least possible difference between the weights of two groups."""
    weights = list(weights)
    total = sum(weights)
    sums = {0}
    for weight in weights:
        sums |= {s + weight for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def creating_strings(text: str) -> list[str]:
    """Return every distinct rearrangement of ``text`` in sorted order."""
    return sorted({"".join(p) for p in permutations(text)})


def chessboard_queens(board: Sequence[str]) -> int:
    """Count placements of eight non-attacking queens avoiding squares marked '*'."""
    rows = [row.strip() for row in board]
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError("board must be 8 rows of 8 squares")
    free = [[square != "*" for square in row] for row in rows]

    def place(row: int, cols: frozenset, diag: frozenset, anti: frozenset) -> int:
        if row == BOARD_SIZE:
            return 1
        return sum(
            place(row + 1, cols | {col}, diag | {row - col}, anti | {row + col})
            for col in range(BOARD_SIZE)
            if free[row][col]
            and col not in cols
            and row - col not in diag
            and row + col not in anti
        )

    return place(0, frozenset(), frozenset(), frozenset())