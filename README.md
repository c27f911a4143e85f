# problemset

Solutions to well-known algorithmic problems, written as plain Python
functions that take ordinary values and return results.

## Modules

- `problemset.modular`: arithmetic modulo `MOD` (1 000 000 007):
  `mod_pow`, `mod_mul`, `mod_add`, `mod_sub`, `mod_inv`, `mod_div`, plus
  `exponentiation(a, b)` for `a ** b` and `tower_exponentiation(a, b, c)`
  for `a ** (b ** c)`, both taken modulo `MOD`.
- `problemset.intro`: `increasing_array`, `beautiful_permutation`,
  `number_spiral`, `two_knights`, `two_sets`, `trailing_zeros`, `coin_piles`.
- `problemset.combinatorics`: `palindrome_reorder`, `gray_code`,
  `apple_division`, `creating_strings`, `chessboard_queens` (eight queens on
  a board whose `*` squares are blocked).
- `problemset.dp`: `dice_combinations` (modulo `MOD`), `minimizing_coins`,
  `book_shop`.
- `problemset.graph`: the `DSU` disjoint-set union (`leader`, `merge`,
  `same`), `count_rooms` for a grid where `#` is a wall, and
  `reconnect_cables`. This function returns a list of `Reconnection(cable, server, target)` moves.
- `problemset.subarrays`: `subarray_sums_positive` (sliding window, positive
  values only) and `subarray_sums` (any sign).
- `problemset.sorting`: `apartments`, `concert_tickets`, `ferris_wheel`,
  `collecting_numbers`, `restaurant_customers`, `movie_festival`,
  `stick_lengths`, `missing_coin_sum`.
- `problemset.searching`: `sum_of_two_values`, `sum_of_three_values`,
  `sum_of_four_values`, `max_subarray_sum`, `max_subarray_sum_prefix`,
  `playlist`, `towers`.
- `problemset.scheduling`: `traffic_lights`, `room_allocation` (returns an
  `Allocation(rooms, assignment)`), `factory_machines`.
- `problemset.linear`: `nearest_smaller_values`, `josephus`.

Where a problem may have no answer, the function returns `None`. Examples are
`beautiful_permutation`, `two_sets`, `palindrome_reorder`, `minimizing_coins`,
the `sum_of_*_values` functions, and customers who get no ticket in
`concert_tickets`. Input that breaks a function's stated conditions raises
`ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the library

```python
from problemset.modular import exponentiation
from problemset.intro import trailing_zeros
from problemset.dp import dice_combinations
from problemset.combinatorics import apple_division
from problemset.sorting import missing_coin_sum
from problemset.searching import playlist, towers

exponentiation(3, 4)                    # 81
trailing_zeros(20)                      # 4
dice_combinations(3)                    # 4
apple_division([3, 2, 7, 4, 1])         # 1
missing_coin_sum([2, 9, 1, 2, 7])       # 6
playlist([1, 2, 1, 3, 2, 7, 4, 2])      # 5
towers([3, 8, 2, 1, 5])                 # 2
```

## Command line

The `problemset` command runs one problem. It reads whitespace-separated
integers from standard input and prints the answer on one line:

```
echo 7 | problemset josephus
echo "8  2 5 1 4 8 3 2 5" | problemset nearest-smaller
echo "8 3  3 6 2" | problemset traffic-lights
```

- `josephus` reads `n`.
- `nearest-smaller` reads `n` and then `n` values.
- `traffic-lights` reads the street length, the count `n`, and then `n`
  positions.

On bad input the command prints an error to standard error and exits with
status 1. Only these three problems can be run from the command line. Use the
others by importing them from Python.