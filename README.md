# arrayalgos

Classic array and matrix algorithms over plain Python lists of integers.
Several problems come in more than one variant (brute force, better,
optimal) that give the same answers at different costs, which makes them
handy for study and for checking one approach against another.

Every function takes its input without changing it and returns a new list
or a number.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## What is inside

| Module | Functions |
| --- | --- |
| `arrayalgos.pair_sums` | `two_sum_brute`, `two_sum_better`, `three_sum_brute`, `three_sum_better`, `three_sum_optimal` |
| `arrayalgos.sorting` | `selection_sort`, `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `dutch_flag_sort` |
| `arrayalgos.sorted_sets` | `sorted_union`, `sorted_intersection`, `count_unique_sorted` |
| `arrayalgos.rotation` | `rotate`, `Direction` |
| `arrayalgos.scans` | `leaders_brute`, `leaders_optimal`, `majority_elements_brute`, `majority_elements_better`, `max_consecutive_ones`, `max_subarray_sum`, `missing_number_brute`, `missing_number_better`, `missing_number_optimal`, `max_profit` |
| `arrayalgos.sequences` | `longest_consecutive_brute`, `longest_consecutive_better`, `longest_consecutive_optimal`, `next_permutation`, `count_subarrays_with_sum_brute`, `count_subarrays_with_sum_optimal` |
| `arrayalgos.matrix` | `spiral_order`, `rotate_clockwise`, `set_zeroes_better`, `set_zeroes_optimal` |
| `arrayalgos.cli` | `main`, the `arrayalgos` command |

## Using the library

```python
from arrayalgos.pair_sums import two_sum_better, three_sum_optimal
from arrayalgos.sorting import merge_sort
from arrayalgos.sorted_sets import sorted_union
from arrayalgos.scans import max_profit
from arrayalgos.matrix import spiral_order

two_sum_better([2, 7, 11, 15], 9)          # (0, 1)
three_sum_optimal([-1, 0, 1, 2, -1, -4])   # [[-1, -1, 2], [-1, 0, 1]]
merge_sort([5, 2, 9, 1])                   # [1, 2, 5, 9]
sorted_union([1, 2, 2, 3], [2, 3, 4])      # [1, 2, 3, 4]
max_profit([7, 1, 5, 3, 6, 4])             # 5
spiral_order([[1, 2, 3], [4, 5, 6]])       # [1, 2, 3, 6, 5, 4]
```

A few points worth knowing:

- `two_sum_brute` and `two_sum_better` return an index pair `(i, j)` or
  `None` when no pair matches.
- `rotate(nums, k, direction)` takes `"l"` or `"r"` (or a `Direction`).
  `"l"` brings the last `k` values to the front, `"r"` moves the first `k`
  values to the back. It raises `ValueError` for any other direction or
  for `k` outside `0..len(nums)`.
- `dutch_flag_sort` puts 0s first, then 1s, then every other value.
- `max_subarray_sum` raises `ValueError` on an empty input.
- `rotate_clockwise` raises `ValueError` for a matrix that is not square;
  all matrix functions raise `ValueError` when rows differ in length.
- `next_permutation` wraps the last arrangement round to sorted order.

## Command line

Installing the package provides an `arrayalgos` command. It reads
whitespace-separated integers from a file named on the command line, or
from standard input when none is given, and prints the result.

```
arrayalgos --help
```

Commands:

- `two-sum [FILE]`: reads `n`, `n` values and a target; prints the two
  indices of a matching pair, or nothing when there is none.
- `rotate [FILE]`: reads `n`, `n` values, `k` and a direction letter (`l`
  or `r`); prints the rotated values, or `Invalid Input` for any other
  letter.
- `spiral [FILE]`: reads the number of rows, the number of columns and the
  matrix; prints an empty line, then the values in spiral order.
- `sort [FILE] [-a ALGORITHM]`: reads `n` and `n` values; prints them
  sorted, prefixed by the algorithm's name (for example
  `Quick Sort : 1 2 3`). `ALGORITHM` is one of `bubble`, `insertion`,
  `merge`, `quick` and `selection`; the default is `quick`.

For example:

```
echo "4 2 7 11 15 9" | arrayalgos two-sum
```

prints `0 1`.

Missing or malformed input makes the command print a message to standard
error and exit with status 1.

The command covers only these four problems; the other functions are
available from Python.

## Running the tests

```
pip install ".[test]"
pytest
```