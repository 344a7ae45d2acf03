# algodrills

Small, self-contained solutions to classic algorithm exercises. Each is a plain
Python function that takes ordinary data (integers, lists, tuples, strings) and
returns an ordinary result. Bad input raises `ValueError`.

## Installation

```
pip install algodrills
```

Python 3.10 or later is required. There are no runtime dependencies.

## What is inside

### `algodrills.backtracking`

- `sequences(n, m)`: a generator of every ordered selection of `m` distinct
  numbers from `1..n`, as tuples in lexicographic order.
- `increasing_sequences(n, m)`: a generator of every strictly increasing
  selection of `m` numbers from `1..n`, in lexicographic order.
- `count_n_queens(n)`: the number of ways to place `n` non-attacking queens on an
  `n` by `n` board.

A negative `n` or `m` raises `ValueError`.

### `algodrills.bruteforce`

- `nth_doom_number(n)`: the `n`-th smallest number whose decimal form contains
  `666` (`n` must be at least 1).

### `algodrills.graph`

- `dfs_order(n, edges, start)` and `bfs_order(n, edges, start)`: the visiting
  order of an undirected graph on vertices `1..n`, taking smaller neighbours
  first. `edges` is an iterable of `(a, b)` pairs.
- `count_infected(n, edges)`: how many computers are reached from computer 1,
  not counting computer 1 itself.
- `days_to_ripen(grid)`: days until every tomato in the grid is ripe
  (`1` ripe, `0` unripe, `-1` empty), or `-1` if some can never ripen. The
  grid passed in is not modified.

### `algodrills.greedy`

- `min_coin_count(coins, amount)`: the number of coins used when always taking
  the largest coin that fits; raises `ValueError` if the coins cannot make the
  amount exactly.
- `total_wait_time(times)`: the smallest total waiting time for a queue at one
  machine (shortest jobs first).
- `min_merge_cost(sizes)`: the cheapest total cost of merging files pairwise
  into one, where a merge costs the sum of the two sizes.
- `max_meetings(meetings)`: the most non-overlapping `(start, end)` meetings
  one room can host; a meeting may start when the previous one ends.

### `algodrills.implementation`

- `sets_needed(room_number)`: digit sets needed to spell a room number (a string
  or an integer), where 6 and 9 can stand in for each other.
- `rounded_mean(values)`: the mean, rounded half away from zero.
- `median(values)`: the middle value (the upper middle one for an even count).
- `mode(values)`: the most frequent value; on a tie, the second smallest of the
  tied values.
- `value_range(values)`: largest minus smallest.
- `summarize(values)`: all four together as a frozen `Summary` dataclass with
  fields `mean`, `median`, `mode` and `range`.

### `algodrills.sorting`

- `Student(name, korean, english, math)` and `sort_students(students)`: order by
  Korean score descending, English ascending, maths descending, then name.
- `sort_serials(serials)`: order serial numbers by length, then digit sum, then
  dictionary order.
- `count_hires(applicants)`: how many `(document rank, interview rank)`
  applicants are not beaten on both ranks by someone else.

## Example

```python
from algodrills.backtracking import count_n_queens
from algodrills.greedy import min_merge_cost
from algodrills.graph import bfs_order

count_n_queens(8)                          # 92
min_merge_cost([40, 30, 30, 50])           # 300
bfs_order(4, [(1, 2), (1, 3), (1, 4), (2, 4), (3, 4)], 1)   # [1, 2, 3, 4]
```

## What it does not do

The package is a library only. It has no command-line program and does not read
problem input from standard input or print answers; parse the input yourself and
call the functions with Python values.

## Running the tests

```
pip install "algodrills[test]"
pytest
```