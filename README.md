# contestkit

Classic programming-contest algorithms as plain Python functions. Each
function takes ordinary Python values (lists, tuples, strings, integers)
and returns its result. Invalid input raises `ValueError`. The package
has no dependencies beyond the standard library.

## Modules

### `contestkit.graphs`

- `can_open_door(words)`: whether the words can be chained so that each
  one starts with the last letter of the one before it.
- `topological_order(n, edges)`: orders vertices `1..n` so that every edge
  `(u, v)` has `u` before `v`. Raises `ValueError` on a cycle.
- `Maze`, `parse_mazes(text)`, `shortest_route(maze)` and
  `format_route(maze, route)`: the nine-by-nine sign maze. Signs say which
  turns (`F`, `L`, `R`) are allowed when arriving at a cell with a given
  heading. `shortest_route` returns the list of cells or `None`.
  `format_route` renders the route in lines of up to ten cells.
- `count_pipe_regions(grid)`: the number of connected regions in a grid of
  pipe tiles lettered `A` to `K`.
- `min_bandwidth_ordering(spec)`: the lexicographically first ordering of
  minimum bandwidth for a graph written like `"A:FB;B:GC"`. Returns the
  ordering and its bandwidth.

### `contestkit.search`

- `eight_puzzle_distance(start, goal)`: the fewest moves between two 3×3
  boards, with `0` as the blank, or `None` if the goal cannot be reached.
- `pour_water(a, b, c, d)`: the least water poured among three jugs (the
  third starts full) to measure `d` litres, or the nearest amount below it.
- `hard_sequence(n, letters)` and `format_hard_sequence(sequence)`: the
  n-th sequence with no adjacent repeated block, and its grouped printout.
- `prime_rings(n)`: yields every ring of `1..n`, starting at 1, in which
  neighbours sum to a prime.
- `count_queens(n)`: the number of n-queens solutions.
- `unique_permutations(values)`: yields each distinct ordering of a
  multiset once.
- `subsets(n)`: yields the subsets of `0..n-1` in bit-mask order.

### `contestkit.sequences`

- `merge_sort(values)` and `quick_sort(values)` return new sorted lists.
- `max_subarray_sum(values)`: the largest contiguous sum, where an empty
  run counts as 0.
- `max_subarray_divide(values)`: the largest non-empty contiguous sum,
  found by divide and conquer.
- `max_subarray_span(values)`: the largest non-empty contiguous sum, with
  its first and last positions counted from 1.

### `contestkit.dynamic`

- `metro_waiting_time(n, total_time, travel, left_departures, right_departures)`
- `Bulb` and `lighting_cost(bulbs)`
- `min_path_unidirectional(matrix)`: the rows of the path and its weight.
- `jukebox(songs, time_left)`: the song count and the total playing time.
  Both include the closing song of length `CLOSING_SONG_LENGTH`.
- `bitonic_tour(points)`
- `color_length(first, second)`
- `tallest_tower(blocks)`
- `triangle_max_path(rows)`
- `coin_max_count(coins, total)` and `coin_path_extremes(coins, total)`
- `unbounded_knapsack(items, capacity)` and `zero_one_knapsack(items, capacity)`
- `longest_increasing_subsequence(values)` and
  `longest_common_subsequence(first, second)`

### `contestkit.greedy`

- `max_items_within(weights, capacity)`
- `fractional_knapsack(items, capacity)`
- `min_boats(weights, capacity)`
- `max_disjoint_intervals(intervals)`: returns the indices of the chosen
  intervals.
- `max_overlap(intervals)`
- `min_interval_cover(intervals, start, end)`: returns `None` if the
  intervals cannot cover the range.
- `huffman_order(symbols)`
- `round_robin_table(k)`
- `pair_giants(points)`

### `contestkit.arith`

- `choose_ratio(p, q, r, s)`: `C(p, q) / C(r, s)` as a float.
- `fibonacci_mod_power(a, b, n)`: `F(a ** b) mod n`.
- `divides_product(values)`: whether the second value divides the product
  of all the others.
- `squarefree_offsets(low, high)`
- `lcm_all(values)`
- `happy_clock_percent(degrees)`

### `contestkit.assorted`

- `add_decimal_strings(first, second)`
- `count_zero_sum_quadruples(a, b, c, d)`
- `building_plan(n)`
- `pancake_flips(stack)`
- `most_common_name(names)`: ties go to the alphabetically first name.

## Example

```python
from contestkit.search import count_queens
from contestkit.sequences import merge_sort
from contestkit.graphs import can_open_door

count_queens(8)                              # 92
merge_sort([3, 1, 2])                        # [1, 2, 3]
can_open_door(["acm", "malform", "mouse"])   # True
```

## What it does not do

This is a library only. It provides no command-line programs that read
contest input from standard input or print judge-formatted output. The
only input parser is `parse_mazes` for the sign-maze text format. For the
other problems, you read the input and call the functions yourself.

## Running the tests

Install the package with its `test` extra, then run `pytest`.