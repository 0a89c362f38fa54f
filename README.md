# algokit

Classic algorithms and data structures, written as plain Python functions and
classes that take data and return results. Nothing in the package reads input
or prints output.

## Installation

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

The package needs Python 3.10 or later and has no dependencies outside the
standard library.

## What is inside

### Numbers, text and patterns

- `algokit.numtheory`
  - `reverse_digits(n)` reverses the decimal digits, keeping the sign;
    `is_palindrome_number(n)` compares a number with its reversal.
  - `factorial(n)` returns `n!` (1 for any `n` below 1).
  - `fibonacci(count)` returns the first `count` Fibonacci numbers, but never
    fewer than `[0, 1]`.
  - `gcd(a, b)` runs Euclid's algorithm with truncating remainders.
  - `is_perfect_square(n)`; negative numbers give `False`.
  - `is_prime(n)` uses trial division up to the square root, so 0 and 1 are
    reported as prime; a negative `n` raises `ValueError`.
  - `digit_sum(n)` (0 for non-positive `n`) and `swap(x, y)`.
  - `max_bitwise(n, k)` returns the largest AND, OR and XOR below `k` over
    pairs `1 <= i < j <= n`, as a tuple.
  - `age_between(present, birth)` takes two `datetime.date` values and
    returns an `Age` with `years`, `months` and `days`. Borrowed days come
    from a fixed month table in which February has 28 days.
- `algokit.patterns`
  - `mirror_pattern(n)` returns lines such as `ABCDEEDCBA`, `ABCDDCBA`, ...,
    `AA`.
  - `star_cross(size)` returns the lines of a plus sign drawn with `*`.
- `algokit.textcheck`: `is_palindrome(text)`.

### Arrays, searching and sorting

- `algokit.arrays`
  - `reversed_elements(values)` returns a new reversed list.
  - `find_duplicates(values)` pairs each value with its next equal
    occurrence and returns a `DuplicateReport` with `duplicates`, `unique`
    and `unique_count`. Zero values are never paired or listed as unique.
  - `linear_search(values, item)` and `jump_search(values, target)` return
    an index or `None`; `jump_search` expects sorted input.
- `algokit.sorting`: `bubble_sort`, `heap_sort`, `sift_heap_sort` and
  `quicksort`. Each takes an iterable and returns a new sorted list.

### Data structures

- `algokit.linkedlist`
  - `DoublyLinkedList(values=())` supports iteration, `len()`,
    `insert_first`, `insert_last`, `insert(pos, data)` with positions counted
    from 1, `delete_first` and `delete_last` (both return the removed value
    and raise `IndexError` on an empty list) and `delete(key)` (raises
    `ValueError` when the key is absent).
  - `SinglyLinkedList` grows at the front with `push_front(item)` and
    supports iteration and `len()`.
- `algokit.stack`: `BoundedStack(capacity=2)` with `push`, `pop`, iteration
  from bottom to top and `len()`. It raises `StackOverflowError` when full and
  `StackUnderflowError` when empty.
- `algokit.bst`: `BinarySearchTree(root)` with `add`, `in` and in-order
  iteration; duplicate values are ignored. `random_tree(seed=None)` builds a
  tree of random values below 100.
- `algokit.expression`: `infix_to_postfix(expression)` for single-letter or
  single-digit operands and the operators `^ * / + -`, plus `is_operator` and
  `precedence`. It raises `InvalidExpressionError` for unknown symbols or
  unbalanced parentheses.

### Small record-keeping examples

- `algokit.gradebook`: `Gradebook` with `marks_for(roll)`,
  `below(subject, threshold=40)`, `average(subject)` and
  `below_average_count(subject)`; unknown subjects or roll numbers raise
  `KeyError`. `default_gradebook()` returns a built-in class of ten students
  with marks in English, Math and Science.
- `algokit.airfare`: `city_index(name)` and `travel_cost(cities)` over a fixed
  fare table (`CITIES`, `COST_TABLE`) of Delhi, Kolkata, Pune, Mumbai, Goa and
  Kanpur. Both raise `UnknownCityError` for any other city.

### Graphs and puzzles

- `algokit.graphs`
  - `dijkstra(graph, start)` returns `(distances, predecessors)`; a zero
    weight means no edge and unreachable nodes keep the distance `INFINITY`
    (9999). `path_to(predecessors, start, node)` walks a path back to the
    start.
  - `prim_mst(cost)` returns spanning-tree edges in the order they are added,
    with `NO_EDGE` (32767) marking missing edges; it raises `ValueError` for
    a graph that is not connected.
  - `floyd_warshall(graph)` returns all-pairs shortest distances, with `INF`
    (99999) marking missing edges.
- `algokit.nqueen`: `solve_n_queens(n)` returns the first board found, as rows
  of 0 and 1, or `None`; `is_safe(board, row, col)` checks one square.
- `algokit.eggdrop`: `egg_drop(eggs, floors)` returns the fewest drops needed
  in the worst case.

### Operating-system algorithms

- `algokit.bankers`: `run_bankers(claim, allocated, maximum)` returns a
  `SafetyReport` with the total allocation, the initial available vector, the
  order in which processes ran, the available vector after each one, and
  whether the state is safe.
- `algokit.scheduling`
  - `round_robin(arrivals, bursts, quantum)` schedules processes with arrival
    times.
  - `round_robin_queue(bursts, quantum)` schedules processes that all arrive
    at once by rotating a ready queue.
  - Both return a `ScheduleReport` of `ProcessResult` entries (`pid`,
    `burst`, `turnaround`, `waiting`) with `average_waiting` and
    `average_turnaround`.

### Linear algebra

- `algokit.linalg`: `matmul(a, b)`, `vector_norm(v)`,
  `lu_decomposition(a)` (no pivoting; a zero pivot raises `ValueError`),
  `forward_substitution`, `backward_substitution` and
  `solve_lu(lower, upper, b)`.
- `algokit.sparse`: `SparseMatrix(rows, cols, entries)` of
  `(row, column, value)` triples, with `from_dense`, `add`, `transpose`,
  `multiply` and `to_dense`. Mismatched dimensions raise `ValueError`.

## Examples

```python
from datetime import date

from algokit.sorting import quicksort
from algokit.arrays import jump_search
from algokit.expression import infix_to_postfix
from algokit.graphs import INF, floyd_warshall
from algokit.numtheory import age_between
from algokit.sparse import SparseMatrix

quicksort([5, 3, 8, 1])                 # [1, 3, 5, 8]
jump_search([0, 1, 1, 2, 3, 5, 8], 5)   # 5
infix_to_postfix("a+b*c")               # "abc*+"

floyd_warshall([
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
])

print(age_between(date(2019, 9, 21), date(1996, 9, 25)))

a = SparseMatrix.from_dense([[1, 0], [0, 2]])
a.multiply(a).to_dense()                # [[1, 0], [0, 4]]
```

## What the package does not do

There are no command-line programs and no interactive prompts: every routine
is called from Python with its data and hands back its result. Printing
tables, menus or reports is left to the caller.