# dsakit

A small collection of classic data-structure and algorithm routines, written as
plain Python functions and classes with no third-party dependencies.
Python 3.10 or later is required.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arrays`

- `longest_subarray_with_sum(values, k)` – length of the longest contiguous run
  summing to `k`, found with a sliding window (correct for non-negative values);
  0 when there is none.
- `second_largest(values)` – the second largest distinct value, or `None` when
  there is none; raises `ValueError` for an empty input.
- `sorted_union(first, second)` – the distinct values of both inputs, ascending.
- `is_palindrome(text)` – case-sensitive palindrome check that skips characters
  other than ASCII letters and digits.

### `dsakit.sorting`

`bubble_sort`, `insertion_sort` and `selection_sort` each take an iterable and
return a new list sorted ascending.

### `dsakit.greedy`

- `Job(id, deadline, profit)` – a frozen dataclass.
- `max_meetings(start, end)` – 1-based positions of a largest set of
  non-overlapping meetings, picked by earliest finish; a meeting must start
  strictly after the previous chosen one ends.
- `min_platforms(arrivals, departures)` – platforms needed so no train waits.
- `average_wait_time(durations)` – integer (floored) average waiting time under
  shortest-job-first; raises `ValueError` for no jobs.
- `schedule_jobs(jobs)` – `(jobs done, total profit)` for deadline job
  sequencing, taking jobs by decreasing profit into the latest free slot.

The length-mismatch cases of `max_meetings` and `min_platforms` raise
`ValueError`.

### `dsakit.tree`

- `Node(data, left=None, right=None)` – a binary tree node.
- `top_view(root)` – values seen from above, left to right.

### `dsakit.notation`

- `precedence(operator)` – 1 for `+ -`, 2 for `* /`, 3 for `^`, -1 otherwise.
- `infix_to_postfix(expression)` – operands are single ASCII letters or digits;
  `^` is right associative; an unmatched `)` raises `ValueError`.
- `prefix_to_infix(expression)` – fully parenthesised infix.
- `prefix_to_postfix(expression)`.

The prefix conversions raise `ValueError` when an operator lacks operands or the
expression is empty.

### `dsakit.heaps`

- `is_min_heap(values)` – checks min-heap order of an array layout.
- `max_heapify(values, index)` – sifts one element down in place.
- `build_max_heap(values)` – returns the values in max-heap order.
- `BinaryHeap(capacity)` – fixed-capacity min-heap with `insert`, `peek`,
  `extract_min`, `decrease_key(index, value)`, `delete(index)` and `len()`.
  Inserting into a full heap, or reading from an empty one, raises `IndexError`.
- `k_sorted_sort(values, k)` – sorts values that are each at most `k` places
  from their sorted position.
- `KthLargest(k, values)` – `add(value)` returns the current k-th largest value
  of the stream.
- `max_pair_sums(first, second, k)` – the `k` largest sums `a + b` over pairs
  from the two inputs, in descending order.

### `dsakit.linked`

- `LinkedQueue` – FIFO queue with `push`, `pop` (returns the value), `front`,
  `empty`, `len()` and truthiness.
- `LinkedStack` – LIFO stack with `push`, `pop`, `len()`, iteration from bottom
  to top, and `str()` giving e.g. `1 -> 2 -> NULL`.

Popping or peeking an empty queue or stack raises `IndexError`.

### `dsakit.patterns`

- `pattern(number)` – the text of pattern 1 to 18 (stars, digits and letters in
  triangles, pyramids and diamonds), each line ending in a newline. Pattern 18
  is empty. Other numbers raise `ValueError`.
- `main(argv=None)` – the command-line entry point described below.

## Examples

```python
from dsakit.arrays import longest_subarray_with_sum
from dsakit.greedy import Job, max_meetings, schedule_jobs
from dsakit.notation import infix_to_postfix, prefix_to_infix
from dsakit.heaps import KthLargest

longest_subarray_with_sum([2, 3, 5, 1, 9], 10)         # 3
max_meetings([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9])    # [1, 2, 4, 5]
schedule_jobs([Job(1, 4, 20), Job(2, 1, 10), Job(3, 2, 40), Job(4, 2, 30)])  # (2, 60)

infix_to_postfix("(p+q)*(m-n)")   # "pq+mn-*"
prefix_to_infix("*+AB-CD")        # "((A+B)*(C-D))"

kth = KthLargest(3, [4, 5, 8, 2])
kth.add(3)                        # 4
```

## Printing patterns

The package installs a command that prints one or more numbered patterns:

```
dsakit-pattern 6
dsakit-pattern 1 2 3
```

Each argument must be a number from 1 to 18.

## What this package does not do

Apart from the pattern command, the package is a library only: there is no
interactive program that reads arrays or expressions from the keyboard. Call
the functions from Python instead.