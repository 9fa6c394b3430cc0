# dsakit

A small collection of classic data structures and algorithms, together with a
travel planner that finds routes between 35 Indian cities by distance, cost,
travel time or any combination of them. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `linear_search` (1-based position or `None`), `insert_at`, `delete_at` (0-based, return new lists, `IndexError` when out of range), `recursive_sum`, `marks_total`, `format_marks` |
| `dsakit.matrices` | `row_sums`, `column_sums`, `multiply`; `DimensionError` for ragged rows or mismatched shapes |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `merge`, `merge_sort`, each returning a new sorted list |
| `dsakit.palindrome` | `is_palindrome`, comparing only ASCII letters and digits, case-insensitively |
| `dsakit.queues` | `LinearQueue` (freed slots are never reused, so it reports full after `capacity` enqueues), `CircularQueue` (ring buffer), `QueueFullError`, `QueueEmptyError`; default capacity 5 |
| `dsakit.stacks` | `ArrayStack` (capacity 10 by default, with `second_largest`), `LinkedStack` (unbounded), `StackOverflowError`, `StackUnderflowError` |
| `dsakit.linked_lists` | `LinkedList` (`insert_after`, `remove` by value, `middle`, `format`), `CircularLinkedList`, `EmptyListError` |
| `dsakit.bst` | `BinarySearchTree`; equal values go left, iteration is in-order |
| `dsakit.hashing` | `digital_root`, `family_of`, `FamilyTable` (keeps duplicates, newest first, reports collisions), `ChainedHashTable` (unique IDs, separate chaining) |
| `dsakit.routes_data` | `TransportMode`, `Connection`, `connections()`, `CITIES` |
| `dsakit.travel` | `TravelGraph`, `Criterion`, `Journey`, `build_graph`, `parse_criteria`, `format_journey`, `main` |

Empty or full containers raise the exceptions listed above rather than
printing a message; `ArrayStack.second_largest` returns `None` when there is
no positive second-largest value, and `LinkedList.middle` returns `None` for
lists of even length.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.queues import CircularQueue
from dsakit.hashing import ChainedHashTable

merge_sort([5, 2, 9, 1])          # [1, 2, 5, 9]

queue = CircularQueue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                   # 1

table = ChainedHashTable()
table.insert(500123)              # 6, the family it went into
500123 in table                   # True
```

Planning a journey:

```python
from dsakit.travel import build_graph, parse_criteria, format_journey

graph = build_graph()
start = graph.city_index("Delhi")
end = graph.city_index("Chennai")

journey = graph.find_optimal_path(start, end, parse_criteria("2 3"))
print(format_journey(journey))

cheap = graph.find_route_within_budget(start, end, 3000)
```

`find_optimal_path` minimises a combined score in which distance counts in
full and cost and time count a tenth each, summed over the chosen criteria.
`find_route_within_budget` finds the shortest-distance route whose running
cost never exceeds the budget. Both return `None` when no route is found;
city names are matched without regard to case, and unknown names raise
`ValueError`.

## Command-line travel planner

The interactive planner is installed as a command:

```
dsakit-travel
```

It offers a menu to find the optimal route by one or more criteria
(1 = distance, 2 = cost, 3 = time, entered separated by spaces, at most
three), to find the shortest route within a budget, and to list the
available cities. Choose 4, or end the input, to leave.

## What it does not do

The data structures are a library only: apart from the travel planner there
are no interactive menus or commands. Nothing is stored between runs, and the
travel network is the fixed table in `dsakit.routes_data`; there is no way to
load another one from a file.