# dsakit

A small library of well-known algorithms and data structures. It covers singly linked
lists, containers built from stacks and queues, problems on integer lists, and problems on
strings. It uses only the standard library.

## Installation

```
pip install dsakit
```

## Linked lists

`dsakit.nodes` defines `ListNode`, a dataclass with `val` and `next`. Nodes compare by
identity. Iterating over a node yields that node and every node after it.
`from_values` builds a list from an iterable and returns `None` when the iterable is empty.
`to_values` turns a list back into a Python list. The module also has `reverse_list`, and
`delete_node`, which removes a node when you have no access to the head. `delete_node`
raises `ValueError` if you pass it the last node.

```python
from dsakit.nodes import from_values, to_values, reverse_list
from dsakit.list_edit import remove_nth_from_end, swap_pairs
from dsakit.list_sort import sort_list

print(to_values(sort_list(from_values([4, 2, 1, 3]))))                   # [1, 2, 3, 4]
print(to_values(reverse_list(from_values([1, 2, 3]))))                   # [3, 2, 1]
print(to_values(swap_pairs(from_values([1, 2, 3, 4]))))                  # [2, 1, 4, 3]
print(to_values(remove_nth_from_end(from_values([1, 2, 3, 4, 5]), 2)))   # [1, 2, 3, 5]
```

The other linked-list modules are:

- `dsakit.list_edit` changes the structure of a list in place:
  - `remove_nth_from_end` raises `ValueError` when `n` is less than 1 or greater than
    the length of the list.
  - `delete_duplicates` works on a sorted list.
  - `remove_elements` drops every node with a given value.
  - `swap_pairs` swaps each pair of adjacent nodes.
  - `odd_even_list` puts the nodes at odd positions before those at even positions.
  - `reorder_list` turns L0, L1, …, Ln into L0, Ln, L1, Ln-1, … and returns `None`.
  - `merge_nodes` takes a list that starts with a zero. It replaces each run of values
    between zeros with one node that holds their sum. It raises `ValueError` when no zero
    follows the head.
- `dsakit.list_sort`:
  - `merge_two_lists`: on equal values, the node from the second list comes first.
  - `merge_k_lists` merges the lists pairwise, by divide and conquer.
  - `insertion_sort_list` sorts by insertion.
  - `sort_list` sorts by merge sort.
- `dsakit.list_query`:
  - `get_intersection_node` returns the first node that both lists share, or `None`.
  - `is_palindrome_list` tells whether the values read the same in both directions.
  - `add_two_numbers` adds two numbers stored as digit lists, most significant digit first.
  - `next_larger_nodes` gives, for each node, the value of the first later node that is
    larger, or 0 if there is none.
  - `nodes_between_critical_points` returns `[min_distance, max_distance]` between local
    extrema. It returns `[-1, -1]` when there are fewer than two.
- `dsakit.random_list` has `RandomNode`, a node that also carries a `random` pointer. Its
  `copy_random_list` returns a deep copy of such a list, with the random pointers included.

## Stack and queue structures

```python
from dsakit.structures import MinStack, StockSpanner

stack = MinStack()
stack.push(-2); stack.push(0); stack.push(-3)
print(stack.get_min())   # -3

spanner = StockSpanner()
print([spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]])  # [1, 1, 1, 2, 1, 4, 6]
```

`dsakit.structures` also has two more containers:

- `QueueStack` is a stack kept in a single queue. Its methods are `push`, `pop`, `top` and
  `empty`.
- `StackQueue` is a queue kept in two stacks. Its methods are `push`, `pop`, `peek` and
  `empty`.

`MinStack`, `QueueStack` and `StackQueue` support `len()`. Reading from an empty one raises
`IndexError`. The exception is `MinStack.pop`, which does nothing when the stack is empty.

## Arrays and strings

```python
from dsakit.arrays import two_sum, largest_rectangle_area, car_fleet
from dsakit.strings import decode_string, longest_valid_parentheses

print(two_sum([2, 7, 11, 15], 9))                          # [0, 1]
print(largest_rectangle_area([2, 1, 5, 6, 2, 3]))          # 10
print(car_fleet(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3]))    # 3
print(decode_string("3[a]2[bc]"))                          # aaabcbc
print(longest_valid_parentheses(")()())"))                 # 4
```

`dsakit.arrays` has the following functions:

- `two_sum` returns an empty list when no pair adds up to the target.
- `next_permutation` rearranges the list in place. After the last permutation it wraps
  round to the first.
- `combination_sum` raises `ValueError` for candidates that are not positive.
- `group_anagrams`.
- `plus_one` updates the list of digits and returns it.
- `largest_rectangle_area` returns 0 for an empty histogram.
- `next_greater_element` gives -1 when no larger value follows, and 0 for a value that is
  not in the second list.
- `next_greater_elements` searches the list circularly.
- `car_fleet` raises `ValueError` when the position and speed lists differ in length.

`dsakit.strings` has the following functions:

- `longest_palindromic_substring`: when several substrings share the greatest length, the
  one that starts earliest wins.
- `longest_valid_parentheses`.
- `is_palindrome` considers only ASCII letters and digits, and ignores case.
- `decode_string` raises `ValueError` on an unmatched `]`.
- `longest_palindrome_length`.
- `is_valid_abc`.
- `remove_adjacent_duplicates`.
- `make_good`.

## What it does not do

dsakit is a library only. It has no command-line program. It does not store or load data.

## Running the tests

```
pip install -e ".[test]"
pytest
```