# dsakit

A collection of classic data-structure and algorithm routines in plain
Python, using only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.matrices` | `max_ones_row`, `rotate_90`, `multiply`, `transpose`, `rectangle_sum` |
| `dsakit.arrays` | `count_greater`, `prefix_sums`, `sorted_squares`, `has_equal_split`, `is_strictly_increasing`, `even_odd_partition`, `alternating_sum`, `last_index`, `count_occurrences`, `rotate_right`, `second_largest`, `sort_binary`, `range_sums`, `count_triplets`, `unique_values` |
| `dsakit.linked_list` | `Node`, `LinkedList`, and functions on node chains: `from_values`, `to_list`, `format_chain`, `chains_equal`, `middle_node`, `has_cycle`, `remove_cycle`, `intersection`, `delete_alternate`, `delete_duplicates`, `reverse`, `reverse_recursive`, `reverse_in_groups` |
| `dsakit.list_algorithms` | `merge_sorted`, `merge_k_sorted`, `odd_even`, `remove_kth_from_end`, `reorder`, `rotate_right`, `swap_pairs`, `is_palindrome` |
| `dsakit.doubly_linked` | `DoubleNode`, `DoublyLinkedList` |
| `dsakit.circular` | `CircularLinkedList` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackFullError`, `StackEmptyError`, `is_balanced`, `copy_stack`, `evaluate_postfix`, `evaluate_prefix`, `insert_at_bottom`, `insert_at`, `remove_at`, `remove_bottom`, `reverse_stack`, `next_greater`, `stock_span` |
| `dsakit.queues` | `LazyStackQueue`, `EagerStackQueue`, `LinkedQueue`, `sliding_window_max`, `reverse_queue` |
| `dsakit.sets` | `is_pangram`, `possible_scores`, `second_smallest`, `common_sum` |
| `dsakit.strings` | `is_palindrome`, `decode`, `longest_common_prefix`, `counting_sort`, `is_anagram`, `is_isomorphic`, `longest_ones` |
| `dsakit.melody` | `TuneHierarchy`, `parse_melody`, `melody_score`, `main` (the `dsakit-melody` command) |

## Things to know

- `LinkedList` positions (`insert`, `update`, `delete_at`) are zero-based;
  `DoublyLinkedList` positions (`insert_at`, `delete_at`) are one-based.
- The chain functions in `dsakit.linked_list` and `dsakit.list_algorithms`
  work on `Node` heads and relink nodes in place, returning the new head.
  `Node` objects compare by identity.
- The free functions in `dsakit.stacks` take a stack as a sequence whose last
  item is the top, and return a new list.
- `ArrayStack` and `LinkedStack` have a fixed capacity: pushing onto a full
  stack raises `StackFullError` (an `OverflowError`); popping or reading an
  empty one raises `StackEmptyError` (an `IndexError`).
- `evaluate_postfix` and `evaluate_prefix` take single-digit operands and the
  operators `+ - * / ^`; division truncates towards zero.

## Examples

```python
from dsakit.strings import decode, is_anagram
from dsakit.stacks import ArrayStack, StackFullError, is_balanced, evaluate_postfix
from dsakit.linked_list import LinkedList

decode("3[a]2[bc]")             # 'aaabcbc'
is_anagram("listen", "silent")  # True
is_balanced("[{()}]")           # True
evaluate_postfix("231*+9-")     # -4

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackFullError:
    print("stack is full")

chain = LinkedList([10, 20, 30])
chain.insert(1, 15)
list(chain)                     # [10, 15, 20, 30]
str(chain)                      # '10->15->20->30->NULL'
```

## The melody command

`dsakit-melody` scores how well two melodies align against a hierarchy of
tunes. It reads from the file named as its only argument, or from standard
input when none is given:

1. a line with the number of hierarchy lines `N`;
2. `N` lines of the form `parent: child child ...` (the first parent is the root);
3. two lines, each a melody written as tune names separated by `-`;
4. three integers: the match reward, the mismatch penalty and the gap penalty.

Aligned notes that are equal or sit at the same depth of the hierarchy earn
the match reward; other aligned notes cost the mismatch penalty; each skipped
note costs the gap penalty. Notes that are not in the hierarchy can only be
skipped. The command prints the best score as a single integer, with no
trailing newline.

```
dsakit-melody input.txt
dsakit-melody < input.txt
```

Apart from this command, the package is a library only: it has no other
command-line programs.