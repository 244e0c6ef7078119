# dskit

A small library of classic data structures and algorithms, written in plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dskit.seqlist` | `SeqList`, an array-backed sequence list with positional `insert` and `erase` |
| `dskit.slist` | `SList` and `SListNode`, a singly linked list |
| `dskit.dlist` | `DList` and `DListNode`, a circular doubly linked list with a sentinel node |
| `dskit.stack` | `Stack`, a LIFO stack |
| `dskit.fifo` | `LinkedQueue`, a FIFO queue on linked nodes |
| `dskit.circular_queue` | `CircularQueue`, a fixed-capacity ring buffer |
| `dskit.heap` | `MinHeap`, `adjust_up`, `adjust_down`, `heap_sort_descending`, `top_k`, `print_top_k` |
| `dskit.sorting` | `bubble_sort`, `count_sort`, `heap_sort`, `insert_sort`, `merge_sort`, `merge_sort_iterative`, `quick_sort`, `quick_sort_hoare`, `quick_sort_hole`, `quick_sort_lomuto`, `quick_sort_iterative`, `partition`, `median_of_three`, `select_sort`, `shell_sort` |
| `dskit.arrays` | `missing_number`, `rotate`, `merge`, `remove_duplicates`, `remove_element` |
| `dskit.list_problems` | `ListNode`, `RandomNode`, `from_values`, `to_values` and list problems: `kth_to_last`, `middle_node`, `remove_elements`, `reverse_list`, `is_palindrome`, `copy_random_list`, `has_cycle`, `detect_cycle`, `get_intersection_node`, `merge_two_lists`, `partition` |
| `dskit.binary_tree` | `TreeNode`, `build_preorder`, traversals, tree measures and checks, and the `main` entry point of the `dskit-tree` command |
| `dskit.adapters` | `is_valid` for bracket matching, `QueueFromStacks`, `StackFromQueues` |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Containers have a length and can be iterated. Removing from an empty container raises `IndexError`.

```python
from dskit.seqlist import SeqList
from dskit.stack import Stack
from dskit.circular_queue import CircularQueue

seq = SeqList([2, 3])
seq.push_front(1)
seq.push_back(4)
print(list(seq))        # [1, 2, 3, 4]
print(seq.find(3))      # 2
print(seq.find(9))      # -1

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.top())      # 20

ring = CircularQueue(2)
ring.enqueue(1)
ring.enqueue(2)
print(ring.is_full())   # True
print(ring.enqueue(3))  # False
```

`CircularQueue` reports success with `True`/`False`, and its `front()` and `rear()` return `-1` when it is empty.

The linked lists hand out their nodes, so you can insert or erase at a node you found:

```python
from dskit.slist import SList

items = SList([1, 2, 4])
items.insert_after(items.find(2), 3)
print(items)            # 1->2->3->4->NULL
```

The sorting functions sort a mutable sequence in place. The quick sorts take an optional inclusive `begin`/`end` range:

```python
from dskit.sorting import shell_sort, quick_sort

data = [5, 2, 9, 1, 7]
shell_sort(data)
print(data)             # [1, 2, 5, 7, 9]

data = [3, 1, 2]
quick_sort(data, 0, len(data) - 1)
print(data)             # [1, 2, 3]
```

Finding the largest values with a min-heap. `top_k` returns them in heap order; `print_top_k` reads whitespace-separated integers from a file and prints them:

```python
from dskit.heap import top_k

print(sorted(top_k([4, 9, 1, 7, 3], 2)))   # [7, 9]
```

Binary trees are built from a preorder string in which `#` marks an absent child:

```python
from dskit.binary_tree import build_preorder, tree_size, tree_height, inorder_traversal

root = build_preorder("ABD##E#H##CF##G##")
print(tree_size(root))          # 8
print(tree_height(root))        # 4
print(inorder_traversal(root))  # ['D', 'B', 'E', 'H', 'A', 'F', 'C', 'G']
```

`build_preorder` raises `ValueError` if the string ends before the tree is complete.

## Command line

`dskit-tree` builds a tree from a preorder string (with `#` for absent children) and prints its in-order values, each followed by a space. The string is taken from the first argument, or else from one line of standard input:

```
dskit-tree "abc##de#g##f###"
echo "abc##de#g##f###" | dskit-tree
```

Both print `c b e g d f a `. An incomplete string is reported on standard error and the command exits with status 1.