# dsakit

A compact collection of classic algorithms and data structures. The code is
written to be easy to read as well as to use. It needs only the standard
library.

## Modules

### `dsakit.numbers`

Small number and text routines:

- `is_armstrong(n)`: True when the sum of the cubes of the digits of `n`
  equals `n` (so `153` and `371` qualify).
- `fibonacci(count)`: the first `count` Fibonacci numbers, starting `0, 1`.
- `is_prime(n)` and `primes_between(low, high)`. The range is inclusive.
- `reverse_number(n)`: the digits of `n` in reverse order. Zero or negative
  input gives `0`.
- `factorial(n)`: computed recursively. Raises `ValueError` for negative `n`.
- `max_of_three(a, b, c)`, `add(a, b)`, `shift_left(value, bits)`.
- `hollow_rectangle(rows, cols)`: the lines of a hollow rectangle of `*`, as a
  list of strings.
- `greeting_for(button)`: maps `"a"`, `"b"`, `"c"` and `"d"` to a word. Any
  other key gives `"not found"`.

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort` and
`selection_sort` each take any iterable and return a new sorted list. The
input is left unchanged. `merge_sort` is stable. `partition(values, start, end)`
is the in-place step that `quick_sort` uses. It uses the last item of the range
as the pivot and returns the pivot's final index.

### `dsakit.stacks`

- `ArrayStack(capacity=100)`: a bounded stack. Pushing onto a full stack
  raises `StackOverflowError`.
- `LinkedStack()`: an unbounded stack.

Both have `push`, `pop` and `top`. Calling `pop` or `top` on an empty stack
raises `StackEmptyError`, which is a subclass of `IndexError`. Both support
`len()`. Iterating over either one goes from the bottom of the stack to the top.

### `dsakit.queues`

- `CircularQueue(capacity=101)`: a ring buffer with `is_full()`. Enqueuing
  onto a full queue raises `QueueFullError`.
- `LinkedQueue()`: an unbounded queue.

Both have `enqueue`, `dequeue`, `front` and `is_empty`. Calling `dequeue` or
`front` on an empty queue raises `QueueEmptyError`, which is a subclass of
`IndexError`. Iterating over either one goes from front to rear.

### `dsakit.linkedlist`

- `SinglyLinkedList(values=())`:
  - `push_front` and `append` add values at either end.
  - `insert_at(value, position)` and `delete_at(position)` use 1-based
    positions and raise `IndexError` when the position is out of range.
    `delete_at` returns the removed value.
  - `reverse()` and `reverse_recursive()` reverse the list in place.
- `DoublyLinkedList(values=())`: `push_front`, `append`, and iteration in both
  directions through `reversed()`.

`str()` of either list gives `"1 -> 2 -> 3 -> NULL"`.

### `dsakit.bst`

`BinarySearchTree(values=())` is an unbalanced binary search tree. Values
equal to a node go into its left subtree. It provides:

- `insert` and `delete`. Deleting a value that is not in the tree does nothing.
- Membership tests with `in`.
- `min()` and `max()`, which raise `ValueError` on an empty tree.
- `height()`, which counts the nodes on the longest root-to-leaf path.
- `inorder()`, `preorder()`, `postorder()`, `level_order()` and
  `zigzag_order()`, each returning a list. The zigzag order alternates
  direction level by level after the root.
- `is_valid()`.

The tree is built from `Node` objects, reachable through `tree.root`.
`is_binary_search_tree(node)` checks any tree of `Node`s.

## Examples

```python
from dsakit.numbers import factorial, is_prime
from dsakit.sorting import merge_sort
from dsakit.stacks import LinkedStack
from dsakit.bst import BinarySearchTree

factorial(5)                       # 120
is_prime(7)                        # True
merge_sort([6, 5, 12, 10, 9, 1])   # [1, 5, 6, 9, 10, 12]

stack = LinkedStack()
stack.push(5)
stack.push(55)
stack.top()                        # 55

tree = BinarySearchTree([15, 5, 10, 4, 20, 17, 25])
10 in tree                         # True
tree.min(), tree.max()             # (4, 25)
tree.inorder()                     # [4, 5, 10, 15, 17, 20, 25]
```

```python
from dsakit.linkedlist import DoublyLinkedList, SinglyLinkedList

items = DoublyLinkedList([1, 2, 3])
list(reversed(items))  # [3, 2, 1]

chain = SinglyLinkedList([2, 3])
chain.insert_at(4, 1)
str(chain)             # "4 -> 2 -> 3 -> NULL"
```

## What it does not do

This is a library only. It has no command-line program, and nothing in it
reads from standard input or prints. Every routine returns its result to the
caller.