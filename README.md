# clists

Linked lists for Python that support insert and remove by position,
swapping two elements by position, splitting a list in two and joining
two lists together. Join moves the nodes over without copying them.

There are two list types:

- `clists.slist.SList` is a singly linked list. It keeps head and tail
  nodes and a cached length, so `append`, `prepend`, `pop`, `len()` and
  `join` do not walk the list.
- `clists.dlist.DList` is a doubly linked list with the same interface.
  It can also be walked backwards with `reversed()` and reversed in
  place with `reverse()`.

Every list is created with an element `size`. The list stores it as its
`size` attribute and does not check elements against it. Two lists can
only be joined when their sizes are equal.

## Installation

```
pip install .
```

## Usage

```python
from clists.slist import SList

items = SList(4)
items.append(1)
items.append(3)
items.insert(1, 2)
items.prepend(0)

list(items)        # [0, 1, 2, 3]
len(items)         # 4
items.first()      # 0
items.last()       # 3
items.get(2)       # 2

items.swap(0, 3)
list(items)        # [3, 1, 2, 0]

tail = items.split(2)
list(items), list(tail)   # ([3, 1], [2, 0])

items.join(tail)   # tail is left empty
list(items)        # [3, 1, 2, 0]

items.pop()        # 3
items.remove(0)
list(items)        # [2, 0]
```

The doubly linked list has the same methods and can also go backwards:

```python
from clists.dlist import DList

values = DList(4)
for n in (1, 2, 3):
    values.append(n)

list(reversed(values))   # [3, 2, 1]
values.reverse()
list(values)             # [3, 2, 1]
```

## Behaviour

- `append`, `prepend`, `insert` and `set` return the node that holds the
  element (an `SListNode` or `DListNode`). The element is in its `data`
  attribute.
- `first()` and `last()` return `None` on an empty list.
- `get`, `set`, `remove`, `swap` and `split` raise `IndexError` for a
  position outside the list. Negative positions are not accepted.
  `insert` accepts any position from `0` to `len(list)`.
- `pop()` removes and returns the first element. It raises `IndexError`
  on an empty list.
- `swap(a, b)` with equal positions does nothing. It still raises
  `IndexError` if the position is outside the list.
- `split(pos)` keeps the elements before `pos` and returns a new list
  that holds the rest.
- `join(src)` appends the nodes of `src` and leaves `src` empty. It
  raises `ValueError` if the sizes differ and returns the list it was
  called on.
- `copy()` returns a new list with the same size and the same elements.
  The elements themselves are not copied.
- `purge()` empties the list and keeps its size.
- `verify()` checks that the links agree with the recorded head, tail
  and length and that there are no cycles. For `DList` it also checks
  the backward links. A problem raises
  `clists.slist.ListIntegrityError`.

## Running the tests

```
pip install .[test]
pytest
```