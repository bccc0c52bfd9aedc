"""A doubly linked list that holds elements of one declared size."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from clists.slist import ListIntegrityError


@dataclass(eq=False)
class DListNode:
    """One link of a :class:`DList`, holding an element and both neighbours."""

    data: Any = None
    prev: Optional["DListNode"] = field(default=None, repr=False)
    next: Optional["DListNode"] = field(default=None, repr=False)


class DList:
    """Doubly linked list with head and tail references and a cached length.

    ``size`` is the declared element size; only lists with equal sizes can be
    joined together.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.head: Optional[DListNode] = None
        self.tail: Optional[DListNode] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"DList(size={self.size}, items={list(self)!r})"

    def first(self) -> Any:
        """Return the first element, or None if the list is empty."""
        return self.head.data if self.head is not None else None

    def last(self) -> Any:
        """Return the last element, or None if the list is empty."""
        return self.tail.data if self.tail is not None else None

    def purge(self) -> "DList":
        """Remove every element, keeping the element size."""
        self.head = None
        self.tail = None
        self._length = 0
        return self

    def append(self, data: Any = None) -> DListNode:
        """Add an element at the end and return its node."""
        node = DListNode(data)
        self._link(self.tail, node)
        self._link(node, None)
        self._length += 1
        return node

    def prepend(self, data: Any = None) -> DListNode:
        """Add an element at the front and return its node."""
        node = DListNode(data)
        self._link(node, self.head)
        self._link(None, node)
        self._length += 1
        return node

    def insert(self, pos: int, data: Any = None) -> DListNode:
        """Insert an element so that it ends up at ``pos``."""
        if pos < 0 or pos > self._length:
            raise IndexError(f"cannot insert at position {pos}")
        if pos == 0:
            return self.prepend(data)
        if pos == self._length:
            return self.append(data)
        following = self._node_at(pos)
        previous = following.prev
        node = DListNode(data)
        self._link(previous, node)
        self._link(node, following)
        self._length += 1
        return node

    def remove(self, pos: int) -> None:
        """Remove the element at ``pos``."""
        if self._length == 0:
            raise IndexError("cannot remove from an empty list")
        node = self._node_at(pos)
        self._link(node.prev, node.next)
        node.prev = node.next = None
        self._length -= 1

    def set(self, pos: int, data: Any) -> DListNode:
        """Replace the element at ``pos`` and return its node."""
        node = self._node_at(pos)
        node.data = data
        return node

    def get(self, pos: int) -> Any:
        """Return the element at ``pos``."""
        return self._node_at(pos).data

    def pop(self) -> Any:
        """Remove and return the first element."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self._link(None, node.next)
        node.next = None
        self._length -= 1
        return node.data

    def swap(self, a: int, b: int) -> None:
        """Exchange the nodes at two positions."""
        if min(a, b) < 0 or max(a, b) >= self._length:
            raise IndexError(f"cannot swap positions {a} and {b}")
        if a == b:
            return
        if a > b:
            a, b = b, a
        node_a = self._node_at(a)
        node_b = self._node_at(b)
        if node_a.next is node_b:
            before, after = node_a.prev, node_b.next
            self._link(before, node_b)
            self._link(node_b, node_a)
            self._link(node_a, after)
            return
        prev_a, next_a = node_a.prev, node_a.next
        prev_b, next_b = node_b.prev, node_b.next
        self._link(prev_a, node_b)
        self._link(node_b, next_a)
        self._link(prev_b, node_a)
        self._link(node_a, next_b)

    def split(self, pos: int) -> "DList":
        """Detach the elements from ``pos`` onward into a new list."""
        if pos < 0 or pos >= self._length:
            raise IndexError(f"cannot split at position {pos}")
        new = DList(self.size)
        if pos == 0:
            new.head, new.tail, new._length = self.head, self.tail, self._length
            self.purge()
            return new
        node = self._node_at(pos)
        new.head = node
        new.tail = self.tail
        new._length = self._length - pos
        self.tail = node.prev
        assert self.tail is not None
        self.tail.next = None
        node.prev = None
        self._length = pos
        return new

    def join(self, src: "DList") -> "DList":
        """Move every element of ``src`` onto the end of this list."""
        if src.size != self.size:
            raise ValueError(
                f"element sizes differ: {self.size} and {src.size}"
            )
        if src._length == 0:
            return self
        if self._length == 0:
            self.head = src.head
        else:
            self._link(self.tail, src.head)
        self.tail = src.tail
        self._length += src._length
        src.purge()
        return self

    def copy(self) -> "DList":
        """Return a new list holding the same elements."""
        duplicate = DList(self.size)
        for item in self:
            duplicate.append(item)
        return duplicate

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        node = self.head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self.head, self.tail = self.tail, self.head

    def verify(self) -> None:
        """Check the links in both directions against the recorded shape."""
        if self._length == 0:
            if self.head is not None or self.tail is not None:
                raise ListIntegrityError("empty list with head or tail")
            return
        if self.head is None or self.tail is None:
            raise ListIntegrityError("non-empty list without head or tail")
        if self.head.prev is not None:
            raise ListIntegrityError("nodes precede the head")
        seen: set[int] = set()
        count = 0
        previous: Optional[DListNode] = None
        node: Optional[DListNode] = self.head
        while node is not None:
            if id(node) in seen:
                raise ListIntegrityError("list contains a cycle")
            seen.add(id(node))
            if node.prev is not previous:
                raise ListIntegrityError("backward link does not match")
            if count + 1 == self._length:
                if node is not self.tail:
                    raise ListIntegrityError("last node is not the tail")
                if node.next is not None:
                    raise ListIntegrityError("nodes follow the tail")
            count += 1
            previous = node
            node = node.next
        if count != self._length:
            raise ListIntegrityError(
                f"recorded length {self._length} but found {count} nodes"
            )

    def _link(self, left: Optional[DListNode], right: Optional[DListNode]) -> None:
        if left is None:
            self.head = right
        else:
            left.next = right
        if right is None:
            self.tail = left
        else:
            right.prev = left

    def _node_at(self, pos: int) -> DListNode:
        if pos < 0 or pos >= self._length:
            raise IndexError(f"position {pos} out of range")
        if pos < self._length // 2:
            node = self.head
            for _ in range(pos):
                if node is None:
                    break
                node = node.next
        else:
            node = self.tail
            for _ in range(self._length - 1 - pos):
                if node is None:
                    break
                node = node.prev
        if node is None:
            raise ListIntegrityError("list is shorter than its recorded length")
        return node