"""A singly linked list that holds elements of one declared size."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class ListIntegrityError(Exception):
    """Raised when a list's links disagree with its recorded shape."""


@dataclass(eq=False)
class SListNode:
    """One link of an :class:`SList`, holding an element and the next link."""

    data: Any = None
    next: Optional["SListNode"] = None


class SList:
    """Singly linked list with head and tail references and a cached length.

    ``size`` is the declared element size; only lists with equal sizes can be
    joined together.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.head: Optional[SListNode] = None
        self.tail: Optional[SListNode] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"SList(size={self.size}, items={list(self)!r})"

    def first(self) -> Any:
        """Return the first element, or None if the list is empty."""
        return self.head.data if self.head is not None else None

    def last(self) -> Any:
        """Return the last element, or None if the list is empty."""
        return self.tail.data if self.tail is not None else None

    def purge(self) -> "SList":
        """Remove every element, keeping the element size."""
        self.head = None
        self.tail = None
        self._length = 0
        return self

    def append(self, data: Any = None) -> SListNode:
        """Add an element at the end and return its node."""
        node = SListNode(data)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1
        return node

    def prepend(self, data: Any = None) -> SListNode:
        """Add an element at the front and return its node."""
        node = SListNode(data, self.head)
        if self.head is None:
            self.tail = node
        self.head = node
        self._length += 1
        return node

    def insert(self, pos: int, data: Any = None) -> SListNode:
        """Insert an element so that it ends up at ``pos``."""
        if pos < 0 or pos > self._length:
            raise IndexError(f"cannot insert at position {pos}")
        if pos == 0:
            return self.prepend(data)
        if pos == self._length:
            return self.append(data)
        prev = self._node_at(pos - 1)
        node = SListNode(data, prev.next)
        prev.next = node
        self._length += 1
        return node

    def remove(self, pos: int) -> None:
        """Remove the element at ``pos``."""
        if self._length == 0:
            raise IndexError("cannot remove from an empty list")
        if pos < 0 or pos >= self._length:
            raise IndexError(f"position {pos} out of range")
        if pos == 0:
            self.pop()
            return
        prev = self._node_at(pos - 1)
        node = prev.next
        assert node is not None
        if node.next is None:
            self.tail = prev
        prev.next = node.next
        self._length -= 1

    def set(self, pos: int, data: Any) -> SListNode:
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
        self.head = node.next
        if self.head is None:
            self.tail = None
        self._length -= 1
        node.next = None
        return node.data

    def swap(self, pos_a: int, pos_b: int) -> None:
        """Exchange the nodes at two positions."""
        if min(pos_a, pos_b) < 0 or max(pos_a, pos_b) >= self._length:
            raise IndexError(f"cannot swap positions {pos_a} and {pos_b}")
        if pos_a == pos_b:
            return
        if pos_a > pos_b:
            pos_a, pos_b = pos_b, pos_a

        prev_a = self._node_at(pos_a - 1) if pos_a > 0 else None
        prev_b = self._node_at(pos_b - 1)
        node_a = prev_a.next if prev_a is not None else self.head
        node_b = prev_b.next
        assert node_a is not None and node_b is not None

        if node_a.next is node_b:
            node_a.next = node_b.next
            node_b.next = node_a
        else:
            node_a.next, node_b.next = node_b.next, node_a.next
            prev_b.next = node_a

        if prev_a is None:
            self.head = node_b
        else:
            prev_a.next = node_b

        if self.tail is node_b:
            self.tail = node_a

    def split(self, pos: int) -> "SList":
        """Detach the elements from ``pos`` onward into a new list."""
        if pos < 0 or pos >= self._length:
            raise IndexError(f"cannot split at position {pos}")
        new = SList(self.size)
        if pos == 0:
            new.head, new.tail, new._length = self.head, self.tail, self._length
            self.purge()
            return new
        node = self._node_at(pos - 1)
        new.head = node.next
        new.tail = self.tail
        new._length = self._length - pos
        node.next = None
        self.tail = node
        self._length = pos
        return new

    def join(self, src: "SList") -> "SList":
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
            assert self.tail is not None
            self.tail.next = src.head
        self.tail = src.tail
        self._length += src._length
        src.purge()
        return self

    def copy(self) -> "SList":
        """Return a new list holding the same elements."""
        duplicate = SList(self.size)
        for item in self:
            duplicate.append(item)
        return duplicate

    def verify(self) -> None:
        """Check the links against the recorded length, head and tail."""
        if self._length != 0 and (self.head is None or self.tail is None):
            raise ListIntegrityError("non-empty list without head or tail")
        seen: set[int] = set()
        count = 0
        node = self.head
        while node is not None:
            if id(node) in seen:
                raise ListIntegrityError("list contains a cycle")
            seen.add(id(node))
            if count + 1 == self._length:
                if node is not self.tail:
                    raise ListIntegrityError("last node is not the tail")
                if node.next is not None:
                    raise ListIntegrityError("nodes follow the tail")
            count += 1
            node = node.next
        if count != self._length:
            raise ListIntegrityError(
                f"recorded length {self._length} but found {count} nodes"
            )

    def _node_at(self, pos: int) -> SListNode:
        if pos < 0 or pos >= self._length:
            raise IndexError(f"position {pos} out of range")
        if pos == self._length - 1:
            assert self.tail is not None
            return self.tail
        node = self.head
        for _ in range(pos):
            if node is None:
                break
            node = node.next
        if node is None:
            raise ListIntegrityError("list is shorter than its recorded length")
        return node