"""A singly linked list with an internal and a positional external iterator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(slots=True)
class _Node:
    item: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list with O(1) access to both ends."""

    __slots__ = ("_head", "_tail", "_length")

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._length == 0

    def insert_first(self, item: Any) -> None:
        """Put ``item`` at the front of the list."""
        node = _Node(item, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._length += 1

    def insert_last(self, item: Any) -> None:
        """Put ``item`` at the back of the list."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def remove_first(self) -> Any:
        """Remove and return the front item; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("remove from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.item

    def first(self) -> Any:
        """Return the front item; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("first of an empty list")
        return self._head.item

    def last(self) -> Any:
        """Return the back item; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.item

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def clear(self, destroy: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing each item, front first, to ``destroy``."""
        while not self.is_empty():
            item = self.remove_first()
            if destroy is not None:
                destroy(item)

    def iterate(self, visit: Callable[[Any], bool]) -> None:
        """Call ``visit`` on each item in order until it returns a false value."""
        for item in self:
            if not visit(item):
                break

    def iterator(self) -> "ListIterator":
        """Return a positional iterator starting at the front."""
        return ListIterator(self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class ListIterator:
    """A cursor over a LinkedList that can insert and remove in place."""

    __slots__ = ("_list", "_previous", "_current")

    def __init__(self, linked_list: LinkedList) -> None:
        self._list = linked_list
        self._previous: _Node | None = None
        self._current: _Node | None = linked_list._head

    def advance(self) -> bool:
        """Move to the next item; return False if already at the end."""
        if self._current is None:
            return False
        self._previous = self._current
        self._current = self._current.next
        return True

    def current(self) -> Any:
        """Return the item under the cursor; raise IndexError at the end."""
        if self._current is None:
            raise IndexError("iterator is at the end")
        return self._current.item

    def at_end(self) -> bool:
        """Return True when the cursor is past the last item."""
        return self._current is None

    def insert(self, item: Any) -> None:
        """Insert ``item`` before the cursor; the new item becomes current."""
        node = _Node(item, self._current)
        if self._current is None:
            self._list._tail = node
        if self._previous is None:
            self._list._head = node
        else:
            self._previous.next = node
        self._current = node
        self._list._length += 1

    def remove(self) -> Any:
        """Remove and return the current item; raise IndexError at the end."""
        node = self._current
        if node is None:
            raise IndexError("remove at the end of the list")
        if self._previous is None:
            self._list._head = node.next
        else:
            self._previous.next = node.next
        if node.next is None:
            self._list._tail = self._previous
        self._current = node.next
        self._list._length -= 1
        return node.item