"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class Stack:
    """A LIFO stack of arbitrary items."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"