"""A binary max-heap priority queue driven by a three-way comparison, and heap sort."""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableSequence

Comparator = Callable[[Any, Any], int]


def _sift_down(data: MutableSequence[Any], size: int, pos: int, cmp: Comparator) -> None:
    while True:
        largest = pos
        left = 2 * pos + 1
        right = left + 1
        if left < size and cmp(data[left], data[largest]) > 0:
            largest = left
        if right < size and cmp(data[right], data[largest]) > 0:
            largest = right
        if largest == pos:
            return
        data[pos], data[largest] = data[largest], data[pos]
        pos = largest


def _sift_up(data: MutableSequence[Any], pos: int, cmp: Comparator) -> None:
    while pos > 0:
        parent = (pos - 1) // 2
        if cmp(data[parent], data[pos]) >= 0:
            return
        data[parent], data[pos] = data[pos], data[parent]
        pos = parent


def _heapify(data: MutableSequence[Any], cmp: Comparator) -> None:
    size = len(data)
    for pos in reversed(range(size // 2)):
        _sift_down(data, size, pos, cmp)


def heap_sort(items: MutableSequence[Any], cmp: Comparator) -> None:
    """Sort ``items`` in place into ascending order according to ``cmp``."""
    _heapify(items, cmp)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0, cmp)


class Heap:
    """A max-heap: ``cmp(a, b) > 0`` means ``a`` has the higher priority.

    Reverse the comparison to obtain a min-heap. ``None`` cannot be stored.
    """

    __slots__ = ("_cmp", "_data")

    def __init__(self, cmp: Comparator, items: Iterable[Any] | None = None) -> None:
        self._cmp = cmp
        self._data: list[Any] = list(items) if items is not None else []
        _heapify(self._data, cmp)

    def push(self, item: Any) -> None:
        """Add ``item`` to the heap; raise ValueError for None."""
        if item is None:
            raise ValueError("cannot push None onto a heap")
        self._data.append(item)
        _sift_up(self._data, len(self._data) - 1, self._cmp)

    def pop(self) -> Any:
        """Remove and return the highest-priority item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        data = self._data
        data[0], data[-1] = data[-1], data[0]
        top = data.pop()
        _sift_down(data, len(data), 0, self._cmp)
        return top

    def peek(self) -> Any:
        """Return the highest-priority item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("peek at an empty heap")
        return self._data[0]

    def is_empty(self) -> bool:
        """Return True when the heap holds no items."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def clear(self, destroy: Callable[[Any], None] | None = None) -> None:
        """Empty the heap, passing items in priority order to ``destroy``."""
        if destroy is None:
            self._data.clear()
            return
        while self._data:
            destroy(self.pop())

    def __repr__(self) -> str:
        return f"Heap({self._data!r})"