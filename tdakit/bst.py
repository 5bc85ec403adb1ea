"""An unbalanced binary search tree keyed by strings, with in-order and range cursors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from tdakit.stack import Stack

KeyComparator = Callable[[str, str], int]
Comparator = Callable[[Any, Any], int]

_MISSING = object()


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(slots=True)
class _Node:
    key: str
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A sorted mapping from string keys to arbitrary values.

    ``cmp`` is a three-way comparison of keys (negative, zero, positive);
    it defaults to the natural string ordering. ``destroy_value``, when
    given, is called with a value that ``put`` replaces and with every
    value still held when the tree is cleared; ``None`` values are skipped.
    Removing a key hands its value back instead.
    """

    __slots__ = ("_root", "_cmp", "_destroy", "_count")

    def __init__(
        self,
        cmp: KeyComparator | None = None,
        destroy_value: Callable[[Any], None] | None = None,
    ) -> None:
        self._root: _Node | None = None
        self._cmp: KeyComparator = cmp if cmp is not None else _natural_compare
        self._destroy = destroy_value
        self._count = 0

    def _find(self, key: str) -> tuple[_Node | None, _Node | None]:
        """Return the node holding ``key`` (or None) and its parent."""
        parent: _Node | None = None
        node = self._root
        while node is not None:
            result = self._cmp(key, node.key)
            if result == 0:
                return node, parent
            parent = node
            node = node.left if result < 0 else node.right
        return None, parent

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        parent: _Node | None = None
        node = self._root
        result = 0
        while node is not None:
            result = self._cmp(key, node.key)
            if result == 0:
                if self._destroy is not None and node.value is not None:
                    self._destroy(node.value)
                node.value = value
                return
            parent = node
            node = node.left if result < 0 else node.right
        new = _Node(key, value)
        if parent is None:
            self._root = new
        elif result < 0:
            parent.left = new
        else:
            parent.right = new
        self._count += 1

    def _replace_child(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        node, parent = self._find(key)
        if node is None:
            raise KeyError(key)
        value = node.value
        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.key, node.value = succ.key, succ.value
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        self._count -= 1
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        node, _ = self._find(key)
        return default if node is None else node.value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node, _ = self._find(key)
        return node is not None

    def __len__(self) -> int:
        return self._count

    def _nodes(self) -> Iterator[_Node]:
        stack = Stack()
        node = self._root
        while node is not None or not stack.is_empty():
            while node is not None:
                stack.push(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[str]:
        for node in self._nodes():
            yield node.key

    def _postorder(self) -> Iterator[_Node]:
        if self._root is None:
            return
        pending = [self._root]
        ordered: list[_Node] = []
        while pending:
            node = pending.pop()
            ordered.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(ordered)

    def clear(self) -> None:
        """Drop every entry, passing each remaining value to ``destroy_value``."""
        if self._destroy is not None:
            for node in self._postorder():
                if node.value is not None:
                    self._destroy(node.value)
        self._root = None
        self._count = 0

    def in_order(self, visit: Callable[[str, Any], bool]) -> None:
        """Call ``visit(key, value)`` in key order until it returns a false value."""
        for node in self._nodes():
            if not visit(node.key, node.value):
                return

    def iterator(self) -> "InOrderIterator":
        """Return a cursor over the keys in order."""
        return InOrderIterator(self)

    def range_iterator(
        self, low: Any, high: Any, cmp: Comparator | None = None
    ) -> "RangeIterator":
        """Return a cursor over the keys, in order, whose values lie in [low, high]."""
        return RangeIterator(self, low, high, cmp)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{n.key!r}: {n.value!r}" for n in self._nodes())
        return f"BinarySearchTree({{{pairs}}})"


class InOrderIterator:
    """A cursor over the keys of a BinarySearchTree in ascending order."""

    __slots__ = ("_stack",)

    def __init__(self, tree: BinarySearchTree) -> None:
        self._stack = Stack()
        self._push_left(tree._root)

    def _push_left(self, node: _Node | None) -> None:
        while node is not None:
            self._stack.push(node)
            node = node.left

    def at_end(self) -> bool:
        """Return True when no keys are left."""
        return self._stack.is_empty()

    def advance(self) -> bool:
        """Move past the current key; return False if already at the end."""
        if self.at_end():
            return False
        node = self._stack.pop()
        self._push_left(node.right)
        return True

    def current(self) -> str:
        """Return the key under the cursor; raise IndexError at the end."""
        if self.at_end():
            raise IndexError("iterator is at the end")
        return self._stack.peek().key


class RangeIterator:
    """A cursor over the keys, in order, whose values satisfy low <= value <= high.

    Values are compared with ``cmp`` (a three-way comparison), which
    defaults to the natural ordering.
    """

    __slots__ = ("_nodes", "_low", "_high", "_cmp", "_current")

    def __init__(
        self,
        tree: BinarySearchTree,
        low: Any,
        high: Any,
        cmp: Comparator | None = None,
    ) -> None:
        self._low = low
        self._high = high
        self._cmp: Comparator = cmp if cmp is not None else _natural_compare
        self._nodes = tree._nodes()
        self._current: _Node | None = None
        self._seek()

    def _in_range(self, value: Any) -> bool:
        return self._cmp(value, self._low) >= 0 and self._cmp(value, self._high) <= 0

    def _seek(self) -> None:
        self._current = next(
            (node for node in self._nodes if self._in_range(node.value)), None
        )

    def at_end(self) -> bool:
        """Return True when no matching keys are left."""
        return self._current is None

    def advance(self) -> bool:
        """Move past the current key; return False if already at the end."""
        if self.at_end():
            return False
        self._seek()
        return True

    def current(self) -> str:
        """Return the key under the cursor; raise IndexError at the end."""
        if self._current is None:
            raise IndexError("iterator is at the end")
        return self._current.key