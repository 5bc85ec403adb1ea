"""A hash table with open addressing, linear probing and string keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

INITIAL_SIZE = 5381
LOAD_FACTOR = 0.7
_MASK64 = (1 << 64) - 1

_MISSING = object()


def djb2(key: str) -> int:
    """Return Bernstein's djb2 hash of ``key``'s UTF-8 bytes, as a 64-bit value."""
    value = 5381
    for byte in key.encode("utf-8"):
        value = (value * 33 + byte) & _MASK64
    return value


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def _next_prime(n: int) -> int:
    while not _is_prime(n):
        n += 1
    return n


@dataclass(slots=True)
class _Entry:
    key: str
    value: Any


class _Tombstone:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<deleted>"


_DELETED = _Tombstone()


def _is_live(entry: Any) -> bool:
    return entry is not None and entry is not _DELETED


def _holds(entry: Any, key: str) -> bool:
    return _is_live(entry) and entry.key == key


class HashTable:
    """A mapping from strings to arbitrary values.

    ``destroy_value``, when given, is called with a value whenever it is
    replaced by ``put`` and for every value still held when the table is
    cleared. Removing a key hands its value back instead.
    """

    def __init__(self, destroy_value: Callable[[Any], None] | None = None) -> None:
        self._destroy = destroy_value
        self._entries: list[Any] = [None] * INITIAL_SIZE
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the underlying table."""
        return len(self._entries)

    def _probe(self, key: str) -> Iterator[tuple[int, Any]]:
        """Yield each slot along ``key``'s probe sequence with its contents."""
        size = len(self._entries)
        start = djb2(key) % size
        for offset in range(size):
            pos = (start + offset) % size
            yield pos, self._entries[pos]

    def _find(self, key: str) -> int:
        """Return the slot holding ``key``, or -1."""
        for pos, entry in self._probe(key):
            if entry is None:
                return -1
            if _holds(entry, key):
                return pos
        return -1

    def _slot_for(self, key: str) -> int:
        """Return the slot holding ``key`` or the first empty slot, or -1."""
        for pos, entry in self._probe(key):
            if entry is None or _holds(entry, key):
                return pos
        return -1

    def _live_entries(self) -> Iterator[_Entry]:
        return (entry for entry in self._entries if _is_live(entry))

    def _rebuild(self, size: int) -> None:
        old = list(self._live_entries())
        self._entries = [None] * size
        self._count = 0
        for entry in old:
            self._entries[self._slot_for(entry.key)] = entry
            self._count += 1

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if self._count / len(self._entries) >= LOAD_FACTOR:
            self._rebuild(_next_prime(len(self._entries) * 2))
        pos = self._slot_for(key)
        if pos == -1:
            # Only deleted slots are left: compact them away and retry.
            self._rebuild(len(self._entries))
            pos = self._slot_for(key)
        entry = self._entries[pos]
        if entry is None:
            self._entries[pos] = _Entry(key, value)
            self._count += 1
            return
        if self._destroy is not None:
            self._destroy(entry.value)
        entry.value = value

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        pos = self._find(key) if self._count else -1
        if pos == -1:
            raise KeyError(key)
        entry = self._entries[pos]
        self._entries[pos] = _DELETED
        self._count -= 1
        return entry.value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        pos = self._find(key)
        if pos == -1:
            return default
        return self._entries[pos].value

    def __getitem__(self, key: str) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) != -1

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        for entry in self._live_entries():
            yield entry.key

    def clear(self) -> None:
        """Drop every entry, passing each remaining value to ``destroy_value``."""
        if self._destroy is not None:
            for entry in self._live_entries():
                self._destroy(entry.value)
        self._entries = [None] * INITIAL_SIZE
        self._count = 0

    def iterator(self) -> "HashIterator":
        """Return a cursor over the stored keys in slot order."""
        return HashIterator(self)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{entry.key!r}: {entry.value!r}" for entry in self._live_entries())
        return f"HashTable({{{pairs}}})"


class HashIterator:
    """A cursor over the keys of a HashTable, in slot order."""

    __slots__ = ("_table", "_pos")

    def __init__(self, table: HashTable) -> None:
        self._table = table
        self._pos = 0
        self._skip_free()

    def _skip_free(self) -> None:
        entries = self._table._entries
        while self._pos < len(entries) and not _is_live(entries[self._pos]):
            self._pos += 1

    def at_end(self) -> bool:
        """Return True when no keys are left."""
        return self._pos >= len(self._table._entries)

    def advance(self) -> bool:
        """Move to the next key; return False if there is none."""
        if self.at_end():
            return False
        self._pos += 1
        self._skip_free()
        return not self.at_end()

    def current(self) -> str:
        """Return the key under the cursor; raise IndexError at the end."""
        if self.at_end():
            raise IndexError("iterator is at the end")
        return self._table._entries[self._pos].key