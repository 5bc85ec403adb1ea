# tdakit

Plain-Python implementations of classic abstract data types. Each type
supports ordinary Python use (`len`, `in`, `for` loops where they make
sense). Most types also offer explicit cursor objects that step through
the contents one item at a time.

## Contents

| Module                | What it provides                                           |
|-----------------------|------------------------------------------------------------|
| `tdakit.stack`        | `Stack`: last-in, first-out                                |
| `tdakit.linked_list`  | `LinkedList` and its positional cursor `ListIterator`      |
| `tdakit.hashtable`    | `HashTable`, its cursor `HashIterator`, and the `djb2` hash |
| `tdakit.heap`         | `Heap` (max-heap with a three-way comparison) and `heap_sort` |
| `tdakit.bst`          | `BinarySearchTree`, `InOrderIterator`, `RangeIterator`     |

Operations that have nothing to return from an empty structure raise an
exception. `pop`, `peek`, `first`, `last`, `remove_first` and a cursor's
`current` raise `IndexError`. Removing a missing key from a `HashTable` or
`BinarySearchTree` raises `KeyError`.

## Installation

```
pip install .
```

## Stack

```python
from tdakit.stack import Stack

s = Stack()
s.push(1)
s.push(2)
assert s.pop() == 2 and s.peek() == 1
assert len(s) == 1 and not s.is_empty()
```

## Linked list

The list gives constant-time access to both ends. Its cursor can insert
and remove items in place:

```python
from tdakit.linked_list import LinkedList

lst = LinkedList()
for n in (1, 2, 3):
    lst.insert_last(n)

it = lst.iterator()
it.advance()
it.insert(99)          # goes before 2 and becomes current
assert list(lst) == [1, 99, 2, 3]
assert it.remove() == 99
```

`LinkedList.iterate(visit)` calls `visit(item)` on each item in order. It
stops as soon as `visit` returns a false value. `clear(destroy)` empties
the list, front first, and passes each item to `destroy` if you give one.

## Hash table

`HashTable` maps string keys to values. It uses open addressing with
linear probing over the `djb2` hash. It starts with 5381 slots and grows
to the next prime above double its size once the load factor reaches 0.7.

```python
from tdakit.hashtable import HashTable

table = HashTable()
table["perro"] = "guau"
table.put("gato", "miau")
assert "perro" in table and len(table) == 2
assert table.get("vaca") is None
assert table.remove("gato") == "miau"
```

An optional `destroy_value` callback is called with any value that `put`
replaces. It is also called with every value still held when `clear()` is
called. Iteration and `HashIterator` yield keys in slot order, not in
insertion order.

## Heap

The comparison function returns a negative number, zero or a positive
number. An item that compares greater has the higher priority. Reverse
the comparison to get a min-heap. `None` cannot be pushed.

```python
from tdakit.heap import Heap, heap_sort

def cmp(a, b):
    return (a > b) - (a < b)

h = Heap(cmp, [3, 1, 4, 1, 5])
assert h.pop() == 5 and h.peek() == 4

items = [5, 2, 9, 1]
heap_sort(items, cmp)
assert items == [1, 2, 5, 9]
```

## Binary search tree

The tree is unbalanced and keyed by strings. The key comparison defaults
to natural string order. Iteration, `in_order(visit)` and
`InOrderIterator` go through the keys in ascending order.

```python
from tdakit.bst import BinarySearchTree

tree = BinarySearchTree()
for key, value in [("perro", "A"), ("gato", "B"), ("vaca", "C"),
                   ("elefante", "D"), ("gorilla", "E")]:
    tree.put(key, value)
assert list(tree) == ["elefante", "gato", "gorilla", "perro", "vaca"]
```

`range_iterator(low, high, cmp=None)` walks the keys in order. It visits
only those whose *values* lie in `[low, high]`:

```python
it = tree.range_iterator("B", "D")
keys = []
while not it.at_end():
    keys.append(it.current())
    it.advance()
assert keys == ["elefante", "gato", "vaca"]
```

## What this package does not include

There is no first-in, first-out queue type; `collections.deque` from the
standard library fills that role. The package is a library only: it
installs no command-line programs.

## Running the tests

```
pip install .[test]
pytest
```