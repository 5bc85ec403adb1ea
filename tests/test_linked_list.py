import pytest

from tdakit.linked_list import LinkedList, ListIterator


def _values(n):
    return [object() for _ in range(n)]


def _list_of(items):
    lst = LinkedList()
    for item in items:
        lst.insert_last(item)
    return lst


def _drain(lst):
    return [lst.remove_first() for _ in range(len(lst))]


def _walk(it, steps):
    for _ in range(steps):
        it.advance()
    return it


def test_invariants():
    v = _values(6)
    lst = LinkedList()
    for item in v[:3]:
        lst.insert_first(item)
    for item in v[3:]:
        lst.insert_last(item)
    assert (lst.first(), lst.last(), len(lst)) == (v[2], v[5], 6)
    assert _drain(lst) == [v[2], v[1], v[0], v[3], v[4], v[5]]
    assert lst.is_empty()


@pytest.mark.parametrize("operation", ["remove_first", "first", "last"])
def test_empty_list_raises(operation):
    with pytest.raises(IndexError):
        getattr(LinkedList(), operation)()


def test_none_items_are_kept():
    v = _values(2)
    lst = LinkedList()
    lst.insert_first(None)
    lst.insert_first(v[0])
    lst.insert_last(None)
    lst.insert_last(v[1])
    assert _drain(lst) == [v[0], None, None, v[1]]
    assert lst.is_empty()


def test_clear_with_destroy():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.insert_first(item)
    destroyed = []
    lst.clear(destroyed.append)
    assert destroyed == ["c", "b", "a"]
    assert lst.is_empty()


def test_volume():
    n = 1000
    v = _values(n)
    lst = LinkedList()
    for i in range(n):
        lst.insert_first(v[i])
        assert (lst.first(), lst.last()) == (v[i], v[0])
    for i in range(n):
        lst.insert_last(v[i])
        assert (lst.first(), lst.last()) == (v[n - 1], v[i])
    expected_firsts = v[::-1] + v
    for expected in expected_firsts:
        assert (lst.first(), lst.last()) == (expected, v[n - 1])
        lst.remove_first()
    assert lst.is_empty()


def test_iterator_insert_at_start_goes_first():
    v = _values(4)
    lst = LinkedList()
    it = lst.iterator()
    for item in v[1:]:
        it.insert(item)
    assert (it.current(), lst.first(), lst.last()) == (v[3], v[3], v[1])
    assert [it.remove(), it.remove()] == [v[3], v[2]]
    assert it.current() is v[1]
    assert it.remove() is v[1]
    assert lst.is_empty()
    assert it.at_end()
    with pytest.raises(IndexError):
        lst.last()


def test_iterator_on_empty_list():
    it = ListIterator(LinkedList())
    assert it.at_end()
    assert it.advance() is False
    for operation in (it.current, it.remove):
        with pytest.raises(IndexError):
            operation()


def test_iterator_insert_and_remove_in_middle():
    v = _values(9)
    extra = object()
    lst = _list_of(v)

    it = _walk(lst.iterator(), 4)
    it.insert(extra)
    assert it.current() is extra
    assert list(lst) == v[:4] + [extra] + v[4:]
    assert len(lst) == len(v) + 1

    assert _walk(lst.iterator(), 4).remove() is extra
    assert list(lst) == v
    assert len(lst) == len(v)


def test_iterator_insert_at_end_updates_last():
    v = _values(3)
    lst = _list_of(v[:2])
    it = lst.iterator()
    while it.advance():
        pass
    it.insert(v[2])
    assert lst.last() is v[2]
    assert list(lst) == v


def test_internal_iterator_sum_and_cutoff():
    visited = []
    LinkedList().iterate(lambda item: visited.append(item) or True)
    assert visited == []

    lst = _list_of([1, 2, 3, 0, 4])
    lst.iterate(lambda item: visited.append(item) or True)
    assert visited == list(lst)
    assert sum(visited) == 10

    cut = []
    lst.iterate(lambda item: item != 0 and (cut.append(item) or True))
    assert cut == [1, 2, 3]
    assert sum(visited) + sum(cut) == 16
    assert list(lst) == [1, 2, 3, 0, 4]