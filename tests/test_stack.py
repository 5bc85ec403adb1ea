import pytest

from tdakit.stack import Stack


@pytest.fixture
def stack():
    return Stack()


def test_new_stack_is_empty(stack):
    assert stack.is_empty()
    assert len(stack) == 0


def test_pop_on_empty_stack_raises(stack):
    with pytest.raises(IndexError):
        stack.pop()
    assert stack.is_empty()
    assert len(stack) == 0


def test_peek_on_empty_stack_raises(stack):
    with pytest.raises(IndexError):
        stack.peek()
    assert stack.is_empty()
    assert len(stack) == 0


def test_pop_after_emptying_raises(stack):
    stack.push(1)
    assert stack.pop() == 1
    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0


@pytest.mark.parametrize(
    "items",
    [[object() for _ in range(5)], list(range(1000)), [None]],
    ids=["objects", "volume", "none"],
)
def test_last_in_first_out(stack, items):
    for item in items:
        stack.push(item)
        assert stack.peek() is item
    assert len(stack) == len(items)
    assert not stack.is_empty()
    assert [stack.pop() for _ in items] == items[::-1]
    assert stack.is_empty()


def test_peek_does_not_remove(stack):
    marker = object()
    stack.push(marker)
    assert [stack.peek(), stack.peek()] == [marker, marker]
    assert len(stack) == 1
    assert stack.pop() is marker
    assert len(stack) == 0