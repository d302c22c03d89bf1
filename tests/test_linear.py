import pytest

from algokit.linear import LinkedList, Queue, Stack


def test_prepend_reverses_order():
    items = LinkedList()
    for value in (10, 20, 30, 30):
        items.prepend(value)
    assert list(items) == [30, 30, 20, 10]
    assert len(items) == 4


def test_remove_head_removes_one_occurrence():
    items = LinkedList([10, 20, 30, 30])
    items.remove(30)
    assert list(items) == [30, 20, 10]
    assert len(items) == 3


def test_remove_from_middle_and_tail():
    items = LinkedList([1, 2, 3])
    items.remove(2)
    items.remove(1)
    assert list(items) == [3]
    assert len(items) == 1


def test_remove_missing_raises_and_keeps_list():
    items = LinkedList([10, 20])
    with pytest.raises(ValueError):
        items.remove(300)
    assert list(items) == [20, 10]


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().remove(1)


def test_queue_is_fifo():
    queue = Queue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    assert queue.dequeue() == 10
    assert list(queue) == [20, 30]
    assert len(queue) == 2


def test_queue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_stack_is_lifo():
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.pop() == 30
    assert list(stack) == [10, 20]
    assert len(stack) == 2


def test_stack_holds_any_values():
    stack = Stack([10, "two"])
    assert stack.pop() == "two"
    assert stack.pop() == 10
    assert len(stack) == 0


def test_stack_empty_raises():
    with pytest.raises(IndexError, match="stack is empty"):
        Stack().pop()