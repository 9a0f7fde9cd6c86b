import pytest

from dsakit.stacks import ArrayStack, LinkedStack, StackEmptyError, StackOverflowError


def test_demo_sequence():
    for s in (ArrayStack(), LinkedStack()):
        s.push(5)
        s.push(55)
        s.push(2)
        assert list(s) == [5, 55, 2]
        assert s.pop() == 2
        s.push(25)
        assert s.top() == 25
        s.push(8)
        assert s.pop() == 8
        assert list(s) == [5, 55, 25]


def test_lifo_order():
    items = list(range(30))
    for s in (ArrayStack(), LinkedStack()):
        for item in items:
            s.push(item)
        assert len(s) == len(items)
        assert [s.pop() for _ in items] == items[::-1]
        assert len(s) == 0


def test_top_does_not_remove():
    for s in (ArrayStack(), LinkedStack()):
        s.push(1)
        s.push(2)
        assert s.top() == 2
        assert len(s) == 2


def test_empty_errors():
    for s in (ArrayStack(), LinkedStack()):
        with pytest.raises(StackEmptyError):
            s.pop()
        with pytest.raises(StackEmptyError):
            s.top()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        ArrayStack().pop()
    with pytest.raises(IndexError):
        LinkedStack().pop()


def test_both_stacks_agree():
    array_stack, linked_stack = ArrayStack(), LinkedStack()
    operations = [("push", 3), ("push", 7), ("pop", None), ("push", 9), ("push", 4)]
    for name, arg in operations:
        for s in (array_stack, linked_stack):
            if name == "push":
                s.push(arg)
            else:
                s.pop()
    assert list(array_stack) == list(linked_stack)
    assert array_stack.top() == linked_stack.top()


def test_array_stack_overflow():
    s = ArrayStack(2)
    s.push(1)
    s.push(2)
    with pytest.raises(StackOverflowError):
        s.push(3)
    assert list(s) == [1, 2]


def test_array_stack_default_capacity():
    s = ArrayStack()
    for item in range(100):
        s.push(item)
    with pytest.raises(StackOverflowError):
        s.push(100)
    assert len(s) == 100


def test_array_stack_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)


def test_linked_stack_iteration_is_snapshot():
    s = LinkedStack()
    s.push(1)
    s.push(2)
    snapshot = iter(s)
    s.push(3)
    assert list(snapshot) == [1, 2]